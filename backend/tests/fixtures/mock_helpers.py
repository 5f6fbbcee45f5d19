"""Helper functions for creating mocked external services."""

from typing import Any, Dict, List, Optional
from unittest.mock import Mock


def _response(data: Optional[List[Dict[str, Any]]]) -> Mock:
    response = Mock()
    response.data = data if data is not None else []
    return response


def create_mock_supabase(return_data: Optional[List[Dict[str, Any]]] = None):
    """
    Create a mocked Supabase client with chainable query builder.

    Args:
        return_data: Data to return from execute() call

    Returns:
        Mock Supabase client with chainable methods
    """
    mock = Mock()

    # Make all query builder methods return the mock itself (chainable)
    mock.table.return_value = mock
    mock.select.return_value = mock
    mock.eq.return_value = mock
    mock.in_.return_value = mock
    mock.order.return_value = mock
    mock.limit.return_value = mock
    mock.single.return_value = mock
    mock.insert.return_value = mock
    mock.update.return_value = mock

    mock.execute.return_value = _response(return_data)

    return mock


def create_mock_supabase_sequence(*results: Optional[List[Dict[str, Any]]]):
    """
    Mocked Supabase client whose successive execute() calls return each
    dataset in turn (e.g. sender lookup, then recipient lookup).
    """
    mock = create_mock_supabase()
    mock.execute.side_effect = [_response(data) for data in results]
    return mock


def create_mock_transport(fail_for: Optional[List[str]] = None):
    """
    Mocked EmailTransport.

    send() returns "msg-<recipient>" and raises for addresses in fail_for.
    """
    fail_for = set(fail_for or [])
    transport = Mock()

    def send(to, subject, html, text=None):
        if to in fail_for:
            raise Exception(f"Mailbox unavailable: {to}")
        return f"msg-{to}"

    transport.send.side_effect = send
    return transport


def create_mock_requests_response(
    status_code: int = 200,
    json_data: Any = None,
    headers: Optional[Dict[str, str]] = None,
    content: bytes = b"",
    raise_error: Optional[Exception] = None,
):
    """Create a mocked requests Response object."""
    mock_response = Mock()
    mock_response.status_code = status_code
    mock_response.headers = headers or {}
    mock_response.content = content
    mock_response.json.return_value = json_data

    if raise_error:
        mock_response.raise_for_status.side_effect = raise_error
    else:
        mock_response.raise_for_status.return_value = None

    return mock_response
