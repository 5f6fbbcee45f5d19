import os
import threading

from dotenv import load_dotenv
from supabase import create_client, Client

from shared.errors import ConfigurationError, TransportInitError

load_dotenv()

_client: Client | None = None
_client_lock = threading.Lock()


def get_supabase_client() -> Client:
    """
    Get the process-wide Supabase client, creating it on first use.

    Raises:
        ConfigurationError: If SUPABASE_URL or SUPABASE_SERVICE_KEY is not set
        TransportInitError: If the client cannot be constructed
    """
    global _client

    if _client is not None:
        return _client

    with _client_lock:
        if _client is None:
            url: str | None = os.getenv("SUPABASE_URL")
            key: str | None = os.getenv("SUPABASE_SERVICE_KEY")

            if not url or not key:
                raise ConfigurationError(
                    "SUPABASE_URL and SUPABASE_SERVICE_KEY must be set"
                )

            try:
                _client = create_client(url, key)
            except Exception as e:
                raise TransportInitError(f"Could not create Supabase client: {e}") from e

    return _client


def reset_supabase_client() -> None:
    """Drop the cached client (used by tests and after credential rotation)."""
    global _client
    with _client_lock:
        _client = None
