"""
Email sending via Resend API for the notification system.

The transport is created once per process and shared by every request.
Bulk sends attempt every recipient and record one SendResult each.
"""

import logging
import os
import threading
import time
from typing import List, Optional

import resend

from models.notification import SendResult
from shared.errors import ConfigurationError, PerRecipientSendError, TransportInitError

logger = logging.getLogger(__name__)

DEFAULT_FROM_NAME = "بلاغ - نظام الإدارة"

# Pause between consecutive sends to stay under provider rate limits
SEND_DELAY_SECONDS = 0.1


class EmailTransport:
    """Configured Resend sender. Read-only after construction."""

    def __init__(self, api_key: str, from_email: str, from_name: str = DEFAULT_FROM_NAME):
        self.api_key = api_key
        self.from_email = from_email
        self.from_name = from_name

    @property
    def sender(self) -> str:
        return f"{self.from_name} <{self.from_email}>"

    def send(self, to: str, subject: str, html: str, text: Optional[str] = None) -> Optional[str]:
        """
        Send one email.

        Returns:
            Resend message id

        Raises:
            PerRecipientSendError: If Resend rejects the message
        """
        params = {
            "from": self.sender,
            "to": to,
            "subject": subject,
            "html": html,
        }
        if text:
            params["text"] = text

        try:
            response = resend.Emails.send(params)
        except Exception as e:
            raise PerRecipientSendError(to, str(e)) from e

        return response.get("id") if response else None


_transport: EmailTransport | None = None
_transport_lock = threading.Lock()


def get_email_transport() -> EmailTransport:
    """
    Get the process-wide email transport, creating it on first use.

    Raises:
        ConfigurationError: If RESEND_API_KEY or NOTIFICATION_FROM_EMAIL is not set
        TransportInitError: If the transport cannot be constructed
    """
    global _transport

    if _transport is not None:
        return _transport

    with _transport_lock:
        if _transport is None:
            api_key = os.getenv("RESEND_API_KEY")
            from_email = os.getenv("NOTIFICATION_FROM_EMAIL")

            if not api_key or not from_email:
                raise ConfigurationError(
                    "RESEND_API_KEY and NOTIFICATION_FROM_EMAIL must be set"
                )

            try:
                resend.api_key = api_key
                transport = EmailTransport(
                    api_key,
                    from_email,
                    os.getenv("NOTIFICATION_FROM_NAME", DEFAULT_FROM_NAME),
                )
            except Exception as e:
                raise TransportInitError(f"Could not configure email transport: {e}") from e

            logger.info("Email transport configured for %s", from_email)
            _transport = transport

    return _transport


def reset_email_transport() -> None:
    """Drop the cached transport (used by tests and after credential rotation)."""
    global _transport
    with _transport_lock:
        _transport = None


def send_bulk_emails(
    recipients: List[str],
    subject: str,
    html: str,
    text: Optional[str] = None,
    transport: Optional[EmailTransport] = None,
    delay: float = SEND_DELAY_SECONDS,
) -> List[SendResult]:
    """
    Send the same message to each recipient, one at a time.

    A failure for one recipient never stops delivery to the rest.

    Args:
        recipients: Addresses in send order
        subject: Email subject
        html: HTML body
        text: Optional plain-text body
        transport: Transport to use (defaults to the shared one)
        delay: Seconds to wait between sends

    Returns:
        One SendResult per recipient, in recipient order

    Raises:
        ConfigurationError: If the shared transport cannot be initialized
    """
    transport = transport or get_email_transport()
    results: List[SendResult] = []

    logger.info("Sending %d notification emails", len(recipients))

    for i, recipient in enumerate(recipients):
        try:
            message_id = transport.send(recipient, subject, html, text)
            results.append(SendResult(email=recipient, success=True, message_id=message_id))
            logger.info("Sent email %d/%d to %s", i + 1, len(recipients), recipient)
        except Exception as e:
            logger.warning("Failed to send email to %s: %s", recipient, e)
            results.append(SendResult(email=recipient, success=False, error=str(e)))

        if delay and i < len(recipients) - 1:
            time.sleep(delay)

    return results
