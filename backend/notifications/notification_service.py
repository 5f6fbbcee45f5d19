"""
Notification email pipeline.

dispatch_notification() runs the whole flow for one event: authorization
filter, then rendering and bulk delivery. send_notification_emails() is the
delivery half and trusts its recipient list.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from models.notification import NotificationEvent, SendResult
from notifications.email_content import render_notification
from notifications.email_sender import EmailTransport, get_email_transport, send_bulk_emails
from notifications.error_logger import log_notification_error
from notifications.recipient_filter import filter_recipients

logger = logging.getLogger(__name__)


def send_notification_emails(
    notification: NotificationEvent,
    allowed_recipients: List[str],
    transport: Optional[EmailTransport] = None,
) -> List[SendResult]:
    """
    Email a notification to every allowed recipient.

    Args:
        notification: The content mutation to report
        allowed_recipients: Recipients that passed the authorization filter
        transport: Transport override (defaults to the shared one)

    Returns:
        One SendResult per recipient; empty when there is nobody to notify

    Raises:
        ConfigurationError: If the email transport cannot be initialized.
            Raised before any send is attempted.
    """
    if not allowed_recipients:
        logger.info("No recipients specified for notification emails")
        return []

    # Initialize first so a missing credential aborts the whole batch
    transport = transport or get_email_transport()

    logger.info(
        "Processing notification %s: %s %s '%s' by %s",
        notification.notification_id,
        notification.action,
        notification.entity_type,
        notification.entity_name,
        notification.performed_by,
    )

    subject, html_body, text_body = render_notification(notification)
    results = send_bulk_emails(
        allowed_recipients, subject, html_body, text_body, transport=transport
    )

    failed = [r for r in results if not r.success]
    logger.info(
        "Email notification results: %d successful, %d failed",
        len(results) - len(failed),
        len(failed),
    )

    if failed:
        # Best effort; never turns an attempted batch into an error
        error_file = log_notification_error(
            error_type="sending",
            error_message=f"Failed to send {len(failed)} of {len(results)} email(s)",
            context={
                "notification_id": notification.notification_id,
                "entity_type": notification.entity_type,
                "entity_id": notification.entity_id,
                "performed_by": notification.performed_by,
            },
            failures=failed,
        )
        if error_file:
            logger.warning("Failed sends logged to: %s", error_file)

    return results


@dataclass
class NotificationOutcome:
    """What happened to one notification request."""

    message: str
    recipients: List[str] = field(default_factory=list)
    results: List[SendResult] = field(default_factory=list)


def dispatch_notification(
    notification: NotificationEvent,
    candidate_recipients: List[str],
    supabase: Any = None,
    transport: Optional[EmailTransport] = None,
) -> NotificationOutcome:
    """
    Authorize and deliver one notification.

    An empty candidate list returns before touching the store. A sender with
    nobody to notify is a successful no-op, not an error.

    Raises:
        SenderNotFoundError: If performed_by has no user record
        ConfigurationError: If the store or email transport is not configured
    """
    if not candidate_recipients:
        return NotificationOutcome(message="No recipients to send to")

    allowed = filter_recipients(
        notification.performed_by, candidate_recipients, supabase=supabase
    )

    if not allowed:
        logger.info(
            "No allowed recipients for %s out of %d candidates",
            notification.performed_by,
            len(candidate_recipients),
        )
        return NotificationOutcome(message="No allowed recipients after filtering")

    results = send_notification_emails(notification, allowed, transport=transport)

    return NotificationOutcome(
        message=f"Email notifications sent to {len(allowed)} recipients",
        recipients=allowed,
        results=results,
    )
