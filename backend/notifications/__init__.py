"""
Notification system for the Balagh admin panel.

This module handles:
- Deciding which admins a sender may notify (village-scoped roles)
- Rendering Arabic notification emails
- Sending emails via Resend with per-recipient results
- Login verification codes
"""

from .recipient_filter import filter_recipients
from .notification_service import dispatch_notification, send_notification_emails
from .verification_codes import send_verification_code, verify_code

__all__ = [
    'filter_recipients',
    'dispatch_notification',
    'send_notification_emails',
    'send_verification_code',
    'verify_code',
]
