"""
Exception types shared by the notification, backup and upload services.

The API layer maps each type to an HTTP status; services only raise them.
"""


class BalaghError(Exception):
    """Base class for all application errors."""


class NotificationValidationError(BalaghError):
    """Request is missing required fields or has malformed ones."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}


class SenderNotFoundError(BalaghError):
    """No user record matches the email that performed the action."""

    def __init__(self, email: str):
        super().__init__(f"Sender not found: {email}")
        self.email = email


class ConfigurationError(BalaghError):
    """Required environment configuration is missing."""


class TransportInitError(ConfigurationError):
    """An external client (store or email transport) could not be constructed."""


class PerRecipientSendError(BalaghError):
    """Delivery to a single recipient failed. Never escapes the bulk sender."""

    def __init__(self, email: str, message: str):
        super().__init__(message)
        self.email = email


class BackupNotConfiguredError(BalaghError):
    """Backup config row is missing or disabled."""


class YouTubeUploadError(BalaghError):
    """YouTube or the video source rejected an upload step."""
