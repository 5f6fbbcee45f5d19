"""Pydantic models for data validation and type checking."""

from models.backup import BackupConfig, BackupLog
from models.notification import NotificationEvent, SendResult, VerificationChallenge
from models.types import UserRole
from models.user import UserRecord

__all__ = [
    "BackupConfig",
    "BackupLog",
    "NotificationEvent",
    "SendResult",
    "VerificationChallenge",
    "UserRecord",
    "UserRole",
]
