"""Pydantic models for notification events and delivery results."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models.types import EmailAddress, EntityID, EpochMillis, NotificationID
from shared.utils import now_millis


class NotificationEvent(BaseModel):
    """A content mutation in the admin panel that admins should hear about.

    Accepts the camelCase JSON the admin panel sends (entityType,
    performedBy, ...) as well as snake_case keyword arguments.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    action: str = ""
    entity_type: str = ""
    entity_id: EntityID | None = None
    entity_name: str = ""
    performed_by: EmailAddress = Field(..., min_length=1)
    performed_by_name: str | None = None
    details: str | None = None
    timestamp: EpochMillis = Field(default_factory=now_millis)
    notification_id: NotificationID | None = None


class SendResult(BaseModel):
    """Outcome of delivering one email to one recipient."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    email: EmailAddress
    success: bool
    message_id: str | None = None
    error: str | None = None


class VerificationChallenge(BaseModel):
    """Signed proof that a verification code was sent to an address."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    email: EmailAddress
    token: str
    expires_at: EpochMillis
