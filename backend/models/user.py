"""Pydantic model for admin panel user records."""

from pydantic import BaseModel, ConfigDict

from models.types import EmailAddress, UserRole, VillageID


class UserRecord(BaseModel):
    """User as stored in the users table.

    `role` stays a plain string: records with roles this service does not
    know about are valid, they just authorize nothing.
    """

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    email: EmailAddress
    role: str | None = None
    assigned_village_id: VillageID | None = None

    @property
    def has_village(self) -> bool:
        return bool(self.assigned_village_id)

    def is_role(self, role: UserRole) -> bool:
        return self.role == role.value
