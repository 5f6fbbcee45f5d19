"""Shared type definitions for type checking.

Uses NewType for IDs so that an entity ID cannot be passed where a
notification ID or village ID is expected.

Uses TypeAlias for plain structural types.
"""

from enum import Enum
from typing import NewType, TypeAlias

VillageID = NewType("VillageID", str)
EntityID = NewType("EntityID", str)
NotificationID = NewType("NotificationID", str)

EmailAddress: TypeAlias = str
EpochMillis: TypeAlias = int


class UserRole(str, Enum):
    """Admin panel roles stored on user records."""

    MAIN_ADMIN = "main_admin"
    SECONDARY = "secondary"
    VILLAGE_EDITOR = "village_editor"
