"""
Recipient access control for notification emails.

Village-scoped reciprocal policy: a secondary admin may notify the village
editors of their own village, and a village editor may notify the secondary
admins of their own village. Every other sender notifies nobody.
"""

import logging
import os
from typing import Any, List, Optional

from models.types import UserRole
from models.user import UserRecord
from shared.db import get_supabase_client
from shared.errors import SenderNotFoundError

logger = logging.getLogger(__name__)

USER_FIELDS = "email, role, assigned_village_id"

# Sender role -> the role its notifications may reach
RECIPROCAL_ROLES = {
    UserRole.SECONDARY: UserRole.VILLAGE_EDITOR,
    UserRole.VILLAGE_EDITOR: UserRole.SECONDARY,
}


def _users_table() -> str:
    return os.getenv("USERS_TABLE", "users")


def get_user_by_email(email: str, supabase: Any = None) -> Optional[UserRecord]:
    """
    Look up a single user record by exact email.

    Returns:
        The user, or None when no record matches
    """
    supabase = supabase or get_supabase_client()

    response = (
        supabase.table(_users_table())
        .select(USER_FIELDS)
        .eq("email", email)
        .limit(1)
        .execute()
    )

    if not response.data:
        return None

    return UserRecord.model_validate(response.data[0])


def get_emails_by_role_and_village(
    role: UserRole, village_id: str, supabase: Any = None
) -> set[str]:
    """Emails of every user holding `role` in `village_id`."""
    supabase = supabase or get_supabase_client()

    response = (
        supabase.table(_users_table())
        .select(USER_FIELDS)
        .eq("role", role.value)
        .eq("assigned_village_id", village_id)
        .execute()
    )

    return {user["email"] for user in (response.data or []) if user.get("email")}


def allowed_recipient_role(sender: UserRecord) -> Optional[UserRole]:
    """
    The role a sender is allowed to notify, or None for deny.

    A sender without an assigned village is always denied.
    """
    if not sender.has_village:
        return None

    for sender_role, recipient_role in RECIPROCAL_ROLES.items():
        if sender.is_role(sender_role):
            return recipient_role

    return None


def get_allowed_emails(sender: UserRecord, supabase: Any = None) -> set[str]:
    """All emails the sender is permitted to notify."""
    recipient_role = allowed_recipient_role(sender)
    if recipient_role is None:
        logger.info(
            "No notification permission for role=%s village=%s",
            sender.role,
            sender.assigned_village_id,
        )
        return set()

    return get_emails_by_role_and_village(
        recipient_role, sender.assigned_village_id, supabase=supabase
    )


def intersect_recipients(candidates: List[str], allowed: set[str]) -> List[str]:
    """Keep candidates present in `allowed`, in candidate order, repeats included."""
    return [email for email in candidates if email in allowed]


def filter_recipients(
    sender_email: str, candidate_recipients: List[str], supabase: Any = None
) -> List[str]:
    """
    Reduce a caller-proposed recipient list to those the sender may notify.

    Args:
        sender_email: Email of the user who performed the action
        candidate_recipients: Untrusted list of recipient emails

    Returns:
        Allowed recipients in candidate order (may be empty)

    Raises:
        SenderNotFoundError: If no user record matches sender_email
    """
    supabase = supabase or get_supabase_client()

    sender = get_user_by_email(sender_email, supabase=supabase)
    if sender is None:
        raise SenderNotFoundError(sender_email)

    logger.info(
        "Sender %s: role=%s village=%s",
        sender_email,
        sender.role,
        sender.assigned_village_id,
    )

    allowed = get_allowed_emails(sender, supabase=supabase)
    return intersect_recipients(candidate_recipients, allowed)
