"""Unit tests for Pydantic models."""

import unittest
from datetime import datetime, timezone

from pydantic import ValidationError

from models import (
    BackupConfig,
    BackupLog,
    NotificationEvent,
    SendResult,
    UserRecord,
    UserRole,
)
from tests.fixtures.user_factory import create_test_notification, create_test_user


class TestNotificationEvent(unittest.TestCase):
    """Tests for NotificationEvent."""

    def test_parses_camel_case_payload(self):
        event = NotificationEvent.model_validate(
            create_test_notification(
                action="approved",
                entity_type="martyrs",
                entity_name="Ali",
                performed_by="a@x.com",
                performed_by_name="Admin",
                details="Photo added",
            )
        )

        self.assertEqual(event.action, "approved")
        self.assertEqual(event.entity_type, "martyrs")
        self.assertEqual(event.entity_name, "Ali")
        self.assertEqual(event.performed_by, "a@x.com")
        self.assertEqual(event.performed_by_name, "Admin")
        self.assertEqual(event.details, "Photo added")
        self.assertEqual(event.timestamp, 1736937000000)

    def test_accepts_snake_case_kwargs(self):
        event = NotificationEvent(performed_by="a@x.com", entity_type="news")

        self.assertEqual(event.entity_type, "news")

    def test_minimal_event_defaults(self):
        event = NotificationEvent.model_validate({"performedBy": "a@x.com"})

        self.assertEqual(event.action, "")
        self.assertIsNone(event.performed_by_name)
        self.assertIsNone(event.details)
        self.assertGreater(event.timestamp, 0)

    def test_performed_by_required(self):
        with self.assertRaises(ValidationError):
            NotificationEvent.model_validate({"action": "created"})

    def test_performed_by_not_empty(self):
        with self.assertRaises(ValidationError):
            NotificationEvent.model_validate({"performedBy": ""})

    def test_unknown_fields_ignored(self):
        event = NotificationEvent.model_validate({"performedBy": "a@x.com", "extra": 1})

        self.assertFalse(hasattr(event, "extra"))


class TestSendResult(unittest.TestCase):
    """Tests for SendResult."""

    def test_dump_uses_camel_case(self):
        result = SendResult(email="a@x.com", success=True, message_id="m-1")

        self.assertEqual(
            result.model_dump(by_alias=True, exclude_none=True),
            {"email": "a@x.com", "success": True, "messageId": "m-1"},
        )

    def test_failure_record(self):
        result = SendResult(email="a@x.com", success=False, error="boom")

        self.assertFalse(result.success)
        self.assertIsNone(result.message_id)


class TestUserRecord(unittest.TestCase):
    """Tests for UserRecord."""

    def test_from_row(self):
        user = UserRecord.model_validate(create_test_user(email="a@x.com", role="village_editor"))

        self.assertTrue(user.is_role(UserRole.VILLAGE_EDITOR))
        self.assertFalse(user.is_role(UserRole.SECONDARY))
        self.assertTrue(user.has_village)

    def test_unknown_role_accepted(self):
        user = UserRecord.model_validate(create_test_user(role="auditor"))

        self.assertEqual(user.role, "auditor")

    def test_missing_village(self):
        user = UserRecord.model_validate(create_test_user(village_id=None))

        self.assertFalse(user.has_village)

    def test_role_enum_compares_to_string(self):
        self.assertEqual(UserRole.SECONDARY, "secondary")


class TestBackupModels(unittest.TestCase):
    """Tests for BackupConfig and BackupLog."""

    def test_config_defaults(self):
        config = BackupConfig()

        self.assertEqual(config.id, "settings")
        self.assertFalse(config.enabled)

    def test_config_keeps_extra_fields(self):
        config = BackupConfig.model_validate({"enabled": True, "collections": ["martyrs"]})

        self.assertEqual(config.model_dump()["collections"], ["martyrs"])

    def test_log_parses_iso_timestamp(self):
        log = BackupLog.model_validate({"triggered_at": "2026-01-24T12:00:00+00:00"})

        self.assertEqual(log.triggered_at, datetime(2026, 1, 24, 12, tzinfo=timezone.utc))
        self.assertEqual(log.status, "initiated")


if __name__ == "__main__":
    unittest.main()
