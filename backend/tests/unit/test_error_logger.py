"""
Unit tests for notifications/error_logger.py
"""

import os
import tempfile
import unittest
from unittest.mock import patch

from models.notification import SendResult
from notifications.error_logger import format_report, log_notification_error


class TestFormatReport(unittest.TestCase):
    def test_lists_each_failed_recipient(self):
        report = format_report(
            "sending",
            "Failed to send 2 of 3 email(s)",
            context={"notification_id": "n-1"},
            failures=[
                SendResult(email="b@x.com", success=False, error="Mailbox unavailable"),
                SendResult(email="c@x.com", success=False),
            ],
        )

        self.assertIn("Error Type: sending", report)
        self.assertIn("notification_id: n-1", report)
        self.assertIn("Failed recipients (2):", report)
        self.assertIn("b@x.com: Mailbox unavailable", report)
        self.assertIn("c@x.com: unknown error", report)

    def test_omits_empty_sections(self):
        report = format_report("sending", "boom")

        self.assertNotIn("Context:", report)
        self.assertNotIn("Failed recipients", report)


class TestLogNotificationError(unittest.TestCase):
    def setUp(self):
        self.log_dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.log_dir.cleanup()

    def test_writes_report_into_new_directory(self):
        target = os.path.join(self.log_dir.name, "nested")
        with patch.dict(os.environ, {"NOTIFICATION_LOG_DIR": target}):
            path = log_notification_error(
                "sending",
                "1 of 3 sends failed",
                failures=[SendResult(email="b@x.com", success=False, error="rejected")],
            )

        self.assertTrue(path.startswith(target))
        with open(path, encoding="utf-8") as f:
            content = f.read()
        self.assertIn("Error Message: 1 of 3 sends failed", content)
        self.assertIn("b@x.com: rejected", content)

    def test_reports_do_not_overwrite(self):
        with patch.dict(os.environ, {"NOTIFICATION_LOG_DIR": self.log_dir.name}):
            first = log_notification_error("sending", "a")
            second = log_notification_error("sending", "b")

        self.assertNotEqual(first, second)
        self.assertEqual(len(os.listdir(self.log_dir.name)), 2)

    def test_unwritable_directory_returns_none(self):
        """A report dir that is actually a file is logged, not raised."""
        blocker = os.path.join(self.log_dir.name, "not-a-dir")
        with open(blocker, "w") as f:
            f.write("")

        with patch.dict(os.environ, {"NOTIFICATION_LOG_DIR": blocker}):
            with self.assertLogs("notifications.error_logger", level="ERROR"):
                path = log_notification_error("sending", "boom")

        self.assertIsNone(path)

    @patch("notifications.error_logger.open", side_effect=PermissionError("read-only"), create=True)
    def test_permission_error_returns_none(self, mock_open):
        with patch.dict(os.environ, {"NOTIFICATION_LOG_DIR": self.log_dir.name}):
            with self.assertLogs("notifications.error_logger", level="ERROR"):
                self.assertIsNone(log_notification_error("sending", "boom"))


if __name__ == "__main__":
    unittest.main()
