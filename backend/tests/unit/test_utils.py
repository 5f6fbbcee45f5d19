"""
Unit tests for shared/utils.py

Tests Arabic timestamp formatting, ISO parsing and summary printing.
"""

import unittest
from datetime import datetime, timezone
from unittest.mock import patch

from shared.utils import (
    format_timestamp_ar,
    now_millis,
    parse_iso_datetime,
    print_summary,
    to_arabic_digits,
)


class TestFormatTimestampAr(unittest.TestCase):
    """Tests for format_timestamp_ar() function."""

    def test_afternoon_in_beirut(self):
        # 2025-01-15 10:30 UTC, Beirut is UTC+2 in winter
        self.assertEqual(format_timestamp_ar(1736937000000), "١٥ يناير ٢٠٢٥ في ١٢:٣٠ م")

    def test_morning_in_beirut(self):
        # 2025-07-01 05:05 UTC, Beirut is UTC+3 in summer
        self.assertEqual(format_timestamp_ar(1751346300000), "١ يوليو ٢٠٢٥ في ٠٨:٠٥ ص")

    def test_midnight_is_twelve(self):
        # 2025-01-14 22:00 UTC is 00:00 on the 15th in Beirut
        self.assertEqual(format_timestamp_ar(1736892000000), "١٥ يناير ٢٠٢٥ في ١٢:٠٠ ص")

    def test_other_timezone(self):
        self.assertEqual(
            format_timestamp_ar(1736937000000, tz_name="UTC"),
            "١٥ يناير ٢٠٢٥ في ١٠:٣٠ ص",
        )


class TestToArabicDigits(unittest.TestCase):

    def test_converts_digits_only(self):
        self.assertEqual(to_arabic_digits("Room 42"), "Room ٤٢")


class TestParseIsoDatetime(unittest.TestCase):
    """Tests for parse_iso_datetime() function."""

    def test_parse_z_suffix(self):
        result = parse_iso_datetime("2026-01-24T12:00:00Z")

        self.assertEqual(result, datetime(2026, 1, 24, 12, tzinfo=timezone.utc))

    def test_naive_assumed_utc(self):
        result = parse_iso_datetime("2026-01-24T12:00:00")

        self.assertEqual(result.tzinfo, timezone.utc)

    def test_datetime_passthrough(self):
        dt = datetime(2026, 1, 24, tzinfo=timezone.utc)

        self.assertEqual(parse_iso_datetime(dt), dt)

    def test_empty_and_invalid(self):
        self.assertIsNone(parse_iso_datetime(None))
        self.assertIsNone(parse_iso_datetime(""))
        self.assertIsNone(parse_iso_datetime("not a date"))


class TestNowMillis(unittest.TestCase):

    def test_is_epoch_millis(self):
        self.assertGreater(now_millis(), 1_700_000_000_000)


class TestPrintSummary(unittest.TestCase):
    """Tests for print_summary() function."""

    @patch("builtins.print")
    def test_prints_rows(self, mock_print):
        print_summary("Backup Triggered", {"Triggered by": "cron"})

        output = " ".join(str(call.args[0]) for call in mock_print.call_args_list if call.args)
        self.assertIn("Backup Triggered", output)
        self.assertIn("cron", output)


if __name__ == "__main__":
    unittest.main()
