from datetime import datetime, timezone
from zoneinfo import ZoneInfo

# Admin panel users are in Lebanon; all displayed times use this zone
DISPLAY_TIMEZONE = "Asia/Beirut"

ARABIC_MONTHS = [
    "يناير",
    "فبراير",
    "مارس",
    "أبريل",
    "مايو",
    "يونيو",
    "يوليو",
    "أغسطس",
    "سبتمبر",
    "أكتوبر",
    "نوفمبر",
    "ديسمبر",
]

_ARABIC_DIGITS = str.maketrans("0123456789", "٠١٢٣٤٥٦٧٨٩")


def to_arabic_digits(value: str) -> str:
    """Replace Western digits with Arabic-Indic digits."""
    return value.translate(_ARABIC_DIGITS)


def format_timestamp_ar(timestamp_ms: int | float, tz_name: str = DISPLAY_TIMEZONE) -> str:
    """
    Format an epoch-millis timestamp the way Arabic (Egypt) locales display it.

    Example: 1736937000000 -> "١٥ يناير ٢٠٢٥ في ١٢:٣٠ م" (Asia/Beirut)
    """
    dt = datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc).astimezone(
        ZoneInfo(tz_name)
    )
    hour = dt.hour % 12 or 12
    period = "ص" if dt.hour < 12 else "م"
    text = f"{dt.day} {ARABIC_MONTHS[dt.month - 1]} {dt.year} في {hour:02d}:{dt.minute:02d} {period}"
    return to_arabic_digits(text)


def parse_iso_datetime(value: str | datetime | None) -> datetime | None:
    """Parse an ISO 8601 string from the store into an aware datetime."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        dt = value
    else:
        try:
            dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except (ValueError, AttributeError):
            return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def now_millis() -> int:
    """Current time as epoch milliseconds."""
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def print_summary(title: str, rows: dict[str, object]) -> None:
    """Print a CLI summary block."""
    print(f"\n{'=' * 60}")
    print(f"[{datetime.now()}] {title}")
    print(f"{'=' * 60}")
    for label, value in rows.items():
        print(f"{label + ':':<18}{value}")
    print(f"{'=' * 60}\n")
