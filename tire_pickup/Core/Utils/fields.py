import re
from datetime import date
from typing import Any, Optional

DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


def normalize_date_only(value: Any) -> Optional[str]:
    """Returns `value` if it is a YYYY-MM-DD string, otherwise None."""
    if not isinstance(value, str) or not DATE_PATTERN.match(value):
        return None
    return value


def parse_calendar_date(value: Any) -> Optional[date]:
    if normalize_date_only(value) is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def clean_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def coerce_tires_count(value: Any) -> int:
    # Non-numeric input counts as zero tires
    try:
        count = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(count, 0)


def email_key(email: Any) -> str:
    return clean_str(email).lower()
