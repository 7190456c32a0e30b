import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops tzinfo on read)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_timestamp(value: Any) -> datetime:
    """
    Parse an ISO-8601 timestamp or pass through a datetime.

    Naive values are interpreted as UTC.

    Raises:
        ValueError: If the value is not a datetime or a parseable ISO string.
    """
    if isinstance(value, datetime):
        return ensure_utc(value)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Unparseable timestamp: {value!r}")
    try:
        parsed = date_parser.isoparse(value.strip())
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Unparseable timestamp: {value!r}") from e
    return ensure_utc(parsed)


def parse_clock_time(value: str) -> int:
    """Convert an ``HH:MM`` string to minutes after midnight."""
    try:
        hours, minutes = value.split(':')
        total = int(hours) * 60 + int(minutes)
    except (AttributeError, ValueError) as e:
        raise ValueError(f"Invalid HH:MM time: {value!r}") from e
    if not (0 <= int(hours) <= 23 and 0 <= int(minutes) <= 59):
        raise ValueError(f"Invalid HH:MM time: {value!r}")
    return total
