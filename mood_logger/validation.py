"""
Input validation for the Mood Logger CLI.

Every function here is pure: it takes the raw string given on the command
line and either returns the parsed value or raises a ``ValueError`` subclass
describing what was wrong with it.
"""

import math
import re
from datetime import datetime
from pathlib import PurePath

MOOD_RANGE = (0.0, 10.0)

DB_EXTENSION = ".db"

_RFC3339 = re.compile(
    r"(?P<date>[0-9]{4}-[0-9]{2}-[0-9]{2})[Tt ]"
    r"(?P<time>[0-9]{2}:[0-9]{2}:[0-9]{2})(?:\.(?P<fraction>[0-9]+))?"
    r"(?P<offset>[Zz]|[+-][0-9]{2}:[0-9]{2})"
)


class ValidationError(ValueError):
    """Raised when an argument is well-formed but not acceptable."""


class ParseError(ValueError):
    """Raised when a datetime string is not valid RFC 3339."""


def parse_value(raw: str) -> float:
    """
    Parse a mood rating and check it lies within ``MOOD_RANGE``.

    Args:
        raw: The rating as given on the command line

    Returns:
        The rating as a float

    Raises:
        ValidationError: If the input is non-numeric or out of range
    """
    # float() is more lenient than a plain decimal literal
    if raw != raw.strip() or "_" in raw or not raw.isascii():
        raise ValidationError(f"`{raw}` is non-numeric")
    try:
        value = float(raw)
    except ValueError:
        raise ValidationError(f"`{raw}` is non-numeric") from None

    low, high = MOOD_RANGE
    # NaN compares false against both bounds and is rejected here
    if not low <= value <= high:
        raise ValidationError(f"`{raw}` is not in range {low}-{high}")
    return value


def parse_rfc3339(raw: str) -> datetime:
    """
    Parse an RFC 3339 date-time such as ``2024-05-01T08:30:00+02:00``.

    The UTC offset is mandatory, so the result is always timezone aware.
    """
    match = _RFC3339.fullmatch(raw)
    if match is None:
        raise ParseError(f"`{raw}` is not an RFC 3339 datetime")

    offset = match["offset"]
    if offset in ("Z", "z"):
        offset = "+00:00"
    # fromisoformat only keeps microseconds
    fraction = f".{match['fraction'][:6]}" if match["fraction"] else ""

    try:
        return datetime.fromisoformat(
            f"{match['date']}T{match['time']}{fraction}{offset}"
        )
    except ValueError as e:
        raise ParseError(f"`{raw}` is not an RFC 3339 datetime: {e}") from e


def to_timestamp(moment: datetime) -> int:
    """Convert an aware datetime to whole Unix epoch seconds."""
    return math.floor(moment.timestamp())


def validate_dbpath(raw: str) -> str:
    """
    Check that a database path has the ``.db`` extension.

    Returns:
        The path, unchanged

    Raises:
        ValidationError: If the extension is missing or anything but ``.db``
    """
    extension = PurePath(raw).suffix
    if not extension:
        raise ValidationError(f"`{DB_EXTENSION}` extension not found in `{raw}`")
    if extension != DB_EXTENSION:
        raise ValidationError(
            f"invalid extension `{extension}` use {DB_EXTENSION}"
        )
    return raw
