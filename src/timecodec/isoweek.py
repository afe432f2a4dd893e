"""ISO-week codec: instants as ``YYYY-WW`` week identifiers.

Encoding follows ISO 8601 week numbering (weeks run Monday to Sunday,
week 1 contains the year's first Thursday).

Two decoders share the text format:

- ``ISO_WEEK`` rewinds from December 31st of the previous year to the
  Sunday on or before it, then adds ``(week + 1) * 7`` days. For years
  whose January 1st falls Friday to Sunday this lands on the Sunday that
  closes the requested week. For years starting Monday to Thursday it
  lands one week later.
- ``ISO_WEEK_CANONICAL`` decodes to the Monday that opens the requested
  week, and rejects week 53 in years that only have 52.
"""

from __future__ import annotations

import logging
import re
from datetime import MAXYEAR, MINYEAR, date, datetime, time, timedelta, timezone

from timecodec.codec import new_time_codec
from timecodec.types import (
    InvalidISOWeekStringError,
    InvalidWeekNumberError,
    TimeCodecError,
)

logger = logging.getLogger(__name__)

ISO_WEEK_RE = re.compile(r"([0-9]{4})-([0-9]{2})")

_SUNDAY = 0


def _sunday_first_weekday(d: date) -> int:
    """Weekday with Sunday = 0 through Saturday = 6."""
    return (d.weekday() + 1) % 7


def _midnight_utc(d: date) -> datetime:
    return datetime.combine(d, time(0, 0), tzinfo=timezone.utc)


def _parse(value: str) -> tuple[int, int]:
    """Split ``YYYY-WW`` into (year, week), validating shape and week range."""
    match = ISO_WEEK_RE.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        logger.debug("Rejected malformed ISO week %r", value)
        raise InvalidISOWeekStringError(value)
    year = int(match.group(1))
    week = int(match.group(2))
    if not 0 < week <= 53:
        logger.debug("Rejected ISO week number %d in %r", week, value)
        raise InvalidWeekNumberError(value, week)
    if not MINYEAR < year <= MAXYEAR:
        raise TimeCodecError(value, "ISO week year outside the datetime range")
    return year, week


def encode_iso_week(t: datetime) -> str:
    year, week, _ = t.isocalendar()
    return f"{year}-{week:02d}"


def decode_iso_week(value: str) -> datetime:
    """Decode ``YYYY-WW`` using the Sunday-anchor walk."""
    year, week = _parse(value)
    anchor = date(year, 1, 1) - timedelta(days=1)
    while _sunday_first_weekday(anchor) > _SUNDAY:
        anchor -= timedelta(days=1)
    try:
        return _midnight_utc(anchor + timedelta(days=(week + 1) * 7))
    except OverflowError as e:
        raise TimeCodecError(value, "ISO week outside the datetime range") from e


def decode_iso_week_canonical(value: str) -> datetime:
    """Decode ``YYYY-WW`` to the Monday that starts the ISO week."""
    year, week = _parse(value)
    try:
        monday = date.fromisocalendar(year, week, 1)
    except ValueError as e:
        logger.debug("Year %d has no ISO week %d", year, week)
        raise InvalidWeekNumberError(value, week) from e
    return _midnight_utc(monday)


ISO_WEEK = new_time_codec(encode_iso_week, decode_iso_week)
ISO_WEEK_CANONICAL = new_time_codec(encode_iso_week, decode_iso_week_canonical)
