"""Boundary: epoch arithmetic, datetime ↔ integer conversion and rounding."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_NANOS_PER_MICRO = 1_000
_NANOS_PER_MILLI = 1_000_000


def _as_utc(t: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    if t.tzinfo is None:
        return t.replace(tzinfo=timezone.utc)
    return t


def _to_nanos(d: timedelta) -> int:
    return (
        (d.days * 86_400 + d.seconds) * 1_000_000 + d.microseconds
    ) * _NANOS_PER_MICRO


def unix_nanos(t: datetime) -> int:
    """Nanoseconds since the epoch. Exact: datetimes resolve to microseconds."""
    return _to_nanos(_as_utc(t) - EPOCH)


def unix_millis(t: datetime) -> int:
    """Whole milliseconds since the epoch.

    The sub-millisecond remainder is truncated toward zero, so instants
    just before the epoch map to 0 rather than -1.
    """
    nanos = unix_nanos(t)
    millis = abs(nanos) // _NANOS_PER_MILLI
    return millis if nanos >= 0 else -millis


def round_to_unit(t: datetime, unit: timedelta) -> datetime:
    """Truncate t to the nearest lower multiple of unit since the epoch.

    Flooring is toward negative infinity, also for pre-epoch instants.
    A unit of 1ns or less returns t unchanged. The tzinfo of t is kept.
    The subtraction runs on elapsed (UTC) time, so offset changes such
    as daylight saving transitions do not shift the result.
    """
    unit_nanos = _to_nanos(unit)
    if unit_nanos <= 1:
        return t
    remainder = unix_nanos(t) % unit_nanos
    utc = _as_utc(t).astimezone(timezone.utc) - timedelta(
        microseconds=remainder // _NANOS_PER_MICRO
    )
    if t.tzinfo is None:
        return utc.replace(tzinfo=None)
    return utc.astimezone(t.tzinfo)


@dataclass(frozen=True)
class TimeResolution:
    """Converts between datetime and integer counts of unit since the epoch.

    Immutable. Callers round with round_to_unit before converting.
    """

    unit: timedelta
    label: str

    def to_int(self, t: datetime) -> int:
        """Convert a datetime to integer units since the epoch.

        Raises ValueError if t is not aligned to the resolution.
        """
        nanos = unix_nanos(t)
        unit_nanos = _to_nanos(self.unit)
        remainder = nanos % unit_nanos
        if remainder != 0:
            raise ValueError(
                f"datetime {t.isoformat()} does not align to {self.label} "
                f"resolution. Remainder: {remainder}ns. "
                f"No implicit rounding; caller must round first."
            )
        return nanos // unit_nanos

    def to_datetime(self, n: int) -> datetime:
        """Convert integer units since the epoch to an aware UTC datetime.

        Raises OverflowError if the result is outside the datetime range.
        """
        return EPOCH + self.unit * n


MILLISECOND = TimeResolution(unit=timedelta(milliseconds=1), label="millisecond")
SECOND = TimeResolution(unit=timedelta(seconds=1), label="second")
