"""Epoch codecs: Unix milliseconds and seconds, with optional step truncation.

Wire format is a base-10 signed 64-bit integer: an optional leading ``-``,
ASCII digits only, no ``+``, separators or surrounding whitespace.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta

from timecodec.codec import new_time_codec
from timecodec.resolution import (
    MILLISECOND,
    SECOND,
    TimeResolution,
    round_to_unit,
    unix_millis,
)
from timecodec.types import NumberFormatError, TimeCodec

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"-?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _parse_int64(value: str) -> int:
    """Parse a strict base-10 int64. Raises NumberFormatError."""
    if not isinstance(value, str) or _INT_RE.fullmatch(value) is None:
        logger.debug("Rejected non-integer epoch value %r", value)
        raise NumberFormatError(value, "Invalid integer")
    n = int(value)
    if not _INT64_MIN <= n <= _INT64_MAX:
        logger.debug("Rejected out-of-range epoch value %r", value)
        raise NumberFormatError(value, "Integer out of int64 range")
    return n


def _decode(value: str, resolution: TimeResolution) -> datetime:
    n = _parse_int64(value)
    try:
        return resolution.to_datetime(n)
    except OverflowError as e:
        logger.debug("Epoch value %r outside the datetime range", value)
        raise NumberFormatError(
            value, f"{resolution.label} value outside the datetime range"
        ) from e


def _clamp(step: timedelta, minimum: timedelta) -> timedelta:
    return step if step > minimum else minimum


def _truncate(n: int, step: int) -> int:
    # Python's % floors, so pre-epoch values also round toward -inf.
    return n - n % step


@dataclass(frozen=True)
class UnixMillisTimeCodec(TimeCodec):
    """Epoch milliseconds, truncated down to a multiple of step.

    Steps below one millisecond are clamped to one millisecond.
    """

    step: timedelta = MILLISECOND.unit

    def __post_init__(self) -> None:
        object.__setattr__(self, "step", _clamp(self.step, MILLISECOND.unit))

    @property
    def step_millis(self) -> int:
        return self.step // MILLISECOND.unit

    def marshal(self, t: datetime) -> str:
        ms = MILLISECOND.to_int(round_to_unit(t, MILLISECOND.unit))
        return str(_truncate(ms, self.step_millis))

    def unmarshal(self, value: str) -> datetime:
        return _decode(value, MILLISECOND)


@dataclass(frozen=True)
class UnixTimeCodec(TimeCodec):
    """Epoch seconds, truncated down to a multiple of step.

    Steps below one second are clamped to one second.
    """

    step: timedelta = SECOND.unit

    def __post_init__(self) -> None:
        object.__setattr__(self, "step", _clamp(self.step, SECOND.unit))

    @property
    def step_seconds(self) -> int:
        return self.step // SECOND.unit

    def marshal(self, t: datetime) -> str:
        seconds = SECOND.to_int(round_to_unit(t, SECOND.unit))
        return str(_truncate(seconds, self.step_seconds))

    def unmarshal(self, value: str) -> datetime:
        return _decode(value, SECOND)


def _encode_millis(t: datetime) -> str:
    return str(unix_millis(t))


def _decode_millis(value: str) -> datetime:
    return _decode(value, MILLISECOND)


# Fixed millisecond codec: no step, sub-millisecond part truncated toward zero.
MILLIS = new_time_codec(_encode_millis, _decode_millis)
