"""Shared types: the TimeCodec contract and its error hierarchy."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

TimeEncoderFunc = Callable[[datetime], str]
TimeDecoderFunc = Callable[[str], datetime]


class TimeCodec:
    """Bidirectional conversion between an instant and its text form.

    Implementations are immutable: the same input always yields the
    same output, and instances may be shared freely.
    """

    def marshal(self, t: datetime) -> str:
        """Encode an instant as text."""
        raise NotImplementedError

    def unmarshal(self, value: str) -> datetime:
        """Decode text back to an instant.

        Raises a TimeCodecError subclass when the text is not valid.
        """
        raise NotImplementedError


class TimeCodecError(ValueError):
    """Base class for recoverable decode failures."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"{reason}: {value!r}")


class InvalidISOWeekStringError(TimeCodecError):
    """Raised when text does not have the YYYY-WW shape."""

    def __init__(self, value: str) -> None:
        super().__init__(value, "Invalid ISOWeek string")


class InvalidWeekNumberError(TimeCodecError):
    """Raised when the week component is outside [1, 53]."""

    def __init__(self, value: str, week: int) -> None:
        self.week = week
        super().__init__(value, f"Invalid week number {week}")


class NumberFormatError(TimeCodecError):
    """Raised when text is not a base-10 int64, or is out of range."""


class LayoutParseError(TimeCodecError):
    """Raised when text does not match a layout."""

    def __init__(self, value: str, layout: str) -> None:
        self.layout = layout
        super().__init__(value, f"Text does not match layout {layout!r}")
