"""Layout codec: instants formatted and parsed against a fixed layout string.

Layouts are strftime/strptime format strings. Layouts written in the
reference-date style (``2006-01-02 15:04:05``) can be translated with
translate_reference_layout.

Zone names (``%Z``, reference ``MST``) format from any tzinfo but only
parse back when strptime knows the name (UTC, GMT or the local zone's
names). Layouts that must round-trip an offset should use ``%z``
(reference ``-0700``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from timecodec.types import LayoutParseError, TimeCodec

logger = logging.getLogger(__name__)

# Longest tokens first so "2006" wins over "06" and "January" over "Jan".
_REFERENCE_TOKENS: tuple[tuple[str, str], ...] = (
    ("January", "%B"),
    ("Monday", "%A"),
    (".000000", ".%f"),
    ("-07:00", "%z"),
    ("-0700", "%z"),
    ("2006", "%Y"),
    ("Jan", "%b"),
    ("Mon", "%a"),
    ("MST", "%Z"),
    ("06", "%y"),
    ("01", "%m"),
    ("02", "%d"),
    ("15", "%H"),
    ("03", "%I"),
    ("04", "%M"),
    ("05", "%S"),
    ("PM", "%p"),
)


def translate_reference_layout(layout: str) -> str:
    """Translate a reference-date layout to strftime directives.

    >>> translate_reference_layout("2006-01-02T15:04:05")
    '%Y-%m-%dT%H:%M:%S'

    Characters that are not reference tokens are kept as literals.
    """
    out: list[str] = []
    i = 0
    while i < len(layout):
        for token, directive in _REFERENCE_TOKENS:
            if layout.startswith(token, i):
                out.append(directive)
                i += len(token)
                break
        else:
            ch = layout[i]
            out.append("%%" if ch == "%" else ch)
            i += 1
    return "".join(out)


@dataclass(frozen=True)
class LayoutCodec(TimeCodec):
    """Formats and parses instants with a strftime layout. Immutable.

    Parsed values carrying no offset are returned as UTC.
    """

    layout: str

    @classmethod
    def from_reference(cls, layout: str) -> LayoutCodec:
        """Build a codec from a reference-date layout."""
        return cls(translate_reference_layout(layout))

    def marshal(self, t: datetime) -> str:
        return t.strftime(self.layout)

    def unmarshal(self, value: str) -> datetime:
        try:
            t = datetime.strptime(value, self.layout)
        except (ValueError, TypeError) as e:
            logger.debug("Value %r does not match layout %r", value, self.layout)
            raise LayoutParseError(value, self.layout) from e
        if t.tzinfo is None:
            t = t.replace(tzinfo=timezone.utc)
        return t


DATE = LayoutCodec("%Y-%m-%d")
RFC3339 = LayoutCodec("%Y-%m-%dT%H:%M:%S%z")
