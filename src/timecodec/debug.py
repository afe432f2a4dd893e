"""ASCII tables for development-time verification.

This module is dev-only and not imported by production code.
"""

from __future__ import annotations

from datetime import datetime

from timecodec.types import TimeCodec, TimeCodecError


def show_encodings(t: datetime, codecs: dict[str, TimeCodec]) -> str:
    """Print a table of each codec's encoding of t and its decoded instant.

    Returns the string and also prints to stdout.

    Args:
        t: Instant to encode
        codecs: Mapping of display name to codec
    """
    rows: list[tuple[str, str, str]] = []
    for name, codec in codecs.items():
        text = codec.marshal(t)
        try:
            decoded = codec.unmarshal(text).isoformat()
        except TimeCodecError as e:
            decoded = f"! {e}"
        rows.append((name, text, decoded))

    headers = ("codec", "text", "decoded")
    widths = [len(h) for h in headers]
    for row in rows:
        widths = [max(w, len(cell)) for w, cell in zip(widths, row)]

    fmt = "  ".join(f"{{:<{w}}}" for w in widths)
    lines = [f"instant: {t.isoformat()}", fmt.format(*headers)]
    lines.append("  ".join("-" * w for w in widths))
    lines.extend(fmt.format(*row).rstrip() for row in rows)

    result = "\n".join(lines)
    print(result)
    return result
