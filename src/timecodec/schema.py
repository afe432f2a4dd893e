"""Input validation for codec definitions."""

from __future__ import annotations

CODEC_KINDS = (
    "layout",
    "reference_layout",
    "isoweek",
    "millis",
    "unix_millis",
    "unix",
)

_STEP_FIELDS = {"unix_millis": "step_ms", "unix": "step_seconds"}


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_codec_definition(defn: dict) -> list[str]:
    """Validate one codec definition. Returns list of error messages (empty = valid).

    Checks:
    - The definition is a mapping with a known "kind"
    - Layout kinds carry a non-empty string "layout"
    - Step kinds carry an optional integer step
    - isoweek carries an optional boolean "canonical"
    """
    if not isinstance(defn, dict):
        return [f"Codec definition must be an object, got {type(defn).__name__}"]

    errors: list[str] = []
    kind = defn.get("kind")
    if kind not in CODEC_KINDS:
        errors.append(
            f"Invalid kind: {kind!r} (must be one of {', '.join(CODEC_KINDS)})"
        )
        return errors

    if kind in ("layout", "reference_layout"):
        layout = defn.get("layout")
        if not isinstance(layout, str) or not layout:
            errors.append(f"{kind}: 'layout' must be a non-empty string")

    if kind in _STEP_FIELDS:
        field = _STEP_FIELDS[kind]
        if field in defn and not _is_int(defn[field]):
            errors.append(f"{kind}: '{field}' must be an integer")

    if kind == "isoweek" and "canonical" in defn:
        if not isinstance(defn["canonical"], bool):
            errors.append("isoweek: 'canonical' must be boolean")

    return errors
