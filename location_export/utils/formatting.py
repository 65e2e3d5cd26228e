"""Formatting helpers."""

from __future__ import annotations

import json


def format_bool(value: bool) -> str:
    """Return the lowercase JSON spelling of a boolean."""

    return "true" if value else "false"


def format_float(value: float) -> str:
    """Return the shortest decimal text that round-trips ``value``."""

    return repr(float(value))


def format_optional_int(value: int) -> str:
    """Render ``value`` as text, treating zero as an empty cell."""

    # Zero doubles as "absent" for optional numeric fields.
    if value == 0:
        return ""
    return str(value)


def canonical_text(value: object) -> str:
    """Return the text form of a JSON scalar."""

    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return format_bool(value)
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, int):
        return str(value)
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
