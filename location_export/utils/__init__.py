"""Utility helpers for the location export project."""

from .formatting import canonical_text, format_bool, format_float, format_optional_int
from .io import decode_body, detect_encoding, ensure_directory, safe_filename

__all__ = [
    "canonical_text",
    "format_bool",
    "format_float",
    "format_optional_int",
    "decode_body",
    "detect_encoding",
    "ensure_directory",
    "safe_filename",
]
