"""Parse the suggestion payload into placemark objects."""

from __future__ import annotations

import json

from ..core import ParseError

_SNIPPET_LENGTH = 80

_JSON_TYPE_NAMES = {
    dict: "object",
    list: "array",
    str: "string",
    int: "number",
    float: "number",
    bool: "boolean",
    type(None): "null",
}


def _json_type(value: object) -> str:
    return _JSON_TYPE_NAMES.get(type(value), type(value).__name__)


def _snippet(text: str, position: int = 0) -> str:
    start = max(position - _SNIPPET_LENGTH // 2, 0)
    return text[start : start + _SNIPPET_LENGTH]


def _reject_constant(name: str) -> None:
    raise ParseError(f"invalid JSON constant {name}", details={"constant": name})


def parse_placemarks(text: str) -> list[dict]:
    """Return the placemark objects of a JSON array, in source order.

    Only strict JSON is accepted: ``NaN`` and ``Infinity`` raise :class:`ParseError`.
    """

    try:
        payload = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}",
            details={
                "position": exc.pos,
                "line": exc.lineno,
                "column": exc.colno,
                "snippet": _snippet(text, exc.pos),
            },
        ) from exc

    if not isinstance(payload, list):
        raise ParseError(
            f"expected a JSON array, got {_json_type(payload)}",
            details={"snippet": _snippet(text)},
        )

    for index, element in enumerate(payload):
        if not isinstance(element, dict):
            raise ParseError(
                f"element {index} is a JSON {_json_type(element)}, not an object",
                details={"index": index},
            )
    return payload
