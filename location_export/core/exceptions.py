"""Custom exception hierarchy for the location export domain."""

from __future__ import annotations

from typing import Sequence


class ExportError(RuntimeError):
    """Raised when a location export cannot be completed."""

    def __init__(self, message: str, *, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}

    def as_dict(self) -> dict:
        """Return a serializable representation."""
        payload = {"message": str(self)}
        if self.details:
            payload["details"] = self.details
        return payload


class FetchError(ExportError):
    """The suggestion service could not be reached or read."""


class ParseError(ExportError):
    """The response body is not a JSON array of objects."""


class MissingFieldError(ParseError):
    """A placemark lacks a required field or carries it with the wrong type."""

    def __init__(self, fields: Sequence[str], *, index: int | None = None):
        self.fields = list(fields)
        self.index = index
        where = f"placemark {index}" if index is not None else "placemark"
        message = f"{where} is missing required field {self.fields[0]!r}"
        if len(self.fields) > 1:
            message += f" (and {len(self.fields) - 1} more)"
        details: dict = {"fields": self.fields}
        if index is not None:
            details["index"] = index
        super().__init__(message, details=details)


class WriteError(ExportError):
    """The CSV output could not be created or written."""
