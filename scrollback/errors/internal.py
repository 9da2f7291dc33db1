"""Centralized internal error hierarchy.

Line records never fail to construct from valid input. Errors appear at the
codec boundary and for timestamps outside the storable range.

Classes:
  InternalError        – Base for all internal errors.
  ParsingError         – Wire data that does not match the record schema.
  DecodeError          – A codec rejected its input.
  EncodeError          – A value could not be serialized (e.g. lone surrogates).
  TimestampRangeError  – A timestamp lies outside the storable epoch range.
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class ParsingError(InternalError):
    """Exception raised for payloads that do not match the expected schema.

    This includes malformed JSON, unknown variant tags and missing or
    mistyped fields. Retrying with the same input can never succeed.
    """


class DecodeError(ParsingError):
    """Exception raised when a codec cannot rebuild a value from wire data.

    The ``data`` mapping always holds ``codec`` (the codec name) and
    ``errors`` (a list of validation error dicts, possibly truncated). The
    original pydantic ``ValidationError`` is chained as ``__cause__``.
    """

    @property
    def codec(self) -> str:
        return str(self.data.get("codec", ""))

    @property
    def errors(self) -> list[dict[str, object]]:
        errors = self.data.get("errors")
        return list(errors) if isinstance(errors, list) else []


class EncodeError(InternalError):
    """Exception raised when a record cannot be serialized.

    Text fields must be valid Unicode; strings carrying lone surrogates (as
    left by decoding raw bytes with ``surrogateescape``) cannot be written as
    JSON. ``data`` holds ``codec`` and ``reason``.
    """


class TimestampRangeError(InternalError):
    """Exception raised for a timestamp that cannot be stored.

    Stored seconds must lie within ``MIN_EPOCH_SECONDS``..``MAX_EPOCH_SECONDS``
    so that every stored line can be rendered in any zone. ``data`` holds
    ``value`` (the offending input, as text).
    """


__all__ = [
    "InternalError",
    "ParsingError",
    "DecodeError",
    "EncodeError",
    "TimestampRangeError",
]
