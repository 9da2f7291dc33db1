"""Error types raised at the scrollback codec boundary."""

from .internal import (  # noqa: F401
    DecodeError,
    EncodeError,
    InternalError,
    ParsingError,
    TimestampRangeError,
)

__all__ = ["InternalError", "ParsingError", "DecodeError", "EncodeError", "TimestampRangeError"]
