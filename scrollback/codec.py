"""Schema-driven JSON codec for line records.

Every public record type has a module-level :class:`Codec`. Encoding is
field-for-field from the pydantic schema; decoding validates the full shape
and turns any mismatch into :class:`~scrollback.errors.DecodeError`.

Example::

    from scrollback.codec import LINE

    text = LINE.dumps(line)
    assert LINE.loads(text) == line
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from . import constants
from .buffer_line import BufferLine
from .errors import DecodeError, EncodeError
from .identity import Sender, User
from .kinds import MsgKind
from .line_data import LineData
from .logs.logger import logger


class Codec[T]:
    """Encode and decode one record type.

    Args:
        name: Short label used in log lines and error data.
        schema: The type (or annotated union) to validate against.
    """

    def __init__(self, name: str, schema: Any) -> None:
        self.name = name
        self._adapter: TypeAdapter[T] = TypeAdapter(schema)

    def to_obj(self, value: T) -> Any:
        """Return the JSON-compatible object form of ``value``."""
        try:
            return self._adapter.dump_python(value, mode="json", by_alias=True)
        except (PydanticSerializationError, ValueError) as e:
            raise self._encode_error(e) from e

    def from_obj(self, obj: Any) -> T:
        """Rebuild a value from its object form (e.g. the output of ``json.load``)."""
        try:
            return self._adapter.validate_python(obj)
        except ValidationError as e:
            raise self._decode_error(e) from e

    def dumps(self, value: T) -> str:
        """Return ``value`` as compact JSON text.

        Raises:
            EncodeError: The value cannot be serialized, for example a field
                holding a non-JSON type or text with lone surrogates.
        """
        try:
            return self._adapter.dump_json(value, by_alias=True).decode("utf-8")
        except (PydanticSerializationError, ValueError) as e:
            raise self._encode_error(e) from e

    def loads(self, text: str | bytes) -> T:
        """Rebuild a value from JSON text."""
        try:
            return self._adapter.validate_json(text)
        except ValidationError as e:
            raise self._decode_error(e) from e

    def _encode_error(self, error: Exception) -> EncodeError:
        reason = str(error)[:200]
        logger.log_event("codec", "encode_failed", level=logging.WARNING, codec=self.name, reason=reason)
        return EncodeError(f"Cannot encode {self.name}: {reason}", data={"codec": self.name, "reason": reason})

    def _decode_error(self, error: ValidationError) -> DecodeError:
        details = error.errors(include_url=False, include_context=False)
        logger.log_event(
            "codec",
            "decode_failed",
            level=logging.WARNING,
            codec=self.name,
            error_count=error.error_count(),
            first_error=details[0]["msg"] if details else None,
        )
        return DecodeError(
            f"Invalid {self.name}: {error.error_count()} validation error(s)",
            data={
                "codec": self.name,
                "errors": [_plain_error(d) for d in details[: constants.MAX_DECODE_ERRORS]],
            },
        )


def _plain_error(detail: Any) -> dict[str, object]:
    # Input values can be arbitrarily large; keep location and reason only.
    return {"type": detail["type"], "loc": list(detail["loc"]), "msg": detail["msg"]}


LINE: Codec[BufferLine] = Codec("buffer_line", BufferLine)
LINES: Codec[list[BufferLine]] = Codec("buffer_lines", list[BufferLine])
LINE_DATA: Codec[LineData] = Codec("line_data", LineData)
MSG_KIND: Codec[MsgKind] = Codec("msg_kind", MsgKind)
USER: Codec[User] = Codec("user", User)
SENDER: Codec[Sender] = Codec("sender", Sender)


__all__ = ["Codec", "LINE", "LINES", "LINE_DATA", "MSG_KIND", "USER", "SENDER"]
