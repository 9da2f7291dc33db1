"""Message kinds.

Four kinds carry no payload and travel as bare strings; numeric replies
carry their 16-bit code and travel as ``{"tag": "Response", "code": N}``.
A callable discriminator picks between the two shapes so that a bare string
and a tagged object never compete for the same input.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag

from .constants import RESPONSE_CODE_MAX


class PlainKind(str, Enum):
    """Payload-free message kinds.

    Attributes:
        PRIVMSG: Ordinary channel or private message.
        NOTICE: NOTICE message.
        ACTION: CTCP ACTION, rendered as a first-person line.
        STATUS: Synthetic status line produced locally.
    """

    PRIVMSG = "PrivMsg"
    NOTICE = "Notice"
    ACTION = "Action"
    STATUS = "Status"


class Response(BaseModel):
    """A numeric protocol reply."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    tag: Literal["Response"] = "Response"
    code: int = Field(ge=0, le=RESPONSE_CODE_MAX, strict=True)


def _kind_tag(value: Any) -> str | None:
    if isinstance(value, str):
        return "plain"
    if isinstance(value, Response):
        return "Response"
    if isinstance(value, Mapping):
        tag = value.get("tag")
        return tag if isinstance(tag, str) else None
    return None


MsgKind = Annotated[
    Annotated[PlainKind, Tag("plain")] | Annotated[Response, Tag("Response")],
    Discriminator(_kind_tag),
]


__all__ = ["PlainKind", "Response", "MsgKind"]
