"""Buffer event variants.

``LineData`` is a closed union: every event that can appear in a buffer is
one of the records below, told apart on the wire by its ``tag``. Consumers
are expected to ``match`` over it exhaustively.

Identity resolution differs between variants on purpose. A kick target is
usually only known by name when the KICK arrives, whereas the kicker and
the subjects of JOIN/PART/QUIT/NICK arrive with a full hostmask.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from .identity import Nickname, User
from .kinds import MsgKind

_RECORD = ConfigDict(
    frozen=True,
    extra="forbid",
    validate_by_name=True,
    validate_by_alias=True,
    serialize_by_alias=True,
)


class Message(BaseModel):
    """A chat message or protocol line.

    ``from_`` is the raw display name of the origin (``from`` on the wire),
    not a structured sender.
    """

    model_config = _RECORD

    tag: Literal["Message"] = "Message"
    kind: MsgKind
    from_: str = Field(alias="from")
    msg: str


class Topic(BaseModel):
    """Topic change or announcement; ``by`` is None when unattributed."""

    model_config = _RECORD

    tag: Literal["Topic"] = "Topic"
    by: str | None
    topic: str


class Join(BaseModel):
    model_config = _RECORD

    tag: Literal["Join"] = "Join"
    user: User


class Part(BaseModel):
    model_config = _RECORD

    tag: Literal["Part"] = "Part"
    user: User
    reason: str


class Kick(BaseModel):
    """Forced removal of ``user`` (a bare nick) by ``by``."""

    model_config = _RECORD

    tag: Literal["Kick"] = "Kick"
    by: User
    user: str
    reason: str


class Quit(BaseModel):
    """Disconnect from the server; ``msg`` is None when no message was given."""

    model_config = _RECORD

    tag: Literal["Quit"] = "Quit"
    user: User
    msg: str | None


class Nick(BaseModel):
    """Nickname change; ``user`` is the identity before the change."""

    model_config = _RECORD

    tag: Literal["Nick"] = "Nick"
    user: User
    new: Nickname


LineData = Annotated[
    Message | Topic | Join | Part | Kick | Quit | Nick,
    Field(discriminator="tag"),
]


__all__ = [
    "Message",
    "Topic",
    "Join",
    "Part",
    "Kick",
    "Quit",
    "Nick",
    "LineData",
]
