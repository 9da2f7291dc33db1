"""Participant identity types.

``User`` is a full ``nick!ident@host`` identity; ``Sender`` tells a user
origin apart from a bare server origin.
"""

from __future__ import annotations

from typing import Annotated, Literal, assert_never

from pydantic import BaseModel, ConfigDict, Field

# An IRC nickname
type Nickname = str


class User(BaseModel):
    """An IRC user identity.

    Attributes:
        nick: Display handle.
        ident: Ident / username part of the hostmask.
        host: Host part of the hostmask.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    nick: str
    ident: str
    host: str

    def __str__(self) -> str:
        return f"{self.nick}!{self.ident}@{self.host}"


class UserSender(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    tag: Literal["User"] = "User"
    user: User


class ServerSender(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    tag: Literal["Server"] = "Server"
    name: str


Sender = Annotated[UserSender | ServerSender, Field(discriminator="tag")]


def parse_prefix(prefix: str) -> UserSender | ServerSender:
    """Split a message prefix into a sender.

    ``nick!ident@host`` yields a user sender; anything without both
    separators (in that order) is taken as a server name verbatim.
    """
    nick, bang, rest = prefix.partition("!")
    if bang:
        ident, at, host = rest.partition("@")
        if at:
            return UserSender(user=User(nick=nick, ident=ident, host=host))
    return ServerSender(name=prefix)


def sender_name(sender: UserSender | ServerSender) -> str:
    """Return the server name, or the nick for a user sender."""
    match sender:
        case ServerSender(name=name):
            return name
        case UserSender(user=user):
            return user.nick
        case _:
            assert_never(sender)


__all__ = [
    "Nickname",
    "User",
    "UserSender",
    "ServerSender",
    "Sender",
    "parse_prefix",
    "sender_name",
]
