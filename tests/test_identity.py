from __future__ import annotations

import pytest
from pydantic import ValidationError

from scrollback.identity import ServerSender, User, UserSender, parse_prefix, sender_name


def test_user_display_is_hostmask(bob) -> None:
    assert str(bob) == "bob!~bob@irc.example.net"


def test_user_structural_equality() -> None:
    assert User(nick="a", ident="b", host="c") == User(nick="a", ident="b", host="c")
    assert User(nick="a", ident="b", host="c") != User(nick="a", ident="b", host="d")


def test_user_is_immutable(alice) -> None:
    with pytest.raises(ValidationError):
        alice.nick = "mallory"


def test_user_is_hashable(alice) -> None:
    assert len({alice, User(nick="alice", ident="a", host="h")}) == 1


def test_user_sender_never_equals_server_sender() -> None:
    user = UserSender(user=User(nick="irc.example.net", ident="irc.example.net", host="irc.example.net"))
    server = ServerSender(name="irc.example.net")
    assert user != server
    assert server != user


def test_parse_prefix_full_hostmask() -> None:
    assert parse_prefix("Forkk!~forkk@irc.forkk.net") == UserSender(
        user=User(nick="Forkk", ident="~forkk", host="irc.forkk.net")
    )


@pytest.mark.parametrize("prefix", ["irc.libera.chat", "nick!ident", "nick@host", ""])
def test_parse_prefix_falls_back_to_server(prefix: str) -> None:
    assert parse_prefix(prefix) == ServerSender(name=prefix)


def test_sender_name() -> None:
    assert sender_name(parse_prefix("Forkk!~forkk@irc.forkk.net")) == "Forkk"
    assert sender_name(ServerSender(name="irc.libera.chat")) == "irc.libera.chat"
