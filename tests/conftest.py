"""Shared fixtures for scrollback tests."""

from datetime import UTC, datetime

import pytest

from scrollback import (
    BufferLine,
    Join,
    Kick,
    Message,
    Nick,
    Part,
    PlainKind,
    Quit,
    Response,
    Topic,
    User,
)


@pytest.fixture
def alice() -> User:
    return User(nick="alice", ident="a", host="h")


@pytest.fixture
def bob() -> User:
    return User(nick="bob", ident="~bob", host="irc.example.net")


@pytest.fixture
def new_year() -> datetime:
    return datetime(2021, 1, 1, tzinfo=UTC)


@pytest.fixture
def every_variant(alice, bob):
    """One instance of each LineData variant, optional fields both ways."""
    return [
        Message(kind=PlainKind.PRIVMSG, from_="alice", msg="hello"),
        Message(kind=PlainKind.NOTICE, from_="ChanServ", msg="welcome"),
        Message(kind=PlainKind.ACTION, from_="bob", msg="waves"),
        Message(kind=PlainKind.STATUS, from_="*", msg="Connected"),
        Message(kind=Response(code=332), from_="irc.example.net", msg="topic reply"),
        Topic(by=None, topic="on join"),
        Topic(by="alice", topic="new topic"),
        Join(user=alice),
        Part(user=bob, reason=""),
        Kick(by=alice, user="bob", reason="spam"),
        Quit(user=bob, msg=None),
        Quit(user=bob, msg="Ping timeout"),
        Nick(user=alice, new="alice_"),
    ]


@pytest.fixture
def scrollback_lines(every_variant, new_year) -> list[BufferLine]:
    base = int(new_year.timestamp())
    return [
        BufferLine.new(datetime.fromtimestamp(base + i * 61, UTC), data)
        for i, data in enumerate(every_variant)
    ]
