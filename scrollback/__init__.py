"""Scrollback line records.

Replayable records of chat buffer events (messages, topic changes, joins,
parts, kicks, quits and nick changes), their timestamps, and a JSON codec
for handing them to storage or transport.
"""

from .buffer_line import BufferLine  # noqa: F401
from .errors import (  # noqa: F401
    DecodeError,
    EncodeError,
    InternalError,
    ParsingError,
    TimestampRangeError,
)
from .identity import (  # noqa: F401
    Nickname,
    Sender,
    ServerSender,
    User,
    UserSender,
    parse_prefix,
    sender_name,
)
from .kinds import MsgKind, PlainKind, Response  # noqa: F401
from .line_data import Join, Kick, LineData, Message, Nick, Part, Quit, Topic  # noqa: F401

__all__ = [
    "BufferLine",
    "DecodeError",
    "EncodeError",
    "TimestampRangeError",
    "InternalError",
    "ParsingError",
    "Nickname",
    "Sender",
    "ServerSender",
    "User",
    "UserSender",
    "parse_prefix",
    "sender_name",
    "MsgKind",
    "PlainKind",
    "Response",
    "LineData",
    "Message",
    "Topic",
    "Join",
    "Part",
    "Kick",
    "Quit",
    "Nick",
]
