"""The buffer line record: one timestamped event of a scrollback buffer."""

from __future__ import annotations

from datetime import datetime, tzinfo

from pydantic import BaseModel, ConfigDict, Field

from .line_data import LineData
from .time_codec import MAX_EPOCH_SECONDS, MIN_EPOCH_SECONDS, decode, encode


class BufferLine(BaseModel):
    """A single scrollback entry.

    The timestamp is held as whole epoch seconds (``time`` on the wire) and
    only exposed back as a datetime through :meth:`time`. ``data`` is public
    so presentation code can match on the event directly.

    Lines are immutable; use ``model_copy(update=...)`` to derive a new one.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_by_name=True,
        validate_by_alias=True,
        serialize_by_alias=True,
    )

    epoch: int = Field(alias="time", ge=MIN_EPOCH_SECONDS, le=MAX_EPOCH_SECONDS, strict=True)
    data: LineData

    @classmethod
    def new(cls, when: datetime, data: LineData) -> BufferLine:
        """Create a line stamped with ``when`` truncated to the second.

        Raises:
            TimestampRangeError: ``when`` lies within a day of the ends of
                the ``datetime`` range.
        """
        return cls(epoch=encode(when), data=data)

    def time(self, zone: tzinfo | None = None) -> datetime:
        """Return the stored instant as an aware datetime.

        Args:
            zone: Zone to express the result in. Defaults to the configured
                display zone, or the local zone when none is configured.
        """
        return decode(self.epoch, zone)


__all__ = ["BufferLine"]
