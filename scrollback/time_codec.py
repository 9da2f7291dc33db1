"""Conversion between aware datetimes and whole epoch seconds.

Lines only need ordering and display, so timestamps are stored as a single
integer. Sub-second precision and the original UTC offset are dropped;
the absolute instant survives to the second.

The storable range stops one day short of ``datetime.min`` and
``datetime.max`` so that any stored value can be expressed in any zone
(UTC offsets are always less than a day).
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta, tzinfo

from . import constants
from .errors import TimestampRangeError
from .logs.logger import logger

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_SECONDS_PER_DAY = 86400


def _epoch_seconds(when: datetime) -> int:
    # Integer arithmetic on the timedelta avoids float rounding far from 1970.
    delta = when - EPOCH
    return delta.days * _SECONDS_PER_DAY + delta.seconds


MIN_EPOCH_SECONDS = _epoch_seconds(datetime.min.replace(tzinfo=UTC)) + _SECONDS_PER_DAY
MAX_EPOCH_SECONDS = _epoch_seconds(datetime.max.replace(tzinfo=UTC)) - _SECONDS_PER_DAY


def _out_of_range(value: object) -> TimestampRangeError:
    logger.log_event("time", "out_of_range", level=logging.WARNING, value=str(value))
    return TimestampRangeError(
        f"Timestamp {value} outside storable range {MIN_EPOCH_SECONDS}..{MAX_EPOCH_SECONDS}",
        data={"value": str(value)},
    )


def encode(when: datetime) -> int:
    """Return the epoch seconds of ``when``, flooring any fraction.

    Naive datetimes are interpreted in the local zone, as ``datetime``
    itself does for ``timestamp()``.

    Raises:
        TimestampRangeError: ``when`` falls outside the storable range.
    """
    if when.tzinfo is None or when.utcoffset() is None:
        logger.log_event("time", "naive_assumed_local", level=logging.DEBUG, value=when.isoformat())
        try:
            when = when.astimezone()
        except (OverflowError, OSError, ValueError) as e:
            raise _out_of_range(when.isoformat()) from e
    seconds = _epoch_seconds(when)
    if not MIN_EPOCH_SECONDS <= seconds <= MAX_EPOCH_SECONDS:
        raise _out_of_range(when.isoformat())
    return seconds


def decode(seconds: int, zone: tzinfo | None = None) -> datetime:
    """Return an aware datetime for ``seconds`` with zero microseconds.

    The result is expressed in ``zone``, else in the configured display zone,
    else in the local zone.

    Raises:
        TimestampRangeError: ``seconds`` falls outside the storable range.
    """
    if not MIN_EPOCH_SECONDS <= seconds <= MAX_EPOCH_SECONDS:
        raise _out_of_range(seconds)
    instant = EPOCH + timedelta(seconds=seconds)
    return instant.astimezone(zone or constants.DISPLAY_TIMEZONE)


__all__ = ["EPOCH", "encode", "decode", "MIN_EPOCH_SECONDS", "MAX_EPOCH_SECONDS"]
