"""Date and time stamps read from GC logs.

A GC log line may carry a wall-clock date stamp, a JVM uptime time stamp,
both, or neither. DateTimeStamp unifies these into one comparable value.

The time stamp is measured from an epoch. When the log has uptime stamps the
epoch is JVM start; when it only has date stamps the epoch is
1970-01-01T00:00:00Z and the time stamp is derived from the date. All
calculations use the time stamp, so logs with uptime stamps give the most
reliable results.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from gctimeline.core.exceptions import DateTimeStampFormatError

# Time stamp carried by the empty value.
EMPTY_TIME_STAMP = -1.0

DECIMAL_POINT = r"[.,]"
# ISO 8601 with milliseconds and a compact zone offset,
# e.g. 2017-09-07T09:00:12.795+0200
DATE = r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}[+\-]\d{4}"
TIME = rf"\d+{DECIMAL_POINT}\d+"

ISO8601_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%z"

_DATE_RE = re.compile(DATE)
_TIME_RE = re.compile(TIME)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def date_from_string(iso8601_date_time: str | None) -> datetime | None:
    """Parse an ISO 8601 date time such as ``2017-09-07T09:00:12.795+0200``.

    Args:
        iso8601_date_time: Date text, or None.

    Returns:
        A timezone-aware datetime, or None when no text was given.

    Raises:
        DateTimeStampFormatError: If the text is not a valid date time.
    """
    if iso8601_date_time is None:
        return None
    message = f"Invalid ISO 8601 date time: {iso8601_date_time!r}"
    if _DATE_RE.fullmatch(iso8601_date_time) is None:
        raise DateTimeStampFormatError(message, iso8601_date_time)
    try:
        return datetime.strptime(iso8601_date_time, ISO8601_DATE_FORMAT)
    except ValueError as e:
        raise DateTimeStampFormatError(message, iso8601_date_time) from e


def time_stamp_from_string(decimal_seconds: str | None) -> float:
    """Parse decimal seconds written with either ``.`` or ``,`` as separator.

    Args:
        decimal_seconds: Seconds text, or None.

    Returns:
        The seconds as a float, or EMPTY_TIME_STAMP when no text was given.

    Raises:
        DateTimeStampFormatError: If the text is not a number.
    """
    if decimal_seconds is None:
        return EMPTY_TIME_STAMP
    if _TIME_RE.fullmatch(decimal_seconds) is None:
        raise DateTimeStampFormatError(
            f"Invalid time stamp: {decimal_seconds!r}", decimal_seconds
        )
    return float(decimal_seconds.replace(",", "."))


def _epoch_seconds(date_time: datetime) -> float:
    delta = date_time - _EPOCH
    return delta.days * 86_400 + delta.seconds + delta.microseconds / 1_000_000


def _time_stamp_value(time_stamp: float) -> float:
    return 0.0 if math.isnan(time_stamp) else time_stamp


@dataclass(frozen=True)
class DateTimeStamp:
    """A point in time read from a GC log.

    All constructors end up here. When a date time is given and the time
    stamp is NaN or negative, the time stamp is derived from the date time
    once, at construction. Afterwards the two fields are independent.

    Attributes:
        date_time: Wall-clock date stamp, timezone-aware, or None.
        time_stamp: Decimal seconds. Never NaN after construction.
    """

    date_time: datetime | None = None
    time_stamp: float = math.nan

    def __post_init__(self) -> None:
        if self.date_time is not None and self.date_time.utcoffset() is None:
            raise ValueError("date_time must be timezone-aware")
        if self.date_time is not None and (
            math.isnan(self.time_stamp) or self.time_stamp < 0.0
        ):
            object.__setattr__(self, "time_stamp", _epoch_seconds(self.date_time))
        else:
            object.__setattr__(
                self, "time_stamp", _time_stamp_value(float(self.time_stamp))
            )

    @classmethod
    def _offset(cls, date_time: datetime | None, time_stamp: float) -> DateTimeStamp:
        # Arithmetic results keep their time stamp even when it is negative.
        stamp = cls.__new__(cls)
        object.__setattr__(stamp, "date_time", date_time)
        object.__setattr__(stamp, "time_stamp", time_stamp)
        return stamp

    @classmethod
    def from_time_stamp(cls, time_stamp: float) -> DateTimeStamp:
        """Create a DateTimeStamp from decimal seconds alone."""
        return cls(None, time_stamp)

    @classmethod
    def from_date_time(cls, date_time: datetime) -> DateTimeStamp:
        """Create a DateTimeStamp whose time stamp is derived from the date."""
        return cls(date_time, math.nan)

    @classmethod
    def from_date_time_and_time_stamp(
        cls, date_time: datetime | None, time_stamp: float
    ) -> DateTimeStamp:
        """Create a DateTimeStamp from a date time and decimal seconds.

        The supplied time stamp is used as-is unless it is NaN or negative,
        in which case it is derived from the date time. No check is made
        that the two agree.
        """
        return cls(date_time, time_stamp)

    @classmethod
    def from_iso8601(cls, iso8601_date_time: str | None) -> DateTimeStamp:
        """Create a DateTimeStamp by parsing an ISO 8601 date time."""
        return cls(date_from_string(iso8601_date_time), math.nan)

    @classmethod
    def from_strings(
        cls, iso8601_date_time: str | None, decimal_seconds: str | None
    ) -> DateTimeStamp:
        """Create a DateTimeStamp from raw date and seconds text.

        Args:
            iso8601_date_time: Date text, or None.
            decimal_seconds: Seconds text using ``.`` or ``,``, or None.

        Raises:
            DateTimeStampFormatError: If either text is malformed.
        """
        return cls(
            date_from_string(iso8601_date_time),
            time_stamp_from_string(decimal_seconds),
        )

    def has_date_stamp(self) -> bool:
        """Return True if there is a wall-clock date stamp."""
        return self.date_time is not None

    def has_date_time(self) -> bool:
        """Return True if there is a wall-clock date stamp."""
        return self.date_time is not None

    def has_time_stamp(self) -> bool:
        """Return True if the time stamp is usable."""
        return not (
            self.time_stamp == EMPTY_TIME_STAMP or math.isnan(self.time_stamp)
        )

    def is_empty(self) -> bool:
        """Return True if this is the value for "no time stamp found"."""
        return self == EMPTY_DATE_TIME_STAMP

    def to_epoch_in_millis(self) -> float:
        """Return the date stamp in epoch milliseconds, -1.0 if there is none."""
        if self.date_time is None:
            return -1.0
        delta = self.date_time - _EPOCH
        return (delta.days * 86_400 + delta.seconds) * 1000.0 + (
            delta.microseconds / 1000.0
        )

    def compare(self, other_date: datetime | None) -> int:
        """Compare the date stamp with another date.

        A missing date sorts after any date.

        Returns:
            1, 0 or -1 if this date is after, the same as, or before the
            other date.
        """
        if self.date_time is not None and other_date is not None:
            if self.date_time > other_date:
                return 1
            if self.date_time < other_date:
                return -1
            return 0
        if self.date_time is not None:
            return -1
        if other_date is not None:
            return 1
        return 0

    def before(self, other: DateTimeStamp | float) -> bool:
        """Return True if this comes before the other.

        Against a DateTimeStamp this is ``not self.after(other)``, so equal
        stamps count as before. Against seconds the comparison is strict.
        """
        if isinstance(other, DateTimeStamp):
            return not self.after(other)
        return self.time_stamp < _time_stamp_value(other)

    def after(self, other: DateTimeStamp | float) -> bool:
        """Return True if this comes after the other.

        Against a DateTimeStamp, the date stamps decide when both exist and
        differ. Otherwise the time stamps are compared.
        """
        if isinstance(other, DateTimeStamp):
            if self.has_date_stamp() and other.has_date_stamp():
                comparison = self.compare(other.date_time)
                if comparison != 0:
                    return comparison > 0
            return self.after(other.time_stamp)
        return self.time_stamp > _time_stamp_value(other)

    def add(self, offset_in_decimal_seconds: float) -> DateTimeStamp:
        """Return a new DateTimeStamp offset from this one.

        A NaN offset counts as zero. The date stamp and time stamp advance
        independently by the same offset.
        """
        offset = _time_stamp_value(offset_in_decimal_seconds)
        if self.date_time is None:
            return DateTimeStamp._offset(None, self.time_stamp + offset)
        fraction, seconds = math.modf(offset)
        date_time = self.date_time + timedelta(
            seconds=int(seconds), microseconds=fraction * 1_000_000
        )
        return DateTimeStamp._offset(date_time, self.time_stamp + offset)

    def minus(self, other: DateTimeStamp | float) -> DateTimeStamp | float:
        """Subtract an offset or another DateTimeStamp.

        Args:
            other: Decimal seconds, or another DateTimeStamp.

        Returns:
            A new DateTimeStamp when given seconds. The difference between
            the time stamps, in seconds, when given a DateTimeStamp.
        """
        if isinstance(other, DateTimeStamp):
            return self.time_stamp - other.time_stamp
        return self.add(-other)

    def time_span_in_minutes(self, other: DateTimeStamp) -> float:
        """Return the difference between time stamps in minutes."""
        return (self.time_stamp - other.time_stamp) / 60.0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTimeStamp):
            return NotImplemented
        return compare_date_time_stamps(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTimeStamp):
            return NotImplemented
        return compare_date_time_stamps(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTimeStamp):
            return NotImplemented
        return compare_date_time_stamps(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTimeStamp):
            return NotImplemented
        return compare_date_time_stamps(self, other) >= 0

    def __str__(self) -> str:
        if self.date_time is None:
            return f"@{self.time_stamp:.3f}"
        return (
            f"{self.date_time.isoformat(timespec='milliseconds')}"
            f"@{self.time_stamp:.3f}"
        )


def compare_date_time_stamps(
    first: DateTimeStamp | None, second: DateTimeStamp | None
) -> int:
    """Order two stamps for sorting mixed GC log events.

    None sorts last, then stamps without a date stamp. Within each group
    stamps are ordered by time stamp, then by date stamp.

    Returns:
        A negative number, zero, or a positive number as first is less
        than, equal to, or greater than second.
    """
    if first is None or second is None:
        return (first is None) - (second is None)
    if first.has_date_stamp() != second.has_date_stamp():
        return -1 if first.has_date_stamp() else 1
    if first.time_stamp != second.time_stamp:
        return -1 if first.time_stamp < second.time_stamp else 1
    return first.compare(second.date_time)


EMPTY_DATE_TIME_STAMP = DateTimeStamp(None, EMPTY_TIME_STAMP)
