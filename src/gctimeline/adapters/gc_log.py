"""GC log adapter for resolving time stamps line by line.

This adapter walks raw GC log lines and yields a DateTimeStamp for every
line that carries a date or uptime prefix.
"""

import logging
from collections.abc import Iterable, Iterator

from gctimeline.core.exceptions import DateTimeStampFormatError
from gctimeline.core.log_line import from_gc_log_line
from gctimeline.core.time import DateTimeStamp

logger = logging.getLogger(__name__)


def read_date_time_stamps(
    lines: Iterable[str],
    strict: bool = True,
) -> Iterator[tuple[int, DateTimeStamp]]:
    """Resolve the DateTimeStamp of each line that has one.

    Args:
        lines: Raw GC log lines. Trailing newlines are ignored.
        strict: If True, malformed date or uptime tokens raise. If False,
            they are logged and the line is skipped.

    Yields:
        Tuples of (line number starting at 1, DateTimeStamp).

    Raises:
        DateTimeStampFormatError: In strict mode, for a malformed token.
    """
    for line_no, line in enumerate(lines, start=1):
        try:
            stamp = from_gc_log_line(line.rstrip("\r\n"))
        except DateTimeStampFormatError as e:
            if strict:
                raise
            logger.warning("Skipping line %d: %s", line_no, e)
            continue

        if not (stamp.has_time_stamp() or stamp.has_date_stamp()):
            logger.debug("No time stamp on line %d", line_no)
            continue
        yield line_no, stamp


def runtime_duration(stamps: Iterable[DateTimeStamp]) -> float:
    """Return the seconds between the earliest and latest stamp.

    When every stamp has a date stamp the span is measured on the wall
    clock, which keeps moving across JVM restarts. Otherwise it is measured
    on the time stamps. Returns 0.0 for fewer than two stamps.
    """
    stamps = list(stamps)
    if len(stamps) < 2:
        return 0.0
    if all(stamp.has_date_stamp() for stamp in stamps):
        date_times = [stamp.date_time for stamp in stamps]
        return (max(date_times) - min(date_times)).total_seconds()
    time_stamps = [stamp.time_stamp for stamp in stamps]
    return max(time_stamps) - min(time_stamps)
