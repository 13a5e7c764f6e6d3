"""Extract a DateTimeStamp from the prefix of a GC log line.

Two prefix dialects are recognized:

- Unified logging (JEP 158), where the date and uptime are the first two
  bracketed decorators, e.g. ``[2021-01-01T00:00:00.000+0000][12.345s]``.
- Pre-unified logging, e.g. ``2017-09-07T09:00:12.795+0200: 0.716: ``.
"""

import re

from gctimeline.core.time import DATE, EMPTY_DATE_TIME_STAMP, TIME, DateTimeStamp


UNIFIED_DATE_TIMESTAMP = re.compile(
    rf"""
    ^
    (?:\[(?P<date>{DATE})\])?       # [2021-01-01T00:00:00.000+0000]
    (?:\[(?P<uptime>{TIME})s\])?    # [12.345s]
    """,
    re.VERBOSE,
)

PREUNIFIED_DATE_TIMESTAMP = re.compile(
    rf"""
    ^
    (?:(?P<date>{DATE}):[ ])?        # 2017-09-07T09:00:12.795+0200:
    (?P<uptime>{TIME}):[ ]           # 0.716:
    """,
    re.VERBOSE,
)


def is_unified(line: str) -> bool:
    """Return True if the line starts with a unified logging decorator."""
    return line.startswith("[")


def from_gc_log_line(line: str) -> DateTimeStamp:
    """Resolve the date and time stamp at the start of a GC log line.

    Args:
        line: One raw line from a GC log.

    Returns:
        The DateTimeStamp for the line, or EMPTY_DATE_TIME_STAMP when no
        date or uptime prefix is present.

    Raises:
        DateTimeStampFormatError: If a matched date or uptime token cannot
            be interpreted.
    """
    pattern = UNIFIED_DATE_TIMESTAMP if is_unified(line) else PREUNIFIED_DATE_TIMESTAMP
    match = pattern.match(line)
    if match is None:
        return EMPTY_DATE_TIME_STAMP

    date, uptime = match.group("date", "uptime")
    if date is None and uptime is None:
        return EMPTY_DATE_TIME_STAMP
    return DateTimeStamp.from_strings(date, uptime)
