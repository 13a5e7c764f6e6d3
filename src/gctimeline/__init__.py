"""Unified GC log timeline: date and uptime stamps as one comparable value."""

from gctimeline.adapters.gc_log import read_date_time_stamps, runtime_duration
from gctimeline.core.aggregation import (
    Aggregation,
    Aggregator,
    DataPoint,
    HeapOccupancyAfterCollection,
)
from gctimeline.core.exceptions import DateTimeStampFormatError
from gctimeline.core.log_line import from_gc_log_line
from gctimeline.core.time import (
    EMPTY_DATE_TIME_STAMP,
    DateTimeStamp,
    compare_date_time_stamps,
)

__all__ = [
    "EMPTY_DATE_TIME_STAMP",
    "Aggregation",
    "Aggregator",
    "DataPoint",
    "DateTimeStamp",
    "DateTimeStampFormatError",
    "HeapOccupancyAfterCollection",
    "compare_date_time_stamps",
    "from_gc_log_line",
    "read_date_time_stamps",
    "runtime_duration",
]
