"""NDJSON encoder for aggregated data points."""

import json
from collections.abc import Iterable

from gctimeline.core.aggregation.aggregator import DataPoint


def encode_data_points(points: Iterable[DataPoint]) -> str:
    """Encode data points to newline-delimited JSON.

    Args:
        points: An iterable of DataPoint objects.

    Returns:
        NDJSON string with one JSON object per line.
        Empty string if no points.
    """
    lines = []
    for point in points:
        stamp = point.date_time_stamp
        obj = {
            "gc_type": point.gc_type.value,
            "time_stamp": stamp.time_stamp,
            "date_time": (
                stamp.date_time.isoformat(timespec="milliseconds")
                if stamp.date_time is not None
                else None
            ),
            "value": point.value,
        }
        lines.append(json.dumps(obj))

    if not lines:
        return ""

    return "\n".join(lines) + "\n"
