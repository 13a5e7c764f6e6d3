"""Aggregation of GC events into time series."""

from gctimeline.core.aggregation.aggregator import Aggregation, Aggregator, DataPoint
from gctimeline.core.aggregation.heap_occupancy import HeapOccupancyAfterCollection

__all__ = [
    "Aggregation",
    "Aggregator",
    "DataPoint",
    "HeapOccupancyAfterCollection",
]
