"""Aggregators dispatch GC events to per-type handlers.

An Aggregator owns an Aggregation and registers one handler for each event
type it understands. Events of other types are ignored.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from gctimeline.core.events import GarbageCollectionType, JVMEvent
from gctimeline.core.time import DateTimeStamp

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=JVMEvent)
A = TypeVar("A", bound="Aggregation")


@dataclass(frozen=True)
class DataPoint:
    """A single value in a time series.

    Attributes:
        gc_type: The kind of collection the value came from.
        date_time_stamp: When the collection happened.
        value: The measured value.
    """

    gc_type: GarbageCollectionType
    date_time_stamp: DateTimeStamp
    value: float


class Aggregation:
    """Time series of data points, one series per collection type."""

    def __init__(self) -> None:
        self._series: dict[GarbageCollectionType, list[DataPoint]] = {}

    def add_data_point(
        self,
        gc_type: GarbageCollectionType,
        date_time_stamp: DateTimeStamp,
        value: float,
    ) -> None:
        """Record a value for a collection type at a point in time."""
        point = DataPoint(gc_type=gc_type, date_time_stamp=date_time_stamp, value=value)
        self._series.setdefault(gc_type, []).append(point)

    def gc_types(self) -> list[GarbageCollectionType]:
        """Return the collection types that have data, in first-seen order."""
        return list(self._series)

    def series(self, gc_type: GarbageCollectionType) -> list[DataPoint]:
        """Return the data points for a collection type ordered in time."""
        return sorted(self._series.get(gc_type, []), key=lambda p: p.date_time_stamp)

    def data_points(self) -> list[DataPoint]:
        """Return every data point ordered in time."""
        points = [p for series in self._series.values() for p in series]
        return sorted(points, key=lambda p: p.date_time_stamp)

    def is_empty(self) -> bool:
        """Return True if no data point has been recorded."""
        return not self._series


class Aggregator(Generic[A]):
    """Routes events to the handler registered for their type.

    Example:
        ```python
        aggregator = Aggregator(Aggregation())
        aggregator.register(G1GCPauseEvent, handle_pause)
        aggregator.receive(event)
        ```
    """

    def __init__(self, aggregation: A) -> None:
        self._aggregation = aggregation
        self._handlers: dict[type[JVMEvent], Callable[[Any], None]] = {}

    @property
    def aggregation(self) -> A:
        """The aggregation this aggregator feeds."""
        return self._aggregation

    def register(self, event_type: type[E], handler: Callable[[E], None]) -> None:
        """Register the handler called for events of event_type.

        Raises:
            TypeError: If handler is not callable.
            ValueError: If event_type already has a handler.
        """
        if not callable(handler):
            raise TypeError("handler must be callable")
        if event_type in self._handlers:
            raise ValueError(f"{event_type.__name__} is already registered")
        self._handlers[event_type] = handler

    def lookup(self, event_type: type[JVMEvent]) -> Callable[[Any], None] | None:
        """Return the handler for event_type or its nearest registered base."""
        for cls in event_type.__mro__:
            handler = self._handlers.get(cls)
            if handler is not None:
                return handler
        return None

    def receive(self, event: JVMEvent) -> None:
        """Pass an event to its handler, ignoring unregistered types."""
        handler = self.lookup(type(event))
        if handler is None:
            logger.debug(
                "%s has no handler for %s", type(self).__name__, type(event).__name__
            )
            return
        handler(event)
