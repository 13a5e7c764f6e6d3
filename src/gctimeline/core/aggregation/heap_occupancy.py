"""Heap occupancy after each collection."""

import logging

from gctimeline.core.aggregation.aggregator import Aggregation, Aggregator
from gctimeline.core.events import (
    G1GCPauseEvent,
    GenerationalGCPauseEvent,
    ShenandoahCycle,
    ZGCCycle,
)

logger = logging.getLogger(__name__)


class HeapOccupancyAfterCollection(Aggregator[Aggregation]):
    """Records heap occupancy after every pause or cycle.

    Generational and G1 pauses report heap occupancy after collection. ZGC
    cycles report live size at the end of reclaim. Shenandoah cycles are not
    supported yet and are skipped.
    """

    def __init__(self, aggregation: Aggregation | None = None) -> None:
        super().__init__(aggregation if aggregation is not None else Aggregation())
        self._warned_shenandoah = False
        self.register(GenerationalGCPauseEvent, self._extract_pause_occupancy)
        self.register(G1GCPauseEvent, self._extract_pause_occupancy)
        self.register(ZGCCycle, self._extract_zgc_occupancy)
        self.register(ShenandoahCycle, self._skip_shenandoah)

    def _extract_pause_occupancy(
        self, event: GenerationalGCPauseEvent | G1GCPauseEvent
    ) -> None:
        self.aggregation.add_data_point(
            event.gc_type,
            event.date_time_stamp,
            event.heap.occupancy_after_collection,
        )

    def _extract_zgc_occupancy(self, event: ZGCCycle) -> None:
        self.aggregation.add_data_point(
            event.gc_type, event.date_time_stamp, event.live.reclaim_end
        )

    def _skip_shenandoah(self, event: ShenandoahCycle) -> None:
        # Occupancy after a Shenandoah cycle is not resolved yet.
        if not self._warned_shenandoah:
            logger.warning(
                "Heap occupancy after Shenandoah cycles is not supported; "
                "skipping cycle at %s",
                event.date_time_stamp,
            )
            self._warned_shenandoah = True
