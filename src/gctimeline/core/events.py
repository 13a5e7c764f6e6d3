"""GC events that carry a resolved DateTimeStamp.

Events are built by collector-specific parsers. Only the fields that
aggregators read are modelled here.
"""

from dataclasses import dataclass
from enum import Enum

from gctimeline.core.time import DateTimeStamp


class GarbageCollectionType(Enum):
    """Kind of collection an event reports."""

    YOUNG = "Young"
    FULL_GC = "Full GC"
    G1GC_YOUNG = "G1GC Young"
    G1GC_MIXED = "G1GC Mixed"
    G1GC_FULL = "G1GC Full"
    ZGC_CYCLE = "ZGC Cycle"
    SHENANDOAH_CYCLE = "Shenandoah Cycle"


@dataclass(frozen=True)
class MemoryPoolSummary:
    """Occupancy and size of a memory pool around a collection, in KB.

    Attributes:
        occupancy_before_collection: Used space before the collection.
        size_before_collection: Committed size before the collection.
        occupancy_after_collection: Used space after the collection.
        size_after_collection: Committed size after the collection.
    """

    occupancy_before_collection: int
    size_before_collection: int
    occupancy_after_collection: int
    size_after_collection: int


@dataclass(frozen=True)
class ZGCReclaimSummary:
    """Live bytes at the start and end of a ZGC reclaim phase, in KB."""

    reclaim_start: int
    reclaim_end: int


@dataclass(frozen=True, kw_only=True)
class JVMEvent:
    """Base class for anything found in a GC log.

    Attributes:
        date_time_stamp: When the event started.
        gc_type: The kind of collection.
        duration: Length of the event in decimal seconds.
    """

    date_time_stamp: DateTimeStamp
    gc_type: GarbageCollectionType
    duration: float = 0.0


@dataclass(frozen=True, kw_only=True)
class GenerationalGCPauseEvent(JVMEvent):
    """Stop-the-world pause from a generational collector."""

    heap: MemoryPoolSummary


@dataclass(frozen=True, kw_only=True)
class G1GCPauseEvent(JVMEvent):
    """Stop-the-world pause from G1."""

    heap: MemoryPoolSummary


@dataclass(frozen=True, kw_only=True)
class ZGCCycle(JVMEvent):
    """A concurrent ZGC cycle."""

    live: ZGCReclaimSummary


@dataclass(frozen=True, kw_only=True)
class ShenandoahCycle(JVMEvent):
    """A concurrent Shenandoah cycle."""
