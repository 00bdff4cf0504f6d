"""
Interval Intersection Engine.

Sweeps every member's free intervals into a single timeline of disjoint
segments. Each segment knows exactly which members are free for all of it.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, FrozenSet, List, Tuple

from .normalizer import FreeInterval

# Sort order for events sharing a timestamp: ends close before starts open,
# so back-to-back intervals never look like they overlap.
END_EVENT = 0
START_EVENT = 1


@dataclass(frozen=True)
class Segment:
    """A span [start, end) with a constant set of free members."""
    start: datetime
    end: datetime
    free_members: FrozenSet[str]

    @property
    def free_count(self) -> int:
        return len(self.free_members)


def build_timeline(
    intervals_by_member: Dict[str, List[FreeInterval]],
    window_start: datetime,
    window_end: datetime
) -> List[Segment]:
    """
    Sweep-line over interval endpoints.
    The returned segments tile [window_start, window_end) exactly; spans where
    nobody is free are kept as segments with an empty set.
    """
    events: List[Tuple[datetime, int, str]] = []
    for member_id, intervals in intervals_by_member.items():
        for interval in intervals:
            events.append((interval.start, START_EVENT, member_id))
            events.append((interval.end, END_EVENT, member_id))
    events.sort()

    segments: List[Segment] = []
    free: set = set()
    cursor = window_start
    i = 0

    while i < len(events):
        stamp = events[i][0]
        if stamp > cursor:
            _append_segment(segments, cursor, stamp, frozenset(free))
            cursor = stamp

        # Apply every event at this instant before emitting the next segment
        while i < len(events) and events[i][0] == stamp:
            _, kind, member_id = events[i]
            if kind == END_EVENT:
                free.discard(member_id)
            else:
                free.add(member_id)
            i += 1

    if cursor < window_end:
        _append_segment(segments, cursor, window_end, frozenset(free))

    return segments


def _append_segment(segments: List[Segment], start: datetime, end: datetime, free: FrozenSet[str]) -> None:
    """Append, coalescing with the previous segment when nothing changed."""
    if segments and segments[-1].free_members == free and segments[-1].end == start:
        segments[-1] = Segment(segments[-1].start, end, free)
    else:
        segments.append(Segment(start, end, free))
