"""
Slot Candidate Generator.

Walks the segment timeline and proposes rehearsal windows of the requested
length. Starts are only tried at segment boundaries, which bounds the search
to one candidate per boundary.
"""

from datetime import datetime, timedelta
from typing import List, Set

from models import Member, CandidateSlot
from .timeline import Segment


class CandidateGenerator:
    """
    Builds CandidateSlots from a timeline.
    A member only counts as available if free for the WHOLE candidate window.
    """

    def __init__(self, roster: List[Member], duration: timedelta, minimum_members: int, window_end: datetime):
        self.roster = roster
        self.duration = duration
        self.minimum_members = minimum_members
        self.window_end = window_end

    def generate(self, segments: List[Segment]) -> List[CandidateSlot]:
        """Candidates in chronological order of start."""
        candidates: List[CandidateSlot] = []

        if self.minimum_members > len(self.roster):
            return candidates

        for idx, segment in enumerate(segments):
            start = segment.start
            end = start + self.duration

            # Segments are ordered, so no later boundary can fit either
            if end > self.window_end:
                break

            if segment.free_count < self.minimum_members:
                continue

            available = self._free_across(segments, idx, end)
            if len(available) < self.minimum_members:
                continue

            candidates.append(self._build_slot(start, end, available))

        return candidates

    def _free_across(self, segments: List[Segment], first: int, end: datetime) -> Set[str]:
        """Intersection of free sets for every segment touched by [segments[first].start, end)."""
        available = set(segments[first].free_members)
        j = first + 1
        while j < len(segments) and segments[j].start < end:
            available &= segments[j].free_members
            if len(available) < self.minimum_members:
                break
            j += 1
        return available

    def _build_slot(self, start: datetime, end: datetime, available_ids: Set[str]) -> CandidateSlot:
        available = [m for m in self.roster if m.id in available_ids]
        unavailable = [m for m in self.roster if m.id not in available_ids]
        return CandidateSlot(
            start=start,
            end=end,
            available_members=available,
            unavailable_members=unavailable
        )
