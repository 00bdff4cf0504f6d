"""
Ranking & Selection for the Rehearsal Slot Finder.

Orders valid candidates so the best-attended rehearsal comes first.
Unlike the generator (binary: enough members or not), this decides which of
the valid slots the band actually gets to see.
"""

from typing import List, Tuple
from datetime import datetime

from models import CandidateSlot


class SlotRanker:
    """
    Sorts candidates by attendee count (most first), then by start (earliest first).
    """

    def __init__(self, top_k: int = 10):
        if top_k < 1:
            raise ValueError("top_k must be at least 1")
        self.top_k = top_k

    def rank(self, candidates: List[CandidateSlot]) -> List[CandidateSlot]:
        """Return at most `top_k` candidates, best first."""
        # sorted() is stable, so equal keys keep chronological order
        ordered = sorted(candidates, key=self.sort_key)
        return ordered[:self.top_k]

    @staticmethod
    def sort_key(slot: CandidateSlot) -> Tuple[int, datetime]:
        return (-slot.attendee_count, slot.start)
