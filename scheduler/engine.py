"""
The Rehearsal Slot Finding Engine.

This module wires the pipeline together:
1. Normalize - expand every member's availability into free intervals.
2. Intersect - sweep those intervals into a timeline of "who is free".
3. Generate - propose windows of the requested duration at segment boundaries.
4. Rank - most attendees first, earliest first, top K only.

The engine is a pure function of its inputs: no I/O, no shared state.
"""

import logging
from typing import Dict, List, Optional, Sequence

from models import Member, QueryWindow, CandidateSlot
from .config import FinderConfig
from .normalizer import AvailabilityNormalizer, FreeInterval
from .timeline import build_timeline
from .candidates import CandidateGenerator
from .ranking import SlotRanker

logger = logging.getLogger(__name__)


class RehearsalFinder:
    """
    Main finder engine.
    Ingests a Roster and its Availability, outputs ranked CandidateSlots.
    """

    def __init__(self, config: Optional[FinderConfig] = None):
        self.config = config or FinderConfig()
        self.ranker = SlotRanker(top_k=self.config.top_k)

    def find(
        self,
        roster: Sequence[Member],
        availability_by_member: Dict[str, Sequence],
        window: QueryWindow
    ) -> List[CandidateSlot]:
        """
        Execute the finder pipeline for one request.
        """
        self._check_window(window)

        members = self._unique_roster(roster)
        if not members:
            logger.info("Empty roster, no rehearsal slots to propose.")
            return []

        span = window.window_end - window.window_start
        if window.duration > span:
            logger.info(f"Duration {window.duration_minutes}m exceeds the query window, nothing fits.")
            return []

        logger.info(
            f"Finding rehearsal slots for band {window.band_id or '-'}: "
            f"{len(members)} members, {window.start_date} -> {window.end_date}, "
            f"{window.duration_minutes}m, min {window.minimum_members}"
        )

        roster_ids = {m.id for m in members}
        for member_id in availability_by_member:
            if member_id not in roster_ids:
                logger.debug(f"Ignoring availability for {member_id}: not on the roster.")

        # 1. Normalize
        normalizer = AvailabilityNormalizer(window)
        intervals: Dict[str, List[FreeInterval]] = {}
        for member in members:
            intervals[member.id] = normalizer.normalize(member.id, availability_by_member.get(member.id, []))
        logger.debug(f"Normalized {sum(len(v) for v in intervals.values())} free intervals.")

        # 2. Intersect
        segments = build_timeline(intervals, window.window_start, window.window_end)
        logger.debug(f"Timeline has {len(segments)} segments.")

        # 3. Generate
        generator = CandidateGenerator(
            roster=members,
            duration=window.duration,
            minimum_members=window.minimum_members,
            window_end=window.window_end
        )
        candidates = generator.generate(segments)
        logger.debug(f"Generated {len(candidates)} candidate slots.")

        # 4. Rank
        ranked = self.ranker.rank(candidates)
        logger.info(f"Returning {len(ranked)} of {len(candidates)} candidate slots.")
        return ranked

    def _check_window(self, window: QueryWindow) -> None:
        """Re-check the request contract for windows built without validation."""
        if window.duration_minutes <= 0:
            raise ValueError("Duration must be positive")
        if window.end_date <= window.start_date:
            raise ValueError("End date must be after start date")
        if window.minimum_members < 1:
            raise ValueError("Minimum members must be at least 1")

    @staticmethod
    def _unique_roster(roster: Sequence[Member]) -> List[Member]:
        """Roster keyed by id, sorted so results do not depend on input order."""
        by_id = {}
        for member in roster:
            by_id.setdefault(member.id, member)
        return [by_id[k] for k in sorted(by_id)]


def find_optimal_slots(
    roster: Sequence[Member],
    availability_by_member: Dict[str, Sequence],
    window: QueryWindow,
    config: Optional[FinderConfig] = None
) -> List[CandidateSlot]:
    """Convenience wrapper: one finder, one request."""
    return RehearsalFinder(config).find(roster, availability_by_member, window)
