"""
Availability Normalizer.

Turns a member's stored availability records into concrete free intervals
inside the query window. One-time records are clipped, recurring records are
expanded day by day, and the result is merged so overlapping records never
double-count.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Sequence

from models import OneTimeAvailability, RecurringAvailability, QueryWindow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FreeInterval:
    """A half-open span [start, end) in which one member is free."""
    member_id: str
    start: datetime
    end: datetime


class AvailabilityNormalizer:
    """
    Expands availability records against a fixed query window.
    """

    def __init__(self, window: QueryWindow):
        self.window = window
        self.window_start = window.window_start
        self.window_end = window.window_end
        self.days = window.days()

    def normalize(self, member_id: str, records: Sequence) -> List[FreeInterval]:
        """
        Ordered, non-overlapping free intervals for one member.
        An empty list means the member is free nowhere in the window.
        """
        raw: List[FreeInterval] = []

        for record in records:
            if record.user_id != member_id:
                logger.warning(f"Skipping availability {record.id} owned by {record.user_id}, not {member_id}.")
                continue

            if isinstance(record, OneTimeAvailability):
                interval = self._clip(member_id, record.start_time, record.end_time)
                if interval:
                    raw.append(interval)
            elif isinstance(record, RecurringAvailability):
                raw.extend(self._expand_recurring(member_id, record))
            else:
                raise TypeError(f"Unsupported availability record: {type(record).__name__}")

        return merge_intervals(raw)

    def _expand_recurring(self, member_id: str, record: RecurringAvailability) -> List[FreeInterval]:
        """One interval per matching weekday between effective and expiry dates."""
        intervals = []
        for day in self.days:
            if not record.applies_on(day):
                continue
            start = datetime.combine(day, record.start_time)
            end = datetime.combine(day, record.end_time)
            interval = self._clip(member_id, start, end)
            if interval:
                intervals.append(interval)
        return intervals

    def _clip(self, member_id: str, start: datetime, end: datetime) -> Optional[FreeInterval]:
        """Clip a span to the window. Returns None if nothing is left."""
        if end <= self.window_start or start >= self.window_end:
            return None
        return FreeInterval(
            member_id=member_id,
            start=max(start, self.window_start),
            end=min(end, self.window_end)
        )


def merge_intervals(intervals: List[FreeInterval]) -> List[FreeInterval]:
    """
    Union of one member's intervals.
    Overlapping and touching intervals collapse into one.
    """
    if not intervals:
        return []

    ordered = sorted(intervals, key=lambda i: (i.start, i.end))
    merged = [ordered[0]]

    for current in ordered[1:]:
        last = merged[-1]
        if current.start <= last.end:
            if current.end > last.end:
                merged[-1] = FreeInterval(last.member_id, last.start, current.end)
        else:
            merged.append(current)

    return merged
