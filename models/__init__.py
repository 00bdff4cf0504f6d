"""
Data models package for the Rehearsal Slot Finder.

This package exports the three core pillars of the data architecture:
1. People (Member, MemberRole)
2. Supply (One-time and Recurring availability)
3. Demand & Output (QueryWindow, CandidateSlot)
"""

from .member import (
    Member,
    MemberRole,
    BandRole,
    roster_for_band
)

from .availability import (
    AvailabilityRecord,
    OneTimeAvailability,
    RecurringAvailability,
    availability_adapter
)

from .schedule import (
    QueryWindow,
    CandidateSlot,
    build_response
)

__all__ = [
    # --- People ---
    "Member",
    "MemberRole",
    "BandRole",
    "roster_for_band",

    # --- Availability Models ---
    "AvailabilityRecord",
    "OneTimeAvailability",
    "RecurringAvailability",
    "availability_adapter",

    # --- Request & Output Models ---
    "QueryWindow",
    "CandidateSlot",
    "build_response",
]
