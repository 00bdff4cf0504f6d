"""
Rehearsal slot finding pipeline.
"""

from .config import FinderConfig
from .engine import RehearsalFinder, find_optimal_slots

__all__ = [
    "FinderConfig",
    "RehearsalFinder",
    "find_optimal_slots",
]
