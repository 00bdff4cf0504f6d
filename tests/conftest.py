"""
Shared fixtures for the Rehearsal Slot Finder tests.

Calendar anchors used throughout (January 2025):
    Sun 12, Mon 13, Tue 14, ..., Sun 19.
Day-of-week numbering is Sunday-based: Sunday=0, Monday=1, Tuesday=2.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest
from datetime import date

from models import Member, QueryWindow

MONDAY = 1
TUESDAY = 2

WEEK_START = date(2025, 1, 13)  # Monday
WEEK_END = date(2025, 1, 19)    # Sunday


def make_member(member_id: str) -> Member:
    return Member(
        id=member_id,
        first_name=member_id.capitalize(),
        last_name="Player",
        email=f"{member_id}@example.com"
    )


@pytest.fixture
def alice():
    return make_member("alice")


@pytest.fixture
def bob():
    return make_member("bob")


@pytest.fixture
def carol():
    return make_member("carol")


@pytest.fixture
def week_window():
    """Mon 13 - Sun 19 January 2025, one hour, anyone counts."""
    return QueryWindow(
        band_id="band_01",
        start_date=WEEK_START,
        end_date=WEEK_END,
        duration_minutes=60,
        minimum_members=1
    )
