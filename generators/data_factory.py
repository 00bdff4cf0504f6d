"""
Sample data generator for the Rehearsal Slot Finder.
STRATEGY: Seeded randomness, so the same seed always yields the same band.
Every generated record goes through the pydantic models, so output is always valid.
"""

import logging
import random
from typing import List, Tuple, Dict
from datetime import date, time, datetime, timedelta
from pydantic import ValidationError

from models import (
    Member,
    MemberRole,
    BandRole,
    OneTimeAvailability,
    RecurringAvailability
)

logger = logging.getLogger(__name__)

FIRST_NAMES = ["Alex", "Sam", "Jordan", "Robin", "Kim", "Charlie", "Jamie", "Morgan", "Taylor", "Casey"]
LAST_NAMES = ["Rivera", "Okafor", "Lindqvist", "Moreau", "Tanaka", "Kowalski", "Haddad", "Novak"]

# Evening and weekend windows typical for hobby bands (start hour, end hour)
WEEKDAY_WINDOWS = [(17, 19), (18, 20), (18, 21), (19, 22), (20, 23)]
WEEKEND_WINDOWS = [(10, 13), (12, 16), (14, 18), (16, 20)]


class DataGenerator:
    def __init__(self, seed: int = 42):
        self.seed = seed
        self.rng = random.Random(seed)

    def generate_band(self, band_id: str = "band_01", member_count: int = 5) -> Tuple[List[Member], List[MemberRole]]:
        """
        A roster plus its join records. The first member is the band admin.
        """
        members = []
        roles = []
        for i in range(member_count):
            first = self.rng.choice(FIRST_NAMES)
            last = self.rng.choice(LAST_NAMES)
            member = Member(
                id=f"user_{i:03d}",
                first_name=first,
                last_name=last,
                email=f"{first.lower()}.{last.lower()}{i}@example.com"
            )
            members.append(member)
            roles.append(MemberRole(
                band_id=band_id,
                user_id=member.id,
                role=BandRole.ADMIN if i == 0 else BandRole.MEMBER
            ))

        logger.info(f"Generated band {band_id} with {len(members)} members.")
        return members, roles

    def generate_availability(
        self,
        members: List[Member],
        start_date: date,
        weeks: int = 2,
        recurring_per_member: int = 3,
        one_time_per_member: int = 1
    ) -> Dict[str, List]:
        """
        Availability keyed by member id: a few recurring evenings/weekends plus ad-hoc one-time slots.
        Some recurring patterns start mid-range or expire early to exercise the date bounds.
        """
        availability: Dict[str, List] = {}

        for member in members:
            records = []
            for n in range(recurring_per_member):
                record = self._recurring(member.id, f"{member.id}_r{n}", start_date, weeks)
                if record:
                    records.append(record)
            for n in range(one_time_per_member):
                record = self._one_time(member.id, f"{member.id}_o{n}", start_date, weeks)
                if record:
                    records.append(record)
            availability[member.id] = records

        total = sum(len(v) for v in availability.values())
        logger.info(f"Generated {total} availability records for {len(members)} members.")
        return availability

    def _recurring(self, user_id: str, record_id: str, start_date: date, weeks: int):
        day_of_week = self.rng.randint(0, 6)
        # 0 and 6 are Sunday and Saturday
        windows = WEEKEND_WINDOWS if day_of_week in (0, 6) else WEEKDAY_WINDOWS
        start_h, end_h = self.rng.choice(windows)

        effective = start_date - timedelta(days=self.rng.randint(0, 30))
        if self.rng.random() < 0.2:
            effective = start_date + timedelta(days=self.rng.randint(1, 7 * weeks - 1))

        expiry = None
        if self.rng.random() < 0.2:
            expiry = effective + timedelta(days=self.rng.randint(7, 7 * weeks + 7))

        try:
            return RecurringAvailability(
                id=record_id,
                user_id=user_id,
                day_of_week=day_of_week,
                start_time=time(start_h, 0),
                end_time=time(end_h, 0),
                effective_date=effective,
                expiry_date=expiry,
                priority=self.rng.randint(1, 3)
            )
        except ValidationError as e:
            logger.warning(f"Skipping invalid generated record {record_id}: {e.json()}")
            return None

    def _one_time(self, user_id: str, record_id: str, start_date: date, weeks: int):
        day = start_date + timedelta(days=self.rng.randint(0, 7 * weeks - 1))
        start_h = self.rng.randint(9, 20)
        length = self.rng.choice([60, 90, 120, 180])
        start = datetime.combine(day, time(start_h, self.rng.choice([0, 30])))

        try:
            return OneTimeAvailability(
                id=record_id,
                user_id=user_id,
                start_time=start,
                end_time=start + timedelta(minutes=length),
                priority=self.rng.randint(1, 3),
                notes="Ad-hoc"
            )
        except ValidationError as e:
            logger.warning(f"Skipping invalid generated record {record_id}: {e.json()}")
            return None
