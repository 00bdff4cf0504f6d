"""
Request and result data models for the Rehearsal Slot Finder.

QueryWindow is the 'Demand' (what the band asked for).
CandidateSlot is the 'Output' (a proposed rehearsal and who can make it).
"""

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, model_validator
from datetime import date as date_type, datetime, time as time_type, timedelta

from .member import Member


class QueryWindow(BaseModel):
    """
    A request for rehearsal times.
    The window spans whole days: from start_date 00:00 up to the end of end_date.
    """
    band_id: Optional[str] = Field(default=None, description="Band the request is for")
    start_date: date_type = Field(description="First day searched (inclusive)")
    end_date: date_type = Field(description="Last day searched (inclusive)")
    duration_minutes: int = Field(ge=30, le=480, description="Length of the rehearsal")
    minimum_members: int = Field(default=1, ge=1, description="Fewest attendees a slot may have")

    @model_validator(mode='after')
    def validate_dates(self):
        if self.end_date <= self.start_date:
            raise ValueError("End date must be after start date")
        return self

    @property
    def window_start(self) -> datetime:
        return datetime.combine(self.start_date, time_type.min)

    @property
    def window_end(self) -> datetime:
        """Exclusive upper bound (midnight after end_date)."""
        return datetime.combine(self.end_date + timedelta(days=1), time_type.min)

    @property
    def duration(self) -> timedelta:
        return timedelta(minutes=self.duration_minutes)

    def days(self) -> List[date_type]:
        """Every calendar date covered by the window."""
        count = (self.end_date - self.start_date).days + 1
        return [self.start_date + timedelta(days=i) for i in range(count)]

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "band_id": "band_01",
            "start_date": "2025-01-13",
            "end_date": "2025-01-19",
            "duration_minutes": 90,
            "minimum_members": 3
        }
    })


class CandidateSlot(BaseModel):
    """
    A proposed rehearsal window.
    available_members + unavailable_members always make up the full roster.
    """
    start: datetime
    end: datetime
    available_members: List[Member] = Field(default_factory=list)
    unavailable_members: List[Member] = Field(default_factory=list)

    @property
    def attendee_count(self) -> int:
        return len(self.available_members)

    @property
    def duration_minutes(self) -> int:
        return int((self.end - self.start).total_seconds() // 60)

    def to_response_item(self) -> dict:
        """Shape used in the `suggestedTimes` list of the HTTP response."""
        return {
            "startTime": self.start.isoformat(),
            "endTime": self.end.isoformat(),
            "availableMembers": [_member_json(m) for m in self.available_members],
            "unavailableMembers": [_member_json(m) for m in self.unavailable_members],
        }


def _member_json(member: Member) -> dict:
    return {
        "id": member.id,
        "firstName": member.first_name,
        "lastName": member.last_name,
        "email": member.email,
    }


def build_response(slots: List[CandidateSlot]) -> dict:
    """Full JSON body returned by the optimal-times route."""
    return {
        "message": "Optimal rehearsal times found",
        "suggestedTimes": [slot.to_response_item() for slot in slots],
    }
