"""
Availability data models for the Rehearsal Slot Finder.

This module defines the 'Supply' side of the finder:
1. One-time availability (an absolute start/end)
2. Recurring weekly availability (bounded by effective/expiry dates)
"""

from typing import Optional, Union, Literal, Annotated
from pydantic import BaseModel, Field, TypeAdapter, NaiveDatetime, model_validator, ConfigDict
from datetime import date, time


class OneTimeAvailability(BaseModel):
    """A single absolute window when a member can rehearse."""
    type: Literal["one-time"] = "one-time"
    id: Optional[str] = Field(default=None, description="Record identifier")
    user_id: str = Field(description="Owner of the record")
    start_time: NaiveDatetime = Field(description="Absolute local start, no UTC offset")
    end_time: NaiveDatetime = Field(description="Absolute local end, no UTC offset")

    priority: int = Field(default=1, description="Higher number means stronger preference")
    notes: Optional[str] = Field(default=None, max_length=255)

    @model_validator(mode='after')
    def validate_times(self):
        if self.end_time <= self.start_time:
            raise ValueError("End time must be after start time")
        return self

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "type": "one-time",
            "user_id": "user_bass_01",
            "start_time": "2025-01-14T19:30:00",
            "end_time": "2025-01-14T20:30:00",
            "priority": 2,
            "notes": "Only after the day job"
        }
    })


class RecurringAvailability(BaseModel):
    """
    A weekly window that repeats on one weekday.
    Applies from effective_date (inclusive) until expiry_date (exclusive), or forever.
    """
    type: Literal["recurring"] = "recurring"
    id: Optional[str] = Field(default=None, description="Record identifier")
    user_id: str = Field(description="Owner of the record")
    day_of_week: int = Field(ge=0, le=6, description="0=Sunday, 6=Saturday")
    start_time: time = Field(description="Start time of day")
    end_time: time = Field(description="End time of day")

    effective_date: date = Field(description="First date the pattern applies (inclusive)")
    expiry_date: Optional[date] = Field(default=None, description="Date the pattern stops applying (exclusive)")

    priority: int = Field(default=1, description="Higher number means stronger preference")
    notes: Optional[str] = Field(default=None, max_length=255)

    @model_validator(mode='after')
    def validate_window(self):
        if self.end_time <= self.start_time:
            raise ValueError("End time must be after start time")
        if self.expiry_date is not None and self.expiry_date <= self.effective_date:
            raise ValueError("Expiry date must be after effective date")
        return self

    def applies_on(self, day: date) -> bool:
        """Does this pattern produce an occurrence on `day`?"""
        # date.weekday() is Monday-based; shift to the Sunday-based numbering
        if (day.weekday() + 1) % 7 != self.day_of_week:
            return False
        if day < self.effective_date:
            return False
        return self.expiry_date is None or day < self.expiry_date

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "type": "recurring",
            "user_id": "user_guitar_01",
            "day_of_week": 1,
            "start_time": "18:00:00",
            "end_time": "20:00:00",
            "effective_date": "2025-01-01",
            "expiry_date": None,
            "priority": 1
        }
    })


AvailabilityRecord = Annotated[
    Union[OneTimeAvailability, RecurringAvailability],
    Field(discriminator="type")
]

availability_adapter = TypeAdapter(AvailabilityRecord)
