"""
Member and Band membership models for the Rehearsal Slot Finder.

Membership is modelled as a plain join record (MemberRole) rather than an
ORM association, so a band's roster is just a filter over those records.
"""

from enum import Enum
from typing import List, Iterable
from pydantic import BaseModel, Field, ConfigDict


class BandRole(str, Enum):
    """Role of a user inside a band."""
    ADMIN = "admin"
    MEMBER = "member"


class Member(BaseModel):
    """
    A band member as seen by the finder.
    Only `id` matters to the engine; the rest is carried for display.
    """
    id: str = Field(description="Unique user identifier")
    first_name: str = Field(min_length=1, description="Given name")
    last_name: str = Field(min_length=1, description="Family name")
    email: str = Field(default="", description="Contact email")

    model_config = ConfigDict(frozen=True, json_schema_extra={
        "example": {
            "id": "user_drums_01",
            "first_name": "Ringo",
            "last_name": "Starr",
            "email": "ringo@example.com"
        }
    })

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class MemberRole(BaseModel):
    """Join record linking a user to a band with a role."""
    band_id: str
    user_id: str
    role: BandRole = Field(default=BandRole.MEMBER)

    model_config = ConfigDict(frozen=True)


def roster_for_band(band_id: str, members: Iterable[Member], roles: Iterable[MemberRole]) -> List[Member]:
    """
    Resolve the roster of a band from its join records.
    Members are returned sorted by id; join records pointing at unknown users are ignored.
    """
    member_ids = {r.user_id for r in roles if r.band_id == band_id}
    return sorted((m for m in members if m.id in member_ids), key=lambda m: m.id)
