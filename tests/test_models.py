"""
Validation rules of the data models.
"""

import pytest
from datetime import date, time, datetime, timezone
from pydantic import ValidationError

from models import (
    OneTimeAvailability,
    RecurringAvailability,
    QueryWindow,
    CandidateSlot,
    MemberRole,
    BandRole,
    availability_adapter,
    roster_for_band,
    build_response
)
from conftest import make_member, MONDAY


class TestAvailabilityValidation:

    def test_one_time_end_must_follow_start(self):
        with pytest.raises(ValidationError):
            OneTimeAvailability(
                user_id="alice",
                start_time=datetime(2025, 1, 14, 20, 0),
                end_time=datetime(2025, 1, 14, 20, 0)
            )

    def test_recurring_end_must_follow_start(self):
        with pytest.raises(ValidationError):
            RecurringAvailability(
                user_id="alice",
                day_of_week=MONDAY,
                start_time=time(20, 0),
                end_time=time(18, 0),
                effective_date=date(2025, 1, 1)
            )

    def test_expiry_must_follow_effective(self):
        with pytest.raises(ValidationError):
            RecurringAvailability(
                user_id="alice",
                day_of_week=MONDAY,
                start_time=time(18, 0),
                end_time=time(20, 0),
                effective_date=date(2025, 1, 13),
                expiry_date=date(2025, 1, 13)
            )

    def test_day_of_week_range(self):
        with pytest.raises(ValidationError):
            RecurringAvailability(
                user_id="alice",
                day_of_week=7,
                start_time=time(18, 0),
                end_time=time(20, 0),
                effective_date=date(2025, 1, 1)
            )

    def test_notes_length_limit(self):
        with pytest.raises(ValidationError):
            OneTimeAvailability(
                user_id="alice",
                start_time=datetime(2025, 1, 14, 19, 0),
                end_time=datetime(2025, 1, 14, 20, 0),
                notes="x" * 256
            )

    def test_day_of_week_is_sunday_based(self):
        sunday_rule = RecurringAvailability(
            user_id="alice",
            day_of_week=0,
            start_time=time(10, 0),
            end_time=time(12, 0),
            effective_date=date(2025, 1, 1)
        )
        assert sunday_rule.applies_on(date(2025, 1, 12))      # Sunday
        assert not sunday_rule.applies_on(date(2025, 1, 13))  # Monday

    def test_applies_on_respects_date_bounds(self):
        rule = RecurringAvailability(
            user_id="alice",
            day_of_week=MONDAY,
            start_time=time(18, 0),
            end_time=time(20, 0),
            effective_date=date(2025, 1, 13),
            expiry_date=date(2025, 1, 27)
        )
        assert not rule.applies_on(date(2025, 1, 6))
        assert rule.applies_on(date(2025, 1, 13))
        assert rule.applies_on(date(2025, 1, 20))
        assert not rule.applies_on(date(2025, 1, 27))

    def test_adapter_picks_variant_from_type(self):
        one_time = availability_adapter.validate_python({
            "type": "one-time",
            "user_id": "alice",
            "start_time": "2025-01-14T19:30:00",
            "end_time": "2025-01-14T20:30:00"
        })
        recurring = availability_adapter.validate_python({
            "type": "recurring",
            "user_id": "bob",
            "day_of_week": 2,
            "start_time": "19:00:00",
            "end_time": "21:00:00",
            "effective_date": "2025-01-01"
        })
        assert isinstance(one_time, OneTimeAvailability)
        assert isinstance(recurring, RecurringAvailability)
        assert recurring.expiry_date is None
        assert recurring.priority == 1

    def test_adapter_rejects_unknown_type(self):
        with pytest.raises(ValidationError):
            availability_adapter.validate_python({"type": "sometimes", "user_id": "alice"})

    def test_one_time_rejects_utc_offset(self):
        with pytest.raises(ValidationError):
            OneTimeAvailability(
                user_id="alice",
                start_time="2025-01-14T19:30:00Z",
                end_time="2025-01-14T20:30:00Z"
            )

    def test_one_time_rejects_aware_datetime(self):
        with pytest.raises(ValidationError):
            OneTimeAvailability(
                user_id="alice",
                start_time=datetime(2025, 1, 14, 19, 30, tzinfo=timezone.utc),
                end_time=datetime(2025, 1, 14, 20, 30, tzinfo=timezone.utc)
            )


class TestQueryWindow:

    def test_duration_bounds(self):
        for minutes in (29, 481):
            with pytest.raises(ValidationError):
                QueryWindow(start_date=date(2025, 1, 13), end_date=date(2025, 1, 19), duration_minutes=minutes)

    def test_end_must_follow_start(self):
        with pytest.raises(ValidationError):
            QueryWindow(start_date=date(2025, 1, 13), end_date=date(2025, 1, 13), duration_minutes=60)

    def test_minimum_members_at_least_one(self):
        with pytest.raises(ValidationError):
            QueryWindow(
                start_date=date(2025, 1, 13),
                end_date=date(2025, 1, 19),
                duration_minutes=60,
                minimum_members=0
            )

    def test_window_covers_whole_end_date(self, week_window):
        assert week_window.window_start == datetime(2025, 1, 13, 0, 0)
        assert week_window.window_end == datetime(2025, 1, 20, 0, 0)
        assert len(week_window.days()) == 7
        assert week_window.minimum_members == 1


class TestMembership:

    def test_roster_for_band_filters_join_records(self):
        members = [make_member("carol"), make_member("alice"), make_member("bob")]
        roles = [
            MemberRole(band_id="band_01", user_id="carol", role=BandRole.ADMIN),
            MemberRole(band_id="band_01", user_id="alice"),
            MemberRole(band_id="band_02", user_id="bob"),
            MemberRole(band_id="band_01", user_id="ghost"),
        ]
        roster = roster_for_band("band_01", members, roles)
        assert [m.id for m in roster] == ["alice", "carol"]

    def test_default_role_is_member(self):
        assert MemberRole(band_id="b", user_id="u").role == BandRole.MEMBER

    def test_full_name(self):
        assert make_member("alice").full_name == "Alice Player"


class TestResponse:

    def test_build_response_shape(self):
        alice, bob = make_member("alice"), make_member("bob")
        slot = CandidateSlot(
            start=datetime(2025, 1, 13, 18, 0),
            end=datetime(2025, 1, 13, 19, 0),
            available_members=[alice],
            unavailable_members=[bob]
        )
        body = build_response([slot])

        assert body["message"] == "Optimal rehearsal times found"
        item = body["suggestedTimes"][0]
        assert item["startTime"] == "2025-01-13T18:00:00"
        assert item["endTime"] == "2025-01-13T19:00:00"
        assert item["availableMembers"] == [{
            "id": "alice", "firstName": "Alice", "lastName": "Player", "email": "alice@example.com"
        }]
        assert [m["id"] for m in item["unavailableMembers"]] == ["bob"]
        assert slot.duration_minutes == 60
        assert slot.attendee_count == 1

    def test_empty_response(self):
        assert build_response([]) == {"message": "Optimal rehearsal times found", "suggestedTimes": []}
