"""
Sweep-line timeline construction.
"""

from datetime import datetime

from scheduler.normalizer import FreeInterval
from scheduler.timeline import Segment, build_timeline

WINDOW_START = datetime(2025, 1, 13, 0, 0)
WINDOW_END = datetime(2025, 1, 14, 0, 0)


def at(hour, minute=0):
    return datetime(2025, 1, 13, hour, minute)


def assert_tiles_window(segments):
    assert segments[0].start == WINDOW_START
    assert segments[-1].end == WINDOW_END
    for before, after in zip(segments, segments[1:]):
        assert before.end == after.start
        assert before.start < before.end


def test_no_intervals_gives_one_empty_segment():
    segments = build_timeline({"alice": [], "bob": []}, WINDOW_START, WINDOW_END)
    assert segments == [Segment(WINDOW_START, WINDOW_END, frozenset())]


def test_overlap_produces_shared_segment():
    segments = build_timeline({
        "alice": [FreeInterval("alice", at(18), at(21))],
        "bob": [FreeInterval("bob", at(19, 30), at(20, 30))],
    }, WINDOW_START, WINDOW_END)

    assert_tiles_window(segments)
    assert [(s.start, s.end, s.free_members) for s in segments] == [
        (WINDOW_START, at(18), frozenset()),
        (at(18), at(19, 30), frozenset({"alice"})),
        (at(19, 30), at(20, 30), frozenset({"alice", "bob"})),
        (at(20, 30), at(21), frozenset({"alice"})),
        (at(21), WINDOW_END, frozenset()),
    ]


def test_back_to_back_intervals_never_overlap():
    segments = build_timeline({
        "alice": [FreeInterval("alice", at(10), at(12))],
        "bob": [FreeInterval("bob", at(12), at(14))],
    }, WINDOW_START, WINDOW_END)

    assert_tiles_window(segments)
    assert all(s.free_count <= 1 for s in segments)
    assert Segment(at(10), at(12), frozenset({"alice"})) in segments
    assert Segment(at(12), at(14), frozenset({"bob"})) in segments


def test_identical_intervals_share_one_segment():
    segments = build_timeline({
        "alice": [FreeInterval("alice", at(10), at(12))],
        "bob": [FreeInterval("bob", at(10), at(12))],
    }, WINDOW_START, WINDOW_END)

    assert len(segments) == 3
    assert segments[1] == Segment(at(10), at(12), frozenset({"alice", "bob"}))


def test_interval_touching_window_edges():
    segments = build_timeline({
        "alice": [FreeInterval("alice", WINDOW_START, at(2)), FreeInterval("alice", at(22), WINDOW_END)],
    }, WINDOW_START, WINDOW_END)

    assert_tiles_window(segments)
    assert segments[0] == Segment(WINDOW_START, at(2), frozenset({"alice"}))
    assert segments[-1] == Segment(at(22), WINDOW_END, frozenset({"alice"}))
