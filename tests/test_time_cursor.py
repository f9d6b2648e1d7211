"""
시간 커서 테스트

진행도 ↔ 기준 시각 매핑, 접두부 필터링, 구독자 통지를 검증합니다.
"""
from __future__ import annotations

from datetime import timedelta, timezone

import pandas as pd
import pytest

from commit_dashboard.domain.exceptions import TimelineError, ValidationError
from commit_dashboard.domain.time_cursor import TimeCursor


@pytest.fixture
def cursor(commits):
    c = TimeCursor()
    c.initialize(commits)
    return c


def test_initialize_shows_everything(cursor, t2315):
    """최초 진행도 100 → 전체 커밋"""
    assert cursor.progress == 100
    assert cursor.horizon == t2315
    assert cursor.state.commit_ids == ("a1", "b2", "c3")
    assert len(cursor.filtered_lines()) == 20


def test_initialize_with_progress(commits, t1000):
    cursor = TimeCursor()
    state = cursor.initialize(commits, initial_progress=0)

    assert state.horizon == t1000
    assert state.commit_ids == ("a1",)


def test_progress_at_commit_time_includes_that_commit(cursor, t1430):
    """scale(14:30)으로 이동 → 2 커밋, 17 라인"""
    state = cursor.set_progress(cursor.scale(t1430))

    assert state.horizon == t1430
    assert state.commit_ids == ("a1", "b2")
    assert len(state.lines) == 17


def test_progress_zero_shows_only_earliest(cursor):
    state = cursor.set_progress(0)

    assert state.commit_ids == ("a1",)
    assert len(state.lines) == 5


def test_progress_is_clamped(cursor):
    assert cursor.set_progress(150).progress == 100
    assert cursor.set_progress(-10).progress == 0


def test_filtered_commits_are_monotonic_prefix(cursor, commits):
    """진행도가 커질수록 부분집합은 접두부로 단조 증가"""
    previous = ()
    for p in range(0, 101, 5):
        current = cursor.set_progress(p).commits
        assert current == tuple(commits[: len(current)])
        assert len(current) >= len(previous)
        assert all(c.datetime <= cursor.horizon for c in current)
        previous = current


def test_set_progress_is_idempotent(cursor):
    first = cursor.set_progress(42)
    second = cursor.set_progress(42)

    assert first == second


def test_lines_follow_commit_order(cursor):
    state = cursor.set_progress(100)

    owners = [line.commit_id for line in state.lines]
    assert owners == ["a1"] * 5 + ["b2"] * 12 + ["c3"] * 3


def test_set_horizon_updates_progress(cursor, t1430):
    state = cursor.set_horizon(t1430)

    assert state.progress == pytest.approx(cursor.scale(t1430))
    assert state.horizon == t1430
    assert state.commit_ids == ("a1", "b2")


def test_set_horizon_before_earliest_is_empty(cursor):
    state = cursor.set_horizon(pd.Timestamp("2024-10-28 09:00"))

    assert state.is_empty
    assert state.lines == ()
    assert state.progress == 0


def test_horizon_label(cursor, t1430):
    cursor.set_horizon(t1430)

    assert cursor.horizon_label == "October 28, 2024 at 2:30 PM"


def test_listeners_notified_in_order(commits):
    cursor = TimeCursor()
    calls = []
    cursor.subscribe(lambda s: calls.append(("first", len(s.commits))))
    cursor.subscribe(lambda s: calls.append(("second", len(s.commits))))

    cursor.initialize(commits)
    cursor.set_progress(0)

    assert calls == [("first", 3), ("second", 3), ("first", 1), ("second", 1)]


def test_initialize_without_commits_is_empty():
    cursor = TimeCursor()
    state = cursor.initialize([])

    assert state.is_empty
    assert state.horizon is None
    assert cursor.horizon_label == ""
    assert cursor.set_progress(30).is_empty


def test_initialize_rejects_unsorted(commits):
    with pytest.raises(TimelineError):
        TimeCursor().initialize(list(reversed(commits)))


def test_use_before_initialize():
    cursor = TimeCursor()

    with pytest.raises(TimelineError):
        cursor.set_progress(10)
    with pytest.raises(TimelineError):
        _ = cursor.state


@pytest.mark.parametrize("value", ["abc", None, float("nan")])
def test_set_progress_rejects_non_numeric(cursor, value):
    with pytest.raises(ValidationError):
        cursor.set_progress(value)


def test_set_horizon_rejects_nat(cursor):
    with pytest.raises(ValidationError):
        cursor.set_horizon(pd.NaT)


@pytest.mark.parametrize("value", ["garbage", object()])
def test_set_horizon_rejects_unparseable(cursor, value):
    with pytest.raises(ValidationError):
        cursor.set_horizon(value)


def test_set_horizon_converts_aware_timestamp_to_commit_zone(commits, t1430):
    cursor = TimeCursor(timezone=timezone(timedelta(hours=-7)))
    cursor.initialize(commits)

    state = cursor.set_horizon(pd.Timestamp("2024-10-28 21:30", tz="UTC"))

    assert state.horizon == t1430
    assert state.commit_ids == ("a1", "b2")


def test_set_horizon_aware_timestamp_defaults_to_utc(cursor, t1430):
    state = cursor.set_horizon(pd.Timestamp("2024-10-28 14:30", tz="UTC"))

    assert state.horizon == t1430
    assert state.horizon.tzinfo is None
