"""
스크롤 커서 및 요약 카운터 테스트
"""
from __future__ import annotations

import pandas as pd

from commit_dashboard.domain.models import Commit
from commit_dashboard.domain.scroll import ScrollCursor, build_narrative
from commit_dashboard.domain.summary import compute_summary
from commit_dashboard.domain.time_cursor import TimeCursor


# ============================================================
# 스크롤 커서
# ============================================================

def test_build_narrative_one_step_per_commit(commits):
    steps = build_narrative(commits)

    assert [s.step_id for s in steps] == ["a1", "b2", "c3"]
    assert steps[1].heading == "October 28, 2024 at 2:30 PM"
    assert steps[1].body == "I edited 12 lines across 2 files."
    assert steps[1].url.endswith("/commit/b2")


def test_step_enter_moves_horizon(commits, t1430):
    cursor = TimeCursor()
    cursor.initialize(commits)
    scroll = ScrollCursor(commits, cursor)

    state = scroll.on_step_enter("b2")

    assert state.horizon == t1430
    assert state.commit_ids == ("a1", "b2")
    assert cursor.progress == cursor.scale(t1430)
    assert scroll.active_step.step_id == "b2"


def test_step_enter_matches_slider(commits, t1430):
    """스크롤과 슬라이더가 같은 시각을 가리키면 같은 결과"""
    by_scroll = TimeCursor()
    by_scroll.initialize(commits)
    ScrollCursor(commits, by_scroll).on_step_enter("b2")

    by_slider = TimeCursor()
    by_slider.initialize(commits)
    by_slider.set_progress(by_slider.scale(t1430))

    assert by_scroll.state.commit_ids == by_slider.state.commit_ids
    assert by_scroll.state.lines == by_slider.state.lines


def test_step_enter_unknown_step_is_ignored(commits):
    cursor = TimeCursor()
    cursor.initialize(commits)
    scroll = ScrollCursor(commits, cursor)

    assert scroll.on_step_enter("nope") is None
    assert cursor.progress == 100
    assert scroll.active_step is None


def test_step_enter_commit_without_timestamp_is_ignored(commits):
    cursor = TimeCursor()
    cursor.initialize(commits)
    broken = Commit(id="x", author=None, datetime=pd.NaT, hour_frac=0.0, total_lines=0)
    scroll = ScrollCursor([broken], cursor)

    assert scroll.on_step_enter("x") is None
    assert cursor.progress == 100


# ============================================================
# 요약 카운터
# ============================================================

def test_summary_order_and_values(line_records, commits):
    metrics = compute_summary(line_records, commits)

    assert [m.label for m in metrics] == [
        "TOTAL LOC", "COMMITS", "FILES", "MAX DEPTH", "LONGEST LINE", "MAX LINES",
    ]
    assert [m.value for m in metrics] == [20, 3, 3, 2, 80, 8]


def test_summary_for_earliest_commit(commits):
    first = commits[0]
    metrics = {m.label: m.value for m in compute_summary(first.lines, [first])}

    assert metrics == {
        "TOTAL LOC": 5,
        "COMMITS": 1,
        "FILES": 2,
        "MAX DEPTH": 2,
        "LONGEST LINE": 30,
        "MAX LINES": 3,
    }


def test_summary_empty_subset():
    """빈 부분집합: 개수 0, 최대값 None"""
    metrics = {m.label: m.value for m in compute_summary([], [])}

    assert metrics["TOTAL LOC"] == 0
    assert metrics["COMMITS"] == 0
    assert metrics["FILES"] == 0
    assert metrics["MAX DEPTH"] is None
    assert metrics["LONGEST LINE"] is None
    assert metrics["MAX LINES"] is None
