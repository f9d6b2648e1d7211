"""
브러시 선택 엔진 테스트
"""
from __future__ import annotations

import pytest

from commit_dashboard.domain.exceptions import FilterError, ValidationError
from commit_dashboard.domain.selection import (
    EMPTY_SELECTION,
    contains,
    language_breakdown,
    normalize_rect,
    select_commits,
)


@pytest.fixture
def positions():
    # 커밋 ID → 화면 좌표 (테스트용 고정 배치)
    return {"a1": (60.0, 335.0), "b2": (372.45, 233.75), "c3": (980.0, 36.875)}


@pytest.fixture
def locate(positions):
    return lambda commit: positions[commit.id]


def test_select_single_commit(commits, locate):
    result = select_commits(((300, 200), (450, 260)), commits, locate)

    assert [c.id for c in result.commits] == ["b2"]
    assert result.count_label == "1 commits selected"
    assert result.total_lines == 12


def test_select_breakdown_matches_selected_lines(commits, locate):
    result = select_commits(((300, 200), (450, 260)), commits, locate)

    shares = {s.type: s for s in result.breakdown}
    assert shares["js"].count == 8
    assert shares["html"].count == 4
    assert shares["js"].label == "8 lines (66.7%)"
    assert shares["html"].percent_label == "33.3%"
    assert sum(s.count for s in result.breakdown) == result.total_lines
    assert sum(s.share for s in result.breakdown) == pytest.approx(1.0)


def test_select_everything(commits, locate):
    result = select_commits(((0, 0), (1000, 600)), commits, locate)

    assert result.count == 3
    assert [s.type for s in result.breakdown] == ["js", "css", "html"]
    assert [s.count for s in result.breakdown] == [11, 5, 4]
    assert result.is_selected(commits[0])


def test_select_reversed_corners_are_normalized(commits, locate):
    result = select_commits(((450, 260), (300, 200)), commits, locate)

    assert result.rect == ((300.0, 200.0), (450.0, 260.0))
    assert result.selected_ids == frozenset({"b2"})


def test_select_edges_are_inclusive(commits, locate):
    """경계 위의 점도 선택 (넓이 0 사각형 포함)"""
    result = select_commits(((60, 335), (60, 335)), commits, locate)

    assert [c.id for c in result.commits] == ["a1"]


def test_select_nothing(commits, locate):
    result = select_commits(((500, 500), (600, 550)), commits, locate)

    assert result.count == 0
    assert result.count_label == "No commits selected"
    assert result.breakdown == ()
    assert result.rect is not None


def test_select_none_clears(commits, locate):
    result = select_commits(None, commits, locate)

    assert result is EMPTY_SELECTION
    assert result.count_label == "No commits selected"


def test_normalize_rect_rejects_bad_shape():
    with pytest.raises(ValidationError):
        normalize_rect((1, 2, 3))
    with pytest.raises(ValidationError):
        normalize_rect((("a", 0), (1, 1)))


def test_contains():
    rect = ((0, 0), (10, 10))

    assert contains(rect, (0, 10))
    assert contains(rect, (5, 5))
    assert not contains(rect, (10.01, 5))


def test_language_breakdown_without_lines():
    assert language_breakdown([]) == ((), 0)


def test_select_with_unplotted_commit_raises(commits):
    with pytest.raises(FilterError):
        select_commits(((0, 0), (10, 10)), commits, lambda c: (float("nan"), float("nan")))
