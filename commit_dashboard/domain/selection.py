"""
브러시 선택 엔진 (Selection Engine)

화면 좌표 사각형 안에 찍힌 커밋을 골라내고, 선택된 커밋의 라인을
type(언어)별로 집계합니다. 입력 커밋은 항상 "지금 보이는" 부분집합이며,
좌표는 산점도의 현재 스케일로 계산됩니다.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, Optional, Sequence, Tuple

from ..common.formatting import format_percent
from .exceptions import FilterError, ValidationError
from .models import Commit

logger = logging.getLogger(__name__)

Point = Tuple[float, float]
Rect = Tuple[Point, Point]
Locator = Callable[[Commit], Point]


@dataclass(frozen=True)
class LanguageShare:
    """선택 영역 안의 한 라인 type 집계."""

    type: str
    count: int
    share: float

    @property
    def percent_label(self) -> str:
        return format_percent(self.share)

    @property
    def label(self) -> str:
        return f"{self.count} lines ({self.percent_label})"


@dataclass(frozen=True)
class SelectionResult:
    """
    브러시 선택 결과.

    Attributes:
        rect: 정규화된 선택 사각형 (없으면 None)
        commits: 사각형 안의 커밋 (입력 순서 유지)
        breakdown: type별 라인 수/비율 (첫 등장 순서). 선택이 비면 빈 튜플
        total_lines: 선택된 커밋의 라인 합계
    """

    rect: Optional[Rect] = None
    commits: Tuple[Commit, ...] = ()
    breakdown: Tuple[LanguageShare, ...] = ()
    total_lines: int = 0

    @property
    def count(self) -> int:
        return len(self.commits)

    @property
    def selected_ids(self) -> FrozenSet[str]:
        return frozenset(c.id for c in self.commits)

    @property
    def count_label(self) -> str:
        return f"{self.count or 'No'} commits selected"

    def is_selected(self, commit: Commit) -> bool:
        return commit.id in self.selected_ids


EMPTY_SELECTION = SelectionResult()


def normalize_rect(rect: Optional[Rect]) -> Optional[Rect]:
    """
    ((x0, y0), (x1, y1)) 사각형을 좌상단/우하단 순서로 정규화합니다.

    Raises:
        ValidationError: 두 점으로 이루어진 사각형이 아닌 경우
    """
    if rect is None:
        return None
    try:
        (ax, ay), (bx, by) = rect
        ax, ay, bx, by = float(ax), float(ay), float(bx), float(by)
    except (TypeError, ValueError):
        raise ValidationError(f"선택 영역 형식이 잘못되었습니다: {rect!r}") from None
    return (min(ax, bx), min(ay, by)), (max(ax, bx), max(ay, by))


def contains(rect: Rect, point: Point) -> bool:
    """축 정렬 포함 검사 (경계 포함)."""
    (x0, y0), (x1, y1) = rect
    x, y = point
    return x0 <= x <= x1 and y0 <= y <= y1


def language_breakdown(commits: Sequence[Commit]) -> Tuple[Tuple[LanguageShare, ...], int]:
    """
    선택된 커밋의 라인을 type별로 세어 비율과 함께 반환합니다.

    라인이 하나도 없으면 0으로 나누지 않고 빈 결과를 반환합니다.

    Returns:
        (breakdown, total_lines) 튜플
    """
    counts: Dict[str, int] = {}
    for commit in commits:
        for line in commit.lines:
            counts[line.type] = counts.get(line.type, 0) + 1

    total = sum(counts.values())
    if total == 0:
        return (), 0

    shares = tuple(
        LanguageShare(type=kind, count=count, share=count / total)
        for kind, count in counts.items()
    )
    return shares, total


def select_commits(
    rect: Optional[Rect],
    commits: Sequence[Commit],
    locate: Locator,
) -> SelectionResult:
    """
    사각형 안에 찍힌 커밋을 선택합니다.

    Args:
        rect: 화면 좌표 선택 사각형. None이면 선택 해제
        commits: 현재 보이는(필터링된) 커밋
        locate: 커밋 → 화면 좌표 (x, y) 함수 (산점도 현재 스케일)

    Returns:
        SelectionResult. 선택이 비면 breakdown도 비어 있습니다.

    Examples:
        >>> result = select_commits(((100, 0), (300, 600)), commits, model.locate)
        >>> result.count_label
        '1 commits selected'
    """
    normalized = normalize_rect(rect)
    if normalized is None:
        return EMPTY_SELECTION

    hits = []
    for commit in commits:
        point = locate(commit)
        if any(math.isnan(v) for v in point):
            raise FilterError(f"커밋 {commit.id}의 화면 좌표가 없습니다. 산점도 스케일이 갱신되지 않았습니다.")
        if contains(normalized, point):
            hits.append(commit)
    selected = tuple(hits)
    if not selected:
        return SelectionResult(rect=normalized)

    breakdown, total = language_breakdown(selected)
    logger.debug(f"Brush selected {len(selected)} commits ({total} lines)")
    return SelectionResult(
        rect=normalized,
        commits=selected,
        breakdown=breakdown,
        total_lines=total,
    )
