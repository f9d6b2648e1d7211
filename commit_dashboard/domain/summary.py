"""
요약 카운터 계산

현재 필터링된 라인/커밋으로 요약 카드에 표시할 지표를 계산합니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .models import Commit, LineRecord


@dataclass(frozen=True)
class SummaryMetric:
    """
    요약 카드 한 칸.

    Attributes:
        label: 표시 라벨 (예: "TOTAL LOC")
        value: 값. 빈 부분집합의 최대값 지표는 None (UI에서 "—"로 표시)
    """

    label: str
    value: Optional[int]


def _max_or_none(values: Sequence[int]) -> Optional[int]:
    return max(values) if values else None


def compute_summary(
    lines: Sequence[LineRecord],
    commits: Sequence[Commit],
) -> List[SummaryMetric]:
    """
    고정된 순서의 요약 지표 목록을 반환합니다.

    순서: TOTAL LOC, COMMITS, FILES, MAX DEPTH, LONGEST LINE, MAX LINES

    개수 지표는 빈 부분집합에서 0이고, 최대값 지표는 None입니다.

    Examples:
        >>> [m.label for m in compute_summary(lines, commits)]
        ['TOTAL LOC', 'COMMITS', 'FILES', 'MAX DEPTH', 'LONGEST LINE', 'MAX LINES']
    """
    return [
        SummaryMetric("TOTAL LOC", len(lines)),
        SummaryMetric("COMMITS", len(commits)),
        SummaryMetric("FILES", len({line.file for line in lines})),
        SummaryMetric("MAX DEPTH", _max_or_none([line.depth for line in lines])),
        SummaryMetric("LONGEST LINE", _max_or_none([line.length for line in lines])),
        SummaryMetric("MAX LINES", _max_or_none([line.line for line in lines])),
    ]
