"""
커밋 집계 (Commit Aggregator)

LineRecord 목록을 commit_id 기준으로 묶어 시간순으로 정렬된
Commit 컬렉션을 만듭니다. 시간 커서, 스크롤 커서, 내러티브 텍스트가
모두 이 정렬 순서에 의존합니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..common.performance import measure_time
from ..core.config import CONFIG
from .models import Commit, LineRecord, hour_fraction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommitCollection:
    """
    집계 결과.

    Attributes:
        commits: datetime 오름차순으로 정렬된 커밋 (동일 시각은 원본 등장 순서)
        excluded_ids: 첫 라인 기록에 유효한 타임스탬프가 없어 제외된 커밋 ID
        orphan_line_count: 제외된 커밋에 속한 라인 수
        timezone: naive 커밋 시각이 표현된 기준 시간대 (없으면 None)
    """

    commits: Tuple[Commit, ...]
    excluded_ids: Tuple[str, ...] = ()
    orphan_line_count: int = 0
    timezone: Optional[Any] = None

    def __len__(self) -> int:
        return len(self.commits)

    def __iter__(self):
        return iter(self.commits)

    @property
    def total_lines(self) -> int:
        return sum(c.total_lines for c in self.commits)


def group_by_commit(records: Iterable[LineRecord]) -> Dict[str, List[LineRecord]]:
    """
    라인 기록을 commit_id로 그룹핑합니다.

    딕셔너리 삽입 순서 = commit_id가 처음 등장한 순서이며,
    이 순서가 동일 시각 커밋의 정렬 기준이 됩니다.
    """
    groups: Dict[str, List[LineRecord]] = {}
    for record in records:
        groups.setdefault(record.commit_id, []).append(record)
    return groups


@measure_time
def aggregate_commits(
    records: Iterable[LineRecord],
    *,
    url_template: str = CONFIG.commit.url_template,
    timezone: Optional[Any] = None,
) -> CommitCollection:
    """
    라인 기록을 커밋으로 집계합니다.

    처리 순서:
    1. commit_id 기준 그룹핑
    2. 그룹의 첫 라인 기록에서 author/datetime 추출
       (같은 커밋의 기록은 작성자와 시각이 같으므로 결정적)
    3. hour_frac, total_lines 계산 및 라인 역참조 연결
    4. datetime 오름차순 안정 정렬

    첫 라인 기록의 타임스탬프가 깨진 커밋은 정렬 대상에서 제외하고
    개수만 보고합니다. 예외는 발생시키지 않습니다.

    Args:
        records: 전체 라인 기록
        url_template: 커밋 링크 템플릿 ({id} 치환)
        timezone: 라인 기록 시각의 기준 시간대 (reference_timezone() 결과)

    Returns:
        CommitCollection

    Examples:
        >>> collection = aggregate_commits(records)
        >>> [c.id for c in collection.commits]
        ['a1', 'b2', 'c3']
    """
    groups = group_by_commit(records)

    commits: List[Commit] = []
    excluded: List[str] = []
    orphan_lines = 0

    for commit_id, lines in groups.items():
        first = lines[0]
        if not first.has_timestamp:
            excluded.append(commit_id)
            orphan_lines += len(lines)
            continue

        commits.append(
            Commit(
                id=commit_id,
                author=first.author,
                datetime=first.datetime,
                hour_frac=hour_fraction(first.datetime),
                total_lines=len(lines),
                url=url_template.format(id=commit_id),
                lines=tuple(lines),
            )
        )

    # sorted()는 안정 정렬이므로 동일 시각 커밋은 그룹핑(첫 등장) 순서를 유지
    commits = sorted(commits, key=lambda c: c.datetime)

    if excluded:
        logger.warning(
            f"{len(excluded)} commits ({orphan_lines} lines) excluded: "
            f"first record has no valid timestamp"
        )

    logger.info(f"Aggregated {len(commits)} commits from {len(groups)} commit ids")
    return CommitCollection(
        commits=tuple(commits),
        excluded_ids=tuple(excluded),
        orphan_line_count=orphan_lines,
        timezone=timezone,
    )
