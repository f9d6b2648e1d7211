"""
도메인 계층 퍼블릭 API

이 모듈은 도메인 계층의 주요 클래스와 함수를 재수출하여
일관된 퍼블릭 API를 제공합니다.
"""
from __future__ import annotations

from .aggregation import CommitCollection, aggregate_commits, group_by_commit
from .exceptions import (
    DataLoadError,
    DomainError,
    FilterError,
    TimelineError,
    ValidationError,
)
from .file_units import CategoryColorScale, FileGroup, FileUnitFrame, FileUnitModel, Unit
from .models import Commit, LineRecord, hour_fraction
from .normalization import compose_timestamp, normalize_line_records, parse_timestamp
from .reconcile import Reconciliation, reconcile
from .scales import LinearScale, SqrtScale, TimeScale
from .scroll import NarrativeStep, ScrollCursor, build_narrative
from .selection import (
    EMPTY_SELECTION,
    LanguageShare,
    SelectionResult,
    language_breakdown,
    normalize_rect,
    select_commits,
)
from .summary import SummaryMetric, compute_summary
from .time_cursor import FilterState, TimeCursor

__all__ = [
    # 예외
    "DomainError",
    "ValidationError",
    "DataLoadError",
    "FilterError",
    "TimelineError",
    # 모델
    "LineRecord",
    "Commit",
    "hour_fraction",
    # 로더 / 집계
    "normalize_line_records",
    "parse_timestamp",
    "compose_timestamp",
    "aggregate_commits",
    "group_by_commit",
    "CommitCollection",
    # 스케일 / diff
    "LinearScale",
    "SqrtScale",
    "TimeScale",
    "reconcile",
    "Reconciliation",
    # 필터 상태
    "TimeCursor",
    "FilterState",
    "ScrollCursor",
    "NarrativeStep",
    "build_narrative",
    # 뷰 모델
    "compute_summary",
    "SummaryMetric",
    "select_commits",
    "normalize_rect",
    "language_breakdown",
    "SelectionResult",
    "LanguageShare",
    "EMPTY_SELECTION",
    "FileUnitModel",
    "FileUnitFrame",
    "FileGroup",
    "Unit",
    "CategoryColorScale",
]
