"""End-to-end orchestration helpers for the commit history dashboard."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

import pandas as pd

from .common.performance import measure_time_context
from .core.config import CONFIG, DashboardConfig
from .data_sources.loader import Loader
from .domain.aggregation import CommitCollection, aggregate_commits
from .domain.models import LineRecord
from .domain.normalization import normalize_line_records, reference_timezone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardData:
    """
    대시보드 시작 시 한 번 만들어지는 데이터 묶음.

    Attributes:
        records: 전체 라인 기록 (타임스탬프가 깨진 행 포함)
        collection: 시간순 커밋 컬렉션
    """

    records: Tuple[LineRecord, ...]
    collection: CommitCollection

    @property
    def invalid_timestamp_rows(self) -> int:
        return sum(1 for r in self.records if not r.has_timestamp)


def build_dashboard_data(
    frame: pd.DataFrame,
    *,
    config: DashboardConfig = CONFIG,
) -> DashboardData:
    logger.debug("Building dashboard data from line frame")

    with measure_time_context("line record normalization"):
        records = normalize_line_records(frame, display_tz=config.time.display_tz)

    timezone = reference_timezone(frame, display_tz=config.time.display_tz)
    collection = aggregate_commits(
        records, url_template=config.commit.url_template, timezone=timezone
    )
    logger.debug(
        f"Dashboard data: {len(records)} lines, {len(collection)} commits, "
        f"{len(collection.excluded_ids)} excluded"
    )
    return DashboardData(records=tuple(records), collection=collection)


def load_dashboard_data(loader: Loader, *, config: DashboardConfig = CONFIG) -> DashboardData:
    with measure_time_context("line data loading"):
        frame = loader.load()
    return build_dashboard_data(frame, config=config)
