"""
시간 커서 (Time Cursor)

대시보드 전체가 공유하는 유일한 필터 상태를 소유합니다.
진행도(progress, 0~100)와 기준 시각(horizon)을 항상 일관되게 유지하고,
기준 시각 이전(포함)의 커밋/라인 부분집합을 계산합니다.

상태 변경은 set_progress()/set_horizon()으로만 가능하며,
변경 직후 구독자에게 새 FilterState가 동기적으로 전달됩니다.
"""

from __future__ import annotations

import logging
import math
from bisect import bisect_right
from dataclasses import dataclass
from itertools import chain
from typing import Any, Callable, List, Optional, Sequence, Tuple

import pandas as pd

from ..common.formatting import format_long_datetime
from ..core.config import CONFIG, TimeConfig
from .exceptions import TimelineError, ValidationError
from .models import Commit, LineRecord
from .scales import TimeScale

logger = logging.getLogger(__name__)

Listener = Callable[["FilterState"], None]


@dataclass(frozen=True)
class FilterState:
    """
    특정 시점의 필터 결과 스냅샷.

    Attributes:
        progress: 진행도 [0, 100]
        horizon: 기준 시각 (커밋이 없으면 None)
        commits: horizon 이전(포함) 커밋, 시간 오름차순
        lines: commits의 소유 라인을 커밋 순서대로 이어 붙인 것
    """

    progress: float
    horizon: Optional[pd.Timestamp]
    commits: Tuple[Commit, ...] = ()
    lines: Tuple[LineRecord, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.commits

    @property
    def commit_ids(self) -> Tuple[str, ...]:
        return tuple(c.id for c in self.commits)


class TimeCursor:
    """
    진행도 ↔ 기준 시각 매핑과 시간 필터링을 담당합니다.

    시간 스케일은 initialize() 시점의 전체 커밋 min/max 시각으로
    한 번만 만들어지고 이후 다시 만들지 않습니다.

    커밋 시각은 timezone 기준 naive 값입니다. set_horizon()에 tz-aware 값이
    들어오면 같은 기준으로 변환한 뒤 비교합니다 (timezone이 None이면 UTC).

    Examples:
        >>> cursor = TimeCursor()
        >>> cursor.subscribe(lambda state: print(len(state.commits)))
        >>> cursor.initialize(collection.commits)
        3
        >>> cursor.set_progress(0)
        1
    """

    def __init__(self, config: TimeConfig = CONFIG.time, *, timezone: Optional[Any] = None) -> None:
        self._config = config
        self._timezone = timezone
        self._commits: Tuple[Commit, ...] = ()
        self._keys: List[int] = []
        self._scale: Optional[TimeScale] = None
        self._state: Optional[FilterState] = None
        self._listeners: List[Listener] = []

    # ========================================
    # 구독
    # ========================================

    def subscribe(self, listener: Listener) -> None:
        """상태 변경 시 호출될 리스너를 등록합니다 (등록 순서대로 호출)."""
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self.state)

    # ========================================
    # 초기화
    # ========================================

    def initialize(
        self,
        commits: Sequence[Commit],
        initial_progress: Optional[float] = None,
    ) -> FilterState:
        """
        전체 커밋으로 시간 스케일을 만들고 최초 기준 시각을 설정합니다.

        Args:
            commits: datetime 오름차순으로 정렬된 전체 커밋
            initial_progress: 최초 진행도 (기본값: 설정의 initial_progress = 100)

        Returns:
            최초 FilterState
        """
        self._commits = tuple(commits)
        self._keys = [int(c.datetime.value) for c in self._commits]
        if any(a > b for a, b in zip(self._keys, self._keys[1:])):
            raise TimelineError("커밋이 시간순으로 정렬되어 있지 않습니다.")

        progress = self._clamp(
            self._config.initial_progress if initial_progress is None else initial_progress
        )

        if not self._commits:
            logger.warning("Time cursor initialized without commits")
            self._scale = None
            self._state = FilterState(progress=progress, horizon=None)
            self._notify()
            return self._state

        self._scale = TimeScale(
            domain=(self._commits[0].datetime, self._commits[-1].datetime),
            range=(self._config.progress_min, self._config.progress_max),
        )
        logger.debug(
            f"Time scale domain: {self._commits[0].datetime} .. {self._commits[-1].datetime}"
        )
        return self._apply(progress, self._scale.invert(progress))

    # ========================================
    # 변경 진입점
    # ========================================

    def set_progress(self, progress: float) -> FilterState:
        """
        진행도를 바꾸고 기준 시각을 invert(progress)로 다시 계산합니다.

        범위를 벗어난 진행도는 [0, 100]으로 잘립니다.

        Raises:
            TimelineError: initialize() 이전에 호출한 경우
            ValidationError: 숫자가 아닌 진행도
        """
        self._ensure_initialized()
        try:
            value = float(progress)
        except (TypeError, ValueError):
            raise ValidationError(f"진행도는 숫자여야 합니다: {progress!r}") from None
        if math.isnan(value):
            raise ValidationError("진행도가 NaN입니다.")

        value = self._clamp(value)
        horizon = self._scale.invert(value) if self._scale is not None else None
        return self._apply(value, horizon)

    def set_horizon(self, timestamp: pd.Timestamp) -> FilterState:
        """
        기준 시각을 직접 지정합니다 (스크롤 커서용 역방향 진입점).

        진행도는 scale(timestamp)로 맞추고, 기준 시각은 전달된 값을 그대로 씁니다.
        tz-aware 값은 커밋 시각과 같은 기준 시간대의 naive 값으로 바꿉니다.

        Raises:
            TimelineError: initialize() 이전에 호출한 경우
            ValidationError: 유효하지 않은 시각
        """
        self._ensure_initialized()
        try:
            ts = pd.Timestamp(timestamp) if timestamp is not None else pd.NaT
        except (TypeError, ValueError, OverflowError):
            raise ValidationError(f"기준 시각을 해석할 수 없습니다: {timestamp!r}") from None
        if pd.isna(ts):
            raise ValidationError("기준 시각이 유효하지 않습니다.")
        if ts.tzinfo is not None:
            ts = ts.tz_convert(self._timezone or "UTC").tz_localize(None)
        if self._scale is None:
            return self._apply(self.progress, ts)
        return self._apply(self._clamp(self._scale(ts)), ts)

    # ========================================
    # 조회
    # ========================================

    @property
    def state(self) -> FilterState:
        self._ensure_initialized()
        return self._state  # type: ignore[return-value]

    @property
    def progress(self) -> float:
        return self.state.progress

    @property
    def horizon(self) -> Optional[pd.Timestamp]:
        return self.state.horizon

    @property
    def horizon_label(self) -> str:
        """기준 시각 표시 문자열 (예: "October 28, 2024 at 2:30 PM")."""
        return format_long_datetime(self.horizon)

    @property
    def scale(self) -> Optional[TimeScale]:
        return self._scale

    @property
    def commits(self) -> Tuple[Commit, ...]:
        return self._commits

    def filtered_commits(self) -> Tuple[Commit, ...]:
        return self.state.commits

    def filtered_lines(self) -> Tuple[LineRecord, ...]:
        return self.state.lines

    # ========================================
    # 내부 헬퍼
    # ========================================

    def _ensure_initialized(self) -> None:
        if self._state is None:
            raise TimelineError("시간 커서가 초기화되지 않았습니다. initialize()를 먼저 호출하세요.")

    def _clamp(self, value: float) -> float:
        return max(self._config.progress_min, min(self._config.progress_max, float(value)))

    def _apply(self, progress: float, horizon: Optional[pd.Timestamp]) -> FilterState:
        if horizon is None:
            commits: Tuple[Commit, ...] = ()
        else:
            # 정렬된 커밋의 접두부: datetime <= horizon 인 마지막 위치
            boundary = bisect_right(self._keys, int(horizon.value))
            commits = self._commits[:boundary]

        lines = tuple(chain.from_iterable(c.lines for c in commits))
        self._state = FilterState(
            progress=progress,
            horizon=horizon,
            commits=commits,
            lines=lines,
        )
        logger.debug(
            f"Horizon {horizon} (progress {progress:.2f}): "
            f"{len(commits)} commits, {len(lines)} lines"
        )
        self._notify()
        return self._state
