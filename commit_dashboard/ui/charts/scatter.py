"""커밋 산점도 뷰 모델 (Scatter View Model).

필터링된 커밋마다 위치(x: 커밋 시각, y: 하루 중 시각), 크기(라인 수),
색상(주간/야간)을 계산하고, 직전 렌더와 커밋 ID 기준으로 비교해
enter/update/exit 그리기 명령을 만듭니다.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd

from ...common.formatting import format_hour_tick
from ...core.config import CONFIG, ScatterConfig
from ...domain.models import Commit
from ...domain.reconcile import Reconciliation, reconcile
from ...domain.scales import LinearScale, SqrtScale, TimeScale
from ...domain.selection import Point, Rect
from ..renderer import DrawInstruction

logger = logging.getLogger(__name__)

DOTS_LAYER = "dots"


@dataclass(frozen=True)
class ScatterPoint:
    """산점도의 점 하나 (목표 상태)."""

    key: str
    cx: float
    cy: float
    r: float
    fill: str
    order: int = 0
    commit: Optional[Commit] = field(default=None, repr=False, compare=False)

    def geometry(self) -> Dict[str, float]:
        return {"cx": self.cx, "cy": self.cy, "r": self.r}


@dataclass(frozen=True)
class ScatterFrame:
    """
    산점도 한 번의 갱신 결과.

    Attributes:
        points: 그리기 순서(라인 수 내림차순)의 점
        diff: 직전 렌더 대비 enter/update/exit
        x_scale: 이번 부분집합의 시간 축 스케일 (비어 있으면 None)
        r_scale: 이번 부분집합의 반지름 스케일 (비어 있으면 None)
    """

    points: Tuple[ScatterPoint, ...]
    diff: Reconciliation[ScatterPoint]
    x_scale: Optional[TimeScale] = None
    r_scale: Optional[SqrtScale] = None


class ScatterViewModel:
    """
    커밋 산점도의 스케일과 렌더 상태를 관리합니다.

    - x축: 현재 부분집합의 [최소, 최대] 커밋 시각 → 사용 영역 좌우 (갱신마다 재계산)
    - y축: [0, 24] 시각 → 사용 영역 하단/상단 (고정)
    - 반지름: 현재 부분집합의 [최소, 최대] 라인 수 → radius_range (sqrt 스케일)

    렌더 상태에는 목표 속성만 저장하므로, 애니메이션 도중 새 갱신이
    들어와도 모델은 항상 마지막 필터 결과를 기준으로 합니다.
    """

    def __init__(self, config: ScatterConfig = CONFIG.scatter) -> None:
        self.config = config
        m = config.margin
        self.left = float(m.left)
        self.right = float(config.width - m.right)
        self.top = float(m.top)
        self.bottom = float(config.height - m.bottom)

        self.y_scale = LinearScale(domain=(0.0, 24.0), range=(self.bottom, self.top))
        self.x_scale: Optional[TimeScale] = None
        self.r_scale: Optional[SqrtScale] = None
        self._rendered: Dict[str, ScatterPoint] = {}
        self._order: Tuple[ScatterPoint, ...] = ()

    # ========================================
    # 인코딩
    # ========================================

    def is_daytime(self, hour_frac: float) -> bool:
        return self.config.day_start_hour <= hour_frac < self.config.day_end_hour

    def fill_for(self, commit: Commit) -> str:
        if self.is_daytime(commit.hour_frac):
            return self.config.day_color
        return self.config.night_color

    def locate(self, commit: Commit) -> Point:
        """현재 스케일 기준 커밋의 화면 좌표. 스케일이 없으면 (nan, nan)."""
        if self.x_scale is None:
            return (math.nan, math.nan)
        return (self.x_scale(commit.datetime), self.y_scale(commit.hour_frac))

    def screen_rect(
        self,
        x_range: Tuple[pd.Timestamp, pd.Timestamp],
        y_range: Tuple[float, float],
    ) -> Optional[Rect]:
        """
        데이터 좌표 박스(시각 범위 × 시간대 범위)를 화면 좌표 사각형으로 바꿉니다.

        Plotly 박스 선택처럼 데이터 좌표로 선택 영역을 보고하는 렌더러에서 사용합니다.
        """
        if self.x_scale is None:
            return None
        x0, x1 = (self.x_scale(pd.Timestamp(v)) for v in x_range)
        y0, y1 = (self.y_scale(float(v)) for v in y_range)
        return (min(x0, x1), min(y0, y1)), (max(x0, x1), max(y0, y1))

    # ========================================
    # 갱신
    # ========================================

    @property
    def points(self) -> Tuple[ScatterPoint, ...]:
        return self._order

    def update(self, commits: Sequence[Commit]) -> ScatterFrame:
        """
        필터링된 커밋으로 스케일을 다시 만들고 직전 렌더와의 차이를 계산합니다.

        Args:
            commits: 현재 보이는 커밋

        Returns:
            ScatterFrame
        """
        if commits:
            times = [c.datetime for c in commits]
            sizes = [c.total_lines for c in commits]
            self.x_scale = TimeScale(domain=(min(times), max(times)), range=(self.left, self.right))
            self.r_scale = SqrtScale(domain=(min(sizes), max(sizes)), range=self.config.radius_range)
        else:
            self.x_scale = None
            self.r_scale = None

        # 큰 원을 먼저 그려 작은 원을 가리지 않도록 라인 수 내림차순 (안정 정렬)
        ordered = sorted(commits, key=lambda c: -c.total_lines)
        points: List[ScatterPoint] = []
        for index, commit in enumerate(ordered):
            cx, cy = self.locate(commit)
            points.append(
                ScatterPoint(
                    key=commit.id,
                    cx=cx,
                    cy=cy,
                    r=self.r_scale(commit.total_lines),  # type: ignore[misc]
                    fill=self.fill_for(commit),
                    order=index,
                    commit=commit,
                )
            )

        diff = reconcile(self._rendered.values(), points, key=lambda p: p.key)
        self._order = tuple(points)
        self._rendered = {p.key: p for p in points}

        logger.debug(
            f"Scatter update: {len(diff.enter)} enter, {len(diff.update)} update, "
            f"{len(diff.exit)} exit"
        )
        return ScatterFrame(
            points=self._order,
            diff=diff,
            x_scale=self.x_scale,
            r_scale=self.r_scale,
        )

    def to_instructions(self, frame: ScatterFrame) -> List[DrawInstruction]:
        """
        diff를 렌더러용 그리기 명령으로 변환합니다.

        - enter: 반지름 0에서 목표 반지름으로
        - update: 직전 목표 위치/반지름에서 새 목표로
        - exit: 반지름 0으로 줄인 뒤 제거
        """
        opacity = self.config.fill_opacity
        instructions: List[DrawInstruction] = []

        for point in frame.diff.enter:
            instructions.append(
                DrawInstruction(
                    action="create",
                    key=point.key,
                    attrs={**point.geometry(), "fill": point.fill, "fill_opacity": opacity},
                    start={"cx": point.cx, "cy": point.cy, "r": 0.0},
                    order=point.order,
                )
            )

        for previous, point in frame.diff.update:
            instructions.append(
                DrawInstruction(
                    action="update",
                    key=point.key,
                    attrs={**point.geometry(), "fill": point.fill},
                    start=previous.geometry(),
                    order=point.order,
                )
            )

        for point in frame.diff.exit:
            instructions.append(
                DrawInstruction(
                    action="remove",
                    key=point.key,
                    attrs={"cx": point.cx, "cy": point.cy, "r": 0.0},
                    start=point.geometry(),
                    order=point.order,
                )
            )

        return instructions

    # ========================================
    # 축
    # ========================================

    def y_ticks(self) -> List[Tuple[float, str]]:
        """y축 눈금 (값, "HH:00" 라벨)."""
        return [(v, format_hour_tick(v)) for v in self.y_scale.ticks(self.config.y_tick_step)]
