"""
대시보드 컨트롤러

UI 이벤트(슬라이더, 내러티브 스텝, 브러시, 포인터)를 받아 도메인 상태를
갱신하고, 그 결과를 Renderer로 내보냅니다. 시간 커서를 유일한 필터 상태로
소유하며, 각 뷰는 시간 커서의 FilterState만 읽습니다.

기준 시각이 바뀌면 다음 순서로 모든 뷰가 동기적으로 갱신됩니다:
1. 필터링된 커밋/라인 재계산 (TimeCursor)
2. 요약 카운터
3. 산점도 (축 스케일 재계산 포함)
4. 파일 구성도
5. 활성 브러시 사각형 재적용
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, List, Optional, Sequence, Union

from ..core.config import CONFIG, DashboardConfig
from ..domain.aggregation import CommitCollection
from ..domain.file_units import FileUnitFrame, FileUnitModel
from ..domain.models import Commit
from ..domain.scroll import NarrativeStep, ScrollCursor
from ..domain.selection import EMPTY_SELECTION, Rect, SelectionResult, normalize_rect, select_commits
from ..domain.summary import SummaryMetric, compute_summary
from ..domain.time_cursor import FilterState, TimeCursor
from .charts.scatter import DOTS_LAYER, ScatterFrame, ScatterViewModel
from .renderer import (
    BrushChanged,
    DashboardEvent,
    DrawInstruction,
    PointerEvent,
    Renderer,
    SliderInput,
    StepEntered,
)
from .tooltip import build_tooltip, tooltip_position

logger = logging.getLogger(__name__)


class DashboardController:
    """
    이벤트 핸들러와 갱신 흐름(cascade)을 담당합니다.

    Examples:
        >>> scene = SceneRenderer()
        >>> controller = DashboardController(collection, scene)
        >>> controller.handle(SliderInput(progress=50))
        >>> scene.summary[1].value
        2
    """

    def __init__(
        self,
        commits: Union[CommitCollection, Sequence[Commit]],
        renderer: Renderer,
        *,
        config: DashboardConfig = CONFIG,
        initial_progress: Optional[float] = None,
    ) -> None:
        if isinstance(commits, CommitCollection):
            all_commits, timezone = commits.commits, commits.timezone
        else:
            all_commits, timezone = tuple(commits), config.time.display_tz

        self.config = config
        self.renderer = renderer
        self.scatter = ScatterViewModel(config.scatter)
        self.file_units = FileUnitModel()
        self.cursor = TimeCursor(config.time, timezone=timezone)
        self.scroll = ScrollCursor(all_commits, self.cursor)

        self.summary: List[SummaryMetric] = []
        self.scatter_frame: Optional[ScatterFrame] = None
        self.file_frame: Optional[FileUnitFrame] = None
        self.selection: SelectionResult = EMPTY_SELECTION
        self._brush: Optional[Rect] = None
        self._hovered: Optional[str] = None

        self.cursor.subscribe(self._on_filter_change)
        self.cursor.initialize(all_commits, initial_progress)

    # ========================================
    # 조회
    # ========================================

    @property
    def state(self) -> FilterState:
        return self.cursor.state

    @property
    def steps(self) -> Sequence[NarrativeStep]:
        return self.scroll.steps

    @property
    def brush(self) -> Optional[Rect]:
        return self._brush

    def visible_commit(self, commit_id: str) -> Optional[Commit]:
        for point in self.scatter.points:
            if point.key == commit_id:
                return point.commit
        return None

    # ========================================
    # 이벤트 디스패치
    # ========================================

    def handle(self, event: DashboardEvent) -> None:
        """UI 이벤트 하나를 처리합니다. 반환 전에 갱신 흐름이 모두 끝납니다."""
        if isinstance(event, SliderInput):
            self.on_slider(event.progress)
        elif isinstance(event, StepEntered):
            self.on_step_enter(event.step_id)
        elif isinstance(event, BrushChanged):
            self.on_brush(event.rect)
        elif isinstance(event, PointerEvent):
            self.on_pointer(event)
        else:
            raise TypeError(f"Unsupported dashboard event: {type(event).__name__}")

    def on_slider(self, progress: float) -> FilterState:
        # 슬라이더가 기준 시각을 옮기면 내러티브 스텝은 더 이상 활성 상태가 아님
        self.scroll.reset()
        return self.cursor.set_progress(progress)

    def on_step_enter(self, step_id: str) -> Optional[FilterState]:
        return self.scroll.on_step_enter(step_id)

    def on_brush(self, rect: Optional[Rect]) -> SelectionResult:
        self._brush = normalize_rect(rect)
        return self._apply_brush()

    def on_pointer(self, event: PointerEvent) -> None:
        commit = self.visible_commit(event.commit_id)
        if commit is None:
            logger.debug(f"Pointer event for hidden commit {event.commit_id!r}")
            return

        position = tooltip_position(
            event.client_x, event.client_y, offset=self.config.ui.tooltip_offset
        )
        if event.kind == "enter":
            self._hovered = commit.id
            self._set_opacity(commit.id, self.config.scatter.hover_opacity)
            self.renderer.show_tooltip(build_tooltip(commit), position)
        elif event.kind == "move":
            self.renderer.show_tooltip(build_tooltip(commit), position)
        elif event.kind == "leave":
            self._clear_hover()

    # ========================================
    # 갱신 흐름
    # ========================================

    def _on_filter_change(self, state: FilterState) -> None:
        self.renderer.show_horizon(state.progress, self.cursor.horizon_label)

        # 2) 요약 카운터
        self.summary = compute_summary(state.lines, state.commits)
        self.renderer.show_summary(self.summary)

        # 3) 산점도 (브러시가 있으면 선택 표시를 같은 명령에 포함)
        self.scatter_frame = self.scatter.update(state.commits)
        instructions = self.scatter.to_instructions(self.scatter_frame)
        if self._brush is not None:
            self.selection = self._select()
            instructions = self._with_selection_flags(instructions)
        self.renderer.draw(DOTS_LAYER, instructions)

        # 4) 파일 구성도
        self.file_frame = self.file_units.update(state.lines)
        self.renderer.show_files(self.file_frame)

        # 5) 브러시 재적용 (사라진 커밋이 선택에 남지 않도록)
        if self._brush is not None:
            self.renderer.show_selection(self.selection)

        if self._hovered is not None and self.visible_commit(self._hovered) is None:
            self._hovered = None
            self.renderer.show_tooltip(None)

        logger.info(
            f"Horizon updated to {state.horizon} "
            f"({len(state.commits)} commits, {len(state.lines)} lines)"
        )

    def _select(self) -> SelectionResult:
        return select_commits(self._brush, self.cursor.filtered_commits(), self.scatter.locate)

    def _with_selection_flags(self, instructions: List[DrawInstruction]) -> List[DrawInstruction]:
        selected = self.selection.selected_ids
        return [
            ins if ins.action == "remove"
            else replace(ins, attrs={**ins.attrs, "selected": ins.key in selected})
            for ins in instructions
        ]

    def _apply_brush(self) -> SelectionResult:
        self.selection = self._select()
        selected = self.selection.selected_ids
        self.renderer.draw(
            DOTS_LAYER,
            [
                DrawInstruction(action="update", key=p.key, attrs={"selected": p.key in selected})
                for p in self.scatter.points
            ],
        )
        self.renderer.show_selection(self.selection)
        return self.selection

    def _set_opacity(self, commit_id: str, opacity: float) -> None:
        self.renderer.draw(
            DOTS_LAYER,
            [DrawInstruction(action="update", key=commit_id, attrs={"fill_opacity": opacity})],
        )

    def _clear_hover(self) -> None:
        if self._hovered is not None:
            self._set_opacity(self._hovered, self.config.scatter.fill_opacity)
        self._hovered = None
        self.renderer.show_tooltip(None)

    def selection_flags(self) -> Dict[str, bool]:
        """현재 렌더된 점마다 선택 여부."""
        selected = self.selection.selected_ids
        return {p.key: p.key in selected for p in self.scatter.points}
