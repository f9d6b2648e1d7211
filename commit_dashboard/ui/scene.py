"""
유지형(retained) 렌더러

그리기 명령과 패널 내용을 마지막 상태로 보관합니다. Streamlit은
매 실행마다 화면 전체를 다시 그리므로, 앱은 이 장면(scene)을 읽어
Plotly 그림과 HTML 패널을 만듭니다. 테스트에서도 화면 없이
컨트롤러 출력을 검증하는 데 사용합니다.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..domain.file_units import FileUnitFrame
from ..domain.selection import EMPTY_SELECTION, SelectionResult
from ..domain.summary import SummaryMetric
from .renderer import DrawInstruction, TooltipPayload

logger = logging.getLogger(__name__)


class SceneRenderer:
    """
    Renderer 프로토콜 구현.

    Attributes:
        layers: 레이어 → {도형 키 → 목표 속성}
        last_instructions: 레이어별 마지막으로 받은 명령 (애니메이션용)
        summary, files, selection, tooltip: 패널별 마지막 내용
    """

    def __init__(self) -> None:
        self.layers: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self.last_instructions: Dict[str, List[DrawInstruction]] = {}
        self.summary: List[SummaryMetric] = []
        self.files: Optional[FileUnitFrame] = None
        self.selection: SelectionResult = EMPTY_SELECTION
        self.tooltip: Optional[TooltipPayload] = None
        self.tooltip_position: Optional[Tuple[float, float]] = None
        self.progress: float = 0.0
        self.horizon_label: str = ""

    # ========================================
    # Renderer 프로토콜
    # ========================================

    def draw(self, layer: str, instructions: Sequence[DrawInstruction]) -> None:
        shapes = self.layers.setdefault(layer, {})
        for ins in instructions:
            if ins.action == "remove":
                shapes.pop(ins.key, None)
                continue
            if ins.action == "update" and ins.key not in shapes:
                logger.debug(f"Update for unknown shape {ins.key!r} in layer {layer!r}")
                continue
            target = shapes.setdefault(ins.key, {})
            target.update(ins.attrs)
            if ins.order is not None:
                target["order"] = ins.order
        self.last_instructions[layer] = list(instructions)

    def show_summary(self, metrics: Sequence[SummaryMetric]) -> None:
        self.summary = list(metrics)

    def show_files(self, frame: FileUnitFrame) -> None:
        self.files = frame

    def show_selection(self, result: SelectionResult) -> None:
        self.selection = result

    def show_tooltip(
        self,
        payload: Optional[TooltipPayload],
        position: Optional[Tuple[float, float]] = None,
    ) -> None:
        self.tooltip = payload
        self.tooltip_position = position if payload is not None else None

    def show_horizon(self, progress: float, label: str) -> None:
        self.progress = progress
        self.horizon_label = label

    # ========================================
    # 조회
    # ========================================

    def shapes(self, layer: str) -> List[Tuple[str, Dict[str, Any]]]:
        """레이어의 도형을 그리기 순서대로 반환합니다."""
        items = self.layers.get(layer, {})
        return sorted(items.items(), key=lambda item: item[1].get("order", 0))

    @property
    def tooltip_visible(self) -> bool:
        return self.tooltip is not None
