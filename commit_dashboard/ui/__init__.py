"""
UI 레이어의 공개 API

렌더러 인터페이스, 컨트롤러, 유지형 장면, 차트/패널 렌더러를 재수출합니다.
"""

from .adapters import handle_domain_errors
from .charts import ScatterViewModel, build_scatter_figure, selection_to_rect
from .controller import DashboardController
from .renderer import (
    BrushChanged,
    DrawInstruction,
    PointerEvent,
    Renderer,
    SliderInput,
    StepEntered,
    TooltipPayload,
)
from .scene import SceneRenderer
from .tooltip import build_tooltip

__all__ = (
    # Controller
    "DashboardController",
    "SceneRenderer",
    "Renderer",
    "DrawInstruction",
    "TooltipPayload",
    "build_tooltip",
    # Events
    "SliderInput",
    "StepEntered",
    "BrushChanged",
    "PointerEvent",
    # Charts
    "ScatterViewModel",
    "build_scatter_figure",
    "selection_to_rect",
    # Adapters
    "handle_domain_errors",
)
