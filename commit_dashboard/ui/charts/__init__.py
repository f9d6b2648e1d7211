"""차트 모듈.

산점도 뷰 모델과 Plotly 그림 빌더를 제공합니다.
"""

from .figure import build_scatter_figure, selection_to_rect, x_ticks
from .scatter import DOTS_LAYER, ScatterFrame, ScatterPoint, ScatterViewModel

__all__ = [
    "ScatterViewModel",
    "ScatterFrame",
    "ScatterPoint",
    "DOTS_LAYER",
    "build_scatter_figure",
    "selection_to_rect",
    "x_ticks",
]
