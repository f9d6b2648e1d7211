"""
렌더러 인터페이스와 입력 이벤트

컨트롤러는 화면을 직접 그리지 않고, ID로 키가 지정된 선언적 그리기
명령을 Renderer에 넘깁니다. 반대로 UI(슬라이더, 스크롤, 브러시, 포인터)는
아래 이벤트 객체를 만들어 컨트롤러에 전달합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Optional, Protocol, Sequence, Tuple, Union

from ..domain.file_units import FileUnitFrame
from ..domain.selection import Rect, SelectionResult
from ..domain.summary import SummaryMetric

# ============================================================
# 그리기 명령
# ============================================================

Action = Literal["create", "update", "remove"]


@dataclass(frozen=True)
class DrawInstruction:
    """
    키가 지정된 도형 하나에 대한 선언적 명령.

    Attributes:
        action: create(새 도형), update(기존 도형 갱신), remove(애니메이션 후 제거)
        key: 도형 ID (커밋 ID)
        attrs: 목표 속성 (cx, cy, r, fill, fill_opacity 등)
        start: 애니메이션 시작 속성. 비어 있으면 즉시 적용
        order: 그리기 순서 (작을수록 먼저 그림). 스타일만 바꾸는 명령은 None
    """

    action: Action
    key: str
    attrs: Dict[str, Any] = field(default_factory=dict)
    start: Dict[str, Any] = field(default_factory=dict)
    order: Optional[int] = None

    @property
    def animated(self) -> bool:
        return bool(self.start)


# ============================================================
# 툴팁
# ============================================================

@dataclass(frozen=True)
class TooltipPayload:
    """커밋 호버 시 표시할 내용."""

    commit_id: str
    url: str
    date: str
    time: str
    author: str
    lines: str


# ============================================================
# 입력 이벤트
# ============================================================

@dataclass(frozen=True)
class SliderInput:
    """진행도 슬라이더 입력."""

    progress: float


@dataclass(frozen=True)
class StepEntered:
    """스크롤 관찰자가 보고한 내러티브 스텝 진입."""

    step_id: str


@dataclass(frozen=True)
class BrushChanged:
    """브러시 start/move/end. rect가 None이면 선택 해제."""

    rect: Optional[Rect]


@dataclass(frozen=True)
class PointerEvent:
    """산점도 점에 대한 포인터 이벤트."""

    kind: Literal["enter", "move", "leave"]
    commit_id: str
    client_x: float = 0.0
    client_y: float = 0.0


DashboardEvent = Union[SliderInput, StepEntered, BrushChanged, PointerEvent]


# ============================================================
# 렌더러 프로토콜
# ============================================================

class Renderer(Protocol):
    """컨트롤러가 사용하는 렌더링 협력자."""

    def draw(self, layer: str, instructions: Sequence[DrawInstruction]) -> None:  # pragma: no cover - interface definition
        ...

    def show_summary(self, metrics: Sequence[SummaryMetric]) -> None:  # pragma: no cover - interface definition
        ...

    def show_files(self, frame: FileUnitFrame) -> None:  # pragma: no cover - interface definition
        ...

    def show_selection(self, result: SelectionResult) -> None:  # pragma: no cover - interface definition
        ...

    def show_tooltip(
        self,
        payload: Optional[TooltipPayload],
        position: Optional[Tuple[float, float]] = None,
    ) -> None:  # pragma: no cover - interface definition
        ...

    def show_horizon(self, progress: float, label: str) -> None:  # pragma: no cover - interface definition
        ...
