"""커밋 툴팁 내용 구성 모듈."""

from __future__ import annotations

from typing import Tuple

from ..common.formatting import PLACEHOLDER, format_full_date, format_short_time
from ..core.config import CONFIG
from ..domain.models import Commit
from .renderer import TooltipPayload


def build_tooltip(commit: Commit, *, placeholder: str = PLACEHOLDER) -> TooltipPayload:
    """
    호버한 커밋의 툴팁 내용을 만듭니다.

    작성자가 없으면 "Unknown", 라인 수가 없으면 placeholder를 표시합니다.
    """
    total = commit.total_lines
    return TooltipPayload(
        commit_id=commit.id,
        url=commit.url,
        date=format_full_date(commit.datetime),
        time=format_short_time(commit.datetime),
        author=commit.author or "Unknown",
        lines=placeholder if total is None else str(total),
    )


def tooltip_position(
    client_x: float,
    client_y: float,
    *,
    offset: int = CONFIG.ui.tooltip_offset,
) -> Tuple[float, float]:
    """포인터 위치에서 오른쪽 아래로 offset만큼 떨어진 툴팁 위치."""
    return (client_x + offset, client_y + offset)
