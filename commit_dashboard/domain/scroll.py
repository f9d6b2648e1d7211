"""
스크롤 커서 (Scroll Cursor)

내러티브 스텝을 커밋과 1:1로 묶고, 스크롤 관찰자가 보고한
활성 스텝의 커밋 시각으로 시간 커서의 기준 시각을 옮깁니다.
슬라이더와 똑같은 갱신 흐름을 타도록 TimeCursor.set_horizon()만 호출합니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

import pandas as pd

from ..common.formatting import format_long_datetime
from .models import Commit
from .time_cursor import FilterState, TimeCursor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NarrativeStep:
    """
    내러티브 한 단락.

    Attributes:
        step_id: 스크롤 관찰자가 보고하는 스텝 식별자 (= 커밋 ID)
        commit: 이 스텝에 묶인 커밋
    """

    step_id: str
    commit: Commit

    @property
    def heading(self) -> str:
        return format_long_datetime(self.commit.datetime)

    @property
    def body(self) -> str:
        return (
            f"I edited {self.commit.total_lines} lines "
            f"across {self.commit.file_count} files."
        )

    @property
    def url(self) -> str:
        return self.commit.url


def build_narrative(commits: Sequence[Commit]) -> Tuple[NarrativeStep, ...]:
    """시간 오름차순 커밋마다 스텝 하나를 만듭니다."""
    return tuple(NarrativeStep(step_id=c.id, commit=c) for c in commits)


class ScrollCursor:
    """
    스텝 진입 이벤트를 시간 커서 갱신으로 바꿉니다.

    Examples:
        >>> scroll = ScrollCursor(collection.commits, cursor)
        >>> scroll.on_step_enter(scroll.steps[1].step_id)
    """

    def __init__(self, commits: Sequence[Commit], time_cursor: TimeCursor) -> None:
        self._time_cursor = time_cursor
        self.steps = build_narrative(commits)
        self._by_id: Dict[str, NarrativeStep] = {s.step_id: s for s in self.steps}
        self.active_step: Optional[NarrativeStep] = None

    def step_for(self, step_id: str) -> Optional[NarrativeStep]:
        return self._by_id.get(str(step_id))

    def reset(self) -> None:
        """활성 스텝을 해제합니다 (다른 입력이 기준 시각을 옮긴 경우)."""
        self.active_step = None

    def on_step_enter(self, step_id: str) -> Optional[FilterState]:
        """
        스텝이 활성화되면 해당 커밋 시각을 기준 시각으로 설정합니다.

        알 수 없는 스텝이나 시각이 없는 커밋은 경고만 남기고 무시합니다.

        Returns:
            갱신된 FilterState. 무시한 경우 None
        """
        step = self.step_for(step_id)
        if step is None:
            logger.warning(f"Unknown narrative step: {step_id!r}")
            return None
        if step.commit.datetime is None or pd.isna(step.commit.datetime):
            logger.warning(f"Narrative step {step_id!r} has no commit timestamp")
            return None

        self.active_step = step
        logger.debug(f"Narrative step entered: {step_id} ({step.commit.datetime})")
        return self._time_cursor.set_horizon(step.commit.datetime)
