"""
파일 구성도 모델 (File Unit Model)

필터링된 라인을 파일별로 묶고, 라인 하나당 유닛 마커 하나를
라인 type 색상으로 만들어 파일 구성도를 구성합니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..core.config import TABLEAU10
from .models import LineRecord
from .reconcile import Reconciliation, reconcile

logger = logging.getLogger(__name__)


class CategoryColorScale:
    """
    범주형 색상 스케일.

    처음 본 순서대로 팔레트 색을 배정하고, 한 번 배정된 색은
    이후 렌더에서도 바뀌지 않습니다. 팔레트를 다 쓰면 처음부터 반복합니다.

    Examples:
        >>> colors = CategoryColorScale()
        >>> colors("js"), colors("css"), colors("js")
        ('#4E79A7', '#F28E2B', '#4E79A7')
    """

    def __init__(self, palette: Sequence[str] = TABLEAU10) -> None:
        self._palette = list(palette)
        self._assigned: Dict[str, str] = {}

    def __call__(self, category: str) -> str:
        if category not in self._assigned:
            self._assigned[category] = self._palette[len(self._assigned) % len(self._palette)]
        return self._assigned[category]

    @property
    def domain(self) -> List[str]:
        """배정 순서대로의 범주 목록 (범례용)."""
        return list(self._assigned)


@dataclass(frozen=True)
class Unit:
    """파일 구성도의 라인 한 칸."""

    type: str
    color: str


@dataclass(frozen=True)
class FileGroup:
    """
    한 파일의 유닛 묶음.

    Attributes:
        name: 파일 경로 (그룹 키)
        lines: 이 파일에 속한 필터링된 라인
        units: 라인별 유닛 (lines와 같은 순서)
    """

    name: str
    lines: Tuple[LineRecord, ...] = field(repr=False)
    units: Tuple[Unit, ...] = field(repr=False)

    @property
    def line_count(self) -> int:
        return len(self.lines)


@dataclass(frozen=True)
class FileUnitFrame:
    """파일 구성도 한 번의 갱신 결과."""

    files: Tuple[FileGroup, ...]
    diff: Reconciliation[FileGroup]

    @property
    def legend(self) -> List[Tuple[str, str]]:
        seen: Dict[str, str] = {}
        for group in self.files:
            for unit in group.units:
                seen.setdefault(unit.type, unit.color)
        return list(seen.items())


def group_lines_by_file(lines: Iterable[LineRecord]) -> List[Tuple[str, Tuple[LineRecord, ...]]]:
    """
    라인을 파일 경로로 묶고 라인 수 내림차순으로 정렬합니다.

    라인 수가 같으면 파일이 처음 등장한 순서를 유지합니다.
    """
    groups: Dict[str, List[LineRecord]] = {}
    for line in lines:
        groups.setdefault(line.file, []).append(line)
    ordered = sorted(groups.items(), key=lambda item: -len(item[1]))
    return [(name, tuple(members)) for name, members in ordered]


def _same_lines(a: Tuple[LineRecord, ...], b: Tuple[LineRecord, ...]) -> bool:
    return len(a) == len(b) and all(x is y for x, y in zip(a, b))


class FileUnitModel:
    """
    필터 변경에 따라 파일 그룹을 점진적으로 갱신합니다.

    파일 경로를 키로 이전 결과와 비교하며, 라인 구성이 그대로인 파일은
    이전 FileGroup 객체를 그대로 재사용합니다.
    """

    def __init__(self, colors: Optional[CategoryColorScale] = None) -> None:
        self.colors = colors or CategoryColorScale()
        self._files: Dict[str, FileGroup] = {}
        self._order: Tuple[FileGroup, ...] = ()

    @property
    def files(self) -> Tuple[FileGroup, ...]:
        return self._order

    def update(self, lines: Sequence[LineRecord]) -> FileUnitFrame:
        groups: List[FileGroup] = []
        reused = 0
        for name, members in group_lines_by_file(lines):
            previous = self._files.get(name)
            if previous is not None and _same_lines(previous.lines, members):
                groups.append(previous)
                reused += 1
                continue
            units = tuple(Unit(type=line.type, color=self.colors(line.type)) for line in members)
            groups.append(FileGroup(name=name, lines=members, units=units))

        diff = reconcile(self._order, groups, key=lambda g: g.name)
        self._order = tuple(groups)
        self._files = {g.name: g for g in groups}

        logger.debug(
            f"File units: {len(groups)} files ({reused} reused, "
            f"{len(diff.enter)} entered, {len(diff.exit)} exited)"
        )
        return FileUnitFrame(files=self._order, diff=diff)
