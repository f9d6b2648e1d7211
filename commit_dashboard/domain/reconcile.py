"""
키 기반 enter/update/exit 분할

이전 렌더 결과와 새 결과를 ID로 비교하여 새로 들어온 항목,
유지되는 항목, 빠진 항목으로 나눕니다. 위치(인덱스)가 아닌 키로
비교하므로, 두 결과에 모두 있는 항목은 삭제 후 재생성이 아니라
제자리 갱신으로 처리됩니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Hashable, Iterable, List, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Reconciliation(Generic[T]):
    """
    키 기반 diff 결과.

    Attributes:
        enter: 새 결과에만 있는 항목 (새 결과 순서)
        update: 양쪽에 있는 항목의 (이전, 현재) 쌍 (새 결과 순서)
        exit: 이전 결과에만 있는 항목 (이전 결과 순서)
    """

    enter: Tuple[T, ...]
    update: Tuple[Tuple[T, T], ...]
    exit: Tuple[T, ...]

    @property
    def is_empty(self) -> bool:
        return not (self.enter or self.update or self.exit)


def reconcile(
    previous: Iterable[T],
    current: Iterable[T],
    key: Callable[[T], Hashable],
) -> Reconciliation[T]:
    """
    두 컬렉션을 key 기준으로 비교합니다.

    Args:
        previous: 이전에 렌더링된 항목
        current: 이번에 렌더링할 항목
        key: 항목의 고유 키를 반환하는 함수

    Returns:
        Reconciliation

    Examples:
        >>> diff = reconcile([1, 2, 3], [3, 4], key=lambda v: v)
        >>> diff.enter, diff.update, diff.exit
        ((4,), ((3, 3),), (1, 2))
    """
    before = {key(item): item for item in previous}
    current_items = list(current)
    current_keys = {key(item) for item in current_items}

    enter: List[T] = []
    update: List[Tuple[T, T]] = []
    for item in current_items:
        k = key(item)
        if k in before:
            update.append((before[k], item))
        else:
            enter.append(item)

    exit_ = [item for k, item in before.items() if k not in current_keys]

    return Reconciliation(enter=tuple(enter), update=tuple(update), exit=tuple(exit_))
