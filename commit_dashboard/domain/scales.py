"""
연속 스케일 (linear / sqrt / time)

진행도 ↔ 시각 변환(시간 커서)과 산점도 위치/크기 인코딩에 쓰는
단조 선형 매핑을 제공합니다. 도메인이 한 점으로 수렴하면(최소 == 최대)
값은 출력 범위의 중앙으로 매핑됩니다.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np
import pandas as pd

_NS_PER_MS = 1_000_000


def _lerp(r0: float, r1: float, t: float) -> float:
    return r0 + (r1 - r0) * t


@dataclass(frozen=True)
class LinearScale:
    """
    수치 도메인 → 수치 범위 선형 스케일.

    Examples:
        >>> y = LinearScale(domain=(0, 24), range=(560, 20))
        >>> y(12)
        290.0
        >>> y.invert(290)
        12.0
    """

    domain: Tuple[float, float]
    range: Tuple[float, float]

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            return _lerp(r0, r1, 0.5)
        return _lerp(r0, r1, (float(value) - d0) / (d1 - d0))

    def invert(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if r1 == r0:
            return float(d0)
        return _lerp(d0, d1, (float(value) - r0) / (r1 - r0))

    def ticks(self, step: float) -> List[float]:
        """도메인 구간을 step 간격으로 나눈 눈금 값 (양 끝 포함)."""
        lo, hi = sorted(self.domain)
        return [float(v) for v in np.arange(lo, hi + step / 2, step)]


@dataclass(frozen=True)
class SqrtScale:
    """
    제곱근 스케일. 원의 반지름 대신 면적이 값에 비례하도록 할 때 사용합니다.

    Examples:
        >>> r = SqrtScale(domain=(1, 100), range=(2, 30))
        >>> r(1), r(100)
        (2.0, 30.0)
    """

    domain: Tuple[float, float]
    range: Tuple[float, float]

    def __call__(self, value: float) -> float:
        d0, d1 = (math.sqrt(max(0.0, float(d))) for d in self.domain)
        r0, r1 = self.range
        if d1 == d0:
            return _lerp(r0, r1, 0.5)
        return _lerp(r0, r1, (math.sqrt(max(0.0, float(value))) - d0) / (d1 - d0))


@dataclass(frozen=True)
class TimeScale:
    """
    시각 도메인 → 수치 범위 선형 스케일.

    내부 계산은 정수 나노초 기준이며, invert() 결과는 밀리초 단위로
    반올림됩니다. 따라서 초 단위로 기록된 커밋 시각 t에 대해
    invert(scale(t)) == t 가 성립합니다.

    Examples:
        >>> ts = TimeScale(
        ...     domain=(pd.Timestamp("2024-01-01"), pd.Timestamp("2024-01-02")),
        ...     range=(0, 100),
        ... )
        >>> ts(pd.Timestamp("2024-01-01 12:00"))
        50.0
        >>> ts.invert(25)
        Timestamp('2024-01-01 06:00:00')
    """

    domain: Tuple[pd.Timestamp, pd.Timestamp]
    range: Tuple[float, float]

    @property
    def span_ns(self) -> int:
        start, end = self.domain
        return int(end.value) - int(start.value)

    def __call__(self, value: pd.Timestamp) -> float:
        r0, r1 = self.range
        span = self.span_ns
        if span == 0:
            return _lerp(r0, r1, 0.5)
        offset = int(pd.Timestamp(value).value) - int(self.domain[0].value)
        return _lerp(r0, r1, offset / span)

    def invert(self, value: float) -> pd.Timestamp:
        start, end = self.domain
        r0, r1 = self.range
        span = self.span_ns
        if span == 0 or r1 == r0:
            return start
        frac = (float(value) - r0) / (r1 - r0)
        if frac == 0:
            return start
        if frac == 1:
            return end
        ns = int(start.value) + int(round(span * frac))
        ns = (ns + _NS_PER_MS // 2) // _NS_PER_MS * _NS_PER_MS
        return pd.Timestamp(ns)
