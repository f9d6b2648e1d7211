"""공통 유틸리티 모듈.

여러 모듈에서 공통으로 사용하는 유틸리티 함수들을 제공합니다.
"""

from .formatting import (
    PLACEHOLDER,
    escape,
    format_full_date,
    format_hour_tick,
    format_long_datetime,
    format_percent,
    format_short_time,
    format_value,
)
from .performance import PerformanceContext, measure_time, measure_time_context

__all__ = [
    "PLACEHOLDER",
    "escape",
    "format_full_date",
    "format_hour_tick",
    "format_long_datetime",
    "format_percent",
    "format_short_time",
    "format_value",
    "measure_time",
    "measure_time_context",
    "PerformanceContext",
]
