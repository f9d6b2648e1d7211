"""날짜/숫자 표시 포맷 유틸리티 모듈.

영문 로캘 기준의 날짜 문자열("October 28, 2024 at 2:30 PM" 등)과
퍼센트, 빈 값 대체 문자를 제공합니다. 도메인(시간 커서, 내러티브)과
UI(툴팁, 카드)가 같은 포맷을 쓰도록 공통 계층에 둡니다.
"""

from __future__ import annotations

import html
from typing import Optional

import pandas as pd

from ..core.config import CONFIG

PLACEHOLDER = CONFIG.ui.placeholder


def _is_missing(value: object) -> bool:
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _clock(ts: pd.Timestamp, *, pad_hour: bool) -> str:
    hour12 = ts.hour % 12 or 12
    meridiem = "AM" if ts.hour < 12 else "PM"
    hour_text = f"{hour12:02d}" if pad_hour else str(hour12)
    return f"{hour_text}:{ts.minute:02d} {meridiem}"


def format_long_datetime(ts: Optional[pd.Timestamp], *, empty: str = "") -> str:
    """
    "긴 날짜 + 짧은 시각" 형식으로 포맷팅합니다.

    Examples:
        >>> format_long_datetime(pd.Timestamp("2024-10-28 14:30"))
        'October 28, 2024 at 2:30 PM'
    """
    if _is_missing(ts):
        return empty
    ts = pd.Timestamp(ts)
    return f"{ts.month_name()} {ts.day}, {ts.year} at {_clock(ts, pad_hour=False)}"


def format_full_date(ts: Optional[pd.Timestamp], *, empty: str = "") -> str:
    """
    요일을 포함한 전체 날짜.

    Examples:
        >>> format_full_date(pd.Timestamp("2024-10-28 14:30"))
        'Monday, October 28, 2024'
    """
    if _is_missing(ts):
        return empty
    ts = pd.Timestamp(ts)
    return f"{ts.day_name()}, {ts.month_name()} {ts.day}, {ts.year}"


def format_short_time(ts: Optional[pd.Timestamp], *, empty: str = "") -> str:
    """
    2자리 시/분 시각.

    Examples:
        >>> format_short_time(pd.Timestamp("2024-10-28 09:05"))
        '09:05 AM'
    """
    if _is_missing(ts):
        return empty
    return _clock(pd.Timestamp(ts), pad_hour=True)


def format_hour_tick(hour: float) -> str:
    """y축 눈금 라벨. 24시는 00:00으로 표시합니다."""
    return f"{int(hour) % 24:02d}:00"


def format_percent(share: float) -> str:
    """
    비율을 소수점 한 자리 퍼센트로 포맷팅합니다.

    Examples:
        >>> format_percent(1 / 3)
        '33.3%'
    """
    return f"{share * 100:.1f}%"


def format_value(value: object, *, placeholder: str = PLACEHOLDER) -> str:
    """None/NaN은 placeholder로, 나머지는 문자열로 변환합니다."""
    if _is_missing(value):
        return placeholder
    return str(value)


def escape(value: object) -> str:
    """HTML 이스케이프 처리를 수행합니다."""
    return html.escape("" if value is None else str(value))
