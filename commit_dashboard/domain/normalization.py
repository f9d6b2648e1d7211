"""
라인 기록 정규화 (Line Record Loader)

이 모듈은 loc.csv 같은 원본 표 데이터를 타입이 지정된
LineRecord 목록으로 변환합니다. 파일 읽기 자체는 data_sources 계층의
책임이며, 여기서는 이미 읽힌 DataFrame만 다룹니다.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, List, Optional

import pandas as pd

from ..core.config import INTEGER_COLUMNS, REQUIRED_COLUMNS
from .exceptions import DataLoadError
from .models import LineRecord

logger = logging.getLogger(__name__)


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _parse_raw(value: object) -> pd.Timestamp:
    """값을 Timestamp로 파싱합니다. tz 오프셋이 있으면 tz-aware로 유지합니다."""
    if _is_blank(value):
        return pd.NaT
    try:
        ts = pd.Timestamp(str(value).strip())
    except (ValueError, TypeError, OverflowError):
        return pd.NaT
    if pd.isna(ts):
        return pd.NaT
    return ts


def _compose_raw(date: object, time: object, timezone: object) -> pd.Timestamp:
    if _is_blank(date):
        return pd.NaT
    time_part = "00:00" if _is_blank(time) else str(time).strip()
    tz_part = "" if _is_blank(timezone) else str(timezone).strip()
    ts = _parse_raw(f"{str(date).strip()}T{time_part}{tz_part}")
    if pd.isna(ts):
        ts = _parse_raw(date)
    return ts


def to_naive(ts: pd.Timestamp, timezone: Optional[Any] = None) -> pd.Timestamp:
    """
    tz-aware Timestamp를 timezone 기준 벽시계 시각으로 바꾸고 tz 정보를 제거합니다.

    timezone이 None이면 값 자신의 오프셋을 그대로 씁니다. naive 값과 NaT는 그대로 반환합니다.
    """
    if pd.isna(ts) or ts.tzinfo is None:
        return ts
    if timezone is not None:
        ts = ts.tz_convert(timezone)
    return ts.tz_localize(None)


def parse_timestamp(value: object, *, display_tz: Optional[str] = None) -> pd.Timestamp:
    """
    단일 값을 tz 정보가 없는(naive) Timestamp로 변환합니다.

    tz 오프셋이 포함된 값은 display_tz가 지정되면 해당 시간대로 변환한 뒤,
    지정되지 않으면 작성자 현지 시각 그대로 tz 정보를 제거합니다.
    변환에 실패하면 예외 대신 NaT를 반환합니다.

    여러 행을 함께 다룰 때는 resolve_timestamps()를 사용하세요.
    서로 다른 오프셋의 값을 하나의 기준 시간대로 맞춰 줍니다.

    Examples:
        >>> parse_timestamp("2024-10-28T14:30:00-07:00")
        Timestamp('2024-10-28 14:30:00')
        >>> parse_timestamp("2024-10-28T14:30:00-07:00", display_tz="UTC")
        Timestamp('2024-10-28 21:30:00')
        >>> parse_timestamp("not a date")
        NaT
    """
    return to_naive(_parse_raw(value), display_tz)


def compose_timestamp(
    date: object,
    time: object = None,
    timezone: object = None,
    *,
    display_tz: Optional[str] = None,
) -> pd.Timestamp:
    """
    date + time + timezone 컬럼 값으로 타임스탬프를 만듭니다.

    time이 없으면 자정(00:00)을 사용합니다. 조합 결과를 파싱할 수 없으면
    date 값 단독으로 한 번 더 시도합니다.

    Examples:
        >>> compose_timestamp("2024-10-28", "14:30", "-07:00")
        Timestamp('2024-10-28 14:30:00')
        >>> compose_timestamp("2024-10-28")
        Timestamp('2024-10-28 00:00:00')
    """
    return to_naive(_compose_raw(date, time, timezone), display_tz)


def _raw_timestamps(frame: pd.DataFrame) -> Iterator[pd.Timestamp]:
    n = len(frame)
    empty = pd.Series([None] * n, index=frame.index, dtype=object)
    datetimes = frame["datetime"] if "datetime" in frame.columns else empty
    dates = frame["date"] if "date" in frame.columns else empty
    times = frame["time"] if "time" in frame.columns else empty
    zones = frame["timezone"] if "timezone" in frame.columns else empty

    for combined, date, time, zone in zip(datetimes, dates, times, zones):
        ts = _parse_raw(combined)
        if pd.isna(ts):
            ts = _compose_raw(date, time, zone)
        yield ts


def reference_timezone(frame: pd.DataFrame, *, display_tz: Optional[str] = None) -> Optional[Any]:
    """
    naive 타임스탬프가 표현될 기준 시간대를 결정합니다.

    display_tz가 있으면 그대로 쓰고, 없으면 오프셋을 가진 첫 행의 시간대를 씁니다.
    오프셋이 있는 행이 하나도 없으면 None (입력 시각을 그대로 사용)입니다.

    Examples:
        >>> str(reference_timezone(frame))     # 첫 행이 ...-07:00
        'UTC-07:00'
    """
    if display_tz:
        return display_tz
    frame = frame.rename(columns=lambda c: str(c).strip())
    for ts in _raw_timestamps(frame):
        if not pd.isna(ts) and ts.tzinfo is not None:
            return ts.tzinfo
    return None


def resolve_timestamps(frame: pd.DataFrame, *, display_tz: Optional[str] = None) -> pd.Series:
    """
    행마다 커밋 시각을 결정합니다.

    우선순위:
    1. 결합된 datetime 컬럼 (있고 파싱 가능한 경우)
    2. date (+ time) + timezone 컬럼 조합

    오프셋이 있는 값은 모두 reference_timezone() 기준 시각으로 변환하므로,
    naive 시각의 순서가 실제 시점(instant)의 순서와 같습니다.
    작성자마다 오프셋이 다르거나 서머타임 경계를 지나도 정렬이 뒤집히지 않습니다.

    Returns:
        행 인덱스를 유지한 Timestamp/NaT 시리즈 (object dtype)
    """
    zone = reference_timezone(frame, display_tz=display_tz)
    values = [to_naive(ts, zone) for ts in _raw_timestamps(frame)]
    return pd.Series(values, index=frame.index, dtype=object)


def _coerce_int_column(frame: pd.DataFrame, column: str) -> pd.Series:
    if column not in frame.columns:
        return pd.Series(0, index=frame.index, dtype=int)
    numeric = pd.to_numeric(frame[column], errors="coerce")
    invalid = int(numeric.isna().sum())
    if invalid:
        logger.warning(f"{invalid} rows have a non-numeric '{column}' value; using 0")
    return numeric.fillna(0).astype(int)


def _text_column(frame: pd.DataFrame, column: str, default: Optional[str]) -> list:
    if column not in frame.columns:
        return [default] * len(frame)
    return [default if _is_blank(v) else str(v).strip() for v in frame[column]]


def normalize_line_records(
    frame: pd.DataFrame,
    *,
    display_tz: Optional[str] = None,
) -> List[LineRecord]:
    """
    원본 데이터프레임을 LineRecord 목록으로 변환합니다.

    변환 규칙:
    - line, depth, length: 정수로 변환 (변환 실패 시 0)
    - datetime: resolve_timestamps() 규칙으로 결정, 실패 시 NaT
    - 잘못된 행도 버리지 않습니다. 타임스탬프가 깨진 한 행 때문에
      나머지 데이터셋 렌더링이 막히면 안 되기 때문입니다.

    Args:
        frame: commit, file 컬럼을 포함한 원본 데이터프레임
        display_tz: tz 정보가 있는 타임스탬프를 변환할 시간대

    Returns:
        원본 행 순서를 유지한 LineRecord 목록

    Raises:
        DataLoadError: DataFrame이 아니거나 필수 컬럼이 없는 경우
    """
    # ========================================
    # 1단계: 구조 검증
    # ========================================
    if not isinstance(frame, pd.DataFrame):
        raise DataLoadError("라인 데이터가 손상되었습니다. 파일을 다시 불러와 주세요.")

    df = frame.copy()
    df.columns = [str(c).strip() for c in df.columns]

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        logger.error(f"Missing line columns: {missing}")
        raise DataLoadError("라인 데이터에 필요한 컬럼이 없습니다: " + ", ".join(missing))

    if df.empty:
        logger.warning("Line data is empty")
        return []

    # ========================================
    # 2단계: 컬럼 타입 정규화
    # ========================================
    ints = {col: _coerce_int_column(df, col) for col in INTEGER_COLUMNS}
    timestamps = resolve_timestamps(df, display_tz=display_tz)

    invalid_ts = int(timestamps.isna().sum())
    if invalid_ts:
        logger.warning(f"{invalid_ts} of {len(df)} rows have no valid timestamp")

    # ========================================
    # 3단계: LineRecord 생성
    # ========================================
    records = [
        LineRecord(
            file=file,
            type=kind,
            line=int(line),
            depth=int(depth),
            length=int(length),
            commit_id=commit_id,
            author=author,
            datetime=ts,
        )
        for file, kind, line, depth, length, commit_id, author, ts in zip(
            _text_column(df, "file", ""),
            _text_column(df, "type", ""),
            ints["line"],
            ints["depth"],
            ints["length"],
            _text_column(df, "commit", ""),
            _text_column(df, "author", None),
            timestamps,
        )
    ]

    logger.debug(f"Normalized {len(records)} line records")
    return records
