"""
CSV / Excel 파일 리더

loc.csv(또는 같은 스키마의 Excel 파일)를 읽어 문자열 컬럼의
DataFrame으로 반환합니다. 타입 변환은 domain.normalization의 책임입니다.
"""

from __future__ import annotations

import logging
import zipfile
from io import BytesIO
from pathlib import Path
from typing import IO, Union

import pandas as pd

from ..domain.exceptions import DataLoadError

logger = logging.getLogger(__name__)

Source = Union[str, Path, IO[bytes], IO[str], bytes]


def _as_buffer(source: Source):
    if isinstance(source, (bytes, bytearray)):
        return BytesIO(source)
    return source


def read_line_csv(source: Source) -> pd.DataFrame:
    """
    loc.csv를 읽습니다. 모든 컬럼은 문자열로 읽고 빈 칸은 NaN으로 둡니다.

    Raises:
        DataLoadError: 파일이 없거나 CSV로 파싱할 수 없는 경우
    """
    try:
        frame = pd.read_csv(_as_buffer(source), dtype=str)
    except FileNotFoundError:
        raise DataLoadError(f"데이터 파일을 찾을 수 없습니다: {source}") from None
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        raise DataLoadError(f"CSV 파일을 읽을 수 없습니다: {exc}") from exc

    logger.info(f"Read {len(frame)} rows from CSV")
    return frame


def read_line_excel(source: Source, *, sheet_name: Union[int, str] = 0) -> pd.DataFrame:
    """
    loc.csv와 같은 스키마의 Excel 시트를 읽습니다 (기본: 첫 시트).

    Raises:
        DataLoadError: 파일을 Excel로 읽을 수 없는 경우
    """
    try:
        frame = pd.read_excel(_as_buffer(source), sheet_name=sheet_name, dtype=str, engine="openpyxl")
    except FileNotFoundError:
        raise DataLoadError(f"데이터 파일을 찾을 수 없습니다: {source}") from None
    except (ValueError, KeyError, OSError, zipfile.BadZipFile) as exc:
        raise DataLoadError(f"엑셀 파일을 읽을 수 없습니다: {exc}") from exc

    logger.info(f"Read {len(frame)} rows from Excel sheet {sheet_name!r}")
    return frame


def read_line_file(source: Source, *, name: str = "") -> pd.DataFrame:
    """파일 이름 확장자로 CSV/Excel 리더를 고릅니다."""
    label = name or (str(source) if isinstance(source, (str, Path)) else "")
    if label.lower().endswith((".xlsx", ".xlsm")):
        return read_line_excel(source)
    return read_line_csv(source)
