"""
세션 상태 관리

이 모듈은 Streamlit 세션 상태를 사용하여 데이터 파일과
대시보드 컨트롤러를 실행(rerun) 사이에 유지합니다.
세션 간 영속화는 하지 않습니다.
"""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import Optional, Tuple

import pandas as pd
import streamlit as st

from .files import read_line_file

logger = logging.getLogger(__name__)

# Session State Keys
CONTROLLER_KEY = "_commit_controller"
SCENE_KEY = "_commit_scene"
FINGERPRINT_KEY = "_commit_data_fingerprint"


@st.cache_data(ttl=300, show_spinner=False)
def load_uploaded_bytes(data: bytes, name: str) -> pd.DataFrame:
    """업로드된 파일 내용을 DataFrame으로 읽습니다 (내용 기준 캐시)."""
    return read_line_file(data, name=name)


@st.cache_data(ttl=300, show_spinner=False)
def load_local_file(path: str, mtime_ns: int) -> pd.DataFrame:
    """로컬 파일을 DataFrame으로 읽습니다 (경로 + 수정 시각 기준 캐시)."""
    return read_line_file(path)


def select_data_source(default_path: str) -> Optional[Tuple[pd.DataFrame, str]]:
    """
    사이드바에서 데이터 소스를 고르고 DataFrame과 지문(fingerprint)을 반환합니다.

    우선순위:
    1. 업로드된 CSV/Excel 파일
    2. 기본 데이터 파일 (loc.csv)

    Returns:
        (frame, fingerprint) 튜플. 사용할 데이터가 없으면 None
    """
    upload = st.sidebar.file_uploader(
        "loc.csv 업로드 (.csv / .xlsx)", type=["csv", "xlsx"], key="_commit_upload"
    )
    if upload is not None:
        data = upload.getvalue()
        fingerprint = hashlib.sha1(data).hexdigest()
        return load_uploaded_bytes(data, upload.name), fingerprint

    path = Path(default_path)
    if not path.exists():
        return None
    mtime_ns = path.stat().st_mtime_ns
    fingerprint = f"{path.resolve()}:{mtime_ns}"
    return load_local_file(str(path), mtime_ns), fingerprint


def get_session_value(key: str):
    return st.session_state.get(key)


def store_session(controller: object, scene: object, fingerprint: str) -> None:
    st.session_state[CONTROLLER_KEY] = controller
    st.session_state[SCENE_KEY] = scene
    st.session_state[FINGERPRINT_KEY] = fingerprint
    logger.debug(f"Stored dashboard controller for data {fingerprint}")


def is_current(fingerprint: str) -> bool:
    return (
        st.session_state.get(FINGERPRINT_KEY) == fingerprint
        and st.session_state.get(CONTROLLER_KEY) is not None
    )
