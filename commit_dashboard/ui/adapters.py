"""
도메인 예외 표시 어댑터

시간 커서, 선택 엔진, 라인 로더가 던지는 DomainError를 Streamlit
경고/오류 박스로 바꿉니다. domain 패키지는 Streamlit을 임포트하지 않고,
화면 표시 방식은 이 모듈에서만 결정합니다.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

import streamlit as st

from ..domain.exceptions import (
    DataLoadError,
    FilterError,
    TimelineError,
    ValidationError,
)

logger = logging.getLogger(__name__)


@contextmanager
def handle_domain_errors() -> Iterator[None]:
    """
    블록 안에서 발생한 도메인 예외를 화면 메시지로 표시하고 삼킵니다.

    - ValidationError: 진행도/선택 영역 등 입력 값 오류 → 경고
    - DataLoadError: loc.csv 읽기 또는 필수 컬럼 누락 → 오류
    - FilterError: 브러시 선택과 산점도 좌표 불일치 → 경고
    - TimelineError: 초기화되지 않은 시간 커서 사용 → 오류
    - 그 외 예외: 로그에 스택을 남기고 오류 + 상세 표시

    Examples:
        >>> with handle_domain_errors():
        ...     controller.handle(SliderInput(progress=value))
    """
    try:
        yield
    except ValidationError as exc:
        logger.warning(f"Rejected input: {exc}")
        st.warning(f"⚠️ 입력 값을 적용할 수 없습니다: {exc}")
    except DataLoadError as exc:
        logger.error(f"Line data could not be loaded: {exc}")
        st.error(f"❌ 라인 데이터를 불러오지 못했습니다: {exc}")
    except FilterError as exc:
        logger.warning(f"Selection failed: {exc}")
        st.warning(f"⚠️ 선택 영역을 계산하지 못했습니다: {exc}")
    except TimelineError as exc:
        logger.error(f"Time cursor misuse: {exc}")
        st.error(f"❌ 시간 커서 오류: {exc}")
    except Exception as exc:
        logger.exception("Unexpected dashboard error")
        st.error(f"❌ 예상치 못한 오류: {type(exc).__name__}: {exc}")
        st.exception(exc)
