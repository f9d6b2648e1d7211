"""
커밋 대시보드 예외 계층

라인 로더, 시간 커서, 선택 엔진이 던지는 예외입니다.
화면 표시는 ui.adapters.handle_domain_errors()가 담당합니다.
"""

from __future__ import annotations


class DomainError(Exception):
    """commit_dashboard에서 발생시키는 모든 예외의 부모 클래스."""


class ValidationError(DomainError):
    """
    입력 값 검증 실패 시 발생하는 예외.

    예: 숫자가 아닌 진행도, 잘못된 브러시 사각형 등
    """

    pass


class DataLoadError(DomainError):
    """
    라인 데이터를 읽지 못했을 때 발생하는 예외.

    CSV/Excel 파일을 읽을 수 없거나 필수 컬럼(commit, file)이
    없는 경우 사용합니다. 개별 행의 타임스탬프 오류는 예외가 아니라
    NaT로 처리됩니다.
    """

    pass


class FilterError(DomainError):
    """
    브러시 선택 계산 실패.

    브러시 선택 시 보이는 커밋의 산점도 좌표가 없는 경우처럼
    필터 결과와 뷰 스케일이 어긋났을 때 사용합니다.
    """

    pass


class TimelineError(DomainError):
    """
    시간 커서 사용 오류 시 발생하는 예외.

    initialize() 이전에 진행도/기준 시각을 변경하려 한 경우 등.
    """

    pass
