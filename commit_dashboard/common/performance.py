"""
성능 모니터링 유틸리티

데이터 로드/커밋 집계처럼 한 번에 전체 데이터셋을 훑는 작업의
실행 시간을 측정해 로깅합니다.
"""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

# 로그 레벨을 올리는 경과 시간 임계값 (초)
WARN_THRESHOLD_S = 1.0
ERROR_THRESHOLD_S = 10.0


def _log_elapsed(operation_name: str, elapsed: float) -> None:
    if elapsed >= ERROR_THRESHOLD_S:
        logger.error(
            f"⚠️  SLOW: {operation_name} took {elapsed:.2f}s "
            f"(threshold: {ERROR_THRESHOLD_S:.0f}s)"
        )
    elif elapsed >= WARN_THRESHOLD_S:
        logger.warning(
            f"⏱️  {operation_name} took {elapsed:.2f}s "
            f"(threshold: {WARN_THRESHOLD_S:.0f}s)"
        )
    else:
        logger.info(f"✓ {operation_name} completed in {elapsed:.3f}s")


def measure_time(func: F) -> F:
    """
    함수 실행 시간을 측정하고 로깅하는 데코레이터.

    실행 시간이 1초 이상이면 WARNING, 10초 이상이면 ERROR 레벨로 로깅합니다.

    Examples:
        >>> @measure_time
        ... def aggregate_commits(records):
        ...     ...
        INFO - ✓ aggregate_commits completed in 0.012s
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            _log_elapsed(func.__name__, time.perf_counter() - start_time)

    return wrapper  # type: ignore[return-value]


def measure_time_context(operation_name: str) -> PerformanceContext:
    """
    컨텍스트 매니저를 사용한 코드 블록 성능 측정.

    Examples:
        >>> with measure_time_context("loc.csv loading"):
        ...     frame = read_line_csv("loc.csv")
    """
    return PerformanceContext(operation_name)


class PerformanceContext:
    """
    코드 블록의 실행 시간을 측정하는 컨텍스트 매니저.

    Attributes:
        operation_name: 측정할 작업의 이름
        elapsed: 경과 시간 (초)
    """

    def __init__(self, operation_name: str) -> None:
        self.operation_name = operation_name
        self.start_time: float = 0.0
        self.elapsed: float = 0.0

    def __enter__(self) -> PerformanceContext:
        self.start_time = time.perf_counter()
        logger.debug(f"Starting: {self.operation_name}")
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.elapsed = time.perf_counter() - self.start_time
        if exc_type is not None:
            logger.error(f"❌ {self.operation_name} failed after {self.elapsed:.2f}s")
            return
        _log_elapsed(self.operation_name, self.elapsed)
