"""
도메인 모델: 커밋 대시보드의 핵심 데이터 구조

이 모듈은 라인 기록(LineRecord)과 커밋(Commit) 모델을 정의합니다.
모든 모델은 불변(frozen) 데이터클래스로 구현되어, 평탄한 라인 목록과
각 커밋의 라인 역참조가 같은 객체를 안전하게 공유할 수 있습니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Tuple

import pandas as pd


@dataclass(frozen=True)
class LineRecord:
    """
    한 커밋 시점에 관측된 소스 코드 한 줄.

    Attributes:
        file: 파일 경로
        type: 라인 분류 태그 (언어/확장자, 예: "js", "css")
        line: 파일 내 1부터 시작하는 줄 번호
        depth: 들여쓰기(중첩) 깊이
        length: 문자 수
        commit_id: 소속 커밋 ID
        author: 작성자 (없으면 None)
        datetime: 커밋 시각. 파싱 실패 시 NaT

    Examples:
        >>> record = LineRecord(
        ...     file="src/main.js", type="js", line=1, depth=0, length=42,
        ...     commit_id="a1b2c3", author="dev",
        ...     datetime=pd.Timestamp("2024-10-28 14:30"),
        ... )
        >>> record.has_timestamp
        True
    """

    file: str
    type: str
    line: int
    depth: int
    length: int
    commit_id: str
    author: Optional[str]
    datetime: pd.Timestamp

    @property
    def has_timestamp(self) -> bool:
        return not pd.isna(self.datetime)


@dataclass(frozen=True)
class Commit:
    """
    같은 commit_id를 공유하는 라인 기록들의 집계.

    lines는 소유 라인 기록에 대한 역참조입니다. repr/비교에서 제외되고
    to_dict() 출력에도 포함되지 않아, 로그나 디버그 출력이 수천 줄의
    라인 기록으로 뒤덮이지 않습니다.

    Attributes:
        id: 커밋 ID
        author: 첫 라인 기록의 작성자
        datetime: 첫 라인 기록의 커밋 시각
        hour_frac: 시 + 분/60, [0, 24) 범위
        total_lines: 소유 라인 수
        url: 커밋 상세 페이지 링크
        lines: 소유 라인 기록 (직렬화 제외)
    """

    id: str
    author: Optional[str]
    datetime: pd.Timestamp
    hour_frac: float
    total_lines: int
    url: str = ""
    lines: Tuple[LineRecord, ...] = field(default=(), repr=False, compare=False)

    @property
    def file_count(self) -> int:
        """이 커밋이 건드린 서로 다른 파일 수."""
        return len({line.file for line in self.lines})

    def to_dict(self) -> Dict[str, Any]:
        """lines 역참조를 제외한 필드만 딕셔너리로 반환합니다."""
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name != "lines"}


def hour_fraction(timestamp: pd.Timestamp) -> float:
    """
    타임스탬프의 시각을 [0, 24) 범위의 실수로 변환합니다.

    Examples:
        >>> hour_fraction(pd.Timestamp("2024-10-28 14:30"))
        14.5
    """
    return timestamp.hour + timestamp.minute / 60
