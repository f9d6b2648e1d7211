"""Configuration and constants for the commit history dashboard.

산점도 크기/색상, 시간 슬라이더 범위, 커밋 링크 등 전역 설정을 제공합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

# ============================================================
# 입력 데이터 스키마
# ============================================================

# loc.csv에서 반드시 있어야 하는 컬럼
REQUIRED_COLUMNS = ("commit", "file")

# 정수로 변환할 컬럼
INTEGER_COLUMNS = ("line", "depth", "length")

# 파일 구성도에서 라인 타입별로 사용하는 범주형 팔레트 (Tableau10)
TABLEAU10 = [
    "#4E79A7", "#F28E2B", "#E15759", "#76B7B2", "#59A14F",
    "#EDC948", "#B07AA1", "#FF9DA7", "#9C755F", "#BAB0AC",
]


# ============================================================
# 산점도 설정
# ============================================================

@dataclass(frozen=True)
class Margin:
    """산점도 여백 (픽셀)"""

    top: int = 20
    right: int = 20
    bottom: int = 40
    left: int = 60


@dataclass(frozen=True)
class ScatterConfig:
    """커밋 산점도 인코딩 관련 설정"""

    # SVG viewBox 크기
    width: int = 1000
    height: int = 600
    margin: Margin = field(default_factory=Margin)

    # 라인 수 → 반지름 매핑 범위 (sqrt 스케일)
    radius_range: Tuple[float, float] = (2.0, 30.0)

    # 주간 시간대 [start, end)
    day_start_hour: float = 6.0
    day_end_hour: float = 18.0

    # 주간/야간 색상
    day_color: str = "#ffb347"
    night_color: str = "#4682b4"

    # 기본/호버 투명도
    fill_opacity: float = 0.7
    hover_opacity: float = 1.0

    # y축 눈금 간격 (시간)
    y_tick_step: int = 2

    x_title: str = "Commit Date"
    y_title: str = "Time of Day (HH:00)"


# ============================================================
# 시간 커서 설정
# ============================================================

@dataclass(frozen=True)
class TimeConfig:
    """진행도(progress) 슬라이더 및 시간대 설정"""

    # 최초 진행도 (100 = 전체 커밋 표시)
    initial_progress: float = 100.0

    # 진행도 허용 범위
    progress_min: float = 0.0
    progress_max: float = 100.0

    # tz 정보가 있는 타임스탬프를 변환할 표시 시간대.
    # None이면 오프셋이 있는 첫 행의 시간대로 모든 행을 맞춥니다.
    display_tz: Optional[str] = None


@dataclass(frozen=True)
class CommitConfig:
    """커밋 메타데이터 설정"""

    # 커밋 상세 페이지 링크 템플릿
    url_template: str = "https://github.com/YOUR_USERNAME/YOUR_REPO/commit/{id}"


@dataclass(frozen=True)
class UIConfig:
    """UI 표시 관련 설정"""

    page_title: str = "Meta · Commit History"

    # 기본 데이터 파일
    default_data_file: str = "loc.csv"

    # 툴팁 위치 오프셋 (픽셀)
    tooltip_offset: int = 12

    # 파일 구성도 유닛 마커 크기 (픽셀)
    unit_size: int = 6

    # 빈 값 표시 문자
    placeholder: str = "—"


@dataclass(frozen=True)
class DashboardConfig:
    """대시보드 전역 설정"""

    scatter: ScatterConfig = field(default_factory=ScatterConfig)
    time: TimeConfig = field(default_factory=TimeConfig)
    commit: CommitConfig = field(default_factory=CommitConfig)
    ui: UIConfig = field(default_factory=UIConfig)


# ============================================================
# 전역 설정 인스턴스
# ============================================================

# 전역 설정 객체 (불변)
CONFIG = DashboardConfig()
