"""
Commit History Dashboard 패키지

라인 단위 코드 작성 기록(loc.csv)을 커밋으로 집계하고,
여러 뷰(요약 카드, 산점도, 파일 구성도, 스크롤 내러티브, 브러시 선택)를
하나의 시간 기준선(horizon)으로 동기화합니다.

계층 구성:
- domain: 순수 도메인 로직 (Streamlit 의존성 없음)
- data_sources: CSV/Excel 파일 로더
- ui: 렌더러 인터페이스, 컨트롤러, Plotly/Streamlit 렌더링
"""

from __future__ import annotations

__version__ = "1.0.0"
