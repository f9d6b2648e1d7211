"""요약 카드, 파일 구성도, 선택 분석, 내러티브 패널 렌더링 모듈.

build_* 함수는 순수 HTML 문자열을 만들고, render_* 함수는 그 결과를
Streamlit에 출력합니다.
"""

from __future__ import annotations

from typing import Optional, Sequence

import streamlit as st

from ..common.formatting import PLACEHOLDER, escape, format_value
from ..core.config import CONFIG
from ..domain.file_units import FileUnitFrame
from ..domain.scroll import NarrativeStep
from ..domain.selection import SelectionResult
from ..domain.summary import SummaryMetric


# ============================================================
# 요약 카드
# ============================================================

def build_summary_html(metrics: Sequence[SummaryMetric], *, placeholder: str = PLACEHOLDER) -> str:
    stats = "".join(
        '<div class="stat">'
        f'<div class="stat-label">{escape(m.label)}</div>'
        f'<div class="stat-value">{escape(format_value(m.value, placeholder=placeholder))}</div>'
        "</div>"
        for m in metrics
    )
    return (
        '<div class="summary-card"><h2>Summary</h2>'
        f'<div class="summary-grid">{stats}</div></div>'
    )


def render_summary(metrics: Sequence[SummaryMetric]) -> None:
    st.markdown(build_summary_html(metrics), unsafe_allow_html=True)


# ============================================================
# 파일 구성도
# ============================================================

def build_files_html(frame: Optional[FileUnitFrame], *, unit_size: int = CONFIG.ui.unit_size) -> str:
    """파일별 <dt>경로 + 라인 수</dt><dd>유닛들</dd> 목록. 비어 있으면 빈 문자열."""
    if frame is None or not frame.files:
        return ""
    rows = []
    for group in frame.files:
        units = "".join(
            f'<div class="loc" style="background:{u.color};'
            f'width:{unit_size}px;height:{unit_size}px"></div>'
            for u in group.units
        )
        rows.append(
            '<div class="file-row">'
            f"<dt><code>{escape(group.name)}</code><br>"
            f"<small>{group.line_count} lines</small></dt>"
            f'<dd class="units">{units}</dd>'
            "</div>"
        )
    return f'<dl class="files">{"".join(rows)}</dl>'


def render_files(frame: Optional[FileUnitFrame]) -> None:
    html = build_files_html(frame)
    if not html:
        st.info("표시할 파일이 없습니다.")
        return
    st.markdown(html, unsafe_allow_html=True)


# ============================================================
# 브러시 선택 분석
# ============================================================

def build_breakdown_html(result: SelectionResult) -> str:
    """
    type별 라인 수/비율 목록.

    선택이 비었거나 선택된 라인이 없으면 0% 항목 대신 빈 문자열을 반환합니다.
    """
    if not result.breakdown or result.total_lines == 0:
        return ""
    items = "".join(
        f"<dt>{escape(share.type)}</dt><dd>{escape(share.label)}</dd>"
        for share in result.breakdown
    )
    return f'<dl class="language-breakdown">{items}</dl>'


def render_selection(result: SelectionResult) -> None:
    st.markdown(f'<p id="selection-count">{escape(result.count_label)}</p>', unsafe_allow_html=True)
    html = build_breakdown_html(result)
    if html:
        st.markdown(html, unsafe_allow_html=True)


# ============================================================
# 내러티브
# ============================================================

def build_step_html(step: NarrativeStep) -> str:
    return (
        '<div class="step">'
        f"<p><b>{escape(step.heading)}</b></p>"
        f"<p>{escape(step.body)}</p>"
        f'<p><a href="{escape(step.url)}" target="_blank">View commit</a></p>'
        "</div>"
    )


def render_step(step: NarrativeStep) -> None:
    st.markdown(build_step_html(step), unsafe_allow_html=True)
