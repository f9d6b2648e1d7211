"""
패널 HTML 렌더링 및 에러 어댑터 테스트
"""
from __future__ import annotations

from unittest.mock import patch

from commit_dashboard.domain.exceptions import DataLoadError, ValidationError
from commit_dashboard.domain.file_units import FileUnitModel
from commit_dashboard.domain.scroll import build_narrative
from commit_dashboard.domain.selection import EMPTY_SELECTION, select_commits
from commit_dashboard.domain.summary import compute_summary
from commit_dashboard.ui.adapters import handle_domain_errors
from commit_dashboard.ui.panels import (
    build_breakdown_html,
    build_files_html,
    build_step_html,
    build_summary_html,
    render_files,
    render_selection,
)


def test_summary_html_uses_placeholder_for_empty_maxima():
    html = build_summary_html(compute_summary([], []))

    assert "TOTAL LOC" in html
    assert html.count("—") == 3


def test_summary_html_values(line_records, commits):
    html = build_summary_html(compute_summary(line_records, commits))

    assert ">20<" in html
    assert ">80<" in html


def test_files_html_lists_files_with_units(line_records):
    frame = FileUnitModel().update(line_records)

    html = build_files_html(frame)

    assert html.index("src/main.js") < html.index("style.css") < html.index("index.html")
    assert "11 lines" in html
    assert html.count('class="loc"') == 20


def test_files_html_empty():
    assert build_files_html(None) == ""
    assert build_files_html(FileUnitModel().update([])) == ""


def test_breakdown_html(commits):
    result = select_commits(((0, 0), (1, 1)), commits, lambda c: (0.5, 0.5) if c.id == "b2" else (5, 5))

    html = build_breakdown_html(result)

    assert "<dt>js</dt><dd>8 lines (66.7%)</dd>" in html
    assert "<dt>html</dt><dd>4 lines (33.3%)</dd>" in html


def test_breakdown_html_empty_selection():
    """빈 선택은 0% 항목 대신 아무것도 표시하지 않음"""
    assert build_breakdown_html(EMPTY_SELECTION) == ""


def test_step_html_escapes_and_links(commits):
    step = build_narrative(commits)[0]

    html = build_step_html(step)

    assert "October 28, 2024 at 10:00 AM" in html
    assert "I edited 5 lines across 2 files." in html
    assert 'href="https://github.com/YOUR_USERNAME/YOUR_REPO/commit/a1"' in html


def test_render_selection_writes_count():
    with patch("commit_dashboard.ui.panels.st") as mock_st:
        render_selection(EMPTY_SELECTION)

    mock_st.markdown.assert_called_once()
    assert "No commits selected" in mock_st.markdown.call_args[0][0]


def test_render_files_empty_shows_info():
    with patch("commit_dashboard.ui.panels.st") as mock_st:
        render_files(None)

    mock_st.info.assert_called_once()
    mock_st.markdown.assert_not_called()


# ============================================================
# 에러 어댑터
# ============================================================

def test_handle_domain_errors_validation_warning():
    with patch("commit_dashboard.ui.adapters.st") as mock_st:
        with handle_domain_errors():
            raise ValidationError("bad progress")

    mock_st.warning.assert_called_once()
    assert "bad progress" in mock_st.warning.call_args[0][0]


def test_handle_domain_errors_data_load_error():
    with patch("commit_dashboard.ui.adapters.st") as mock_st:
        with handle_domain_errors():
            raise DataLoadError("missing column")

    mock_st.error.assert_called_once()


def test_handle_domain_errors_unexpected():
    with patch("commit_dashboard.ui.adapters.st") as mock_st:
        with handle_domain_errors():
            raise RuntimeError("boom")

    mock_st.error.assert_called_once()
    mock_st.exception.assert_called_once()
