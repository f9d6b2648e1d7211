"""
Commit History Dashboard 메인 엔트리 포인트

loc.csv를 읽어 커밋으로 집계한 뒤, 다음 뷰를 하나의 기준 시각으로 동기화합니다:
- 요약 카드
- 커밋 산점도 (박스 선택 = 브러시)
- 파일 구성도
- 커밋 내러티브 (스텝 선택 = 스크롤 커서)

실행: streamlit run dashboard_app.py
"""

from __future__ import annotations

import logging

import streamlit as st

# 로깅 설정
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

from commit_dashboard.core.config import CONFIG
from commit_dashboard.data_sources.session import (
    CONTROLLER_KEY,
    SCENE_KEY,
    get_session_value,
    is_current,
    select_data_source,
    store_session,
)
from commit_dashboard.pipeline import build_dashboard_data
from commit_dashboard.ui import (
    BrushChanged,
    DashboardController,
    SceneRenderer,
    SliderInput,
    StepEntered,
    build_scatter_figure,
    handle_domain_errors,
    selection_to_rect,
)
from commit_dashboard.ui.panels import render_files, render_selection, render_step, render_summary
from commit_dashboard.ui.styles import inject_styles

SLIDER_KEY = "_progress_slider"
STEP_KEY = "_narrative_step"
CHART_KEY = "_commit_scatter"


def _controller() -> DashboardController:
    return get_session_value(CONTROLLER_KEY)


def _scene() -> SceneRenderer:
    return get_session_value(SCENE_KEY)


def _sync_slider() -> None:
    """스크롤 커서가 바꾼 진행도를 슬라이더 위젯 값에 반영합니다."""
    st.session_state[SLIDER_KEY] = int(round(_controller().state.progress))


# ========================================
# 위젯 콜백 (이벤트 → 컨트롤러)
# ========================================

def _on_slider_change() -> None:
    with handle_domain_errors():
        _controller().handle(SliderInput(progress=st.session_state[SLIDER_KEY]))
        # 슬라이더로 옮긴 시점은 특정 스텝이 아니므로 라디오 선택도 해제
        st.session_state[STEP_KEY] = None


def _on_step_change() -> None:
    step_id = st.session_state.get(STEP_KEY)
    if step_id is None:
        return
    with handle_domain_errors():
        _controller().handle(StepEntered(step_id=step_id))
        _sync_slider()


def _ensure_controller() -> bool:
    """
    데이터 소스가 바뀌었으면 컨트롤러를 새로 만들고 세션에 저장합니다.

    Returns:
        사용할 컨트롤러가 준비되었는지 여부
    """
    source = select_data_source(CONFIG.ui.default_data_file)
    if source is None:
        st.info(f"{CONFIG.ui.default_data_file} 파일이 없습니다. 사이드바에서 파일을 업로드하세요.")
        return False

    frame, fingerprint = source
    if is_current(fingerprint):
        return True

    with handle_domain_errors():
        data = build_dashboard_data(frame)
        scene = SceneRenderer()
        controller = DashboardController(data.collection, scene)
        store_session(controller, scene, fingerprint)
        logger.info(f"Dashboard initialized with {len(data.collection)} commits ({fingerprint})")
        _sync_slider()
        st.session_state.pop(STEP_KEY, None)

        if data.collection.excluded_ids:
            st.warning(
                f"타임스탬프가 없는 커밋 {len(data.collection.excluded_ids)}건"
                f"({data.collection.orphan_line_count}줄)은 타임라인에서 제외되었습니다."
            )
        return True
    return False


def _apply_brush_from_chart() -> None:
    """차트 위젯에 남아 있는 박스 선택을 브러시 이벤트로 전달합니다."""
    event = st.session_state.get(CHART_KEY)
    selection = event.get("selection") if event else None
    rect = selection_to_rect(selection)
    controller = _controller()
    if rect is None and controller.brush is None:
        return
    with handle_domain_errors():
        controller.handle(BrushChanged(rect=rect))


def main() -> None:
    st.set_page_config(page_title=CONFIG.ui.page_title, layout="wide")
    inject_styles()
    st.title("Commit History")

    if not _ensure_controller():
        st.stop()

    controller = _controller()
    scene = _scene()

    # ========================================
    # 사이드바: 시간 슬라이더 + 내러티브
    # ========================================
    with st.sidebar:
        st.slider(
            "Show commits until",
            min_value=int(CONFIG.time.progress_min),
            max_value=int(CONFIG.time.progress_max),
            key=SLIDER_KEY,
            on_change=_on_slider_change,
        )
        st.caption(scene.horizon_label or "-")

        steps = controller.steps
        if steps:
            labels = {s.step_id: s.heading for s in steps}
            st.radio(
                "Commit narrative",
                options=[s.step_id for s in steps],
                format_func=lambda step_id: labels.get(step_id, step_id),
                index=None,
                key=STEP_KEY,
                on_change=_on_step_change,
            )

    # ========================================
    # 본문
    # ========================================
    render_summary(scene.summary)

    _apply_brush_from_chart()
    fig = build_scatter_figure(scene, controller.scatter)
    st.plotly_chart(
        fig,
        on_select="rerun",
        selection_mode="box",
        key=CHART_KEY,
    )
    render_selection(scene.selection)

    col_files, col_story = st.columns([3, 2])
    with col_files:
        st.subheader("Files")
        render_files(scene.files)
    with col_story:
        st.subheader("Narrative")
        active = controller.scroll.active_step
        if active is not None:
            render_step(active)
        else:
            st.caption("사이드바에서 커밋을 선택하면 해당 시점까지의 기록이 표시됩니다.")


if __name__ == "__main__":
    main()
