"""Plotly 산점도 렌더링 모듈.

SceneRenderer에 보관된 점(화면 좌표)을 그대로 Plotly 그림으로 옮깁니다.
축 자체를 픽셀 좌표계(0~width, height~0)로 두기 때문에 Plotly 박스 선택이
보고하는 범위가 곧 브러시 사각형의 화면 좌표가 됩니다.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from ...common.formatting import escape
from ...core.config import CONFIG, ScatterConfig
from ..scene import SceneRenderer
from ..tooltip import build_tooltip
from .scatter import DOTS_LAYER, ScatterViewModel

SELECTED_STROKE = "#ff6b6b"
DEFAULT_X_TICKS = 6


def x_ticks(model: ScatterViewModel, count: int = DEFAULT_X_TICKS) -> List[Tuple[float, str]]:
    """
    현재 시간 축 스케일 기준 x축 눈금 (픽셀 위치, 날짜 라벨).

    도메인이 한 시점이면 가운데 눈금 하나만 반환합니다.
    """
    scale = model.x_scale
    if scale is None:
        return []
    start, end = scale.domain
    if start == end:
        return [(scale(start), start.strftime("%b %d"))]
    stamps = [start + (end - start) * float(frac) for frac in np.linspace(0.0, 1.0, count)]
    fmt = "%b %d %H:%M" if (end - start) < pd.Timedelta(days=2) else "%b %d"
    return [(scale(ts), ts.strftime(fmt)) for ts in stamps]


def _hover_text(model: ScatterViewModel, key: str) -> str:
    point = next((p for p in model.points if p.key == key), None)
    if point is None or point.commit is None:
        return escape(key)
    tip = build_tooltip(point.commit)
    return (
        f"<b>{escape(tip.commit_id)}</b><br>"
        f"{escape(tip.date)}<br>"
        f"{escape(tip.time)}<br>"
        f"Author: {escape(tip.author)}<br>"
        f"Lines: {escape(tip.lines)}"
    )


def build_scatter_figure(
    scene: SceneRenderer,
    model: ScatterViewModel,
    *,
    config: ScatterConfig = CONFIG.scatter,
) -> go.Figure:
    """
    커밋 산점도 Figure를 만듭니다.

    - 점 순서: scene의 그리기 순서 (라인 수 내림차순)
    - 선택된 점: 테두리 강조
    - y축: HH:00 눈금과 가로 격자선
    - 드래그: 박스 선택

    Args:
        scene: 컨트롤러가 그린 유지형 장면
        model: 현재 스케일을 가진 산점도 뷰 모델

    Returns:
        plotly Figure
    """
    shapes = scene.shapes(DOTS_LAYER)

    fig = go.Figure()
    if shapes:
        keys = [key for key, _ in shapes]
        attrs: List[Dict[str, Any]] = [a for _, a in shapes]
        selected = [bool(a.get("selected")) for a in attrs]
        fig.add_trace(
            go.Scatter(
                x=[a["cx"] for a in attrs],
                y=[a["cy"] for a in attrs],
                mode="markers",
                customdata=keys,
                hovertext=[_hover_text(model, k) for k in keys],
                hoverinfo="text",
                marker=dict(
                    size=[2 * a["r"] for a in attrs],
                    sizemode="diameter",
                    color=[a.get("fill", config.night_color) for a in attrs],
                    opacity=[a.get("fill_opacity", config.fill_opacity) for a in attrs],
                    line=dict(
                        width=[2 if s else 0 for s in selected],
                        color=[SELECTED_STROKE if s else "rgba(0,0,0,0)" for s in selected],
                    ),
                ),
                name="commits",
                showlegend=False,
            )
        )

    y_ticks = model.y_ticks()
    xt = x_ticks(model)
    fig.update_layout(
        width=config.width,
        height=config.height,
        margin=dict(l=0, r=0, t=0, b=0),
        dragmode="select",
        plot_bgcolor="rgba(0,0,0,0)",
        xaxis=dict(
            range=[0, config.width],
            tickvals=[v for v, _ in xt],
            ticktext=[t for _, t in xt],
            showgrid=False,
            zeroline=False,
            title=dict(text=config.x_title),
            fixedrange=True,
        ),
        yaxis=dict(
            range=[config.height, 0],
            tickvals=[model.y_scale(v) for v, _ in y_ticks],
            ticktext=[t for _, t in y_ticks],
            showgrid=True,
            gridcolor="rgba(0,0,0,0.1)",
            zeroline=False,
            title=dict(text=config.y_title),
            fixedrange=True,
        ),
    )
    return fig


def selection_to_rect(selection: Optional[Dict[str, Any]]) -> Optional[Tuple[Tuple[float, float], Tuple[float, float]]]:
    """
    Streamlit plotly_chart on_select 결과의 첫 박스를 화면 좌표 사각형으로 바꿉니다.

    박스가 없으면 None(선택 해제)을 반환합니다.
    """
    if not selection:
        return None
    boxes = selection.get("box") or []
    if not boxes:
        return None
    box = boxes[0]
    xs = box.get("x") or []
    ys = box.get("y") or []
    if len(xs) < 2 or len(ys) < 2:
        return None
    return (float(xs[0]), float(ys[0])), (float(xs[1]), float(ys[1]))
