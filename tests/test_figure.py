"""
Plotly 산점도 및 산점도 뷰 모델 테스트
"""
from __future__ import annotations

import math

import pandas as pd
import pytest

from commit_dashboard.core.config import CONFIG
from commit_dashboard.ui.charts.figure import (
    SELECTED_STROKE,
    build_scatter_figure,
    selection_to_rect,
    x_ticks,
)
from commit_dashboard.ui.charts.scatter import ScatterViewModel
from commit_dashboard.ui.controller import DashboardController
from commit_dashboard.ui.renderer import BrushChanged, DrawInstruction
from commit_dashboard.ui.scene import SceneRenderer


@pytest.fixture
def dashboard(collection):
    scene = SceneRenderer()
    controller = DashboardController(collection, scene)
    return controller, scene


# ============================================================
# 뷰 모델
# ============================================================

def test_scatter_positions(commits):
    model = ScatterViewModel()
    model.update(commits)

    x0, y0 = model.locate(commits[0])
    x2, y2 = model.locate(commits[2])
    assert (x0, x2) == (60, 980)
    assert y0 == pytest.approx(335)
    assert y2 == pytest.approx(36.875)
    assert model.locate(commits[1])[0] == pytest.approx(60 + 920 * 4.5 / 13.25)


def test_scatter_radius_and_color(commits):
    model = ScatterViewModel()
    frame = model.update(commits)

    radius = {p.key: p.r for p in frame.points}
    fill = {p.key: p.fill for p in frame.points}
    assert radius["b2"] == pytest.approx(30)
    assert radius["c3"] == pytest.approx(2)
    assert radius["c3"] < radius["a1"] < radius["b2"]
    assert fill["a1"] == CONFIG.scatter.day_color
    assert fill["c3"] == CONFIG.scatter.night_color


def test_scatter_single_commit_is_centered(commits):
    model = ScatterViewModel()
    frame = model.update(commits[:1])

    assert frame.points[0].cx == 520
    assert frame.points[0].r == pytest.approx(16)


def test_scatter_empty(commits):
    model = ScatterViewModel()
    frame = model.update([])

    assert frame.points == ()
    assert frame.x_scale is None
    assert all(math.isnan(v) for v in model.locate(commits[0]))


def test_scatter_screen_rect(commits, t1000, t1430):
    model = ScatterViewModel()
    model.update(commits)

    (x0, y0), (x1, y1) = model.screen_rect((t1430, t1000), (10, 15))

    assert x0 == 60
    assert x1 == pytest.approx(model.locate(commits[1])[0])
    assert y0 < y1


def test_y_ticks():
    ticks = ScatterViewModel().y_ticks()

    assert ticks[0] == (0.0, "00:00")
    assert ticks[-1] == (24.0, "00:00")
    assert "14:00" in [label for _, label in ticks]


# ============================================================
# Figure
# ============================================================

def test_build_scatter_figure(dashboard):
    controller, scene = dashboard

    fig = build_scatter_figure(scene, controller.scatter)

    trace = fig.data[0]
    assert list(trace.customdata) == ["b2", "a1", "c3"]
    assert trace.marker.size[0] == pytest.approx(60)
    assert "bob" in trace.hovertext[0]
    assert fig.layout.dragmode == "select"
    assert tuple(fig.layout.yaxis.range) == (CONFIG.scatter.height, 0)


def test_build_scatter_figure_marks_selection(dashboard):
    controller, scene = dashboard
    controller.handle(BrushChanged(rect=((300, 200), (450, 260))))

    fig = build_scatter_figure(scene, controller.scatter)

    colors = list(fig.data[0].marker.line.color)
    assert colors[0] == SELECTED_STROKE
    assert colors[1] != SELECTED_STROKE


def test_build_scatter_figure_without_points():
    scene = SceneRenderer()
    controller = DashboardController([], scene)

    fig = build_scatter_figure(scene, controller.scatter)

    assert len(fig.data) == 0


def test_x_ticks_span(dashboard):
    controller, _ = dashboard

    ticks = x_ticks(controller.scatter)

    assert len(ticks) == 6
    assert ticks[0][0] == 60
    assert ticks[-1][0] == pytest.approx(980)
    assert ticks[0][1] == "Oct 28 10:00"


def test_x_ticks_without_scale():
    assert x_ticks(ScatterViewModel()) == []


def test_selection_to_rect():
    selection = {"points": [], "box": [{"x": [450, 300], "y": [260, 200]}]}

    assert selection_to_rect(selection) == ((450.0, 260.0), (300.0, 200.0))
    assert selection_to_rect({"box": []}) is None
    assert selection_to_rect(None) is None


def test_selection_to_rect_ignores_incomplete_box():
    assert selection_to_rect({"box": [{"x": [1]}]}) is None


def test_scene_skips_update_for_unknown_shape():
    scene = SceneRenderer()

    scene.draw("dots", [DrawInstruction(action="update", key="ghost", attrs={"selected": True})])

    assert scene.shapes("dots") == []


def test_screen_rect_without_scale():
    assert ScatterViewModel().screen_rect(
        (pd.Timestamp("2024-01-01"), pd.Timestamp("2024-01-02")), (0, 24)
    ) is None
