"""
데이터 소스 및 파이프라인 테스트
"""
from __future__ import annotations

import pandas as pd
import pytest

from commit_dashboard.data_sources.files import read_line_csv, read_line_excel, read_line_file
from commit_dashboard.data_sources.loader import FileLoader, StaticFrameLoader
from commit_dashboard.domain.exceptions import DataLoadError
from commit_dashboard.pipeline import build_dashboard_data, load_dashboard_data
from commit_dashboard.ui.controller import DashboardController
from commit_dashboard.ui.scene import SceneRenderer

from conftest import make_line_frame


def test_read_line_csv_keeps_strings(tmp_path):
    path = tmp_path / "loc.csv"
    make_line_frame().to_csv(path, index=False)

    frame = read_line_csv(path)

    assert len(frame) == 20
    assert frame.loc[0, "line"] == "1"


def test_read_line_csv_from_bytes():
    data = make_line_frame().to_csv(index=False).encode("utf-8")

    frame = read_line_file(data, name="upload.csv")

    assert list(frame["commit"].unique()) == ["a1", "b2", "c3"]


def test_read_line_csv_missing_file(tmp_path):
    with pytest.raises(DataLoadError):
        read_line_csv(tmp_path / "nope.csv")


def test_read_line_csv_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("")

    with pytest.raises(DataLoadError):
        read_line_csv(path)


def test_read_line_excel(tmp_path):
    path = tmp_path / "loc.xlsx"
    make_line_frame().to_excel(path, index=False, engine="openpyxl")

    frame = read_line_file(path)

    assert len(frame) == 20
    assert set(frame["type"]) == {"js", "css", "html"}


def test_read_line_excel_rejects_non_excel():
    with pytest.raises(DataLoadError):
        read_line_excel(b"not an excel file")


def test_static_frame_loader_returns_copy(line_frame):
    loader = StaticFrameLoader(line_frame)

    loaded = loader.load()
    loaded.loc[0, "file"] = "changed"

    assert line_frame.loc[0, "file"] == "src/main.js"


def test_build_dashboard_data(line_frame):
    data = build_dashboard_data(line_frame)

    assert len(data.records) == 20
    assert len(data.collection) == 3
    assert data.invalid_timestamp_rows == 0
    assert data.collection.timezone.utcoffset(None) == pd.Timedelta(hours=-7)


def test_load_dashboard_data_reports_invalid_rows(tmp_path):
    broken = pd.DataFrame([{
        "file": "x.py", "line": "1", "type": "py", "length": "1", "depth": "0",
        "commit": "zz", "author": "eve", "datetime": "garbage",
    }])
    frame = pd.concat([make_line_frame(), broken], ignore_index=True)
    path = tmp_path / "loc.csv"
    frame.to_csv(path, index=False)

    data = load_dashboard_data(FileLoader(path))

    assert data.invalid_timestamp_rows == 1
    assert data.collection.excluded_ids == ("zz",)
    assert data.collection.orphan_line_count == 1
    assert [c.id for c in data.collection.commits] == ["a1", "b2", "c3"]


def test_build_dashboard_data_missing_columns():
    with pytest.raises(DataLoadError):
        build_dashboard_data(pd.DataFrame({"file": ["a.py"]}))


def test_build_dashboard_data_tz_aware_horizon_matches_commit_zone(line_frame):
    """UTC로 주어진 기준 시각도 커밋 시각과 같은 기준(-07:00)으로 비교"""
    data = build_dashboard_data(line_frame)
    controller = DashboardController(data.collection, SceneRenderer())

    state = controller.cursor.set_horizon(pd.Timestamp("2024-10-28 21:30", tz="UTC"))

    assert state.horizon == pd.Timestamp("2024-10-28 14:30")
    assert state.commit_ids == ("a1", "b2")
