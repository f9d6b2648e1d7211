"""표시 포맷 유틸리티 테스트"""
from __future__ import annotations

import pandas as pd

from commit_dashboard.common.formatting import (
    PLACEHOLDER,
    escape,
    format_full_date,
    format_hour_tick,
    format_long_datetime,
    format_percent,
    format_short_time,
    format_value,
)
from commit_dashboard.core.config import CONFIG


def test_format_long_datetime():
    assert format_long_datetime(pd.Timestamp("2024-10-28 14:30")) == "October 28, 2024 at 2:30 PM"
    assert format_long_datetime(pd.Timestamp("2024-10-28 00:05")) == "October 28, 2024 at 12:05 AM"
    assert format_long_datetime(None) == ""
    assert format_long_datetime(pd.NaT, empty="-") == "-"


def test_format_full_date_and_short_time():
    ts = pd.Timestamp("2024-10-28 09:05")

    assert format_full_date(ts) == "Monday, October 28, 2024"
    assert format_short_time(ts) == "09:05 AM"
    assert format_short_time(pd.Timestamp("2024-10-28 12:00")) == "12:00 PM"


def test_format_hour_tick_wraps_midnight():
    assert format_hour_tick(0) == "00:00"
    assert format_hour_tick(14) == "14:00"
    assert format_hour_tick(24) == "00:00"


def test_format_percent():
    assert format_percent(0.5) == "50.0%"
    assert format_percent(2 / 3) == "66.7%"


def test_placeholder_comes_from_ui_config():
    assert PLACEHOLDER == CONFIG.ui.placeholder


def test_format_value_placeholder():
    assert format_value(None) == PLACEHOLDER
    assert format_value(float("nan"), placeholder="n/a") == "n/a"
    assert format_value(0) == "0"


def test_escape():
    assert escape("<b>&") == "&lt;b&gt;&amp;"
    assert escape(None) == ""
