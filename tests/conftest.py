import sys
from pathlib import Path

import pandas as pd
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from commit_dashboard.domain.aggregation import aggregate_commits
from commit_dashboard.domain.normalization import normalize_line_records

# 같은 날 세 커밋: 10:00 (5줄), 14:30 (12줄), 23:15 (3줄)
SCENARIO = [
    ("a1", "alice", "2024-10-28T10:00:00-07:00", [("src/main.js", "js", 3), ("style.css", "css", 2)]),
    ("b2", "bob", "2024-10-28T14:30:00-07:00", [("src/main.js", "js", 8), ("index.html", "html", 4)]),
    ("c3", "alice", "2024-10-28T23:15:00-07:00", [("style.css", "css", 3)]),
]


def make_line_frame(commits=SCENARIO) -> pd.DataFrame:
    """loc.csv와 같은 모양(모든 값이 문자열)의 라인 데이터프레임을 만듭니다."""
    rows = []
    for commit_id, author, stamp, files in commits:
        for file, kind, count in files:
            for n in range(1, count + 1):
                rows.append({
                    "file": file,
                    "line": str(n),
                    "type": kind,
                    "length": str(10 * n),
                    "depth": str(n % 3),
                    "commit": commit_id,
                    "author": author,
                    "datetime": stamp,
                })
    return pd.DataFrame(rows)


@pytest.fixture
def line_frame() -> pd.DataFrame:
    return make_line_frame()


@pytest.fixture
def line_records(line_frame):
    return normalize_line_records(line_frame)


@pytest.fixture
def collection(line_records):
    return aggregate_commits(line_records)


@pytest.fixture
def commits(collection):
    return collection.commits


@pytest.fixture
def t1000():
    return pd.Timestamp("2024-10-28 10:00")


@pytest.fixture
def t1430():
    return pd.Timestamp("2024-10-28 14:30")


@pytest.fixture
def t2315():
    return pd.Timestamp("2024-10-28 23:15")
