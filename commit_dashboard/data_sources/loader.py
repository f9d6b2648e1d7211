"""Unified data loading interfaces for line data files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Union

import pandas as pd

from .files import read_line_file


class Loader(Protocol):
    """Simple protocol describing a load operation that returns a DataFrame."""

    def load(self) -> pd.DataFrame:  # pragma: no cover - interface definition
        ...


@dataclass(frozen=True)
class StaticFrameLoader:
    """Loader implementation that simply returns an in-memory DataFrame."""

    frame: pd.DataFrame

    def load(self) -> pd.DataFrame:
        return self.frame.copy()


@dataclass(frozen=True)
class FileLoader:
    """Loader that reads a CSV or Excel file from disk on every call."""

    path: Union[str, Path]

    def load(self) -> pd.DataFrame:
        return read_line_file(self.path)
