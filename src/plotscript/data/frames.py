from __future__ import annotations

from pathlib import Path
from typing import Union

import pandas as pd

from ..design import XyPair


def series_from_frame(frame: pd.DataFrame, x_column: str, y_column: str, *, has_scatter: bool = False) -> XyPair:
    """Build a series from two DataFrame columns.

    - Rows with a missing x or y value are dropped.
    - x is parsed with ``pd.to_datetime``; y values become plain Python numbers.
    - A float64 y column stays float (10.0), so integer data with gaps should use a
      nullable ``Int64`` column to keep integer tokens; ``load_series_csv`` does this.
    """
    for col in (x_column, y_column):
        if col not in frame.columns:
            raise KeyError(f"Column {col!r} not found; available: {list(frame.columns)}")
    sub = frame[[x_column, y_column]].dropna()
    xs = pd.to_datetime(sub[x_column])
    return XyPair(
        x=tuple(ts.to_pydatetime() for ts in xs),
        y=tuple(sub[y_column].tolist()),
        has_scatter=has_scatter,
    )


def load_series_csv(path: Union[str, Path], x_column: str, y_column: str, *, has_scatter: bool = False) -> XyPair:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)
    frame = pd.read_csv(p, dtype_backend="numpy_nullable")
    return series_from_frame(frame, x_column, y_column, has_scatter=has_scatter)
