from datetime import datetime

import pandas as pd
import pytest

from plotscript.data import load_series_csv, series_from_frame


def test_series_from_frame_drops_missing_rows():
    df = pd.DataFrame({
        "day": ["2024-01-01", "2024-01-02", None, "2024-01-04"],
        "pct": [10, None, 30, 40],
    })
    pair = series_from_frame(df, "day", "pct", has_scatter=True)
    assert pair.x == (datetime(2024, 1, 1), datetime(2024, 1, 4))
    assert pair.y == (10.0, 40.0)
    assert pair.has_scatter


def test_series_from_frame_missing_column():
    df = pd.DataFrame({"day": [], "pct": []})
    with pytest.raises(KeyError):
        series_from_frame(df, "date", "pct")


def test_load_series_csv(tmp_path):
    p = tmp_path / "load.csv"
    p.write_text("day,pct\n2024-01-01,5\n2024-01-02,7\n", encoding="utf-8")
    pair = load_series_csv(p, "day", "pct")
    assert len(pair) == 2
    assert pair.y == (5, 7)
    with pytest.raises(FileNotFoundError):
        load_series_csv(tmp_path / "missing.csv", "day", "pct")


def test_load_series_csv_keeps_integers_across_gaps(tmp_path):
    p = tmp_path / "gaps.csv"
    p.write_text("day,pct\n2024-01-01,10\n2024-01-02,\n2024-01-03,30\n", encoding="utf-8")
    pair = load_series_csv(p, "day", "pct")
    assert pair.x == (datetime(2024, 1, 1), datetime(2024, 1, 3))
    assert pair.y == (10, 30)
    assert all(type(v) is int for v in pair.y)
