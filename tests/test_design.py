from datetime import date

import numpy as np
import pytest

from plotscript.design import DerivedTicks, PlotDesign, Tick, XyPair
from plotscript.errors import SeriesLengthError


def test_xypair_normalises_sequences_to_tuples():
    pair = XyPair(x=[date(2024, 1, 1), date(2024, 1, 2)], y=np.array([1.5, 2.5]))
    assert pair.x == (date(2024, 1, 1), date(2024, 1, 2))
    assert pair.y == (1.5, 2.5)
    assert isinstance(pair.y[0], float)
    assert len(pair) == 2
    assert list(pair.points()) == [(date(2024, 1, 1), 1.5), (date(2024, 1, 2), 2.5)]


def test_xypair_length_mismatch_fails_fast():
    with pytest.raises(SeriesLengthError, match="length mismatch"):
        XyPair(x=[date(2024, 1, 1)], y=[1, 2])


def test_xypair_is_immutable():
    pair = XyPair(x=[], y=[])
    with pytest.raises(AttributeError):
        pair.has_scatter = True  # type: ignore[misc]


def test_tick_pairs_and_labels_as_text():
    tick = Tick.from_lists([0, 1, 2], ["a", "b", 3])
    assert tick.positions == (0, 1, 2)
    assert tick.labels == ("a", "b", "3")
    with pytest.raises(ValueError):
        Tick.from_lists([0, 1], ["a"])


def test_collections_are_frozen_tuples():
    pair = XyPair(x=[], y=[])
    assert DerivedTicks([pair]).series == (pair,)
    assert PlotDesign(series=[pair]).series == (pair,)
