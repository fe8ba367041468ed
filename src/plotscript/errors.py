from __future__ import annotations


class PlotScriptError(Exception):
    """Base class for errors raised while composing plot instructions."""


class SeriesLengthError(PlotScriptError, ValueError):
    """X and Y sequences of a series differ in length."""

    def __init__(self, n_x: int, n_y: int, index: int | None = None) -> None:
        where = f"series {index}: " if index is not None else ""
        super().__init__(f"{where}length mismatch between x ({n_x}) and y ({n_y})")
        self.n_x = n_x
        self.n_y = n_y
        self.index = index


class UnsafeTextError(PlotScriptError, ValueError):
    """Text would break out of a double-quoted string literal."""
