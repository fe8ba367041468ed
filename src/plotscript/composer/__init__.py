"""
Command composition for matplotlib scripts.
Expose the composer and its formatting helpers
"""
from .general import GeneralComposer, fixed_y_ticks, x_extent, daily_range
from .formatting import array_literal, date_ctor, py_bool, quote, short_date, tick_call, token

__all__ = [
    "GeneralComposer",
    "fixed_y_ticks",
    "x_extent",
    "daily_range",
    "array_literal",
    "date_ctor",
    "py_bool",
    "quote",
    "short_date",
    "tick_call",
    "token",
]
