"""Textual conventions shared by every composer stage.

Each helper is pure so the output format can be tested without a sink.
"""
from __future__ import annotations

from datetime import date, datetime, time
import numbers
from typing import Any, Iterable, Sequence

import numpy as np
import pandas as pd

from ..types import DateLike


def py_bool(flag: bool) -> str:
    return "True" if flag else "False"


def quote(text: Any) -> str:
    # no escaping: embedded double quotes are the caller's problem
    return '"' + str(text) + '"'


def to_datetime(value: DateLike) -> datetime:
    """Coerce a date-like value (date, datetime, ISO string, datetime64) to a naive ``datetime``.

    Aware values keep their wall-clock time and drop the offset. Numbers are
    rejected rather than read as epoch offsets.
    """
    if isinstance(value, datetime):
        d = value
    elif isinstance(value, date):
        d = datetime.combine(value, time())
    else:
        if isinstance(value, numbers.Number):
            raise TypeError(f"Cannot interpret {value!r} as a date")
        try:
            ts = pd.Timestamp(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"Cannot interpret {value!r} as a date") from e
        if pd.isna(ts):
            raise TypeError(f"Cannot interpret {value!r} as a date")
        d = ts.to_pydatetime()
    if d.tzinfo is not None:
        d = d.replace(tzinfo=None)
    return d


def date_ctor(value: DateLike) -> str:
    d = to_datetime(value)
    return f"datetime.date({d.year},{d.month},{d.day})"


def short_date(value: DateLike) -> str:
    return to_datetime(value).strftime("%m/%d")


def token(value: Any) -> str:
    """Raw, unquoted token for an array element."""
    if isinstance(value, (date, np.datetime64)):
        return date_ctor(value)
    return str(value)


def array_literal(tokens: Iterable[str]) -> str:
    return "[" + ",".join(tokens) + "]"


def tick_call(axis: str, positions: Sequence[str], labels: Sequence[str]) -> str:
    """``plt.<axis>ticks([positions],[labels])`` with positions and labels bound 1:1."""
    if len(positions) != len(labels):
        raise ValueError(f"{axis}ticks: {len(positions)} positions but {len(labels)} labels")
    return f"plt.{axis}ticks({array_literal(positions)},{array_literal(labels)})"
