from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal
import logging
from typing import Generic, List, Optional, Sequence, Tuple, TypeVar

from ..design import DerivedTicks, ExplicitTicks, PlotColor, Tick, TickMode, Title, XyPair
from ..errors import SeriesLengthError, UnsafeTextError
from ..process.sink import InstructionSink
from .formatting import (
    array_literal,
    date_ctor,
    py_bool,
    quote,
    short_date,
    tick_call,
    to_datetime,
    token,
)

logger = logging.getLogger(__name__)

X = TypeVar("X")
Y = TypeVar("Y")

IMPORT_MODULES = (
    "import matplotlib.pyplot as plt",
    "import pandas as pd",
    "import datetime",
)

X_TICK_STEP = timedelta(days=1)

# Derived Y ticks always span 0.0-1.0 in steps of 0.1, whatever the data range.
Y_TICK_START = Decimal("0.0")
Y_TICK_STOP = Decimal("1.0")
Y_TICK_STEP = Decimal("0.1")

ANNOTATION_FONT_SIZE = 11


def fixed_y_ticks() -> List[Decimal]:
    ticks = []
    value = Y_TICK_START
    while value <= Y_TICK_STOP:
        ticks.append(value)
        value += Y_TICK_STEP
    return ticks


def x_extent(series: Sequence[XyPair]) -> Tuple[datetime, datetime]:
    """Global (min, max) of every X value; (datetime.max, datetime.min) when there are none."""
    lo = datetime.max
    hi = datetime.min
    for pair in series:
        for value in pair.x:
            d = to_datetime(value)
            if d < lo:
                lo = d
            if d > hi:
                hi = d
    return lo, hi


def daily_range(lo: datetime, hi: datetime) -> List[datetime]:
    """Every day from lo to hi inclusive; empty when lo > hi."""
    if lo > hi:
        return []
    count = (hi - lo) // X_TICK_STEP + 1
    return [lo + i * X_TICK_STEP for i in range(count)]


class GeneralComposer(Generic[X, Y]):
    """Emit matplotlib statements for a plot, one stage per method.

    The composer keeps no state besides the sink; callers run the stages in
    order (imports, color, grid, title, ticks, series, show). Strings are
    interpolated without escaping. Embedded double quotes are logged, or
    rejected with ``UnsafeTextError`` when ``strict_text`` is set.
    """

    def __init__(self, sink: InstructionSink, *, strict_text: bool = False) -> None:
        self.sink = sink
        self.strict_text = strict_text

    def _emit(self, line: str) -> None:
        self.sink.add_instruction(line)

    def _check_text(self, text: object, what: str) -> None:
        if '"' not in str(text):
            return
        if self.strict_text:
            raise UnsafeTextError(f"{what} contains a double quote: {text!r}")
        logger.warning("%s contains a double quote and will produce malformed output: %r", what, text)

    def write_python(self) -> None:
        self._emit("python")

    def write_import_modules(self) -> None:
        for line in IMPORT_MODULES:
            self._emit(line)

    def write_plot_color(self, color: PlotColor) -> None:
        if color.outer is not None:
            self._check_text(color.outer, "outer color")
        if color.inner is not None:
            self._check_text(color.inner, "inner color")
        if color.outer is not None:
            self._emit(f"fig = plt.figure(facecolor={quote(color.outer)})")
        if color.inner is not None:
            self._emit(f"plt.gca().set_facecolor({quote(color.inner)})")

    def write_grid(self, grid: bool) -> None:
        self._emit(f"plt.grid({py_bool(grid)})")

    def write_title(self, title: Title) -> None:
        self._check_text(title.text, "title")
        self._emit(f"plt.title({quote(title.text)},fontsize={title.font_size})")

    def write_ticks(self, mode: TickMode) -> None:
        if isinstance(mode, DerivedTicks):
            self.write_derived_ticks(mode.series)
        elif isinstance(mode, ExplicitTicks):
            self.write_explicit_ticks(mode.x_tick, mode.y_tick)
        else:
            raise TypeError(f"Unknown tick mode: {type(mode).__name__}")

    def write_derived_ticks(self, series: Sequence[XyPair[X, Y]]) -> None:
        lo, hi = x_extent(series)
        days = daily_range(lo, hi)
        if not days:
            logger.debug("No x extent to derive ticks from; emitting empty xticks")
        else:
            logger.debug("Derived %d daily x ticks from %s to %s", len(days), lo.date(), hi.date())
        self._emit(tick_call(
            "x",
            [date_ctor(d) for d in days],
            [quote(short_date(d)) for d in days],
        ))

        y_ticks = fixed_y_ticks()
        self._emit(tick_call(
            "y",
            [str(v) for v in y_ticks],
            [quote(v) for v in y_ticks],
        ))

    def write_explicit_ticks(self, x_tick: Optional[Tick], y_tick: Optional[Tick]) -> None:
        axes = [(axis, tick) for axis, tick in (("x", x_tick), ("y", y_tick)) if tick is not None]
        for axis, tick in axes:
            for label in tick.labels:
                self._check_text(label, f"{axis} tick label")
        for axis, tick in axes:
            self._emit(tick_call(
                axis,
                [token(p) for p in tick.positions],
                [quote(lbl) for lbl in tick.labels],
            ))

    def write_xy_pair(self, series: Sequence[XyPair[X, Y]]) -> None:
        for index, pair in enumerate(series, start=1):
            if len(pair.x) != len(pair.y):
                raise SeriesLengthError(len(pair.x), len(pair.y), index=index)
            xs = f"x{index}"
            ys = f"y{index}"
            self._emit(f"{xs} = " + array_literal(date_ctor(v) for v in pair.x))
            self._emit(f"{ys} = " + array_literal(token(v) for v in pair.y))

            self._emit(f"for i,item in enumerate({ys}):")
            self._emit(f"\txP = {xs}[i]")
            self._emit(f"\tyP = {ys}[i]")
            self._emit(f'\tplt.text(xP,yP,str(item)+"%",fontsize={ANNOTATION_FONT_SIZE})')

            self._emit(f"plt.plot({xs},{ys})")
            if pair.has_scatter:
                self._emit(f"plt.scatter({xs},{ys})")
            logger.debug("Emitted series %d (%d points, scatter=%s)", index, len(pair.x), pair.has_scatter)

    def write_plot_show(self) -> None:
        self._emit("plt.show()")
