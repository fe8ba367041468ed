"""plotscript package public API."""

from .composer.general import GeneralComposer
from .core.config import PlotConfig
from .core.pipeline import compose_plot
from .data.frames import load_series_csv, series_from_frame
from .design import (
    DerivedTicks,
    ExplicitTicks,
    PlotColor,
    PlotDesign,
    Tick,
    TickMode,
    Title,
    XTick,
    XyPair,
    YTick,
)
from .errors import PlotScriptError, SeriesLengthError, UnsafeTextError
from .process.sink import InstructionBuffer, InstructionSink

__all__ = [
    "GeneralComposer",
    "PlotConfig",
    "compose_plot",
    "load_series_csv",
    "series_from_frame",
    "DerivedTicks",
    "ExplicitTicks",
    "PlotColor",
    "PlotDesign",
    "Tick",
    "TickMode",
    "Title",
    "XTick",
    "XyPair",
    "YTick",
    "PlotScriptError",
    "SeriesLengthError",
    "UnsafeTextError",
    "InstructionBuffer",
    "InstructionSink",
]
