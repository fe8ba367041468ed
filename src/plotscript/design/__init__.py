"""Immutable plot-configuration value objects consumed by the composer."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from .pairs import XyPair
from .plot import PlotColor, Title
from .ticks import DerivedTicks, ExplicitTicks, Tick, TickMode, XTick, YTick


@dataclass(frozen=True)
class PlotDesign:
    """Everything one render request needs, in pipeline order."""

    color: PlotColor = field(default_factory=PlotColor)
    grid: bool = False
    title: Optional[Title] = None
    ticks: Optional[TickMode] = None
    series: Sequence[XyPair] = field(default_factory=tuple)
    launch_interpreter: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "series", tuple(self.series))


__all__ = [
    "PlotDesign",
    "PlotColor",
    "Title",
    "Tick",
    "XTick",
    "YTick",
    "ExplicitTicks",
    "DerivedTicks",
    "TickMode",
    "XyPair",
]
