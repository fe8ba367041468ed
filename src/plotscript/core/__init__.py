from .config import ColorConfig, PlotConfig, SeriesConfig, TickConfig, TitleConfig
from .pipeline import compose_plot

__all__ = [
    "ColorConfig",
    "PlotConfig",
    "SeriesConfig",
    "TickConfig",
    "TitleConfig",
    "compose_plot",
]
