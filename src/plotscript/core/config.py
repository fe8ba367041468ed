from __future__ import annotations

from datetime import date, datetime
import logging
from pathlib import Path
from typing import Any, List, Literal, Optional, Tuple, Union

from matplotlib.colors import is_color_like
from pydantic import BaseModel, Field, field_validator, model_validator

from ..data.frames import load_series_csv
from ..design import DerivedTicks, ExplicitTicks, PlotColor, PlotDesign, Tick, Title, XyPair

logger = logging.getLogger(__name__)


class ColorConfig(BaseModel):
    outer: Optional[str] = None
    inner: Optional[str] = None

    @field_validator("outer", "inner")
    @classmethod
    def warn_unknown_color(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not is_color_like(v):
            logger.warning("Color %r is not recognised by matplotlib; passing it through", v)
        return v


class TitleConfig(BaseModel):
    text: str
    font_size: Union[int, float] = Field(gt=0)


class TickConfig(BaseModel):
    mode: Literal["derived", "explicit"] = "derived"
    x: Optional[List[Tuple[Any, Any]]] = None
    y: Optional[List[Tuple[Any, Any]]] = None

    @model_validator(mode="after")
    def warn_ignored_values(self) -> "TickConfig":
        if self.mode == "derived" and (self.x is not None or self.y is not None):
            logger.warning("Tick values are ignored when mode is 'derived'")
        return self


class SeriesConfig(BaseModel):
    x: Optional[List[Union[datetime, date]]] = None
    y: Optional[List[Union[int, float]]] = None
    csv: Optional[str] = None
    x_column: str = "x"
    y_column: str = "y"
    scatter: bool = False

    @model_validator(mode="after")
    def check_source(self) -> "SeriesConfig":
        if self.csv is None:
            if self.x is None or self.y is None:
                raise ValueError("series needs either inline 'x' and 'y' lists or a 'csv' path")
            if len(self.x) != len(self.y):
                raise ValueError(f"length mismatch between x ({len(self.x)}) and y ({len(self.y)})")
        elif self.x is not None or self.y is not None:
            raise ValueError("series takes inline 'x'/'y' or 'csv', not both")
        return self

    def to_pair(self, base_dir: Optional[Path] = None) -> XyPair:
        if self.csv is not None:
            path = Path(self.csv)
            if base_dir is not None and not path.is_absolute():
                path = base_dir / path
            return load_series_csv(path, self.x_column, self.y_column, has_scatter=self.scatter)
        return XyPair(x=tuple(self.x or ()), y=tuple(self.y or ()), has_scatter=self.scatter)


class PlotConfig(BaseModel):
    color: ColorConfig = Field(default_factory=ColorConfig)
    grid: bool = False
    title: Optional[TitleConfig] = None
    ticks: Optional[TickConfig] = None
    series: List[SeriesConfig] = Field(default_factory=list)
    launch_interpreter: bool = False

    def to_design(self, base_dir: Optional[Path] = None) -> PlotDesign:
        """Resolve CSV-backed series (relative to ``base_dir``) and build a PlotDesign."""
        pairs = [s.to_pair(base_dir) for s in self.series]
        ticks = None
        if self.ticks is not None:
            if self.ticks.mode == "derived":
                ticks = DerivedTicks(pairs)
            else:
                ticks = ExplicitTicks(
                    x_tick=Tick(tuple(self.ticks.x)) if self.ticks.x is not None else None,
                    y_tick=Tick(tuple(self.ticks.y)) if self.ticks.y is not None else None,
                )
        title = Title(self.title.text, self.title.font_size) if self.title is not None else None
        return PlotDesign(
            color=PlotColor(outer=self.color.outer, inner=self.color.inner),
            grid=self.grid,
            title=title,
            ticks=ticks,
            series=pairs,
            launch_interpreter=self.launch_interpreter,
        )
