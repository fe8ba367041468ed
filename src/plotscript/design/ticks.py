from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Sequence, Tuple, Union

from ..types import TickPair
from .pairs import XyPair


@dataclass(frozen=True)
class Tick:
    """Explicit tick override for one axis, as ordered (position, label) pairs."""

    values: Tuple[TickPair, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        pairs = []
        for item in self.values:
            position, label = item
            pairs.append((position, str(label)))
        object.__setattr__(self, "values", tuple(pairs))

    @classmethod
    def from_lists(cls, positions: Iterable[Any], labels: Iterable[Any]) -> "Tick":
        positions = list(positions)
        labels = list(labels)
        if len(positions) != len(labels):
            raise ValueError(f"{len(positions)} tick positions but {len(labels)} labels")
        return cls(tuple(zip(positions, labels)))

    @property
    def positions(self) -> Tuple[Any, ...]:
        return tuple(p for p, _ in self.values)

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(lbl for _, lbl in self.values)


# Axis-specific names; both share the same shape.
XTick = Tick
YTick = Tick


@dataclass(frozen=True)
class ExplicitTicks:
    """Use caller-supplied ticks; a ``None`` axis keeps the renderer default."""

    x_tick: Optional[Tick] = None
    y_tick: Optional[Tick] = None


@dataclass(frozen=True)
class DerivedTicks:
    """Derive ticks from the series extents (daily X ticks, fixed Y policy)."""

    series: Sequence[XyPair] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "series", tuple(self.series))


TickMode = Union[ExplicitTicks, DerivedTicks]
