from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, Iterator, Tuple, TypeVar

import numpy as np

from ..errors import SeriesLengthError

X = TypeVar("X")
Y = TypeVar("Y")


def _as_tuple(values: Iterable[Any] | None) -> Tuple[Any, ...]:
    if values is None:
        return ()
    if isinstance(values, np.ndarray):
        # datetime64 arrays keep their numpy scalars; numeric ones become Python numbers
        if np.issubdtype(values.dtype, np.datetime64):
            return tuple(values)
        return tuple(values.tolist())
    return tuple(values)


@dataclass(frozen=True)
class XyPair(Generic[X, Y]):
    """One plotted dataset: x[i] pairs with y[i].

    ``has_scatter`` adds point markers on top of the connecting line.
    """

    x: Tuple[X, ...] = field(default_factory=tuple)
    y: Tuple[Y, ...] = field(default_factory=tuple)
    has_scatter: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _as_tuple(self.x))
        object.__setattr__(self, "y", _as_tuple(self.y))
        if len(self.x) != len(self.y):
            raise SeriesLengthError(len(self.x), len(self.y))

    def __len__(self) -> int:
        return len(self.x)

    def points(self) -> Iterator[Tuple[X, Y]]:
        return zip(self.x, self.y)
