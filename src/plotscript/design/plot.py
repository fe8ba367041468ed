from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..types import Number


@dataclass(frozen=True)
class PlotColor:
    """Figure (outer) and plotting-area (inner) background colors.

    A ``None`` field means no instruction is emitted for that half.
    """

    outer: Optional[str] = None
    inner: Optional[str] = None


@dataclass(frozen=True)
class Title:
    text: str
    font_size: Number
