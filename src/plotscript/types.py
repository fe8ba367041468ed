from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Tuple, Union

import numpy as np

# Preferred value types for public APIs
DateLike = Union[date, datetime, str, np.datetime64]
Number = Union[int, float, Decimal]

# (position, label) pair bound positionally by plt.xticks / plt.yticks
TickPair = Tuple[Any, str]
