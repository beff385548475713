"""Saturating distance values for shortest-path computation.

`Distance` is either a finite non-negative integer or `INFINITY`. Adding
anything to `INFINITY` gives `INFINITY`, so "no known path" needs no special
casing in the relaxation loop and no magic maximum integer is involved.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Optional, Union


@total_ordering
@dataclass(frozen=True)
class Distance:
    """Finite distance, or infinity when `value` is None."""

    value: Optional[int] = None

    @property
    def is_finite(self) -> bool:
        return self.value is not None

    def __add__(self, other: Union[Distance, int]) -> Distance:
        if isinstance(other, Distance):
            other_value = other.value
        elif isinstance(other, int):
            other_value = other
        else:
            return NotImplemented
        if self.value is None or other_value is None:
            return INFINITY
        return Distance(self.value + other_value)

    __radd__ = __add__

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Distance):
            return NotImplemented
        if self.value is None:
            return False
        if other.value is None:
            return True
        return self.value < other.value

    def __repr__(self) -> str:
        return "Distance(inf)" if self.value is None else f"Distance({self.value})"


INFINITY = Distance()
ZERO = Distance(0)
