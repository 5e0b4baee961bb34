"""One side of an interval, placed on a single ordered axis.

A boundary is a *cut* in the ordered domain: it sits either just below or
just above its value. An inclusive lower bound ``[5`` and an exclusive upper
bound ``5)`` both sit just below 5; an exclusive lower bound ``(5`` and an
inclusive upper bound ``5]`` both sit just above it. Comparing cuts instead of
(value, flag) pairs lets boundaries from different interval shapes, and from
different sides, share one ordering.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from typing_extensions import override

T = TypeVar("T")


class Side(Enum):
    LOWER = "lower"
    UPPER = "upper"


@dataclass(frozen=True, eq=False)
class Boundary(Generic[T]):
    value: T | None
    inclusive: bool
    side: Side
    unbounded: bool = False

    @classmethod
    def lower(cls, value: T, inclusive: bool = True) -> "Boundary[T]":
        return cls(value, inclusive, Side.LOWER)

    @classmethod
    def upper(cls, value: T, inclusive: bool = True) -> "Boundary[T]":
        return cls(value, inclusive, Side.UPPER)

    @classmethod
    def below_all(cls) -> "Boundary[Any]":
        """Sentinel for "no lower bound"; sorts before every other boundary."""
        return cls(None, False, Side.LOWER, unbounded=True)

    @classmethod
    def above_all(cls) -> "Boundary[Any]":
        """Sentinel for "no upper bound"; sorts after every other boundary."""
        return cls(None, False, Side.UPPER, unbounded=True)

    @property
    def is_above(self) -> bool:
        """True if the cut sits just above ``value`` rather than just below."""
        return self.inclusive == (self.side is Side.UPPER)

    @property
    def _rank(self) -> int:
        if not self.unbounded:
            return 0
        return -1 if self.side is Side.LOWER else 1

    def compare(self, other: "Boundary[T]") -> int:
        """Three-way comparison of two cuts, regardless of side or shape."""
        if self.unbounded or other.unbounded:
            return (self._rank > other._rank) - (self._rank < other._rank)
        if self.value < other.value:  # pyright: ignore[reportOperatorIssue]
            return -1
        if other.value < self.value:  # pyright: ignore[reportOperatorIssue]
            return 1
        return int(self.is_above) - int(other.is_above)

    def compare_point(self, point: T) -> int:
        """Return -1 if the cut lies below ``point`` and 1 if above it.

        A cut never coincides with a point, so 0 is never returned.
        """
        if self.unbounded:
            return self._rank
        if point < self.value:  # pyright: ignore[reportOperatorIssue]
            return 1
        if self.value < point:  # pyright: ignore[reportOperatorIssue]
            return -1
        return 1 if self.is_above else -1

    def admits(self, point: T) -> bool:
        """Whether ``point`` lies on the inner side of this boundary."""
        if self.side is Side.LOWER:
            return self.compare_point(point) < 0
        return self.compare_point(point) > 0

    def flipped(self) -> "Boundary[T]":
        """The same cut seen from the opposite side.

        ``[3`` becomes ``3)``, ``5]`` becomes ``(5``. Sentinels cannot be
        flipped: nothing lies beyond "no bound".
        """
        if self.unbounded:
            raise ValueError(
                f"Cannot flip an unbounded {self.side.value} boundary.\n"
                f"Hint: check `boundary.unbounded` before carving a remainder."
            )
        side = Side.UPPER if self.side is Side.LOWER else Side.LOWER
        return Boundary(self.value, not self.inclusive, side)

    def __lt__(self, other: "Boundary[T]") -> bool:
        return self.compare(other) < 0

    def __le__(self, other: "Boundary[T]") -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: "Boundary[T]") -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: "Boundary[T]") -> bool:
        return self.compare(other) >= 0

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Boundary):
            return NotImplemented
        return self.compare(other) == 0

    @override
    def __hash__(self) -> int:
        if self.unbounded:
            return hash(self._rank)
        return hash((self.value, self.is_above))

    @override
    def __str__(self) -> str:
        if self.unbounded:
            return "-inf" if self.side is Side.LOWER else "inf"
        if self.side is Side.LOWER:
            return f"{'[' if self.inclusive else '('}{self.value!r}"
        return f"{self.value!r}{']' if self.inclusive else ')'}"


def lesser(a: Boundary[T], b: Boundary[T]) -> Boundary[T]:
    return a if a <= b else b


def greater(a: Boundary[T], b: Boundary[T]) -> Boundary[T]:
    return a if a >= b else b
