"""Sets of points stored as coalesced intervals.

An ``IntervalSet`` is an ``IntervalMap`` whose values carry no information:
every entry maps to None with coalescing on, so overlapping or touching
additions always collapse into a single interval.
"""

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

from typing_extensions import override

from intervalmap.core import IntervalMap
from intervalmap.interval import Interval

T = TypeVar("T")


class IntervalSet(Generic[T]):
    def __init__(self, intervals: Iterable[Interval[T]] = ()) -> None:
        self._map: IntervalMap[T, None] = IntervalMap(coalesce=True)
        for interval in intervals:
            self.add(interval)

    @classmethod
    def _wrap(cls, mapping: "IntervalMap[T, None]") -> "IntervalSet[T]":
        result: IntervalSet[T] = cls()
        result._map = mapping
        return result

    def add(self, interval: Interval[T]) -> None:
        """Add every point of ``interval``. Adding the empty interval is a no-op."""
        if not interval.is_empty:
            self._map.insert(None, interval)

    def discard(self, interval: Interval[T]) -> None:
        """Remove every point of ``interval``, if present."""
        if not interval.is_empty:
            self._map.remove(interval)

    def contains(self, point: T) -> bool:
        return point in self._map

    def __contains__(self, point: object) -> bool:
        return point in self._map

    def limited(self, within: Interval[T]) -> "IntervalSet[T]":
        return IntervalSet._wrap(self._map.limited(within))

    def union(self, other: "IntervalSet[T]") -> "IntervalSet[T]":
        result = IntervalSet._wrap(self._map.copy())
        for interval in other:
            result.add(interval)
        return result

    def intersection(self, other: "IntervalSet[T]") -> "IntervalSet[T]":
        result: IntervalSet[T] = IntervalSet()
        for interval in other:
            for piece in self._map.limited(interval).intervals():
                result.add(piece)
        return result

    def difference(self, other: "IntervalSet[T]") -> "IntervalSet[T]":
        result = IntervalSet._wrap(self._map.copy())
        for interval in other:
            result.discard(interval)
        return result

    def _check_operand(self, other: Any, symbol: str) -> None:
        if not isinstance(other, IntervalSet):
            raise TypeError(
                f"Cannot combine an IntervalSet with {type(other).__name__!r} "
                f"using {symbol}.\n"
                f"Hint: wrap intervals first: interval_set {symbol} "
                f"IntervalSet([Interval.closed(0, 10)])"
            )

    def __or__(self, other: "IntervalSet[T]") -> "IntervalSet[T]":
        self._check_operand(other, "|")
        return self.union(other)

    def __and__(self, other: "IntervalSet[T]") -> "IntervalSet[T]":
        self._check_operand(other, "&")
        return self.intersection(other)

    def __sub__(self, other: "IntervalSet[T]") -> "IntervalSet[T]":
        self._check_operand(other, "-")
        return self.difference(other)

    def __iter__(self) -> Iterator[Interval[T]]:
        return iter(self._map.intervals())

    def __len__(self) -> int:
        return len(self._map)

    def __bool__(self) -> bool:
        return bool(self._map)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntervalSet):
            return NotImplemented
        return self._map == other._map

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    @override
    def __repr__(self) -> str:
        return f"IntervalSet([{', '.join(str(interval) for interval in self)}])"
