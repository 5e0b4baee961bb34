import bisect
import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, Generic, NamedTuple, TypeVar, overload

from typing_extensions import override

from intervalmap.interval import Interval

T = TypeVar("T")
V = TypeVar("V")

logger = logging.getLogger(__name__)


class Entry(NamedTuple, Generic[T, V]):
    interval: Interval[T]
    value: V


class IntervalMap(Generic[T, V]):
    """An ordered mapping from intervals to values.

    Each point of the domain maps to at most one value. Inserting over a span
    that is already (partly) mapped overwrites that span and trims the older
    entries around it, so the stored entries stay sorted, non-overlapping and
    non-empty at all times.

    Example:
        >>> chapters = IntervalMap({
        ...     Interval.closed(1, 2): "Index",
        ...     Interval.closed(3, 10): "Chapter 01",
        ...     Interval.closed(11, 40): "Chapter 02",
        ... })
        >>> chapters.get(5)
        'Chapter 01'
        >>> chapters.insert("Prologue", Interval.closed(2, 5))
        >>> chapters.get(5)
        'Prologue'

    Attributes:
        coalesce: When True, an inserted entry is joined with a touching
            neighbour holding an equal value, keeping the map compact.
    """

    def __init__(
        self,
        items: "Mapping[Interval[T], V] | Iterable[tuple[Interval[T], V]]" = (),
        *,
        coalesce: bool = False,
    ) -> None:
        """Build a map by inserting ``items`` in order (later items win).

        Args:
            items: A mapping of intervals to values, or ``(interval, value)``
                pairs in any order
            coalesce: Join touching entries with equal values on insert
        """
        self.coalesce: bool = coalesce
        self._entries: tuple[Entry[T, V], ...] = ()

        pairs = items.items() if isinstance(items, Mapping) else items
        for interval, value in pairs:
            self.insert(value, interval)

    @classmethod
    def from_sorted(
        cls,
        pairs: Iterable[tuple[Interval[T], V]],
        *,
        coalesce: bool = False,
    ) -> "IntervalMap[T, V]":
        """Adopt pre-sorted ``(interval, value)`` pairs without re-inserting.

        The pairs must be sorted by interval, mutually non-overlapping and
        free of empty intervals. This is checked in a single linear pass.

        Raises:
            ValueError: If the pairs break any of those rules
        """
        entries = tuple(Entry(interval, value) for interval, value in pairs)
        for index, entry in enumerate(entries):
            if entry.interval.is_empty:
                logger.debug("from_sorted rejected empty interval at %d", index)
                raise ValueError(
                    f"Entry {index} has an empty interval.\n"
                    f"Hint: drop empty intervals before calling from_sorted(), "
                    f"or build with IntervalMap(pairs) instead"
                )
            if index == 0:
                continue
            previous = entries[index - 1].interval
            if not previous < entry.interval or previous.overlaps(entry.interval):
                logger.debug("from_sorted rejected pairs at %d", index)
                raise ValueError(
                    f"Entries {index - 1} and {index} are out of order or overlap: "
                    f"{previous} then {entry.interval}\n"
                    f"Hint: IntervalMap(pairs) accepts unsorted, overlapping input"
                )
        return cls._adopt(entries, coalesce=coalesce)

    @classmethod
    def _adopt(
        cls, entries: Sequence[Entry[T, V]], *, coalesce: bool
    ) -> "IntervalMap[T, V]":
        """Wrap entries already known to be valid."""
        mapping: IntervalMap[T, V] = cls(coalesce=coalesce)
        mapping._entries = tuple(entries)
        return mapping

    def _index_containing(self, point: T) -> int | None:
        lo, hi = 0, len(self._entries)
        while lo < hi:
            middle = lo + (hi - lo) // 2
            interval = self._entries[middle].interval
            if interval.contains(point):
                return middle
            if interval.lower_boundary.compare_point(point) > 0:
                hi = middle
            else:
                lo = middle + 1
        return None

    def get(self, point: T, default: Any = None) -> V | Any:
        """Return the value of the interval containing ``point``, or ``default``."""
        index = self._index_containing(point)
        if index is None:
            return default
        return self._entries[index].value

    def __contains__(self, point: object) -> bool:
        return self._index_containing(point) is not None  # pyright: ignore[reportArgumentType]

    def _locate(self, interval: Interval[T]) -> range:
        """Indices of the stored entries overlapping ``interval``.

        An empty result still carries the position where ``interval`` would
        be inserted in ``range.start``.
        """
        # Upper and lower boundaries both increase along the entries.
        first = bisect.bisect_right(
            self._entries,
            interval.lower_boundary,
            key=lambda entry: entry.interval.upper_boundary,
        )
        stop = bisect.bisect_left(
            self._entries,
            interval.upper_boundary,
            lo=first,
            key=lambda entry: entry.interval.lower_boundary,
        )
        return range(first, stop)

    def _split(
        self, interval: Interval[T]
    ) -> tuple[list[Entry[T, V]], list[Entry[T, V]]]:
        """Entries entirely before and entirely after ``interval``.

        Entries partially covered by ``interval`` contribute what is left of
        them once ``interval`` is subtracted; the covered part is dropped.
        """
        hit = self._locate(interval)
        former = list(self._entries[: hit.start])
        latter = list(self._entries[hit.stop :])
        if not hit:
            return former, latter

        head = self._entries[hit.start]
        if len(hit) == 1:
            left, right = head.interval.subtract(interval)
            if right is not None:
                former.append(Entry(left, head.value))
                latter.insert(0, Entry(right, head.value))
            elif not left.is_empty:
                if left < interval:
                    former.append(Entry(left, head.value))
                else:
                    latter.insert(0, Entry(left, head.value))
            return former, latter

        # Several overlaps: only the outermost two can stick out of interval.
        tail = self._entries[hit.stop - 1]
        left, _ = head.interval.subtract(interval)
        if not left.is_empty:
            former.append(Entry(left, head.value))
        right, _ = tail.interval.subtract(interval)
        if not right.is_empty:
            latter.insert(0, Entry(right, tail.value))
        return former, latter

    def _require_nonempty(self, interval: Interval[T], operation: str) -> None:
        if interval.is_empty:
            raise ValueError(
                f"{operation}() requires a non-empty interval, got {interval}.\n"
                f"Hint: check `interval.is_empty` first; degenerate bounds such "
                f"as Interval.open(3, 3) normalize to empty"
            )

    def insert(self, value: V, interval: Interval[T]) -> None:
        """Map every point of ``interval`` to ``value``.

        Whatever was mapped inside ``interval`` before is overwritten; older
        entries sticking out on either side are trimmed, not removed.

        Raises:
            ValueError: If ``interval`` is empty
        """
        self._require_nonempty(interval, "insert")
        former, latter = self._split(interval)
        logger.debug(
            "insert %s: %d entries before, %d after",
            interval,
            len(former),
            len(latter),
        )

        if not self.coalesce:
            self._entries = (*former, Entry(interval, value), *latter)
            return

        # Join left first, then join that result with the right neighbour.
        joined = interval
        if former and former[-1].value == value:
            merged = former[-1].interval.concatenate(joined)
            if merged is not None:
                logger.debug("coalesce %s with left %s", joined, former[-1].interval)
                former.pop()
                joined = merged
        if latter and latter[0].value == value:
            merged = joined.concatenate(latter[0].interval)
            if merged is not None:
                logger.debug("coalesce %s with right %s", joined, latter[0].interval)
                latter.pop(0)
                joined = merged
        self._entries = (*former, Entry(joined, value), *latter)

    def remove(self, interval: Interval[T]) -> None:
        """Unmap every point of ``interval``.

        Raises:
            ValueError: If ``interval`` is empty
        """
        self._require_nonempty(interval, "remove")
        former, latter = self._split(interval)
        logger.debug(
            "remove %s: %d entries dropped or trimmed",
            interval,
            len(self._entries) - len(former) - len(latter),
        )
        self._entries = (*former, *latter)

    def limited(self, within: Interval[T]) -> "IntervalMap[T, V]":
        """A new map restricted to the part of this one inside ``within``."""
        if within.is_empty:
            return IntervalMap(coalesce=self.coalesce)
        hit = self._locate(within)
        if not hit:
            return IntervalMap(coalesce=self.coalesce)

        entries = list(self._entries[hit.start : hit.stop])
        head = entries[0]
        entries[0] = Entry(head.interval.intersection(within), head.value)
        if len(entries) > 1:
            tail = entries[-1]
            entries[-1] = Entry(tail.interval.intersection(within), tail.value)
        return IntervalMap._adopt(entries, coalesce=self.coalesce)

    def set_value_at(self, index: int, value: V) -> None:
        """Replace the value of the ``index``-th entry, keeping its interval."""
        entries = list(self._entries)
        entries[index] = Entry(entries[index].interval, value)
        self._entries = tuple(entries)

    def intervals(self) -> tuple[Interval[T], ...]:
        return tuple(entry.interval for entry in self._entries)

    def values(self) -> tuple[V, ...]:
        return tuple(entry.value for entry in self._entries)

    def copy(self) -> "IntervalMap[T, V]":
        return IntervalMap._adopt(self._entries, coalesce=self.coalesce)

    def __iter__(self) -> Iterator[Entry[T, V]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    @overload
    def __getitem__(self, index: int) -> Entry[T, V]: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Entry[T, V], ...]: ...

    def __getitem__(
        self, index: int | slice
    ) -> "Entry[T, V] | tuple[Entry[T, V], ...]":
        """Entry (or entries) by ordinal position in interval order."""
        return self._entries[index]

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntervalMap):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    @override
    def __repr__(self) -> str:
        body = ", ".join(f"{entry.interval}: {entry.value!r}" for entry in self)
        return f"IntervalMap({{{body}}})"
