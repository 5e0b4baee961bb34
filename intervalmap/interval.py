"""Intervals over any totally ordered type.

Every interval shape (empty, unbounded, bounded with either inclusivity on
either side, half-unbounded) is one ``Interval`` value tagged by ``Kind``.
Cross-shape operations never look at the tag directly: they work on the
interval's two boundaries (see ``boundary.py``) and rebuild the most specific
shape from the result.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from typing_extensions import override

from intervalmap.boundary import Boundary, Side, greater, lesser

T = TypeVar("T")


class Kind(Enum):
    EMPTY = "empty"
    UNBOUNDED = "unbounded"
    CLOSED = "closed"  # [a, b]
    OPEN = "open"  # (a, b)
    LEFT_OPEN = "left_open"  # (a, b]
    RIGHT_OPEN = "right_open"  # [a, b)
    FROM = "from"  # [a, inf)
    GREATER_THAN = "greater_than"  # (a, inf)
    THROUGH = "through"  # (-inf, b]
    UP_TO = "up_to"  # (-inf, b)


# Inclusivity of (lower, upper) per shape; None marks an unbounded side.
_SHAPES: dict[Kind, tuple[bool | None, bool | None]] = {
    Kind.UNBOUNDED: (None, None),
    Kind.CLOSED: (True, True),
    Kind.OPEN: (False, False),
    Kind.LEFT_OPEN: (False, True),
    Kind.RIGHT_OPEN: (True, False),
    Kind.FROM: (True, None),
    Kind.GREATER_THAN: (False, None),
    Kind.THROUGH: (None, True),
    Kind.UP_TO: (None, False),
}
_KINDS: dict[tuple[bool | None, bool | None], Kind] = {
    shape: kind for kind, shape in _SHAPES.items()
}

Bounds = tuple[Boundary[T] | None, Boundary[T] | None]


@dataclass(frozen=True, kw_only=True)
class Interval(Generic[T]):
    kind: Kind
    lower: T | None = None
    upper: T | None = None

    def __post_init__(self) -> None:
        if self.kind is Kind.EMPTY:
            if self.lower is not None or self.upper is not None:
                raise ValueError(
                    f"An empty interval takes no endpoints.\n"
                    f"Got lower={self.lower!r}, upper={self.upper!r}\n"
                    f"Hint: use Interval.empty()"
                )
            return

        lower_inclusive, upper_inclusive = _SHAPES[self.kind]
        for edge, value, inclusive in (
            ("lower", self.lower, lower_inclusive),
            ("upper", self.upper, upper_inclusive),
        ):
            if inclusive is None and value is not None:
                raise ValueError(
                    f"A {self.kind.value!r} interval is unbounded on the {edge} "
                    f"side, got {edge}={value!r}"
                )
            if inclusive is not None and value is None:
                raise ValueError(
                    f"A {self.kind.value!r} interval needs a {edge} endpoint.\n"
                    f"Example: Interval.closed(0, 10)"
                )

        # Degenerate bounds (lo > hi, or lo == hi with an open side) are empty.
        if self.lower is not None and self.upper is not None:
            if self.lower_boundary >= self.upper_boundary:
                object.__setattr__(self, "kind", Kind.EMPTY)
                object.__setattr__(self, "lower", None)
                object.__setattr__(self, "upper", None)

    @classmethod
    def empty(cls) -> "Interval[Any]":
        return cls(kind=Kind.EMPTY)

    @classmethod
    def unbounded(cls) -> "Interval[Any]":
        return cls(kind=Kind.UNBOUNDED)

    @classmethod
    def closed(cls, lower: T, upper: T) -> "Interval[T]":
        """``[lower, upper]``"""
        return cls(kind=Kind.CLOSED, lower=lower, upper=upper)

    @classmethod
    def open(cls, lower: T, upper: T) -> "Interval[T]":
        """``(lower, upper)``"""
        return cls(kind=Kind.OPEN, lower=lower, upper=upper)

    @classmethod
    def left_open(cls, lower: T, upper: T) -> "Interval[T]":
        """``(lower, upper]``"""
        return cls(kind=Kind.LEFT_OPEN, lower=lower, upper=upper)

    @classmethod
    def right_open(cls, lower: T, upper: T) -> "Interval[T]":
        """``[lower, upper)``, the usual half-open range."""
        return cls(kind=Kind.RIGHT_OPEN, lower=lower, upper=upper)

    @classmethod
    def from_(cls, lower: T) -> "Interval[T]":
        """``[lower, inf)``"""
        return cls(kind=Kind.FROM, lower=lower)

    @classmethod
    def greater_than(cls, lower: T) -> "Interval[T]":
        """``(lower, inf)``"""
        return cls(kind=Kind.GREATER_THAN, lower=lower)

    @classmethod
    def through(cls, upper: T) -> "Interval[T]":
        """``(-inf, upper]``"""
        return cls(kind=Kind.THROUGH, upper=upper)

    @classmethod
    def up_to(cls, upper: T) -> "Interval[T]":
        """``(-inf, upper)``"""
        return cls(kind=Kind.UP_TO, upper=upper)

    at_least = from_
    at_most = through
    less_than = up_to

    @classmethod
    def from_bounds(
        cls, lower: Boundary[T] | None, upper: Boundary[T] | None
    ) -> "Interval[T]":
        """Build the most specific shape spanning two boundaries.

        ``None`` (or a sentinel boundary) leaves that side unbounded. Crossed
        boundaries give the empty interval.
        """
        if lower is not None and lower.unbounded:
            lower = None
        if upper is not None and upper.unbounded:
            upper = None
        kind = _KINDS[
            (
                None if lower is None else lower.inclusive,
                None if upper is None else upper.inclusive,
            )
        ]
        return cls(
            kind=kind,
            lower=None if lower is None else lower.value,
            upper=None if upper is None else upper.value,
        )

    @property
    def is_empty(self) -> bool:
        return self.kind is Kind.EMPTY

    def bounds(self) -> "Bounds[T] | None":
        """Return ``(lower, upper)`` boundaries, or None if empty.

        A side is None when the interval is unbounded on that side.
        """
        if self.is_empty:
            return None
        lower_inclusive, upper_inclusive = _SHAPES[self.kind]
        lower = (
            None
            if lower_inclusive is None
            else Boundary(self.lower, lower_inclusive, Side.LOWER)
        )
        upper = (
            None
            if upper_inclusive is None
            else Boundary(self.upper, upper_inclusive, Side.UPPER)
        )
        return lower, upper

    @property
    def lower_boundary(self) -> Boundary[T]:
        """Lower boundary, with the "no lower bound" sentinel if unbounded."""
        bounds = self._require_bounds()
        return bounds[0] if bounds[0] is not None else Boundary.below_all()

    @property
    def upper_boundary(self) -> Boundary[T]:
        """Upper boundary, with the "no upper bound" sentinel if unbounded."""
        bounds = self._require_bounds()
        return bounds[1] if bounds[1] is not None else Boundary.above_all()

    def _require_bounds(self) -> "Bounds[T]":
        bounds = self.bounds()
        if bounds is None:
            raise ValueError("An empty interval has no boundaries")
        return bounds

    def contains(self, point: T) -> bool:
        if self.is_empty:
            return False
        return self.lower_boundary.admits(point) and self.upper_boundary.admits(
            point
        )

    def __contains__(self, point: object) -> bool:
        return self.contains(point)  # pyright: ignore[reportArgumentType]

    def overlaps(self, other: "Interval[T]") -> bool:
        """True if the two intervals share at least one point.

        Touching at an excluded endpoint is not overlapping:
        ``[0, 5)`` and ``[5, 10)`` do not overlap.
        """
        if self.is_empty or other.is_empty:
            return False
        return (
            self.lower_boundary < other.upper_boundary
            and other.lower_boundary < self.upper_boundary
        )

    def is_adjacent(self, other: "Interval[T]") -> bool:
        """True if the intervals touch with neither a gap nor a shared point."""
        if self.is_empty or other.is_empty:
            return False
        return (
            self.upper_boundary == other.lower_boundary
            or other.upper_boundary == self.lower_boundary
        )

    def intersection(self, other: "Interval[T]") -> "Interval[T]":
        if not self.overlaps(other):
            return Interval.empty()
        return Interval.from_bounds(
            greater(self.lower_boundary, other.lower_boundary),
            lesser(self.upper_boundary, other.upper_boundary),
        )

    def __and__(self, other: "Interval[T]") -> "Interval[T]":
        return self.intersection(other)

    def subtract(
        self, other: "Interval[T]"
    ) -> "tuple[Interval[T], Interval[T] | None]":
        """Remove ``other`` from this interval.

        Returns ``(self, None)`` when they do not overlap, ``(empty, None)``
        when ``other`` covers everything, ``(remainder, None)`` when a prefix
        or suffix is cut off, and ``(left, right)`` when ``other`` punches a
        hole in the middle. Remainders flip inclusivity where they meet
        ``other``: ``[0, 10) - [3, 7) == ([0, 3), [7, 10))``.
        """
        if not self.overlaps(other):
            return self, None

        lower, upper = self.lower_boundary, self.upper_boundary
        cut_lower, cut_upper = other.lower_boundary, other.upper_boundary

        left = (
            Interval.from_bounds(lower, cut_lower.flipped())
            if lower < cut_lower
            else None
        )
        right = (
            Interval.from_bounds(cut_upper.flipped(), upper)
            if cut_upper < upper
            else None
        )

        if left is not None and right is not None:
            return left, right
        if left is not None:
            return left, None
        if right is not None:
            return right, None
        return Interval.empty(), None

    def concatenate(self, other: "Interval[T]") -> "Interval[T] | None":
        """Join two overlapping or adjacent intervals into one.

        ``[0, 5)`` and ``[5, 10]`` give ``[0, 10]``. Returns None when there
        is a gap between them (``[0, 5)`` and ``(5, 10]``) or either is empty.
        """
        if not (self.overlaps(other) or self.is_adjacent(other)):
            return None
        return Interval.from_bounds(
            lesser(self.lower_boundary, other.lower_boundary),
            greater(self.upper_boundary, other.upper_boundary),
        )

    def compare(self, other: "Interval[T]") -> int:
        """Order by lower boundary, then upper; empty sorts last."""
        if self.is_empty or other.is_empty:
            return int(self.is_empty) - int(other.is_empty)
        by_lower = self.lower_boundary.compare(other.lower_boundary)
        if by_lower:
            return by_lower
        return self.upper_boundary.compare(other.upper_boundary)

    def __lt__(self, other: "Interval[T]") -> bool:
        return self.compare(other) < 0

    def __le__(self, other: "Interval[T]") -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: "Interval[T]") -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: "Interval[T]") -> bool:
        return self.compare(other) >= 0

    @override
    def __str__(self) -> str:
        """Mathematical notation, e.g. ``[1, 5)`` or ``(-inf, 3]``."""
        if self.is_empty:
            return "empty"
        lower, upper = self.lower_boundary, self.upper_boundary
        left = "(-inf" if lower.unbounded else str(lower)
        right = "inf)" if upper.unbounded else str(upper)
        return f"{left}, {right}"
