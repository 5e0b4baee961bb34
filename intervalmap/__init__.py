from .boundary import Boundary, Side
from .core import Entry, IntervalMap
from .interval import Interval, Kind
from .intervalset import IntervalSet

__version__ = "0.1.0"

__all__ = [
    "Boundary",
    "Side",
    "Interval",
    "Kind",
    "Entry",
    "IntervalMap",
    "IntervalSet",
]
