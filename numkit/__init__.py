import logging

from .alignment import aligned, is_power_of_two, padding
from .interval import Interval, SupportsOrdering
from .stats import RunningStats, avg, variance
from .util import CLOSED, LOPEN, OPEN, ROPEN, IntervalType

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "is_power_of_two",
    "padding",
    "aligned",
    "Interval",
    "IntervalType",
    "SupportsOrdering",
    "CLOSED",
    "OPEN",
    "LOPEN",
    "ROPEN",
    "avg",
    "variance",
    "RunningStats",
]
