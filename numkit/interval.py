import logging
from typing import Any, Generic, Protocol, TypeVar

from typing_extensions import Self, override

from numkit.util import (
    BRACKETS,
    CLOSED,
    INTERVAL_TYPES,
    LOPEN,
    OPEN,
    ROPEN,
    IntervalType,
)

logger = logging.getLogger(__name__)


class SupportsOrdering(Protocol):
    """Endpoint values: anything totally ordered by `<` and `<=`."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __le__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=SupportsOrdering)

_MISSING: Any = object()


def _zero_like(value: T) -> T:
    """Return the default-constructed value of value's type, or 0 if it has none."""
    try:
        return value.__class__()
    except TypeError:
        return 0  # pyright: ignore[reportReturnType]


class Interval(Generic[T]):
    """A closed, open or half-open range between two ordered endpoints.

    The type decides which endpoints belong to the interval:

    - ``"closed"``: ``[min, max]``
    - ``"open"``: ``(min, max)``
    - ``"lopen"``: ``(min, max]``
    - ``"ropen"``: ``[min, max)``

    A closed interval requires ``min <= max``; every other type requires
    ``min < max``. ``Interval()`` is the degenerate closed interval ``[0, 0]``.

    Intervals compare by value but are not hashable, since `release`
    changes them in place.
    """

    __slots__ = ("_type", "_min", "_max")

    def __init__(
        self,
        min: T = _MISSING,
        max: T = _MISSING,
        type: IntervalType = CLOSED,
    ):
        if min is _MISSING and max is _MISSING:
            min, max = 0, 0  # pyright: ignore[reportAssignmentType]
        elif min is _MISSING or max is _MISSING:
            raise TypeError(
                "Interval needs both endpoints or neither.\n"
                f"Got only {'max' if min is _MISSING else 'min'}="
                f"{max if min is _MISSING else min!r}\n"
                "Hint: Interval(1, 5) for [1, 5], Interval() for [0, 0]"
            )
        if type not in INTERVAL_TYPES:
            raise ValueError(
                f"Unknown interval type {type!r}.\n"
                f"Expected one of: {', '.join(INTERVAL_TYPES)}"
            )
        if type == CLOSED:
            if not min <= max:
                raise ValueError(
                    f"Interval is invalid (min > max): min={min!r}, max={max!r}\n"
                    "Hint: a closed interval requires min <= max"
                )
        elif not min < max:
            raise ValueError(
                f"Interval is invalid (min >= max): min={min!r}, max={max!r}\n"
                f"Hint: a {type} interval requires min < max, "
                "use a closed interval for a single point"
            )

        self._type: IntervalType = type
        self._min: T = min  # pyright: ignore[reportAttributeAccessIssue]
        self._max: T = max  # pyright: ignore[reportAttributeAccessIssue]

    @classmethod
    def make_closed(cls, min: T, max: T) -> Self:
        """Return the ``[min, max]`` interval."""
        return cls(min, max, CLOSED)

    @classmethod
    def make_open(cls, min: T, max: T) -> Self:
        """Return the ``(min, max)`` interval."""
        return cls(min, max, OPEN)

    @classmethod
    def make_lopen(cls, min: T, max: T) -> Self:
        """Return the ``(min, max]`` interval."""
        return cls(min, max, LOPEN)

    @classmethod
    def make_ropen(cls, min: T, max: T) -> Self:
        """Return the ``[min, max)`` interval."""
        return cls(min, max, ROPEN)

    @property
    def type(self) -> IntervalType:
        return self._type

    @property
    def min(self) -> T:
        return self._min

    @property
    def max(self) -> T:
        return self._max

    def has(self, value: Any) -> bool:
        """True if value belongs to the interval."""
        if self._type == CLOSED:
            return self._min <= value and value <= self._max
        if self._type == OPEN:
            return self._min < value and value < self._max
        if self._type == LOPEN:
            return self._min < value and value <= self._max
        return self._min <= value and value < self._max

    def __contains__(self, value: Any) -> bool:
        return self.has(value)

    def release(self) -> tuple[T, T]:
        """Return ``(min, max)`` and reset this interval to the closed
        degenerate interval at the endpoint type's default value.

        This is a destructive read: afterwards the instance compares equal
        to ``Interval(zero, zero)``, where ``zero`` is ``type(min)()``
        (``0``, ``0.0``, ``timedelta()``, ``Fraction(0)``...). Endpoint types
        without a no-argument constructor reset to ``0``.
        """
        result = (self._min, self._max)
        logger.debug("releasing %s", self)
        zero = _zero_like(self._min)
        self._type = CLOSED
        self._min = zero
        self._max = zero
        return result

    def _key(self) -> tuple[IntervalType, T, T]:
        return (self._type, self._min, self._max)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    @override
    def __repr__(self) -> str:
        return f"Interval({self._min!r}, {self._max!r}, type={self._type!r})"

    @override
    def __str__(self) -> str:
        """Human-friendly interval notation, e.g. ``[1, 5)``."""
        left, right = BRACKETS[self._type]
        return f"{left}{self._min}, {self._max}{right}"
