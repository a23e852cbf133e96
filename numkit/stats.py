"""Mean and variance over finite numeric series.

`avg` and `variance` divide each term before accumulating instead of
summing first, which keeps intermediate values in range for large
collections. `RunningStats` computes the same aggregates in a single pass
for series that arrive one sample at a time.
"""

import logging
from collections.abc import Collection, Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


def _check_size(size: int, general: bool) -> None:
    if size == 0:
        raise ValueError(
            "Cannot compute statistics of an empty collection.\n"
            "Hint: check that the series has at least one sample"
        )
    if not general and size < 2:
        raise ValueError(
            f"Sample variance requires at least 2 values, got {size}.\n"
            "Hint: pass general=True for the population variance"
        )


def _check_non_negative(result: float) -> None:
    # Raised explicitly so the check survives `python -O`
    if result < 0:
        raise AssertionError(f"variance must be non-negative, got {result}")


def avg(data: Collection[float]) -> float:
    """Return the arithmetic mean of data.

    Raises:
        ValueError: If data is empty
    """
    size = len(data)
    _check_size(size, general=True)
    result = 0.0
    for num in data:
        result += float(num) / size
    logger.debug("avg of %d values: %r", size, result)
    return result


def variance(
    data: Collection[float], mean: float | None = None, general: bool = True
) -> float:
    """Return the variance of data.

    Args:
        data: Input values
        mean: Precomputed mean of data; computed with `avg` when omitted
        general: True if data is the whole population (denominator N),
            False if it is a sample of a larger one (denominator N - 1)

    Raises:
        ValueError: If data is empty, or has fewer than 2 values when
            general is False
        AssertionError: If the accumulated result is negative
    """
    size = len(data)
    _check_size(size, general)
    if mean is None:
        mean = avg(data)

    den = float(size if general else size - 1)
    result = 0.0
    for num in data:
        d = float(num) - mean
        result += (d / den) * d
    _check_non_negative(result)
    logger.debug(
        "%s variance of %d values: %r",
        "population" if general else "sample",
        size,
        result,
    )
    return result


@dataclass
class RunningStats:
    """Single-pass mean/variance using Welford's algorithm, O(1) memory.

    Example:
        >>> stats = RunningStats()
        >>> stats.extend([2, 4, 4, 4, 5, 5, 7, 9])
        >>> round(stats.mean, 9), round(stats.variance(), 9)
        (5.0, 4.0)
    """

    count: int = 0
    mean: float = 0.0
    m2: float = 0.0

    def push(self, value: float) -> None:
        self.count += 1
        delta = float(value) - self.mean
        self.mean += delta / self.count
        self.m2 += delta * (float(value) - self.mean)

    def extend(self, values: Iterable[float]) -> None:
        for value in values:
            self.push(value)

    def variance(self, general: bool = True) -> float:
        """Population (general=True) or sample variance of the values pushed so far."""
        _check_size(self.count, general)
        result = self.m2 / (self.count if general else self.count - 1)
        _check_non_negative(result)
        return result
