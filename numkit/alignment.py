"""Power-of-two alignment arithmetic for buffer and allocation sizing.

All functions operate on integers only: the bit tricks below rely on
two's-complement semantics, which Python ints provide for negative values
of unbounded width.
"""

from numbers import Integral


def is_power_of_two(number: int) -> bool:
    """Return True if number has exactly one set bit.

    Computed as ``number & (number - 1) == 0``, which also holds for zero:
    ``is_power_of_two(0)`` is True. `padding` and `aligned` reject a zero
    alignment separately.
    """
    return (number & (number - 1)) == 0


def _check_integral(value: object, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(
            "Alignment arithmetic requires integers.\n"
            f"Got {name}={value!r} of type {type(value).__name__!r}\n"
            f"Hint: convert explicitly, e.g. int({name})"
        )


def _validate(value: int, alignment: int, action: str, subject: str) -> None:
    _check_integral(value, "value")
    _check_integral(alignment, "alignment")
    if value < 0:
        raise ValueError(f"Cannot {action} {subject} negative value: {value}")
    if alignment <= 0 or not is_power_of_two(alignment):
        raise ValueError(
            f"Cannot {action} with alignment that is not a power of 2: {alignment}"
        )


def padding(value: int, alignment: int) -> int:
    """Return how many units must be added to value to reach a multiple of alignment.

    Raises:
        TypeError: If value or alignment is not an integer
        ValueError: If value is negative or alignment is not a power of two

    Example:
        >>> padding(10, 8)
        6
    """
    _validate(value, alignment, "calculate padding", "for a")
    return (-value) & (alignment - 1)


def aligned(value: int, alignment: int) -> int:
    """Return value rounded up to the nearest multiple of alignment.

    Raises:
        TypeError: If value or alignment is not an integer
        ValueError: If value is negative or alignment is not a power of two

    Example:
        >>> aligned(10, 8)
        16
    """
    _validate(value, alignment, "align", "a")
    return (value + alignment - 1) & -alignment
