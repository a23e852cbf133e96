"""Tests for power-of-two alignment arithmetic."""

import pytest

from numkit.alignment import aligned, is_power_of_two, padding


def test_powers_of_two_are_detected() -> None:
    for k in range(64):
        assert is_power_of_two(2**k)


def test_other_positive_integers_are_not_powers_of_two() -> None:
    powers = {2**k for k in range(11)}
    for n in range(1, 1025):
        assert is_power_of_two(n) == (n in powers)


def test_zero_reports_as_power_of_two() -> None:
    # Bit-trick quirk: 0 & -1 == 0
    assert is_power_of_two(0)


def test_negative_numbers_are_not_powers_of_two() -> None:
    assert not is_power_of_two(-1)
    assert not is_power_of_two(-8)


@pytest.mark.parametrize(
    ("value", "alignment", "expected_padding", "expected_aligned"),
    [
        (10, 8, 6, 16),
        (16, 8, 0, 16),
        (0, 8, 0, 0),
        (1, 1, 0, 1),
        (17, 16, 15, 32),
        (4095, 4096, 1, 4096),
    ],
)
def test_examples(
    value: int, alignment: int, expected_padding: int, expected_aligned: int
) -> None:
    assert padding(value, alignment) == expected_padding
    assert aligned(value, alignment) == expected_aligned


def test_aligned_and_padding_agree() -> None:
    for alignment in (1, 2, 4, 8, 64, 4096):
        for value in range(0, 300):
            result = aligned(value, alignment)
            pad = padding(value, alignment)
            assert result % alignment == 0
            assert result - value == pad
            assert 0 <= pad < alignment


def test_large_values_do_not_wrap() -> None:
    value = 2**70 + 3
    assert aligned(value, 2**10) == 2**70 + 2**10
    assert padding(value, 2**10) == 2**10 - 3


def test_negative_value_is_rejected() -> None:
    with pytest.raises(ValueError, match="padding for a negative value"):
        padding(-1, 8)
    with pytest.raises(ValueError, match="align a negative value"):
        aligned(-1, 8)


@pytest.mark.parametrize("alignment", [3, 6, 12, -8, 0])
def test_non_power_of_two_alignment_is_rejected(alignment: int) -> None:
    with pytest.raises(ValueError, match="not a power of 2"):
        padding(10, alignment)
    with pytest.raises(ValueError, match="not a power of 2"):
        aligned(10, alignment)


def test_negative_value_is_reported_before_bad_alignment() -> None:
    with pytest.raises(ValueError, match="negative value"):
        aligned(-5, 3)


@pytest.mark.parametrize(("value", "alignment"), [(1.5, 8), (10, 8.0), (True, 8)])
def test_non_integers_are_rejected(value: object, alignment: object) -> None:
    with pytest.raises(TypeError, match="requires integers"):
        padding(value, alignment)  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="requires integers"):
        aligned(value, alignment)  # type: ignore[arg-type]
