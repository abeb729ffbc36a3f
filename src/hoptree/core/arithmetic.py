"""Fixed-width unsigned arithmetic for inverse probability weights."""

from __future__ import annotations

from hoptree.core.errors import WeightOverflowError


def max_weight(bits: int) -> int:
    """Largest value representable by an unsigned integer of ``bits`` width."""
    return (1 << bits) - 1


def checked_multiply(value: int, factor: int, bits: int, *, target_distance: int) -> int:
    """
    Multiply two weights as a ``bits``-wide unsigned integer would.

    Python integers never wrap, so the exact product is compared against the
    width's maximum instead of detecting a wrapped result after the fact.

    Raises:
        WeightOverflowError: If the product does not fit in ``bits`` bits
    """
    product = value * factor
    if product > max_weight(bits):
        raise WeightOverflowError(target_distance, bits, value, factor)
    return product


__all__ = ["max_weight", "checked_multiply"]
