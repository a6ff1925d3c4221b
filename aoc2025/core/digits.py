"""Base-10 digit helpers for product IDs."""

from __future__ import annotations

from .model import ProductId


def digit_count(n: ProductId) -> int:
    """Number of decimal digits in ``n`` (``0`` counts as one digit)."""
    count = 1
    while n >= 10:
        n //= 10
        count += 1
    return count


def window(n: ProductId, right_offset: int, length: int) -> int:
    """Return the ``length``-digit slice of ``n`` that starts ``right_offset``
    digits from the least-significant end.

    >>> window(123456, 0, 3)
    456
    >>> window(123456, 3, 3)
    123
    """
    if right_offset + length > digit_count(n):
        raise ValueError(
            f"window of {length} digits at offset {right_offset} exceeds {n}"
        )
    return (n // 10 ** right_offset) % 10 ** length


def halves_match(n: ProductId) -> bool:
    """True when ``n`` has an even digit count and both halves are equal."""
    length = digit_count(n)
    if length % 2 != 0:
        return False
    mid = length // 2
    return window(n, mid, mid) == window(n, 0, mid)


def _is_repeated_block(n: ProductId, length: int, width: int) -> bool:
    if length % width != 0:
        return False
    block = window(n, 0, width)
    return all(
        window(n, offset, width) == block
        for offset in range(width, length, width)
    )


def is_repeated_pattern(n: ProductId) -> bool:
    """True when ``n`` is some shorter block of digits repeated at least twice."""
    length = digit_count(n)
    return any(
        _is_repeated_block(n, length, width)
        for width in range(length // 2, 0, -1)
    )
