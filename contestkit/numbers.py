"""Small number-theory and geometry puzzles."""

from __future__ import annotations

import math


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def split_three(n: int) -> tuple[int, int, int]:
    """Split ``n`` into three parts, the first two equal and not divisible by 3."""
    part = _trunc_div(n, 3)
    if part % 3 == 0:
        part += 1
    return part, part, n - 2 * part


def split_not_divisible(n: int) -> tuple[int, int, int]:
    """Split ``n`` into three parts of which none is divisible by 3."""
    if n % 3 == 0:
        return 1, 1, n - 2
    return 1, 2, n - 3


def next_same_ones(n: int) -> int:
    """Smallest number above ``n`` with as many one bits as ``n``."""
    if n <= 0:
        raise ValueError(f"need a positive number, got {n}")
    bits = [int(bit) for bit in reversed(format(n, "b"))]
    ones = sum(bits)
    j = bits.index(1)
    while j < len(bits) and bits[j] == 1:
        bits[j] = 0
        j += 1
    if j == len(bits):
        bits.append(1)
    else:
        bits[j] = 1
    missing = ones - sum(bits)
    bits[:missing] = [1] * missing
    return sum(bit << position for position, bit in enumerate(bits))


def _next_permutation(items: list[int]) -> None:
    pivot = next(
        (i for i in range(len(items) - 2, -1, -1) if items[i] < items[i + 1]),
        None,
    )
    if pivot is None:
        items.reverse()
        return
    swap = next(
        i for i in range(len(items) - 1, pivot, -1) if items[i] > items[pivot]
    )
    items[pivot], items[swap] = items[swap], items[pivot]
    items[pivot + 1:] = reversed(items[pivot + 1:])


def next_binary_permutation(n: int) -> int:
    """Next permutation of the binary digits of ``n`` with a leading zero."""
    if n < 0:
        raise ValueError(f"need a non-negative number, got {n}")
    digits = [0] + [int(bit) for bit in format(n, "b")]
    _next_permutation(digits)
    return int("".join(map(str, digits)), 2)


def _reverse_digits(n: int) -> int:
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def reverse_sum(a: int, b: int) -> int:
    """Reverse both numbers, add them, and reverse the sum."""
    return _reverse_digits(_reverse_digits(a) + _reverse_digits(b))


def is_right_triangle(a: int, b: int, c: int) -> bool:
    """Whether the three side lengths form a right triangle."""
    short, middle, longest = sorted((a, b, c))
    return longest * longest == middle * middle + short * short


def parallelogram(
    ax: int, ay: int, bx: int, by: int, cx: int, cy: int
) -> tuple[int, int, int]:
    """Fourth corner ``D`` of parallelogram ABCD and its area.

    Returns ``(dx, dy, area)``.
    """
    dx = ax + cx - bx
    dy = ay + cy - by
    twice = (ax * by + bx * cy + cx * dy + dx * ay) - (
        ay * bx + by * cx + cy * dx + dy * ax
    )
    return dx, dy, abs(_trunc_div(twice, 2))


def frustum_volume(
    big_radius: int, small_radius: int, height: int, level: int
) -> float:
    """Volume of water filling a frustum-shaped cup to ``level``.

    The cup has bottom radius ``small_radius``, top radius ``big_radius``
    and full height ``height``.
    """
    top = (big_radius - small_radius) * level / height + small_radius
    return (
        math.pi
        * level
        / 3
        * (top * top + top * small_radius + small_radius * small_radius)
    )


def plus_minus(n: int, m: int) -> int:
    """Sum of a sequence of ``n`` numbers whose sign flips every ``m`` terms."""
    return _trunc_div(m * n, 2)


def primes_below(limit: int) -> list[int]:
    """All primes smaller than ``limit``, by the sieve of Eratosthenes."""
    if limit <= 2:
        return []
    composite = bytearray(limit + 1)
    for i in range(2, math.isqrt(limit) + 1):
        if not composite[i]:
            composite[i * i::i] = b"\x01" * len(range(i * i, limit + 1, i))
    return [i for i in range(2, limit) if not composite[i]]


def count_binary_strings(length: int, last_digit: int) -> int:
    """Count binary strings of ``length`` digits with no two adjacent ones.

    ``last_digit`` is the digit placed just before the string; when it is a
    one the string may not start with a one.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if length == 0:
        return 0
    after_zero, after_one = 2, 1
    for _ in range(length - 1):
        after_zero, after_one = after_zero + after_one, after_zero
    return after_one if last_digit else after_zero