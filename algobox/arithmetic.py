"""Small integer routines: HCF, Fibonacci, powers, swaps, character codes."""

from __future__ import annotations

import math


def hcf(a: int, b: int) -> int:
    """Return the highest common factor of ``a`` and ``b``; 0 if either is 0."""
    if a < 0 or b < 0:
        raise ValueError("hcf needs non-negative integers")
    if a == 0 or b == 0:
        return 0
    return math.gcd(a, b)


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number; any ``n`` <= 1 is returned as is."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def power(x: int, y: int) -> int:
    """Return ``x`` raised to the non-negative integer ``y`` by repeated squaring."""
    if y < 0:
        raise ValueError("exponent must not be negative")
    result = 1
    base = x
    while y:
        if y % 2:
            result *= base
        base *= base
        y //= 2
    return result


def swap_with_temp(a, b):
    """Return the pair with its two values exchanged, via a temporary."""
    temp = a
    a = b
    b = temp
    return a, b


def swap_without_temp(a: int, b: int) -> tuple[int, int]:
    """Return the pair exchanged using only addition and subtraction."""
    a = a + b
    b = a - b
    a = a - b
    return a, b


def ascii_value(char: str) -> int:
    """Return the code point of a single character."""
    if len(char) != 1:
        raise ValueError("expected exactly one character")
    return ord(char)