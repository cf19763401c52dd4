"""Integer problems: square roots, stairs, Pascal's triangle and 32-bit words."""

from __future__ import annotations

from itertools import pairwise

_UINT32_LIMIT = 2**32


def _check_uint32(n: int) -> None:
    if not 0 <= n < _UINT32_LIMIT:
        raise ValueError(f"not an unsigned 32-bit value: {n}")


def int_sqrt(x: int) -> int:
    """Floor of the square root of ``x``, found by binary search."""
    if x < 0:
        raise ValueError("square root of a negative number")
    lo, hi, root = 0, x, 0
    while lo <= hi:
        mid = (lo + hi) // 2
        if mid * mid <= x:
            root = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return root


def sqrt_newton(x: int) -> int:
    """Floor of the square root of ``x``, found by Newton's method."""
    if x < 0:
        raise ValueError("square root of a negative number")
    if x == 0:
        return 0
    guess = float(x)
    while True:
        improved = 0.5 * (guess + x / guess)
        if abs(guess - improved) <= 1e-6:
            break
        guess = improved
    return int(guess)


def climb_stairs(n: int) -> int:
    """Number of ways to climb ``n`` stairs taking one or two steps at a time."""
    if n < 1:
        raise ValueError("a staircase has at least one stair")
    one_back, two_back = 1, 1
    for _ in range(n - 1):
        one_back, two_back = one_back + two_back, one_back
    return one_back


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """The first ``num_rows`` rows of Pascal's triangle."""
    if num_rows < 0:
        raise ValueError("number of rows must not be negative")
    rows: list[list[int]] = []
    row = [1]
    for _ in range(num_rows):
        rows.append(row)
        row = [1, *(a + b for a, b in pairwise(row)), 1]
    return rows


def pascal_row(row_index: int) -> list[int]:
    """Row ``row_index`` (0-based) of Pascal's triangle, by the linear recurrence."""
    if row_index < 0:
        raise ValueError("row index must not be negative")
    row = [1]
    for i in range(1, row_index + 1):
        row.append(row[-1] * (row_index - i + 1) // i)
    return row


def reverse_bits(n: int) -> int:
    """Reverse the order of the bits of an unsigned 32-bit value."""
    _check_uint32(n)
    return int(f"{n:032b}"[::-1], 2)


def hamming_weight(n: int) -> int:
    """Number of set bits in an unsigned 32-bit value."""
    _check_uint32(n)
    return bin(n).count("1")