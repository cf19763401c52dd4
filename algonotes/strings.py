"""String and digit problems: reversal, palindromes, Roman numerals and more."""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from itertools import zip_longest

INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

_BRACKET_PAIRS = {"(": ")", "{": "}", "[": "]"}


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign.

    Returns 0 when the reversed value falls outside the signed 32-bit range.
    """
    magnitude = int(str(abs(x))[::-1])
    result = -magnitude if x < 0 else magnitude
    if not INT32_MIN <= result <= INT32_MAX:
        return 0
    return result


def is_palindrome_number(x: int) -> bool:
    """Tell whether ``x`` reads the same forwards and backwards; negatives never do."""
    text = str(x)
    return text == text[::-1]


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer.

    A symbol smaller than the one after it is subtracted. Raises ValueError
    for characters that are not Roman numerals.
    """
    try:
        values = [_ROMAN_VALUES[symbol] for symbol in s]
    except KeyError as exc:
        raise ValueError(f"not a Roman numeral symbol: {exc.args[0]!r}") from None
    return sum(
        -value if value < following else value
        for value, following in zip_longest(values, values[1:], fillvalue=0)
    )


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string; empty for no strings."""
    if not strs:
        return ""
    prefix: list[str] = []
    for column in zip(*strs):
        first = column[0]
        if any(ch != first for ch in column):
            break
        prefix.append(first)
    return "".join(prefix)


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed by its match in the right order.

    Any character that is not an opening bracket is treated as a closing one.
    """
    expected: list[str] = []
    for ch in s:
        closer = _BRACKET_PAIRS.get(ch)
        if closer is not None:
            expected.append(closer)
        elif not expected or expected.pop() != ch:
            return False
    return not expected


def length_of_last_word(s: str) -> int:
    """Length of the last run of non-space characters in ``s``; 0 if there is none."""
    return len(s.rstrip(" ").rpartition(" ")[2])


def add_binary(a: str, b: str) -> str:
    """Add two binary numbers given as strings and return their sum as a string.

    Raises ValueError if either string holds anything but '0' and '1'.
    """
    for operand in (a, b):
        if set(operand) - {"0", "1"}:
            raise ValueError(f"not a binary number: {operand!r}")
    longer, shorter = (a, b) if len(a) >= len(b) else (b, a)
    digits: list[str] = []
    carry = 0
    for x, y in zip_longest(reversed(longer), reversed(shorter), fillvalue="0"):
        carry += (x == "1") + (y == "1")
        digits.append("1" if carry % 2 else "0")
        carry //= 2
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def is_alnum_palindrome(s: str) -> bool:
    """Tell whether the ASCII letters and digits of ``s`` form a palindrome, ignoring case."""
    kept = [ch.lower() for ch in s if ch.isascii() and ch.isalnum()]
    return kept == kept[::-1]


def column_title(number: int) -> str:
    """Spreadsheet column title for a 1-based column number; 0 gives an empty title."""
    if number < 0:
        raise ValueError("column number must not be negative")
    letters: list[str] = []
    while number:
        number, remainder = divmod(number - 1, 26)
        letters.append(chr(ord("A") + remainder))
    return "".join(reversed(letters))


def column_number(title: str) -> int:
    """1-based column number for a spreadsheet column title of capital letters."""
    if not all("A" <= ch <= "Z" for ch in title):
        raise ValueError(f"not a column title: {title!r}")
    return reduce(lambda total, ch: total * 26 + ord(ch) - ord("A") + 1, title, 0)