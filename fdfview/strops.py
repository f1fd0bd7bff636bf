"""String helpers: splitting, slicing, trimming, searching and comparing."""

from __future__ import annotations

from itertools import islice, zip_longest


def _single_char(sep: str) -> str:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return sep


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    return [word for word in text.split(_single_char(sep)) if word]


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from index ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0:
        raise ValueError("start must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the index of the first occurrence, 0 for an empty needle,
    or None when there is no occurrence that fits in the searched span.
    """
    if not needle:
        return 0
    if length < 0:
        raise ValueError("length must not be negative")
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b``.

    Returns the difference of the first differing character codes, or 0
    when the compared parts are equal. Comparison stops at the end of both
    strings, a shorter string comparing as if padded with NUL characters.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for ca, cb in islice(zip_longest(a, b, fillvalue="\0"), n):
        if ca != cb:
            return ord(ca) - ord(cb)
        if ca == "\0":
            break
    return 0