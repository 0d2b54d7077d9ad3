"""Substring search: Boyer-Moore (bad-character rule) and Knuth-Morris-Pratt."""

from __future__ import annotations

import argparse

DEFAULT_TEXT = "abacadabrabracabracadabrabrabracad"
DEFAULT_BM_PATTERN = "ab"
DEFAULT_KMP_PATTERN = "abracadabra"


def bad_character_shifts(pattern: str) -> dict[str, int]:
    """Return the bad-character shift for every character of the pattern but the last.

    Characters missing from the mapping shift by the full pattern length.
    """
    m = len(pattern)
    return {ch: m - i - 1 for i, ch in enumerate(pattern[:-1])}


def boyer_moore(text: str, pattern: str) -> list[int]:
    """Return the start positions of every occurrence of ``pattern`` in ``text``."""
    m = len(pattern)
    if m == 0:
        raise ValueError("pattern must not be empty")
    shifts = bad_character_shifts(pattern)
    found: list[int] = []
    n = len(text)
    i = j = m - 1
    while i < n:
        if text[i] == pattern[j]:
            if j == 0:
                found.append(i)
                i += m
                j = m - 1
            else:
                i -= 1
                j -= 1
        else:
            i += max(shifts.get(text[i], m), m - j)
            j = m - 1
    return found


def prefix_function(pattern: str) -> list[int]:
    """Return the prefix function (failure table) of ``pattern``."""
    prefix = [0] * len(pattern)
    k = 0
    for i, ch in enumerate(pattern[1:], start=1):
        while k > 0 and pattern[k] != ch:
            k = prefix[k - 1]
        if pattern[k] == ch:
            k += 1
        prefix[i] = k
    return prefix


def kmp_search(text: str, pattern: str) -> list[int]:
    """Return the start positions of every occurrence of ``pattern`` in ``text``."""
    m = len(pattern)
    if m == 0:
        raise ValueError("pattern must not be empty")
    prefix = prefix_function(pattern)
    found: list[int] = []
    q = 0
    for i, ch in enumerate(text):
        while q > 0 and pattern[q] != ch:
            q = prefix[q - 1]
        if pattern[q] == ch:
            q += 1
        if q == m:
            found.append(i - m + 1)
            q = prefix[q - 1]
    return found


_ALGORITHMS = {
    "boyer-moore": (boyer_moore, DEFAULT_BM_PATTERN),
    "kmp": (kmp_search, DEFAULT_KMP_PATTERN),
}


def main(argv: list[str] | None = None) -> int:
    """Search a pattern in a text and print every position found."""
    parser = argparse.ArgumentParser(description="Find every occurrence of a pattern.")
    parser.add_argument("--algorithm", choices=sorted(_ALGORITHMS), default="boyer-moore")
    parser.add_argument("text", nargs="?", default=DEFAULT_TEXT)
    parser.add_argument("pattern", nargs="?")
    args = parser.parse_args(argv)

    search, default_pattern = _ALGORITHMS[args.algorithm]
    pattern = default_pattern if args.pattern is None else args.pattern

    print(f"Исходная строка: {args.text}")
    print(f"Исходная строка: {pattern}")
    try:
        positions = search(args.text, pattern)
    except ValueError as exc:
        parser.error(str(exc))
    for position in positions:
        print(f"Найдено вхождение шаблона на позиции {position}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())