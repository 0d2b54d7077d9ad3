"""Polyphase merge sort over three tapes sized by Fibonacci numbers."""

from __future__ import annotations

import argparse
import heapq
import os
import random
from collections.abc import Iterable

DEFAULT_INPUT = "F1.txt"
DEFAULT_OUTPUT = "F2.txt"


def split_runs(values: Iterable[int]) -> list[list[int]]:
    """Split the values into maximal non-decreasing runs, in order."""
    runs: list[list[int]] = []
    for value in values:
        if runs and value >= runs[-1][-1]:
            runs[-1].append(value)
        else:
            runs.append([value])
    return runs


def fibonacci_pair(limit: int) -> tuple[int, int]:
    """Return the first pair of consecutive Fibonacci numbers whose sum reaches ``limit``.

    The search starts from the pair (0, 1).
    """
    smaller, bigger = 0, 1
    while smaller + bigger < limit:
        smaller, bigger = bigger, smaller + bigger
    return smaller, bigger


def polyphase_sort(values: Iterable[int]) -> list[int]:
    """Sort the values by polyphase merging of their natural runs.

    The runs are spread over two tapes in Fibonacci proportion (missing runs
    are empty dummy runs); each phase merges the tail of the larger tape with
    the smaller tape onto the third one, until a single run is left.
    """
    values = list(values)
    if not values:
        return []
    runs = iter(split_runs(values))
    smaller_count, bigger_count = fibonacci_pair(len(values))
    bigger = [next(runs, []) for _ in range(bigger_count)]
    smaller = [next(runs, []) for _ in range(smaller_count)]
    total = bigger_count + smaller_count

    while total > 1:
        keep = len(bigger) - len(smaller)
        merged = [
            list(heapq.merge(left, right))
            for left, right in zip(reversed(bigger[keep:]), reversed(smaller))
        ]
        total -= len(smaller)
        bigger, smaller = merged, bigger[:keep]

    return bigger[0]


def _read_numbers(path: str | os.PathLike) -> list[int]:
    with open(path, encoding="utf-8") as source:
        return [int(token) for token in source.read().split()]


def sort_file(source: str | os.PathLike, destination: str | os.PathLike) -> list[int]:
    """Sort the whitespace-separated integers of ``source`` into ``destination``.

    The result is written space-separated and is also returned.
    """
    values = _read_numbers(source)
    if not values:
        raise ValueError(f"no numbers in {os.fspath(source)!r}")
    result = polyphase_sort(values)
    with open(destination, "w", encoding="utf-8") as out:
        out.write(" ".join(str(value) for value in result))
    return result


def _ask_count() -> int:
    while True:
        answer = input("Введите количество элементов массива\n")
        try:
            count = int(answer)
        except ValueError:
            continue
        if count > 1:
            return count


def main(argv: list[str] | None = None) -> int:
    """Generate random numbers into a file and sort them into another file."""
    parser = argparse.ArgumentParser(description="Polyphase merge sort of random numbers.")
    parser.add_argument("--count", type=int, help="number of elements (more than 1)")
    parser.add_argument("--seed", type=int)
    parser.add_argument("--input", default=DEFAULT_INPUT)
    parser.add_argument("--output", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    print("Режим генерации случайных элементов")
    if args.count is None:
        count = _ask_count()
    elif args.count <= 1:
        parser.error("count must be greater than 1")
    else:
        count = args.count

    rng = random.Random(args.seed)
    values = [rng.randrange(100) for _ in range(count)]
    print(" ".join(str(value) for value in values) + " ")
    with open(args.input, "w", encoding="utf-8") as out:
        out.write("".join(f"{value} " for value in values))

    print("Начало сортировки!")
    result = sort_file(args.input, args.output)
    print(" ".join(str(value) for value in result))

    print()
    print("Результат сортировки:")
    print()
    print(" ".join(str(value) for value in _read_numbers(args.output)) + " ")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())