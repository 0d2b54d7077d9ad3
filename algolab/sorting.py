"""In-memory sorting algorithms: quick, merge, natural merge, Shell, counting, radix."""

from __future__ import annotations

import argparse
import itertools
import random
from collections.abc import Iterable, Iterator


def _merge(left: list, right: list) -> list:
    """Merge two sequences head by head, preferring the left one on ties."""
    result = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def _merge_in_place(values: list, low: int, mid: int, high: int) -> None:
    values[low : high + 1] = _merge(values[low : mid + 1], values[mid + 1 : high + 1])


def _run_end(values: list, start: int, limit: int) -> int:
    """Index of the last element of the non-decreasing run beginning at ``start``."""
    end = start
    while end < limit and values[end] <= values[end + 1]:
        end += 1
    return end


def hoare_quick_sort(items: Iterable) -> list:
    """Quick sort with the middle element as pivot and Hoare partitioning."""
    values = list(items)
    ranges = [(0, len(values) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low >= high:
            continue
        pivot = values[(low + high) // 2]
        i, j = low, high
        while i <= j:
            while values[i] < pivot:
                i += 1
            while values[j] > pivot:
                j -= 1
            if i <= j:
                values[i], values[j] = values[j], values[i]
                i += 1
                j -= 1
        ranges.append((i, high))
        ranges.append((low, j))
    return values


def lomuto_quick_sort(items: Iterable) -> list:
    """Quick sort with the last element as pivot and Lomuto partitioning."""
    values = list(items)
    ranges = [(0, len(values) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low >= high:
            continue
        pivot = values[high]
        j = low
        for i in range(low, high + 1):
            if values[i] <= pivot:
                values[i], values[j] = values[j], values[i]
                j += 1
        position = j - 1
        ranges.append((position + 1, high))
        ranges.append((low, position - 1))
    return values


def merge_sort(items: Iterable) -> list:
    """Top-down merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    middle = (len(values) - 1) // 2 + 1
    return _merge(merge_sort(values[:middle]), merge_sort(values[middle:]))


def natural_merge_passes(items: Iterable) -> Iterator[list]:
    """Natural merge sort that yields a snapshot of the data after each merge.

    Adjacent pairs of non-decreasing runs are merged until a single run remains.
    """
    values = list(items)
    n = len(values)
    while True:
        low = 0
        while low < n:
            mid = _run_end(values, low, n - 1)
            if mid == n - 1:
                break
            high = _run_end(values, mid + 1, n - 1)
            _merge_in_place(values, low, mid, high)
            yield list(values)
            low = high + 1
        if low == 0:
            return


def natural_merge_sort(items: Iterable) -> list:
    """Sort by natural merging of adjacent runs."""
    result = list(items)
    for snapshot in natural_merge_passes(result):
        result = snapshot
    return result


def simple_natural_merge_sort(items: Iterable) -> list:
    """Natural merge variant that merges each run with the rest of the data."""
    values = list(items)
    last = len(values) - 1
    done = False
    while not done:
        done = True
        start = 0
        while start < last:
            end = _run_end(values, start, last)
            if end < last:
                _merge_in_place(values, start, end, last)
                done = False
            start = end + 1
    return values


def shell_sort(items: Iterable) -> list:
    """Shell sort with the gap halved on every pass."""
    values = list(items)
    n = len(values)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            current = values[i]
            j = i
            while j >= gap and values[j - gap] > current:
                values[j] = values[j - gap]
                j -= gap
            values[j] = current
        gap //= 2
    return values


def counting_sort(items: Iterable[int]) -> list[int]:
    """Stable counting sort of non-negative integers."""
    values = list(items)
    if not values:
        return []
    if min(values) < 0:
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(values) + 1)
    for value in values:
        counts[value] += 1
    positions = list(itertools.accumulate(counts))
    output = [0] * len(values)
    for value in reversed(values):
        positions[value] -= 1
        output[positions[value]] = value
    return output


def radix_sort(items: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort, base 10, of non-negative integers."""
    values = list(items)
    if any(value < 0 for value in values):
        raise ValueError("radix sort needs non-negative integers")
    largest = max(values, default=0)
    digit = 1
    while True:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in values:
            buckets[(value // digit) % 10].append(value)
        values = [value for bucket in buckets for value in bucket]
        digit *= 10
        if digit > largest:
            return values


_METHODS = {
    1: ("Сортировка слиянием", simple_natural_merge_sort),
    2: ("Быстрая сортировка", lomuto_quick_sort),
    3: ("Сортировка подсчетом", counting_sort),
    4: ("Блочная сортировка", radix_sort),
}


def _format(values: Iterable) -> str:
    return " ".join(str(value) for value in values)


def main(argv: list[str] | None = None) -> int:
    """Sort random numbers with the method chosen by number (1-4)."""
    parser = argparse.ArgumentParser(description="Sort random numbers from 1 to 100.")
    parser.add_argument("method", nargs="?", type=int, help="1-4; asked for if omitted")
    parser.add_argument("--size", type=int, default=25)
    parser.add_argument("--seed", type=int)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    values = [rng.randint(1, 100) for _ in range(args.size)]
    print("Исходный массив: " + _format(values))

    method = args.method
    if method is None:
        answer = input("Введите номер сортировки:")
        try:
            method = int(answer)
        except ValueError:
            method = 0

    entry = _METHODS.get(method)
    if entry is not None:
        title, sort = entry
        print(title)
        print("Отсортированный массив: " + _format(sort(values)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())