"""Searching sorted and unsorted integer sequences: linear, binary, interpolation."""

from __future__ import annotations

import argparse
from collections.abc import Sequence


def linear_search(items: Sequence[int], target: int) -> int | None:
    """Return the index of the first element equal to ``target``, or None."""
    for index, value in enumerate(items):
        if value == target:
            return index
    return None


def binary_search(items: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in the ascending ``items``, or None."""
    left, right = 0, len(items) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if items[mid] == target:
            return mid
        if items[mid] > target:
            right = mid - 1
        else:
            left = mid + 1
    return None


def interpolation_search(items: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in the ascending ``items``, or None.

    The probe position is estimated by linear interpolation between the bounds.
    """
    low, high = 0, len(items) - 1
    while low <= high and items[low] <= target <= items[high]:
        span = items[high] - items[low]
        if span == 0:
            return low
        pos = low + (target - items[low]) * (high - low) // span
        if items[pos] == target:
            return pos
        if items[pos] > target:
            high = pos - 1
        else:
            low = pos + 1
    return None


_DEMOS = {
    "linear": (linear_search, [12, 34, 54, 2, 3], 2),
    "binary": (binary_search, [2, 3, 12, 34, 54], 54),
    "interpolation": (interpolation_search, [2, 3, 12, 34, 54], 12),
}


def main(argv: list[str] | None = None) -> int:
    """Search a value in a list of integers and report its index."""
    parser = argparse.ArgumentParser(description="Find a value in a list of integers.")
    parser.add_argument("algorithm", nargs="?", choices=sorted(_DEMOS), default="linear")
    parser.add_argument("--target", type=int)
    parser.add_argument("values", nargs="*", type=int)
    args = parser.parse_args(argv)

    search, default_values, default_target = _DEMOS[args.algorithm]
    values = args.values or default_values
    target = default_target if args.target is None else args.target

    print("Массив: " + "".join(f"{value} " for value in values))
    print(f"Значение: {target}")
    index = search(values, target)
    if index is None:
        print(f"Элемент {target} не найден в массиве")
    else:
        print(f"Элемент {target} найден по индексу {index}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())