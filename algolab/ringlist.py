"""A circular doubly linked list of integers that can be saved to a file."""

from __future__ import annotations

import argparse
import os
from collections.abc import Iterable, Iterator

DEFAULT_FILE = "DoubleLists.txt"
EMPTY_MESSAGE = "Список пуст"


class CircularList:
    """Integers in a ring, read starting from the head."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = list(values)

    def insert(self, value: int, position: int) -> None:
        """Insert ``value`` before the node ``position`` steps past the head.

        Landing on the head (including any position of zero or less) puts the
        value just before it, that is at the end of the ring.
        """
        n = len(self._items)
        index = position % n if n and position > 0 else 0
        if index == 0:
            self._items.append(value)
        else:
            self._items.insert(index, value)

    def delete(self, position: int) -> int:
        """Remove and return the node at the 1-based ``position`` around the ring.

        Positions below 1 remove the head.
        """
        if not self._items:
            raise IndexError("list is empty")
        index = max(position - 1, 0) % len(self._items)
        return self._items.pop(index)

    def clear(self) -> None:
        """Remove every node."""
        self._items.clear()

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def describe(self) -> str:
        """The elements in order, or a note that the list is empty."""
        if not self._items:
            return EMPTY_MESSAGE
        return "Элементы списка: " + "".join(f"{value} " for value in self._items)

    def save(self, path: str | os.PathLike) -> None:
        """Write the elements, space-separated, to ``path``."""
        with open(path, "w", encoding="utf-8") as out:
            if self._items:
                out.write("".join(f"{value} " for value in self._items) + "\n\n")
            else:
                out.write(f"\n{EMPTY_MESSAGE}\n\n")

    @classmethod
    def load(cls, path: str | os.PathLike) -> CircularList:
        """Read the leading integers of ``path``; a missing file gives an empty list."""
        result = cls()
        try:
            with open(path, encoding="utf-8") as source:
                tokens = source.read().split()
        except FileNotFoundError:
            return result
        for position, token in enumerate(tokens):
            try:
                value = int(token)
            except ValueError:
                break
            result.insert(value, position)
        return result


def _show(ring: CircularList) -> None:
    print(f"\n{ring.describe()}\n")


def main(argv: list[str] | None = None) -> int:
    """Build a list, change it, save it, clear it and restore it from the file."""
    parser = argparse.ArgumentParser(description="Circular list demonstration.")
    parser.add_argument("--file", default=DEFAULT_FILE)
    args = parser.parse_args(argv)

    ring = CircularList()
    for value in range(4):
        ring.insert(value, value)
        _show(ring)
    ring.delete(0)
    print("\nЭлемент удален...\n")
    ring.save(args.file)
    _show(ring)
    ring.clear()
    print("\nСписок удален...\n")
    _show(ring)
    ring = CircularList.load(args.file)
    print("\nСписок добавлен из файла...\n")
    _show(ring)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())