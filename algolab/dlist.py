"""A doubly linked list of integers with a bidirectional cursor."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO


class _Node:
    __slots__ = ("value", "next", "prev")

    def __init__(self, value: int) -> None:
        self.value = value
        self.next: _Node | None = None
        self.prev: _Node | None = None


class Cursor:
    """A position in a LinkedList; a cursor past either end holds no node."""

    __slots__ = ("_node",)

    def __init__(self, node: _Node | None = None) -> None:
        self._node = node

    def _require_node(self) -> _Node:
        if self._node is None:
            raise IndexError("cursor is outside the list")
        return self._node

    def value(self) -> int:
        """The value of the node under the cursor."""
        return self._require_node().value

    def advance(self) -> Cursor:
        """Move to the next node and return this cursor."""
        self._node = self._require_node().next
        return self

    def retreat(self) -> Cursor:
        """Move to the previous node and return this cursor."""
        self._node = self._require_node().prev
        return self

    def __add__(self, steps: int) -> Cursor:
        """A new cursor ``steps`` nodes further on (backwards if negative)."""
        moved = Cursor(self._node)
        for _ in range(abs(steps)):
            if steps > 0:
                moved.advance()
            else:
                moved.retreat()
        return moved

    def __sub__(self, steps: int) -> Cursor:
        """A new cursor ``steps`` nodes back (forwards if negative)."""
        return self + (-steps)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self._node is other._node

    __hash__ = None  # type: ignore[assignment]


class LinkedList:
    """Doubly linked list of integers."""

    def __init__(self, size: int = 0, fill: int = 0) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for _ in range(size):
            self.push_back(fill)

    def push_back(self, value: int) -> None:
        """Append ``value`` after the last node."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1

    def push_front(self, value: int) -> None:
        """Insert ``value`` before the first node."""
        node = _Node(value)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._size += 1

    def front(self) -> int:
        """The first value."""
        if self._head is None:
            raise IndexError("list is empty")
        return self._head.value

    def back(self) -> int:
        """The last value."""
        if self._tail is None:
            raise IndexError("list is empty")
        return self._tail.value

    def pop_back(self) -> int:
        """Remove and return the last value."""
        node = self._tail
        if node is None:
            raise IndexError("pop from an empty list")
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._size -= 1
        return node.value

    def pop_front(self) -> int:
        """Remove and return the first value."""
        node = self._head
        if node is None:
            raise IndexError("pop from an empty list")
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return node.value

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def _node_at(self, index: int) -> _Node:
        if not 0 <= index < self._size:
            raise IndexError("index out of range")
        node = self._head
        for _ in range(index):
            node = node.next  # type: ignore[union-attr]
        return node  # type: ignore[return-value]

    def __getitem__(self, index: int) -> int:
        return self._node_at(index).value

    def __setitem__(self, index: int, value: int) -> None:
        self._node_at(index).value = value

    def __mul__(self, other: object) -> LinkedList:
        """Element-wise product, as long as the shorter list."""
        if not isinstance(other, LinkedList):
            return NotImplemented
        return _from_values(a * b for a, b in zip(self, other))

    def __copy__(self) -> LinkedList:
        return _from_values(self)

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def first(self) -> Cursor:
        """Cursor on the first node."""
        return Cursor(self._head)

    def last(self) -> Cursor:
        """Cursor on the last node."""
        return Cursor(self._tail)

    def read_from(self, stream: TextIO) -> LinkedList:
        """Overwrite every value, in order, with integers read from ``stream``."""
        tokens = _tokens(stream)
        node = self._head
        while node is not None:
            try:
                token = next(tokens)
            except StopIteration:
                raise EOFError("not enough values in the input") from None
            node.value = int(token)
            node = node.next
        return self

    def __str__(self) -> str:
        body = "".join(f"{value} " for value in self)
        return f"\nElements of list\n{body}\nconclusion end\n"

    def __repr__(self) -> str:
        return f"LinkedList.of({list(self)!r})"


def _from_values(values: Iterable[int]) -> LinkedList:
    result = LinkedList()
    for value in values:
        result.push_back(value)
    return result


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Fill, copy, read and multiply lists, printing each one."""
    parser = argparse.ArgumentParser(description="Doubly linked list demonstration.")
    parser.add_argument("--seed", type=int)
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    list1 = LinkedList(10, 0)
    print(list1)
    for index in range(len(list1)):
        list1[index] = rng.randint(-50, 50)
    print(f"\n{list1}")
    list2 = list1.__copy__()
    print(f"\n{list2}")
    list2.push_back(0)
    list2.pop_back()
    print(f"\n{list2}")

    list3 = LinkedList(6)
    print("\nEnter element of list")
    try:
        list3.read_from(sys.stdin)
    except (EOFError, ValueError) as exc:
        parser.error(str(exc))
    print("\nEnter element stop")
    print(f"\n{list3}")
    list4 = list3 * list2
    print(f"\n{list4}")

    cursor, end = list1.first(), list1.last()
    parts = []
    while cursor != end:
        parts.append(f"{cursor.value()} ")
        cursor = cursor + 1
    print("".join(parts))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())