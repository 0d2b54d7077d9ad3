"""Basic containers: a linked stack, an array-backed queue and a singly linked list."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Stack:
    """Last-in, first-out stack."""

    _items: list[Any] = field(default_factory=list, init=False, repr=False)

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def drain(self) -> list[Any]:
        """Pop every value, returning them from the top down."""
        values = []
        while self._items:
            values.append(self.pop())
        return values

    def __len__(self) -> int:
        return len(self._items)


class ArrayQueue:
    """First-in, first-out queue over a fixed array of ``capacity`` slots.

    Slots are never reused, so at most ``capacity`` values can ever be pushed.
    """

    def __init__(self, capacity: int = 1000) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._slots: list[Any] = [None] * capacity
        self._head = 0
        self._tail = 0

    def push(self, value: Any) -> None:
        """Append ``value`` at the tail."""
        if self._tail >= len(self._slots):
            raise OverflowError("queue capacity exhausted")
        self._slots[self._tail] = value
        self._tail += 1

    def pop(self) -> Any:
        """Remove and return the value at the head."""
        if self.is_empty():
            raise IndexError("pop from an empty queue")
        self._head += 1
        return self._slots[self._head - 1]

    def is_empty(self) -> bool:
        return self._head == self._tail


@dataclass
class _Node:
    value: Any
    next: _Node | None = None


@dataclass
class SinglyLinkedList:
    """Singly linked list that grows at the back."""

    _first: _Node | None = field(default=None, init=False, repr=False)
    _last: _Node | None = field(default=None, init=False, repr=False)

    def push_back(self, value: Any) -> None:
        node = _Node(value)
        if self._last is None:
            self._first = self._last = node
        else:
            self._last.next = node
            self._last = node

    def is_empty(self) -> bool:
        return self._first is None

    def __iter__(self) -> Iterator[Any]:
        node = self._first
        while node is not None:
            yield node.value
            node = node.next

    def describe(self) -> str:
        """The values separated by spaces; empty for an empty list."""
        return " ".join(str(value) for value in self)


def _stack_demo() -> None:
    stack = Stack()
    for value in (2, 4, 3):
        stack.push(value)
    stack.pop()
    stack.push(1)
    values = stack.drain()
    print("".join(f"{value} " for value in values) if values else "стек пуст")


def _queue_demo() -> None:
    queue = ArrayQueue()
    for value in range(1, 9):
        queue.push(value)
    values = []
    while not queue.is_empty():
        values.append(queue.pop())
    print("".join(f"{value} " for value in values))


def _list_demo() -> None:
    items = SinglyLinkedList()
    print(int(items.is_empty()))
    for value in ("3", "123", "8"):
        items.push_back(value)
    print(int(items.is_empty()))
    if not items.is_empty():
        print(items.describe() + " ")


_DEMOS = {"stack": _stack_demo, "queue": _queue_demo, "list": _list_demo}


def main(argv: list[str] | None = None) -> int:
    """Show the stack, the queue and the linked list at work."""
    parser = argparse.ArgumentParser(description="Basic container demonstrations.")
    parser.add_argument("demo", nargs="?", choices=[*_DEMOS, "all"], default="all")
    args = parser.parse_args(argv)
    chosen = _DEMOS.values() if args.demo == "all" else [_DEMOS[args.demo]]
    for run in chosen:
        run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())