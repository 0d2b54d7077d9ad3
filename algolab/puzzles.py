"""Classic recursion puzzles: N queens, towers of Hanoi and Fibonacci numbers."""

from __future__ import annotations

import argparse
import os
from collections.abc import Iterator, Sequence

DEFAULT_QUEENS_FILE = "EightQueens.txt"
DEFAULT_MOVES_FILE = "HanoiTower1.txt"
DEFAULT_STATES_FILE = "HanoiTower2.txt"


def solve_queens(size: int = 8) -> Iterator[tuple[int, ...]]:
    """Yield every placement of ``size`` non-attacking queens.

    A solution gives the queen's column for each row; solutions come in
    lexicographic order of those columns.
    """
    if size < 0:
        raise ValueError("board size must not be negative")
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()
    placed: list[int] = []

    def place(row: int) -> Iterator[tuple[int, ...]]:
        if row == size:
            yield tuple(placed)
            return
        for col in range(size):
            if col in columns or row - col in diagonals or row + col in anti_diagonals:
                continue
            columns.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            placed.append(col)
            yield from place(row + 1)
            placed.pop()
            columns.discard(col)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)

    yield from place(0)


def render_board(queens: Sequence[int], size: int) -> str:
    """Draw a board with ``Q`` for queens and ``.`` for empty squares."""
    if len(queens) != size:
        raise ValueError("one queen per row is required")
    return "".join(
        "".join("Q " if queens[row] == col else ". " for col in range(size)) + "\n"
        for row in range(size)
    )


def write_queens(path: str | os.PathLike = DEFAULT_QUEENS_FILE, size: int = 8) -> int:
    """Write every solution to ``path`` and return how many there are."""
    count = 0
    with open(path, "w", encoding="utf-8") as out:
        for count, queens in enumerate(solve_queens(size), start=1):
            out.write(render_board(queens, size))
            out.write(f"Result #{count}\n\n")
    return count


def hanoi_moves(
    count: int, source: int = 1, target: int = 3, spare: int = 2
) -> Iterator[tuple[int, int]]:
    """Yield the (from, to) moves that carry ``count`` disks from source to target."""
    if count < 0:
        raise ValueError("disk count must not be negative")
    if count == 0:
        return
    yield from hanoi_moves(count - 1, source, spare, target)
    yield source, target
    yield from hanoi_moves(count - 1, spare, target, source)


def hanoi_states(count: int) -> Iterator[tuple[int, int, int]]:
    """Yield the disk count on each of the three pegs, before and after every move."""
    heights = [count, 0, 0]
    yield tuple(heights)
    for source, target in hanoi_moves(count, 1, 3, 2):
        heights[source - 1] -= 1
        heights[target - 1] += 1
        yield tuple(heights)


def write_hanoi(
    count: int,
    moves_path: str | os.PathLike = DEFAULT_MOVES_FILE,
    states_path: str | os.PathLike = DEFAULT_STATES_FILE,
) -> int:
    """Write the moves and the peg states to two files; return the number of moves."""
    moves = 0
    with open(moves_path, "w", encoding="utf-8") as out:
        for source, target in hanoi_moves(count, 1, 3, 2):
            out.write(f"{source} -> {target}\n")
            moves += 1
    with open(states_path, "w", encoding="utf-8") as out:
        for iteration, heights in enumerate(hanoi_states(count), start=1):
            out.write(f"Итерация - {iteration}\n")
            out.write("\n".join("|" * height for height in heights))
            out.write("\n===================\n")
    return moves


def fibonacci(a: int = 1, b: int = 1, count: int = 5) -> int:
    """Step the pair (a, b) to (b, a + b) ``count`` times and return the first element."""
    if count < 0:
        raise ValueError("count must not be negative")
    for _ in range(count):
        a, b = b, a + b
    return a


def queens_main(argv: list[str] | None = None) -> int:
    """Write all solutions of the queens puzzle to a file."""
    parser = argparse.ArgumentParser(description="Solve the N queens puzzle.")
    parser.add_argument("--size", type=int, default=8)
    parser.add_argument("--output", default=DEFAULT_QUEENS_FILE)
    args = parser.parse_args(argv)
    try:
        write_queens(args.output, args.size)
    except ValueError as exc:
        parser.error(str(exc))
    return 0


def hanoi_main(argv: list[str] | None = None) -> int:
    """Write the moves and states of the towers of Hanoi to two files."""
    parser = argparse.ArgumentParser(description="Solve the towers of Hanoi.")
    parser.add_argument("count", nargs="?", type=int, help="number of disks; asked for if omitted")
    parser.add_argument("--moves", default=DEFAULT_MOVES_FILE)
    parser.add_argument("--states", default=DEFAULT_STATES_FILE)
    args = parser.parse_args(argv)

    count = args.count
    if count is None:
        print("Количество дисков:")
        try:
            count = int(input())
        except ValueError:
            parser.error("disk count must be an integer")
    try:
        write_hanoi(count, args.moves, args.states)
    except ValueError as exc:
        parser.error(str(exc))
    print("File has been written")
    return 0


if __name__ == "__main__":
    raise SystemExit(queens_main())