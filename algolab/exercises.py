"""Small warm-up exercises: a linear function and a few integer matrices."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from dataclasses import dataclass


def _number(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True)
class LinearFunction:
    """The function x -> first * x + second."""

    first: float
    second: float

    def __call__(self, x: float) -> float:
        return self.first * x + self.second

    def describe(self, x: float) -> str:
        """Show the evaluation at ``x`` as an equation."""
        return (
            f"{_number(self.first)} * {_number(x)} + {_number(self.second)}"
            f" = {_number(self(x))}"
        )


def lower_triangle(n: int) -> list[list[int]]:
    """Square matrix with i - j + 1 on and below the diagonal and 0 above it."""
    return [[row - col + 1 if row >= col else 0 for col in range(n)] for row in range(n)]


def shifted_rows(n: int) -> list[list[int]]:
    """Rows read as sliding windows over the sequence n, n-1, ..., 1, 0, 0, ...

    Each row starts one place earlier in the sequence than the one above it.
    """
    sequence = [max(n - i + 1, 0) for i in range(1, 2 * n)]
    return [sequence[n - 1 - row : 2 * n - 1 - row] for row in range(n)]


def random_matrix(
    rows: int,
    columns: int,
    low: int = 10,
    high: int = 100,
    rng: random.Random | None = None,
) -> list[list[int]]:
    """Matrix of random integers from ``low`` to ``high`` inclusive."""
    rng = rng or random.Random()
    return [[rng.randint(low, high) for _ in range(columns)] for _ in range(rows)]


def drop_column(matrix: Sequence[Sequence[int]], index: int) -> list[list[int]]:
    """Copy of the matrix without the column at ``index``."""
    result = []
    for row in matrix:
        if not 0 <= index < len(row):
            raise IndexError(f"column {index} out of range")
        result.append([value for col, value in enumerate(row) if col != index])
    return result


def format_matrix(matrix: Sequence[Sequence[int]], separator: str = " ") -> str:
    """Every value followed by ``separator``, one line per row."""
    return "".join("".join(f"{value}{separator}" for value in row) + "\n" for row in matrix)


_EXERCISES = ("linear", "triangle", "shifted", "matrix")


def _exercise_text(name: str, rng: random.Random) -> str:
    """Build the full output of the named exercise."""
    match name:
        case "linear":
            return LinearFunction(3, 4).describe(5) + "\n"
        case "triangle":
            return format_matrix(lower_triangle(5), " ")
        case "shifted":
            return format_matrix(shifted_rows(10), " ")
        case "matrix":
            first = random_matrix(5, 6, 10, 100, rng)
            return (
                "Первый двумерный массив:\n"
                + format_matrix(first, "\t")
                + "\nВторой двумерный массив:\n"
                + format_matrix(drop_column(first, 4), "\t")
            )
        case _:
            raise ValueError(f"unknown exercise: {name}")


def main(argv: list[str] | None = None) -> int:
    """Run one exercise, or all of them, and print the result."""
    parser = argparse.ArgumentParser(description="Run the warm-up exercises.")
    parser.add_argument("exercise", nargs="?", choices=[*_EXERCISES, "all"], default="all")
    parser.add_argument("--seed", type=int)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    chosen = _EXERCISES if args.exercise == "all" else (args.exercise,)
    for name in chosen:
        print(_exercise_text(name, rng), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())