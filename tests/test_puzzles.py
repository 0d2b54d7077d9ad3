import pytest

from algolab.puzzles import (
    fibonacci,
    hanoi_main,
    hanoi_moves,
    hanoi_states,
    queens_main,
    render_board,
    solve_queens,
    write_hanoi,
    write_queens,
)


def _no_attacks(queens):
    n = len(queens)
    return all(
        queens[r1] != queens[r2] and abs(queens[r1] - queens[r2]) != r2 - r1
        for r1 in range(n)
        for r2 in range(r1 + 1, n)
    )


def test_eight_queens_count():
    assert len(list(solve_queens(8))) == 92


def test_four_queens_solutions():
    assert list(solve_queens(4)) == [(1, 3, 0, 2), (2, 0, 3, 1)]


@pytest.mark.parametrize("size", range(1, 8))
def test_queens_are_valid_and_ordered(size):
    solutions = list(solve_queens(size))
    assert all(_no_attacks(q) for q in solutions)
    assert solutions == sorted(solutions)
    assert len(set(solutions)) == len(solutions)


def test_queens_negative_size():
    with pytest.raises(ValueError):
        list(solve_queens(-1))


def test_render_board():
    assert render_board((0,), 1) == "Q \n"
    lines = render_board((1, 3, 0, 2), 4).splitlines()
    assert len(lines) == 4
    assert [line.split().index("Q") for line in lines] == [1, 3, 0, 2]


def test_render_board_wrong_length():
    with pytest.raises(ValueError):
        render_board((0, 1), 3)


def test_write_queens(tmp_path):
    path = tmp_path / "queens.txt"
    count = write_queens(path, 4)
    text = path.read_text(encoding="utf-8")
    assert count == len(list(solve_queens(4)))
    assert text.count("Result #") == count
    assert text.endswith(f"Result #{count}\n\n")


@pytest.mark.parametrize("count", range(0, 7))
def test_hanoi_moves_are_legal(count):
    pegs = {1: list(range(count, 0, -1)), 2: [], 3: []}
    moves = list(hanoi_moves(count, 1, 3, 2))
    for source, target in moves:
        disk = pegs[source].pop()
        assert not pegs[target] or pegs[target][-1] > disk
        pegs[target].append(disk)
    assert pegs[3] == list(range(count, 0, -1))
    assert len(moves) == 2**count - 1


def test_hanoi_single_disk():
    assert list(hanoi_moves(1, 2, 1, 3)) == [(2, 1)]


def test_hanoi_negative():
    with pytest.raises(ValueError):
        list(hanoi_moves(-1))


def test_hanoi_states():
    states = list(hanoi_states(4))
    assert states[0] == (4, 0, 0)
    assert states[-1] == (0, 0, 4)
    assert all(sum(state) == 4 for state in states)
    assert len(states) == len(list(hanoi_moves(4))) + 1


def test_write_hanoi(tmp_path):
    moves_path = tmp_path / "moves.txt"
    states_path = tmp_path / "states.txt"
    moves = write_hanoi(3, moves_path, states_path)
    move_lines = moves_path.read_text(encoding="utf-8").splitlines()
    assert len(move_lines) == moves
    assert move_lines == [f"{a} -> {b}" for a, b in hanoi_moves(3)]
    states = states_path.read_text(encoding="utf-8")
    assert states.count("Итерация - ") == moves + 1
    assert states.startswith("Итерация - 1\n" + "|" * 3 + "\n\n\n")


def test_fibonacci_recurrence():
    assert fibonacci(1, 1, 0) == 1
    assert fibonacci(4, 9, 0) == 4
    assert fibonacci(4, 9, 1) == 9
    for k in range(10):
        assert fibonacci(1, 1, k + 2) == fibonacci(1, 1, k + 1) + fibonacci(1, 1, k)


def test_fibonacci_negative():
    with pytest.raises(ValueError):
        fibonacci(1, 1, -1)


def test_queens_main(tmp_path):
    path = tmp_path / "q.txt"
    assert queens_main(["--size", "5", "--output", str(path)]) == 0
    assert path.read_text(encoding="utf-8").count("Result #") == len(list(solve_queens(5)))


def test_hanoi_main(tmp_path, capsys):
    moves_path = tmp_path / "m.txt"
    states_path = tmp_path / "s.txt"
    assert hanoi_main(["2", "--moves", str(moves_path), "--states", str(states_path)]) == 0
    assert "File has been written" in capsys.readouterr().out
    assert len(moves_path.read_text(encoding="utf-8").splitlines()) == len(list(hanoi_moves(2)))