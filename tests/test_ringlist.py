import pytest

from algolab.ringlist import EMPTY_MESSAGE, CircularList, main


def build_demo():
    ring = CircularList()
    for value in range(4):
        ring.insert(value, value)
    return ring


def test_demo_inserts_append():
    assert list(build_demo()) == [0, 1, 2, 3]


def test_delete_zero_removes_head():
    ring = build_demo()
    assert ring.delete(0) == 0
    assert list(ring) == [1, 2, 3]


def test_delete_is_one_based():
    ring = CircularList([10, 20, 30])
    assert ring.delete(2) == 20
    assert list(ring) == [10, 30]


def test_delete_wraps_around():
    ring = CircularList([10, 20, 30])
    assert ring.delete(5) == 20
    assert len(ring) == 2


def test_delete_empty_raises():
    with pytest.raises(IndexError):
        CircularList().delete(1)


def test_insert_inside_ring():
    ring = CircularList([10, 20, 30])
    ring.insert(99, 1)
    assert list(ring) == [10, 99, 20, 30]


def test_insert_on_head_goes_to_end():
    ring = CircularList([10, 20, 30])
    ring.insert(99, 3)
    ring.insert(77, -2)
    assert list(ring) == [10, 20, 30, 99, 77]


def test_describe():
    assert CircularList().describe() == EMPTY_MESSAGE
    assert CircularList([1, 2]).describe().endswith("1 2 ")


def test_clear():
    ring = build_demo()
    ring.clear()
    assert len(ring) == 0
    assert ring.describe() == EMPTY_MESSAGE


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "ring.txt"
    ring = CircularList([5, -3, 8, 0])
    ring.save(path)
    assert list(CircularList.load(path)) == [5, -3, 8, 0]


def test_save_empty_then_load(tmp_path):
    path = tmp_path / "ring.txt"
    CircularList().save(path)
    assert EMPTY_MESSAGE in path.read_text(encoding="utf-8")
    assert len(CircularList.load(path)) == 0


def test_load_missing_file(tmp_path):
    assert len(CircularList.load(tmp_path / "absent.txt")) == 0


def test_main_restores_list(tmp_path, capsys):
    path = tmp_path / "lists.txt"
    assert main(["--file", str(path)]) == 0
    out = capsys.readouterr().out
    assert out.rstrip().endswith("1 2 3")
    assert list(CircularList.load(path)) == [1, 2, 3]