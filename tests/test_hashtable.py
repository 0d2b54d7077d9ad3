import random
import re

import pytest

from algolab.hashtable import (
    HashTable,
    fractional_hash,
    generate_birthday,
    generate_full_name,
    generate_passport_number,
    generate_phone_number,
    main,
    pad_number,
    string_hash,
)


@pytest.mark.parametrize("key", ["", "a", "89123456789", "Ivanov", "hello world"])
def test_string_hash_is_always_zero(key):
    assert string_hash(key) == 0
    assert string_hash(key, 37) == 0


def test_fractional_hash_of_whole_numbers_is_zero():
    for k in (0, 1, 42, 1000.0):
        assert fractional_hash(k) == 0


def test_fractional_hash_within_range():
    for step in range(100):
        k = step / 100 + 3
        assert 0 <= fractional_hash(k, 10) < 10


def test_chained_add_counts_collisions():
    table = HashTable()
    table.add_chained("a", "1")
    table.add_chained("b", "2")
    table.add_chained("c", "3")
    assert table.collisions == 2
    assert table.bucket(0) == [("a", "1"), ("b", "2"), ("c", "3")]


def test_chained_get_and_remove():
    table = HashTable()
    table.add_chained("a", "1")
    table.add_chained("b", "2")
    assert table.get("b") == "2"
    assert table.remove_by_key("a") is True
    assert table.get("a") is None
    assert table.remove_by_key("a") is False
    assert list(table.items()) == [("b", "2")]


def test_probing_fills_consecutive_buckets():
    table = HashTable(4)
    indices = [table.add_probing(key, key.upper()) for key in "wxyz"]
    assert indices == [0, 1, 2, 3]
    assert table.collisions == 0
    assert [table.bucket(i) for i in range(4)] == [
        [("w", "W")], [("x", "X")], [("y", "Y")], [("z", "Z")]
    ]


def test_probing_full_table_raises():
    table = HashTable(2)
    table.add_probing("a", "1")
    table.add_probing("b", "2")
    with pytest.raises(OverflowError):
        table.add_probing("c", "3")


def test_lookup_only_searches_home_bucket():
    table = HashTable(3)
    table.add_probing("a", "1")
    table.add_probing("b", "2")
    assert table.get("a") == "1"
    assert table.get("b") is None
    assert table.remove_by_key("b") is False
    assert len(table) == 2


def test_remove_by_value_scans_all_buckets():
    table = HashTable(3)
    table.add_probing("a", "1")
    table.add_probing("b", "2")
    assert table.remove_by_value("2") is True
    assert table.remove_by_value("2") is False
    assert list(table.items()) == [("a", "1")]


def test_invalid_size():
    with pytest.raises(ValueError):
        HashTable(0)


def test_pad_number():
    assert pad_number(7, 2) == "07"
    assert pad_number(12345, 3) == "345"
    assert pad_number(42, 2) == "42"


def test_generators_formats():
    rng = random.Random(5)
    for _ in range(50):
        assert re.fullmatch(r"89\d{9}", generate_phone_number(rng))
        assert re.fullmatch(r"\d{6} \d{6}", generate_passport_number(rng))
        day, month, year = generate_birthday(rng).split(".")
        assert 1 <= int(day) <= 28 and len(day) == 2
        assert 1 <= int(month) <= 12 and len(month) == 2
        assert 1950 <= int(year) <= 2023
        assert len(generate_full_name(rng).split()) == 3


def test_generators_are_reproducible():
    first = generate_full_name(random.Random(9))
    second = generate_full_name(random.Random(9))
    assert first == second


def test_main_runs(capsys):
    assert main(["--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Hash table created:" in out
    assert "Number of collisions: 0" in out
    assert out.count("[") >= 10