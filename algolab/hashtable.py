"""A small hash table keyed by strings, with chaining or linear probing."""

from __future__ import annotations

import argparse
import math
import random
from collections.abc import Iterator

DEFAULT_SIZE = 10
MULTIPLIER = math.pi / 4
_TWO_OVER_SQRT_PI = 2 / math.sqrt(math.pi)
_SQRT_HALF = math.sqrt(0.5)

SURNAMES = (
    "Ivanov", "Kozlov", "Novikov", "Morozov", "Petrov",
    " Lebedev", "Soloviev", "Vasiliev", "Zaitsev", "Pavlov",
    "Volkov", "Golubev", "Ignatov", "Bogdanov", "Borobyev",
    "Fyodorov", "Mikhaylov", "Beleyev", "Tarasov", "Belov",
    "Zhukov", "Orlov", "Kiselev", "Makarov", "Andreyev",
)

NAMES = (
    "Alexander", "Sergey", "Andrey", "Dmitriy", "Aleksey",
    "Mikhail", "Nikolay", "Evgeniy", "Oleg", "Vladimir",
    "Nikita", "Yuriy", "Ivan", "Konstantin", "Stanislav",
    "Valentin", "Valeriy", "Oleg", "Konstantin", "Stanislav",
    "Roman", "Igor", "Gennadiy", "Vyacheslav", "David",
    "Nikita", "Artem", "Timur", "Ruslan", "Semyon",
)

PATRONYMICS = (
    "Ivanovich", "Sergeevich", "Andreyevich", "Dmitriyevich", "Alekseyevich",
    "Ivanovich", "Nikolayevich", "Mikhaylovich", "Olegovich", "Petrovich",
    "Anatolyevich", "Vladimirovich", "Yegorovich", "Viktorovich", "Fyodorovich",
    "Konstantinovich", "Arkadyevich", "Ermolaevich", "Vasilievich", "Timofeevich",
    "Igorevich", "Valeryevich", "Stanislavovich", "Romanovich", "Gennadiyevich",
    "Pavlovich", "Vyacheslavovich", "Evgenyevich", "Davidovich", "Grigoryevich",
)

_RAND_LIMIT = 2**31


def fractional_hash(k: float, size: int = DEFAULT_SIZE) -> int:
    """Multiplicative hash: the fractional part of ``k`` scaled by size and pi/4."""
    return int(size * (k - int(k)) * MULTIPLIER)


def string_hash(line: str, size: int = DEFAULT_SIZE) -> int:
    """Hash of a string, built from a weighted sum of its character codes.

    The sum is a whole number, so its fractional part, and with it the hash,
    is always zero.
    """
    total = sum(
        int(ord(ch) ** 2 * _TWO_OVER_SQRT_PI + abs(ord(ch)) * _SQRT_HALF) for ch in line
    )
    return fractional_hash(abs(total), size)


class HashTable:
    """Fixed number of buckets, each holding a chain of (key, value) entries."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self.size = size
        self.collisions = 0
        self._buckets: list[list[tuple[str, str]]] = [[] for _ in range(size)]

    def _home(self, key: str) -> int:
        return string_hash(key, self.size)

    def add_chained(self, key: str, value: str) -> int:
        """Append the entry to its home bucket's chain; return the bucket index."""
        index = self._home(key)
        bucket = self._buckets[index]
        if bucket:
            self.collisions += 1
        bucket.append((key, value))
        return index

    def add_probing(self, key: str, value: str) -> int:
        """Store the entry in the first empty bucket from its home onwards.

        Raises OverflowError when no bucket at or after the home one is free.
        """
        for index in range(self._home(key), self.size):
            if not self._buckets[index]:
                self._buckets[index] = [(key, value)]
                return index
        raise OverflowError("no free bucket for the key")

    def remove_by_key(self, key: str) -> bool:
        """Remove the first entry with ``key`` from the key's home bucket."""
        bucket = self._buckets[self._home(key)]
        for position, (entry_key, _) in enumerate(bucket):
            if entry_key == key:
                del bucket[position]
                return True
        return False

    def remove_by_value(self, value: str) -> bool:
        """Remove the first entry holding ``value``, scanning every bucket."""
        for bucket in self._buckets:
            for position, (_, entry_value) in enumerate(bucket):
                if entry_value == value:
                    del bucket[position]
                    return True
        return False

    def get(self, key: str) -> str | None:
        """Return the value for ``key`` from its home bucket, or None."""
        for entry_key, entry_value in self._buckets[self._home(key)]:
            if entry_key == key:
                return entry_value
        return None

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield every entry, bucket by bucket, in chain order."""
        for bucket in self._buckets:
            yield from bucket

    def bucket(self, index: int) -> list[tuple[str, str]]:
        """The entries of the bucket at ``index``."""
        return list(self._buckets[index])

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)


def pad_number(n: int, length: int) -> str:
    """Decimal text of ``n`` left-padded with zeros, or cut from the left, to ``length``."""
    text = str(n)
    if len(text) < length:
        return "0" * (length - len(text)) + text
    return text[len(text) - length :]


def generate_phone_number(rng: random.Random) -> str:
    """Random eleven-digit number starting with 89."""
    return "89" + "".join(str(rng.randrange(10)) for _ in range(9))


def generate_full_name(rng: random.Random) -> str:
    """Random surname, name and patronymic."""
    return f"{rng.choice(SURNAMES)} {rng.choice(NAMES)} {rng.choice(PATRONYMICS)}"


def generate_birthday(rng: random.Random) -> str:
    """Random date in DD.MM.YYYY form between 1950 and 2023."""
    day = pad_number(rng.randrange(28) + 1, 2)
    month = pad_number(rng.randrange(12) + 1, 2)
    return f"{day}.{month}.{rng.randrange(74) + 1950}"


def generate_passport_number(rng: random.Random) -> str:
    """Random passport number: two six-digit groups."""
    series = pad_number(rng.randrange(1000000) + 100, 6)
    number = pad_number(rng.randrange(1000000) // 100 * 10 + rng.randrange(_RAND_LIMIT), 6)
    return f"{series} {number}"


def _print_table(table: HashTable) -> None:
    for key, value in table.items():
        print(f"[{key} : {value}]")


def _random_entry(table: HashTable, rng: random.Random) -> tuple[str, str]:
    if not len(table):
        raise LookupError("the table is empty")
    while True:
        bucket = table.bucket(rng.randrange(table.size))
        if bucket:
            return bucket[0]


def main(argv: list[str] | None = None) -> int:
    """Fill a table with random people and show removal and lookup."""
    parser = argparse.ArgumentParser(description="Hash table of random people.")
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE)
    parser.add_argument("--seed", type=int)
    args = parser.parse_args(argv)
    if args.size < 3:
        parser.error("size must be at least 3")

    rng = random.Random(args.seed)
    print(generate_phone_number(rng), end="")

    table = HashTable(args.size)
    for _ in range(args.size):
        person = f"{generate_full_name(rng)} | {generate_passport_number(rng)}"
        table.add_probing(generate_phone_number(rng), person)

    print("\nHash table created:\n")
    _print_table(table)
    print()

    key, _ = _random_entry(table, rng)
    print(f"Delete by key {key}: ", end="")
    if table.remove_by_key(key):
        print(f"\nElement with key '{key}' successfully deleted\n")
    else:
        print(f"\nElement with key '{key}' not found\n")
    _print_table(table)

    _, value = _random_entry(table, rng)
    print(f'\nDelete by value "{value}":')
    if table.remove_by_value(value):
        print(f'Element with value "{value}" successfully deleted\n')
    else:
        print(f'Element with value "{value}" not found\n')
    _print_table(table)

    key, _ = _random_entry(table, rng)
    print(f'\nGetting an element by key "{key}":')
    found = table.get(key)
    if found is not None:
        print(f"Item found: {found}")
    else:
        print(f"Element with value {key}not found.")
    print(f"Number of collisions: {table.collisions}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())