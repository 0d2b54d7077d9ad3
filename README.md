# algolab

A collection of classic algorithms and small data structures in plain
Python, with no third-party dependencies. Each module can be imported as a
library, and each comes with a short command-line demo.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algolab.searching` | `linear_search`, `binary_search`, `interpolation_search` |
| `algolab.text_search` | `bad_character_shifts`, `boyer_moore`, `prefix_function`, `kmp_search` |
| `algolab.sorting` | `hoare_quick_sort`, `lomuto_quick_sort`, `merge_sort`, `natural_merge_passes`, `natural_merge_sort`, `simple_natural_merge_sort`, `shell_sort`, `counting_sort`, `radix_sort` |
| `algolab.polyphase` | polyphase merge sort: `split_runs`, `fibonacci_pair`, `polyphase_sort`, `sort_file` |
| `algolab.puzzles` | N queens (`solve_queens`, `render_board`, `write_queens`), towers of Hanoi (`hanoi_moves`, `hanoi_states`, `write_hanoi`) and `fibonacci` |
| `algolab.exercises` | `LinearFunction` and small matrix exercises (`lower_triangle`, `shifted_rows`, `random_matrix`, `drop_column`, `format_matrix`) |
| `algolab.hashtable` | `HashTable` with chained (`add_chained`) and linear-probing (`add_probing`) insertion, the hash functions `fractional_hash` and `string_hash`, and random record generators |
| `algolab.ringlist` | `CircularList`, a ring of integers that can be saved to and loaded from a text file |
| `algolab.containers` | `Stack`, `ArrayQueue` (fixed capacity, slots never reused) and `SinglyLinkedList` |
| `algolab.dlist` | `LinkedList`, a doubly linked list of integers with index access, element-wise multiplication and `Cursor` navigation |

## Library use

The search functions return an index, or `None` when the value is absent:

```python
from algolab.searching import binary_search, linear_search

binary_search([2, 3, 12, 34, 54], 54)   # 4
linear_search([12, 34, 54, 2, 3], 2)    # 3
binary_search([2, 3, 12, 34, 54], 7)    # None
```

The text searches return a list of start positions and reject an empty
pattern with `ValueError`:

```python
from algolab.text_search import boyer_moore, kmp_search

kmp_search("abacadabrabracabracadabrabrabracad", "abracadabra")
boyer_moore("abacadabrabracabracadabrabrabracad", "ab")
```

The sorting functions take any iterable and return a new sorted list;
`counting_sort` and `radix_sort` accept only non-negative integers:

```python
from algolab.sorting import hoare_quick_sort, shell_sort

shell_sort([12, 34, 54, 2, 3])        # [2, 3, 12, 34, 54]
hoare_quick_sort([12, 34, 54, 2, 3])  # [2, 3, 12, 34, 54]
```

`natural_merge_passes` is a generator that yields a snapshot of the data
after each merge.

Note that `string_hash` sums whole numbers, so it always yields bucket 0;
keys added to a `HashTable` all share one home bucket.

## Command-line demos

Every demo runs without arguments; pass `--help` to see its options.

```
algolab-searching
algolab-text-search
algolab-sorting
algolab-polyphase
algolab-queens
algolab-hanoi
algolab-exercises
algolab-hashtable
algolab-ringlist
algolab-containers
algolab-dlist
```

Some demos read from standard input when an argument is left out:
`algolab-sorting` asks for the method number (1–4), `algolab-polyphase`
for the element count, `algolab-hanoi` for the number of disks, and
`algolab-dlist` reads six integers. Demos that use random numbers accept
`--seed`.

Some demos write text files in the current directory:

- `algolab-queens` writes `EightQueens.txt` (`--output`, `--size`).
- `algolab-hanoi` writes `HanoiTower1.txt` and `HanoiTower2.txt`
  (`--moves`, `--states`).
- `algolab-polyphase` writes `F1.txt` and `F2.txt` (`--input`, `--output`).
- `algolab-ringlist` writes and reads back `DoubleLists.txt` (`--file`).

## What it does not do

The demos are fixed walkthroughs, not interactive programs: there is no menu
for editing a list or table step by step, and nothing is kept between runs
apart from the text files named above.