# algorithmica

A small library of classic algorithms and data-structure exercises in plain
Python, with no third-party dependencies. Each function does one well-known
job and returns its answer rather than printing it; bad input raises
`ValueError` (or `TypeError`/`ZeroDivisionError` where that fits).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algorithmica.sorting` | `heap_sort`, `bubble_sort`, `counting_sort`, `cycle_sort`, `insertion_sort`, `merge_sort`, `selection_sort`, `sort_stack` |
| `algorithmica.searching` | `linear_search`, `binary_search`, `contains_sorted`, `lps_table`, `kmp_search`, `count_inversions` |
| `algorithmica.numbers` | `calculate`, `prime_factors`, `quotient_and_remainder`, `binary_to_decimal`, `decimal_to_binary`, `fibonacci`, `fibonacci_series`, `reverse_digits`, `is_palindrome_number`, `is_perfect_number`, `cyclic_swap` |
| `algorithmica.checksum` | `ones_complement_sum`, `complement`, `checksum`, `format_report`, `main` |
| `algorithmica.strings` | `reverse_words`, `reverse_string`, `is_anagram`, `is_balanced`, `is_valid_brackets`, `minimum_ternary_string`, `star_pattern` |
| `algorithmica.arrays` | `three_sum`, `min_jumps`, `minimum_platforms`, `stock_span`, `avoid_flood`, `furthest_building`, `trap_rain_water`, `two_sum`, `knapsack` |
| `algorithmica.matrix` | `transpose`, `to_sparse`, `format_matrix` |
| `algorithmica.graphs` | `minimum_edge_weight`, `minimum_spanning_tree_weight`, `transpose_graph`, `format_adjacency` |
| `algorithmica.linked_list` | `ListNode`, `from_iterable`, `to_list`, `push`, `delete_key`, `merge_sorted`, `insertion_sort_list`, `rotate_right` |
| `algorithmica.trees` | `TreeNode`, `QuadNode`, `max_depth`, `is_balanced_tree`, `construct_quad_tree` |
| `algorithmica.sudoku` | `is_valid_placement`, `solve_sudoku` |

The sorting functions take any iterable, leave it untouched and return a new
ascending list. `sort_stack` treats its input as a stack given bottom first
and returns it with the largest item last (on top).

## Examples

```python
from algorithmica.sorting import merge_sort
from algorithmica.searching import kmp_search
from algorithmica.arrays import knapsack, stock_span
from algorithmica.strings import is_anagram
from algorithmica.numbers import decimal_to_binary

merge_sort([4, 1, 2, 1, 3, 5, 7, 5, 2])        # [1, 1, 2, 2, 3, 4, 5, 5, 7]
knapsack(50, [10, 20, 30], [60, 100, 120])     # 220
stock_span([10, 4, 5, 90, 120, 80])            # [1, 1, 2, 4, 5, 1]
kmp_search("ABABDABACDABABCABAB", "ABABCABAB") # [10]
is_anagram("listen", "silent")                 # True
decimal_to_binary(244)                         # "11110100"
```

Linked lists are built from ordinary iterables and turned back into lists:

```python
from algorithmica.linked_list import from_iterable, rotate_right, to_list

head = from_iterable([1, 2, 3, 4, 5])
to_list(rotate_right(head, 2))                 # [4, 5, 1, 2, 3]
```

A sudoku board is a 9×9 grid of one-character strings with `"."` marking an
empty cell. `solve_sudoku` returns a solved copy and raises `ValueError` if
the board is malformed, its givens clash, or it has no solution.

## Command line

The package installs one command, which prints the ones' complement sum of
equal-width binary words and the complement of that sum (the checksum):

```
algorithmica-checksum 00000001 00000010
```

prints

```
the final result
00000011
complement
11111100
```

With no word arguments the bits are read from standard input, whitespace
ignored, and split into words of `-w/--width` bits (default 8). `-o/--output
FILE` writes the report to a file instead of printing it. Invalid input is
reported on standard error with exit status 1.

## What it does not do

Apart from the checksum command, there are no interactive programs: the
library does not prompt for input or print results, it only returns them
to the caller.