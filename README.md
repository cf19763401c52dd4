# algonotes

Classic algorithm exercises, each written as a small, self-contained
function. The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algonotes.structures` | `ListNode`, `TreeNode`, and the helpers `build_list`, `list_values`, `build_tree` |
| `algonotes.arrays` | `two_sum`, `two_sum_all`, `two_sum_sorted`, `remove_duplicates`, `remove_element`, `search_insert`, `max_subarray`, `max_subarray_divide`, `plus_one`, `merge_sorted`, `max_profit`, `single_number`, `majority_element` |
| `algonotes.strings` | `reverse_integer`, `is_palindrome_number`, `roman_to_int`, `longest_common_prefix`, `is_valid_parentheses`, `length_of_last_word`, `add_binary`, `is_alnum_palindrome`, `column_title`, `column_number` |
| `algonotes.numbers` | `int_sqrt`, `sqrt_newton`, `climb_stairs`, `pascal_triangle`, `pascal_row`, `reverse_bits`, `hamming_weight` |
| `algonotes.linked_lists` | `merge_two_lists`, `delete_duplicates`, `has_cycle`, `get_intersection_node` |
| `algonotes.kmp` | `build_next`, `kmp_search`, `naive_search` |
| `algonotes.trees` | `inorder`, `preorder`, `postorder`, `is_same_tree`, `is_symmetric`, `max_depth`, `min_depth`, `is_balanced`, `has_path_sum`, `sorted_array_to_bst`, `MidpointRule` |
| `algonotes.merge_sort` | `merge_sort`, `count_inversions` |
| `algonotes.sparse_matrix` | `CrossListMatrix`, `read_matrix`, `main` |
| `algonotes.sampling` | `reservoir_sample`, `select_online`, `priority_shuffle`, `fisher_yates_shuffle` |

## Examples

```python
from algonotes.arrays import max_subarray, two_sum
from algonotes.strings import roman_to_int, column_title, reverse_integer
from algonotes.kmp import kmp_search
from algonotes.merge_sort import count_inversions

max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6
two_sum([2, 7, 11, 15], 9)                       # [1, 0]  (later index first)
roman_to_int("MCMXCIV")                          # 1994
column_title(28)                                 # "AB"
reverse_integer(1534236469)                      # 0  (outside the signed 32-bit range)
kmp_search("hello", "ll")                        # 2
count_inversions([8, 7, 6, 5, 4, 3, 2, 1])       # 28
```

Linked lists and binary trees are built from plain Python lists. Trees use a
level-order listing in which `None` marks a missing child:

```python
from algonotes.structures import build_list, list_values, build_tree
from algonotes.linked_lists import merge_two_lists
from algonotes.trees import inorder, max_depth

merged = merge_two_lists(build_list([1, 2, 4]), build_list([1, 3, 4]))
list_values(merged)                               # [1, 1, 2, 3, 4, 4]

tree = build_tree([3, 9, 20, None, None, 15, 7])
max_depth(tree)                                   # 3
inorder(tree)                                     # [9, 3, 15, 20, 7]
```

`list_values` raises `ValueError` on a list that loops back on itself.

Some functions work in place, as their names suggest: `remove_duplicates`
and `remove_element` shorten the list they are given and return its new
length, `merge_sorted` fills the first `m + n` slots of `nums1`, and the two
shuffles reorder the list they are given. `merge_sort` returns a new list and
leaves its input alone.

## Randomness

`sorted_array_to_bst` picks the middle of an even-sized slice by
`MidpointRule.LOWER` (the default), `MidpointRule.UPPER` or
`MidpointRule.RANDOM`. The random rule and every function in
`algonotes.sampling` take an `rng` argument; pass a seeded `random.Random`
to make results reproducible, or leave it out to use the `random` module.

## Sparse matrix

`CrossListMatrix(rows, cols, entries, default=0)` stores the given
`(i, j, value)` entries in an orthogonal (cross) linked list: every stored
entry is linked into its row, ordered by column, and into its column, ordered
by row. `get(i, j)` returns the stored value or `default`, `entries()` yields
the stored entries row by row, `column(j)` lists a column's entries top to
bottom, and `render()` gives one `i, j: value` line per entry. Positions out
of range raise `IndexError`; a second entry at the same position raises
`ValueError`.

`read_matrix(stream, prompt=None)` reads the number of rows, columns and
entries, then one `i j value` triple per entry, writing a prompt to `prompt`
before each group when one is given.

The `algonotes-matrix` command reads a matrix this way from standard input,
prompting on standard output, and then prints its stored entries:

```
algonotes-matrix
```

On malformed input it prints an error to standard error and exits with
status 1.

## What it does not do

A `CrossListMatrix` is fixed once built: it has no way to set or remove an
entry, and no matrix addition or multiplication. The command only reads a
matrix and lists its entries.