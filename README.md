# dsakit

Small Python functions for the classic data-structure and algorithm
exercises: arrays, matrices, singly linked lists, strings and text
patterns, plus a `dsakit` command for a few linked-list operations.

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

| Module                | Contents |
|-----------------------|----------|
| `dsakit.arrays`       | `max_profit`, `find_missing_number`, `max_subarray_sum`, `majority_element`, `max_pair_product`, `move_zeros`, `remove_duplicates`, `rotate_right`, `two_sum` |
| `dsakit.matrix`       | `rotate_clockwise`, `saddle_point`, `to_sparse`, `spiral_order`, `transpose` |
| `dsakit.linked_list`  | `Node`, `from_iterable`, `to_list`, `has_cycle`, `merge_sorted`, `middle_node`, `remove_nth_from_end`, `reverse_list`, `contains`, `length`, `remove_sorted_duplicates`, `format_list` |
| `dsakit.strings`      | `is_balanced`, `first_unique_char`, `longest_common_prefix`, `is_numeric`, `reverse_words`, `reverse_string`, `is_anagram`, `is_palindrome`, `longest_unique_substring`, `is_rotation` |
| `dsakit.patterns`     | `butterfly`, `floyds_triangle`, `hollow_diamond`, `number_pyramid`, `palindromic_pyramid`, `pascals_triangle`, `pascal_rows`, `right_triangle`, `solid_square`, `star_pyramid`, `zigzag` |
| `dsakit.cli`          | `main`, the entry point of the `dsakit` command |

Functions that cannot give an answer for their input raise `ValueError`:
for example `max_subarray_sum([])`, `max_pair_product([1])`,
`find_missing_number` with the wrong number of values, rotating a
non-square matrix, or `remove_nth_from_end` with `n` larger than the list.
`two_sum` returns `None` and `first_unique_char` returns `-1` when there is
nothing to find.

## Examples

Arrays:

```python
from dsakit.arrays import max_profit, max_subarray_sum, majority_element, rotate_right

max_profit([7, 1, 5, 3, 6, 4])                         # 5
max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])      # 6
majority_element([3, 2, 3])                            # 3
rotate_right([1, 2, 3, 4, 5, 6, 7], 3)                 # [5, 6, 7, 1, 2, 3, 4]
```

Matrices are lists of rows:

```python
from dsakit.matrix import saddle_point, spiral_order, to_sparse, transpose

spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])   # [1, 2, 3, 6, 9, 8, 7, 4, 5]
transpose([[1, 2, 3], [4, 5, 6]])                 # [[1, 4], [2, 5], [3, 6]]
saddle_point([[1, 2, 3], [4, 5, 6], [7, 8, 9]])   # 7
to_sparse([[0, 0, 3], [0, 0, 0], [5, 0, 0]])
# [(3, 3, 2), (0, 2, 3), (2, 0, 5)]
```

Linked lists are built from any iterable, and a `Node` can be iterated to
walk its values:

```python
from dsakit.linked_list import format_list, from_iterable, length, reverse_list, to_list

head = from_iterable([1, 2, 3])
length(head)                    # 3
list(head)                      # [1, 2, 3]
to_list(reverse_list(head))     # [3, 2, 1]
format_list(from_iterable([1, 2]))   # '1 -> 2 -> NULL'
```

Strings:

```python
from dsakit.strings import is_balanced, is_palindrome, longest_unique_substring

is_balanced("{[()]}")                             # True
is_palindrome("A man, a plan, a canal: Panama")   # True
longest_unique_substring("abcabcbb")              # 3
```

Patterns are returned as a list of lines:

```python
from dsakit.patterns import pascal_rows, star_pyramid

print("\n".join(star_pyramid(3)))
#   *
#  ***
# *****

pascal_rows(4)   # [[1], [1, 1], [1, 2, 1], [1, 3, 3, 1]]
```

## Command line

The `dsakit` command has three sub-commands, each working on a list of
integers:

```
dsakit length 1 2 3             # Length of Linked List: 3
dsakit search 1 2 3 --key 2     # Element found in the linked list.
dsakit dedupe 1 1 2 3 3         # Linked List after removing duplicates:
                                # 1 -> 2 -> 3 -> NULL
```

When no values are given on the command line they are read from standard
input: first the number of nodes, then that many values, and for `search`
without `--key` the value to look for after them.

```
echo "3 1 2 3 2" | dsakit search
```

The command covers only these three operations; the other functions are
used from Python.