# algokata

A collection of well-known algorithm puzzles solved in plain Python, with no
dependencies beyond the standard library. Each solution is an ordinary
function (or a small class) that you import and call.

## Installation

```
pip install .
```

To run the tests, install the test extra and call pytest:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokata.arrays` | `find_median_sorted_arrays`, `three_sum`, `three_sum_closest`, `next_permutation`, `max_sub_array`, `sort_colors`, `max_product`, `longest_consecutive`, `max_sliding_window` |
| `algokata.sequences` | `search_rotated`, `jump`, `find_duplicate`, `reverse_pairs`, `max_profit`, `largest_rectangle_area`, `maximal_rectangle`, `max_envelopes` |
| `algokata.strings` | `is_match`, `is_wildcard_match`, `generate_parenthesis`, `find_substring`, `longest_valid_parentheses`, `count_and_say`, `num_decodings`, `reverse_words`, `calculate` |
| `algokata.dynamic` | `unique_paths`, `min_distance`, `is_scramble`, `num_distinct`, `partition`, `min_cut`, `word_break`, `calculate_minimum_hp`, `length_of_lis`, `find_max_form` |
| `algokata.combinatorics` | `combination_sum2`, `total_n_queens`, `subsets_with_dup`, `divide`, `get_permutation` |
| `algokata.grids` | `num_islands`, `trap_rain_water`, `set_zeroes`, `search_matrix` |
| `algokata.linked_lists` | `ListNode`, `RandomNode`, `from_values`, `to_values`, `remove_nth_from_end`, `copy_random_list`, `detect_cycle` |
| `algokata.trees` | `TreeNode`, `BSTIterator`, `build_level_order`, `to_level_order`, `inorder_traversal`, `is_valid_bst`, `is_same_tree`, `level_order`, `zigzag_level_order`, `build_tree_pre_in`, `build_tree_in_post`, `flatten`, `connect`, `max_path_sum`, `lowest_common_ancestor`, `serialize`, `deserialize` |
| `algokata.lru_cache` | `LRUCache` |

## Examples

```python
from algokata.arrays import three_sum, max_sliding_window
from algokata.strings import is_match, calculate
from algokata.trees import build_level_order, level_order, serialize, deserialize
from algokata.linked_lists import from_values, to_values, remove_nth_from_end
from algokata.lru_cache import LRUCache

three_sum([-1, 0, 1, 2, -1, -4])        # [[-1, -1, 2], [-1, 0, 1]]
max_sliding_window([1, 3, -1, -3, 5, 3, 6, 7], 3)  # [3, 3, 5, 5, 6, 7]

is_match("aab", "c*a*b")                # True
calculate("(1+(4+5+2)-3)+(6+8)")        # 23

root = build_level_order([3, 9, 20, None, None, 15, 7])
level_order(root)                       # [[3], [9, 20], [15, 7]]
level_order(deserialize(serialize(root)))  # the same levels again

to_values(remove_nth_from_end(from_values([1, 2, 3, 4, 5]), 2))  # [1, 2, 3, 5]

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                            # 1
cache.put(3, 3)                         # evicts key 2
cache.get(2)                            # -1
```

## Notes

- Trees are built from and turned back into level-order lists with
  `build_level_order` and `to_level_order`, where `None` marks a missing
  child. Linked lists use `from_values` and `to_values` the same way.
- `BSTIterator` is an ordinary Python iterator yielding a search tree's
  values in ascending order; `has_next()` tells whether any remain.
- `serialize` writes a tree as preorder tokens with `#` for an empty child;
  `deserialize` reads that format back and raises `ValueError` if it is cut
  short.
- Functions that rearrange their argument in place (`next_permutation`,
  `sort_colors`, `set_zeroes`, `flatten`) change what you pass and return
  `None`. `remove_nth_from_end` and `connect` also change their argument,
  and return the head or root.
- Inputs a problem cannot answer raise `ValueError`: for example an empty
  list for `max_sub_array` or `max_product`, an empty tree for
  `max_path_sum`, a window larger than the list for `max_sliding_window`, an
  unreachable end for `jump`, or a capacity below 1 for `LRUCache`.
  `divide` raises `ZeroDivisionError` for a zero divisor and clamps the one
  32-bit overflow to `2**31 - 1`.

## What it does not do

The package is a library only: it has no command-line program, reads no
input files and prints nothing. Call the functions from your own code or an
interactive session.