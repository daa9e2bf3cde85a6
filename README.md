# leetsolve

Plain-Python solutions to common interview problems. They are grouped by technique, and each one is an ordinary function.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Functions |
| --- | --- |
| `leetsolve.arrays_strings` | `gcd_of_strings`, `kids_with_candies`, `reverse_words`, `merge_alternately`, `product_except_self`, `increasing_triplet`, `reverse_vowels`, `compress`, `can_place_flowers` |
| `leetsolve.hashmap_set` | `unique_occurrences`, `close_strings`, `find_difference`, `equal_pairs` |
| `leetsolve.prefix_sum` | `largest_altitude`, `pivot_index` |
| `leetsolve.sliding_window` | `longest_ones`, `max_vowels`, `find_max_average` |
| `leetsolve.stacks` | `remove_stars`, `asteroid_collision` |
| `leetsolve.two_pointers` | `max_area`, `max_operations`, `move_zeroes`, `is_subsequence` |

## Examples

```python
from leetsolve.arrays_strings import compress, gcd_of_strings, reverse_words
from leetsolve.hashmap_set import find_difference
from leetsolve.sliding_window import find_max_average
from leetsolve.stacks import asteroid_collision
from leetsolve.two_pointers import move_zeroes

gcd_of_strings("ABCABC", "ABC")              # "ABC"
reverse_words("  hello world  ")             # "world hello"
find_difference([1, 2, 3], [2, 4, 6])        # [[1, 3], [4, 6]]
find_max_average([1, 12, -5, -6, 50, 3], 4)  # 12.75
asteroid_collision([5, 10, -5])              # [5, 10]

chars = ["a", "a", "b", "b", "c", "c", "c"]
compress(chars)                              # 6; chars starts with a 2 b 2 c 3

nums = [0, 1, 0, 3, 12]
move_zeroes(nums)                            # nums is now [1, 3, 12, 0, 0]
```

## Behaviour worth knowing

- Two functions change the list they are given. `compress` writes the compressed form to the front of the list and returns its length. `move_zeroes` reorders the list and returns `None`.
- `can_place_flowers` leaves the flowerbed it is given unchanged.
- `find_difference` returns distinct values in the order they first appear.
- `find_max_average` rounds its result to 5 decimal places. Halves are rounded away from zero.
- Some inputs raise errors:
  - `kids_with_candies` raises `ValueError` for an empty list.
  - `max_vowels` and `find_max_average` raise `ValueError` when `k` is not between 1 and the length of the input.
  - `remove_stars` raises `IndexError` when a star has no character to its left to remove.

## What it does not do

The package is a library only. It has no command-line tool, and it does not read problems from files or input.