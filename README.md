# contestkit

Competitive programming algorithms and contest problem solutions, written as
plain Python functions and classes. Each one takes ordinary Python values and
returns its result.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## String algorithms: `contestkit.strings`

- `z_function(s)`: the Z-array of a string, with `z[0] == 0`.
- `prefix_function(s)`: the KMP prefix (failure) function.
- `find_occurrences(text, pattern)`: a list of the start indices of every
  match, overlapping ones included. An empty pattern raises `ValueError`.
- `manacher(s)`: for each centre, the radius of the longest odd-length
  palindrome around it.

```python
from contestkit.strings import z_function, prefix_function, find_occurrences

z_function("aaaa")                  # [0, 3, 2, 1]
prefix_function("abab")             # [0, 0, 1, 2]
find_occurrences("ababa", "aba")    # [0, 2]
```

## Segment trees: `contestkit.segtree`

All indices are 0-based and ranges include both ends. An invalid range raises
`IndexError`, and an empty input raises `ValueError`.

- `MaxSubarrayTree(values)`: `query(left, right)` returns the largest sum of a
  non-empty subarray inside the range. `max_subarray_sum(values)` does the
  same for the whole sequence.
- `BinaryRangeTree(bits)`: a 0/1 sequence with `assign(left, right, value)`,
  `flip(left, right)`, `count_ones(left, right)` and
  `longest_ones(left, right)`.
- `ModAffineTree(values, modulus)`: range `multiply`, range `add` and range
  `sum`, all taken modulo `modulus`.
- `maximum_sum_subsequence(nums, queries)`: applies each `(position, value)`
  update, then adds up the best sums of subsequences with no two adjacent
  elements, one after each update. The total is taken modulo 10**9 + 7.

```python
from contestkit.segtree import BinaryRangeTree, ModAffineTree, max_subarray_sum

max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6

bits = BinaryRangeTree([0, 1, 1, 0, 1])
bits.count_ones(0, 4)      # 3
bits.flip(0, 0)
bits.longest_ones(0, 4)    # 3

tree = ModAffineTree([1, 2, 3], modulus=100)
tree.add(0, 2, 5)
tree.sum(0, 2)             # 21
```

## Contest problems

Each contest has its own module, with one function per problem. Where a
problem has no answer, the function returns `None` or `-1`, as its docstring
says. Positions and ranges that come from a problem statement, such as
queries, vertices and returned indices, are 1-based.

- `contestkit.teamcp`: `halving_operations`, `maximum_sum_after_insertions`,
  `diy_rectangle`, `three_activities`.
- `contestkit.cf2032`: `circuit_lights`, `medians_partition`,
  `trinity_operations`.
- `contestkit.cf2033`: `last_mover`, `water_magic`.
- `contestkit.cf2037`: `twice_score`, `intercepted_dimensions`,
  `superultra_permutation`, `sharky_power_ups`, `kachina_binary_string`,
  `ardent_flames`.
- `contestkit.cf2040`: `game_of_division`, `paint_strip`,
  `ordered_permutation`, `non_prime_tree`.
- `contestkit.cf2042`: `greedy_monocarp`, `colored_marbles`,
  `competitive_fishing`, `recommendations`.
- `contestkit.cf2044`: `easy_problem`, `normal_problem`, `hard_problem`,
  `harder_problem`, `insane_problem`, `easy_demon_problem`,
  `medium_demon_easy`, `medium_demon_hard`, `hard_demon_problem`.
- `contestkit.cf2047`: `jigsaw_happy_days`, `replace_character`,
  `move_back_at_cost`.
- `contestkit.cf2050`: `line_breaks`, `transfusion`, `uninteresting_number`,
  `maximize_digital_string`, `three_strings`, `maximum_modulo_equality`.

```python
from contestkit.cf2044 import normal_problem

normal_problem("qwq")   # "pwp"
```

The interactive problem `kachina_binary_string(n, ask)` takes a callable
`ask(l, r)`. The callable must return the number of `01` subsequences in the
1-based inclusive range `[l, r]`.

## What this package does not do

contestkit is a library only. It has no command-line program, and nothing in
it reads judge input from standard input or writes formatted answers to
standard output. You call the functions yourself with Python values.