# csesalgo

A small library of classic algorithms for typical competitive-programming
problems, written as plain Python functions and classes. It has no
dependencies outside the standard library.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Modules

### `csesalgo.introductory`

- `missing_number(n, numbers)`: the one value of 1..n absent from `numbers`
  (raises `ValueError` if `numbers` does not hold n - 1 values).
- `weird_algorithm(n)`: the sequence halving even values and mapping odd
  values to 3n+1, ending at 1.
- `longest_repetition(s)`: length of the longest run of one character.
- `beautiful_permutation(n)`: a permutation of 1..n with no neighbours
  differing by one; raises `ValueError("NO SOLUTION")` for n = 2 or 3.
- `two_knights(n)`: for each k in 1..n, the ways to place two non-attacking
  knights on a k x k board.
- `tower_of_hanoi(n)`: the minimal moves from peg 1 to peg 3 as
  `(from, to)` pairs.
- `creating_strings(s)`: all distinct rearrangements of `s`, sorted.
- `palindrome_reorder(s)`: a palindrome made from the letters of `s`;
  raises `ValueError("NO SOLUTION")` when none exists.

### `csesalgo.dynamic`

- `MOD`: the modulus 1 000 000 007 used by the counting functions.
- `edit_distance(s, t)`, `counting_towers(n)`, `dice_combinations(n)`,
  `unique_paths(m, n)`.
- `minimizing_coins(coins, target)`: fewest coins summing to `target`, or
  `None` when it cannot be reached.

### `csesalgo.graphs`

Nodes are numbered from 1 except in `can_finish`, which uses 0-based nodes.

- `can_finish(num_courses, prerequisites)`: `True` if the graph is acyclic.
- `course_schedule(n, edges)`: a topological order; raises
  `ValueError("IMPOSSIBLE")` on a cycle.
- `game_routes(n, edges)`: number of routes from 1 to n, modulo `MOD`.
- `find_cycle(n, edges)`: a directed cycle whose first and last nodes match,
  or `None`.
- `all_pairs_shortest_paths(n, edges)` and
  `shortest_path_queries(n, edges, queries)`: distances in an undirected
  weighted graph, `None` where unreachable.
- `shortest_routes(n, edges)`: distances from node 1 in a directed weighted
  graph, `None` where unreachable.
- `SuccessorGraph(successors)` with `query(x, k)`: the node reached from `x`
  after `k` successor steps.

### `csesalgo.trees`

- `Tree(n, edges)`, rooted at node 1, with `kth_ancestor(node, k)` (returns
  `None` past the root) and `distance(u, v)`.

### `csesalgo.arrays`

- `kth_element(a, b, k)`, `range_sums(values, queries)`,
  `max_subarray_sum(nums)`, `stick_lengths(sticks)`,
  `subarray_divisibility(values)`.

### `csesalgo.maths`

- `counting_grids(n)`, `divisor_counts(limit)`, `count_divisors(n)`,
  `is_prime(x)`, `is_palindrome(s)`, `digit_sum(n)`, `to_binary(n)`,
  `from_binary(s)`, `ncr(n, r)`, `lcm(a, b)`, `exponentiation(a, b)`,
  `exponentiation2(a, b, c)` (a to the power b^c), `josephus_query(n, k)`,
  `max_difference(n, s)`.

Invalid arguments raise `ValueError` (or `IndexError` for out-of-range
positions in `kth_element` and `range_sums`).

## Example

```python
from csesalgo.dynamic import dice_combinations, edit_distance
from csesalgo.maths import exponentiation

dice_combinations(3)            # 4
edit_distance("love", "movie")  # 2
exponentiation(2, 10)           # 1024
```

Results that count possibilities, such as dice combinations or game routes,
are given modulo 1 000 000 007.

## What it does not do

The package is a library only: it has no command-line program and does not
read problem input from standard input or write judge-formatted output. Call
the functions from your own code and format the results as you need.