# contestkit

Routines of the kind that come up in programming-contest problems: graph
traversals, shortest paths and spanning trees, a handful of number puzzles, and
some sequence and string utilities. Plain Python, no dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Graphs (`contestkit.graphs`)

Vertices are numbered `0 .. vertex_count - 1`. Edges are tuples: `(u, v)` for
the traversal functions and `(u, v, weight)` for the weighted ones. A vertex
outside that range, or a negative vertex count, raises `ValueError`.

- `dfs_postorder(vertex_count, edges)` returns every vertex of a directed graph
  in depth-first post-order; roots are tried in increasing order, neighbours in
  edge order.
- `analyze_graph(vertex_count, edges)` returns a `GraphReport` with
  `components` (the post-order of each depth-first tree), `cycle_count`, and the
  properties `component_count` and `has_cycle`. An edge counts towards
  `cycle_count` when it reaches a visited vertex that was not discovered from
  the edge's own tail.
- `dijkstra(vertex_count, edges, source)` works on an undirected weighted graph
  and returns `(vertex, distance)` pairs in the order vertices are settled. The
  source itself is left out, and so is any vertex not reached below
  `graphs.INF` (9999).
- `prim_mst(vertex_count, edges, start)` returns the chosen `(parent, vertex)`
  edges in the order they join the tree, and the total weight.
- `kruskal_mst(vertex_count, edges)` considers edges by increasing weight (ties
  in input order) and returns the chosen `(u, v, weight)` edges and the total.
- `DisjointSet(size)` is a union–find forest with path compression and union
  by rank. `find(x)` returns the root; `union(x, y)` returns `False` if both
  were already in one set. The `parent`, `rank` and `children` lists are open to
  inspection.
- `disjoint_forest(vertex_count, edges)` unions the ends of every edge and
  returns a `ForestReport` with `parents`, `children` (root to the roots linked
  under it), `cycle_edges`, `component_count` and `has_cycle`.

```python
from contestkit.graphs import kruskal_mst

edges = [(0, 1, 4), (0, 2, 1), (1, 2, 3), (1, 3, 3), (2, 4, 2), (3, 5, 2)]
kruskal_mst(6, edges)
# ([(0, 2, 1), (2, 4, 2), (3, 5, 2), (1, 2, 3), (1, 3, 3)], 11)
```

## Numbers (`contestkit.numbers`)

- `split_three(n)` splits `n` into three parts, the first two equal and not
  divisible by 3.
- `split_not_divisible(n)` splits `n` into `(1, 1, n - 2)` or `(1, 2, n - 3)`.
- `next_same_ones(n)` returns the smallest number above `n` with as many one
  bits (`n` must be positive).
- `next_binary_permutation(n)` returns the next permutation of `n`'s binary
  digits with a leading zero added (`n` must not be negative).
- `reverse_sum(a, b)` reverses both numbers' digits, adds them and reverses
  the sum.
- `is_right_triangle(a, b, c)` checks three side lengths against Pythagoras.
- `parallelogram(ax, ay, bx, by, cx, cy)` returns `(dx, dy, area)` for the
  fourth corner D of parallelogram ABCD.
- `frustum_volume(big_radius, small_radius, height, level)` gives the volume of
  liquid filling a frustum-shaped cup up to `level`.
- `plus_minus(n, m)` is the sum of `n` numbers whose sign flips every `m` terms.
- `primes_below(limit)` lists the primes smaller than `limit`.
- `count_binary_strings(length, last_digit)` counts binary strings with no two
  adjacent ones, given the digit placed just before them.

```python
from contestkit.numbers import primes_below

primes_below(20)   # [2, 3, 5, 7, 11, 13, 17, 19]
```

## Sequences (`contestkit.sequences`)

- `longest_chain(values)` is the length of the longest increasing chain, where a
  chain starting at the first element counts one extra; results of two or less
  are reported as 0.
- `apply_operations(values, operations)` runs `("S", d)` add, `("M", d)`
  multiply, `("D", d)` divide toward zero, `("R",)` reverse and `("P", y, z)`
  swap over a list; unknown codes are ignored.
- `transform_by_max(values, k)` replaces every value with `max - value` (the
  maximum taken together with 0), `k` times.
- `BoundedDeque(capacity)` has `push_left`, `push_right`, `pop_left` and
  `pop_right`, raising `IndexError` when full or empty.
- `run_deque_commands(capacity, commands)` runs `pushLeft`, `pushRight`,
  `popLeft` and `popRight` commands and returns one message per command.
- `bulls_and_cows(secret, guess)` scores a guess as `(bulls, cows)`.
- `edit_distance_table(source, target)` builds the full Levenshtein table;
  `edit_script(source, target)` turns it into `I`/`C`/`D` steps ending in `E`.
- `Student(roll, name, marks)`, `rank_students(students)` (marks descending,
  then roll) and `format_ranking(students)` (a Roll / Name / Marks table).

```python
from contestkit.sequences import bulls_and_cows, edit_script, run_deque_commands

bulls_and_cows("5362", "5326")   # (2, 2)
edit_script("abc", "abd")        # 'Cd03E'
run_deque_commands(3, [("pushLeft", 1), ("pushLeft", 2), ("pushRight", -1),
                       ("pushRight", 1), ("popLeft",)])
# ['Pushed in left: 1', 'Pushed in left: 2', 'Pushed in right: -1',
#  'The queue is full', 'Popped from left: 2']
```

## What it does not do

contestkit is a library only. It has no command-line program: reading problem
input, looping over test cases and printing `Case n:` lines is left to the
caller.