# algonotes

Classic algorithms as plain Python functions. The package covers binary trees,
binary search trees, dynamic programming and graphs. It has no runtime
dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

## Modules

### `algonotes.trees`

`TreeNode` is a dataclass with `val`, `left`, `right` and `next`. Nodes compare
by identity.

- `build_from_level_order(values)` builds a tree from a level-order list. `None`
  marks a missing child.
- `max_depth`, `diameter` (counted in edges), `is_balanced`.
- `level_order` returns values grouped by level.
- `max_width` returns the widest level, counting the gaps between its end nodes.
- `lowest_common_ancestor(root, p, q)` matches `p` and `q` by identity.
- `path_to_value(root, target)` returns the values from the root down to the
  first node that holds `target`, searching left before right. It returns `[]`
  if no node holds it.
- `is_same_tree`, `is_symmetric`.
- `build_tree_from_preorder_inorder` and `build_tree_from_inorder_postorder`
  rebuild a tree whose values are distinct. They raise `ValueError` when the two
  traversals do not match in length or in values.
- `connect_right_neighbours` sets each node's `next` to its right neighbour on
  the same level.

### `algonotes.bst`

- `BSTIterator(root, reverse=False)` is an iterator that yields values in
  ascending order, or descending order when `reverse` is true. It also has
  `has_next()`.
- `find_ceil` and `find_floor` return `-1` when no value qualifies.
- `kth_smallest` and `kth_largest` count from 1 and return `0` when `k` is out
  of range.
- `bst_lowest_common_ancestor`.
- `predecessor_successor(root, key)` returns a pair of nodes, or `None` in place
  of either one, holding the nearest values strictly below and strictly above
  `key`.
- `two_sum(root, k)` and `is_valid_bst`.

### `algonotes.dp_strings`

- `longest_common_subsequence`, `length_of_lis`, `num_distinct`,
  `min_distance` (edit distance), `is_interleave`.
- `longest_palindrome` returns the leftmost one when several have the same
  length.
- `count_palindromic_substrings`, `word_break`.
- `num_decodings` uses the mapping `'A'=1 … 'Z'=26`.

### `algonotes.dp_intervals`

- `matrix_chain_cost(dims)` raises `ValueError` when given fewer than two
  dimensions.
- `min_cut_cost(n, cuts)`, `longest_increasing_path(matrix)`.

### `algonotes.dp_choices`

- `climb_stairs`, `coin_change` (returns `-1` if the amount cannot be made),
  `coin_change_ways` (capped at `2**31 - 1`).
- `rob`, `rob_circular`, `min_cost_climbing_stairs`, `can_partition`,
  `max_profit`, `target_sum_ways`, `unique_paths`.
- These functions raise `ValueError` on invalid input: negative step counts or
  amounts, empty or non-positive coin lists, fewer than two stair costs, an
  empty price list, negative partition values, and grid sizes below 1.

### `algonotes.graph_traversal`

- `GraphNode` has `val` and `neighbors`, and hashes by identity.
- `DisjointSet(n)` holds the elements `0..n`. Its `find(x)` raises `IndexError`
  when `x` is out of range. Its `union(x, y)` returns `False` when `x` and `y`
  are already in the same set.
- `bfs_order` and `dfs_order` traverse from node 0 of an adjacency list.
- `is_bipartite` and `is_bipartite_dfs`.
- `has_directed_cycle`, `has_directed_cycle_dfs`, `has_undirected_cycle` and
  `has_undirected_cycle_dfs` take `(num_nodes, edges)`.
- `topological_sort` uses Kahn's algorithm and leaves out the nodes on or behind
  a cycle. `topological_sort_dfs` returns the nodes in reverse finishing order.
- `find_course_order` returns `[]` when no order exists.
- `count_strongly_connected` uses Kosaraju's algorithm.
- `clone_graph` makes a deep copy.
- `find_redundant_connection(edges)` works on nodes `1..len(edges)`. It returns
  the first edge that closes a cycle, or `None`.

### `algonotes.shortest_paths`

- `dijkstra(num_nodes, edges, source)` uses `INT_MAX` (`2**31 - 1`) for
  unreachable nodes.
- `network_delay_time` and `find_cheapest_price` return `-1` when the target
  cannot be reached.
- `spanning_tree_weight(num_nodes, adj)` uses Prim's algorithm.
- `swim_in_water(grid)` raises `ValueError` unless the grid is a non-empty
  square.
- `ladder_length` returns `0` when there is no ladder.

### `algonotes.grids`

- `num_islands` counts groups of `'1'`.
- `max_area_of_island` returns the size of the largest group of `1`.
- `pacific_atlantic` returns `(row, col)` tuples in row-major order.
- `oranges_rotting` returns `-1` if some orange never rots.
- `capture_surrounded(board)` rewrites the board in place.

## Example

```python
from algonotes.trees import build_from_level_order, level_order, max_depth
from algonotes.bst import BSTIterator, kth_smallest
from algonotes.dp_strings import min_distance
from algonotes.shortest_paths import dijkstra

root = build_from_level_order([5, 3, 6, 2, 4, None, 7])
level_order(root)                    # [[5], [3, 6], [2, 4, 7]]
max_depth(root)                      # 3
kth_smallest(root, 3)                # 4
list(BSTIterator(root))              # [2, 3, 4, 5, 6, 7]
list(BSTIterator(root, reverse=True))  # [7, 6, 5, 4, 3, 2]

min_distance("horse", "ros")         # 3

dijkstra(3, [[0, 1, 4], [0, 2, 1], [2, 1, 2]], 0)  # [0, 3, 1]
```

## What it does not do

This is a library only. It has no command-line program, and it does not read
graphs, trees or grids from files. You build the inputs as Python lists or
nodes and pass them to the functions.

## Running the tests

```
pip install ".[test]"
pytest
```