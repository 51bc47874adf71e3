# algokit

A small library of classic algorithms and data structures written in plain
Python with no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Module                | Contents |
|-----------------------|----------|
| `algokit.sequences`   | `edit_distance`, `longest_common_subsequence`, `longest_repeating_subsequence`, `wildcard_match` (`?` and `*`), `count_palindromic_subsequences`, `is_interleaving` |
| `algokit.coins`       | `min_coins`, `count_change_ways`, `max_cuts` |
| `algokit.knapsack`    | 0/1 knapsack three ways: `knapsack_bottom_up`, `knapsack_brute_force`, `knapsack_memoized` |
| `algokit.arrays`      | `max_sums_no_adjacent`, `max_sum_no_adjacent`, `trapped_rain_water`, `min_jumps`, `max_gold`, `subset_sum`, `can_partition`, `count_product_subsequences`, `merge_sort`, `powerset`, `copy_set_bits` |
| `algokit.heaps`       | `MinHeap` (optionally bounded), `HeapOverflowError`, `running_medians`, `sort_k_sorted` |
| `algokit.trie`        | `Trie`, a set of words stored by shared prefixes |
| `algokit.graphs`      | `DirectedGraph` (BFS, DFS, cycle check, clone), `UndirectedGraph` (cycle check), `WeightedEdge`, `kruskal_mst` |
| `algokit.binary_tree` | `Node` and `inorder`, `level_order`, `reverse_level_order`, `zigzag_order`, `diagonal_order`, `boundary_order`, `left_view`, `right_view`, `top_view`, `bottom_view`, `height`, `diameter`, `mirror`, `to_doubly_linked_list`, `root_to_leaf_paths`, `max_root_to_leaf_sum`, `longest_path_sum`, `k_sum_paths` |
| `algokit.tree_checks` | `is_balanced`, `is_sum_tree`, `to_sum_tree`, `has_duplicate_subtree`, `leaves_at_same_level`, `largest_subtree_sum`, `max_non_adjacent_sum`, `is_mirror`, `is_isomorphic`, `lowest_common_ancestor`, `node_distance` |
| `algokit.bst`         | `inorder_neighbours`, `convert_to_bst`, `balance_bst` |
| `algokit.grid`        | `find_maze_paths`, `knight_min_steps` |

## Examples

```python
from algokit.sequences import edit_distance
from algokit.coins import min_coins, count_change_ways
from algokit.knapsack import knapsack_bottom_up

edit_distance("abc", "yabd")                              # 2
min_coins([1, 2, 4], 6)                                   # 2
min_coins([4], 6)                                         # None: cannot be made
count_change_ways([1, 5, 10, 25], 10)                     # 4
knapsack_bottom_up([1, 6, 10, 16], [1, 2, 3, 5], 7)       # 22
```

Heaps and tries:

```python
from algokit.heaps import MinHeap
from algokit.trie import Trie

heap = MinHeap(11)
for key in (3, 2, 1, 15, 5):
    heap.insert(key)
heap.extract_min()   # 1
heap.peek()          # 2

trie = Trie()
trie.insert("abc")
"abc" in trie        # True
trie.remove("abc")
"abc" in trie        # False
```

Graphs:

```python
from algokit.graphs import DirectedGraph, kruskal_mst

graph = DirectedGraph(4)
graph.add_edge(0, 1, 0)
graph.add_edge(1, 2, 0)
graph.add_edge(2, 0, 0)
graph.has_cycle()    # True
graph.bfs(0)         # [0, 1, 2]

weight, edges = kruskal_mst(3, [(0, 1, 4), (1, 2, 1), (0, 2, 3)])
weight               # 4
```

Binary trees:

```python
from algokit.binary_tree import Node, level_order, height

root = Node(1, Node(2, Node(4)), Node(3))
level_order(root)    # [1, 2, 3, 4]
height(root)         # 3 (counted in nodes)
```

## Errors

Errors are reported with exceptions: inserting into a full `MinHeap` raises
`HeapOverflowError`, removing a word that is not in a `Trie` raises
`KeyError`, vertices outside a graph raise `IndexError`, and invalid
arguments such as negative targets or non-positive denominations raise
`ValueError`.

## What it does not do

algokit is a library only: it has no command-line tool, reads no input
files and stores nothing on disk. Every function works on Python values
passed to it and returns its result.