# algokit

A small collection of classic algorithms in plain Python, with no
dependencies outside the standard library.

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

| Module | Functions and classes |
| --- | --- |
| `algokit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort`, `quick_sort`, `format_list` |
| `algokit.string_matching` | `transition_table`, `automaton_search`, `lps_table`, `kmp_search` |
| `algokit.optimization` | `knapsack` (0/1, dynamic programming), `greedy_knapsack` (by value/weight ratio), `rod_cut` |
| `algokit.graph_coloring` | `color_graph` (backtracking m-colouring) |
| `algokit.flow` | `min_cut` (augmenting paths found by breadth-first search), `FlowResult` |
| `algokit.vertex_cover` | `Graph` with `add_edge`, `neighbours` and `vertex_cover` |
| `algokit.job_assignment` | `lower_bound`, `find_min_cost` (branch and bound) |
| `algokit.cli` | `main`, behind the `algokit` command |

## Examples

### Sorting

Every sort takes any iterable and returns a new sorted list; the input is
left unchanged. `format_list` renders a list as `[a, b, c]`.

```python
from algokit.sorting import merge_sort, format_list

print(format_list(merge_sort([3, 1, 5, 2, 4])))  # [1, 2, 3, 4, 5]
```

### String matching

Both matchers return the start index of every match, overlapping ones
included. An empty pattern raises `ValueError`.

```python
from algokit.string_matching import kmp_search, automaton_search

text = "aabaacaadaabaaabaa"
print(kmp_search(text, "aaba"))        # [0, 9, 13]
print(automaton_search(text, "aaba"))  # [0, 9, 13]
```

The automaton matcher works over the lowercase letters `a`–`z`; any other
character resets it to the start state. `transition_table(pattern)` returns
the automaton itself, one dictionary from letter to next state per state, and
`lps_table(pattern)` returns the KMP prefix table.

### Knapsack and rod cutting

```python
from algokit.optimization import knapsack, greedy_knapsack, rod_cut

values = [300, 200, 400, 500]
weights = [2, 1, 5, 3]
print(knapsack(values, weights, 10))         # 1200, the exact optimum
print(greedy_knapsack(values, weights, 10))  # 1000, by value/weight ratio
print(rod_cut([1, 5, 8, 9, 10, 17, 20, 24, 30], 5))  # 13
```

`greedy_knapsack` takes whole items in falling order of value per unit of
weight while they still fit, so it can miss the optimum. `prices[i]` in
`rod_cut` is the price of a piece of length `i + 1`; asking for a length with
no price raises `ValueError`, as do mismatched `values` and `weights` and a
negative capacity in `knapsack`.

### Graph colouring

`color_graph(adjacency, colors)` takes a square 0/1 adjacency matrix and
returns a colour from `1..colors` for each vertex, or `None` when no such
colouring exists.

```python
from algokit.graph_coloring import color_graph

adjacency = [
    [0, 1, 1, 0],
    [1, 0, 1, 1],
    [1, 1, 0, 0],
    [0, 1, 0, 0],
]
print(color_graph(adjacency, 3))  # [1, 2, 3, 1]
print(color_graph(adjacency, 2))  # None
```

### Maximum flow and minimum cut

`min_cut` returns a `FlowResult` with the maximum flow value, the edges of a
minimum cut as `(u, v)` pairs, and the set of vertices on the source side.

```python
from algokit.flow import min_cut

capacities = [
    [0, 16, 13, 0, 0, 0],
    [0, 0, 10, 12, 0, 0],
    [0, 4, 0, 0, 14, 0],
    [0, 0, 9, 0, 0, 20],
    [0, 0, 3, 7, 0, 4],
    [0, 0, 0, 0, 0, 0],
]
result = min_cut(capacities, 0, 5)
print(result.max_flow)   # 23
print(result.cut_edges)  # ((1, 3), (4, 3), (4, 5))
```

### Vertex cover

`Graph.vertex_cover` takes both ends of a greedily built maximal matching,
which gives a cover at most twice the size of the smallest one. Vertices are
returned in ascending order.

```python
from algokit.vertex_cover import Graph

graph = Graph(4)
graph.add_edge(0, 1)
graph.add_edge(1, 2)
graph.add_edge(2, 3)
print(graph.vertex_cover())  # [0, 1, 2, 3]
print(graph.neighbours(1))   # (0, 2)
```

### Job assignment

`find_min_cost(cost_matrix)` returns the least total cost of giving job `i`
its own worker `j`, where `cost_matrix[i][j]` is that pairing's cost. Each
lower bound it computes is logged at debug level on the
`algokit.job_assignment` logger.

```python
from algokit.job_assignment import find_min_cost

print(find_min_cost([
    [9, 2, 7, 8],
    [6, 4, 3, 7],
    [5, 8, 1, 8],
    [7, 6, 9, 4],
]))  # 13
```

## Command line

Installing the package provides an `algokit` command.

```
algokit vertex-cover
```

reads the number of vertices and edges, then one `u v` pair per edge, all as
whitespace-separated integers from standard input, and prints a vertex cover
of that graph. For example:

```
printf '4 3\n0 1\n1 2\n2 3\n' | algokit vertex-cover
```

Malformed input or an out-of-range vertex prints an error to standard error
and exits with status 1.

Run with no command, or with `algokit hello`, it prints a greeting.

## What it does not do

The command line covers only the vertex cover. The other algorithms are
available from Python alone. `find_min_cost` reports the least cost but not
which worker goes to which job.