# algokit

Classic algorithms and data structures in plain Python.

| Module | What it provides |
| --- | --- |
| `algokit.dinic` | `Dinic` maximum flow, `min_cut`, `find_edge`; `FlowEdge` |
| `algokit.bipartite_matching` | `DinicMatching`: `match`, `min_vertex_cover`, `max_independent_set` |
| `algokit.projects_and_tools` | `ProjectsAndTools`: maximum-profit project selection over shared tools |
| `algokit.min_cost_flow` | `MinCostFlow.solve_min_cost_flow` returning `(flow, cost)` |
| `algokit.assignment` | `AssignmentProblem.solve`: minimum-cost assignment of rows to columns |
| `algokit.bitmasks` | `iterate_bitmasks_with_popcount`, `iterate_submasks`, `iterate_supermasks`, `format_mask` |
| `algokit.submask_sums` | `submask_sums`, `supermask_sums`, `mobius_transform`, `super_mobius_transform`, `subset_convolution`, `reverse_subset_convolution` |
| `algokit.xor_basis` | `XorBasis`: `add`, `min_value`, `max_value`, `merge`, `from_union` |
| `algokit.splay_tree` | `SplayTree`: ordered multiset with rank, index and key-range queries |
| `algokit.splay_lazy` | `LazySplayTree` with `SplayChange`: range reverse / add / assign, `node_sum`, `node_max` |
| `algokit.online_prefix_max` | `OnlinePrefixMax` and `merge_into` |
| `algokit.ordered_set` | `OrderedSet` with `find_by_order` and `order_of_key` |
| `algokit.count_pairs` | `count_pairs(values, compare)` |
| `algokit.lcs` | longest common subsequence length and construction, `is_subsequence` |
| `algokit.distinct_subsequences` | `distinct_subsequences` modulo 998244353 |
| `algokit.modint` | `ModInt`: integers modulo a fixed modulus, with `inv` and `pow` |
| `algokit.ntt` | `NTT` polynomial multiplication, `multi_mod_multiply`, `multiply_exact`, CRT helpers |

The only runtime dependency is `sortedcontainers`.

## Installation

```
pip install .
```

Run the tests with:

```
pip install ".[test]"
pytest
```

## Examples

Counting pairs `i < j` with `compare(values[i], values[j])`:

```python
import operator
from algokit.count_pairs import count_pairs

count_pairs([3, 1, 2], operator.lt)   # 1
```

Longest common subsequence:

```python
from algokit.lcs import longest_common_subsequence, construct_longest_common_subsequence

longest_common_subsequence("ABCBDAB", "BDCABA")           # 4
construct_longest_common_subsequence("ABCBDAB", "BDCABA")  # a common subsequence of length 4
```

Enumerating bitmasks:

```python
from algokit.bitmasks import iterate_bitmasks_with_popcount, iterate_submasks

list(iterate_bitmasks_with_popcount(4, 2))  # [3, 5, 6, 9, 10, 12]
list(iterate_submasks(0b101))               # [5, 4, 1, 0]
```

Subset sums over masks and their inverse:

```python
from algokit.submask_sums import submask_sums, mobius_transform

sums = submask_sums(2, [1, 2, 3, 4])   # [1, 3, 4, 10]
mobius_transform(2, sums)              # [1, 2, 3, 4]
```

Maximum flow:

```python
from algokit.dinic import Dinic

graph = Dinic(4)
graph.add_directional_edge(0, 1, 3)
graph.add_directional_edge(0, 2, 2)
graph.add_directional_edge(1, 3, 2)
graph.add_directional_edge(2, 3, 3)
graph.flow(0, 3)        # 4
graph.min_cut(0)        # [(capacity, (from_node, to_node)), ...]
```

Polynomial multiplication modulo 998244353, or modulo any positive integer:

```python
from algokit.ntt import NTT, multi_mod_multiply

NTT().mod_multiply([1, 1], [1, 1])          # [1, 2, 1]
multi_mod_multiply([1, 2], [3, 4], 5)       # [3, 0, 3]
```

Ordered set with rank queries:

```python
from algokit.ordered_set import OrderedSet

s = OrderedSet([5, 1, 3])
s.find_by_order(1)   # 3
s.order_of_key(4)    # 2
```

## Command-line tools

Each tool reads its input from standard input and writes to standard output.
Vertex and edge indices in the input are 1-based unless stated otherwise.

- `algokit-dinic` — maximum flow from the first to the last vertex. Input:
  `N M` (or `directed N M` for directed edges) then `M` triples `a b capacity`.
- `algokit-matching` — size of a maximum bipartite matching. Input: `N M P`
  then `P` pairs `a b`.
- `algokit-projects` — maximum weight of a subgraph where edges earn their
  weight and vertices cost theirs. Input: `N M`, `N` vertex costs, then `M`
  triples `u v w`. Prints the best value; the chosen edge numbers (0-based) go
  to standard error.
- `algokit-min-cost-flow` — maximum flow and its minimum cost from the first to
  the last vertex. Input: `N M` then `M` lines `a b capacity cost`.
- `algokit-assignment` — minimum total cost of an assignment. Input: `N M`
  then an `N × M` cost matrix.
- `algokit-distinct-subsequences` — distinct nonempty subsequences modulo
  998244353. Input: `N` then `N` integers.
- `algokit-lcs` — length of a longest common subsequence of two words, then one
  such subsequence.
- `algokit-count-pairs` — counts of pairs `i < j` under `<`, `>`, `<=` and
  `>=`. Input: `N` then `N` integers.
- `algokit-masks submasks` / `algokit-masks supermasks` — reads `n mask` and
  lists each submask (or `n`-bit supermask) with its bits, lowest bit first.
- `algokit-subset-sums [sums|convolution]` — reads `N` and `2^N` values (and a
  second array of `2^N` values for `convolution`); prints submask and
  supermask sums, or the subset convolution and reverse subset convolution.
- `algokit-splay` — a `0`/`1` flag for unique keys, then commands
  `insert x`, `index i`, `less_than x`, `erase x`, one answer per command.
- `algokit-splay-lazy` — `N` and `N` values, then commands `insert i v`,
  `erase i`, `get i`, `sum l r`, `max l r`, `reverse l r`, `reattach l r i`,
  `add l r v`, `set l r v` (0-based, half-open ranges); finally prints the
  sequence forwards and backwards.
- `algokit-prefix-max` — `N` then `N` pairs `key value`; before each insertion
  prints the maximum value among keys strictly below `key`
  (`-2000000000000000005` when there is none).
- `algokit-orderset` — `Q` then `Q` commands `I x` (insert), `D x` (delete),
  `K k` (k-th smallest, or `invalid`) and `C x` (count of elements below `x`).
- `algokit-ntt` — `mod_multiply n m mod circular` then the two coefficient
  lists; prints the product coefficients modulo `mod`, one per line.

```
echo "4 4  1 2 3  1 3 2  2 4 2  3 4 3" | algokit-dinic
```

## Not included

There is no floating-point FFT and no arbitrary-precision integer type; Python's
built-in `int` and `algokit.ntt` cover exact polynomial products. There are no
tree-path structures such as lowest common ancestor queries.