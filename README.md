# contestlib

Classic algorithms and data structures in plain Python, with no runtime
dependencies. Everything is a library: import the module you need and call it.

## Install

```
pip install contestlib
```

To run the tests, install the `test` extra and run pytest:

```
pip install "contestlib[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `contestlib.fenwick` | `RangeFenwick`: add to a range and sum a range, positions 1..size |
| `contestlib.segment_tree` | `SumSegmentTree`: set one element, sum over `[left, right)` |
| `contestlib.subsegment` | `MaxSubsegmentTree`, `SegmentSummary`, `merge_summaries`: maximum subarray sum within a range |
| `contestlib.primes` | `simple_sieve`, `odd_sieve`, `bitwise_sieve`, `segmented_sieve`, `prime_factorization` |
| `contestlib.trie` | `LetterTrie`: counts how often each word of ASCII letters was inserted |
| `contestlib.catalan` | `power_mod`, `modular_inverse`, `BinomialTable` with `n_choose_r` and `catalan` |
| `contestlib.closest_pair` | `closest_pair_distance_squared`, `sorted_neighbour_distance_squared` |
| `contestlib.graph` | `dfs_times`, `DfsResult`, `bfs_levels`, `dijkstra`, `floyd_warshall`, `reconstruct_path` |
| `contestlib.avl` | `AVLTree`, `AVLNode` |
| `contestlib.hashing` | `DoubleHash`, `find_occurrences`, `PolynomialHash`, `single_hash_occurrences`, `rabin_karp` |
| `contestlib.lcs` | `longest_common_substring`, `common_substring_of_length` |
| `contestlib.suffix_array` | `build_suffix_array`, `SubstringIndex` |

## Notes on conventions

- `RangeFenwick` positions are 1-based and ranges inclusive; `prefix_sum(0)` is 0.
- `SumSegmentTree.query(left, right)` covers the half-open range `[left, right)`.
- `MaxSubsegmentTree.query(left, right)` takes a 0-based inclusive range and
  returns a `SegmentSummary`; its `best` field is the maximum subsegment sum.
- `simple_sieve` and `odd_sieve` return primes below `limit`; `bitwise_sieve`
  includes `limit`. `segmented_sieve(lower, upper, primes)` returns the primes in
  `[lower, upper]` and needs every prime up to `sqrt(upper)` in `primes`.
- `prime_factorization(n, primes)` returns `(prime, exponent)` pairs.
- `LetterTrie` ignores spaces and raises `ValueError` for other non-letters;
  `search` of a word with no letters returns 1.
- `BinomialTable(limit, modulus=100000007)` precomputes factorials below `limit`;
  `n_choose_r` returns 0 when `r` is outside `0..n`.
- `closest_pair_distance_squared` is exact. `sorted_neighbour_distance_squared` is
  exact for up to 100 points; for more it only compares neighbours in y order.
- Graph functions accept a mapping or a sequence as adjacency. `dijkstra` expects
  `(neighbour, cost)` pairs. `floyd_warshall` takes a square matrix with
  `math.inf` for missing edges and returns distances and a next-hop table for
  `reconstruct_path`, which raises `ValueError` when there is no path.
- `AVLTree` keeps duplicates (to the right), iterates in sorted order and
  supports `len()` and `height()`.
- `DoubleHash` and `PolynomialHash` use 1-based inclusive positions.
  `find_occurrences` returns 1-based starts; `single_hash_occurrences` and
  `rabin_karp(pattern, text)` return 0-based starts. `rabin_karp` is meant for
  lowercase text and `DoubleHash` for ASCII letters.
- `SubstringIndex` appends `$` to the text before building its suffix array.

## Examples

```python
from contestlib.segment_tree import SumSegmentTree
from contestlib.fenwick import RangeFenwick
from contestlib.primes import simple_sieve, prime_factorization
from contestlib.catalan import BinomialTable
from contestlib.hashing import find_occurrences, rabin_karp
from contestlib.suffix_array import SubstringIndex

tree = SumSegmentTree([1, 3, 4, 5, 4])
tree.query(0, 4)          # 13
tree.modify(0, 5)
tree.query(0, 4)          # 17

bit = RangeFenwick(10)
bit.update(2, 5, 3)       # add 3 to positions 2..5
bit.query(1, 10)          # 12

prime_factorization(360, simple_sieve(100))   # [(2, 3), (3, 2), (5, 1)]

BinomialTable(100).catalan(3)                 # 5

find_occurrences("abababaa", "aba")           # [1, 3, 5]
rabin_karp("aba", "abababaa")                 # [0, 2, 4]

SubstringIndex("banana").contains("nan")      # True
```

## What it does not do

contestlib has no command-line programs and reads no input files; it offers
functions and classes to call from your own code.