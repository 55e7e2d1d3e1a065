# kata

A collection of small, self-contained solutions to classic programming
exercises. Each module covers one topic and needs nothing beyond the
standard library.

## Modules

| Module            | What it provides |
|-------------------|------------------|
| `kata.sliceops`   | `find_max`, `remove_duplicates`, `reverse_slice`, `filter_even` for lists of integers |
| `kata.coins`      | `min_coins` and `coin_combination` for making change |
| `kata.lis`        | `dp_longest_increasing_subsequence`, `optimized_lis`, `lis_elements` |
| `kata.graphs`     | `breadth_first_search`, `dijkstra`, `bellman_ford` on adjacency lists |
| `kata.containers` | `Pair`, `Stack`, `Queue`, `HashSet`, `union`, `intersection`, `difference` and list helpers |
| `kata.cache`      | `LRUCache`, `LFUCache`, `FIFOCache`, `ThreadSafeCache`, `new_cache`, `new_thread_safe_cache` |
| `kata.circuit`    | `CircuitBreaker` with `State`, `Metrics`, `Config` and the errors it raises |

## Lists, change making and subsequences

```python
from kata.sliceops import find_max, remove_duplicates, reverse_slice, filter_even
from kata.coins import min_coins, coin_combination
from kata.lis import optimized_lis, lis_elements

find_max([3, 1, 4, 1, 5, 9, 2, 6])     # 9
find_max([])                           # 0
remove_duplicates([3, 1, 4, 1, 5])     # [3, 1, 4, 5]
reverse_slice([1, 2, 3])               # [3, 2, 1], a new list
filter_even([1, 2, 3, 4])              # [2, 4]

min_coins(87, [1, 5, 10, 25, 50])      # 5
min_coins(3, [5, 10, 25])              # -1, the amount cannot be made
coin_combination(87, [1, 5, 10, 25, 50])  # {1: 2, 10: 1, 25: 1, 50: 1}

optimized_lis([10, 9, 2, 5, 3, 7, 101, 18])   # 4
lis_elements([10, 9, 2, 5, 3, 7, 101, 18])    # one strictly increasing subsequence of length 4
```

`min_coins` and `coin_combination` find a true minimum by dynamic
programming, so they also work for denominations where taking the largest
coin first would not. A negative amount or a non-positive denomination
raises `ValueError`.

## Shortest paths

Graphs are lists of adjacency lists; `weights[u][i]` is the weight of the
edge from `u` to `graph[u][i]`. A vertex that cannot be reached gets the
distance `UNREACHABLE` (1 000 000 000) and the predecessor `NO_PREDECESSOR`
(-1); the source's predecessor is also -1.

```python
from kata.graphs import breadth_first_search, dijkstra, bellman_ford

graph = [[1, 2], [0, 3, 4], [0, 5], [1], [1], [2]]
weights = [[5, 10], [5, 3, 2], [10, 2], [3], [2], [2]]

breadth_first_search(graph, 0)  # ([0, 1, 1, 2, 2, 2], [-1, 0, 0, 1, 1, 2])
dijkstra(graph, weights, 0)     # ([0, 5, 10, 8, 7, 12], [-1, 0, 0, 1, 1, 2])
```

`dijkstra` raises `ValueError` on a negative weight. `bellman_ford` accepts
negative weights and returns `(distances, has_path, predecessors)`, where
`has_path[v]` is false when `v` is unreachable or reached through a negative
cycle. All three raise `ValueError` for a source or edge outside the graph.

## Containers

```python
from kata.containers import Stack, Queue, HashSet, Pair, union, EmptyCollectionError

stack = Stack()
stack.push(1)
stack.push(2)
stack.peek()        # 2
stack.pop()         # 2
len(stack)          # 1

queue = Queue(["first", "second"])
queue.dequeue()     # "first"

Pair("hello", 42).swap()            # Pair(first=42, second='hello')

s = union(HashSet([1, 2, 3]), HashSet([3, 4]))
s.elements()        # [1, 2, 3, 4]
```

Popping, peeking, dequeuing or reading the front of an empty collection
raises `EmptyCollectionError`. The helpers `filter_items`, `map_items`,
`reduce_items`, `contains`, `find_index` and `remove_duplicates` work on any
iterable.

## Caches

```python
from kata.cache import CachePolicy, LFUCache, new_cache, new_thread_safe_cache

cache = new_cache(CachePolicy.LRU, 2)
cache.put("a", 1)
cache.get("a")          # 1
cache.get("b", "none")  # "none"
cache.lookup("a")       # (1, True)
len(cache)              # 1
cache.capacity          # 2
cache.hit_rate          # share of lookups that were hits
cache.delete("a")       # True
```

`LRUCache` evicts the least recently used entry, `LFUCache` the least
often used one (the oldest on a tie), and `FIFOCache` the first inserted,
whatever was looked up since. A cache of capacity 0 stores nothing; a
negative capacity raises `ValueError`. `ThreadSafeCache` wraps any cache
behind a lock, and `new_thread_safe_cache` builds one for a policy.

## Circuit breaker

```python
from kata.circuit import CircuitBreaker, Config, CircuitOpenError

breaker = CircuitBreaker(Config(timeout=10.0, ready_to_trip=lambda m: m.consecutive_failures >= 3))
breaker.call(lambda: "success")   # "success"
breaker.state                     # State.CLOSED
breaker.metrics                   # a snapshot of Metrics
```

While the circuit is closed, calls go through and are counted; whatever the
operation raises is passed on. When `ready_to_trip` says so (by default
after five consecutive failures) the circuit opens and refuses calls with
`CircuitOpenError`. Once `timeout` seconds have passed, the next call is let
through in the half-open state; further trial calls beyond `max_requests`
are refused with `TooManyRequestsError`. A success while half-open closes
the circuit and resets the metrics; a failure opens it again. Passing a set
`threading.Event` as `cancel` makes `call` raise `OperationCancelledError`
without running the operation. `on_state_change` is called with the
breaker's name and the old and new `State` on every transition. Durations
in `Config` are in seconds, and zero means the default.

## Command

Run a short demonstration of the circuit breaker, printing its state
changes and metrics:

```
kata-circuit
```

## What is not included

This is the only command the package installs. Searching sorted lists,
substring search, string reversal and regular-expression text extraction
are not part of it.

## Tests

The test suite uses pytest and lives in `tests/`:

```
pip install .[test]
pytest
```