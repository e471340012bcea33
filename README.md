# drillbox

A collection of small, self-contained Python modules. It has no dependencies
outside the standard library.

## Modules

- `drillbox.employees`: `Employee` records and a `Manager` that keeps them in
  order. `add_employee` appends (duplicate ids are allowed), `remove_employee`
  drops the first employee with a given id, `find_employee` returns the first
  match or `None`, and `average_salary` returns the mean salary, or `0.0` when
  there are no employees.
- `drillbox.lis`: longest strictly increasing subsequence.
  `dp_longest_increasing_subsequence` runs in O(n²), `optimized_lis` runs in
  O(n log n), and `lis_elements` returns one longest subsequence.
- `drillbox.graphs`: single-source shortest paths over adjacency lists with
  `breadth_first_search`, `dijkstra` and `bellman_ford`. Unreachable vertices
  get the distance `INFINITY` (1,000,000,000) and the predecessor
  `NO_PREDECESSOR` (-1). `dijkstra` raises `ValueError` on a negative weight;
  `bellman_ford` also returns a `has_path` list that is false for unreachable
  vertices and for vertices a negative cycle can reach.
- `drillbox.generic_collections`: `Pair` (with `swap`), `Stack`, `Queue` and an
  insertion-ordered `Set`; the set operations `union`, `intersection` and
  `difference`; and the helpers `filter_items`, `map_items`, `reduce_items`,
  `contains`, `find_index` and `remove_duplicates`. Taking from an empty stack
  or queue raises `EmptyCollectionError`.
- `drillbox.rate_limit`: `TokenBucketLimiter`, `SlidingWindowLimiter` and
  `FixedWindowLimiter`. Each offers `allow`, `allow_n`, `wait` and `wait_n`
  (which raise `TimeoutError` when the timeout would pass first), `reset`,
  `metrics` (a `RateLimiterMetrics` snapshot), and the `limit` and `burst`
  properties. Every limiter accepts a `clock` and a `sleep` keyword for
  testing. `create_limiter` builds one from a `RateLimiterConfig` and raises
  `ValueError` for an invalid one, and `RateLimitMiddleware` is a WSGI
  middleware that answers `429 Too Many Requests` when the limiter refuses.

## Examples

```python
from drillbox.employees import Employee, Manager

manager = Manager()
manager.add_employee(Employee(id=1, name="Alice", age=30, salary=70000))
manager.add_employee(Employee(id=2, name="Bob", age=25, salary=65000))
manager.remove_employee(1)
manager.average_salary()        # 65000.0
manager.find_employee(2).name   # "Bob"
```

```python
from drillbox.lis import lis_elements, optimized_lis

optimized_lis([10, 9, 2, 5, 3, 7, 101, 18])  # 4
lis_elements([10, 9, 2, 5, 3, 7, 101, 18])   # [2, 5, 7, 101]
```

```python
from drillbox.graphs import dijkstra

graph = [[1, 2], [0, 3, 4], [0, 5], [1], [1], [2]]
weights = [[5, 10], [5, 3, 2], [10, 2], [3], [2], [2]]
dijkstra(graph, weights, 0)
# ([0, 5, 10, 8, 7, 12], [-1, 0, 0, 1, 1, 2])
```

```python
from drillbox.generic_collections import EmptyCollectionError, Stack

stack = Stack()
stack.push(1)
stack.pop()       # 1
try:
    stack.pop()
except EmptyCollectionError:
    pass
```

```python
from drillbox.rate_limit import TokenBucketLimiter

limiter = TokenBucketLimiter(rate=10, burst=5)
allowed = sum(limiter.allow() for _ in range(10))  # 5
limiter.metrics().denied_requests                  # 5
```

## What it does not do

drillbox is a library only: it installs no command-line tool, and
`RateLimitMiddleware` wraps a WSGI application but does not serve one. Limiter
state lives in the memory of a single process.

## Running the tests

```
pip install -e ".[test]"
pytest
```