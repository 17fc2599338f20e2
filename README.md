# algolab

A small collection of classic data structures and algorithms for study, each
area with a demonstration command. There are no third-party dependencies.

## Install

```
pip install .
```

## Modules

### `algolab.fifo`

`Queue` is a first-in, first-out queue of integers.

- `put(value)` adds a value at the back.
- `get()` removes and returns the front value, and `peek()` returns it without
  removing it. Both raise `IndexError` on an empty queue.
- `len(queue)` and iteration go front to back.
- `render()` returns one ` Item : <value>` line per value.

### `algolab.graph`

`Graph(vertices=10)` is a directed graph on a square 0/1 adjacency matrix.

- `add_edge(row, column)` adds the edge `row -> column`. A vertex outside
  `0..vertices-1` raises `IndexError`.
- `in_degrees()` returns the number of incoming edges of every vertex.
- `render_matrix()` returns the matrix, one line per row.
- `topological_steps()` yields a `SortStep` for every round of a breadth-first
  (Kahn) topological sort. Each step holds `queued`, `matrix`, `in_degrees`
  (with -1 for vertices already placed) and the `order` so far. The graph is
  left unchanged, and a cycle raises `ValueError`.

`bfs_topological_sort(graph, out=None)` writes every step to `out` (standard
output by default) and returns the vertex order. `example_graph()` builds the
ten-vertex sample graph.

### `algolab.linked_list`

`LinkedList(values=())` is a singly linked list of integers.

- `push_front(value)` and `append(value)` add a value at either end.
- `find(value)` returns the position of the first equal item, or `None`.
- `remove(value)` removes the first equal item and returns whether one was found.
- `clear()` removes every item.
- The list supports `len`, `in`, forward iteration and `reversed`.
- `render()` returns the items, each followed by a space.

### `algolab.hashing`

`hash_func(table_size, key)` returns `key % table_size`.

`HashTable(size=11)` is a fixed-size table that uses separate chaining.

- `insert(key)` adds a key at the front of its bucket.
- `index_of(key)` returns the bucket of a key, and `bucket(index)` returns the
  keys in that bucket, front first.
- `key in table`, `len(table)` and `clear()` work as expected.
- `render()` returns one `HashTable[i] --> keys` line per bucket.

A size that is not positive raises `ValueError`.

### `algolab.random_data`

- `random_integer(max_value, rng=None)` returns an integer from 0 to
  `max_value` inclusive.
- `random_int_array(size, max_value, rng=None)` returns a list of such integers.
- `random_char(upper_case, rng=None)` returns one ASCII letter.
- `random_string(upper_case, max_length, rng=None)` returns a string of
  1 to `max_length + 1` letters.

Pass a `random.Random` instance as `rng` to get results you can reproduce.

### `algolab.sorting`

- `is_in_order(values)` tells whether the values are in ascending order.
- `bubble_sort`, `insertion_sort` and `quick_sort` sort a list in place into
  ascending order. `quick_sort` uses the last element as the pivot.
- `selection_sort` sorts in place by repeated selection, with the largest
  value first, so it gives descending order.
- `render_array(values)` returns one `Array[n] ....: value` line per element,
  numbered from 1.

## Example

```python
from algolab.hashing import HashTable

table = HashTable(11)
for key in (44, 666, 27, 102):
    table.insert(key)
print(table.render())
print(27 in table)
```

## Commands

```
algolab-toposort
```
Prints the sample graph and then each round of its breadth-first topological
sort.

```
algolab-hashing [KEY ...] [--size N]
```
Inserts the given keys into a chained hash table of `N` buckets (11 by
default) and prints its buckets. Without keys, it uses a built-in set of
eleven keys.

```
algolab-sorting [--size N] [--max-value M] [--algorithm {bubble,insertion,quick,selection}] [--seed S]
```
Fills an array with `N` random integers from 0 to `M` (defaults 100 and
10000), then prints it before and after sorting and says whether it is in
order. The default algorithm is `quick`.

## Limits

`algolab-toposort` only runs on the built-in sample graph. It cannot read a
graph from a file or from the command line. To sort your own graph, build it
with `Graph` in Python.

## Tests

```
pip install .[test]
pytest
```