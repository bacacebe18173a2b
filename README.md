# structkit

A small collection of classic data structures and algorithms (a directed
weighted graph, an open-addressing hash table, a binary search tree, quicksort
and binary search) plus a few interactive command-line tools built on them for
working with graphs, server logs and city route networks.

Nothing outside the Python standard library is needed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library

| Module                | What it provides                                                      |
|-----------------------|-----------------------------------------------------------------------|
| `structkit.graph`     | `Edge`, `Route` and `Graph`: a directed, weighted adjacency-list graph with BFS, DFS and Dijkstra |
| `structkit.hashtable` | `StudentIdTable`: an open-addressing hash table with linear probing   |
| `structkit.bst`       | `BST`: a binary search tree that keeps duplicates                     |
| `structkit.sorting`   | `quick_sort` and `binary_search`                                      |
| `structkit.log`       | `LogRecord`, `parse_log_line` and `read_logs`                         |
| `structkit.log_sort`  | `date_bound`, `sort_by_date` and `logs_between`                       |
| `structkit.cities`    | `CityNetworks`, `load_networks`, `sorted_cities` and `format_adjacency` |

### Graphs

```python
from structkit.graph import Edge, Graph

graph = Graph(
    [0, 1, 2, 3, 4, 5, 6, 7],
    [
        Edge(0, 2, 9), Edge(0, 3, 9), Edge(1, 0, 7), Edge(2, 0, 9),
        Edge(2, 1, 5), Edge(2, 6, 7), Edge(3, 1, 8), Edge(3, 7, 1),
        Edge(4, 2, 7), Edge(4, 6, 9), Edge(5, 1, 1), Edge(5, 3, 9),
        Edge(6, 4, 3), Edge(7, 5, 2),
    ],
)

print(graph.bfs(0))          # breadth-first visiting order from vertex 0
print(graph.dfs(0))          # depth-first visiting order from vertex 0
routes = graph.dijkstra(0)   # a Route (vertex, path, cost) for every vertex
print(graph.format_routes(routes))
print(graph.shortest_distance(0, 5))
print(graph.describe())      # the adjacency lists as text
```

Edges are directed and vertices keep their insertion order. Adding a vertex
that already exists (unless `exist_ok=True`), an edge whose endpoints are
missing, or a second edge between the same pair of vertices raises
`ValueError`, as does starting a traversal from an unknown vertex. A vertex
that cannot be reached gets a `Route` whose `cost` is `None`.

### Student-ID hash table

`StudentIdTable` stores student IDs such as `A01234567`. The leading letter is
dropped and the digits are hashed, with collisions resolved by linear probing;
removed entries leave a tombstone. Inserting a duplicate, inserting into a full
table, or removing an ID that is not there raises `ValueError`. `find` returns
the slot index, or `None` when the ID is absent.

```python
from structkit.hashtable import StudentIdTable

table = StudentIdTable()          # 50 slots by default
table.insert("A01234567")
print(table.find("A01234567"))
table.remove("A01234567")
print(table.describe())
```

### Binary search tree

Equal values are stored in the right subtree, so `count` reports duplicates.

```python
from structkit.bst import BST

tree = BST([50, 30, 70, 30])
print(30 in tree, tree.count(30), tree.height())   # True 2 3
print(tree.inorder())                              # [30, 30, 50, 70]
print(tree.visit(1))                               # preorder as "50->30->30->70->"
print(tree.ancestors(70))                          # [50]
print(tree.render())
tree.remove(30)
```

### Sorting and searching

```python
from structkit.sorting import binary_search, quick_sort

items = [5, 3, 8, 1]
quick_sort(items)                 # in place; an optional key= is accepted
print(items, binary_search(items, 8))
```

### Log records

Log lines have the form `Mon DD YYYY HH:MM:SS IP message...`. `read_logs`
turns an iterable of such lines into `LogRecord` objects, which order by their
`date_key`; `ip_key` gives a key that orders by IP address first.

```python
from structkit.log import read_logs
from structkit.log_sort import date_bound, logs_between, sort_by_date

with open("log.txt") as handle:
    records = sort_by_date(read_logs(handle))
start = date_bound("2020", "Jun", "01", "08")
end = date_bound("2020", "Jun", "02", "18")
for record in logs_between(records, start, end):
    print(record.format_line())
```

## Command-line tools

| Command              | What it does                                                              |
|----------------------|---------------------------------------------------------------------------|
| `structkit-graph`    | A numbered menu for building a graph of integers by hand: add and remove vertices and edges, print it, run BFS, DFS and Dijkstra. `--demo` runs the traversals on a built-in sample graph instead |
| `structkit-log-sort` | Reads a log (default `log603.txt`), writes it sorted by date, then asks for two dates and writes the entries strictly between them |
| `structkit-cities`   | Reads a CSV of city connections (default `EuropeCities.csv`) into train and car networks, then offers a menu to sort cities, write adjacency lists, traverse from a city and report the shortest distance between two cities |

Each tool reads its answers from standard input. Output file names can be
changed with options; run any of them with `--help` to see them:

```
structkit-graph --help
structkit-log-sort --help
structkit-cities --help
```

## What is not included

- There is no command-line front end for `StudentIdTable`; use it from Python.
- There are no heap or linked-list structures, and no tools for sorting logs by
  IP address, selecting an IP range, counting entries per month, or ranking the
  most repeated IP addresses. `LogRecord.ip_key` and `BST.count` are available
  as building blocks for such tasks.