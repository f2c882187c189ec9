# backrank

backrank computes PageRank on a directed graph that it reads from a Matrix
Market file. It also computes the PageRank of the graph's *Backspace* graph so
that the two can be compared.

A dead end is a page with at least one incoming link and no outgoing link. To
build the Backspace graph, each dead end is replaced by one copy per incoming
link. Each copy has one link, back to the page it was reached from.

The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

```
backrank graph.mtx
```

If no file is given, the command prints a usage message and exits with status
1. Otherwise it runs these steps:

1. It reads the graph. Each entry line `i j` is an arc from page `i` to page
   `j`, with pages numbered from 1. Any columns after the first two are
   ignored.
2. It prints the number of nodes, edges and dead ends, then the adjacency
   lists.
3. If the graph has no dead end, it makes some. Three times in a row, it picks
   a page at random from those that still have outgoing links and removes all
   of that page's outgoing links.
4. It prints the damped PageRank of the graph, with damping factor 0.85 and
   tolerance 1e-6. It also prints the number of iterations and checks that the
   values sum to 1.
5. It builds the Backspace graph and prints it, along with both graph sizes
   (`N` and `N2`).
6. It prints the PageRank of the Backspace graph and checks it in the same way.

The command exits with status 1 in these cases:

- the file cannot be opened;
- the file is not valid Matrix Market;
- the graph cannot be ranked, for example because it has no vertices.

An input file looks like this:

```
%%MatrixMarket matrix coordinate pattern general
% optional comment lines
3 3 3
1 2
2 3
1 3
```

## Library

```python
from backrank.pagerank import read_matrix_market, true_pagerank, format_pagerank
from backrank.backspace import find_dead_ends, build_backspace_graph

adjacency = read_matrix_market("graph.mtx")
result = true_pagerank(adjacency, 0.85, 1e-6)
print(result.iterations, result.total)
print(format_pagerank(result.vector))

backspace = build_backspace_graph(adjacency, find_dead_ends(adjacency))
print(format_pagerank(true_pagerank(backspace, 0.85, 1e-6).vector))
```

A graph is a list of outgoing adjacency lists, with vertices numbered from 0.

### `backrank.pagerank`

- `read_matrix_market(path)` reads a square Matrix Market file and returns its
  adjacency lists. It raises `MatrixMarketError` (a `ValueError`) in these
  cases:
  - the header is missing;
  - the dimensions line is missing or unreadable;
  - the matrix is not square;
  - an edge is missing;
  - an index is out of range.
- `read_dense_matrix(path)` reads a size `N` followed by an `N x N` matrix of
  0 and 1 values. An entry of 1 is an arc.
- `simple_pagerank(adjacency, epsilon=1e-6)` runs the power iteration without
  damping. Dead ends spread their rank uniformly over all vertices.
- `true_pagerank(adjacency, alpha=0.85, epsilon=1e-6)` computes damped
  PageRank with the random-surfer model. The rank of dead ends is
  redistributed uniformly.
- Both iterations stop once the L1 change between two steps is at most
  `epsilon`. Each returns a `PageRankResult`, which has these members:
  - `vector`;
  - `iterations`;
  - `total`, the sum of `vector`.
- `l1_norm(a, b)` returns the L1 distance between two vectors.
- `format_pagerank(vector)` returns one `Page i : value` line per vertex.

### `backrank.backspace`

- `DeadEnd` holds a dead end's `vertex` and its `incoming` sources. Its
  `in_degree` is the number of incoming sources.
- `incoming_lists(adjacency)` returns the incoming adjacency lists.
- `find_dead_ends(adjacency)` returns the dead ends in increasing vertex order.
- `read_and_find_dead_ends(path)` reads a Matrix Market file. It returns the
  outgoing lists, the incoming lists and the dead ends.
- `create_random_dead_end(adjacency, rng=None)` clears the outgoing list of a
  random vertex that has outgoing arcs, and returns that vertex. It changes
  the lists in place.
- `build_backspace_graph(adjacency, dead_ends)` builds the Backspace graph.
  Ordinary vertices come first and keep their order. The copies of each dead
  end follow.

### `backrank.cli`

- `format_graph(adjacency, title)` returns a titled listing of the adjacency
  lists.
- `check_probability_vector(vector, name)` reports the sum of a vector and
  whether it is 1 within 1e-6.
- `main(argv=None)` is the entry point of the `backrank` command.

## Limitations

- The package does not plot or otherwise visualise rank vectors.
- The command line reads only Matrix Market files. Dense 0/1 matrix files can
  be read only through `read_dense_matrix` in the library.