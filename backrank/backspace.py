"""Dead-end detection and the Backspace graph transformation."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass

from backrank.pagerank import MatrixMarketError, PathType

Adjacency = Sequence[Sequence[int]]


@dataclass(frozen=True)
class DeadEnd:
    """A vertex with no outgoing arc but at least one incoming arc."""

    vertex: int
    incoming: tuple[int, ...]

    @property
    def in_degree(self) -> int:
        """Number of arcs pointing at this vertex."""
        return len(self.incoming)


def _check_arcs(adjacency: Adjacency) -> int:
    size = len(adjacency)
    for source, targets in enumerate(adjacency):
        for target in targets:
            if not 0 <= target < size:
                raise ValueError(f"arc {source} -> {target} leaves the graph")
    return size


def incoming_lists(adjacency: Adjacency) -> list[list[int]]:
    """Return, for every vertex, the sources of the arcs that reach it.

    Sources are listed by increasing source vertex, then in the order of
    that source's outgoing list.
    """
    size = _check_arcs(adjacency)
    incoming: list[list[int]] = [[] for _ in range(size)]
    for source, targets in enumerate(adjacency):
        for target in targets:
            incoming[target].append(source)
    return incoming


def _dead_ends(
    adjacency: Adjacency, incoming: Sequence[Sequence[int]]
) -> list[DeadEnd]:
    return [
        DeadEnd(vertex, tuple(sources))
        for vertex, (targets, sources) in enumerate(zip(adjacency, incoming))
        if not targets and sources
    ]


def find_dead_ends(adjacency: Adjacency) -> list[DeadEnd]:
    """Return the dead ends of a graph in increasing vertex order."""
    return _dead_ends(adjacency, incoming_lists(adjacency))


def _int_fields(text: str, count: int) -> list[int] | None:
    tokens = text.split()
    if len(tokens) < count:
        return None
    try:
        return [int(token) for token in tokens[:count]]
    except ValueError:
        return None


def read_and_find_dead_ends(
    path: PathType,
) -> tuple[list[list[int]], list[list[int]], list[DeadEnd]]:
    """Read a Matrix Market graph and locate its dead ends.

    Each entry line "i j" is an arc i -> j. Returns the outgoing lists, the
    incoming lists and the dead ends; both lists keep the order in which the
    arcs appear in the file.
    """
    with open(path, encoding="utf-8") as stream:
        header = stream.readline()
        if not header:
            raise MatrixMarketError("missing header line")
        if not header.startswith("%%MatrixMarket"):
            raise MatrixMarketError("file is not in Matrix Market format")

        for line in stream:
            if not line.startswith("%"):
                break
        else:
            raise MatrixMarketError("missing dimensions line")

        dims = _int_fields(line, 3)
        if dims is None:
            raise MatrixMarketError(f"invalid dimensions line: {line.strip()!r}")
        size, _, edge_count = dims
        if size < 0 or edge_count < 0:
            raise MatrixMarketError("dimensions must not be negative")

        outgoing: list[list[int]] = [[] for _ in range(size)]
        incoming: list[list[int]] = [[] for _ in range(size)]
        entries = (entry for entry in stream if entry.strip())
        for index in range(edge_count):
            entry = next(entries, None)
            pair = None if entry is None else _int_fields(entry, 2)
            if pair is None:
                raise MatrixMarketError(f"cannot read edge {index}")
            source, target = pair
            if not (1 <= source <= size and 1 <= target <= size):
                raise MatrixMarketError(
                    f"index out of bounds in file: {source} {target}"
                )
            outgoing[source - 1].append(target - 1)
            incoming[target - 1].append(source - 1)

    return outgoing, incoming, _dead_ends(outgoing, incoming)


def create_random_dead_end(
    adjacency: list[list[int]], rng: random.Random | None = None
) -> int:
    """Remove every outgoing arc of a randomly chosen vertex that has some.

    The adjacency lists are changed in place; the chosen vertex is returned.
    """
    candidates = [vertex for vertex, targets in enumerate(adjacency) if targets]
    if not candidates:
        raise ValueError("cannot create a dead end: no vertex has an outgoing arc")
    vertex = (rng or random).choice(candidates)
    adjacency[vertex].clear()
    return vertex


def build_backspace_graph(
    adjacency: Adjacency, dead_ends: Sequence[DeadEnd]
) -> list[list[int]]:
    """Build the Backspace graph.

    Ordinary vertices are renumbered first, keeping their order. Each dead end
    is then replaced by one copy per incoming arc: the arc from its j-th parent
    leads to the j-th copy, and that copy has a single arc back to the parent.
    """
    size = _check_arcs(adjacency)
    for dead_end in dead_ends:
        if not 0 <= dead_end.vertex < size:
            raise ValueError(f"dead end {dead_end.vertex} is not in the graph")

    dead_vertices = {dead_end.vertex for dead_end in dead_ends}
    new_id: dict[int, int] = {}
    for vertex in range(size):
        if vertex not in dead_vertices:
            new_id[vertex] = len(new_id)

    next_id = len(new_id)
    first_copy: dict[int, int] = {}
    by_vertex: dict[int, DeadEnd] = {}
    for dead_end in dead_ends:
        first_copy[dead_end.vertex] = next_id
        by_vertex[dead_end.vertex] = dead_end
        next_id += dead_end.in_degree

    graph: list[list[int]] = [[] for _ in range(next_id)]

    for vertex, targets in enumerate(adjacency):
        if vertex in dead_vertices:
            continue
        row = graph[new_id[vertex]]
        for target in targets:
            if target in first_copy:
                positions = [
                    index
                    for index, parent in enumerate(by_vertex[target].incoming)
                    if parent == vertex
                ]
                if not positions:
                    raise ValueError(f"no copy found for {vertex} -> {target}")
                row.append(first_copy[target] + positions[-1])
            else:
                row.append(new_id[target])

    for dead_end in dead_ends:
        start = first_copy[dead_end.vertex]
        for offset, parent in enumerate(dead_end.incoming):
            if parent not in new_id:
                raise ValueError(
                    f"parent {parent} of dead end {dead_end.vertex} is itself a dead end"
                )
            graph[start + offset] = [new_id[parent]]

    return graph