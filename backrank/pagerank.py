"""Graph reading and PageRank power iterations."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from os import PathLike
from typing import Union

EPSILON = 1e-6
ALPHA = 0.85

Adjacency = Sequence[Sequence[int]]
PathType = Union[str, "PathLike[str]"]


class MatrixMarketError(ValueError):
    """Raised when a graph file is malformed."""


@dataclass(frozen=True)
class PageRankResult:
    """A converged rank vector and the number of iterations it took."""

    vector: list[float]
    iterations: int

    @property
    def total(self) -> float:
        """Sum of all entries of the rank vector."""
        return math.fsum(self.vector)


def l1_norm(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the L1 distance between two vectors of equal length."""
    if len(a) != len(b):
        raise ValueError(f"vectors differ in length: {len(a)} and {len(b)}")
    return sum(abs(x - y) for x, y in zip(a, b))


def _parse_ints(text: str, count: int) -> list[int] | None:
    tokens = text.split()
    if len(tokens) < count:
        return None
    try:
        return [int(token) for token in tokens[:count]]
    except ValueError:
        return None


def read_matrix_market(path: PathType) -> list[list[int]]:
    """Read a square Matrix Market file; each entry line "i j" is an arc i -> j.

    Returns the outgoing adjacency lists with zero-based vertex numbers, in
    the order the arcs appear in the file.
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

        dims = _parse_ints(line, 3)
        if dims is None:
            raise MatrixMarketError(f"invalid dimensions line: {line.strip()!r}")
        nrows, ncols, edge_count = dims
        if nrows != ncols:
            raise MatrixMarketError(
                f"graph must be square for PageRank ({nrows} x {ncols})"
            )
        if nrows < 0 or edge_count < 0:
            raise MatrixMarketError("dimensions must not be negative")

        adjacency: list[list[int]] = [[] for _ in range(nrows)]
        edge_lines = (entry for entry in stream if entry.strip())
        for index in range(edge_count):
            entry = next(edge_lines, None)
            pair = None if entry is None else _parse_ints(entry, 2)
            if pair is None:
                raise MatrixMarketError(f"cannot read edge {index}")
            source, target = pair
            if not (1 <= source <= nrows and 1 <= target <= nrows):
                raise MatrixMarketError(
                    f"index out of bounds in file: {source} {target}"
                )
            adjacency[source - 1].append(target - 1)

    return adjacency


def read_dense_matrix(path: PathType) -> list[list[int]]:
    """Read a size N followed by an N x N 0/1 matrix.

    Returns the adjacency lists: j is a neighbour of i when entry (i, j) is 1.
    """
    with open(path, encoding="utf-8") as stream:
        tokens = stream.read().split()
    try:
        values = [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"non-integer value in matrix file: {exc}") from None
    if not values:
        raise ValueError("missing matrix size")
    size, cells = values[0], values[1:]
    if size < 0:
        raise ValueError("matrix size must not be negative")
    if len(cells) < size * size:
        raise ValueError(
            f"expected {size * size} matrix entries, found {len(cells)}"
        )
    rows = (cells[i * size:(i + 1) * size] for i in range(size))
    return [[j for j, cell in enumerate(row) if cell == 1] for row in rows]


def _check_graph(adjacency: Adjacency) -> int:
    size = len(adjacency)
    if size == 0:
        raise ValueError("graph has no vertices")
    for source, targets in enumerate(adjacency):
        for target in targets:
            if not 0 <= target < size:
                raise ValueError(f"arc {source} -> {target} leaves the graph")
    return size


def simple_pagerank(adjacency: Adjacency, epsilon: float = EPSILON) -> PageRankResult:
    """Power iteration without damping; dangling vertices spread uniformly."""
    size = _check_graph(adjacency)
    ranks = [1.0 / size] * size
    iterations = 0
    while True:
        updated = [0.0] * size
        for rank, targets in zip(ranks, adjacency):
            if not targets:
                share = rank / size
                updated = [value + share for value in updated]
            else:
                share = rank / len(targets)
                for target in targets:
                    updated[target] += share
        diff = l1_norm(ranks, updated)
        ranks = updated
        iterations += 1
        if diff <= epsilon:
            return PageRankResult(ranks, iterations)


def true_pagerank(
    adjacency: Adjacency, alpha: float = ALPHA, epsilon: float = EPSILON
) -> PageRankResult:
    """Damped PageRank (random surfer) with uniform redistribution of dangling mass."""
    size = _check_graph(adjacency)
    ranks = [1.0 / size] * size
    iterations = 0
    while True:
        dangling = sum(rank for rank, targets in zip(ranks, adjacency) if not targets)
        base = (1.0 - alpha) / size
        base += alpha * dangling / size
        updated = [base] * size
        for rank, targets in zip(ranks, adjacency):
            if targets:
                share = alpha * rank / len(targets)
                for target in targets:
                    updated[target] += share
        diff = l1_norm(ranks, updated)
        ranks = updated
        iterations += 1
        if diff <= epsilon:
            return PageRankResult(ranks, iterations)


def format_pagerank(vector: Sequence[float]) -> str:
    """Render one "Page i : value" line per vertex."""
    return "\n".join(f"Page {index} : {value:.8f}" for index, value in enumerate(vector))