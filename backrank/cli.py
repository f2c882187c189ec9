"""Command line entry point: PageRank on a graph and on its Backspace graph."""

from __future__ import annotations

import math
import random
import sys
from collections.abc import Sequence

from backrank.backspace import (
    build_backspace_graph,
    create_random_dead_end,
    find_dead_ends,
    read_and_find_dead_ends,
)
from backrank.pagerank import (
    EPSILON,
    MatrixMarketError,
    format_pagerank,
    true_pagerank,
)

RANDOM_DEAD_ENDS = 3


def format_graph(adjacency: Sequence[Sequence[int]], title: str) -> str:
    """Render a titled listing with one "i -> targets" line per vertex."""
    lines = [f"--- {title} ---"]
    lines.extend(
        f"{vertex} -> " + "".join(f"{target} " for target in targets)
        for vertex, targets in enumerate(adjacency)
    )
    return "\n".join(lines)


def check_probability_vector(vector: Sequence[float], name: str) -> str:
    """Report the sum of a vector and whether it is a probability vector."""
    total = math.fsum(vector)
    lines = [f"Sum {name} = {total:.12f}"]
    if abs(total - 1.0) < EPSILON:
        lines.append(f"Check OK: {name} is a probability vector")
    else:
        lines.append(f"Error: {name} does not sum to 1")
    return "\n".join(lines)


def _usage(program: str) -> str:
    return f"Usage : {program} <file.mtx>\nExample : {program} test2.mtx"


def main(argv: Sequence[str] | None = None) -> int:
    """Run both PageRank variants on the Matrix Market file named in argv."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(_usage("backrank"))
        return 1
    path = args[0]
    rng = random.Random()

    print(f"\nReading file: {path}")
    try:
        adjacency, _, dead_ends = read_and_find_dead_ends(path)
    except OSError as exc:
        print(f"Error opening file {path}: {exc}", file=sys.stderr)
        return 1
    except MatrixMarketError as exc:
        print(f"Error reading file {path}: {exc}", file=sys.stderr)
        return 1

    edge_count = sum(len(targets) for targets in adjacency)
    print(
        f"Read finished: {len(adjacency)} nodes, {edge_count} edges. "
        f"Found {len(dead_ends)} dead ends."
    )
    print()
    print(format_graph(adjacency, "Original graph"))

    if not dead_ends:
        print("\nNo dead end detected: creating dead ends at random.")
        for _ in range(RANDOM_DEAD_ENDS):
            try:
                vertex = create_random_dead_end(adjacency, rng)
            except ValueError:
                print("Cannot create a dead end: no vertex has an outgoing arc.")
                continue
            print(f"Creating a dead end: removing the outgoing arcs of vertex {vertex}")
        dead_ends = find_dead_ends(adjacency)

    print(f"\nNumber of dead ends used = {len(dead_ends)}")

    try:
        print("\n--- Google PageRank ---")
        google = true_pagerank(adjacency)
        print(f"True PageRank converged in {google.iterations} iterations")
        print(format_pagerank(google.vector))
        print()
        print(check_probability_vector(google.vector, "Google PageRank"))

        backspace = build_backspace_graph(adjacency, dead_ends)
        print()
        print(format_graph(backspace, "Backspace graph"))
        print(f"\nN = {len(adjacency)}, N2 = {len(backspace)}")

        print("\n--- Backspace PageRank ---")
        result = true_pagerank(backspace)
        print(f"True PageRank converged in {result.iterations} iterations")
        print(format_pagerank(result.vector))
        print()
        print(check_probability_vector(result.vector, "Backspace PageRank"))
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())