"""Directed graph orderings (Kosaraju) and shortest paths in unweighted graphs."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterator, Sequence


def _postorder_from(
    start: int,
    adjacency: Sequence[Sequence[int]],
    visited: list[bool],
    out: list[int],
) -> None:
    """Depth-first search from start, appending vertices as they finish."""
    visited[start] = True
    stack: list[tuple[int, Iterator[int]]] = [(start, iter(adjacency[start]))]
    while stack:
        node, neighbours = stack[-1]
        for nxt in neighbours:
            if not visited[nxt]:
                visited[nxt] = True
                stack.append((nxt, iter(adjacency[nxt])))
                break
        else:
            stack.pop()
            out.append(node)


def dfs_finish_order(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Vertices 0..n-1 in decreasing order of depth-first finish time.

    Searches start from each unvisited vertex in increasing order. For an
    acyclic graph the result is a topological order.
    """
    visited = [False] * len(adjacency)
    finished: list[int] = []
    for vertex in range(len(adjacency)):
        if not visited[vertex]:
            _postorder_from(vertex, adjacency, visited, finished)
    finished.reverse()
    return finished


def kosaraju_order(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Vertices grouped by strongly connected component (Kosaraju's algorithm).

    The transposed graph is searched in decreasing finish order of the
    original; each component appears as one contiguous run, its vertices
    in the order the search finished them.
    """
    n = len(adjacency)
    transpose: list[list[int]] = [[] for _ in range(n)]
    for vertex, neighbours in enumerate(adjacency):
        for nxt in neighbours:
            transpose[nxt].append(vertex)

    visited = [False] * n
    strong: list[int] = []
    for vertex in dfs_finish_order(adjacency):
        if not visited[vertex]:
            _postorder_from(vertex, transpose, visited, strong)
    return strong


def shortest_path(
    edges: Sequence[tuple[int, int]], n: int, source: int, target: int
) -> list[int]:
    """Fewest-edge path from source to target in an undirected graph on 1..n.

    Raises ValueError when a vertex is out of range or target is unreachable.
    """
    for vertex in (source, target):
        if not 1 <= vertex <= n:
            raise ValueError(f"vertex {vertex} is outside 1..{n}")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for x, y in edges:
        adjacency[x].append(y)
        adjacency[y].append(x)

    parent: dict[int, int | None] = {source: None}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for nxt in adjacency[node]:
            if nxt not in parent:
                parent[nxt] = node
                queue.append(nxt)

    if target not in parent:
        raise ValueError(f"vertex {target} cannot be reached from {source}")
    path = [target]
    step = parent[target]
    while step is not None:
        path.append(step)
        step = parent[step]
    path.reverse()
    return path


def _format(values: list[int]) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Read 'n m' and m directed edges from standard input; print both orders."""
    tokens = sys.stdin.read().split()
    if len(tokens) < 2:
        print("expected the vertex and edge counts", file=sys.stderr)
        return 1
    numbers = [int(token) for token in tokens]
    n, m = numbers[0], numbers[1]
    pairs = numbers[2 : 2 + 2 * m]
    if len(pairs) < 2 * m:
        print("not enough edges in the input", file=sys.stderr)
        return 1
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in zip(pairs[::2], pairs[1::2]):
        adjacency[u].append(v)
    print(_format(dfs_finish_order(adjacency)))
    print(_format(kosaraju_order(adjacency)))
    return 0