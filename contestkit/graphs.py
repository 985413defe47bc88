"""Graph traversal, shortest paths, spanning trees and disjoint sets."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from dataclasses import dataclass

INF = 9999
"""Distance that stands for "not reached"; paths this long are never taken."""

_NO_PARENT = -1


def _check_count(vertex_count: int) -> None:
    if vertex_count < 0:
        raise ValueError(f"vertex count must not be negative, got {vertex_count}")


def _check_vertex(vertex_count: int, *vertices: int) -> None:
    for vertex in vertices:
        if not 0 <= vertex < vertex_count:
            raise ValueError(
                f"vertex {vertex} is out of range for {vertex_count} vertices"
            )


def _directed_adjacency(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    _check_count(vertex_count)
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for a, b in edges:
        _check_vertex(vertex_count, a, b)
        adjacency[a].append(b)
    return adjacency


def _weighted_adjacency(
    vertex_count: int, edges: Iterable[tuple[int, int, int]]
) -> list[list[tuple[int, int]]]:
    _check_count(vertex_count)
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for u, v, weight in edges:
        _check_vertex(vertex_count, u, v)
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))
    return adjacency


def _dfs_tree(
    adjacency: list[list[int]], visited: list[bool], parent: list[int], root: int
) -> tuple[list[int], int]:
    """Walk one depth-first tree; return its post-order and its cycle hits."""
    order: list[int] = []
    hits = 0
    visited[root] = True
    stack = [(root, iter(adjacency[root]))]
    while stack:
        vertex, neighbours = stack[-1]
        for neighbour in neighbours:
            if not visited[neighbour]:
                visited[neighbour] = True
                parent[neighbour] = vertex
                stack.append((neighbour, iter(adjacency[neighbour])))
                break
            if parent[neighbour] != vertex:
                hits += 1
        else:
            stack.pop()
            order.append(vertex)
    return order, hits


def dfs_postorder(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return every vertex of a directed graph in depth-first post-order.

    Roots are taken in increasing vertex order, neighbours in edge order.
    """
    return [
        vertex
        for component in analyze_graph(vertex_count, edges).components
        for vertex in component
    ]


@dataclass(frozen=True)
class GraphReport:
    """Depth-first trees of a directed graph and the cycle edges seen."""

    components: tuple[tuple[int, ...], ...]
    cycle_count: int

    @property
    def component_count(self) -> int:
        return len(self.components)

    @property
    def has_cycle(self) -> bool:
        return self.cycle_count > 0


def analyze_graph(vertex_count: int, edges: Iterable[tuple[int, int]]) -> GraphReport:
    """Split a directed graph into depth-first trees and look for cycles.

    An edge counts towards a cycle when it reaches an already visited vertex
    that was not discovered from the edge's own tail.
    """
    adjacency = _directed_adjacency(vertex_count, edges)
    visited = [False] * vertex_count
    parent = [_NO_PARENT] * vertex_count
    components: list[tuple[int, ...]] = []
    cycles = 0
    for root in range(vertex_count):
        if not visited[root]:
            order, hits = _dfs_tree(adjacency, visited, parent, root)
            components.append(tuple(order))
            cycles += hits
    return GraphReport(components=tuple(components), cycle_count=cycles)


def dijkstra(
    vertex_count: int, edges: Iterable[tuple[int, int, int]], source: int
) -> list[tuple[int, int]]:
    """Shortest distances from ``source`` in an undirected weighted graph.

    Returns ``(vertex, distance)`` pairs in the order vertices are settled,
    leaving out the source itself and every vertex not reached below ``INF``.
    """
    adjacency = _weighted_adjacency(vertex_count, edges)
    _check_vertex(vertex_count, source)
    key = [INF] * vertex_count
    parent = [_NO_PARENT] * vertex_count
    done = [False] * vertex_count
    key[source] = 0
    heap = [(0, source)]
    settled: list[tuple[int, int]] = []
    while heap:
        _, u = heapq.heappop(heap)
        if done[u]:
            continue
        done[u] = True
        if parent[u] != _NO_PARENT:
            settled.append((u, key[u]))
        for v, weight in adjacency[u]:
            if not done[v] and key[u] + weight < key[v]:
                key[v] = key[u] + weight
                parent[v] = u
                heapq.heappush(heap, (key[v], v))
    return settled


def prim_mst(
    vertex_count: int, edges: Iterable[tuple[int, int, int]], start: int
) -> tuple[list[tuple[int, int]], int]:
    """Minimum spanning tree grown from ``start``.

    Returns the chosen ``(parent, vertex)`` edges in the order they join the
    tree, and the total weight of the tree.
    """
    adjacency = _weighted_adjacency(vertex_count, edges)
    _check_vertex(vertex_count, start)
    key = [INF] * vertex_count
    parent = [_NO_PARENT] * vertex_count
    in_tree = [False] * vertex_count
    key[start] = 0
    heap = [(0, start)]
    chosen: list[tuple[int, int]] = []
    total = 0
    while heap:
        _, u = heapq.heappop(heap)
        if in_tree[u]:
            continue
        in_tree[u] = True
        total += key[u]
        if parent[u] != _NO_PARENT:
            chosen.append((parent[u], u))
        for v, weight in adjacency[u]:
            if not in_tree[v] and weight < key[v]:
                key[v] = weight
                parent[v] = u
                heapq.heappush(heap, (key[v], v))
    return chosen, total


class DisjointSet:
    """Union-find forest with path compression and union by rank.

    ``children`` records, for every root, the roots linked under it in order.
    The rank of the absorbing root grows on every link that does not go to
    the strictly higher-ranked side.
    """

    def __init__(self, size: int) -> None:
        _check_count(size)
        self.parent = list(range(size))
        self.rank = [0] * size
        self.children: list[list[int]] = [[] for _ in range(size)]

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, x: int) -> int:
        """Return the root of ``x``, compressing the path on the way."""
        _check_vertex(len(self.parent), x)
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Join the sets of ``x`` and ``y``; False if they were already one."""
        u, v = self.find(x), self.find(y)
        if u == v:
            return False
        if self.rank[u] > self.rank[v]:
            self.parent[v] = u
            self.children[u].append(v)
        else:
            self.parent[u] = v
            self.children[v].append(u)
            self.rank[v] += 1
        return True


def kruskal_mst(
    vertex_count: int, edges: Iterable[tuple[int, int, int]]
) -> tuple[list[tuple[int, int, int]], int]:
    """Minimum spanning forest by Kruskal's method.

    Edges are considered by increasing weight, equal weights in input order.
    Returns the chosen ``(u, v, weight)`` edges and their total weight.
    """
    _check_count(vertex_count)
    edge_list = list(edges)
    for u, v, _ in edge_list:
        _check_vertex(vertex_count, u, v)
    forest = DisjointSet(vertex_count)
    chosen: list[tuple[int, int, int]] = []
    total = 0
    for u, v, weight in sorted(edge_list, key=lambda edge: edge[2]):
        if forest.union(u, v):
            chosen.append((u, v, weight))
            total += weight
    return chosen, total


@dataclass(frozen=True)
class ForestReport:
    """State of a disjoint-set forest after a run of unions."""

    parents: tuple[int, ...]
    children: dict[int, tuple[int, ...]]
    cycle_edges: tuple[tuple[int, int], ...]

    @property
    def component_count(self) -> int:
        """Number of vertices that ever took another root under them."""
        return len(self.children)

    @property
    def has_cycle(self) -> bool:
        return bool(self.cycle_edges)


def disjoint_forest(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> ForestReport:
    """Union the ends of every edge and report the resulting forest."""
    forest = DisjointSet(vertex_count)
    cycle_edges: list[tuple[int, int]] = []
    for u, v in edges:
        _check_vertex(vertex_count, u, v)
        if not forest.union(u, v):
            cycle_edges.append((u, v))
    return ForestReport(
        parents=tuple(forest.parent),
        children={
            root: tuple(linked)
            for root, linked in enumerate(forest.children)
            if linked
        },
        cycle_edges=tuple(cycle_edges),
    )