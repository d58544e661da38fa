"""Graph traversal, cycle detection, ordering and connectivity."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class GraphNode:
    """A node of an undirected graph; nodes compare and hash by identity."""

    val: int
    neighbors: list[GraphNode] = field(default_factory=list, repr=False)


class DisjointSet:
    """Union-find over the elements ``1..n`` with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} is out of range")
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if they were already one."""
        x_root, y_root = self.find(x), self.find(y)
        if x_root == y_root:
            return False
        if self._rank[x_root] > self._rank[y_root]:
            self._parent[y_root] = x_root
        elif self._rank[y_root] > self._rank[x_root]:
            self._parent[x_root] = y_root
        else:
            self._parent[y_root] = x_root
            self._rank[x_root] += 1
        return True


def _directed(num_nodes: int, edges: Sequence[Sequence[int]]) -> list[list[int]]:
    adj: list[list[int]] = [[] for _ in range(num_nodes)]
    for u, v, *_ in edges:
        adj[u].append(v)
    return adj


def _undirected(num_nodes: int, edges: Sequence[Sequence[int]]) -> list[list[int]]:
    adj: list[list[int]] = [[] for _ in range(num_nodes)]
    for u, v, *_ in edges:
        adj[u].append(v)
        adj[v].append(u)
    return adj


def _preorder(adj: Sequence[Sequence[int]], start: int, seen: list[bool]) -> Iterator[int]:
    """Yield nodes reached from ``start`` in depth-first preorder, marking ``seen``."""
    seen[start] = True
    yield start
    stack = [iter(adj[start])]
    while stack:
        for nxt in stack[-1]:
            if not seen[nxt]:
                seen[nxt] = True
                yield nxt
                stack.append(iter(adj[nxt]))
                break
        else:
            stack.pop()


def _postorder(adj: Sequence[Sequence[int]], start: int, seen: list[bool]) -> Iterator[int]:
    """Yield nodes reached from ``start`` once all their descendants are finished."""
    seen[start] = True
    stack = [(start, iter(adj[start]))]
    while stack:
        node, neighbours = stack[-1]
        for nxt in neighbours:
            if not seen[nxt]:
                seen[nxt] = True
                stack.append((nxt, iter(adj[nxt])))
                break
        else:
            stack.pop()
            yield node


def bfs_order(adj: Sequence[Sequence[int]]) -> list[int]:
    """Return the nodes reachable from node 0 in breadth-first order."""
    if not adj:
        return []
    seen = [False] * len(adj)
    seen[0] = True
    order: list[int] = []
    queue = deque([0])
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in adj[node]:
            if not seen[nxt]:
                seen[nxt] = True
                queue.append(nxt)
    return order


def dfs_order(adj: Sequence[Sequence[int]]) -> list[int]:
    """Return the nodes reachable from node 0 in depth-first preorder."""
    if not adj:
        return []
    return list(_preorder(adj, 0, [False] * len(adj)))


def is_bipartite(graph: Sequence[Sequence[int]]) -> bool:
    """Return True if the nodes can be two-coloured with no edge inside a colour."""
    color: list[Optional[int]] = [None] * len(graph)
    for start in range(len(graph)):
        if color[start] is not None:
            continue
        color[start] = 0
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for nxt in graph[node]:
                if color[nxt] is None:
                    color[nxt] = 1 - color[node]
                    queue.append(nxt)
                elif color[nxt] == color[node]:
                    return False
    return True


def is_bipartite_dfs(graph: Sequence[Sequence[int]]) -> bool:
    """Depth-first variant of :func:`is_bipartite`."""
    color: list[Optional[int]] = [None] * len(graph)
    for start in range(len(graph)):
        if color[start] is not None:
            continue
        color[start] = 0
        stack = [start]
        while stack:
            node = stack.pop()
            for nxt in graph[node]:
                if color[nxt] is None:
                    color[nxt] = 1 - color[node]
                    stack.append(nxt)
                elif color[nxt] == color[node]:
                    return False
    return True


def _kahn(adj: Sequence[Sequence[int]]) -> list[int]:
    indegree = [0] * len(adj)
    for neighbours in adj:
        for nxt in neighbours:
            indegree[nxt] += 1
    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in adj[node]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                queue.append(nxt)
    return order


def has_directed_cycle(num_nodes: int, edges: Sequence[Sequence[int]]) -> bool:
    """Return True if the directed graph has a cycle (by Kahn's algorithm)."""
    return len(_kahn(_directed(num_nodes, edges))) != num_nodes


def has_directed_cycle_dfs(num_nodes: int, edges: Sequence[Sequence[int]]) -> bool:
    """Return True if the directed graph has a cycle (by depth-first search)."""
    adj = _directed(num_nodes, edges)
    seen = [False] * num_nodes
    on_path = [False] * num_nodes
    for start in range(num_nodes):
        if seen[start]:
            continue
        seen[start] = on_path[start] = True
        stack = [(start, iter(adj[start]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if not seen[nxt]:
                    seen[nxt] = on_path[nxt] = True
                    stack.append((nxt, iter(adj[nxt])))
                    break
                if on_path[nxt]:
                    return True
            else:
                on_path[node] = False
                stack.pop()
    return False


def has_undirected_cycle(num_nodes: int, edges: Sequence[Sequence[int]]) -> bool:
    """Return True if the undirected graph has a cycle (by breadth-first search)."""
    adj = _undirected(num_nodes, edges)
    seen = [False] * num_nodes
    for start in range(num_nodes):
        if seen[start]:
            continue
        seen[start] = True
        queue: deque[tuple[int, int]] = deque([(start, -1)])
        while queue:
            node, parent = queue.popleft()
            for nxt in adj[node]:
                if not seen[nxt]:
                    seen[nxt] = True
                    queue.append((nxt, node))
                elif nxt != parent:
                    return True
    return False


def has_undirected_cycle_dfs(num_nodes: int, edges: Sequence[Sequence[int]]) -> bool:
    """Return True if the undirected graph has a cycle (by depth-first search)."""
    adj = _undirected(num_nodes, edges)
    seen = [False] * num_nodes
    for start in range(num_nodes):
        if seen[start]:
            continue
        seen[start] = True
        stack = [(start, -1, iter(adj[start]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for nxt in neighbours:
                if not seen[nxt]:
                    seen[nxt] = True
                    stack.append((nxt, node, iter(adj[nxt])))
                    break
                if nxt != parent:
                    return True
            else:
                stack.pop()
    return False


def topological_sort(num_nodes: int, edges: Sequence[Sequence[int]]) -> list[int]:
    """Return a topological order by Kahn's algorithm.

    Nodes on or behind a cycle are left out, so the result is shorter than
    ``num_nodes`` when the graph is not acyclic.
    """
    return _kahn(_directed(num_nodes, edges))


def topological_sort_dfs(num_nodes: int, edges: Sequence[Sequence[int]]) -> list[int]:
    """Return the nodes in reverse depth-first finishing order."""
    adj = _directed(num_nodes, edges)
    seen = [False] * num_nodes
    finished: list[int] = []
    for start in range(num_nodes):
        if not seen[start]:
            finished.extend(_postorder(adj, start, seen))
    return finished[::-1]


def find_course_order(
    num_courses: int, prerequisites: Sequence[Sequence[int]]
) -> list[int]:
    """Return an order taking every course after its prerequisites, or [] if none exists.

    Each prerequisite pair ``[a, b]`` means ``b`` must come before ``a``.
    """
    adj: list[list[int]] = [[] for _ in range(num_courses)]
    for course, required in prerequisites:
        adj[required].append(course)
    order = _kahn(adj)
    return order if len(order) == num_courses else []


def count_strongly_connected(adj: Sequence[Sequence[int]]) -> int:
    """Return the number of strongly connected components (Kosaraju's algorithm)."""
    n = len(adj)
    seen = [False] * n
    finished: list[int] = []
    for start in range(n):
        if not seen[start]:
            finished.extend(_postorder(adj, start, seen))

    transpose: list[list[int]] = [[] for _ in range(n)]
    for node, neighbours in enumerate(adj):
        for nxt in neighbours:
            transpose[nxt].append(node)

    seen = [False] * n
    count = 0
    for node in reversed(finished):
        if not seen[node]:
            for _ in _preorder(transpose, node, seen):
                pass
            count += 1
    return count


def clone_graph(node: Optional[GraphNode]) -> Optional[GraphNode]:
    """Return a deep copy of the graph reachable from ``node``."""
    if node is None:
        return None
    copies: dict[GraphNode, GraphNode] = {node: GraphNode(node.val)}
    queue = deque([node])
    while queue:
        original = queue.popleft()
        for neighbour in original.neighbors:
            if neighbour not in copies:
                copies[neighbour] = GraphNode(neighbour.val)
                queue.append(neighbour)
            copies[original].neighbors.append(copies[neighbour])
    return copies[node]


def find_redundant_connection(
    edges: Sequence[Sequence[int]],
) -> Optional[tuple[int, int]]:
    """Return the first edge joining two already connected nodes, or None.

    Nodes are numbered ``1..len(edges)``.
    """
    groups = DisjointSet(len(edges))
    for u, v in edges:
        if not groups.union(u, v):
            return u, v
    return None