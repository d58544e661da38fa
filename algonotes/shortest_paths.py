"""Shortest paths, spanning trees and breadth-first word ladders."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence
from math import inf
from string import ascii_lowercase

INT_MAX = 2**31 - 1
"""Distance reported by :func:`dijkstra` for nodes the source cannot reach."""


def find_cheapest_price(
    n: int, flights: Sequence[Sequence[int]], src: int, dst: int, k: int
) -> int:
    """Return the cheapest fare from ``src`` to ``dst`` with at most ``k`` stops, or -1.

    Each flight is ``[from, to, price]``.
    """
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for origin, destination, price in flights:
        adj[origin].append((destination, price))

    cheapest: list[float] = [inf] * n
    cheapest[src] = 0
    queue: deque[tuple[int, int, int]] = deque([(0, src, 0)])
    while queue:
        stops, node, cost = queue.popleft()
        if stops > k:
            continue
        for nxt, price in adj[node]:
            if cost + price < cheapest[nxt]:
                cheapest[nxt] = cost + price
                queue.append((stops + 1, nxt, cost + price))

    result = cheapest[dst]
    return -1 if result == inf else int(result)


def dijkstra(num_nodes: int, edges: Sequence[Sequence[int]], source: int) -> list[int]:
    """Return the shortest distance from ``source`` to every node of a directed graph.

    Each edge is ``[from, to, weight]``; unreachable nodes get :data:`INT_MAX`.
    """
    adj: list[list[tuple[int, int]]] = [[] for _ in range(num_nodes)]
    for u, v, weight in edges:
        adj[u].append((v, weight))

    dist = [INT_MAX] * num_nodes
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, node = heapq.heappop(heap)
        if d > dist[node]:
            continue
        for nxt, weight in adj[node]:
            candidate = d + weight
            if candidate < dist[nxt]:
                dist[nxt] = candidate
                heapq.heappush(heap, (candidate, nxt))
    return dist


def network_delay_time(times: Sequence[Sequence[int]], n: int, k: int) -> int:
    """Return how long a signal from node ``k`` takes to reach all of nodes ``1..n``, or -1.

    Each entry of ``times`` is ``[from, to, delay]``.
    """
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, delay in times:
        adj[u].append((v, delay))

    arrival: list[float] = [inf] * (n + 1)
    arrival[k] = 0
    heap = [(0, k)]
    while heap:
        current, node = heapq.heappop(heap)
        if current > arrival[node]:
            continue
        for nxt, delay in adj[node]:
            if current + delay < arrival[nxt]:
                arrival[nxt] = current + delay
                heapq.heappush(heap, (current + delay, nxt))

    latest = max(arrival[1:], default=0)
    return -1 if latest == inf else int(latest)


def spanning_tree_weight(num_nodes: int, adj: Sequence[Iterable[Sequence[int]]]) -> int:
    """Return the weight of a minimum spanning tree grown from node 0 (Prim's algorithm).

    ``adj[node]`` lists ``[neighbour, weight]`` pairs.
    """
    if num_nodes == 0:
        return 0
    visited = [False] * num_nodes
    total = 0
    heap = [(0, 0)]
    while heap:
        weight, node = heapq.heappop(heap)
        if visited[node]:
            continue
        visited[node] = True
        total += weight
        for nxt, edge_weight, *_ in adj[node]:
            if not visited[nxt]:
                heapq.heappush(heap, (edge_weight, nxt))
    return total


def swim_in_water(grid: Sequence[Sequence[int]]) -> int:
    """Return the lowest water level at which the bottom-right cell is reachable from the top-left."""
    n = len(grid)
    if n == 0 or any(len(row) != n for row in grid):
        raise ValueError("grid must be a non-empty square")
    visited = [[False] * n for _ in range(n)]
    visited[0][0] = True
    heap = [(grid[0][0], 0, 0)]
    while heap:
        level, x, y = heapq.heappop(heap)
        if x == n - 1 and y == n - 1:
            return level
        for nx, ny in ((x - 1, y), (x, y + 1), (x + 1, y), (x, y - 1)):
            if 0 <= nx < n and 0 <= ny < n and not visited[nx][ny]:
                visited[nx][ny] = True
                heapq.heappush(heap, (max(level, grid[nx][ny]), nx, ny))
    return 0


def ladder_length(begin_word: str, end_word: str, word_list: Iterable[str]) -> int:
    """Return the number of words in the shortest one-letter-at-a-time ladder, or 0.

    Every word after ``begin_word`` must come from ``word_list``.
    """
    remaining = set(word_list)
    remaining.discard(begin_word)
    queue: deque[tuple[str, int]] = deque([(begin_word, 1)])
    while queue:
        word, steps = queue.popleft()
        if word == end_word:
            return steps
        for i, original in enumerate(word):
            for ch in ascii_lowercase:
                if ch == original:
                    continue
                candidate = f"{word[:i]}{ch}{word[i + 1:]}"
                if candidate in remaining:
                    remaining.discard(candidate)
                    queue.append((candidate, steps + 1))
    return 0