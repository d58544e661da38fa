"""Flood fills and breadth-first spreads over two-dimensional grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator, MutableSequence, Sequence

Cell = tuple[int, int]


def _neighbours(i: int, j: int, rows: int, cols: int) -> Iterator[Cell]:
    for ni, nj in ((i - 1, j), (i, j + 1), (i + 1, j), (i, j - 1)):
        if 0 <= ni < rows and 0 <= nj < cols:
            yield ni, nj


def _flood(
    starts: Iterable[Cell],
    rows: int,
    cols: int,
    can_step: Callable[[Cell, Cell], bool],
    seen: set[Cell],
) -> int:
    """Mark every cell reachable from ``starts``; return how many were newly marked."""
    stack = [cell for cell in starts if cell not in seen]
    seen.update(stack)
    count = len(stack)
    while stack:
        cell = stack.pop()
        for nxt in _neighbours(*cell, rows, cols):
            if nxt not in seen and can_step(cell, nxt):
                seen.add(nxt)
                stack.append(nxt)
                count += 1
    return count


def _components(grid: Sequence[Sequence[object]], land: object) -> Iterator[int]:
    """Yield the size of every orthogonally connected group of ``land`` cells."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    seen: set[Cell] = set()
    for i in range(rows):
        for j in range(cols):
            if grid[i][j] == land and (i, j) not in seen:
                yield _flood(
                    [(i, j)],
                    rows,
                    cols,
                    lambda _, nxt: grid[nxt[0]][nxt[1]] == land,
                    seen,
                )


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Return how many orthogonally connected groups of ``'1'`` cells the grid holds."""
    return sum(1 for _ in _components(grid, "1"))


def max_area_of_island(grid: Sequence[Sequence[int]]) -> int:
    """Return the size of the largest orthogonally connected group of ``1`` cells."""
    return max(_components(grid, 1), default=0)


def pacific_atlantic(heights: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """Return, in row-major order, the cells whose water reaches both oceans.

    The Pacific touches the top and left edges, the Atlantic the bottom and
    right; water flows to neighbours of equal or lower height.
    """
    rows = len(heights)
    cols = len(heights[0]) if rows else 0
    if not cols:
        return []

    def uphill(cell: Cell, nxt: Cell) -> bool:
        return heights[nxt[0]][nxt[1]] >= heights[cell[0]][cell[1]]

    pacific: set[Cell] = set()
    atlantic: set[Cell] = set()
    _flood(
        [(i, 0) for i in range(rows)] + [(0, j) for j in range(cols)],
        rows,
        cols,
        uphill,
        pacific,
    )
    _flood(
        [(i, cols - 1) for i in range(rows)] + [(rows - 1, j) for j in range(cols)],
        rows,
        cols,
        uphill,
        atlantic,
    )
    return sorted(pacific & atlantic)


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Return the minutes until no fresh orange (1) is left beside a rotten one (2), or -1.

    Rot spreads to orthogonal neighbours once a minute; -1 means some fresh
    orange can never rot.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    rotten: set[Cell] = set()
    fresh = 0
    for i, row in enumerate(grid):
        for j, value in enumerate(row):
            if value == 2:
                rotten.add((i, j))
            elif value == 1:
                fresh += 1

    queue: deque[tuple[Cell, int]] = deque((cell, 0) for cell in sorted(rotten))
    minutes = 0
    while queue:
        cell, time = queue.popleft()
        minutes = max(minutes, time)
        for ni, nj in _neighbours(*cell, rows, cols):
            if grid[ni][nj] == 1 and (ni, nj) not in rotten:
                rotten.add((ni, nj))
                fresh -= 1
                queue.append(((ni, nj), time + 1))
    return -1 if fresh else minutes


def capture_surrounded(board: Sequence[MutableSequence[str]]) -> None:
    """Turn every ``'O'`` region not touching the border into ``'X'``, in place."""
    rows = len(board)
    cols = len(board[0]) if rows else 0
    if not cols:
        return
    border = [(i, j) for i in range(rows) for j in (0, cols - 1)]
    border += [(i, j) for j in range(cols) for i in (0, rows - 1)]
    safe: set[Cell] = set()
    _flood(
        [(i, j) for i, j in border if board[i][j] == "O"],
        rows,
        cols,
        lambda _, nxt: board[nxt[0]][nxt[1]] == "O",
        safe,
    )
    for i, row in enumerate(board):
        for j, value in enumerate(row):
            if value == "O" and (i, j) not in safe:
                row[j] = "X"