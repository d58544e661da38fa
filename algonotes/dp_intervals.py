"""Interval and grid dynamic programming."""

from __future__ import annotations

from collections.abc import Sequence


def matrix_chain_cost(dims: Sequence[int]) -> int:
    """Return the fewest scalar multiplications to multiply a chain of matrices.

    Matrix ``i`` (1-based) has shape ``dims[i-1] x dims[i]``.
    """
    n = len(dims)
    if n < 2:
        raise ValueError("a matrix chain needs at least two dimensions")
    cost = [[0] * n for _ in range(n)]
    for length in range(2, n):
        for i in range(1, n - length + 1):
            j = i + length - 1
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + dims[i - 1] * dims[k] * dims[j]
                for k in range(i, j)
            )
    return cost[1][n - 1]


def min_cut_cost(n: int, cuts: Sequence[int]) -> int:
    """Return the least total cost to make every cut in a stick of length ``n``.

    Each cut costs the length of the piece being cut.
    """
    points = [0, *sorted(cuts), n]
    c = len(cuts)
    cost = [[0] * (c + 2) for _ in range(c + 2)]
    for i in range(c, 0, -1):
        for j in range(i, c + 1):
            cost[i][j] = points[j + 1] - points[i - 1] + min(
                cost[i][k - 1] + cost[k + 1][j] for k in range(i, j + 1)
            )
    return cost[1][c]


def longest_increasing_path(matrix: Sequence[Sequence[int]]) -> int:
    """Return the length of the longest strictly increasing path moving orthogonally."""
    if not matrix or not matrix[0]:
        return 0
    rows, cols = len(matrix), len(matrix[0])
    cells = sorted((matrix[i][j], i, j) for i in range(rows) for j in range(cols))
    best: dict[tuple[int, int], int] = {}
    for value, i, j in cells:
        best[i, j] = 1 + max(
            (
                best[ni, nj]
                for ni, nj in ((i - 1, j), (i, j - 1), (i, j + 1), (i + 1, j))
                if 0 <= ni < rows and 0 <= nj < cols and matrix[ni][nj] < value
            ),
            default=0,
        )
    return max(best.values())