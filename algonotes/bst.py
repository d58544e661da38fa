"""Queries over binary search trees built from :class:`TreeNode`."""

from __future__ import annotations

from itertools import islice
from typing import Optional

from algonotes.trees import TreeNode


class BSTIterator:
    """Iterate a binary search tree in ascending order, or descending if ``reverse``."""

    def __init__(self, root: Optional[TreeNode], reverse: bool = False) -> None:
        self._reverse = reverse
        self._stack: list[TreeNode] = []
        self._push_edge(root)

    def _push_edge(self, node: Optional[TreeNode]) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.right if self._reverse else node.left

    def __iter__(self) -> BSTIterator:
        return self

    def __next__(self) -> int:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        self._push_edge(node.left if self._reverse else node.right)
        return node.val

    def has_next(self) -> bool:
        """Return True while values remain."""
        return bool(self._stack)


def find_ceil(root: Optional[TreeNode], key: int) -> int:
    """Return the smallest value not below ``key``, or -1 if there is none."""
    ans = -1
    node = root
    while node is not None:
        if node.val < key:
            node = node.right
        else:
            ans = node.val
            node = node.left
    return ans


def find_floor(root: Optional[TreeNode], key: int) -> int:
    """Return the largest value not above ``key``, or -1 if there is none."""
    ans = -1
    node = root
    while node is not None:
        if node.val > key:
            node = node.left
        else:
            ans = node.val
            node = node.right
    return ans


def _kth(root: Optional[TreeNode], k: int, reverse: bool) -> int:
    if k < 1:
        return 0
    return next(islice(BSTIterator(root, reverse), k - 1, None), 0)


def kth_largest(root: Optional[TreeNode], k: int) -> int:
    """Return the k-th largest value (1-based), or 0 if ``k`` is out of range."""
    return _kth(root, k, reverse=True)


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """Return the k-th smallest value (1-based), or 0 if ``k`` is out of range."""
    return _kth(root, k, reverse=False)


def bst_lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the node where the search paths to ``p`` and ``q`` split."""
    node = root
    while node is not None:
        if p.val < node.val and q.val < node.val:
            node = node.left
        elif p.val > node.val and q.val > node.val:
            node = node.right
        else:
            return node
    return None


def predecessor_successor(
    root: Optional[TreeNode], key: int
) -> tuple[Optional[TreeNode], Optional[TreeNode]]:
    """Return the nodes holding the nearest values strictly below and above ``key``."""
    predecessor = None
    node = root
    while node is not None:
        if key <= node.val:
            node = node.left
        else:
            predecessor = node
            node = node.right

    successor = None
    node = root
    while node is not None:
        if key >= node.val:
            node = node.right
        else:
            successor = node
            node = node.left
    return predecessor, successor


def two_sum(root: Optional[TreeNode], k: int) -> bool:
    """Return True if two different nodes hold values adding up to ``k``."""
    if root is None:
        return False
    ascending = BSTIterator(root)
    descending = BSTIterator(root, reverse=True)
    low, high = next(ascending), next(descending)
    while low < high:
        total = low + high
        if total == k:
            return True
        if total < k:
            low = next(ascending)
        else:
            high = next(descending)
    return False


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Return True if every value lies strictly between its ancestors' bounds."""

    def check(node: Optional[TreeNode], low: float, high: float) -> bool:
        if node is None:
            return True
        if not low < node.val < high:
            return False
        return check(node.left, low, node.val) and check(node.right, node.val, high)

    return check(root, float("-inf"), float("inf"))