"""Binary tree construction, traversal and shape queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node.

    Nodes compare by identity. ``next`` links a node to its right
    neighbour on the same level once :func:`connect_right_neighbours` ran.
    """

    val: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None
    next: Optional[TreeNode] = field(default=None, repr=False)


def build_from_level_order(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from a level-order listing where ``None`` marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            try:
                val = next(items)
            except StopIteration:
                return root
            if val is not None:
                child = TreeNode(val)
                setattr(node, side, child)
                queue.append(child)
    return root


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Return True if every node's subtrees differ in height by at most one."""

    def height(node: Optional[TreeNode]) -> Optional[int]:
        if node is None:
            return 0
        left = height(node.left)
        if left is None:
            return None
        right = height(node.right)
        if right is None or abs(left - right) > 1:
            return None
        return 1 + max(left, right)

    return height(root) is not None


def diameter(root: Optional[TreeNode]) -> int:
    """Return the number of edges on the longest path between any two nodes."""
    best = 0

    def height(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    height(root)
    return best


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def _index_inorder(inorder: Sequence[int], other: Sequence[int]) -> dict[int, int]:
    if len(inorder) != len(other):
        raise ValueError("traversals must have the same length")
    position = {val: i for i, val in enumerate(inorder)}
    missing = [val for val in other if val not in position]
    if missing:
        raise ValueError(f"values not found in inorder traversal: {missing}")
    return position


def build_tree_from_inorder_postorder(
    inorder: Sequence[int], postorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree of distinct values from its inorder and postorder traversals."""
    position = _index_inorder(inorder, postorder)

    def build(in_lo: int, in_hi: int, post_lo: int, post_hi: int) -> Optional[TreeNode]:
        if in_lo > in_hi or post_lo > post_hi:
            return None
        root = TreeNode(postorder[post_hi])
        in_root = position[root.val]
        num_left = in_root - in_lo
        root.left = build(in_lo, in_root - 1, post_lo, post_lo + num_left - 1)
        root.right = build(in_root + 1, in_hi, post_lo + num_left, post_hi - 1)
        return root

    return build(0, len(inorder) - 1, 0, len(postorder) - 1)


def build_tree_from_preorder_inorder(
    preorder: Sequence[int], inorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree of distinct values from its preorder and inorder traversals."""
    position = _index_inorder(inorder, preorder)

    def build(pre_lo: int, pre_hi: int, in_lo: int, in_hi: int) -> Optional[TreeNode]:
        if pre_lo > pre_hi or in_lo > in_hi:
            return None
        root = TreeNode(preorder[pre_lo])
        in_root = position[root.val]
        num_left = in_root - in_lo
        root.left = build(pre_lo + 1, pre_lo + num_left, in_lo, in_root - 1)
        root.right = build(pre_lo + num_left + 1, pre_hi, in_root + 1, in_hi)
        return root

    return build(0, len(preorder) - 1, 0, len(inorder) - 1)


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the deepest node having both ``p`` and ``q`` (by identity) below or at it."""
    if root is None:
        return None
    if root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is None:
        return right
    if right is None:
        return left
    return root


def _children(level: list[TreeNode]) -> list[TreeNode]:
    return [child for node in level for child in (node.left, node.right) if child]


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return node values grouped by level, top to bottom, left to right."""
    result: list[list[int]] = []
    level = [root] if root is not None else []
    while level:
        result.append([node.val for node in level])
        level = _children(level)
    return result


def max_width(root: Optional[TreeNode]) -> int:
    """Return the widest level, counting gaps between the end nodes."""
    if root is None:
        return 0
    best = 0
    level: list[tuple[TreeNode, int]] = [(root, 0)]
    while level:
        base = level[0][1]
        best = max(best, level[-1][1] - base + 1)
        following: list[tuple[TreeNode, int]] = []
        for node, index in level:
            index -= base
            if node.left is not None:
                following.append((node.left, 2 * index + 1))
            if node.right is not None:
                following.append((node.right, 2 * index + 2))
        level = following
    return best


def path_to_value(root: Optional[TreeNode], target: int) -> list[int]:
    """Return the values from the root down to the first node holding ``target``.

    The search goes left before right; an empty list means no node holds it.
    """
    path: list[int] = []

    def walk(node: Optional[TreeNode]) -> bool:
        if node is None:
            return False
        path.append(node.val)
        if node.val == target or walk(node.left) or walk(node.right):
            return True
        path.pop()
        return False

    walk(root)
    return path


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Return True if both trees have the same shape and values."""
    if p is None or q is None:
        return p is q
    return (
        is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
        and p.val == q.val
    )


def _is_mirror(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    if p is None or q is None:
        return p is q
    return p.val == q.val and _is_mirror(p.left, q.right) and _is_mirror(p.right, q.left)


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Return True if the tree is a mirror image of itself."""
    if root is None:
        return True
    return _is_mirror(root.left, root.right)


def connect_right_neighbours(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Point each node's ``next`` at its right neighbour on its level; return the root."""
    level = [root] if root is not None else []
    while level:
        for node, neighbour in zip(level, [*level[1:], None]):
            node.next = neighbour
        level = _children(level)
    return root