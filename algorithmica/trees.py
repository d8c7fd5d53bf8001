"""Binary tree height and balance, and quad tree construction."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass
class TreeNode:
    """A binary tree node."""

    val: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


@dataclass
class QuadNode:
    """A quad tree node; leaves carry the value of their whole square."""

    val: bool
    is_leaf: bool
    top_left: QuadNode | None = None
    top_right: QuadNode | None = None
    bottom_left: QuadNode | None = None
    bottom_right: QuadNode | None = None


def max_depth(root: TreeNode | None) -> int:
    """Number of nodes on the longest path from root down to a leaf."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


def _balanced_height(root: TreeNode | None) -> int | None:
    if root is None:
        return 0
    left = _balanced_height(root.left)
    if left is None:
        return None
    right = _balanced_height(root.right)
    if right is None or abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_balanced_tree(root: TreeNode | None) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""
    return _balanced_height(root) is not None


def construct_quad_tree(grid: Sequence[Sequence[int]]) -> QuadNode | None:
    """Build the quad tree of a square 0/1 grid whose side is a power of two."""
    rows = [list(row) for row in grid]
    if not rows:
        return None
    side = len(rows)
    if any(len(row) != side for row in rows):
        raise ValueError("the grid must be square")
    if side & (side - 1):
        raise ValueError(f"the grid side must be a power of two, got {side}")
    return _build(rows, 0, 0, side)


def _build(rows: list[list[int]], x: int, y: int, length: int) -> QuadNode:
    if length == 1:
        return QuadNode(rows[x][y] == 1, True)
    half = length // 2
    children = (
        _build(rows, x, y, half),
        _build(rows, x, y + half, half),
        _build(rows, x + half, y, half),
        _build(rows, x + half, y + half, half),
    )
    if all(child.is_leaf for child in children) and len({c.val for c in children}) == 1:
        return QuadNode(children[0].val, True)
    return QuadNode(True, False, *children)