"""
AVL rebalancing engine.

This module holds the structural transformations shared by the insertion
and deletion paths of the tree:
- Single and double rotations
- The rebalance decision for a subtree whose children may differ in height by 2
- Extraction of a subtree's maximum node, used by two-child removal

Every function takes a subtree root and returns the (possibly different)
root of the transformed subtree; the caller relinks it into the parent.
"""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple, Optional

from .errors import InvariantViolationError
from .node import AvlNode, height


class RebalanceMode(IntEnum):
    """
    How rebalance() treats a heavy child whose two subtrees are equally tall.

    - INSERTION_STRICT: cannot happen after a single insertion, so it is an error
    - DELETION_PERMISSIVE: happens after removals, fixed by a single rotation
    """
    INSERTION_STRICT = 0
    DELETION_PERMISSIVE = 1


class RemoveMaxResult(NamedTuple):
    """Outcome of remove_max(): the reduced subtree and the detached node."""
    remaining: Optional[AvlNode]
    maximum: AvlNode


def rotate_with_left_child(k2: AvlNode) -> AvlNode:
    """
    Single rotation promoting the left child of k2.

    Args:
        k2: Subtree root with a left child

    Returns:
        New subtree root (the former left child)
    """
    k1 = k2.left
    k2.left = k1.right
    k1.right = k2
    k2.height = max(height(k2.left), height(k2.right)) + 1
    k1.height = max(height(k1.left), k2.height) + 1
    return k1


def rotate_with_right_child(k1: AvlNode) -> AvlNode:
    """
    Single rotation promoting the right child of k1.

    Args:
        k1: Subtree root with a right child

    Returns:
        New subtree root (the former right child)
    """
    k2 = k1.right
    k1.right = k2.left
    k2.left = k1
    k1.height = max(height(k1.left), height(k1.right)) + 1
    k2.height = max(height(k2.right), k1.height) + 1
    return k2


def double_with_left_child(k3: AvlNode) -> AvlNode:
    """Rotate the left child with its right child, then k3 with its new left child."""
    k3.left = rotate_with_right_child(k3.left)
    return rotate_with_left_child(k3)


def double_with_right_child(k1: AvlNode) -> AvlNode:
    """Rotate the right child with its left child, then k1 with its new right child."""
    k1.right = rotate_with_left_child(k1.right)
    return rotate_with_right_child(k1)


def rebalance(node: AvlNode, mode: RebalanceMode) -> AvlNode:
    """
    Restore the balance condition at node and refresh its height.

    The children of node must already be balanced with correct heights,
    and their heights may differ by at most 2.

    Args:
        node: Subtree root
        mode: Handling of equally tall grandchildren under the heavy child

    Returns:
        New subtree root

    Raises:
        InvariantViolationError: If the imbalance exceeds 2, or if the
            grandchildren tie under INSERTION_STRICT
    """
    diff = height(node.left) - height(node.right)

    if diff > 1:
        if diff != 2:
            raise InvariantViolationError(
                f"left-heavy imbalance of {diff} at {node!r}"
            )
        left = node.left
        outer, inner = height(left.left), height(left.right)
        if outer > inner:
            # Straight line to the outside
            node = rotate_with_left_child(node)
        elif inner > outer:
            # Bends back toward the inside
            node = double_with_left_child(node)
        elif mode == RebalanceMode.DELETION_PERMISSIVE:
            node = rotate_with_left_child(node)
        else:
            raise InvariantViolationError(
                f"equal grandchild heights under {left!r} after insertion"
            )
    elif diff < -1:
        if diff != -2:
            raise InvariantViolationError(
                f"right-heavy imbalance of {-diff} at {node!r}"
            )
        right = node.right
        outer, inner = height(right.right), height(right.left)
        if outer > inner:
            node = rotate_with_right_child(node)
        elif inner > outer:
            node = double_with_right_child(node)
        elif mode == RebalanceMode.DELETION_PERMISSIVE:
            node = rotate_with_right_child(node)
        else:
            raise InvariantViolationError(
                f"equal grandchild heights under {right!r} after insertion"
            )

    node.update_height()
    return node


def remove_max(node: AvlNode) -> RemoveMaxResult:
    """
    Detach the maximum node of a subtree.

    Args:
        node: Non-empty subtree root

    Returns:
        The rebalanced remaining subtree and the detached node, whose
        left link is cleared
    """
    if node.right is None:
        remaining = node.left
        node.left = None
        return RemoveMaxResult(remaining, node)

    shortened = remove_max(node.right)
    node.right = shortened.remaining
    node = rebalance(node, RebalanceMode.DELETION_PERMISSIVE)
    return RemoveMaxResult(node, shortened.maximum)
