"""
Tree vertex used by the AVL tree.

A node owns its children outright and caches the height of the subtree
rooted at it. An absent subtree has height -1, so a leaf has height 0.
"""

from __future__ import annotations

from typing import Generic, Optional, TypeVar
import warnings

from .errors import SharedSubtreeWarning

T = TypeVar("T")


def height(node: Optional[AvlNode]) -> int:
    """Return the cached height of node, or -1 for an absent subtree."""
    return -1 if node is None else node.height


class AvlNode(Generic[T]):
    """One vertex of an AVL tree."""

    __slots__ = ("element", "left", "right", "height")

    def __init__(
        self,
        element: T,
        left: Optional[AvlNode[T]] = None,
        right: Optional[AvlNode[T]] = None,
    ):
        self.element = element
        self.left = left
        self.right = right
        self.height: int = 0

    def update_height(self) -> None:
        """Recompute the cached height from the children."""
        self.height = max(height(self.left), height(self.right)) + 1

    def clone(self, clone_map: Optional[dict[int, AvlNode[T]]] = None) -> AvlNode[T]:
        """
        Deep copy of the structure rooted at this node.

        Nodes are memoized by identity, so a node reachable through more
        than one parent is copied once and the copy reproduces the sharing.

        Args:
            clone_map: Mapping of id(original) to its copy, shared across
                the whole recursion

        Returns:
            Copy of this node
        """
        if clone_map is None:
            clone_map = {}

        existing = clone_map.get(id(self))
        if existing is not None:
            warnings.warn(
                f"{self!r} is reachable through more than one parent; "
                "the clone preserves the sharing.",
                SharedSubtreeWarning,
                stacklevel=2
            )
            return existing

        copy = AvlNode(self.element)
        clone_map[id(self)] = copy

        if self.left is not None:
            copy.left = self.left.clone(clone_map)
        if self.right is not None:
            copy.right = self.right.clone(clone_map)

        copy.height = self.height
        return copy

    def __repr__(self) -> str:
        return f"AvlNode({self.element!r})"
