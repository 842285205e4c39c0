"""
AVL tree container.

This module implements the AvlTree class, an ordered set of distinct
elements kept height-balanced after every insertion and removal:
- Insertion and removal by recursive descent, rebalancing on the way back up
- Iterative membership and extremum queries
- In-order traversal through a visitor or a lazy iterator
- Structural cloning and a debug-only invariant check
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, Optional, TypeVar

from .balance import RebalanceMode, rebalance, remove_max
from .errors import InvariantViolationError, UnderflowError
from .node import AvlNode, height

T = TypeVar("T")


class AvlTree(Generic[T]):
    """
    Self-balancing binary search tree holding distinct elements.

    All matching is based on the comparison function: two elements that
    compare equal are the same element as far as the tree is concerned.
    """

    def __init__(self, compare: Optional[Callable[[T, T], float]] = None):
        """
        Initialize an empty tree.

        Args:
            compare: Comparison function returning negative, zero, or positive.
                Elements are compared with < and > when omitted.
        """
        self.root: Optional[AvlNode[T]] = None
        self.compare = compare

    def _compare(self, x: T, y: T) -> float:
        if self.compare is not None:
            return self.compare(x, y)
        if x < y:
            return -1
        if x > y:
            return 1
        return 0

    # Mutation

    def insert(self, x: T) -> None:
        """Insert x into the tree; duplicates are ignored."""
        self.root = self._insert(x, self.root)

    def _insert(self, x: T, t: Optional[AvlNode[T]]) -> AvlNode[T]:
        if t is None:
            return AvlNode(x)

        result = self._compare(x, t.element)
        if result < 0:
            t.left = self._insert(x, t.left)
            t = rebalance(t, RebalanceMode.INSERTION_STRICT)
        elif result > 0:
            t.right = self._insert(x, t.right)
            t = rebalance(t, RebalanceMode.INSERTION_STRICT)

        return t

    def remove(self, x: T) -> None:
        """Remove x from the tree. Nothing is done if x is not found."""
        self.root = self._remove(x, self.root)

    def _remove(self, x: T, t: Optional[AvlNode[T]]) -> Optional[AvlNode[T]]:
        if t is None:
            return None

        result = self._compare(x, t.element)
        if result < 0:
            t.left = self._remove(x, t.left)
            return rebalance(t, RebalanceMode.DELETION_PERMISSIVE)
        if result > 0:
            t.right = self._remove(x, t.right)
            return rebalance(t, RebalanceMode.DELETION_PERMISSIVE)

        if t.left is None:
            return t.right
        if t.right is None:
            return t.left

        # Both subtrees present: the in-order predecessor takes t's place
        right = t.right
        left_without_max = remove_max(t.left)
        t = left_without_max.maximum
        t.left = left_without_max.remaining
        t.right = right
        t.update_height()
        return rebalance(t, RebalanceMode.DELETION_PERMISSIVE)

    def make_empty(self) -> None:
        """Make the tree logically empty."""
        self.root = None

    # Queries

    def contains(self, x: T) -> bool:
        """Return True if an element equal to x is present."""
        t = self.root
        while t is not None:
            result = self._compare(x, t.element)
            if result < 0:
                t = t.left
            elif result > 0:
                t = t.right
            else:
                return True
        return False

    def find_min(self) -> T:
        """
        Find the smallest element in the tree.

        Raises:
            UnderflowError: If the tree is empty
        """
        if self.root is None:
            raise UnderflowError("find_min on empty tree")
        t = self.root
        while t.left is not None:
            t = t.left
        return t.element

    def find_max(self) -> T:
        """
        Find the largest element in the tree.

        Raises:
            UnderflowError: If the tree is empty
        """
        if self.root is None:
            raise UnderflowError("find_max on empty tree")
        t = self.root
        while t.right is not None:
            t = t.right
        return t.element

    def is_empty(self) -> bool:
        """Check if the tree is empty."""
        return self.root is None

    def height(self) -> int:
        """Height of the tree, -1 when empty."""
        return height(self.root)

    def count(self) -> int:
        """Return the number of elements, counted by traversal."""
        return sum(1 for _ in self)

    # Traversal

    def traverse(
        self,
        visitor: Callable[[T], None],
        on_empty: Optional[Callable[[], None]] = None,
    ) -> bool:
        """
        Visit every element once, in ascending order.

        Args:
            visitor: Function called with each element
            on_empty: Function called instead when the tree is empty

        Returns:
            False if the tree was empty, True otherwise
        """
        if self.root is None:
            if on_empty is not None:
                on_empty()
            return False
        for element in self:
            visitor(element)
        return True

    def print_tree(
        self,
        write: Callable[[str], None] = print,
        selector: Callable[[T], str] = str,
    ) -> None:
        """
        Write the tree contents in sorted order, one element per call.

        Args:
            write: Output function, print by default
            selector: Function to convert an element to a string
        """
        self.traverse(lambda e: write(selector(e)), lambda: write("Empty tree"))

    def __iter__(self) -> Iterator[T]:
        stack: list[AvlNode[T]] = []
        t = self.root
        while stack or t is not None:
            while t is not None:
                stack.append(t)
                t = t.left
            t = stack.pop()
            yield t.element
            t = t.right

    # Copy and verification

    def clone(self) -> AvlTree[T]:
        """Return a structurally identical, independent copy of the tree."""
        copy: AvlTree[T] = AvlTree(self.compare)
        if self.root is not None:
            copy.root = self.root.clone()
        return copy

    def check_invariants(self) -> None:
        """
        Verify order, balance and cached heights over the whole tree.

        Intended for debugging and tests; no mutating operation calls it.

        Raises:
            InvariantViolationError: On the first violated invariant
        """
        self._check(self.root, None, None)

    def _check(
        self, t: Optional[AvlNode[T]], low: Optional[AvlNode[T]], high: Optional[AvlNode[T]]
    ) -> int:
        """Return the recomputed height of t; low and high bound its elements."""
        if t is None:
            return -1
        if low is not None and self._compare(low.element, t.element) >= 0:
            raise InvariantViolationError(f"{t!r} is not greater than {low!r}")
        if high is not None and self._compare(t.element, high.element) >= 0:
            raise InvariantViolationError(f"{t!r} is not less than {high!r}")

        left_height = self._check(t.left, low, t)
        right_height = self._check(t.right, t, high)

        if abs(left_height - right_height) > 1:
            raise InvariantViolationError(
                f"{t!r} unbalanced: left height {left_height}, right height {right_height}"
            )
        expected = max(left_height, right_height) + 1
        if t.height != expected:
            raise InvariantViolationError(
                f"{t!r} caches height {t.height}, actual {expected}"
            )
        return expected

    # Python protocol

    def __contains__(self, x: T) -> bool:
        return self.contains(x)

    def __len__(self) -> int:
        return self.count()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __repr__(self) -> str:
        return f"AvlTree({list(self)})"
