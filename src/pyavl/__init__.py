"""
pyavl: AVL tree ordered container.

Self-balancing binary search tree with insertion, removal, membership,
extremum queries and in-order traversal.
"""

__version__ = "0.1.0"

from .errors import UnderflowError, InvariantViolationError, SharedSubtreeWarning
from .node import AvlNode
from .balance import RebalanceMode
from .tree import AvlTree

__all__ = [
    "AvlTree",
    "AvlNode",
    "RebalanceMode",
    "UnderflowError",
    "InvariantViolationError",
    "SharedSubtreeWarning",
]
