"""
Exceptions and warnings raised by the AVL tree.
"""


class UnderflowError(LookupError):
    """Raised when an extremum is requested from an empty tree."""

    def __init__(self, message: str = "tree is empty"):
        super().__init__(message)


class InvariantViolationError(AssertionError):
    """
    Raised when the tree observes a structure that should be impossible.

    This signals a defect in invariant maintenance rather than a runtime
    condition callers are expected to recover from.
    """
    pass


class SharedSubtreeWarning(UserWarning):
    """Warning about a node reachable through more than one parent."""
    pass
