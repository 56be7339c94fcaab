"""
Custom exceptions for the tree and graph models.
"""

from typing import Any


class KeyNotFoundError(KeyError):
    """
    Raised when a strict lookup asks for a key that is not stored.

    Lookups that may legitimately miss (``find``) return None instead.
    """

    def __init__(self, key: Any, container: str = "tree"):
        """
        Initialize not-found error.

        Args:
            key: The key that was looked up.
            container: Name of the container that was searched.
        """
        self.key = key
        self.container = container
        super().__init__(f"{key!r} not found in {container}")

    def __str__(self) -> str:
        return self.args[0]


class InvariantViolationError(AssertionError):
    """
    Raised by tree validation when a red-black property does not hold.

    This is a fail-fast error: it points at a bug in the rebalancing code,
    never at caller input.
    """

    def __init__(self, invariant: str, key: Any, detail: str = ""):
        """
        Initialize invariant violation error.

        Args:
            invariant: Short name of the violated property.
            key: Key of the node where the violation was detected.
            detail: Optional extra description.
        """
        self.invariant = invariant
        self.key = key
        self.detail = detail
        message = f"{invariant} violated at node {key!r}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
