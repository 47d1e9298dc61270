"""Exception types raised by arenatree.

Only two failure kinds exist: a value that must be present in the tree
is not, or a request is structurally invalid (``None`` where a value is
required, a second root, a bad configuration).
"""


class TreeError(Exception):
    """Base exception for all arenatree errors."""
    pass


class NodeNotFoundError(TreeError, LookupError):
    """Raised when an operation requires a value that is not in the tree."""
    pass


class InvalidArgumentError(TreeError, ValueError):
    """Raised for structurally invalid requests."""
    pass
