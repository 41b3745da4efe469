class TreeNodeError(Exception):
    """Base class for errors raised by tree node collections."""


class InvalidNodeError(TreeNodeError, ValueError):
    """A missing node was passed to a mutating operation, or the node cannot be
    attached without creating a cycle."""


class NodeIndexError(TreeNodeError, IndexError):
    """An index outside the valid interval of the operation."""
