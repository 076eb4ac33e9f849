"""
Exceptions raised by the pivot table engine.
"""


class PivotError(Exception):
    """Base class for all pivot table errors."""
    pass


class ConfigurationError(PivotError):
    """Raised when a PivotConfig cannot drive a table build."""
    pass


class UnsupportedMutationError(PivotError):
    """
    Raised when an expand/contract request cannot be honoured.

    Covers unknown axes, pseudo headers, headers that belong to the other
    axis, and expanding a node that has no further dimension below it.
    """
    pass


class InvalidSortTargetError(PivotError):
    """
    Raised when a column cannot be sorted numerically.

    A header-display cell in the sort column means the grid was assembled
    or expanded in a way the sorting contract does not allow.
    """
    pass
