"""Exceptions raised by SearchTreeLib.

Absence is never an error here: ``find`` returns ``None`` and deleting a
missing value or inserting a duplicate is a silent no-op. Exceptions are
reserved for contract violations.
"""


class SearchTreeError(Exception):
    """Base class for all SearchTreeLib errors."""
    pass


class UnorderableValueError(SearchTreeError, TypeError):
    """Raised when a value cannot be ordered against the tree's values.

    The tree only requires a total order on its values. Comparing values
    that do not support one (``3 < "a"``, ``None < 1``) fails fast at the
    comparison boundary instead of leaving the tree half-edited.
    """

    def __init__(self, left, right):
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot order {left!r} ({type(left).__name__}) against "
            f"{right!r} ({type(right).__name__})"
        )


class InvalidConfigError(SearchTreeError, ValueError):
    """Raised when a configuration or traversal order is rejected."""
    pass
