# dualad/core/errors.py


class DualError(Exception):
    """Base class for errors raised by the dual-number engine."""


class SchemaError(DualError, ValueError):
    """
    A family could not be defined: empty or duplicated axis names, names that
    are not identifiers or collide with the value type's attributes, or an
    inner type that is not a numpy floating type.
    """


class MismatchedFamilyError(DualError, TypeError):
    """Two dual numbers from different families were combined."""

    def __init__(self, left, right):
        self.left = left
        self.right = right
        super().__init__(
            f"cannot combine dual numbers of family {left.__name__!r} "
            f"with family {right.__name__!r}"
        )
