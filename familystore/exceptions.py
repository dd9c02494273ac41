"""Exception types for FamilyStore.

Every error raised by the library derives from FamilyStoreError, so callers
can catch library failures with a single except clause.
"""


class FamilyStoreError(Exception):
    """Base class for all FamilyStore errors."""
    pass


class InvalidArgumentError(FamilyStoreError, ValueError):
    """Raised when a caller passes a value that violates a contract.

    Covers empty or non-string names, objects that do not satisfy the
    backend contract, parents that do not satisfy the node contract and
    invalid construction options.
    """
    pass


class InconsistentComparisonError(FamilyStoreError, RuntimeError):
    """Raised when two keys have no defined order during equals().

    This signals that the key type itself is broken (for example mixed
    str and int keys), not a normal runtime condition.
    """
    pass
