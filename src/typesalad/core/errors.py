"""Error taxonomy shared by every TypeSalad module.

Errors are raised immediately at the call that detects them. Nothing in the
library retries or recovers; callers decide what to do.
"""

from __future__ import annotations


class TypeSaladError(Exception):
    """Base class for all TypeSalad errors."""

    pass


class TypeMismatchError(TypeSaladError, TypeError):
    """Raised when a value's tag or host kind does not satisfy an operation."""

    pass


class UntypedError(TypeSaladError, TypeError):
    """Raised when an argument expected to carry a tag does not."""

    pass


class InvalidShapeError(TypeSaladError, TypeError):
    """Raised when a container receives data of the wrong structural shape."""

    pass


class NoMatchingOverloadError(TypeSaladError, LookupError):
    """Raised when no overload matches the argument tags exactly."""

    pass


class PackageError(TypeSaladError):
    """Base class for package registry lifecycle violations."""

    pass


class AlreadyEnabledError(PackageError):
    """Raised when registering a package that is enabled or being registered."""

    pass


class ExportNotFoundError(PackageError):
    """Raised when a package locator does not expose the requested export."""

    pass


class NotEnabledError(PackageError):
    """Raised when fetching a package that has not been enabled."""

    pass


class DivisionByZeroError(TypeSaladError, ZeroDivisionError):
    """Raised by typed integer division with a zero divisor."""

    pass
