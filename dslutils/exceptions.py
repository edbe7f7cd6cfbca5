"""
dslutils Exceptions
===================

Every failure a hook pipeline can signal. Exceptions are raised at the exact
point the pipeline rejects an operation, always before the stored state is
touched, and are never caught by the library.

- ``InvalidArgumentError``: a write was rejected (validation on the new value).
- ``InvalidStateError``: a read was rejected (e.g. a required value is missing).
- ``LockedError``: a mutation was attempted on a locked DSL object.

``InvalidArgumentError`` and ``InvalidStateError`` share ``InvalidValueError``
so callers that do not care about the direction can catch a single type.
"""

from typing import Any, Optional


class DslError(Exception):
    """Base class for all dslutils errors."""

    pass


class InvalidValueError(DslError, ValueError):
    """A property value was rejected by a validation hook."""

    pass


class InvalidArgumentError(InvalidValueError):
    """The value being written is not acceptable."""

    pass


class InvalidStateError(InvalidValueError):
    """The stored value cannot be read in its current state."""

    pass


class LockedError(DslError, RuntimeError):
    """A locked DSL object was asked to mutate one of its properties."""

    def __init__(self, message: str, owner: Any = None, name: Optional[str] = None):
        super().__init__(message)
        self.owner = owner
        self.name = name
