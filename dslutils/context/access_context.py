"""
dslutils AccessContext - Scope Marker for Access-Triggered Mutation
===================================================================

This module provides the AccessContext class, entered around every
``before_access`` hook of a lockable DSL object.

A ``before_access`` hook runs because a list attribute was *read*, so any
mutation it performs is the list's own declared read-time behavior rather than
user input. ``LockableValueDsl`` consults ``AccessContext.is_active(owner)`` and
lets such mutation through after the object has been locked.

Contexts nest: a hook that reads another list attribute of the same owner enters
a second context, and the owner stays marked until the outermost one exits. The
marker is cleared on every exit path, including when the hook raises.
"""

from typing import Any, List


class AccessContext:
    """Marks ``owner`` as running a ``before_access`` hook for the duration of a block."""

    _ACTIVE_ATTR = "_active_access_contexts"

    @classmethod
    def _get_active(cls, owner: Any) -> List["AccessContext"]:
        active = owner.__dict__.get(cls._ACTIVE_ATTR)
        if active is None:
            active = []
            owner.__dict__[cls._ACTIVE_ATTR] = active
        return active

    @classmethod
    def is_active(cls, owner: Any) -> bool:
        """Whether a ``before_access`` hook of ``owner`` is currently executing."""
        return bool(owner.__dict__.get(cls._ACTIVE_ATTR))

    def __init__(self, owner: Any, name: str = "unknown"):
        self.owner = owner
        self.name = name

    def __enter__(self):
        self._get_active(self.owner).append(self)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._get_active(self.owner).pop()
