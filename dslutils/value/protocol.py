"""
dslutils Value Protocols - Scalar Cell Interface Definitions
============================================================

This module defines the Protocol-based interfaces hooks see when they are invoked
on a scalar property.

- ``Value``: anything with a readable and writable ``value``.
- ``BypassedHooks``: a ``Value`` whose reads and writes skip every hook but still
  apply the property's transforms.
- ``DslValue``: the handle passed as first argument to every scalar hook. Its
  ``value`` goes through the full hook pipeline, and ``bypass_hooks`` gives a
  block privileged access to the same storage.

Protocols are ``@runtime_checkable`` so ``isinstance()`` can be used to tell a
hook-bearing cell apart from a plain object.
"""

from typing import Any, Callable, Optional, Protocol, runtime_checkable

from ..common_types import R, T


@runtime_checkable
class Value(Protocol[T]):
    """Protocol for a single readable and writable slot."""

    @property
    def value(self) -> T: ...

    @value.setter
    def value(self, new_value: T) -> None: ...


@runtime_checkable
class BypassedHooks(Value[T], Protocol[T]):
    """
    Protocol for the hook-free view of a scalar property.

    Reads apply the get transform and writes apply the set transform, but none
    of ``before_get``, ``after_get``, ``before_set`` or ``after_set`` run.
    """

    ...


@runtime_checkable
class DslValue(Value[T], Protocol[T]):
    """
    Protocol for the handle a scalar hook receives.

    Example:
        ```python
        def before_set(prop: DslValue[str], new_value: str) -> None:
            if new_value == prop.bypass_hooks(lambda raw: raw.value):
                print(f"{prop.name} is unchanged")
        ```
    """

    name: Optional[str]
    owner: Any

    def bypass_hooks(self, block: Callable[[BypassedHooks[T]], R]) -> R: ...
