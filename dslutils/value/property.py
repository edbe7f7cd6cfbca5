"""
dslutils ValueProperty - Hook-Guarded Scalar Cell
=================================================

This module provides ``ValueProperty``, the cell behind every scalar attribute of a
``ValueDsl`` class. A cell owns a single stored value of an internal type and
exposes it through an external type, running caller-supplied hooks around every
read and write.

Pipeline
--------

Reading::

    before_get(cell, stored) -> get_transform(stored) -> after_get(cell, value) -> value

Writing::

    before_set(cell, value) -> set_transform(value) -> store -> after_set(cell, stored)

Any hook may raise to reject the operation. ``before_set`` and ``set_transform``
run before the store, and a failing ``after_set`` restores the previous value,
so a rejected write never leaves the cell modified.

Bypassing hooks
---------------

Privileged code (defaults, housekeeping performed by another hook) can use the
cell's ``bypassed_hooks_value`` view, or ``bypass_hooks(block)``. The view applies
the transforms and nothing else:

```python
cell = ValueProperty(1, get_transform=str, set_transform=int,
                     before_set=reject_everything)
cell.bypassed_hooks_value.value = "5"   # before_set not called
cell.bypass_hooks(lambda raw: raw.value)  # "5"
```
"""

import logging
from typing import Any, Callable, Generic, Optional

from ..common_types import I, O, R, ValueHook, noop
from .protocol import BypassedHooks

logger = logging.getLogger(__name__)


class BypassedHooksValue(Generic[O]):
    """Hook-free view over the storage of a ``ValueProperty``."""

    def __init__(self, cell: "ValueProperty[Any, O]") -> None:
        self._cell = cell

    @property
    def value(self) -> O:
        return self._cell._original_get()

    @value.setter
    def value(self, new_value: O) -> None:
        self._cell._original_set(new_value)

    def __repr__(self) -> str:
        return f"BypassedHooksValue({self._cell.name}={self._cell._stored!r})"


class ValueProperty(Generic[I, O]):
    """
    A single hook-guarded slot with separate internal and external types.

    The cell is also the handle every hook receives as its first argument: hooks
    can read ``name`` and ``owner``, go through the pipeline again via ``value``,
    or reach the raw storage with ``bypass_hooks``.

    Args:
        initial: Initial internal value.
        get_transform: Maps the internal value to the external one.
        set_transform: Maps an external value to the internal one. May raise to
            reject malformed input.
        before_get: ``(cell, stored)``, called before reading.
        before_set: ``(cell, value)``, called with the raw external value.
        after_get: ``(cell, value)``, called with the transformed value.
        after_set: ``(cell, stored)``, called with the new internal value.
        name: Attribute name, used in error messages.
        owner: The object the cell belongs to.
    """

    def __init__(
        self,
        initial: I,
        get_transform: Callable[[I], O],
        set_transform: Callable[[O], I],
        before_get: ValueHook = noop,
        before_set: ValueHook = noop,
        after_get: ValueHook = noop,
        after_set: ValueHook = noop,
        name: Optional[str] = None,
        owner: Any = None,
    ) -> None:
        self._stored: I = initial
        self._get_transform = get_transform
        self._set_transform = set_transform
        self._before_get = before_get
        self._before_set = before_set
        self._after_get = after_get
        self._after_set = after_set
        self.name = name
        self.owner = owner
        self.bypassed_hooks_value: BypassedHooks[O] = BypassedHooksValue(self)

    def _original_get(self) -> O:
        return self._get_transform(self._stored)

    def _original_set(self, new_value: O) -> I:
        stored = self._set_transform(new_value)
        self._stored = stored
        return stored

    def get_value(self) -> O:
        """Read the external value through the full hook pipeline."""
        self._before_get(self, self._stored)
        result = self._original_get()
        self._after_get(self, result)
        return result

    def set_value(self, new_value: O) -> None:
        """Write an external value through the full hook pipeline."""
        self._before_set(self, new_value)
        previous = self._stored
        stored = self._original_set(new_value)
        try:
            self._after_set(self, stored)
        except BaseException:
            self._stored = previous
            raise

    @property
    def value(self) -> O:
        return self.get_value()

    @value.setter
    def value(self, new_value: O) -> None:
        self.set_value(new_value)

    def bypass_hooks(self, block: Callable[[BypassedHooks[O]], R]) -> R:
        """Run ``block`` against the hook-free view and return its result."""
        logger.debug(f"Bypassing hooks of property '{self.name}'")
        return block(self.bypassed_hooks_value)

    def __repr__(self) -> str:
        return f"ValueProperty(name={self.name!r}, stored={self._stored!r})"
