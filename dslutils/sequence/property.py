"""
dslutils ListProperty - Hook-Guarded List Cell
==============================================

``ListProperty`` is the cell behind every list attribute of a ``ValueDsl`` class.
It is an ``AbstractDslMutableList`` whose element operations and whole-list
operations each run a caller-supplied hook first.

Hooks
-----

Every hook receives the list cell as its first argument and may mutate it.

===================  =========================================  ===============================
Hook                 Fires before                               Extra arguments
===================  =========================================  ===============================
``before_get``       ``lst[i]``                                 ``index``
``before_set``       ``lst[i] = v``, ``insert``/``append``      ``index, element``
``before_remove``    ``del lst[i]``, ``pop``, ``remove``         ``index``
``before_access``    reading the attribute itself               none
``before_replace``   assigning the attribute                    ``new_list`` (a mutable copy)
===================  =========================================  ===============================

``access_transform`` runs after ``before_access`` and returns what the attribute
read evaluates to, ``lst`` itself by default. If it returns some other sequence,
that sequence is not hooked: mutating it bypasses the whole pipeline.

Index bounds are checked before any hook runs, and every hook runs before the
delegate is touched, so a hook that raises leaves the list unchanged.

Bypassing hooks
---------------

``bypassed_hooks_list`` is a ``MutableSequence`` over the same storage that applies
the element transforms but runs no hook. ``bypass_hooks(block)`` hands it to a
block:

```python
def before_set(lst, index, element):
    if element == "5":
        raise ValueError("5 is reserved")

lst.bypass_hooks(lambda raw: raw.append("5"))  # before_set not called
```
"""

import logging
from typing import Any, Callable, Iterable, MutableSequence, Optional, Sequence

from ..common_types import (
    AccessHook,
    AccessTransform,
    ElementHook,
    I,
    IndexHook,
    O,
    R,
    ReplaceHook,
    identity,
    identity_access,
    noop,
)
from .abstract import AbstractDslMutableList

logger = logging.getLogger(__name__)


class BypassedHooksList(MutableSequence):
    """Hook-free view over the storage of a ``ListProperty``."""

    def __init__(self, cell: "ListProperty[Any, Any]") -> None:
        self._cell = cell

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        return self._cell._original_get(self._cell._check_index(index))

    def __setitem__(self, index: Any, element: Any) -> None:
        if isinstance(index, slice):
            raise TypeError("Slice assignment is not supported on a bypass view")
        self._cell._original_set(self._cell._check_index(index), element)

    def __delitem__(self, index: Any) -> None:
        if isinstance(index, slice):
            for position in sorted(range(*index.indices(len(self))), reverse=True):
                del self[position]
            return
        self._cell._original_remove_at(self._cell._check_index(index))

    def insert(self, index: int, element: Any) -> None:
        self._cell._original_insert(self._cell._check_position(index), element)

    def replace(self, new_list: Iterable[Any]) -> None:
        self._cell._original_replace(new_list)

    def __len__(self) -> int:
        return len(self._cell)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence) or isinstance(other, (str, bytes)):
            return NotImplemented
        return list(self) == list(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BypassedHooksList({list(self)!r})"


class ListProperty(AbstractDslMutableList[I, O]):
    """
    A hook-guarded list with separate internal and external element types.

    Args:
        initial: Initial internal elements. The list is copied.
        get_transform: Maps a stored element to its external form.
        set_transform: Maps an external element to its stored form.
        before_get: ``(lst, index)``.
        before_set: ``(lst, index, element)``, shared by assignment and insertion.
        before_remove: ``(lst, index)``.
        before_access: ``(lst)``, fired once per read of the attribute.
        before_replace: ``(lst, new_list)``, fired when the attribute is assigned.
        access_transform: ``(lst) -> sequence`` returned by an attribute read.
        name: Attribute name, used in error messages.
        owner: The object the list belongs to.
        replaceable: Whether the attribute accepts assignment.
    """

    def __init__(
        self,
        initial: Optional[Iterable[I]] = None,
        get_transform: Callable[[I], O] = identity,
        set_transform: Callable[[O], I] = identity,
        before_get: IndexHook = noop,
        before_set: ElementHook = noop,
        before_remove: IndexHook = noop,
        before_access: AccessHook = noop,
        before_replace: ReplaceHook = noop,
        access_transform: AccessTransform = identity_access,
        name: Optional[str] = None,
        owner: Any = None,
        replaceable: bool = True,
    ) -> None:
        super().__init__(initial)
        self._element_get_transform = get_transform
        self._element_set_transform = set_transform
        self._before_get = before_get
        self._before_set = before_set
        self._before_remove = before_remove
        self._before_access = before_access
        self._before_replace = before_replace
        self._access_transform = access_transform
        self.name = name
        self.owner = owner
        self.replaceable = replaceable
        self.bypassed_hooks_list = BypassedHooksList(self)

    def _get_transform(self, original: I) -> O:
        return self._element_get_transform(original)

    def _set_transform(self, original: O) -> I:
        return self._element_set_transform(original)

    # ------------------------------------------------------------------
    # Whole-list operations
    # ------------------------------------------------------------------

    def get_value(self) -> MutableSequence[O]:
        """Run ``before_access`` then ``access_transform`` and return the result."""
        self._before_access(self)
        return self._access_transform(self)

    def replace(self, new_list: Iterable[O]) -> None:
        """Run ``before_replace`` on a copy of ``new_list`` then store it."""
        incoming = list(new_list)
        self._before_replace(self, incoming)
        self._original_replace(incoming)

    # ------------------------------------------------------------------
    # Element operations
    # ------------------------------------------------------------------

    def get(self, index: int) -> O:
        index = self._check_index(index)
        self._before_get(self, index)
        return self._original_get(index)

    def set(self, index: int, element: O) -> O:
        index = self._check_index(index)
        self._before_set(self, index, element)
        return self._original_set(index, element)

    def add(self, index: int, element: O) -> None:
        index = self._check_position(index)
        self._before_set(self, index, element)
        self._original_insert(index, element)

    def remove_at(self, index: int) -> O:
        index = self._check_index(index)
        self._before_remove(self, index)
        return self._original_remove_at(index)

    def bypass_hooks(self, block: Callable[[MutableSequence[O]], R]) -> R:
        """Run ``block`` against the hook-free view and return its result."""
        logger.debug(f"Bypassing hooks of list '{self.name}'")
        return block(self.bypassed_hooks_list)
