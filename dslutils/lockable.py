"""
dslutils Lockable DSL - Freezing DSL Objects After Construction
===============================================================

``LockableValueDsl`` is a ``ValueDsl`` that can be locked once it has been built.
After ``_lock()`` every user-driven mutation fails with ``LockedError`` before
anything is changed:

- writing any scalar property;
- ``lst[i] = v``, ``insert``/``append``/``extend``, ``del``/``pop``/``remove``
  and ``clear`` on any list property;
- assigning a replaceable list property.

Reads keep working, and so do the mutations a list performs from its own
``before_access`` hook (for instance appending a housekeeping element every time
the list is read): those run inside an ``AccessContext`` and are exempt from the
lock. Mutation through ``bypass_hooks`` views is privileged and never checked.

Locking is one-way. Subclasses call ``_lock()`` at the end of their build step,
or use the object as a context manager, which locks it when the ``with`` block
completes without an exception:

```python
class Settings(LockableValueDsl):
    retries = prepared(3)
    hosts = list_()

with Settings() as settings:
    settings.retries = 5
    settings.hosts.append("db")

settings.is_locked       # True
settings.retries = 1     # LockedError
```
"""

import logging
from typing import Any, Callable

from .common_types import (
    AccessHook,
    ElementHook,
    IndexHook,
    ReplaceHook,
    TransformFunction,
    ValueHook,
)
from .context import AccessContext
from .dsl import ValueDsl
from .exceptions import LockedError

logger = logging.getLogger(__name__)


class LockableValueDsl(ValueDsl):
    """``ValueDsl`` whose properties can be frozen with ``_lock()``."""

    _is_locked = False

    @property
    def is_locked(self) -> bool:
        """Whether the object has been locked."""
        return self._is_locked

    def _lock(self) -> None:
        """Lock the object, preventing any further modification."""
        logger.debug(f"Locking {type(self).__name__}")
        self._is_locked = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self._lock()

    def _check_unlocked(self, name: str, message: str) -> None:
        if self._is_locked and not AccessContext.is_active(self):
            logger.debug(f"Rejected modification of '{name}': {message}")
            raise LockedError(message, owner=self, name=name)

    def _inject_value_check(self, name: str, hook: ValueHook) -> ValueHook:
        message = (
            f"Class {type(self).__name__} is locked and the property {name} "
            f"cannot be modified."
        )

        def checked(prop: Any, new_value: Any) -> None:
            self._check_unlocked(name, message)
            hook(prop, new_value)

        return checked

    def _inject_list_check(self, name: str, hook: Callable[..., Any]) -> Callable[..., Any]:
        message = (
            f"List {name} of class {type(self).__name__} is locked and its "
            f"elements cannot be modified."
        )

        def checked(lst: Any, *args: Any) -> Any:
            self._check_unlocked(name, message)
            return hook(lst, *args)

        return checked

    def _scope_access(self, name: str, hook: AccessHook) -> AccessHook:
        def scoped(lst: Any) -> None:
            with AccessContext(self, name):
                hook(lst)

        return scoped

    def _value_property(
        self,
        name: str,
        initial: Any,
        get_transform: TransformFunction,
        set_transform: TransformFunction,
        before_get: ValueHook,
        before_set: ValueHook,
        after_get: ValueHook,
        after_set: ValueHook,
    ):
        return super()._value_property(
            name,
            initial,
            get_transform,
            set_transform,
            before_get=before_get,
            before_set=self._inject_value_check(name, before_set),
            after_get=after_get,
            after_set=after_set,
        )

    def _list_property(
        self,
        name: str,
        replaceable: bool,
        initial: Any,
        get_transform: TransformFunction,
        set_transform: TransformFunction,
        before_get: IndexHook,
        before_set: ElementHook,
        before_remove: IndexHook,
        before_access: AccessHook,
        before_replace: ReplaceHook,
        access_transform: Any,
    ):
        return super()._list_property(
            name,
            replaceable,
            initial,
            get_transform,
            set_transform,
            before_get=before_get,
            before_set=self._inject_list_check(name, before_set),
            before_remove=self._inject_list_check(name, before_remove),
            before_access=self._scope_access(name, before_access),
            before_replace=self._inject_list_check(name, before_replace),
            access_transform=access_transform,
        )
