"""
dslutils - Hook-Guarded Properties for DSL Classes
==================================================

Declare a property once and get consistent transform, validation, bypass and
lock semantics on every read and write.
"""

from .context import AccessContext
from .dsl import (
    ValueDsl,
    ValueDslMeta,
    conditional,
    list_,
    list_value,
    optional,
    prepared,
    replaceable_list,
    required,
    try_bypass_hooks,
    value,
)
from .exceptions import (
    DslError,
    InvalidArgumentError,
    InvalidStateError,
    InvalidValueError,
    LockedError,
)
from .lockable import LockableValueDsl
from .sequence import (
    AbstractDslMutableList,
    BypassedHooksList,
    DslMutableList,
    DslReplaceableList,
    ListProperty,
)
from .value import BypassedHooks, BypassedHooksValue, DslValue, Value, ValueProperty

__version__ = "0.1.0"

__all__ = [
    # DSL base classes
    "ValueDsl",
    "ValueDslMeta",
    "LockableValueDsl",
    # Declarations
    "value",
    "conditional",
    "required",
    "prepared",
    "optional",
    "list_value",
    "list_",
    "replaceable_list",
    "try_bypass_hooks",
    # Cells
    "ValueProperty",
    "BypassedHooksValue",
    "AbstractDslMutableList",
    "ListProperty",
    "BypassedHooksList",
    # Protocols
    "Value",
    "BypassedHooks",
    "DslValue",
    "DslMutableList",
    "DslReplaceableList",
    # Scoping
    "AccessContext",
    # Exceptions
    "DslError",
    "InvalidValueError",
    "InvalidArgumentError",
    "InvalidStateError",
    "LockedError",
]
