"""
dslutils Common Types - Shared Type Definitions
===============================================

This module contains the type variables and hook signatures shared by the value
cells, the list cells and the declaration facade. Keeping them in one place
avoids circular imports between the cell modules and the protocols.
"""

from typing import TYPE_CHECKING, Any, Callable, MutableSequence, TypeVar

# ============================================================================
# TYPE VARIABLES
# ============================================================================

T = TypeVar("T")
I = TypeVar("I")  # Internal (stored) representation
O = TypeVar("O")  # External (exposed) representation
R = TypeVar("R")  # Result of a bypass block

# ============================================================================
# FORWARD REFERENCES
# ============================================================================

if TYPE_CHECKING:
    from .sequence.protocol import DslMutableList
    from .value.protocol import DslValue

# ============================================================================
# TRANSFORM TYPES
# ============================================================================

TransformFunction = Callable[[Any], Any]

# ============================================================================
# VALUE HOOK TYPES
# ============================================================================

# Every value hook receives the owning cell first
ValueHook = Callable[["DslValue[Any]", Any], None]
ValuePredicate = Callable[["DslValue[Any]", Any], bool]
MessageBuilder = Callable[["DslValue[Any]"], Any]

# ============================================================================
# LIST HOOK TYPES
# ============================================================================

IndexHook = Callable[["DslMutableList[Any]", int], None]
ElementHook = Callable[["DslMutableList[Any]", int, Any], None]
AccessHook = Callable[["DslMutableList[Any]"], None]
ReplaceHook = Callable[["DslMutableList[Any]", MutableSequence[Any]], None]
AccessTransform = Callable[["DslMutableList[Any]"], MutableSequence[Any]]

# ============================================================================
# CONSTRUCTION CALLBACK TYPES
# ============================================================================

# Called once per owner instance with the freshly created cell or bypass view
CellCallback = Callable[[Any, Any], None]

# ============================================================================
# DEFAULT HOOKS
# ============================================================================


def noop(*args: Any) -> None:
    """Default for every hook that is not supplied."""


def identity(value: Any) -> Any:
    return value


def identity_access(lst: Any) -> Any:
    """Default access transform: the attribute read returns the list cell itself."""
    return lst
