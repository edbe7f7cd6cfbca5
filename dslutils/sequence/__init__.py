"""
dslutils Sequence Module - Hook-Guarded List Cells
==================================================

This module provides the transformed mutable sequence base class, the hooked
``ListProperty`` cell with its hook-free view, and the protocols list hooks see.
"""

from .abstract import AbstractDslMutableList
from .property import BypassedHooksList, ListProperty
from .protocol import DslMutableList, DslReplaceableList

__all__ = [
    "AbstractDslMutableList",
    "BypassedHooksList",
    "DslMutableList",
    "DslReplaceableList",
    "ListProperty",
]
