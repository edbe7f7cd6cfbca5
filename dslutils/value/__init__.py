"""
dslutils Value Module - Hook-Guarded Scalar Cells
=================================================

This module provides ``ValueProperty``, the cell behind every scalar attribute,
its hook-free view ``BypassedHooksValue``, and the protocols hooks see.
"""

from .property import BypassedHooksValue, ValueProperty
from .protocol import BypassedHooks, DslValue, Value

__all__ = ["BypassedHooks", "BypassedHooksValue", "DslValue", "Value", "ValueProperty"]
