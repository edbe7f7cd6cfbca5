"""
dslutils Context Module
=======================

Scope markers used by the lockable DSL facade.
"""

from .access_context import AccessContext

__all__ = ["AccessContext"]
