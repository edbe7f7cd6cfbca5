"""
dslutils Descriptors - Attribute Access for DSL Properties
==========================================================

The factory functions in ``dslutils.dsl`` return the descriptors defined here.
A descriptor lives on the class and only records *how* a property is declared;
the state lives in a per-instance cell (``ValueProperty`` or ``ListProperty``)
that the owning ``ValueDsl`` builds on construction.

How It Works
------------

1. ``__set_name__`` records the attribute name.
2. ``ValueDslMeta`` collects every descriptor of the class and its bases.
3. ``ValueDsl.__init__`` asks each descriptor to ``create_cell`` for the new
   instance. The descriptor delegates to the instance's ``_value_property`` or
   ``_list_property`` builder, which subclasses such as ``LockableValueDsl``
   override to inject extra hooks.
4. ``obj.attr`` reads through the cell (``get_value``), ``obj.attr = x`` writes
   through it (``set_value`` or ``replace``).

Accessing the attribute on the class returns the descriptor itself.
"""

import copy
import logging
from typing import Any, Dict, Generic, Optional, Type

from .common_types import CellCallback, T
from .sequence import ListProperty
from .value import ValueProperty

logger = logging.getLogger(__name__)


class DslPropertyDescriptor(Generic[T]):
    """
    Base descriptor for attributes backed by a hook-guarded cell.

    Args:
        options: Keyword arguments forwarded to the owner's cell builder.
        on_create: Optional ``(owner, cell_or_view)`` callback run once per
            instance when the cell is built.
    """

    def __init__(
        self, options: Dict[str, Any], on_create: Optional[CellCallback] = None
    ) -> None:
        self.attr_name: Optional[str] = None
        self._owner_class: Optional[Type] = None
        self._options = options
        self._on_create = on_create

    def __set_name__(self, owner: Type, name: str) -> None:
        """Called when the descriptor is assigned to a class attribute."""
        self.attr_name = name
        self._owner_class = owner

    def create_cell(self, instance: Any) -> Any:
        raise NotImplementedError

    def _cell(self, instance: Any) -> Any:
        if self.attr_name is None:
            raise AttributeError("Descriptor not properly initialized")
        return instance.dsl_property(self.attr_name)

    def __get__(self, instance: Optional[object], owner: Optional[Type] = None) -> Any:
        if instance is None:
            return self
        return self._cell(instance).get_value()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.attr_name!r})"


class ValueDescriptor(DslPropertyDescriptor[T]):
    """Descriptor for scalar properties declared with ``value`` and friends."""

    def create_cell(self, instance: Any) -> ValueProperty:
        options = dict(self._options)
        # Each instance owns its own copy of a mutable default
        options["initial"] = copy.copy(options["initial"])
        cell = instance._value_property(name=self.attr_name, **options)
        logger.debug(f"Created value property '{self.attr_name}' for {type(instance).__name__}")
        if self._on_create is not None:
            self._on_create(instance, cell.bypassed_hooks_value)
        return cell

    def __set__(self, instance: object, value: T) -> None:
        self._cell(instance).set_value(value)


class ListDescriptor(DslPropertyDescriptor[T]):
    """
    Descriptor for list properties declared with ``list_value``, ``list_`` or
    ``replaceable_list``.

    Assignment replaces the whole list when the declaration is replaceable and
    raises ``AttributeError`` otherwise. Assigning a list cell back to its own
    attribute does nothing, which is what ``obj.attr += [...]`` ends with after
    extending the list in place.
    """

    def __init__(
        self,
        options: Dict[str, Any],
        replaceable: bool,
        on_create: Optional[CellCallback] = None,
    ) -> None:
        super().__init__(options, on_create)
        self.replaceable = replaceable

    def create_cell(self, instance: Any) -> ListProperty:
        cell = instance._list_property(
            name=self.attr_name, replaceable=self.replaceable, **self._options
        )
        logger.debug(f"Created list property '{self.attr_name}' for {type(instance).__name__}")
        if self._on_create is not None:
            self._on_create(instance, cell)
        return cell

    def __set__(self, instance: object, value: Any) -> None:
        cell = self._cell(instance)
        if value is cell:
            return
        if not self.replaceable:
            raise AttributeError(
                f"List property '{self.attr_name}' of {type(instance).__name__} "
                f"cannot be replaced"
            )
        cell.replace(value)
