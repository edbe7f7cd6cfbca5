"""
dslutils DSL - Declaring Hook-Guarded Properties
================================================

This module provides ``ValueDsl``, the base class for "DSL classes", and the
factory functions used to declare their properties. A DSL class reads like a
plain configuration object, but every property read and write goes through a
pipeline of transformation and validation hooks.

Basic Usage
-----------

```python
from dslutils import ValueDsl, conditional, list_, required, value

class ServerConfig(ValueDsl):
    port = value(8080, get_transform=str, set_transform=int)
    workers = conditional(
        2,
        get_transform=lambda v: v,
        set_transform=lambda v: v,
        validate_set=lambda prop, v: v > 0,
        message_builder=lambda prop: "workers must be positive",
    )
    name = required()
    hosts = list_(["localhost"])

config = ServerConfig()
config.port = "9000"         # stored as 9000, read back as "9000"
config.workers = 0           # InvalidArgumentError: workers must be positive
config.name                  # InvalidStateError: not provided yet
config.hosts.append("db")    # list mutated in place, hooks fire per element
```

Declarations
------------

=====================  ==========================================================
Factory                Declares
=====================  ==========================================================
``value``              scalar with independent internal/external types and hooks
``conditional``        scalar whose hooks are predicates raising ``InvalidValueError``
``required``           scalar that must be written before it can be read
``prepared``           scalar with a default and identity transforms
``optional``           ``prepared`` defaulting to ``None``
``list_value``         list with independent element types; replaceable when a
                       ``before_replace`` hook is given
``list_``              list with identity transforms, mutated in place only
``replaceable_list``   list that can also be reassigned wholesale
=====================  ==========================================================

Every hook receives the cell first (``ValueProperty`` for scalars,
``ListProperty`` for lists), so a hook can reach the property's ``name``, its
``owner`` and its ``bypass_hooks`` view.

Builder scopes
--------------

DSL classes are meant to be filled in by a single builder block. Nesting builder
blocks of different DSL objects so that an unqualified attribute could resolve
to either is not supported; always qualify attributes with the object they
belong to.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, MutableSequence, Optional, Type

from .common_types import (
    AccessHook,
    AccessTransform,
    CellCallback,
    ElementHook,
    IndexHook,
    MessageBuilder,
    R,
    ReplaceHook,
    TransformFunction,
    ValueHook,
    ValuePredicate,
    identity,
    identity_access,
    noop,
)
from .descriptors import DslPropertyDescriptor, ListDescriptor, ValueDescriptor
from .exceptions import InvalidArgumentError, InvalidStateError
from .sequence import DslMutableList, ListProperty
from .value import ValueProperty

logger = logging.getLogger(__name__)


def _always(*args: Any) -> bool:
    return True


def _invalid_value_message(prop: Any) -> str:
    return f"Invalid value for property {prop.name}."


def _required_message(prop: Any) -> str:
    return f"Property {prop.name} is required and cannot be None."


# ============================================================================
# SCALAR DECLARATIONS
# ============================================================================


def value(
    initial: Any,
    get_transform: TransformFunction,
    set_transform: TransformFunction,
    before_get: ValueHook = noop,
    before_set: ValueHook = noop,
    after_get: ValueHook = noop,
    after_set: ValueHook = noop,
    get_bypassed_hooks_value: Optional[CellCallback] = None,
) -> ValueDescriptor:
    """
    Declare a scalar property with custom transforms and hooks.

    Args:
        initial: Initial internal value, shallow-copied for every instance.
        get_transform: Internal to external mapping, applied on every read.
        set_transform: External to internal mapping, applied on every write.
        before_get: ``(prop, stored)`` pre-hook of reads.
        before_set: ``(prop, value)`` pre-hook of writes, sees the raw value.
        after_get: ``(prop, value)`` post-hook of reads, sees the external value.
        after_set: ``(prop, stored)`` post-hook of writes, sees the new internal
            value. If it raises the previous value is restored.
        get_bypassed_hooks_value: ``(owner, view)`` callback receiving the
            hook-free view once per instance.
    """
    return ValueDescriptor(
        dict(
            initial=initial,
            get_transform=get_transform,
            set_transform=set_transform,
            before_get=before_get,
            before_set=before_set,
            after_get=after_get,
            after_set=after_set,
        ),
        on_create=get_bypassed_hooks_value,
    )


def conditional(
    initial: Any,
    get_transform: TransformFunction,
    set_transform: TransformFunction,
    before_get: ValuePredicate = _always,
    before_set: ValuePredicate = _always,
    validate_get: ValuePredicate = _always,
    validate_set: ValuePredicate = _always,
    get_bypassed_hooks_value: Optional[CellCallback] = None,
    message_builder: MessageBuilder = _invalid_value_message,
) -> ValueDescriptor:
    """
    Declare a scalar property guarded by predicates.

    ``before_get`` and ``validate_get`` guard reads and raise
    ``InvalidStateError`` when they return false; ``before_set`` and
    ``validate_set`` guard writes and raise ``InvalidArgumentError``. Both
    carry ``message_builder(prop)`` as their message.

    Args:
        before_get: ``(prop, stored) -> bool`` checked before reading.
        before_set: ``(prop, value) -> bool`` checked on the raw written value.
        validate_get: ``(prop, value) -> bool`` checked on the transformed read value.
        validate_set: ``(prop, stored) -> bool`` checked on the new internal value.
        message_builder: ``(prop) -> message``.
    """

    def check_before_get(prop: Any, stored: Any) -> None:
        if not before_get(prop, stored):
            raise InvalidStateError(str(message_builder(prop)))

    def check_before_set(prop: Any, new_value: Any) -> None:
        if not before_set(prop, new_value):
            raise InvalidArgumentError(str(message_builder(prop)))

    def check_after_get(prop: Any, result: Any) -> None:
        if not validate_get(prop, result):
            raise InvalidStateError(str(message_builder(prop)))

    def check_after_set(prop: Any, stored: Any) -> None:
        if not validate_set(prop, stored):
            raise InvalidArgumentError(str(message_builder(prop)))

    return value(
        initial,
        get_transform,
        set_transform,
        before_get=check_before_get,
        before_set=check_before_set,
        after_get=check_after_get,
        after_set=check_after_set,
        get_bypassed_hooks_value=get_bypassed_hooks_value,
    )


def required(
    get_transform: TransformFunction = identity,
    set_transform: TransformFunction = identity,
    before_get: ValueHook = noop,
    before_set: ValueHook = noop,
    validate_get: ValuePredicate = _always,
    validate_set: ValuePredicate = _always,
    get_bypassed_hooks_value: Optional[CellCallback] = None,
    message_builder: MessageBuilder = _required_message,
) -> ValueDescriptor:
    """
    Declare a scalar property that has no value until it is written.

    Reading before any write raises ``InvalidStateError``; writing ``None``
    raises ``InvalidArgumentError``. The transforms never see ``None``.
    ``before_get`` and ``before_set`` are observers that run before the
    presence check.
    """

    def present_before_get(prop: Any, stored: Any) -> bool:
        before_get(prop, stored)
        return stored is not None

    def present_before_set(prop: Any, new_value: Any) -> bool:
        before_set(prop, new_value)
        return new_value is not None

    return conditional(
        None,
        get_transform=get_transform,
        set_transform=set_transform,
        before_get=present_before_get,
        before_set=present_before_set,
        validate_get=validate_get,
        validate_set=validate_set,
        get_bypassed_hooks_value=get_bypassed_hooks_value,
        message_builder=message_builder,
    )


def prepared(
    initial: Any,
    before_get: ValueHook = noop,
    before_set: ValueHook = noop,
    get_transform: TransformFunction = identity,
    set_transform: TransformFunction = identity,
    after_get: ValueHook = noop,
    after_set: ValueHook = noop,
    get_bypassed_hooks_value: Optional[CellCallback] = None,
) -> ValueDescriptor:
    """Declare a scalar property holding ``initial`` until overridden."""
    return value(
        initial,
        get_transform,
        set_transform,
        before_get=before_get,
        before_set=before_set,
        after_get=after_get,
        after_set=after_set,
        get_bypassed_hooks_value=get_bypassed_hooks_value,
    )


def optional(
    before_get: ValueHook = noop,
    before_set: ValueHook = noop,
    get_transform: TransformFunction = identity,
    set_transform: TransformFunction = identity,
    after_get: ValueHook = noop,
    after_set: ValueHook = noop,
    get_bypassed_hooks_value: Optional[CellCallback] = None,
) -> ValueDescriptor:
    """
    Declare a nullable scalar property defaulting to ``None``.

    The transforms receive ``None`` as well and must handle it.
    """
    return prepared(
        None,
        before_get=before_get,
        before_set=before_set,
        get_transform=get_transform,
        set_transform=set_transform,
        after_get=after_get,
        after_set=after_set,
        get_bypassed_hooks_value=get_bypassed_hooks_value,
    )


# ============================================================================
# LIST DECLARATIONS
# ============================================================================


def list_value(
    initial: Optional[Iterable[Any]] = None,
    get_transform: TransformFunction = identity,
    set_transform: TransformFunction = identity,
    before_get: IndexHook = noop,
    before_set: ElementHook = noop,
    before_remove: IndexHook = noop,
    before_access: AccessHook = noop,
    before_replace: Optional[ReplaceHook] = None,
    access_transform: AccessTransform = identity_access,
    get_dsl_mutable_list: Optional[CellCallback] = None,
) -> ListDescriptor:
    """
    Declare a list property with independent internal and external element types.

    Without ``before_replace`` the attribute cannot be assigned and the list is
    only mutated in place. Passing ``before_replace`` makes it replaceable.

    Args:
        initial: Initial internal elements. Read once here, then copied for
            every instance.
        get_transform: Stored to external element mapping.
        set_transform: External to stored element mapping.
        before_get: ``(lst, index)``.
        before_set: ``(lst, index, element)``, shared by assignment and insertion.
        before_remove: ``(lst, index)``.
        before_access: ``(lst)``, fired every time the attribute is read.
        before_replace: ``(lst, new_list)``, may mutate ``new_list``.
        access_transform: ``(lst) -> sequence`` that the attribute read returns.
            A result other than ``lst`` is not hooked.
        get_dsl_mutable_list: ``(owner, lst)`` callback run once per instance.
    """
    return ListDescriptor(
        dict(
            initial=list(initial) if initial is not None else None,
            get_transform=get_transform,
            set_transform=set_transform,
            before_get=before_get,
            before_set=before_set,
            before_remove=before_remove,
            before_access=before_access,
            before_replace=before_replace if before_replace is not None else noop,
            access_transform=access_transform,
        ),
        replaceable=before_replace is not None,
        on_create=get_dsl_mutable_list,
    )


def list_(
    initial: Optional[Iterable[Any]] = None,
    get_transform: TransformFunction = identity,
    set_transform: TransformFunction = identity,
    before_get: IndexHook = noop,
    before_set: ElementHook = noop,
    before_remove: IndexHook = noop,
    before_access: AccessHook = noop,
    access_transform: AccessTransform = identity_access,
    get_dsl_mutable_list: Optional[CellCallback] = None,
) -> ListDescriptor:
    """Declare a non-replaceable list property, identity transforms by default."""
    return list_value(
        initial,
        get_transform=get_transform,
        set_transform=set_transform,
        before_get=before_get,
        before_set=before_set,
        before_remove=before_remove,
        before_access=before_access,
        access_transform=access_transform,
        get_dsl_mutable_list=get_dsl_mutable_list,
    )


def replaceable_list(
    initial: Optional[Iterable[Any]] = None,
    get_transform: TransformFunction = identity,
    set_transform: TransformFunction = identity,
    before_get: IndexHook = noop,
    before_set: ElementHook = noop,
    before_remove: IndexHook = noop,
    before_access: AccessHook = noop,
    before_replace: ReplaceHook = noop,
    access_transform: AccessTransform = identity_access,
    get_dsl_mutable_list: Optional[CellCallback] = None,
) -> ListDescriptor:
    """Declare a list property that can also be reassigned wholesale."""
    return list_value(
        initial,
        get_transform=get_transform,
        set_transform=set_transform,
        before_get=before_get,
        before_set=before_set,
        before_remove=before_remove,
        before_access=before_access,
        before_replace=before_replace,
        access_transform=access_transform,
        get_dsl_mutable_list=get_dsl_mutable_list,
    )


def try_bypass_hooks(
    sequence: MutableSequence[Any],
    block: Callable[[MutableSequence[Any]], R],
    failed: Optional[Callable[[], None]] = None,
) -> Optional[R]:
    """
    Run ``block`` on the hook-free view of ``sequence`` if it is a DSL list.

    If ``sequence`` is not hook-bearing, ``failed`` is called (when given) and
    ``None`` is returned.

    Note:
        A DSL list reaches the caller through an attribute read, so its
        ``before_access`` hook has already fired by the time this runs.
    """
    if isinstance(sequence, DslMutableList):
        return sequence.bypass_hooks(block)
    logger.debug(f"Cannot bypass hooks of {type(sequence).__name__}, not a DSL list")
    if failed is not None:
        failed()
    return None


# ============================================================================
# DSL BASE CLASS
# ============================================================================


class ValueDslMeta(type):
    """
    Metaclass collecting the DSL property declarations of a class.

    Declarations are gathered from the whole MRO in definition order. A subclass
    may redeclare an inherited property, or hide it by binding the name to
    something that is not a declaration.
    """

    def __new__(mcs, name: str, bases: tuple, namespace: dict, **kwargs: Any) -> Type:
        cls = super().__new__(mcs, name, bases, namespace, **kwargs)

        declared: Dict[str, DslPropertyDescriptor] = {}
        for klass in reversed(cls.__mro__):
            for attr_name, attr_value in klass.__dict__.items():
                if isinstance(attr_value, DslPropertyDescriptor):
                    declared[attr_name] = attr_value
                elif attr_name in declared:
                    del declared[attr_name]

        cls._dsl_properties = declared
        return cls


class ValueDsl(metaclass=ValueDslMeta):
    """
    Base class for objects whose attributes are hook-guarded properties.

    Cells are created for every declared property when the object is built. The
    ``_value_property`` and ``_list_property`` builders are the extension point:
    subclasses override them to inject hooks into every declaration, the way
    ``LockableValueDsl`` injects its lock check.

    Example:
        ```python
        class Point(ValueDsl):
            x = prepared(0)
            y = prepared(0)

        point = Point()
        point.x = 3
        point.dsl_property("x").bypass_hooks(lambda raw: raw.value)  # 3
        ```

    Note:
        Instances are not thread-safe; share one across threads only with
        external synchronization.
    """

    _dsl_properties: Dict[str, DslPropertyDescriptor]

    def __init__(self) -> None:
        for name in self._dsl_properties:
            self.dsl_property(name)

    @classmethod
    def dsl_property_names(cls) -> List[str]:
        """Names of all declared properties, in definition order."""
        return list(cls._dsl_properties)

    def dsl_property(self, name: str) -> Any:
        """Return the cell behind attribute ``name`` without firing any hook."""
        cells = self.__dict__.setdefault("_dsl_cells", {})
        cell = cells.get(name)
        if cell is None:
            descriptor = self._dsl_properties.get(name)
            if descriptor is None:
                raise AttributeError(
                    f"{type(self).__name__} has no DSL property {name!r}"
                )
            cell = descriptor.create_cell(self)
            cells[name] = cell
        return cell

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
    ) -> ValueProperty:
        return ValueProperty(
            initial,
            get_transform,
            set_transform,
            before_get=before_get,
            before_set=before_set,
            after_get=after_get,
            after_set=after_set,
            name=name,
            owner=self,
        )

    def _list_property(
        self,
        name: str,
        replaceable: bool,
        initial: Optional[Iterable[Any]],
        get_transform: TransformFunction,
        set_transform: TransformFunction,
        before_get: IndexHook,
        before_set: ElementHook,
        before_remove: IndexHook,
        before_access: AccessHook,
        before_replace: ReplaceHook,
        access_transform: AccessTransform,
    ) -> ListProperty:
        return ListProperty(
            initial,
            get_transform=get_transform,
            set_transform=set_transform,
            before_get=before_get,
            before_set=before_set,
            before_remove=before_remove,
            before_access=before_access,
            before_replace=before_replace,
            access_transform=access_transform,
            name=name,
            owner=self,
            replaceable=replaceable,
        )

    try_bypass_hooks = staticmethod(try_bypass_hooks)
