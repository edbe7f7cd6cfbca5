"""
Shared pytest fixtures and sample DSL classes for dslutils tests.
"""

import pytest

from dslutils import (
    LockableValueDsl,
    ValueDsl,
    conditional,
    list_,
    list_value,
    optional,
    prepared,
    replaceable_list,
    required,
    value,
)


def _upper(text):
    return text.upper() if text is not None else None


def _lower(text):
    return text.lower() if text is not None else None


def _overwrite_on_read(lst, index):
    lst.bypass_hooks(lambda raw: raw[index])
    lst[index] = "666"


def _reject_five_then_write(lst, index, element):
    if element == "5":
        raise ValueError("5 is reserved")

    def write(raw):
        raw[index] = element

    lst.bypass_hooks(write)


def _increment_all(lst):
    for i in range(len(lst)):
        lst[i] += 1
    return lst


class SampleDsl(ValueDsl):
    """Exercises every declaration kind without locking."""

    int_to_string_value = value(1, get_transform=str, set_transform=int)

    even_int_to_string_value = conditional(
        2,
        get_transform=str,
        set_transform=int,
        validate_set=lambda prop, stored: stored % 2 == 0,
        message_builder=lambda prop: "Value must be an even integer.",
    )

    required_value = required(
        get_transform=lambda v: v * 2,
        set_transform=lambda v: v // 2,
    )

    prepared_value = prepared("default", get_transform=_upper, set_transform=_lower)

    optional_value = optional(get_transform=_upper, set_transform=_lower)

    string_list = list_value(
        [1, 2, 3],
        get_transform=str,
        set_transform=int,
        before_get=_overwrite_on_read,
        before_set=_reject_five_then_write,
        before_access=lambda lst: lst.insert(0, "4"),
    )

    replaceable_string_list = list_value(
        [1, 2, 3],
        get_transform=str,
        set_transform=int,
        before_access=lambda lst: lst.bypass_hooks(lambda raw: raw.append("4")),
        before_replace=lambda lst, new_list: new_list.append("5"),
    )

    basic_list = list_(
        [1, 2, 3],
        get_transform=lambda v: v + 1,
        set_transform=lambda v: v - 1,
        before_access=lambda lst: lst.append(0),
    )

    replaceable_int_list = replaceable_list(
        [1, 2, 3],
        get_transform=lambda v: v + 1,
        set_transform=lambda v: v - 1,
        before_access=lambda lst: lst.append(0),
        before_replace=lambda lst, new_list: new_list.append(-1),
    )

    list_with_access_transformation = list_([1, 2, 3], access_transform=_increment_all)


def _append_four_when_locked(lst):
    if lst.owner.is_locked:
        lst.bypass_hooks(lambda raw: raw.append("4"))


def _increment_all_when_locked(lst):
    if not lst.owner.is_locked:
        return lst

    def increment(raw):
        for i in range(len(raw)):
            raw[i] += 1

    lst.bypass_hooks(increment)
    return lst


class LockedSampleDsl(LockableValueDsl):
    """Same declarations as ``SampleDsl`` with lock-aware list hooks."""

    int_to_string_value = value(1, get_transform=str, set_transform=int)

    even_int_to_string_value = conditional(
        2,
        get_transform=str,
        set_transform=int,
        validate_set=lambda prop, stored: stored % 2 == 0,
        message_builder=lambda prop: "Value must be an even integer.",
    )

    required_value = required(
        get_transform=lambda v: v * 2,
        set_transform=lambda v: v // 2,
        message_builder=lambda prop: "Value is required.",
    )

    prepared_value = prepared("default", get_transform=_upper, set_transform=_lower)

    optional_value = optional(get_transform=_upper, set_transform=_lower)

    string_list = list_value(
        [1, 2, 3],
        get_transform=str,
        set_transform=int,
        before_access=_append_four_when_locked,
    )

    replaceable_string_list = list_value(
        [1, 2, 3],
        get_transform=str,
        set_transform=int,
        before_access=lambda lst: lst.append("4"),
        before_replace=lambda lst, new_list: new_list.append("5"),
    )

    basic_list = list_(
        [1, 2, 3],
        get_transform=lambda v: v + 1,
        set_transform=lambda v: v - 1,
        before_access=lambda lst: lst.append(0),
    )

    replaceable_int_list = replaceable_list(
        [1, 2, 3],
        get_transform=lambda v: v + 1,
        set_transform=lambda v: v - 1,
        before_access=lambda lst: lst.append(0),
        before_replace=lambda lst, new_list: new_list.append(-1),
    )

    list_with_access_transformation = list_(
        [1, 2, 3], access_transform=_increment_all_when_locked
    )

    def build(self):
        self._lock()
        return self


@pytest.fixture
def sample_dsl():
    """Provide a fresh, unlocked SampleDsl."""
    return SampleDsl()


@pytest.fixture
def build_sample():
    """Run a builder block against a fresh SampleDsl and return it."""

    def build(block=None):
        dsl = SampleDsl()
        if block is not None:
            block(dsl)
        return dsl

    return build


@pytest.fixture
def build_locked():
    """Run a builder block against a fresh LockedSampleDsl, then lock it."""

    def build(block=None):
        dsl = LockedSampleDsl()
        if block is not None:
            block(dsl)
        return dsl.build()

    return build


@pytest.fixture
def unlocked_dsl():
    """Provide a fresh LockedSampleDsl that has not been locked yet."""
    return LockedSampleDsl()
