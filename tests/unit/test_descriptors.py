"""Unit tests for the DSL descriptors and ValueDslMeta property collection."""

import pytest

from dslutils import (
    ListProperty,
    ValueDsl,
    ValueProperty,
    list_,
    list_value,
    optional,
    prepared,
    replaceable_list,
)
from dslutils.descriptors import ListDescriptor, ValueDescriptor


class Base(ValueDsl):
    name = prepared("base")
    tags = list_(["a"])


class Child(Base):
    level = optional()
    name = prepared("child")


class Hidden(Child):
    tags = None


@pytest.mark.unit
@pytest.mark.dsl
def test_class_access_returns_descriptor():
    """Accessing a declaration on the class returns the descriptor"""
    assert isinstance(Base.name, ValueDescriptor)
    assert isinstance(Base.tags, ListDescriptor)
    assert Base.name.attr_name == "name"


@pytest.mark.unit
@pytest.mark.dsl
def test_metaclass_collects_inherited_declarations():
    """Declarations are collected across the MRO in definition order"""
    assert Base.dsl_property_names() == ["name", "tags"]
    assert Child.dsl_property_names() == ["name", "tags", "level"]


@pytest.mark.unit
@pytest.mark.dsl
def test_subclass_can_redeclare_property():
    """A redeclared property uses the subclass declaration"""
    assert Base().name == "base"
    assert Child().name == "child"


@pytest.mark.unit
@pytest.mark.dsl
def test_subclass_can_hide_property():
    """Binding a declared name to a plain value removes the declaration"""
    hidden = Hidden()

    assert Hidden.dsl_property_names() == ["name", "level"]
    assert hidden.tags is None
    with pytest.raises(AttributeError):
        hidden.dsl_property("tags")


@pytest.mark.unit
@pytest.mark.dsl
def test_dsl_property_returns_cells():
    """dsl_property exposes the cell behind each attribute"""
    child = Child()

    assert isinstance(child.dsl_property("name"), ValueProperty)
    assert isinstance(child.dsl_property("tags"), ListProperty)
    assert child.dsl_property("name").owner is child
    assert child.dsl_property("tags").name == "tags"
    with pytest.raises(AttributeError, match="no DSL property 'missing'"):
        child.dsl_property("missing")


@pytest.mark.unit
@pytest.mark.dsl
def test_list_attribute_read_returns_the_cell():
    """Reading a list attribute without an access transform returns its cell"""
    base = Base()

    assert base.tags is base.dsl_property("tags")


@pytest.mark.unit
@pytest.mark.dsl
def test_initial_list_is_copied_per_instance():
    """Instances never share the declared initial list"""
    first = Base()
    second = Base()

    first.tags.append("b")

    assert first.tags == ["a", "b"]
    assert second.tags == ["a"]


@pytest.mark.unit
@pytest.mark.dsl
def test_non_replaceable_list_rejects_assignment():
    """list_ declarations raise AttributeError on assignment"""
    base = Base()

    with pytest.raises(AttributeError, match="cannot be replaced"):
        base.tags = ["x"]
    assert base.tags == ["a"]


@pytest.mark.unit
@pytest.mark.dsl
def test_in_place_add_is_accepted_on_non_replaceable_list():
    """obj.attr += values extends the list and assigns the same cell back"""
    base = Base()

    base.tags += ["b", "c"]

    assert base.tags == ["a", "b", "c"]


@pytest.mark.unit
@pytest.mark.dsl
def test_replaceable_declarations():
    """replaceable_list and list_value with before_replace accept assignment"""

    class Lists(ValueDsl):
        plain = list_value([1])
        swappable = list_value([1], before_replace=lambda lst, new: None)
        always = replaceable_list()

    lists = Lists()
    lists.swappable = [2, 3]
    lists.always = (4,)

    assert lists.swappable == [2, 3]
    assert lists.always == [4]
    assert Lists.plain.replaceable is False
    assert Lists.swappable.replaceable is True
    with pytest.raises(AttributeError):
        lists.plain = [2]


@pytest.mark.unit
@pytest.mark.dsl
def test_get_dsl_mutable_list_callback():
    """The construction callback receives the owner and the list cell"""
    seen = []

    def frozen(lst, index, element):
        raise ValueError("frozen")

    class Registry(ValueDsl):
        items = list_(
            [1],
            before_set=frozen,
            get_dsl_mutable_list=lambda owner, lst: seen.append((owner, lst)),
        )

    registry = Registry()
    owner, cell = seen[0]
    cell.bypass_hooks(lambda raw: raw.append(2))

    assert owner is registry
    assert cell is registry.dsl_property("items")
    assert registry.items == [1, 2]
    with pytest.raises(ValueError, match="frozen"):
        registry.items.append(3)


@pytest.mark.unit
@pytest.mark.dsl
def test_cells_are_built_on_construction():
    """Every declared cell exists as soon as the object is constructed"""
    created = []

    class Tracked(ValueDsl):
        a = prepared(1, get_bypassed_hooks_value=lambda owner, view: created.append("a"))
        b = list_(get_dsl_mutable_list=lambda owner, lst: created.append("b"))

    Tracked()

    assert created == ["a", "b"]


@pytest.mark.unit
@pytest.mark.dsl
def test_one_shot_initial_iterable_serves_every_instance():
    """A generator passed as initial list is read once at declaration"""

    class Generated(ValueDsl):
        items = list_(x for x in (1, 2))

    assert Generated().items == [1, 2]
    assert Generated().items == [1, 2]


@pytest.mark.unit
@pytest.mark.dsl
def test_class_keywords_reach_init_subclass():
    """Class keyword arguments pass through the metaclass to __init_subclass__"""

    class Flagged(ValueDsl):
        flag = False

        def __init_subclass__(cls, flag=False, **kwargs):
            super().__init_subclass__(**kwargs)
            cls.flag = flag

    class Enabled(Flagged, flag=True):
        name = prepared("on")

    assert Enabled.flag is True
    assert Enabled.dsl_property_names() == ["name"]
    assert Enabled().name == "on"
