import pytest

from drillrunner.lessons.traits import append_bar


def test_is_foo_bar():
    assert append_bar("Foo") == "FooBar"


def test_is_bar_bar():
    assert append_bar(append_bar("")) == "BarBar"


def test_is_vec_pop_eq_bar():
    foo = append_bar(["Foo"])
    assert foo.pop() == "Bar"
    assert foo.pop() == "Foo"


def test_list_is_not_modified_in_place():
    original = ["Foo"]
    assert append_bar(original) == ["Foo", "Bar"]
    assert original == ["Foo"]


def test_unsupported_type():
    with pytest.raises(TypeError):
        append_bar(3)