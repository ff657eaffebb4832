import pytest

from drillrunner.lessons.conversions import (
    Color,
    Person,
    average,
    byte_counter,
    char_counter,
    color_from_slice,
    color_from_tuple,
    parse_person,
    person_from,
)


def test_different_counts():
    s = "Café au lait"
    assert char_counter(s) != byte_counter(s)
    assert (char_counter(s), byte_counter(s)) == (12, 13)


def test_same_counts():
    s = "Cafe au lait"
    assert char_counter(s) == byte_counter(s) == 12


def test_default_person():
    dp = Person()
    assert dp.name == "John"
    assert dp.age == 30


def test_good_convert():
    p = person_from("Mark,20")
    assert p.name == "Mark"
    assert p.age == 20


@pytest.mark.parametrize(
    "text", ["", "Mark,twenty", "Mark", "Mark,", ",1", ",", ",one"]
)
def test_bad_convert_gives_default(text):
    assert person_from(text) == Person(name="John", age=30)


def test_parse_good_input():
    p = parse_person("John,32")
    assert p.name == "John"
    assert p.age == 32


@pytest.mark.parametrize(
    "text", ["", "John,", "John,twenty", "John", ",1", ",", ",one", "John,-3"]
)
def test_parse_bad_input(text):
    with pytest.raises(ValueError):
        parse_person(text)


def test_parse_age_error_message():
    with pytest.raises(ValueError, match="invalid digit found in string"):
        parse_person("John,twenty")


@pytest.mark.parametrize("values", [(256, 1000, 10000), (-1, -10, -256)])
def test_tuple_out_of_range(values):
    with pytest.raises(ValueError):
        color_from_tuple(values)


def test_tuple_correct():
    c = color_from_tuple((183, 65, 14))
    assert (c.red, c.green, c.blue) == (183, 65, 14)


@pytest.mark.parametrize("values", [[1000, 10000, 256], [-10, -256, -1]])
def test_array_out_of_range(values):
    with pytest.raises(ValueError):
        color_from_tuple(values)


def test_array_correct():
    assert color_from_tuple([183, 65, 14]) == Color(red=183, green=65, blue=14)


@pytest.mark.parametrize("values", [[10000, 256, 1000], [-256, -1, -10]])
def test_slice_out_of_range(values):
    with pytest.raises(ValueError):
        color_from_slice(values)


def test_slice_correct():
    c = color_from_slice([183, 65, 14])
    assert (c.red, c.green, c.blue) == (183, 65, 14)


@pytest.mark.parametrize("values", [[0, 0, 0, 0], [0, 0]])
def test_slice_wrong_length(values):
    with pytest.raises(ValueError):
        color_from_slice(values)


def test_returns_proper_type_and_value():
    assert average([3.5, 0.3, 13.0, 11.7]) == 7.125


def test_average_of_nothing_is_nan():
    result = average([])
    assert str(result) == "nan"