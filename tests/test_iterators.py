import pytest

from drillrunner.lessons.iterators import (
    DivideByZero,
    DivisionError,
    NotDivisibleError,
    capitalize_first,
    capitalize_joined,
    capitalize_words,
    divide,
    factorial,
    list_of_results,
    result_with_list,
)


def test_success():
    assert capitalize_first("hello") == "Hello"


def test_empty():
    assert capitalize_first("") == ""


def test_iterate_string_vec():
    assert capitalize_words(["hello", "world"]) == ["Hello", "World"]


def test_iterate_into_string():
    assert capitalize_joined(["hello", " ", "world"]) == "Hello World"


def test_divide_success():
    assert divide(81, 9) == 9


def test_not_divisible():
    with pytest.raises(NotDivisibleError) as info:
        divide(81, 6)
    assert info.value == NotDivisibleError(81, 6)
    assert (info.value.dividend, info.value.divisor) == (81, 6)


def test_divide_by_0():
    with pytest.raises(DivideByZero):
        divide(81, 0)


def test_divide_0_by_something():
    assert divide(0, 81) == 0


def test_divide_zero_by_zero_is_divide_by_zero():
    with pytest.raises(DivideByZero):
        divide(0, 0)


def test_result_with_list():
    assert result_with_list([27, 297, 38502, 81], 27) == [1, 11, 1426, 3]


def test_result_with_list_raises_first_error():
    with pytest.raises(NotDivisibleError) as info:
        result_with_list([27, 28, 29], 27)
    assert info.value.dividend == 28


def test_list_of_results():
    assert list_of_results([27, 297, 38502, 81], 27) == [1, 11, 1426, 3]


def test_list_of_results_keeps_errors_in_place():
    results = list_of_results([27, 28], 27)
    assert results[0] == 1
    assert isinstance(results[1], DivisionError)
    assert results[1] == NotDivisibleError(28, 27)


def test_factorial_of_1():
    assert factorial(1) == 1


def test_factorial_of_2():
    assert factorial(2) == 2


def test_factorial_of_4():
    assert factorial(4) == 24


def test_factorial_of_0():
    assert factorial(0) == 1


def test_factorial_overflow():
    with pytest.raises(OverflowError):
        factorial(21)


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)