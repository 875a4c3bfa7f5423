import pytest

from funciter.seq import exclude, lift
from funciter.seq_filters import (
    greater_than,
    greater_than_equal,
    is_even,
    is_odd,
    is_zero,
    less_than,
    less_than_equal,
)


def test_is_zero():
    assert lift([1, 2, 3, 0, 4]).exclude(is_zero).collect() == [1, 2, 3, 4]


def test_is_zero_function_form():
    assert exclude(lift([1, 2, 3, 0, 4]), is_zero).collect() == [1, 2, 3, 4]


def test_is_zero_string():
    assert lift(["", "a", ""]).filter(is_zero).collect() == ["", ""]


def test_is_even():
    assert lift([1, 2, 3, 4, 5]).exclude(is_even).collect() == [1, 3, 5]


def test_is_odd():
    assert lift([1, 2, 3, 4, 5]).exclude(is_odd).collect() == [2, 4]


def test_greater_than():
    assert lift([1, 2, 3, 4, 5]).filter(greater_than(2)).collect() == [3, 4, 5]


def test_less_than():
    assert lift([1, 2, 3, 4, 5]).filter(less_than(3)).collect() == [1, 2]


def test_greater_than_equal():
    assert lift([1, 2, 3, 4, 5]).filter(greater_than_equal(3)).collect() == [3, 4, 5]


def test_less_than_equal():
    assert lift([1, 2, 3, 4, 5]).filter(less_than_equal(3)).collect() == [1, 2, 3]