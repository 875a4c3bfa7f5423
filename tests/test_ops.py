from functools import reduce

import pytest

from funciter.ops import (
    add,
    bitwise_and,
    bitwise_or,
    bitwise_xor,
    multiply,
    passthrough,
    unwrap_option,
    unwrap_result,
)
from funciter.option import UnwrapError, none, some
from funciter.result import err, ok


def test_add():
    assert add(5, 6) == 11


def test_add_strings():
    assert add("foo", "bar") == "foobar"


def test_add_fold():
    assert reduce(add, [1, 2, 3], 0) == 6


def test_multiply():
    assert multiply(3, 8) == 24


def test_multiply_fold():
    assert reduce(multiply, [3, 4, 5], 2) == 120


def test_bitwise_and():
    assert bitwise_and(6, 10) == 2


def test_bitwise_and_fold():
    assert reduce(bitwise_and, [5, 7, 13], -1) == 5


def test_bitwise_or():
    assert bitwise_or(6, 10) == 14


def test_bitwise_or_fold():
    assert reduce(bitwise_or, [1, 2, 6], 0) == 7


def test_bitwise_xor():
    assert bitwise_xor(5, 6) == 3


def test_bitwise_xor_fold():
    assert reduce(bitwise_xor, [1, 2, 6], 0) == 5


def test_unwrap_option():
    options = [some(4), some(6), some(-1)]
    assert list(map(unwrap_option, options)) == [4, 6, -1]


def test_unwrap_option_raises():
    with pytest.raises(UnwrapError) as info:
        list(map(unwrap_option, [none()]))
    assert str(info.value) == "called `Option.unwrap()` on a `None` value"


def test_unwrap_result():
    results = [ok(4), ok(6), ok(-1)]
    assert list(map(unwrap_result, results)) == [4, 6, -1]


def test_unwrap_result_raises():
    with pytest.raises(UnwrapError) as info:
        list(map(unwrap_result, [err(ValueError("oops"))]))
    assert str(info.value) == "called `Result.unwrap()` on an `Err` value"


def test_passthrough():
    assert list(map(passthrough, [1, 2])) == [1, 2]
    marker = object()
    assert passthrough(marker) is marker