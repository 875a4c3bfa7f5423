import pytest

from funciter.runes import runes

EXPECTED = ["H", "e", "l", "l", "o", ",", " ", "世", "界", "!"]


def test_runes_example():
    characters = runes("Hello, 世界!").collect()
    assert "".join(characters[7:9]) == "世界"


def test_runes_slice_example():
    characters = runes(list("Hello, 世界!")).collect()
    assert "".join(characters[7:9]) == "世界"


def test_runes():
    assert runes("Hello, 世界!").collect() == EXPECTED


def test_runes_slice():
    assert runes(list("Hello, 世界!")).collect() == EXPECTED


def test_runes_empty():
    assert runes("").collect() == []


def test_runes_empty_slice():
    assert runes([]).collect() == []


def test_runes_exhausted_stays_none():
    characters = runes("a")
    assert characters.next().unwrap() == "a"
    assert characters.next().is_none()
    assert characters.next().is_none()


def test_runes_rejects_multi_character_items():
    with pytest.raises(TypeError):
        runes(["ab"])


def test_runes_string():
    assert str(runes("Hello, 世界!")) == "Iterator<Runes>"