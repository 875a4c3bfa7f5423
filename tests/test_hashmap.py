import pytest

from funciter.hashmap import lift_hash_map, lift_hash_map_keys, lift_hash_map_values
from funciter.iterators import Pair


@pytest.fixture
def pokemon():
    return {"name": "pikachu", "type": "electric"}


def test_lift_hash_map(pokemon):
    items = sorted(lift_hash_map(pokemon).collect())
    assert items == [Pair("name", "pikachu"), Pair("type", "electric")]


def test_lift_hash_map_strings(pokemon):
    items = sorted(lift_hash_map(pokemon).collect())
    assert [str(item) for item in items] == ["(name, pikachu)", "(type, electric)"]


def test_lift_hash_map_close_early(pokemon):
    items = lift_hash_map(pokemon)
    assert items.next().is_some()
    items.close()
    assert items.next().is_none()


def test_lift_hash_map_close_multiple_safe(pokemon):
    items = lift_hash_map(pokemon)
    items.close()
    items.close()
    assert items.next().is_none()


def test_lift_hash_map_close_after_exhausted_safe(pokemon):
    items = lift_hash_map(pokemon)
    assert len(items.collect()) == 2
    items.close()
    assert items.next().is_none()


def test_lift_hash_map_context_manager(pokemon):
    with lift_hash_map(pokemon) as items:
        assert items.next().is_some()
    assert items.next().is_none()


def test_lift_hash_map_snapshot_of_entries():
    mapping = {"a": 1}
    items = lift_hash_map(mapping)
    mapping["b"] = 2
    assert items.collect() == [Pair("a", 1)]


def test_lift_hash_map_string():
    assert str(lift_hash_map({})) == "Iterator<LiftHashMap>"


def test_lift_hash_map_keys(pokemon):
    assert sorted(lift_hash_map_keys(pokemon).collect()) == ["name", "type"]


def test_lift_hash_map_keys_exhausted():
    keys = lift_hash_map_keys({})
    assert keys.collect() == []
    assert keys.next().is_none()


def test_lift_hash_map_keys_close_early(pokemon):
    keys = lift_hash_map_keys(pokemon)
    assert keys.next().is_some()
    keys.close()
    assert keys.next().is_none()


def test_lift_hash_map_keys_close_multiple_safe(pokemon):
    keys = lift_hash_map_keys(pokemon)
    keys.close()
    keys.close()
    assert keys.next().is_none()


def test_lift_hash_map_keys_close_after_exhausted_safe(pokemon):
    keys = lift_hash_map_keys(pokemon)
    assert len(keys.collect()) == 2
    keys.close()
    assert keys.next().is_none()


def test_lift_hash_map_keys_string():
    assert str(lift_hash_map_keys({})) == "Iterator<LiftHashMapKeys>"


def test_lift_hash_map_values(pokemon):
    assert sorted(lift_hash_map_values(pokemon).collect()) == ["electric", "pikachu"]


def test_lift_hash_map_values_exhausted():
    values = lift_hash_map_values({})
    assert values.collect() == []
    assert values.next().is_none()


def test_lift_hash_map_values_close_early(pokemon):
    values = lift_hash_map_values(pokemon)
    assert values.next().is_some()
    values.close()
    assert values.next().is_none()


def test_lift_hash_map_values_close_multiple_safe(pokemon):
    values = lift_hash_map_values(pokemon)
    values.close()
    values.close()
    assert values.next().is_none()


def test_lift_hash_map_values_close_after_exhausted_safe(pokemon):
    values = lift_hash_map_values(pokemon)
    assert len(values.collect()) == 2
    values.close()
    assert values.next().is_none()


def test_lift_hash_map_values_context_manager(pokemon):
    with lift_hash_map_values(pokemon) as values:
        assert values.next().is_some()
    assert values.next().is_none()


def test_lift_hash_map_values_string():
    assert str(lift_hash_map_values({})) == "Iterator<LiftHashMapValues>"