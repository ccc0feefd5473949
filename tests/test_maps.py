import pytest

from cslib.maps import HashMap, Map


@pytest.mark.parametrize("cls", [HashMap, Map])
def test_put_and_get(cls):
    m = cls()
    m["alpha"] = 1
    m["beta"] = 2
    assert m["alpha"] == 1
    assert m.get("beta") == 2
    assert len(m) == 2


@pytest.mark.parametrize("cls", [HashMap, Map])
def test_get_missing_returns_none(cls):
    m = cls(a=1)
    assert m.get("missing") is None
    with pytest.raises(KeyError):
        m["missing"]


@pytest.mark.parametrize("cls", [HashMap, Map])
def test_put_supersedes(cls):
    m = cls()
    m["k"] = "old"
    m["k"] = "new"
    assert m["k"] == "new"
    assert len(m) == 1


@pytest.mark.parametrize("cls", [HashMap, Map])
def test_contains_and_remove(cls):
    m = cls({"x": 10, "y": 20})
    assert "x" in m
    del m["x"]
    assert "x" not in m
    assert list(m) == ["y"]


@pytest.mark.parametrize("cls", [HashMap, Map])
def test_clear_empties(cls):
    m = cls({"x": 1, "y": 2})
    m.clear()
    assert len(m) == 0
    assert not m


@pytest.mark.parametrize("cls", [HashMap, Map])
def test_non_string_key_rejected(cls):
    m = cls({"a": 1})
    with pytest.raises(TypeError):
        m[3] = "three"
    assert len(m) == 1
    assert list(m) == ["a"]


@pytest.mark.parametrize("cls", [HashMap, Map])
def test_clone_is_shallow_and_independent(cls):
    shared = [1, 2]
    m = cls({"list": shared})
    copy = m.clone()
    assert type(copy) is cls
    assert copy["list"] is shared
    copy["other"] = 5
    assert "other" not in m
    assert dict(copy.items()) == {"list": shared, "other": 5}


@pytest.mark.parametrize("cls", [HashMap, Map])
def test_for_each_visits_every_entry(cls):
    m = cls({"one": 1, "two": 2, "three": 3})
    seen = []
    m.for_each(lambda k, v, data: data.append((k, v)), seen)
    assert sorted(seen) == sorted(m.items())


def test_map_iterates_sorted():
    m = Map()
    for key in ["pear", "apple", "mango", "banana"]:
        m[key] = len(key)
    assert list(m) == sorted(["pear", "apple", "mango", "banana"])
    assert list(m.values()) == [len(k) for k in sorted(m)]


def test_map_for_each_in_sorted_order():
    m = Map({"c": 3, "a": 1, "b": 2})
    order = []
    m.for_each(lambda k, v, data: data.append(k), order)
    assert order == ["a", "b", "c"]


def test_hashmap_keeps_all_keys():
    keys = [f"key{i}" for i in range(50)]
    m = HashMap((k, i) for i, k in enumerate(keys))
    assert set(m) == set(keys)
    assert all(m[k] == i for i, k in enumerate(keys))