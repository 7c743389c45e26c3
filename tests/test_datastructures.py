import numpy as np
import pytest

from expression_calculator import ArrayDictionary, GrowableArray, NoSuchKey


def test_get_after_put_returns_value():
    d = ArrayDictionary()
    d.put("x", 1)
    d.put("y", 2)
    assert d.get("x") == 1
    assert d.get("y") == 2
    assert d["y"] == 2


def test_put_existing_key_updates_without_growing():
    d = ArrayDictionary()
    d.put("x", 1)
    d.put("x", 5)
    assert d.size() == 1
    assert d.get("x") == 5


def test_missing_key_raises_no_such_key():
    d = ArrayDictionary()
    with pytest.raises(NoSuchKey):
        d.get("missing")
    with pytest.raises(NoSuchKey):
        d.remove("missing")
    with pytest.raises(KeyError):
        d["missing"]


def test_get_with_default_does_not_raise():
    d = ArrayDictionary()
    assert d.get("missing", None) is None
    assert d.pop("missing", 7) == 7


def test_remove_preserves_order_of_remaining_entries():
    d = ArrayDictionary()
    for key in "abcde":
        d.put(key, key.upper())
    assert d.remove("b") == "B"
    assert list(d) == ["a", "c", "d", "e"]
    d.put("f", "F")
    assert list(d.items()) == [("a", "A"), ("c", "C"), ("d", "D"), ("e", "E"), ("f", "F")]


def test_size_tracks_live_entries_after_growth():
    d = ArrayDictionary(initial_capacity=1)
    for i in range(37):
        d.put(f"k{i}", i)
    assert d.size() == 37
    assert len(d) == 37
    assert d.capacity >= 37
    for i in range(0, 37, 2):
        d.remove(f"k{i}")
    assert d.size() == 18
    assert all(d.get(f"k{i}") == i for i in range(1, 37, 2))


def test_bind_unbind_cycle_does_not_grow_capacity():
    d = ArrayDictionary(initial_capacity=2)
    d.put("a", 1)
    d.put("b", 2)
    capacity = d.capacity
    for i in range(1000):
        d.put("x", i)
        d.remove("x")
    assert d.capacity == 2 * capacity
    assert d.size() == 2
    assert "x" not in d


def test_mutable_mapping_protocol():
    d = ArrayDictionary(x=1, y=2)
    d["z"] = 3
    del d["x"]
    assert dict(d) == {"y": 2, "z": 3}
    assert "y" in d and "x" not in d


def test_invalid_initial_capacity():
    with pytest.raises(ValueError):
        ArrayDictionary(initial_capacity=0)


def test_growable_array_append_and_index():
    seq = GrowableArray(initial_capacity=2)
    for value in [1.0, 2.5, 3.0, 4.5, 6.0]:
        seq.append(value)
    assert len(seq) == 5
    assert seq.capacity >= 5
    assert seq[1] == 2.5
    assert seq[-1] == 6.0
    seq[0] = -1.0
    assert list(seq) == [-1.0, 2.5, 3.0, 4.5, 6.0]


def test_growable_array_bounds_and_view():
    seq = GrowableArray([1.0, 2.0])
    with pytest.raises(IndexError):
        seq[2]
    view = seq.to_numpy()
    np.testing.assert_array_equal(view, [1.0, 2.0])
    with pytest.raises(ValueError):
        view[0] = 5.0
