import pytest
from hypothesis import given, strategies as st

from rill.errors import RillArityError, RillTypeError
from rill.types.hash_map import HashMap, assoc, dissoc, hash_map
from rill.types.keyword import keyword
from rill.types.nil import Nil
from rill.types.symbol import Symbol
from rill.types.value import get_meta, with_meta


def test_hash_map_construction():
    hm = hash_map(["a", 1, keyword("b"), 2])
    assert isinstance(hm, HashMap)
    assert hm.get("a") == 1
    assert hm.get(keyword("b")) == 2
    assert hm.get("b") is Nil
    assert len(hm) == 2


def test_later_keys_win():
    assert hash_map(["a", 1, "a", 2]).get("a") == 2


@pytest.mark.parametrize("kvs", [["a"], ["a", 1, "b"]])
def test_odd_length_rejected(kvs):
    with pytest.raises(RillArityError, match="odd"):
        hash_map(kvs)


@pytest.mark.parametrize("key", [1, Symbol("a"), Nil, True])
def test_non_string_key_rejected(key):
    with pytest.raises(RillTypeError, match="key is not string"):
        hash_map(["a", 1, key, 2])


def test_assoc_extends_without_touching_original():
    base = hash_map(["a", 1])
    extended = assoc(base, ["b", 2, "a", 3])
    assert extended.get("a") == 3 and extended.get("b") == 2
    assert base.get("a") == 1 and "b" not in base


def test_assoc_resets_metadata():
    base = with_meta(hash_map(["a", 1]), "m")
    assert get_meta(assoc(base, ["b", 2])) is Nil
    assert get_meta(dissoc(base, ["a", Nil])) is Nil


def test_assoc_validation_leaves_no_partial_map():
    base = hash_map(["a", 1])
    with pytest.raises(RillTypeError):
        assoc(base, ["b", 2, 3, 4])
    with pytest.raises(RillArityError):
        assoc(base, ["b"])
    assert "b" not in base


def test_dissoc_removes_keys():
    base = hash_map(["a", 1, "b", 2, "c", 3])
    result = dissoc(base, ["a", Nil, "c", Nil, "missing", Nil])
    assert list(result.keys()) == ["b"]
    assert len(base) == 3


def test_dissoc_rejects_non_string_keys():
    with pytest.raises(RillTypeError):
        dissoc(hash_map([]), [1, Nil])


@pytest.mark.parametrize("target", [Nil, 1, "a"])
def test_assoc_dissoc_require_hash_map(target):
    with pytest.raises(RillTypeError):
        assoc(target, [])
    with pytest.raises(RillTypeError):
        dissoc(target, [])


@given(st.lists(st.tuples(st.text(max_size=5), st.integers()), max_size=10))
def test_even_string_keyed_lists_build(pairs):
    flat = [x for pair in pairs for x in pair]
    hm = hash_map(flat)
    assert dict(hm.items()) == dict(pairs)


@given(st.lists(st.integers(), min_size=1, max_size=11).filter(lambda xs: len(xs) % 2 == 1))
def test_odd_lists_never_build(items):
    with pytest.raises(RillArityError):
        hash_map(items)


@pytest.mark.parametrize("kvs", [["a"], ["a", Nil, "b"]])
def test_dissoc_rejects_odd_argument_list(kvs):
    base = hash_map(["a", 1, "b", 2])
    with pytest.raises(RillArityError, match="odd"):
        dissoc(base, kvs)
    assert len(base) == 2


def test_dissoc_ignores_paired_values():
    base = hash_map(["a", 1, "b", 2])
    result = dissoc(base, ["a", "b"])
    assert list(result.keys()) == ["b"]


def test_dissoc_validation_leaves_map_intact():
    base = hash_map(["a", 1])
    with pytest.raises(RillTypeError):
        dissoc(base, ["a", Nil, 2, Nil])
    assert base.get("a") == 1


def test_constructor_copies_callers_dict():
    source = {"a": 1}
    hm = HashMap(source)
    source["b"] = 2
    assert "b" not in hm
    assert len(hm) == 1
