import pytest
from hypothesis import given, strategies as st

from rill.errors import RillTypeError
from rill.types.atom import Atom
from rill.types.environment import Environment
from rill.types.equality import equals
from rill.types.function import Closure, Func
from rill.types.hash_map import hash_map
from rill.types.keyword import KEYWORD_PREFIX, is_keyword, keyword, keyword_name
from rill.types.nil import Nil
from rill.types.sequence import List, Vector, list_, vector
from rill.types.symbol import Symbol
from rill.types.value import count, get_meta, is_empty, with_meta


def _closure():
    return Closure(List((Symbol("x"),)), Symbol("x"), Environment(), lambda body, env: env.get(body))


# -------------------------------
# count / empty?
# -------------------------------
@pytest.mark.parametrize(
    "value, expected",
    [(Nil, 0), (List(()), 0), (List((1, 2)), 2), (Vector((1, 2, 3)), 3)],
)
def test_count(value, expected):
    assert count(value) == expected
    assert is_empty(value) == (expected == 0)


@pytest.mark.parametrize("value", [1, "abc", Symbol("a"), hash_map([]), True, Atom(1)])
def test_count_rejects_other_types(value):
    with pytest.raises(RillTypeError, match="count"):
        count(value)
    with pytest.raises(RillTypeError, match="empty"):
        is_empty(value)


# -------------------------------
# Keywords
# -------------------------------
def test_keyword_is_idempotent():
    kw = keyword("name")
    assert kw == KEYWORD_PREFIX + "name"
    assert keyword(kw) == kw
    assert is_keyword(kw)
    assert not is_keyword("name")
    assert keyword_name(kw) == "name"


@pytest.mark.parametrize("value", [1, Symbol("a"), Nil, List(())])
def test_keyword_rejects_non_strings(value):
    with pytest.raises(RillTypeError):
        keyword(value)


def test_keyword_differs_from_string():
    assert not equals(keyword("a"), "a")
    assert equals(keyword("a"), keyword("a"))


# -------------------------------
# Metadata
# -------------------------------
@pytest.mark.parametrize(
    "value",
    [List((1,)), Vector((1,)), hash_map(["a", 1]), Func(lambda args: Nil, "f"), _closure()],
)
def test_with_meta_is_copy_on_write(value):
    assert get_meta(value) is Nil
    copy = with_meta(value, "m")
    assert get_meta(copy) == "m"
    assert get_meta(value) is Nil
    assert type(copy) is type(value)


def test_with_meta_shares_payload():
    lst = List((1, 2))
    assert with_meta(lst, 1).items is lst.items
    hm = hash_map(["a", 1])
    assert with_meta(hm, 1).data is hm.data


@pytest.mark.parametrize("value", [Nil, 1, "s", Symbol("s"), True, Atom(1)])
def test_meta_rejects_unsupported_types(value):
    with pytest.raises(RillTypeError):
        get_meta(value)
    with pytest.raises(RillTypeError):
        with_meta(value, 1)


@given(st.lists(st.integers(), max_size=5), st.integers(), st.integers())
def test_meta_roundtrip_property(items, m1, m2):
    original = List(items)
    first = with_meta(original, m1)
    second = with_meta(first, m2)
    assert get_meta(first) == m1
    assert get_meta(second) == m2
    assert get_meta(original) is Nil
    assert first == original == second


def test_closure_as_macro_keeps_original():
    fn = _closure()
    macro = fn.as_macro()
    assert macro.is_macro and not fn.is_macro
    assert macro.env is fn.env


# -------------------------------
# Equality
# -------------------------------
@pytest.mark.parametrize(
    "a, b",
    [
        (Nil, Nil),
        (True, True),
        (7, 7),
        ("s", "s"),
        (Symbol("s"), Symbol("s")),
        (List((1,)), Vector((1,))),
        (List((1, List((2,)))), Vector((1, Vector((2,))))),
        (with_meta(List((1,)), "m"), List((1,))),
        (hash_map(["a", 1, "b", List(())]), hash_map(["b", Vector(()), "a", 1])),
    ],
)
def test_structural_equality(a, b):
    assert equals(a, b)
    assert equals(b, a)


@pytest.mark.parametrize(
    "a, b",
    [
        (Nil, False),
        (Nil, List(())),
        (True, 1),
        (False, 0),
        (1, "1"),
        ("s", Symbol("s")),
        (List((1,)), List((1, 2))),
        (List((True,)), List((1,))),
        (hash_map(["a", 1]), hash_map(["a", 2])),
        (hash_map(["a", 1]), hash_map(["b", 1])),
        (Atom(1), Atom(1)),
    ],
)
def test_structural_inequality(a, b):
    assert not equals(a, b)
    assert not equals(b, a)


def test_functions_never_equal():
    f = Func(lambda args: Nil, "f")
    c = _closure()
    assert not equals(f, f)
    assert not equals(c, c)
    assert not equals(_closure(), _closure())
    assert c != c
    assert List((f,)) != List((f,))


def test_atom_equal_to_itself():
    a = Atom(1)
    assert equals(a, a)


def test_constructors_copy_their_input():
    source = [1, 2]
    lst = List(source)
    source.append(3)
    assert count(lst) == 2
    assert list_(1, 2) == vector(1, 2)


def test_slices_keep_sequence_type():
    vec = Vector((1, 2, 3))
    assert isinstance(vec[1:], Vector)
    assert vec[1:] == List((2, 3))
    assert isinstance(List((1, 2))[:1], List)
    assert vec[0] == 1


def test_symbols_compare_by_name():
    assert Symbol("a") == Symbol("a")
    assert Symbol("a") != Symbol("b")
    assert Symbol("a") != "a"
    assert {Symbol("a"): 1}[Symbol("a")] == 1
    assert str(Symbol("a-b")) == "a-b"


@pytest.mark.parametrize("name", ["", 1, None])
def test_symbol_requires_name(name):
    with pytest.raises(RillTypeError):
        Symbol(name)
