import pytest

from sprig.errors import SprigTypeError
from sprig.types.expression import (
    as_number,
    decompose,
    from_python,
    is_atom,
    is_list,
    is_procedure,
    is_true,
    list_length,
    render,
)
from sprig.types.number import Number
from sprig.types.pair import Empty, EmptyType, Pair, cons, make_list
from sprig.types.procedure import Closure, Primitive, SpecialForm
from sprig.types.symbol import Symbol


def test_symbols_compare_by_name():
    assert Symbol("abc") == Symbol("abc")
    assert Symbol("abc") != Symbol("abd")
    assert hash(Symbol("x")) == hash(Symbol("x"))
    assert Symbol("x") != Number(1)


def test_number_rejects_non_ints():
    with pytest.raises(TypeError):
        Number("1")
    with pytest.raises(TypeError):
        Number(True)


def test_empty_is_unique():
    assert EmptyType() is Empty
    assert make_list([]) is Empty
    assert list(Empty) == []


def test_make_list_and_iteration():
    lst = make_list([Number(1), Number(2), Number(3)])
    assert [n.value for n in lst] == [1, 2, 3]
    assert len(lst) == 3
    assert list_length(lst) == 3
    assert list_length(Empty) == 0


def test_lists_share_tails():
    tail = make_list([Number(2), Number(3)])
    a = cons(Number(1), tail)
    b = cons(Number(0), tail)
    assert a.tail is b.tail
    assert render(a) == "(1 2 3)"
    assert render(b) == "(0 2 3)"


def test_pair_tail_must_be_a_list():
    with pytest.raises(TypeError):
        Pair(Number(1), Number(2))


def test_structural_equality():
    assert from_python([1, ["a", 2]]) == from_python([1, ["a", 2]])
    assert from_python([1, 2]) != from_python([1, 2, 3])
    assert from_python([1, 2]) != from_python([1])


@pytest.mark.parametrize(
    "value,expected",
    [
        (Symbol("#f"), False),
        (Symbol("#t"), True),
        (Symbol("f"), True),
        (Number(0), True),
        (Empty, True),
        (from_python([1]), True),
    ]
)
def test_truthiness(value, expected):
    assert is_true(value) is expected


def test_accessors():
    lst = from_python([1, 2])
    head, tail = decompose(lst)
    assert head == Number(1)
    assert tail == from_python([2])
    with pytest.raises(SprigTypeError):
        decompose(Empty)
    with pytest.raises(SprigTypeError):
        decompose(Number(1))
    assert as_number(Number(9)) == 9
    with pytest.raises(SprigTypeError):
        as_number(Symbol("9"))
    assert is_list(Empty) and is_list(lst)
    assert not is_list(Number(1))
    assert is_atom(Symbol("a")) and is_atom(Number(1))
    assert not is_atom(lst)


def test_is_procedure():
    assert is_procedure(Closure(None, ["x"], Symbol("x")))
    assert is_procedure(Primitive("+", lambda env, args: None, None))
    assert is_procedure(SpecialForm("if", lambda *a: None, None))
    assert not is_procedure(Symbol("+"))


@pytest.mark.parametrize(
    "value,text",
    [
        (Number(-12), "-12"),
        (Symbol("foo"), "foo"),
        (Empty, "()"),
        (from_python(["+", 1, ["*", 2, 3]]), "(+ 1 (* 2 3))"),
        (from_python([[], []]), "(() ())"),
        (Closure(None, ["x", "y"], from_python(["+", "x", "y"])), "(lambda (x y) (+ x y))"),
        (Closure(None, [], Number(1)), "(lambda () 1)"),
        (Primitive("+", None, None), "#<primitive +>"),
        (SpecialForm("if", None, None), "#<special-form if>"),
    ]
)
def test_render(value, text):
    assert render(value) == text
    assert str(value) == text


def test_from_python_rejects_unknown_values():
    with pytest.raises(SprigTypeError):
        from_python(1.5)
    with pytest.raises(SprigTypeError):
        from_python(True)
