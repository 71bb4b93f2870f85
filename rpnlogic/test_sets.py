import pytest

from rpnlogic.errors import (
    DuplicateElement, EvaluationError, MissingArgument, UnknownSymbol,
    UnspecifiedVar,
)
from rpnlogic.sets import FiniteSet, eval_set, evaluate_set, powerset


def test_equality_ignores_order():
    assert FiniteSet([1, 2, 3]) == FiniteSet([3, 1, 2])
    assert FiniteSet([1, 2]) != FiniteSet([1, 2, 3])
    assert str(FiniteSet([1, 2])) == "{ 1, 2 }"
    assert str(FiniteSet()) == "{ }"


def test_duplicates_rejected():
    with pytest.raises(DuplicateElement):
        FiniteSet([1, 2, 1])


def test_algebra():
    a, b = FiniteSet([0, 1, 2]), FiniteSet([2, 3])
    assert list(a | b) == [0, 1, 2, 3]
    assert list(a & b) == [2]
    assert list(a ^ b) == [0, 1, 3]
    assert list(a - b) == [0, 1]


def test_powerset():
    assert powerset([]) == [[]]
    assert powerset([1]) == [[], [1]]
    assert powerset([1, 2, 3]) == [
        [], [1], [2], [1, 2], [3], [1, 3], [2, 3], [1, 2, 3]
    ]


@pytest.mark.parametrize("formula, sets, expected", [
    ("A", [[]], []),
    ("A!", [[]], []),
    ("A", [[42]], [42]),
    ("A!", [[42]], []),
    ("A!B&", [[1, 2, 3], [2, 3, 4]], [4]),
    ("AB|", [[0, 1, 2], []], [0, 1, 2]),
    ("AB&", [[0, 1, 2], [0]], [0]),
    ("AB&", [[0, 1, 2], [42]], []),
    ("AB^", [[0, 1, 2], [0]], [1, 2]),
    ("AB>", [[0], [1, 2]], [1, 2]),
    ("AB>", [[0], [0, 1, 2]], [0, 1, 2]),
    ("AB=", [[0, 1], [1, 2]], [1]),
    ("ABC||", [[0], [1], [2]], [0, 1, 2]),
    ("ABC&&", [[0], [0], []], []),
    ("ABC^^", [[0], [0], [0]], [0]),
    ("ABC>>", [[0], [0], [0]], [0]),
])
def test_evaluate(formula, sets, expected):
    assert FiniteSet(eval_set(formula, sets)) == FiniteSet(expected)


@pytest.mark.parametrize("formula, kind", [
    ("AC|", UnspecifiedVar),
    ("A1|", UnknownSymbol),
    ("A|", MissingArgument),
])
def test_errors(formula, kind):
    with pytest.raises(EvaluationError) as info:
        evaluate_set(formula, [FiniteSet([1]), FiniteSet([2])])
    assert info.value.kind is kind
