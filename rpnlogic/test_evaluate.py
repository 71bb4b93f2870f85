import pytest

from rpnlogic.errors import (
    EvaluationError, IncompleteComputation, MissingArgument, ParseError,
    UnknownSymbol,
)
from rpnlogic.evaluate import eval_formula, try_evaluate


def test_basic():
    assert try_evaluate("10&") is False
    assert try_evaluate("10|") is True
    assert try_evaluate("11>") is True
    assert try_evaluate("10=") is False
    assert try_evaluate("1011||=") is True


def test_composition():
    assert try_evaluate("11&0|") is True
    assert try_evaluate("10&1|") is True
    assert try_evaluate("11&1|1^") is False
    assert try_evaluate("01&1|1=") is True
    assert try_evaluate("01&1&1&") is False
    assert try_evaluate("0111&&&") is False


@pytest.mark.parametrize("text, kind", [
    ("", IncompleteComputation),
    ("11", IncompleteComputation),
    ("1&", MissingArgument),
    ("A", UnknownSymbol),
    ("1x", UnknownSymbol),
])
def test_errors(text, kind):
    with pytest.raises(EvaluationError) as info:
        try_evaluate(text)
    assert info.value.kind is kind
    assert not isinstance(info.value, ParseError)


def test_front_end_reports_and_answers_false(capsys):
    assert eval_formula("1&") is False
    assert "missing argument" in capsys.readouterr().out
    assert eval_formula("0!") is True
