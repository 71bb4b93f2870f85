"""Boolean stack evaluation of constant-only postfix formulas.

Unlike parse(), nothing is built: each token pushes or combines plain
bools, so "10&1|" evaluates without an expression tree.
"""
from typing import Callable, Dict

from rpnlogic.errors import (
    EvaluationError, IncompleteComputation, MissingArgument, UnknownSymbol
)
from rpnlogic.parse import TokenKind, tokenize

BINARY: Dict[str, Callable[[bool, bool], bool]] = {
    "|": lambda a, b: a or b,
    "&": lambda a, b: a and b,
    "^": lambda a, b: a != b,
    ">": lambda a, b: a <= b,
    "=": lambda a, b: a == b,
}


def try_evaluate(formula: str) -> bool:
    """Evaluate a formula built from 0, 1 and operators.

    Raises:
        EvaluationError: on a variable or unknown character
            (UnknownSymbol), an operator without enough operands
            (MissingArgument), or a leftover stack (IncompleteComputation).
    """
    stack: list[bool] = []

    def pop(position: int, symbol: str) -> bool:
        if not stack:
            raise EvaluationError(MissingArgument, position, symbol)
        return stack.pop()

    for token in tokenize(formula):
        if token.kind is TokenKind.CONSTANT:
            stack.append(token.text == "1")
        elif token.kind is TokenKind.NEGATION:
            stack.append(not pop(token.position, token.text))
        elif token.kind is TokenKind.OPERATOR:
            b = pop(token.position, token.text)
            a = pop(token.position, token.text)
            stack.append(BINARY[token.text](a, b))
        else:
            raise EvaluationError(UnknownSymbol, token.position, token.text)

    if len(stack) != 1:
        raise EvaluationError(IncompleteComputation, len(formula))
    return stack.pop()


def eval_formula(formula: str) -> bool:
    """Front-end form of try_evaluate: reports errors and answers False."""
    try:
        return try_evaluate(formula)
    except EvaluationError as e:
        print(f"An error occurred while evaluating: {e}")
        return False
