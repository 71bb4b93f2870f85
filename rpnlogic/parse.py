# parse.py

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
import sys

from parsimonious.grammar import Grammar
from parsimonious.nodes import Node, NodeVisitor

from rpnlogic.AST import Expr, Not, OPERATORS, Val, Var
from rpnlogic.errors import (
    IncompleteComputation, MissingArgument, ParseError, UnknownSymbol
)

GRAMMAR = Grammar((Path(__file__).parent / "grammar.peg").read_text())


# ────────────────────────────────────────────────────────────────────────────
# Tokens
# ────────────────────────────────────────────────────────────────────────────
class TokenKind(Enum):
    VARIABLE = 1
    CONSTANT = 2
    NEGATION = 3
    OPERATOR = 4
    UNKNOWN = 5


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    position: int


class TokenVisitor(NodeVisitor):
    """Flattens the parse tree of grammar.peg into a list of Tokens."""

    def generic_visit(self, node, visited_children):
        return visited_children or node

    def visit_formula(self, node: Node, visited_children):
        return list(visited_children)

    def visit_token(self, node: Node, visited_children):
        # token = variable / constant / negation / operator / unknown
        return visited_children[0]

    def visit_variable(self, node: Node, visited_children):
        return Token(TokenKind.VARIABLE, node.text, node.start)

    def visit_constant(self, node: Node, visited_children):
        return Token(TokenKind.CONSTANT, node.text, node.start)

    def visit_negation(self, node: Node, visited_children):
        return Token(TokenKind.NEGATION, node.text, node.start)

    def visit_operator(self, node: Node, visited_children):
        return Token(TokenKind.OPERATOR, node.text, node.start)

    def visit_unknown(self, node: Node, visited_children):
        return Token(TokenKind.UNKNOWN, node.text, node.start)


def tokenize(text: str) -> list[Token]:
    """Split postfix text into tokens, one per character."""
    return TokenVisitor().visit(GRAMMAR.parse(text))


# ────────────────────────────────────────────────────────────────────────────
# Operand stack
# ────────────────────────────────────────────────────────────────────────────
def _pop(stack: list, token: Token):
    if not stack:
        raise ParseError(MissingArgument, token.position, token.text)
    return stack.pop()


def parse(text: str) -> Expr:
    """Parse a postfix formula and return its expression tree.

    Raises:
        ParseError: kind UnknownSymbol, MissingArgument or
            IncompleteComputation; the first problem in input order wins.
    """
    stack: list[Expr] = []
    for token in tokenize(text):
        if token.kind is TokenKind.VARIABLE:
            stack.append(Var(token.text))
        elif token.kind is TokenKind.CONSTANT:
            stack.append(Val(token.text == "1"))
        elif token.kind is TokenKind.NEGATION:
            stack.append(Not(_pop(stack, token)))
        elif token.kind is TokenKind.OPERATOR:
            b = _pop(stack, token)
            a = _pop(stack, token)
            stack.append(OPERATORS[token.text](a, b))
        else:
            raise ParseError(UnknownSymbol, token.position, token.text)

    if len(stack) != 1:
        raise ParseError(IncompleteComputation, len(text))
    return stack.pop()


# ----------------------------------------------------------------
# Command-Line Entry Point
# ----------------------------------------------------------------
if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python -m rpnlogic.parse FORMULA")
        exit(1)
    try:
        print(repr(parse(sys.argv[1])))
    except ParseError as e:
        print(f"Could not parse formula: {e}")
        exit(1)
