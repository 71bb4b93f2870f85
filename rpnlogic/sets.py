# sets.py
from typing import Hashable, Iterable, Iterator, Sequence, Self

from rpnlogic.errors import (
    DuplicateElement, EvaluationError, IncompleteComputation,
    MissingArgument, UnknownSymbol, UnspecifiedVar,
)
from rpnlogic.parse import TokenKind, tokenize


class FiniteSet:
    """An ordered collection of distinct elements.

    Order is kept for display (and for powerset numbering) but is
    ignored by equality.
    """
    elements: tuple

    def __init__(self, elements: Iterable[Hashable] = ()):
        elements = tuple(elements)
        seen = set()
        for element in elements:
            if element in seen:
                raise DuplicateElement(element)
            seen.add(element)
        self.elements = elements

    @classmethod
    def _trusted(cls, elements: Iterable[Hashable]) -> Self:
        out = cls.__new__(cls)
        out.elements = tuple(elements)
        return out

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __contains__(self, item) -> bool:
        return item in self.elements

    def __eq__(self, other) -> bool:
        if not isinstance(other, FiniteSet):
            return NotImplemented
        return len(self) == len(other) and all(x in other for x in self)

    def __hash__(self):
        return hash(frozenset(self.elements))

    def __repr__(self) -> str:
        return f"FiniteSet({list(self.elements)!r})"

    def __str__(self) -> str:
        if not self.elements:
            return "{ }"
        return "{ " + ", ".join(str(e) for e in self.elements) + " }"

    # ──────────────────────────────────────────────────────────────────
    # Algebra
    # ──────────────────────────────────────────────────────────────────
    def union(self, other: Self) -> Self:
        return self._trusted(self.elements + tuple(x for x in other if x not in self))

    def intersection(self, other: Self) -> Self:
        return self._trusted(x for x in self if x in other)

    def symmetric_difference(self, other: Self) -> Self:
        """Elements in exactly one of the two sets (self's first)."""
        return self._trusted(
            tuple(x for x in self if x not in other)
            + tuple(x for x in other if x not in self)
        )

    def without(self, other: Self) -> Self:
        return self._trusted(x for x in self if x not in other)

    # '|', '&', '^', '-' mirror the postfix connectives
    __or__ = union
    __and__ = intersection
    __xor__ = symmetric_difference
    __sub__ = without

    def powerset(self) -> Iterator[Self]:
        """Yield all 2**n subsets; subset i keeps the elements whose bit is set in i."""
        for i in range(1 << len(self.elements)):
            yield self._trusted(
                e for bit, e in enumerate(self.elements) if (i >> bit) & 1
            )


def powerset(values: Sequence[Hashable]) -> list[list[Hashable]]:
    """Plain-list form of FiniteSet(values).powerset()."""
    return [list(subset) for subset in FiniteSet(values).powerset()]


def evaluate_set(formula: str, sets: Sequence[FiniteSet]) -> FiniteSet:
    """Evaluate a postfix formula over sets instead of booleans.

    Letter A is bound to sets[0], B to sets[1], and so on. Complements
    are taken relative to the union of every bound set:

        !x     universe - x
        a|b    union
        a&b    intersection
        a^b    symmetric difference
        a>b    universe - (a - b)
        a=b    universe - (a ^ b)

    Raises:
        EvaluationError: UnknownSymbol (including 0 and 1), MissingArgument,
            UnspecifiedVar for a letter with no bound set, or
            IncompleteComputation.
    """
    universe = FiniteSet()
    for s in sets:
        universe = universe.union(s)

    stack: list[FiniteSet] = []

    def pop(position: int, symbol: str) -> FiniteSet:
        if not stack:
            raise EvaluationError(MissingArgument, position, symbol)
        return stack.pop()

    for token in tokenize(formula):
        if token.kind is TokenKind.VARIABLE:
            index = ord(token.text) - ord("A")
            if index >= len(sets):
                raise EvaluationError(UnspecifiedVar, token.position, token.text)
            stack.append(sets[index])
        elif token.kind is TokenKind.NEGATION:
            stack.append(universe.without(pop(token.position, token.text)))
        elif token.kind is TokenKind.OPERATOR:
            b = pop(token.position, token.text)
            a = pop(token.position, token.text)
            if token.text == "|":
                result = a.union(b)
            elif token.text == "&":
                result = a.intersection(b)
            elif token.text == "^":
                result = a.symmetric_difference(b)
            elif token.text == ">":
                result = universe.without(a.without(b))
            else:
                result = universe.without(a.symmetric_difference(b))
            stack.append(result)
        else:
            raise EvaluationError(UnknownSymbol, token.position, token.text)

    if len(stack) != 1:
        raise EvaluationError(IncompleteComputation, len(formula))
    return stack.pop()


def eval_set(formula: str, sets: Sequence[Sequence[Hashable]]) -> list[Hashable]:
    """Plain-list form of evaluate_set."""
    return list(evaluate_set(formula, [FiniteSet(s) for s in sets]))
