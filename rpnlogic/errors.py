# errors.py

from dataclasses import dataclass
from enum import Enum


# ----------------------------------------------------------------
# Error kinds shared by every postfix stack machine
# ----------------------------------------------------------------
class ErrorKind(Enum):
    """Why a postfix formula could not be turned into a single result."""
    UNKNOWN_SYMBOL = 1
    MISSING_ARGUMENT = 2
    INCOMPLETE_COMPUTATION = 3
    UNSPECIFIED_VAR = 4

    def describe(self) -> str:
        return self.name.replace("_", " ").lower()


UnknownSymbol = ErrorKind.UNKNOWN_SYMBOL
MissingArgument = ErrorKind.MISSING_ARGUMENT
IncompleteComputation = ErrorKind.INCOMPLETE_COMPUTATION
UnspecifiedVar = ErrorKind.UNSPECIFIED_VAR


@dataclass(eq=False)
class FormulaError(Exception):
    """Base class for stack-discipline failures in a postfix formula.

    `position` is the zero-based index of the offending token, or the
    length of the input for IncompleteComputation.
    """
    kind: ErrorKind
    position: int
    msg: str

    def __init__(self, kind: ErrorKind, position: int, symbol: str = ""):
        detail = f" {symbol!r}" if symbol else ""
        msg = f"{kind.describe()}{detail} at position {position}"
        super().__init__(msg)
        self.kind = kind
        self.position = position
        self.msg = msg

    def __str__(self):
        return self.msg


class ParseError(FormulaError):
    """Raised by the parser: the text does not describe exactly one tree."""
    pass


class EvaluationError(FormulaError):
    """Raised by the raw boolean and set stack evaluators."""
    pass


# ----------------------------------------------------------------
# Contract violations
# ----------------------------------------------------------------
class UndefinedVariable(LookupError):
    """A variable was evaluated under an environment that does not assign it."""

    def __init__(self, symbol: str):
        super().__init__(f"Undefined variable: {symbol}")
        self.symbol = symbol


class DuplicateElement(ValueError):
    """A set was built from values containing duplicates."""

    def __init__(self, value):
        super().__init__(f"Invalid set: duplicate element {value!r}")
        self.value = value


class FormulaTooDeep(ValueError):
    """The normal-form rewrites ran out of stack on a deeply nested formula."""

    def __init__(self):
        super().__init__("formula is nested too deeply")
