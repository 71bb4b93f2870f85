from rpnlogic.AST import (
    Expr, Var, Val, Not, Or, And, Xor, Implies, Equivalent, envs, evaluate, render
)
from rpnlogic.errors import (
    ErrorKind, FormulaError, ParseError, EvaluationError, UndefinedVariable,
    FormulaTooDeep,
    UnknownSymbol, MissingArgument, IncompleteComputation, UnspecifiedVar,
)
from rpnlogic.formula import (
    negation_normal, conjunctive_normal, to_clauses, sat, truth_matrix,
    truth_table, write_truth_table,
)
from rpnlogic.parse import parse
from rpnlogic.utils import Environment, assignments
