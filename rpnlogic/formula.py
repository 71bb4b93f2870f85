# formula.py
from typing import Dict, List, TextIO, Tuple
import io

import numpy as np

from rpnlogic.AST import (
    And, BinaryExpr, Equivalent, Expr, Implies, Not, Or, Val, Var, Xor,
    envs, evaluate, is_literal,
)
from rpnlogic.utils import assignments


def _negate_leaf(leaf: Expr) -> Expr:
    if isinstance(leaf, Val):
        return Val(not leaf.value)
    return Not(leaf)


def _unwrap(expr: Expr) -> Expr:
    """Drop pairs of leading negations, so !!x becomes x."""
    while isinstance(expr, Not) and isinstance(expr.expr, Not):
        expr = expr.expr.expr
    return expr


# 1. Negation normal form
def negation_normal(expr: Expr) -> Expr:
    """Push every negation down to the leaves.

    The result only uses And, Or, and Not applied directly to a Var or
    a Val. `norm` returns the NNF of a node, `neg` the NNF of its
    negation, so negated subtrees are never built and then walked again.
    """

    def norm(e: Expr) -> Expr:
        e = _unwrap(e)
        if isinstance(e, (Var, Val)):
            return e
        if isinstance(e, Not):
            return neg(e.expr)
        if isinstance(e, BinaryExpr):
            a, b = e.left, e.right
            if isinstance(e, Or):
                return norm(a) | norm(b)
            if isinstance(e, And):
                return norm(a) & norm(b)
            if isinstance(e, Xor):
                return norm(a) & neg(b) | neg(a) & norm(b)
            if isinstance(e, Implies):
                return neg(a) | norm(b)
            if isinstance(e, Equivalent):
                return norm(a) & norm(b) | neg(a) & neg(b)
        raise TypeError(f"Unhandled Expr subtype: {type(e)}")

    def neg(e: Expr) -> Expr:
        e = _unwrap(e)
        if isinstance(e, (Var, Val)):
            return _negate_leaf(e)
        if isinstance(e, Not):
            return norm(e.expr)
        if isinstance(e, BinaryExpr):
            a, b = e.left, e.right
            if isinstance(e, Or):
                return neg(a) & neg(b)
            if isinstance(e, And):
                return neg(a) | neg(b)
            if isinstance(e, Xor):
                return norm(a) & norm(b) | neg(a) & neg(b)
            if isinstance(e, Implies):
                return norm(a) & neg(b)
            if isinstance(e, Equivalent):
                # not (a = b)  is  a xor b
                return norm(a) & neg(b) | neg(a) & norm(b)
        raise TypeError(f"Unhandled Expr subtype: {type(e)}")

    return norm(expr)


# 2. Conjunctive normal form
def conjunctive_normal(expr: Expr) -> Expr:
    """Rewrite `expr` as a conjunction of disjunctions of literals.

    Same norm/neg recursion as negation_normal, but every And/Or is
    built through `and_`/`or_`, which keep the tree in CNF:
    conjunctions chain to the right and disjunctions are distributed
    over any conjunction they would otherwise contain.
    """

    def norm(e: Expr) -> Expr:
        e = _unwrap(e)
        if isinstance(e, (Var, Val)):
            return e
        if isinstance(e, Not):
            return neg(e.expr)
        if isinstance(e, BinaryExpr):
            a, b = e.left, e.right
            if isinstance(e, Or):
                return or_(a, b)
            if isinstance(e, And):
                return and_(norm(a), norm(b))
            if isinstance(e, Xor):
                return and_(or_(norm(a), norm(b)), or_(neg(a), neg(b)))
            if isinstance(e, Implies):
                return or_(neg(a), norm(b))
            if isinstance(e, Equivalent):
                return and_(or_(norm(a), neg(b)), or_(neg(a), norm(b)))
        raise TypeError(f"Unhandled Expr subtype: {type(e)}")

    def neg(e: Expr) -> Expr:
        e = _unwrap(e)
        if isinstance(e, (Var, Val)):
            return _negate_leaf(e)
        if isinstance(e, Not):
            return norm(e.expr)
        if isinstance(e, BinaryExpr):
            a, b = e.left, e.right
            if isinstance(e, Or):
                return and_(neg(a), neg(b))
            if isinstance(e, And):
                return or_(neg(a), neg(b))
            if isinstance(e, Xor):
                return and_(or_(neg(a), norm(b)), or_(norm(a), neg(b)))
            if isinstance(e, Implies):
                return and_(norm(a), neg(b))
            if isinstance(e, Equivalent):
                return and_(or_(norm(a), norm(b)), or_(neg(a), neg(b)))
        raise TypeError(f"Unhandled Expr subtype: {type(e)}")

    def or_(a: Expr, b: Expr) -> Expr:
        if isinstance(a, And):
            return conjoin([or_(c, b) for c in _conjuncts(a)])
        if isinstance(b, And):
            return conjoin([or_(a, c) for c in _conjuncts(b)])
        # operands already in CNF come back from norm unchanged
        a, b = norm(a), norm(b)
        if isinstance(a, And) or isinstance(b, And):
            return or_(a, b)
        if isinstance(a, Or):
            return or_(a.left, or_(a.right, b))
        return Or(a, b)

    def and_(a: Expr, b: Expr) -> Expr:
        for conjunct in reversed(_conjuncts(a)):
            b = And(conjunct, b)
        return b

    def conjoin(parts: List[Expr]) -> Expr:
        result = parts[-1]
        for part in reversed(parts[:-1]):
            result = and_(part, result)
        return result

    return norm(expr)


def _conjuncts(expr: Expr) -> List[Expr]:
    """Operands of the nested Ands at the top of `expr`, left to right."""
    out = []
    todo = [expr]
    while todo:
        e = todo.pop()
        if isinstance(e, And):
            todo.append(e.right)
            todo.append(e.left)
        else:
            out.append(e)
    return out


def _disjuncts(expr: Expr) -> List[Expr]:
    out = []
    while isinstance(expr, Or):
        out.append(expr.left)
        expr = expr.right
    out.append(expr)
    return out


# 3. Clause export (pycosat / DIMACS convention)
def to_clauses(expr: Expr) -> Tuple[List[List[int]], Dict[str, int]]:
    """Convert a formula to CNF and flatten it into integer clauses.

    Output encoding:
      * variable k (1-based) is the k-th free variable in A to Z order
      * a literal is +k or -k
      * a clause is a list of literals (their disjunction)
      * the CNF is a list of clauses (their conjunction)

    Constants are folded away: a clause holding a true literal is
    dropped, and false literals are removed from their clause (which
    may leave an empty, unsatisfiable clause).

    Returns:
      * the clause list
      * a map from variable letter to its CNF variable
    """
    cnf = conjunctive_normal(expr)
    var_map = {symbol: i + 1 for i, symbol in enumerate(envs(expr).symbols())}
    clauses: List[List[int]] = []

    for conjunct in _conjuncts(cnf):
        clause: List[int] = []
        satisfied = False
        for literal in _disjuncts(conjunct):
            if not is_literal(literal):
                raise TypeError(f"Not a CNF literal: {literal}")
            positive = not isinstance(literal, Not)
            leaf = literal if positive else literal.expr
            if isinstance(leaf, Val):
                if leaf.value == positive:
                    satisfied = True
                continue
            var = var_map[leaf.symbol]
            clause.append(var if positive else -var)
        if not satisfied:
            clauses.append(clause)

    return clauses, var_map


# 4. Queries built on the assignment enumerator
def sat(expr: Expr) -> bool:
    """True if some assignment of the free variables makes `expr` true.

    Exhaustive: tries up to 2**k assignments for k free variables. A
    formula without variables has no assignment to try, so it is never
    reported satisfiable.
    """
    return any(evaluate(expr, env) for env in assignments(envs(expr)))


def truth_matrix(expr: Expr) -> np.ndarray:
    """Return the truth table as a (2**k, k + 1) uint8 matrix.

    Columns are the free variables in A to Z order followed by the
    value of `expr`; rows follow the assignment enumerator.
    """
    base = envs(expr)
    width = sum(1 for _ in base.symbols()) + 1
    rows = [
        list(env.bits()) + [evaluate(expr, env)]
        for env in assignments(base)
    ]
    if not rows:
        return np.empty((0, width), dtype=np.uint8)
    return np.array(rows, dtype=np.uint8)


def write_truth_table(expr: Expr, output: TextIO):
    """Write the truth table of `expr` as a markdown-style table."""
    base = envs(expr)
    symbols = list(base.symbols())
    output.write("|" + "".join(f" {s} |" for s in symbols) + " = |\n")
    output.write("|" + "---|" * (len(symbols) + 1) + "\n")
    # one row per assignment, written as it is produced
    for env in assignments(base):
        row = [*env.bits(), evaluate(expr, env)]
        output.write("|" + "".join(f" {int(bit)} |" for bit in row) + "\n")


def truth_table(expr: Expr) -> str:
    out = io.StringIO()
    write_truth_table(expr, out)
    return out.getvalue()
