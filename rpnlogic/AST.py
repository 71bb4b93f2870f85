from dataclasses import dataclass

from rpnlogic.errors import UndefinedVariable
from rpnlogic.utils import Environment, SYMBOLS

# ----------------------------------------------------------------
# Base class for expressions
# ----------------------------------------------------------------
class Expr:
    """Base class for all propositional expressions.

    Nodes are immutable; every rewrite builds a new tree. Operators
    build nodes so trees can be written as ~a | b & c.
    """

    def __str__(self) -> str:
        return render(self)

    def __and__(self, other: "Expr") -> "Expr":
        return And(self, other)

    def __or__(self, other: "Expr") -> "Expr":
        return Or(self, other)

    def __xor__(self, other: "Expr") -> "Expr":
        return Xor(self, other)

    def __invert__(self) -> "Expr":
        return Not(self)


# ----------------------------------------------------------------
# Leaves
# ----------------------------------------------------------------
@dataclass(frozen=True)
class Var(Expr):
    """A variable, named by one uppercase letter."""
    symbol: str

    def __post_init__(self):
        if not (isinstance(self.symbol, str) and len(self.symbol) == 1 and self.symbol in SYMBOLS):
            raise ValueError(f"Var symbol must be one letter A-Z, got {self.symbol!r}")


@dataclass(frozen=True)
class Val(Expr):
    """A boolean constant."""
    value: bool


# ----------------------------------------------------------------
# Connectives
# ----------------------------------------------------------------
@dataclass(frozen=True)
class Not(Expr):
    expr: Expr


@dataclass(frozen=True)
class BinaryExpr(Expr):
    """Common shape of the binary connectives: left operand, right operand."""
    left: Expr
    right: Expr


@dataclass(frozen=True)
class Or(BinaryExpr):
    pass


@dataclass(frozen=True)
class And(BinaryExpr):
    pass


@dataclass(frozen=True)
class Xor(BinaryExpr):
    pass


@dataclass(frozen=True)
class Implies(BinaryExpr):
    pass


@dataclass(frozen=True)
class Equivalent(BinaryExpr):
    pass


# postfix character for each binary connective
OPERATORS: dict[str, type[BinaryExpr]] = {
    "|": Or,
    "&": And,
    "^": Xor,
    ">": Implies,
    "=": Equivalent,
}
_OPCHARS = {cls: char for char, cls in OPERATORS.items()}


# ----------------------------------------------------------------
# Serializer
# ----------------------------------------------------------------
def render(expr: Expr) -> str:
    """Render `expr` back to postfix text; parse(render(t)) == t.

    Walks the tree with an explicit stack, so depth is not limited by
    the interpreter's recursion limit.
    """
    out: list[str] = []
    # pending nodes, and operator characters waiting for their operands
    todo: list = [expr]
    while todo:
        e = todo.pop()
        if isinstance(e, str):
            out.append(e)
        elif isinstance(e, Var):
            out.append(e.symbol)
        elif isinstance(e, Val):
            out.append("1" if e.value else "0")
        elif isinstance(e, Not):
            todo.append("!")
            todo.append(e.expr)
        elif isinstance(e, BinaryExpr) and type(e) in _OPCHARS:
            todo.append(_OPCHARS[type(e)])
            todo.append(e.right)
            todo.append(e.left)
        else:
            raise TypeError(f"Unhandled Expr subtype: {type(e)}")
    return "".join(out)


# ----------------------------------------------------------------
# Evaluator
# ----------------------------------------------------------------
def _apply(expr: BinaryExpr, a: bool, b: bool) -> bool:
    if isinstance(expr, Or):
        return a or b
    elif isinstance(expr, And):
        return a and b
    elif isinstance(expr, Xor):
        return a != b
    elif isinstance(expr, Implies):
        return a <= b
    elif isinstance(expr, Equivalent):
        return a == b
    raise TypeError(f"Unhandled Expr subtype: {type(expr)}")


def evaluate(expr: Expr, env: Environment) -> bool:
    """
    Evaluate an expression under an environment.

    Parameters:
        expr (Expr): Expression to evaluate
        env (Environment): Bindings for every variable in `expr`

    Returns:
        bool: The value of the expression

    Raises:
        UndefinedVariable: If `expr` mentions a variable `env` does not bind
    """
    # a 1-tuple (node,) means "combine the operand values of node"
    todo: list = [expr]
    results: list[bool] = []
    while todo:
        e = todo.pop()
        if isinstance(e, tuple):
            (node,) = e
            if isinstance(node, Not):
                results.append(not results.pop())
            else:
                b = results.pop()
                a = results.pop()
                results.append(_apply(node, a, b))
        elif isinstance(e, Var):
            value = env.get(e.symbol)
            if value is None:
                raise UndefinedVariable(e.symbol)
            results.append(value)
        elif isinstance(e, Val):
            results.append(e.value)
        elif isinstance(e, Not):
            todo.append((e,))
            todo.append(e.expr)
        elif isinstance(e, BinaryExpr):
            todo.append((e,))
            todo.append(e.right)
            todo.append(e.left)
        else:
            raise TypeError(f"Unhandled Expr subtype: {type(e)}")
    return results.pop()


# ----------------------------------------------------------------
# Free variables
# ----------------------------------------------------------------
def envs(expr: Expr) -> Environment:
    """Return an environment binding every variable of `expr` to false."""
    env = Environment()
    todo = [expr]
    while todo:
        e = todo.pop()
        if isinstance(e, Var):
            env.enable(e.symbol)
        elif isinstance(e, Val):
            pass
        elif isinstance(e, Not):
            todo.append(e.expr)
        elif isinstance(e, BinaryExpr):
            todo.append(e.left)
            todo.append(e.right)
        else:
            raise TypeError(f"Unhandled Expr subtype: {type(e)}")
    return env


def is_literal(expr: Expr) -> bool:
    """True for a leaf or a negated leaf."""
    if isinstance(expr, Not):
        expr = expr.expr
    return isinstance(expr, (Var, Val))
