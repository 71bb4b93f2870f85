#!/usr/bin/env python3
"""
run.py – command-line front end for rpnlogic

Formula commands take one postfix formula; without it they read one
formula per line from stdin:

    $ rpnlogic nnf 'AB&!'
    A!B!|
    $ rpnlogic table
    >> ab|
    | A | B | = |
    ...
"""
from __future__ import annotations

import argparse
import sys
from typing import Callable, List, Optional

from rpnlogic.AST import render
from rpnlogic.arithmetic import adder, gray_code, multiplier, subber
from rpnlogic.curve import map as curve_map, reverse_map
from rpnlogic.errors import FormulaError, FormulaTooDeep
from rpnlogic.evaluate import try_evaluate
from rpnlogic.formula import conjunctive_normal, negation_normal, sat, truth_table
from rpnlogic.parse import parse
from rpnlogic.sets import FiniteSet, evaluate_set
from rpnlogic.timeme import timeme

# ────────────────────────────────────────────── formula commands
FORMULA_COMMANDS: dict[str, tuple[str, Callable[[str], str]]] = {
    "eval": ("Evaluate a constant-only formula",
             lambda f: f"=> {try_evaluate(f)}"),
    "table": ("Print the truth table of a formula",
              lambda f: truth_table(parse(f)).rstrip("\n")),
    "nnf": ("Rewrite a formula in negation normal form",
            lambda f: render(negation_normal(parse(f)))),
    "cnf": ("Rewrite a formula in conjunctive normal form",
            lambda f: render(conjunctive_normal(parse(f)))),
    "sat": ("Check whether a formula is satisfiable",
            lambda f: str(sat(parse(f)))),
}


def _clean(formula: str) -> str:
    return formula.strip().upper()


def _guarded(handler: Callable[[str], str], formula: str) -> str:
    try:
        return handler(formula)
    except RecursionError:
        raise FormulaTooDeep() from None


def _repl(handler: Callable[[str], str]) -> int:
    """Answer one formula per stdin line until EOF."""
    while True:
        print(">> ", end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            print()
            return 0
        try:
            print(_guarded(handler, _clean(line)))
        except (FormulaError, ValueError) as exc:
            print(f"✗  {exc}")


def _parse_set(text: str) -> FiniteSet:
    items = [part for part in text.replace(",", " ").split() if part]
    return FiniteSet(int(item) for item in items)


# ────────────────────────────────────────────── CLI
def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="rpnlogic", description="Postfix propositional logic toolkit")
    ap.add_argument("--time", action="store_true", help="Print how long the command took")
    sub = ap.add_subparsers(dest="command", required=True)

    for name, (help_text, _handler) in FORMULA_COMMANDS.items():
        p = sub.add_parser(name, help=help_text)
        p.add_argument("formula", nargs="?", help="Postfix formula; read from stdin when omitted")

    p = sub.add_parser("set", help="Evaluate a formula over sets bound to A, B, ...")
    p.add_argument("formula")
    p.add_argument("sets", nargs="*", help="One set per letter, e.g. '1,2,3' ('' for empty)")

    p = sub.add_parser("powerset", help="List every subset of the given values")
    p.add_argument("values", nargs="*", type=int)

    for name in ("adder", "subber", "multiplier"):
        p = sub.add_parser(name, help=f"32-bit {name} built from bitwise operations")
        p.add_argument("a", type=int)
        p.add_argument("b", type=int)

    p = sub.add_parser("gray", help="Gray code of each value")
    p.add_argument("values", nargs="+", type=int)

    p = sub.add_parser("map", help="Z-order curve position of (x, y)")
    p.add_argument("x", type=int)
    p.add_argument("y", type=int)

    p = sub.add_parser("reverse-map", help="Coordinates of a Z-order curve position")
    p.add_argument("n", type=float)

    return ap


def _run(args: argparse.Namespace) -> List[str]:
    if args.command in FORMULA_COMMANDS:
        _help, handler = FORMULA_COMMANDS[args.command]
        return [_guarded(handler, _clean(args.formula))]
    if args.command == "set":
        sets = [_parse_set(s) for s in args.sets]
        return [f"=> {evaluate_set(_clean(args.formula), sets)}"]
    if args.command == "powerset":
        return [str(subset) for subset in FiniteSet(args.values).powerset()]
    if args.command in ("adder", "subber", "multiplier"):
        op = {"adder": adder, "subber": subber, "multiplier": multiplier}[args.command]
        return [str(op(args.a, args.b))]
    if args.command == "gray":
        return [f"{v:8b} -> {gray_code(v):8b}" for v in args.values]
    if args.command == "map":
        return [f"=> {curve_map(args.x, args.y)}"]
    if args.command == "reverse-map":
        return [f"=> {reverse_map(args.n)}"]
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.command in FORMULA_COMMANDS and args.formula is None:
        _help, handler = FORMULA_COMMANDS[args.command]
        return _repl(handler)

    try:
        with timeme(args.command, enabled=args.time):
            lines = _run(args)
    except (FormulaError, ValueError) as exc:
        print(f"✗  {exc}")
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
