# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Arithmetic calculator front end.

`grammars/calc.lark` recognizes a flat run of operands and operators; the
Pratt builder applies `CALCULATOR_TABLE` to it. `evaluate()` folds the
resulting tree to a number.
"""

from __future__ import annotations

import operator
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional

from lark import Lark, Tree

from . import ast
from . import tokens
from .errors import EvaluationError, UnexpectedToken
from .pratt import PrattBuilder
from .precedence import CALCULATOR_TABLE, PrecedenceTable
from .span import Span

_GRAMMAR_PATH = Path(__file__).with_name("grammars") / "calc.lark"
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

# Prefix `-` and infix `-` share a glyph; Earley's dynamic lexer tells them
# apart by position.
_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="earley",
	start="calculation",
	propagate_positions=True,
	maybe_placeholders=False,
)

Number = int | float


def recognize(source: str) -> Tree:
	"""Run the grammar only; returns the `calculation` token tree."""
	return _PARSER.parse(source)


def parse_expression(
	source: str,
	*,
	table: PrecedenceTable = CALCULATOR_TABLE,
	max_depth: int | None = None,
) -> ast.Expr:
	tree = recognize(source)
	return build_calculation(tree, table=table, max_depth=max_depth)


def build_calculation(
	tree: Tree,
	*,
	table: PrecedenceTable = CALCULATOR_TABLE,
	max_depth: int | None = None,
) -> ast.Expr:
	if tokens.label(tree) != "calculation":
		raise UnexpectedToken(f"expected a calculation, got {tokens.label(tree)}", span=tokens.span(tree))
	expr_tree = tree.children[0]
	return PrattBuilder(table, max_depth=max_depth).build_tree(expr_tree)


def _divide(lhs: Number, rhs: Number) -> Number:
	return lhs / rhs


def _power(lhs: Number, rhs: Number) -> Number:
	if isinstance(lhs, int) and isinstance(rhs, int) and rhs < 0:
		return float(lhs) ** rhs
	result = lhs ** rhs
	if isinstance(result, complex):
		raise ValueError(f"{lhs} ^ {rhs} has no real value")
	return result


_BINARY: Dict[str, Callable[[Number, Number], Number]] = {
	"+": operator.add,
	"-": operator.sub,
	"*": operator.mul,
	"/": _divide,
	"%": operator.mod,
	"^": _power,
}

_UNARY: Dict[str, Callable[[Number], Number]] = {
	"-": operator.neg,
}


def evaluate(expr: ast.Expr, variables: Optional[Mapping[str, Number]] = None) -> Number:
	"""Evaluate a calculator AST. Integers stay integers except under `/`."""
	env = variables or {}
	if isinstance(expr, ast.IntLiteral):
		return expr.value
	if isinstance(expr, ast.FloatLiteral):
		return expr.value
	if isinstance(expr, ast.Identifier):
		if expr.name not in env:
			raise EvaluationError(f"unknown identifier '{expr.name}'", span=_span(expr))
		return env[expr.name]
	if isinstance(expr, ast.UnaryOp):
		fn = _UNARY.get(expr.op)
		if fn is None:
			raise EvaluationError(f"unsupported prefix operator '{expr.op}'", span=_span(expr))
		return fn(evaluate(expr.operand, env))
	if isinstance(expr, ast.BinaryOp):
		fn = _BINARY.get(expr.op)
		if fn is None:
			raise EvaluationError(f"unsupported operator '{expr.op}'", span=_span(expr))
		lhs = evaluate(expr.left, env)
		rhs = evaluate(expr.right, env)
		try:
			return fn(lhs, rhs)
		except ZeroDivisionError as exc:
			raise EvaluationError(f"division by zero in '{expr.op}'", span=_span(expr)) from exc
		except OverflowError as exc:
			raise EvaluationError(f"numeric overflow in '{expr.op}'", span=_span(expr)) from exc
		except ValueError as exc:
			raise EvaluationError(str(exc), span=_span(expr)) from exc
	raise EvaluationError(f"cannot evaluate {type(expr).__name__}", span=_span(expr))


def calculate(source: str, variables: Optional[Mapping[str, Number]] = None) -> Number:
	return evaluate(parse_expression(source), variables)


def format_number(value: Number) -> str:
	"""Whole floats print without a fraction."""
	if isinstance(value, float) and value.is_integer() and abs(value) < 1e16:
		return str(int(value))
	return str(value)


def _span(expr: ast.Expr) -> Span:
	loc = expr.loc
	if loc is None:
		return Span()
	return Span(line=loc.line, column=loc.column, start=loc.start, end=loc.end)


__all__ = [
	"recognize",
	"parse_expression",
	"build_calculation",
	"evaluate",
	"calculate",
	"format_number",
]
