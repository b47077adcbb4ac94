# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from glyph import ast
from glyph.calc import parse_expression
from glyph.jlang import parse_program, parse_statement
from glyph.printer import format_node, format_program


def test_format_calculator_expressions() -> None:
	assert format_node(parse_expression("1 + 2 * 3")) == "(+ 1 (* 2 3))"
	assert format_node(parse_expression("-x ^ 2.5")) == "(^ (- x) 2.5)"


def test_format_j_statements() -> None:
	assert format_node(parse_statement("+/ 1 2 3")) == "(reduce Plus (seq 1 2 3))"
	assert format_node(parse_statement("_5 _0.5")) == "(seq _5 _0.5)"
	assert format_node(parse_statement("x =: >: 1")) == "(=: x (Increment 1))"
	assert format_node(parse_statement("1 >: 2")) == "(LargerOrEqual 1 2)"
	assert format_node(parse_statement("'it''s'")) == "'it''s'"


def test_format_program_one_node_per_line() -> None:
	assert format_program(parse_program("1 2\n- 3\n")) == "(seq 1 2)\n(Negate 3)"


def test_format_node_rejects_unknown_nodes() -> None:
	with pytest.raises(TypeError, match="cannot format Expr"):
		format_node(ast.Expr())
