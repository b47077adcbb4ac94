# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
S-expression rendering of calculator and J ASTs.

Negative literals print with the `_` sentinel so J output reads back as J;
verbs print under their enum names in CamelCase.
"""

from __future__ import annotations

from typing import Iterable

from . import ast


def _verb_name(kind: ast.MonadicVerb | ast.DyadicVerb) -> str:
	return "".join(part.capitalize() for part in kind.name.split("_"))


def format_string(value: str) -> str:
	return "'" + value.replace("'", "''") + "'"


def format_node(node: ast.Expr) -> str:
	if isinstance(node, ast.IntLiteral):
		return str(node.value) if node.value >= 0 else f"_{-node.value}"
	if isinstance(node, ast.FloatLiteral):
		text = repr(node.value)
		return text if not text.startswith("-") else "_" + text[1:]
	if isinstance(node, ast.Identifier):
		return node.name
	if isinstance(node, ast.StringLiteral):
		return format_string(node.value)
	if isinstance(node, ast.UnaryOp):
		return f"({node.op} {format_node(node.operand)})"
	if isinstance(node, ast.BinaryOp):
		return f"({node.op} {format_node(node.left)} {format_node(node.right)})"
	if isinstance(node, ast.MonadicVerbOp):
		return f"({_verb_name(node.verb)} {format_node(node.operand)})"
	if isinstance(node, ast.DyadicVerbOp):
		return f"({_verb_name(node.verb)} {format_node(node.left)} {format_node(node.right)})"
	if isinstance(node, ast.ReduceOp):
		return f"(reduce {_verb_name(node.verb)} {format_node(node.operand)})"
	if isinstance(node, ast.Assignment):
		return f"(=: {node.name} {format_node(node.value)})"
	if isinstance(node, ast.Sequence):
		items = " ".join(format_node(item) for item in node.items)
		return f"(seq {items})"
	raise TypeError(f"cannot format {type(node).__name__}")


def format_program(nodes: Iterable[ast.Expr]) -> str:
	return "\n".join(format_node(node) for node in nodes)


__all__ = ["format_node", "format_program", "format_string"]
