# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
J front end: recognize with `grammars/j.lark`, compile with `VerbCompiler`.

`parse_program` is all-or-nothing. `compile_source` is the line-based host
mode: every line is compiled on its own and a failing line turns into a
diagnostic instead of aborting the rest.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

from lark import Lark, Tree
from lark.exceptions import UnexpectedInput

from . import ast
from .diagnostics import Diagnostic, syntax_diagnostic
from .errors import CompileError, UnexpectedToken
from .verbs import VerbCompiler

_GRAMMAR_PATH = Path(__file__).with_name("grammars") / "j.lark"
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	start="program",
	propagate_positions=True,
	maybe_placeholders=False,
)


def recognize(source: str) -> Tree:
	"""Run the grammar only; returns the `program` token tree."""
	return _PARSER.parse(source)


def parse_program(source: str, *, max_depth: int | None = None) -> List[ast.Expr]:
	"""One node per statement, in source order. Raises on the first error."""
	return VerbCompiler(max_depth=max_depth).compile_program(recognize(source))


def parse_statement(source: str, *, max_depth: int | None = None) -> ast.Expr:
	nodes = parse_program(source, max_depth=max_depth)
	if len(nodes) != 1:
		raise UnexpectedToken(f"expected exactly one statement, found {len(nodes)}")
	return nodes[0]


def compile_source(
	source: str,
	*,
	file: Optional[str] = None,
	max_depth: int | None = None,
) -> Tuple[List[ast.Expr], List[Diagnostic]]:
	compiler = VerbCompiler(max_depth=max_depth)
	nodes: List[ast.Expr] = []
	diagnostics: List[Diagnostic] = []
	for idx, line in enumerate(source.splitlines()):
		if not line.strip():
			continue
		try:
			program = recognize(line)
		except UnexpectedInput as err:
			diagnostics.append(syntax_diagnostic(err, file=file, line_offset=idx))
			continue
		try:
			nodes.extend(compiler.compile_program(program))
		except CompileError as err:
			diag = err.to_diagnostic(file=file)
			diag.span = diag.span.shifted(idx)
			diagnostics.append(diag)
	return nodes, diagnostics


__all__ = ["recognize", "parse_program", "parse_statement", "compile_source"]
