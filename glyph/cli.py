# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Line-oriented host for the two front ends.

	glyph calc [FILE] [--ast]   evaluate (or dump) one arithmetic expression per line
	glyph j [FILE]              print the AST of every J statement

Input defaults to stdin. A failing line is reported as a diagnostic and the
loop moves on to the next line; the exit code is 1 if anything failed.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from lark.exceptions import UnexpectedInput

from . import calc, jlang
from .diagnostics import Diagnostic, syntax_diagnostic
from .errors import CompileError
from .printer import format_node, format_program


def _read_source(path: Optional[Path], stdin: TextIO) -> tuple[str, str]:
	if path is None:
		return stdin.read(), "<stdin>"
	return path.read_text(), str(path)


def _report(diagnostics: List[Diagnostic], results: List[str], as_json: bool, out: TextIO, err: TextIO) -> int:
	exit_code = 1 if any(d.severity == "error" for d in diagnostics) else 0
	if as_json:
		payload = {
			"exit_code": exit_code,
			"results": results,
			"diagnostics": [d.to_dict() for d in diagnostics],
		}
		print(json.dumps(payload), file=out)
		return exit_code
	for diag in diagnostics:
		print(diag.format_human(), file=err)
	return exit_code


def run_calc(args: argparse.Namespace, out: TextIO, err: TextIO, stdin: TextIO) -> int:
	source, name = _read_source(args.source, stdin)
	results: List[str] = []
	diagnostics: List[Diagnostic] = []
	for idx, raw in enumerate(source.splitlines()):
		line = raw.strip()
		if not line:
			continue
		try:
			expr = calc.parse_expression(raw, max_depth=args.max_depth)
			if args.ast:
				rendered = format_node(expr)
			else:
				rendered = f" = {calc.format_number(calc.evaluate(expr))}"
		except UnexpectedInput as exc:
			diagnostics.append(syntax_diagnostic(exc, file=name, line_offset=idx))
			continue
		except CompileError as exc:
			diag = exc.to_diagnostic(file=name)
			diag.span = diag.span.shifted(idx)
			diag.notes.append(f"line {idx + 1}: {line}")
			diagnostics.append(diag)
			continue
		results.append(rendered)
		if not args.json:
			print(rendered, file=out)
	return _report(diagnostics, results, args.json, out, err)


def run_j(args: argparse.Namespace, out: TextIO, err: TextIO, stdin: TextIO) -> int:
	source, name = _read_source(args.source, stdin)
	nodes, diagnostics = jlang.compile_source(source, file=name, max_depth=args.max_depth)
	results = [format_node(node) for node in nodes]
	if not args.json and nodes:
		print(format_program(nodes), file=out)
	return _report(diagnostics, results, args.json, out, err)


def build_arg_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="glyph", description="Build ASTs for calculator and J-subset sources")
	sub = parser.add_subparsers(dest="command", required=True)

	common = argparse.ArgumentParser(add_help=False)
	common.add_argument("source", type=Path, nargs="?", help="Source file (default: stdin)")
	common.add_argument(
		"--max-depth",
		type=int,
		default=None,
		help="Reject expressions nested deeper than this (default: unbounded)",
	)
	common.add_argument(
		"--json",
		action="store_true",
		help="Emit results and diagnostics as one JSON document",
	)

	calc_cmd = sub.add_parser("calc", parents=[common], help="Evaluate arithmetic expressions, one per line")
	calc_cmd.add_argument("--ast", action="store_true", help="Print the expression tree instead of its value")
	calc_cmd.set_defaults(func=run_calc)

	j_cmd = sub.add_parser("j", parents=[common], help="Print the AST of each J statement")
	j_cmd.set_defaults(func=run_j)
	return parser


def main(argv: list[str] | None = None, *, out: TextIO | None = None, err: TextIO | None = None, stdin: TextIO | None = None) -> int:
	args = build_arg_parser().parse_args(argv)
	if args.max_depth is not None and args.max_depth < 1:
		print("glyph: error: --max-depth must be a positive integer", file=err or sys.stderr)
		return 2
	return args.func(args, out or sys.stdout, err or sys.stderr, stdin or sys.stdin)


if __name__ == "__main__":
	raise SystemExit(main())
