# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Error kinds raised while turning a token tree into an AST.

Every kind is terminal for the statement being compiled. Front ends let
them propagate; hosts that want to keep going convert them with
`to_diagnostic()` and move on to the next statement.
"""

from __future__ import annotations

from .diagnostics import Diagnostic
from .span import Span


class CompileError(Exception):
	"""Base class for AST construction failures."""

	code = "E-COMPILE"
	phase = "compile"

	def __init__(self, message: str, *, span: Span | None = None) -> None:
		super().__init__(message)
		self.message = message
		self.span = span if span is not None else Span()

	def __str__(self) -> str:
		if self.span.line is None:
			return self.message
		return f"{self.span.line}:{self.span.column}: {self.message}"

	def to_diagnostic(self, *, file: str | None = None) -> Diagnostic:
		span = self.span.with_file(file) if file is not None else self.span
		return Diagnostic(message=self.message, code=self.code, phase=self.phase, span=span)


class MalformedLiteral(CompileError):
	"""Literal text does not match the numeric grammar once separators are stripped."""

	code = "E-MALFORMED-LITERAL"


class UnknownVerb(CompileError):
	"""Verb symbol is absent from the table for its arity."""

	code = "E-UNKNOWN-VERB"


class UnsupportedAdverb(CompileError):
	"""Adverb count or symbol is invalid for the verb it modifies."""

	code = "E-UNSUPPORTED-ADVERB"


class UnexpectedToken(CompileError):
	"""A token's rule label is not valid at its position."""

	code = "E-UNEXPECTED-TOKEN"


class NestingTooDeep(CompileError):
	"""Nesting exceeded the builder's configured `max_depth`."""

	code = "E-NESTING-TOO-DEEP"


class EvaluationError(CompileError):
	"""Raised by the calculator evaluator (division by zero, unbound names)."""

	code = "E-EVAL"
	phase = "eval"


__all__ = [
	"CompileError",
	"MalformedLiteral",
	"UnknownVerb",
	"UnsupportedAdverb",
	"UnexpectedToken",
	"NestingTooDeep",
	"EvaluationError",
]
