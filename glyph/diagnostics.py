# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Diagnostic records produced by the front ends and the CLI host.

A diagnostic is a message plus a span; compile errors convert into one via
`CompileError.to_diagnostic()` so a host can keep going after a bad line.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from lark.exceptions import UnexpectedInput

from .span import Span


@dataclass
class Diagnostic:
	"""Represents a front-end diagnostic (error/warning/etc.)."""

	message: str
	code: str | None = None
	phase: str | None = None
	severity: str = "error"
	span: Span = field(default_factory=Span)  # Span() denotes unknown.
	notes: list[str] = field(default_factory=list)

	def __post_init__(self) -> None:
		if self.span is None:  # type: ignore[unreachable]
			self.span = Span()

	def format_human(self) -> str:
		tag = f"[{self.code}] " if self.code else ""
		return f"{self.span.describe()}: {self.severity}: {tag}{self.message}"

	def to_dict(self) -> dict:
		return {
			"phase": self.phase,
			"code": self.code,
			"message": self.message,
			"severity": self.severity,
			"file": self.span.file,
			"line": self.span.line,
			"column": self.span.column,
			"notes": list(self.notes),
		}



def syntax_diagnostic(err: UnexpectedInput, *, file: Optional[str] = None, line_offset: int = 0) -> Diagnostic:
	"""Convert a recognizer failure into a diagnostic; `line_offset` maps a single line back into its file."""
	line = getattr(err, "line", None)
	if isinstance(line, int) and line > 0:
		line += line_offset
	else:
		# lark reports EOF errors without a position.
		line = line_offset + 1
	column = getattr(err, "column", None)
	if not isinstance(column, int) or column <= 0:
		column = None
	span = Span(file=file, line=line, column=column, raw=err)
	lines = str(err).strip().splitlines()
	message = lines[0] if lines else "syntax error"
	return Diagnostic(message=message, code="E-SYNTAX", phase="parser", span=span)


__all__ = ["Diagnostic", "syntax_diagnostic"]
