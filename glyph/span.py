# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Source spans used by diagnostics and compile errors.

A Span wraps whatever location object lark hands us (a `Token` or a tree's
`Meta`) and keeps best-effort file/line/column/offset data next to it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Span:
	"""Represents a source span (best-effort file/line/column plus raw parser loc)."""

	file: Optional[str] = None
	line: Optional[int] = None
	column: Optional[int] = None
	start: Optional[int] = None
	end: Optional[int] = None
	raw: Any = None

	@classmethod
	def from_loc(cls, loc: Any, *, file: Optional[str] = None) -> "Span":
		"""
		Construct a Span from a lark `Token`, a tree `Meta`, or another Span.

		Trees built without children carry an empty Meta; those yield a Span
		with no position instead of raising.
		"""
		if loc is None:
			return cls(file=file)
		if isinstance(loc, cls):
			return loc
		if getattr(loc, "empty", False):
			return cls(file=file, raw=loc)
		return cls(
			file=file or getattr(loc, "file", None),
			line=getattr(loc, "line", None),
			column=getattr(loc, "column", None),
			start=getattr(loc, "start_pos", None),
			end=getattr(loc, "end_pos", None),
			raw=loc,
		)

	def with_file(self, file: Optional[str]) -> "Span":
		return Span(
			file=file,
			line=self.line,
			column=self.column,
			start=self.start,
			end=self.end,
			raw=self.raw,
		)

	def shifted(self, line_offset: int) -> "Span":
		"""Move a span computed for one line of a file to its place in the file."""
		if self.line is None:
			return Span(file=self.file, line=line_offset + 1, raw=self.raw)
		return Span(
			file=self.file,
			line=self.line + line_offset,
			column=self.column,
			start=self.start,
			end=self.end,
			raw=self.raw,
		)

	def describe(self) -> str:
		"""`file:line:column` with `?` for unknown parts."""
		line = self.line if self.line is not None else "?"
		column = self.column if self.column is not None else "?"
		prefix = f"{self.file}:" if self.file else ""
		return f"{prefix}{line}:{column}"


__all__ = ["Span"]
