# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Accessors for lark token trees.

Both builders see the recognizer's output through these helpers: a node is
either a `Tree` (label = rule name) or a `Token` (label = terminal type).
"""

from __future__ import annotations

from typing import Optional

from lark import Token, Tree

from .ast import Located
from .span import Span


def label(node: Tree | Token) -> str:
	if isinstance(node, Tree):
		data = node.data
		if isinstance(data, Token):
			return data.value
		return data
	if isinstance(node, Token):
		return node.type
	return str(node)


def text(node: Tree | Token) -> str:
	"""Source text of a token, or the concatenated token text of a tree."""
	if isinstance(node, Token):
		return node.value
	return "".join(tok.value for tok in node.scan_values(lambda v: isinstance(v, Token)))


def span(node: Tree | Token | None) -> Span:
	if node is None:
		return Span()
	if isinstance(node, Tree):
		return Span.from_loc(node.meta)
	return Span.from_loc(node)


def loc(node: Tree | Token) -> Optional[Located]:
	if isinstance(node, Tree):
		meta = node.meta
		if meta.empty:
			return None
		return Located(line=meta.line, column=meta.column, start=meta.start_pos, end=meta.end_pos)
	line = getattr(node, "line", None)
	if line is None:
		return None
	return Located(line=line, column=node.column, start=node.start_pos, end=node.end_pos)


__all__ = ["label", "text", "span", "loc"]
