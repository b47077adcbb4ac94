# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Numeric literal normalization.

Literal tokens use a leading `_` for negation (so it never clashes with the
`-` verb or operator) and allow `_` as a digit separator anywhere after
that. Text-to-number conversion itself is left to `int()` / `float()`.
"""

from __future__ import annotations

import math
import re

from lark import Token

from . import ast
from . import tokens
from .errors import MalformedLiteral
from .span import Span

NEGATION_SENTINEL = "_"
DIGIT_SEPARATOR = "_"

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

INTEGER_LABELS = frozenset({"INT", "INTEGER"})
FLOAT_LABELS = frozenset({"FLOAT", "DECIMAL"})

_DIGITS_RE = re.compile(r"[0-9]+")
_MANTISSA_RE = re.compile(r"[0-9]+(?:\.[0-9]*)?")
_EXPONENT_RE = re.compile(r"[+-]?[0-9]+")
_EXPONENT_MARKER_RE = re.compile(r"[eE]")


def _split_sign(text: str) -> tuple[int, str]:
	if text.startswith(NEGATION_SENTINEL):
		return -1, text[len(NEGATION_SENTINEL):]
	return 1, text


def _strip_separators(text: str) -> str:
	return text.replace(DIGIT_SEPARATOR, "")


def parse_int(text: str, *, span: Span | None = None) -> int:
	sign, body = _split_sign(text)
	digits = _strip_separators(body)
	if not _DIGITS_RE.fullmatch(digits):
		raise MalformedLiteral(f"malformed integer literal '{text}'", span=span)
	value = sign * int(digits)
	if value < INT64_MIN or value > INT64_MAX:
		raise MalformedLiteral(f"integer literal '{text}' does not fit in 64 bits", span=span)
	return value


def parse_float(text: str, *, span: Span | None = None) -> float:
	sign, body = _split_sign(text)
	parts = _EXPONENT_MARKER_RE.split(body, maxsplit=1)
	mantissa = _strip_separators(parts[0])
	if not _MANTISSA_RE.fullmatch(mantissa):
		raise MalformedLiteral(f"malformed mantissa in float literal '{text}'", span=span)
	literal = mantissa
	if len(parts) == 2:
		exponent = _strip_separators(parts[1])
		if not _EXPONENT_RE.fullmatch(exponent):
			raise MalformedLiteral(f"malformed exponent in float literal '{text}'", span=span)
		literal = f"{mantissa}e{exponent}"
	value = float(literal)
	if not math.isfinite(value):
		raise MalformedLiteral(f"float literal '{text}' is out of range", span=span)
	# Only nonzero magnitudes take the sign; `_0.0` stays positive zero.
	if value != 0.0:
		value *= sign
	return value


def is_literal(label: str) -> bool:
	return label in INTEGER_LABELS or label in FLOAT_LABELS


def literal_node(token: Token) -> ast.Expr:
	"""Build an `IntLiteral` / `FloatLiteral` from an integer or float terminal."""
	kind = tokens.label(token)
	where = tokens.span(token)
	if kind in INTEGER_LABELS:
		return ast.IntLiteral(value=parse_int(token.value, span=where), loc=tokens.loc(token))
	if kind in FLOAT_LABELS:
		return ast.FloatLiteral(value=parse_float(token.value, span=where), loc=tokens.loc(token))
	raise MalformedLiteral(f"token {kind} is not a numeric literal", span=where)


__all__ = [
	"NEGATION_SENTINEL",
	"DIGIT_SEPARATOR",
	"INTEGER_LABELS",
	"FLOAT_LABELS",
	"parse_int",
	"parse_float",
	"is_literal",
	"literal_node",
]
