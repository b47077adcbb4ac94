# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Verb/adverb compiler for the J-like array language.

A statement arrives from the grammar as one of:

	assignment  IDENT "=:" expr
	monadic     action expr
	dyadic      terms action expr
	string      STRING
	terms       term+

where `action` is a verb glyph followed by zero or more adverbs. The verb
glyph set accepted by the grammar is wider than the tables below; meaning
is decided here, so unmapped glyphs and bad adverb combinations fail with
`UnknownVerb` / `UnsupportedAdverb`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from lark import Token, Tree

from . import ast
from . import literals
from . import tokens
from .ast import DyadicVerb, MonadicVerb
from .errors import NestingTooDeep, UnexpectedToken, UnknownVerb, UnsupportedAdverb
from .span import Span

REDUCE_ADVERB = "/"
STRING_DELIMITER = "'"


@dataclass(frozen=True)
class MonadicRule:
	"""
	Meaning of a glyph used with one operand: bare, and/or under an adverb.

	`reduce_adverb` is the adverb a reduction must be spelled with; `None`
	lets any single adverb select the reduction.
	"""

	plain: Optional[MonadicVerb] = None
	reduce: Optional[DyadicVerb] = None
	reduce_adverb: Optional[str] = REDUCE_ADVERB


MONADIC_VERBS: Dict[str, MonadicRule] = {
	">:": MonadicRule(plain=MonadicVerb.INCREMENT),
	"*:": MonadicRule(plain=MonadicVerb.SQUARE),
	"-": MonadicRule(plain=MonadicVerb.NEGATE, reduce=DyadicVerb.MINUS, reduce_adverb=None),
	"%": MonadicRule(plain=MonadicVerb.RECIPROCAL),
	"#": MonadicRule(plain=MonadicVerb.TALLY),
	">.": MonadicRule(plain=MonadicVerb.CEILING, reduce=DyadicVerb.LARGER_OF, reduce_adverb=None),
	"+": MonadicRule(reduce=DyadicVerb.PLUS),
	"*": MonadicRule(reduce=DyadicVerb.TIMES),
	"$": MonadicRule(plain=MonadicVerb.SHAPE_OF),
}

DYADIC_VERBS: Dict[str, DyadicVerb] = {
	"+": DyadicVerb.PLUS,
	"*": DyadicVerb.TIMES,
	"-": DyadicVerb.MINUS,
	"<": DyadicVerb.LESS_THAN,
	"=": DyadicVerb.EQUAL,
	">": DyadicVerb.LARGER_THAN,
	"%": DyadicVerb.DIVIDE,
	"^": DyadicVerb.POWER,
	"|": DyadicVerb.RESIDUE,
	"#": DyadicVerb.COPY,
	">.": DyadicVerb.LARGER_OF,
	">:": DyadicVerb.LARGER_OR_EQUAL,
	"$": DyadicVerb.SHAPE,
}


def _span(sym: str) -> Span:
	if isinstance(sym, Token):
		return tokens.span(sym)
	return Span()


def _loc(sym: str) -> Optional[ast.Located]:
	if isinstance(sym, Token):
		return tokens.loc(sym)
	return None


def compile_monadic(verb: str, adverbs: Sequence[str], operand: ast.Expr) -> ast.Expr:
	"""
	Apply `verb` (plus its adverbs) to a single operand.

	`verb` and `adverbs` are VERB/ADVERB tokens, or plain strings when the
	caller has no token tree at hand.
	"""
	symbol = str(verb)
	rule = MONADIC_VERBS.get(symbol)
	if rule is None:
		raise UnknownVerb(f"unknown monadic verb '{symbol}'", span=_span(verb))
	if not adverbs:
		if rule.plain is None:
			raise UnsupportedAdverb(
				f"monadic '{symbol}' requires the '{REDUCE_ADVERB}' adverb",
				span=_span(verb),
			)
		return ast.MonadicVerbOp(verb=rule.plain, operand=operand, loc=_loc(verb))
	if len(adverbs) == 1 and rule.reduce is not None:
		adverb = adverbs[0]
		if rule.reduce_adverb is not None and str(adverb) != rule.reduce_adverb:
			raise UnsupportedAdverb(
				f"unsupported adverb '{adverb}' for monadic '{symbol}'",
				span=_span(adverb),
			)
		return ast.ReduceOp(verb=rule.reduce, operand=operand, loc=_loc(verb))
	raise UnsupportedAdverb(
		f"unsupported number of adverbs for monadic '{symbol}': {len(adverbs)}",
		span=_span(adverbs[0]),
	)


def compile_dyadic(verb: str, adverbs: Sequence[str], left: ast.Expr, right: ast.Expr) -> ast.Expr:
	symbol = str(verb)
	if adverbs:
		raise UnsupportedAdverb(
			f"adverbs are not supported on dyadic verbs ('{symbol}{''.join(str(a) for a in adverbs)}')",
			span=_span(adverbs[0]),
		)
	kind = DYADIC_VERBS.get(symbol)
	if kind is None:
		raise UnknownVerb(f"unknown dyadic verb '{symbol}'", span=_span(verb))
	return ast.DyadicVerbOp(verb=kind, left=left, right=right, loc=_loc(verb))


def compile_verb(verb: str, adverbs: Sequence[str], operands: Sequence[ast.Expr]) -> ast.Expr:
	"""Dispatch on arity: one operand is monadic, two are dyadic."""
	if len(operands) == 1:
		return compile_monadic(verb, adverbs, operands[0])
	if len(operands) == 2:
		return compile_dyadic(verb, adverbs, operands[0], operands[1])
	raise ValueError(f"verbs take one or two operands, got {len(operands)}")


def fold_terms(items: Sequence[ast.Expr], loc: Optional[ast.Located] = None) -> ast.Expr:
	"""A single term stands for itself; several become a Sequence."""
	if not items:
		raise ValueError("a term list needs at least one term")
	if len(items) == 1:
		return items[0]
	return ast.Sequence(items=tuple(items), loc=loc)


def compile_assignment(ident: str, value: ast.Expr) -> ast.Assignment:
	return ast.Assignment(name=str(ident), value=value, loc=_loc(ident))


def unescape_string(raw: str) -> str:
	"""Strip the delimiters and collapse doubled delimiters (`''` -> `'`)."""
	body = raw[1:-1]
	return body.replace(STRING_DELIMITER * 2, STRING_DELIMITER)


class VerbCompiler:
	"""Walks J statement trees produced by `grammars/j.lark`."""

	def __init__(self, *, max_depth: int | None = None) -> None:
		if max_depth is not None and max_depth < 1:
			raise ValueError("max_depth must be a positive integer")
		self.max_depth = max_depth

	def compile_statement(self, tree: Tree) -> ast.Expr:
		return self._expr(tree, depth=1)

	def compile_program(self, tree: Tree) -> List[ast.Expr]:
		if tokens.label(tree) != "program":
			raise UnexpectedToken(f"expected a program, got {tokens.label(tree)}", span=tokens.span(tree))
		return [self.compile_statement(child) for child in tree.children if isinstance(child, Tree)]

	def _expr(self, node: Tree | Token, depth: int) -> ast.Expr:
		if self.max_depth is not None and depth > self.max_depth:
			raise NestingTooDeep(f"expression nesting exceeds max_depth={self.max_depth}", span=tokens.span(node))
		if not isinstance(node, Tree):
			raise UnexpectedToken(
				f"unexpected {tokens.label(node)} '{tokens.text(node)}' where an expression was expected",
				span=tokens.span(node),
			)
		kind = tokens.label(node)
		if kind == "monadic":
			action, operand = node.children
			verb, adverbs = self._action(action)
			return compile_monadic(verb, adverbs, self._expr(operand, depth + 1))
		if kind == "dyadic":
			lhs, action, rhs = node.children
			verb, adverbs = self._action(action)
			left = self._expr(lhs, depth + 1)
			right = self._expr(rhs, depth + 1)
			return compile_dyadic(verb, adverbs, left, right)
		if kind == "terms":
			items = [self._term(child, depth + 1) for child in node.children]
			return fold_terms(items, loc=tokens.loc(node))
		if kind == "assignment":
			ident, value = node.children
			return compile_assignment(ident, self._expr(value, depth + 1))
		if kind == "string":
			tok = node.children[0]
			return ast.StringLiteral(value=unescape_string(tok.value), loc=tokens.loc(tok))
		raise UnexpectedToken(f"unexpected expression: {kind}", span=tokens.span(node))

	def _term(self, node: Tree | Token, depth: int) -> ast.Expr:
		if isinstance(node, Tree):
			return self._expr(node, depth)
		kind = tokens.label(node)
		if literals.is_literal(kind):
			return literals.literal_node(node)
		if kind == "IDENT":
			return ast.Identifier(name=node.value, loc=tokens.loc(node))
		raise UnexpectedToken(f"unexpected term: {kind} '{node.value}'", span=tokens.span(node))

	def _action(self, node: Tree | Token) -> tuple[Token, List[Token]]:
		if not isinstance(node, Tree) or tokens.label(node) != "action":
			raise UnexpectedToken(f"expected a verb, got {tokens.label(node)}", span=tokens.span(node))
		verb, *adverbs = node.children
		return verb, adverbs


def compile_statement(tree: Tree) -> ast.Expr:
	return VerbCompiler().compile_statement(tree)


__all__ = [
	"REDUCE_ADVERB",
	"MONADIC_VERBS",
	"DYADIC_VERBS",
	"MonadicRule",
	"compile_monadic",
	"compile_dyadic",
	"compile_verb",
	"fold_terms",
	"compile_assignment",
	"unescape_string",
	"VerbCompiler",
	"compile_statement",
]
