# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Precedence-climbing (Pratt) expression builder.

The grammar hands over an expression as a flat run of operand and operator
tokens; nested parenthesized expressions arrive as subtrees. The builder
folds that run into UnaryOp/BinaryOp nodes using a `PrecedenceTable`:

- a prefix operator recurses into its operand at the prefix group's power;
- a primary is a numeric literal, an identifier, or a nested subtree;
- an infix operator is consumed while its power is at least the current
  threshold, and its right operand is built at `power` (right-assoc) or
  `power + 1` (left-assoc).

Construction is all-or-nothing: any token that fits none of those roles
raises `UnexpectedToken` and no partial tree is returned.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from lark import Token, Tree

from . import ast
from . import literals
from . import tokens
from .errors import NestingTooDeep, UnexpectedToken
from .precedence import CALCULATOR_TABLE, PrecedenceTable
from .span import Span

Node = Tree | Token


class _Cursor:
	def __init__(self, nodes: Iterable[Node], enclosing: Span) -> None:
		self._nodes: List[Node] = list(nodes)
		self._pos = 0
		self._last: Optional[Node] = None
		self._enclosing = enclosing

	def peek(self) -> Optional[Node]:
		if self._pos < len(self._nodes):
			return self._nodes[self._pos]
		return None

	def advance(self) -> Optional[Node]:
		node = self.peek()
		if node is not None:
			self._pos += 1
			self._last = node
		return node

	@property
	def exhausted(self) -> bool:
		return self._pos >= len(self._nodes)

	def end_span(self) -> Span:
		if self._last is not None:
			return tokens.span(self._last)
		return self._enclosing


class PrattBuilder:
	def __init__(
		self,
		table: PrecedenceTable = CALCULATOR_TABLE,
		*,
		max_depth: int | None = None,
		nested_labels: Iterable[str] = ("expr",),
		identifier_labels: Iterable[str] = ("IDENT", "NAME"),
	) -> None:
		if max_depth is not None and max_depth < 1:
			raise ValueError("max_depth must be a positive integer")
		self.table = table
		self.max_depth = max_depth
		self._nested_labels = frozenset(nested_labels)
		self._identifier_labels = frozenset(identifier_labels)

	def build(self, tokens_in: Iterable[Node]) -> ast.Expr:
		"""Build one expression from a token run (typically `expr_tree.children`)."""
		return self._build(tokens_in, depth=1, enclosing=Span())

	def build_tree(self, tree: Tree) -> ast.Expr:
		return self._build(tree.children, depth=1, enclosing=tokens.span(tree))

	def _build(self, nodes: Iterable[Node], depth: int, enclosing: Span) -> ast.Expr:
		cursor = _Cursor(nodes, enclosing)
		expr = self._expression(cursor, 0, depth)
		if not cursor.exhausted:
			extra = cursor.peek()
			raise UnexpectedToken(
				f"unexpected {tokens.label(extra)} '{tokens.text(extra)}' after a complete expression",
				span=tokens.span(extra),
			)
		return expr

	def _expression(self, cursor: _Cursor, min_power: int, depth: int) -> ast.Expr:
		self._check_depth(depth, cursor)
		lhs = self._operand(cursor, depth)
		while True:
			node = cursor.peek()
			if node is None:
				break
			op = self.table.infix(tokens.label(node))
			if op is None or op.power < min_power:
				break
			cursor.advance()
			rhs = self._expression(cursor, op.rhs_power(), depth + 1)
			lhs = ast.BinaryOp(op=op.symbol, left=lhs, right=rhs, loc=tokens.loc(node))
		return lhs

	def _operand(self, cursor: _Cursor, depth: int) -> ast.Expr:
		node = cursor.advance()
		if node is None:
			raise UnexpectedToken("unexpected end of expression; expected an operand", span=cursor.end_span())
		op = self.table.prefix(tokens.label(node))
		if op is not None:
			operand = self._expression(cursor, op.power, depth + 1)
			return ast.UnaryOp(op=op.symbol, operand=operand, loc=tokens.loc(node))
		return self._primary(node, depth)

	def _primary(self, node: Node, depth: int) -> ast.Expr:
		kind = tokens.label(node)
		if isinstance(node, Token):
			if literals.is_literal(kind):
				return literals.literal_node(node)
			if kind in self._identifier_labels:
				return ast.Identifier(name=node.value, loc=tokens.loc(node))
		elif kind in self._nested_labels:
			return self._build(node.children, depth + 1, tokens.span(node))
		raise UnexpectedToken(
			f"unexpected {kind} '{tokens.text(node)}' where an operand was expected",
			span=tokens.span(node),
		)

	def _check_depth(self, depth: int, cursor: _Cursor) -> None:
		if self.max_depth is not None and depth > self.max_depth:
			node = cursor.peek()
			where = tokens.span(node) if node is not None else cursor.end_span()
			raise NestingTooDeep(f"expression nesting exceeds max_depth={self.max_depth}", span=where)


def build(tokens_in: Iterable[Node], table: PrecedenceTable = CALCULATOR_TABLE) -> ast.Expr:
	return PrattBuilder(table).build(tokens_in)


__all__ = ["PrattBuilder", "build"]
