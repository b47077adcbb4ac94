# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
AST produced by the Pratt builder and the verb/adverb compiler.

Nodes are frozen dataclasses: built bottom-up in one pass over the token
tree and never mutated afterwards. `loc` is carried for diagnostics only and
takes no part in equality, so two compilations of the same text compare
equal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class Located:
	line: int
	column: int
	start: Optional[int] = None
	end: Optional[int] = None


class Expr:
	"""Base class for all AST nodes."""

	loc: Optional[Located]


# Verb kinds

class MonadicVerb(Enum):
	INCREMENT = 1   # >:
	SQUARE = 2      # *:
	NEGATE = 3      # -
	RECIPROCAL = 4  # %
	TALLY = 5       # #
	CEILING = 6     # >.
	SHAPE_OF = 7    # $


class DyadicVerb(Enum):
	PLUS = 1
	TIMES = 2
	LESS_THAN = 3
	LARGER_THAN = 4
	EQUAL = 5
	MINUS = 6
	DIVIDE = 7
	POWER = 8
	RESIDUE = 9
	COPY = 10
	LARGER_OF = 11
	LARGER_OR_EQUAL = 12
	SHAPE = 13


# Leaves

@dataclass(frozen=True)
class IntLiteral(Expr):
	value: int
	loc: Optional[Located] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class FloatLiteral(Expr):
	value: float
	loc: Optional[Located] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Identifier(Expr):
	name: str
	loc: Optional[Located] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class StringLiteral(Expr):
	value: str
	loc: Optional[Located] = field(default=None, compare=False, repr=False)


# Operator-precedence expressions

@dataclass(frozen=True)
class UnaryOp(Expr):
	op: str
	operand: Expr
	loc: Optional[Located] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class BinaryOp(Expr):
	op: str
	left: Expr
	right: Expr
	loc: Optional[Located] = field(default=None, compare=False, repr=False)


# Array-language expressions

@dataclass(frozen=True)
class MonadicVerbOp(Expr):
	verb: MonadicVerb
	operand: Expr
	loc: Optional[Located] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class DyadicVerbOp(Expr):
	verb: DyadicVerb
	left: Expr
	right: Expr
	loc: Optional[Located] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class ReduceOp(Expr):
	"""A dyadic verb folded over the items of a single operand."""

	verb: DyadicVerb
	operand: Expr
	loc: Optional[Located] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Assignment(Expr):
	name: str
	value: Expr
	loc: Optional[Located] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Sequence(Expr):
	items: Tuple[Expr, ...]
	loc: Optional[Located] = field(default=None, compare=False, repr=False)


__all__ = [
	"Located",
	"Expr",
	"MonadicVerb",
	"DyadicVerb",
	"IntLiteral",
	"FloatLiteral",
	"Identifier",
	"StringLiteral",
	"UnaryOp",
	"BinaryOp",
	"MonadicVerbOp",
	"DyadicVerbOp",
	"ReduceOp",
	"Assignment",
	"Sequence",
]
