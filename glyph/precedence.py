# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Declarative operator precedence for the Pratt builder.

A table is an ordered list of operator groups, loosest first. Every
operator in a group shares the group's binding power (its 1-based rank) and
associativity. Tables are immutable: `group()` returns a new table, so a
table can be shared by any number of builders.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple


class Assoc(Enum):
	LEFT = "left"
	RIGHT = "right"
	PREFIX = "prefix"


@dataclass(frozen=True)
class Operator:
	label: str   # terminal type emitted by the grammar
	symbol: str  # operator as it appears in UnaryOp/BinaryOp
	assoc: Assoc
	power: int

	@property
	def is_prefix(self) -> bool:
		return self.assoc is Assoc.PREFIX

	def rhs_power(self) -> int:
		"""Threshold for the right operand: right-assoc operators recurse at the same power."""
		if self.assoc is Assoc.LEFT:
			return self.power + 1
		return self.power


@dataclass(frozen=True)
class OperatorGroup:
	assoc: Assoc
	power: int
	operators: Tuple[Operator, ...]


class PrecedenceTable:
	def __init__(self, groups: Tuple[OperatorGroup, ...] = ()) -> None:
		self._groups = tuple(groups)
		infix: Dict[str, Operator] = {}
		prefix: Dict[str, Operator] = {}
		for grp in self._groups:
			for op in grp.operators:
				target = prefix if op.is_prefix else infix
				if op.label in target:
					raise ValueError(f"operator '{op.label}' registered twice")
				target[op.label] = op
		self._infix = infix
		self._prefix = prefix

	def group(self, assoc: Assoc, *operators: Tuple[str, str]) -> "PrecedenceTable":
		"""Return a new table with one more group binding tighter than all existing ones."""
		if not operators:
			raise ValueError("an operator group needs at least one operator")
		power = len(self._groups) + 1
		ops = tuple(Operator(label=lbl, symbol=sym, assoc=assoc, power=power) for lbl, sym in operators)
		return PrecedenceTable(self._groups + (OperatorGroup(assoc=assoc, power=power, operators=ops),))

	def infix(self, label: str) -> Optional[Operator]:
		return self._infix.get(label)

	def prefix(self, label: str) -> Optional[Operator]:
		return self._prefix.get(label)

	@property
	def groups(self) -> Tuple[OperatorGroup, ...]:
		return self._groups

	def __iter__(self) -> Iterator[Operator]:
		for grp in self._groups:
			yield from grp.operators

	def __repr__(self) -> str:
		parts = []
		for grp in self._groups:
			labels = " | ".join(op.label for op in grp.operators)
			parts.append(f"{grp.power}:{grp.assoc.value}({labels})")
		return f"PrecedenceTable({', '.join(parts)})"


# Precedence is defined lowest to highest.
CALCULATOR_TABLE = (
	PrecedenceTable()
	.group(Assoc.LEFT, ("ADD", "+"), ("SUBTRACT", "-"))
	.group(Assoc.LEFT, ("MULTIPLY", "*"), ("DIVIDE", "/"), ("MODULO", "%"))
	.group(Assoc.RIGHT, ("POWER", "^"))
	.group(Assoc.PREFIX, ("NEG", "-"))
)


__all__ = ["Assoc", "Operator", "OperatorGroup", "PrecedenceTable", "CALCULATOR_TABLE"]
