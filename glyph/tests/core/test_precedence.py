# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from glyph.precedence import CALCULATOR_TABLE, Assoc, PrecedenceTable


def test_calculator_table_orders_groups_loosest_first() -> None:
	powers = {op.label: op.power for op in CALCULATOR_TABLE}
	assert powers["ADD"] == powers["SUBTRACT"]
	assert powers["MULTIPLY"] == powers["DIVIDE"] == powers["MODULO"]
	assert powers["ADD"] < powers["MULTIPLY"] < powers["POWER"] < powers["NEG"]


def test_prefix_and_infix_lookups_are_separate() -> None:
	assert CALCULATOR_TABLE.infix("NEG") is None
	assert CALCULATOR_TABLE.prefix("SUBTRACT") is None
	neg = CALCULATOR_TABLE.prefix("NEG")
	sub = CALCULATOR_TABLE.infix("SUBTRACT")
	assert neg is not None and neg.symbol == "-" and neg.assoc is Assoc.PREFIX
	assert sub is not None and sub.symbol == "-" and sub.assoc is Assoc.LEFT


def test_right_operand_threshold_depends_on_associativity() -> None:
	add = CALCULATOR_TABLE.infix("ADD")
	power = CALCULATOR_TABLE.infix("POWER")
	assert add is not None and power is not None
	assert add.rhs_power() == add.power + 1
	assert power.rhs_power() == power.power


def test_group_returns_a_new_table() -> None:
	base = PrecedenceTable().group(Assoc.LEFT, ("ADD", "+"))
	extended = base.group(Assoc.RIGHT, ("POWER", "^"))
	assert base.infix("POWER") is None
	assert extended.infix("POWER").power == 2
	assert len(base.groups) == 1


def test_duplicate_operator_is_rejected() -> None:
	with pytest.raises(ValueError, match="registered twice"):
		PrecedenceTable().group(Assoc.LEFT, ("ADD", "+")).group(Assoc.LEFT, ("ADD", "plus"))


def test_empty_group_is_rejected() -> None:
	with pytest.raises(ValueError):
		PrecedenceTable().group(Assoc.LEFT)
