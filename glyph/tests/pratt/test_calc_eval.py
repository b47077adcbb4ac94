# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest
from lark.exceptions import UnexpectedInput

from glyph.calc import calculate, evaluate, format_number, parse_expression
from glyph.errors import EvaluationError


@pytest.mark.parametrize(
	"source, expected",
	[
		("1 + 2 * 3", 7),
		("(1 + 2) * 3", 9),
		("2 ^ 3 ^ 2", 512),
		("10 - 4 - 3", 3),
		("7 / 2", 3.5),
		("7 % 4", 3),
		("-2 ^ 2", 4),
		("2 ^ -1", 0.5),
		("1_000 * 1.5", 1500.0),
		("--5", 5),
	],
)
def test_calculate(source: str, expected: float) -> None:
	assert calculate(source) == expected


def test_identifiers_resolve_from_variables() -> None:
	assert calculate("x * 2 + y", {"x": 4, "y": 0.5}) == 8.5


def test_unknown_identifier_is_an_evaluation_error() -> None:
	with pytest.raises(EvaluationError, match="unknown identifier 'y'"):
		calculate("1 + y")


@pytest.mark.parametrize("source", ["1 / 0", "1 % 0", "0 ^ -1"])
def test_division_by_zero_is_an_evaluation_error(source: str) -> None:
	with pytest.raises(EvaluationError) as excinfo:
		calculate(source)
	assert excinfo.value.code == "E-EVAL"


def test_fractional_power_of_negative_number_is_rejected() -> None:
	with pytest.raises(EvaluationError, match="no real value"):
		calculate("(0 - 8) ^ 0.5")


def test_syntax_errors_come_from_the_recognizer() -> None:
	with pytest.raises(UnexpectedInput):
		parse_expression("1 +")
	with pytest.raises(UnexpectedInput):
		parse_expression("1 $ 2")


def test_evaluate_is_pure() -> None:
	expr = parse_expression("3 * (4 + 5)")
	assert evaluate(expr) == evaluate(expr) == 27


@pytest.mark.parametrize("value, text", [(7, "7"), (7.0, "7"), (3.5, "3.5"), (-0.25, "-0.25")])
def test_format_number(value: float, text: str) -> None:
	assert format_number(value) == text
