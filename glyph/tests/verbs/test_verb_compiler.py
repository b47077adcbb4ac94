# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest
from lark import Token

from glyph.ast import (
	Assignment,
	DyadicVerb,
	DyadicVerbOp,
	Identifier,
	IntLiteral,
	MonadicVerb,
	MonadicVerbOp,
	ReduceOp,
	Sequence,
)
from glyph.errors import UnknownVerb, UnsupportedAdverb
from glyph.verbs import (
	compile_assignment,
	compile_dyadic,
	compile_monadic,
	compile_verb,
	fold_terms,
	unescape_string,
)

ONE = IntLiteral(1)
TWO = IntLiteral(2)
ITEMS = Sequence((IntLiteral(1), IntLiteral(2), IntLiteral(3)))


@pytest.mark.parametrize(
	"symbol, kind",
	[
		(">:", MonadicVerb.INCREMENT),
		("*:", MonadicVerb.SQUARE),
		("-", MonadicVerb.NEGATE),
		("%", MonadicVerb.RECIPROCAL),
		("#", MonadicVerb.TALLY),
		(">.", MonadicVerb.CEILING),
		("$", MonadicVerb.SHAPE_OF),
	],
)
def test_monadic_verbs_without_adverbs(symbol: str, kind: MonadicVerb) -> None:
	assert compile_monadic(symbol, [], ONE) == MonadicVerbOp(kind, ONE)


@pytest.mark.parametrize(
	"symbol, kind",
	[
		("-", DyadicVerb.MINUS),
		(">.", DyadicVerb.LARGER_OF),
		("+", DyadicVerb.PLUS),
		("*", DyadicVerb.TIMES),
	],
)
def test_reduce_adverb_selects_reduction(symbol: str, kind: DyadicVerb) -> None:
	assert compile_monadic(symbol, ["/"], ITEMS) == ReduceOp(kind, ITEMS)


def test_minus_adverb_count() -> None:
	assert compile_monadic("-", [], ONE) == MonadicVerbOp(MonadicVerb.NEGATE, ONE)
	assert compile_monadic("-", ["/"], ITEMS) == ReduceOp(DyadicVerb.MINUS, ITEMS)
	with pytest.raises(UnsupportedAdverb, match="number of adverbs"):
		compile_monadic("-", ["/", "/"], ITEMS)


@pytest.mark.parametrize(
	"symbol, kind",
	[("-", DyadicVerb.MINUS), (">.", DyadicVerb.LARGER_OF)],
)
@pytest.mark.parametrize("adverb", ["/", "\\", "~"])
def test_minus_and_larger_of_reduce_under_any_single_adverb(symbol: str, kind: DyadicVerb, adverb: str) -> None:
	assert compile_monadic(symbol, [adverb], ITEMS) == ReduceOp(kind, ITEMS)


@pytest.mark.parametrize("symbol", ["+", "*"])
def test_plus_and_times_require_the_reduce_adverb(symbol: str) -> None:
	with pytest.raises(UnsupportedAdverb):
		compile_monadic(symbol, [], ITEMS)
	with pytest.raises(UnsupportedAdverb):
		compile_monadic(symbol, ["\\"], ITEMS)
	with pytest.raises(UnsupportedAdverb):
		compile_monadic(symbol, ["/", "/"], ITEMS)


@pytest.mark.parametrize("symbol", [">:", "*:", "%", "#", "$"])
def test_plain_only_verbs_reject_any_adverb(symbol: str) -> None:
	with pytest.raises(UnsupportedAdverb):
		compile_monadic(symbol, ["/"], ITEMS)


@pytest.mark.parametrize("symbol", ["&", "<", "=", "^", "|", "+:", "-."])
def test_unmapped_monadic_symbols_are_unknown(symbol: str) -> None:
	with pytest.raises(UnknownVerb):
		compile_monadic(symbol, [], ONE)


@pytest.mark.parametrize(
	"symbol, kind",
	[
		("+", DyadicVerb.PLUS),
		("*", DyadicVerb.TIMES),
		("-", DyadicVerb.MINUS),
		("<", DyadicVerb.LESS_THAN),
		("=", DyadicVerb.EQUAL),
		(">", DyadicVerb.LARGER_THAN),
		("%", DyadicVerb.DIVIDE),
		("^", DyadicVerb.POWER),
		("|", DyadicVerb.RESIDUE),
		("#", DyadicVerb.COPY),
		(">.", DyadicVerb.LARGER_OF),
		(">:", DyadicVerb.LARGER_OR_EQUAL),
		("$", DyadicVerb.SHAPE),
	],
)
def test_dyadic_table(symbol: str, kind: DyadicVerb) -> None:
	assert compile_dyadic(symbol, [], ONE, TWO) == DyadicVerbOp(kind, ONE, TWO)


@pytest.mark.parametrize("symbol", ["+", "-", ">.", "&"])
def test_dyadic_verbs_reject_adverbs(symbol: str) -> None:
	with pytest.raises(UnsupportedAdverb):
		compile_dyadic(symbol, ["/"], ONE, TWO)


@pytest.mark.parametrize("symbol", ["&", "*:", "!", "+."])
def test_unmapped_dyadic_symbols_are_unknown(symbol: str) -> None:
	with pytest.raises(UnknownVerb):
		compile_dyadic(symbol, [], ONE, TWO)


def test_compile_verb_dispatches_on_arity() -> None:
	assert compile_verb("-", [], [ONE]) == MonadicVerbOp(MonadicVerb.NEGATE, ONE)
	assert compile_verb("-", [], [ONE, TWO]) == DyadicVerbOp(DyadicVerb.MINUS, ONE, TWO)
	with pytest.raises(ValueError):
		compile_verb("-", [], [])


def test_errors_point_at_verb_and_adverb_tokens() -> None:
	verb = Token("VERB", "&", start_pos=2, line=1, column=3)
	with pytest.raises(UnknownVerb) as excinfo:
		compile_dyadic(verb, [], ONE, TWO)
	assert excinfo.value.span.column == 3

	adverb = Token("ADVERB", "\\", start_pos=1, line=1, column=2)
	with pytest.raises(UnsupportedAdverb) as excinfo:
		compile_monadic(Token("VERB", "+", start_pos=0, line=1, column=1), [adverb], ITEMS)
	assert excinfo.value.span.column == 2


def test_fold_terms_elides_singleton() -> None:
	assert fold_terms([ONE]) is ONE
	assert fold_terms([ONE, TWO]) == Sequence((ONE, TWO))
	with pytest.raises(ValueError):
		fold_terms([])


def test_compile_assignment() -> None:
	assert compile_assignment("x", ITEMS) == Assignment("x", ITEMS)
	assert compile_assignment(Token("IDENT", "y"), Identifier("x")) == Assignment("y", Identifier("x"))


@pytest.mark.parametrize(
	"raw, expected",
	[
		("'a''b'", "a'b"),
		("''", ""),
		("''''", "'"),
		("'it''s ''quoted'''", "it's 'quoted'"),
		("'plain'", "plain"),
	],
)
def test_unescape_string(raw: str, expected: str) -> None:
	assert unescape_string(raw) == expected
