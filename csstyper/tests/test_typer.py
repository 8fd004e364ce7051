# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Unit tests for the typer fold over entity sequences."""

from __future__ import annotations

import pytest

from csstyper.syntax.ast import (
	Combinator,
	CombinatorKind,
	DataType,
	Function,
	Group,
	Keyword,
	MultiplierSign,
	RangeMultiplier,
	SignMultiplier,
)
from csstyper.typer import js_number_to_string, numeric_keyword, type_entities, type_syntax
from csstyper.types import (
	LENGTH,
	NUMBER,
	STRING,
	BasicType,
	DataTypeReference,
	NumericLiteral,
	StringLiteral,
)

JUXT = Combinator(CombinatorKind.JUXTAPOSITION)
AND = Combinator(CombinatorKind.DOUBLE_AMPERSAND)
OR = Combinator(CombinatorKind.DOUBLE_BAR)
BAR = Combinator(CombinatorKind.SINGLE_BAR)


def _sign(sign: MultiplierSign) -> SignMultiplier:
	return SignMultiplier(sign)


def test_keyword_becomes_string_literal(small_catalog):
	assert type_entities([Keyword("auto")], small_catalog) == [StringLiteral("auto")]


def test_numeric_keyword_becomes_numeric_literal(small_catalog):
	assert type_entities([Keyword("0")], small_catalog) == [NumericLiteral(0)]


def test_basic_data_type_maps_to_catalog_entry(small_catalog):
	assert type_entities([DataType("<length>")], small_catalog) == [LENGTH]
	assert type_entities([DataType("<integer>")], small_catalog) == [NUMBER]
	assert type_entities([DataType("<percentage>")], small_catalog) == [STRING]


def test_composite_data_type_stays_a_reference(catalog):
	assert type_entities([DataType("<color>")], catalog) == [DataTypeReference("color")]


def test_unknown_data_type_stays_a_reference(small_catalog):
	assert type_entities([DataType("<line-style>")], small_catalog) == [DataTypeReference("line-style")]


def test_property_reference_collapses_to_string(small_catalog):
	assert type_entities([DataType("<'custom-ident'>")], small_catalog) == [STRING]


def test_double_bar_adds_string_between_literals(small_catalog):
	entities = [Keyword("auto"), OR, Keyword("none")]
	assert type_entities(entities, small_catalog) == [
		StringLiteral("auto"),
		STRING,
		StringLiteral("none"),
	]


def test_single_bar_adds_nothing(small_catalog):
	entities = [DataType("<length>"), BAR, Keyword("auto")]
	assert type_entities(entities, small_catalog) == [LENGTH, StringLiteral("auto")]


def test_repeated_group_adds_string_before_its_members(small_catalog):
	group = Group((Keyword("a"),), _sign(MultiplierSign.ASTERISK))
	assert type_entities([group], small_catalog) == [STRING, StringLiteral("a")]


@pytest.mark.parametrize(
	"multiplier",
	[
		_sign(MultiplierSign.ASTERISK),
		_sign(MultiplierSign.PLUS_SIGN),
		_sign(MultiplierSign.HASH_MARK),
		_sign(MultiplierSign.EXCLAMATION_POINT),
		RangeMultiplier(2, 2),
		RangeMultiplier(2, None),
		RangeMultiplier(1, 1),
		RangeMultiplier(0, 1),
	],
)
def test_group_multipliers_that_collapse(small_catalog, multiplier):
	group = Group((Keyword("a"), BAR, Keyword("b")), multiplier)
	assert type_entities([group], small_catalog)[0] == STRING


@pytest.mark.parametrize(
	"multiplier",
	[
		None,
		_sign(MultiplierSign.QUESTION_MARK),
		RangeMultiplier(1, 2),
		RangeMultiplier(0, None),
	],
)
def test_group_multipliers_that_keep_members(small_catalog, multiplier):
	group = Group((Keyword("a"), BAR, Keyword("b")), multiplier)
	assert type_entities([group], small_catalog) == [StringLiteral("a"), StringLiteral("b")]


def test_function_collapses_to_string(small_catalog):
	entities = [Function("fit-content", (DataType("<length>"),)), BAR, Keyword("auto")]
	assert type_entities(entities, small_catalog) == [STRING, StringLiteral("auto")]


def test_juxtaposed_required_terms_collapse(small_catalog):
	entities = [Keyword("a"), JUXT, Keyword("b")]
	assert type_entities(entities, small_catalog) == [STRING]


def test_double_ampersand_required_terms_collapse(small_catalog):
	entities = [DataType("<length>"), AND, Keyword("b")]
	assert type_entities(entities, small_catalog) == [STRING]


def test_term_before_optional_neighbour_is_typed(small_catalog):
	# Only the left-hand side looks at the right-hand multiplier; the optional
	# term itself is dropped because its left neighbour is required.
	entities = [Keyword("a"), JUXT, Keyword("b", _sign(MultiplierSign.QUESTION_MARK))]
	assert type_entities(entities, small_catalog) == [StringLiteral("a"), STRING]


def test_term_after_optional_neighbour_is_typed(small_catalog):
	entities = [Keyword("a", _sign(MultiplierSign.ASTERISK)), AND, Keyword("b")]
	assert type_entities(entities, small_catalog) == [STRING, StringLiteral("b")]


def test_positive_minimum_range_counts_as_optional(small_catalog):
	# inset? && <length>{2,4} && <color>?
	entities = [
		Keyword("inset", _sign(MultiplierSign.QUESTION_MARK)),
		AND,
		DataType("<length>", RangeMultiplier(2, 4)),
		AND,
		DataType("<color>", _sign(MultiplierSign.QUESTION_MARK)),
	]
	assert type_entities(entities, small_catalog) == [
		StringLiteral("inset"),
		STRING,
		LENGTH,
		DataTypeReference("color"),
	]


def test_zero_minimum_range_is_not_optional(small_catalog):
	entities = [Keyword("a"), JUXT, Keyword("b", RangeMultiplier(0, 3))]
	assert type_entities(entities, small_catalog) == [STRING]


def test_function_neighbour_is_never_optional(small_catalog):
	entities = [Function("calc"), JUXT, Keyword("a")]
	assert type_entities(entities, small_catalog) == [STRING]


def test_duplicates_are_dropped(small_catalog):
	entities = [
		Keyword("a"),
		BAR,
		Keyword("0"),
		BAR,
		DataType("<length>"),
		BAR,
		DataType("<color>"),
		BAR,
		Keyword("a"),
		BAR,
		Keyword("0"),
		BAR,
		DataType("<length>"),
		BAR,
		DataType("<color>"),
	]
	assert type_entities(entities, small_catalog) == [
		StringLiteral("a"),
		NumericLiteral(0),
		LENGTH,
		DataTypeReference("color"),
	]


def test_nested_group_merges_in_place(small_catalog):
	inner = Group((Keyword("b"), BAR, Keyword("a"), BAR, DataType("<number>")))
	entities = [Keyword("a"), BAR, inner, BAR, Keyword("c")]
	assert type_entities(entities, small_catalog) == [
		StringLiteral("a"),
		StringLiteral("b"),
		NUMBER,
		StringLiteral("c"),
	]


def test_group_members_dedup_against_outer_sequence(small_catalog):
	entities = [Keyword("1"), BAR, Group((Keyword("1"),), RangeMultiplier(2, 2))]
	assert type_entities(entities, small_catalog) == [NumericLiteral(1), STRING]


def test_empty_sequence_types_to_nothing(small_catalog):
	assert type_entities([], small_catalog) == []


def test_non_entity_is_rejected(small_catalog):
	with pytest.raises(TypeError):
		type_entities(["auto"], small_catalog)


def test_default_catalog_is_used_when_none_given():
	assert type_entities([DataType("<length>")]) == [LENGTH]


def test_type_syntax_parses_then_types(catalog):
	assert type_syntax("<length> | auto", catalog) == [LENGTH, StringLiteral("auto")]
	assert type_syntax("auto || none", catalog, group=False) == [
		StringLiteral("auto"),
		STRING,
		StringLiteral("none"),
	]


def test_type_syntax_bundled_examples(catalog):
	assert type_syntax(catalog.syntax("line-width"), catalog) == [
		LENGTH,
		StringLiteral("thin"),
		StringLiteral("medium"),
		StringLiteral("thick"),
	]
	assert type_syntax(catalog.syntax("bg-size"), catalog) == [
		DataTypeReference("length-percentage"),
		StringLiteral("auto"),
		StringLiteral("cover"),
		StringLiteral("contain"),
	]
	assert type_syntax(catalog.syntax("shadow"), catalog) == [
		StringLiteral("inset"),
		STRING,
		LENGTH,
		DataTypeReference("color"),
	]


def test_stacked_list_multipliers(small_catalog):
	assert type_syntax("<custom-ident>+#", small_catalog) == [DataTypeReference("custom-ident")]
	assert type_syntax("[ <length> ]{1,4}#", small_catalog) == [STRING, LENGTH]


def test_bundled_color_keyword_lists_are_complete(catalog):
	named = type_syntax(catalog.syntax("named-color"), catalog)
	assert len(named) == 149
	assert all(isinstance(ty, StringLiteral) for ty in named)
	assert StringLiteral("rebeccapurple") in named
	assert StringLiteral("yellowgreen") in named
	assert StringLiteral("transparent") in named

	system = type_syntax(catalog.syntax("deprecated-system-color"), catalog)
	assert len(system) == 28
	assert StringLiteral("WindowText") in system


def _dedup(types):
	out = []
	for ty in types:
		if ty not in out:
			out.append(ty)
	return out


def test_bundled_syntaxes_keep_output_invariants(catalog):
	for name in catalog.syntaxes:
		types = type_syntax(catalog.syntax(name), catalog)
		assert _dedup(types + types) == types, name
		basics = [ty for ty in types if isinstance(ty, BasicType)]
		assert len(basics) == len(set(basics)), name
		literals = [ty.literal for ty in types if isinstance(ty, StringLiteral)]
		assert len(literals) == len(set(literals)), name
		numbers = [ty.literal for ty in types if isinstance(ty, NumericLiteral)]
		assert len(numbers) == len(set(numbers)), name
		names = [ty.name for ty in types if isinstance(ty, DataTypeReference)]
		assert len(names) == len(set(names)), name


def test_repeat_run_is_stable(catalog):
	text = catalog.syntax("position")
	assert type_syntax(text, catalog) == type_syntax(text, catalog)


@pytest.mark.parametrize(
	"text,expected",
	[
		("0", 0),
		("-1", -1),
		("1.5", 1.5),
		("0.000001", 0.000001),
		("1e-7", 1e-7),
		("1e+21", 1e21),
		("100", 100),
	],
)
def test_numeric_keyword_accepts_canonical_numbers(text, expected):
	assert numeric_keyword(text) == expected


@pytest.mark.parametrize("text", ["01", "1.0", "+1", ".5", "5.", "1e3", "-0", "auto", "NaN", "Infinity", "1e999", ""])
def test_numeric_keyword_rejects_non_canonical_text(text):
	assert numeric_keyword(text) is None


def test_numeric_keyword_returns_int_for_integral_values():
	assert isinstance(numeric_keyword("42"), int)
	assert isinstance(numeric_keyword("4.2"), float)


@pytest.mark.parametrize(
	"value,text",
	[
		(0.0, "0"),
		(123.456, "123.456"),
		(1e21, "1e+21"),
		(1.5e-7, "1.5e-7"),
		(0.5, "0.5"),
		(-2.0, "-2"),
		(123456789012.0, "123456789012"),
	],
)
def test_js_number_to_string(value, text):
	assert js_number_to_string(value) == text
