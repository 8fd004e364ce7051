# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Typer: CSS value-definition entities to value-type descriptors.

`type_entities` folds one entity sequence into an ordered, deduplicated list
of descriptors. Whatever cannot be modelled exactly (function calls, custom
idents, multi-term combinations, repeated groups) collapses to the generic
STRING descriptor, so the fold never fails on a well-formed tree.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Sequence, Set, Union

from .catalog import Catalog, default_catalog
from .syntax.ast import (
	COMPONENT_TYPES,
	Combinator,
	CombinatorKind,
	DataType,
	Entity,
	Function,
	Group,
	Keyword,
	Multiplier,
	MultiplierSign,
	RangeMultiplier,
	SignMultiplier,
)
from .syntax.parser import parse_syntax
from .types import (
	STRING,
	BasicType,
	DataTypeReference,
	NumericLiteral,
	StringLiteral,
	TypeKind,
	TypeType,
)

_NUMERAL = re.compile(r"-?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_COLLAPSING_GROUP_SIGNS = frozenset(
	{
		MultiplierSign.ASTERISK,
		MultiplierSign.PLUS_SIGN,
		MultiplierSign.HASH_MARK,
		MultiplierSign.EXCLAMATION_POINT,
	}
)
_OPTIONAL_SIGNS = frozenset({MultiplierSign.ASTERISK, MultiplierSign.QUESTION_MARK})


@dataclass
class TypeAccumulator:
	"""Ordered descriptor list with per-kind presence tracking."""

	types: List[TypeType] = field(default_factory=list)
	has_string: bool = False
	has_number: bool = False
	has_length: bool = False
	string_literals: Set[str] = field(default_factory=set)
	numeric_literals: Set[Union[int, float]] = field(default_factory=set)
	data_types: Set[str] = field(default_factory=set)

	def add(self, ty: TypeType) -> None:
		if isinstance(ty, BasicType):
			self._add_basic(ty)
		elif isinstance(ty, StringLiteral):
			if ty.literal not in self.string_literals:
				self.string_literals.add(ty.literal)
				self.types.append(ty)
		elif isinstance(ty, NumericLiteral):
			if ty.literal not in self.numeric_literals:
				self.numeric_literals.add(ty.literal)
				self.types.append(ty)
		elif isinstance(ty, DataTypeReference):
			if ty.name not in self.data_types:
				self.data_types.add(ty.name)
				self.types.append(ty)
		else:
			raise TypeError(f"not a value type: {ty!r}")

	def extend(self, types: Sequence[TypeType]) -> None:
		for ty in types:
			self.add(ty)

	def _add_basic(self, ty: BasicType) -> None:
		if ty.kind is TypeKind.STRING:
			if self.has_string:
				return
			self.has_string = True
		elif ty.kind is TypeKind.NUMBER:
			if self.has_number:
				return
			self.has_number = True
		else:
			if self.has_length:
				return
			self.has_length = True
		self.types.append(ty)


def type_entities(entities: Sequence[Entity], catalog: Optional[Catalog] = None) -> List[TypeType]:
	"""Return the deduplicated descriptors reachable from one entity sequence."""
	if catalog is None:
		catalog = default_catalog()
	acc = TypeAccumulator()
	for index, entity in enumerate(entities):
		if isinstance(entity, COMPONENT_TYPES):
			if should_include_component(entities, index):
				_type_component(entity, acc, catalog)
		elif isinstance(entity, Combinator):
			if entity.kind is CombinatorKind.DOUBLE_BAR or entity.is_mandatory:
				acc.add(STRING)
		elif isinstance(entity, Function):
			acc.add(STRING)
		else:
			raise TypeError(f"not a syntax entity: {entity!r}")
	return acc.types


def type_syntax(text: str, catalog: Optional[Catalog] = None, *, group: bool = True) -> List[TypeType]:
	"""Parse a value-definition string and type it."""
	return type_entities(parse_syntax(text, group=group), catalog)


def _type_component(entity: Entity, acc: TypeAccumulator, catalog: Catalog) -> None:
	if isinstance(entity, Keyword):
		number = numeric_keyword(entity.value)
		if number is not None:
			acc.add(NumericLiteral(number))
		else:
			acc.add(StringLiteral(entity.value))
	elif isinstance(entity, DataType):
		name = entity.value[1:-1]
		if name.startswith("'"):
			# Property references (`<'width'>`) are not expanded.
			acc.add(STRING)
		else:
			basic = catalog.basic_type(name)
			acc.add(basic if basic is not None else DataTypeReference(name))
	elif isinstance(entity, Group):
		if entity.multiplier is not None and _collapses_group(entity.multiplier):
			acc.add(STRING)
		acc.extend(type_entities(entity.entities, catalog))
	else:
		raise TypeError(f"not a component: {entity!r}")


def should_include_component(entities: Sequence[Entity], index: int) -> bool:
	"""
	Decide whether the component at `index` contributes its own descriptors.

	A component joined to a neighbour by a mandatory combinator (juxtaposition
	or `&&`) is only typed when that neighbour is optional; otherwise the
	combinator's STRING stands for the combination.
	"""
	following = _entity_at(entities, index + 1)
	if isinstance(following, Combinator) and following.is_mandatory:
		return _is_optional_component(_entity_at(entities, index + 2))
	preceding = _entity_at(entities, index - 1)
	if isinstance(preceding, Combinator) and preceding.is_mandatory:
		return _is_optional_component(_entity_at(entities, index - 2))
	return True


def _entity_at(entities: Sequence[Entity], index: int) -> Optional[Entity]:
	if 0 <= index < len(entities):
		return entities[index]
	return None


def _is_optional_component(entity: Optional[Entity]) -> bool:
	if not isinstance(entity, COMPONENT_TYPES) or entity.multiplier is None:
		return False
	multiplier = entity.multiplier
	if isinstance(multiplier, RangeMultiplier):
		# TODO: `{1,}` and friends count as optional here; revisit once the
		# generated declarations are diffed against a `min == 0` variant.
		return multiplier.min > 0
	return multiplier.sign in _OPTIONAL_SIGNS


def _collapses_group(multiplier: Multiplier) -> bool:
	if isinstance(multiplier, RangeMultiplier):
		return multiplier.min > 1 or multiplier.max == 1
	if isinstance(multiplier, SignMultiplier):
		return multiplier.sign in _COLLAPSING_GROUP_SIGNS
	raise TypeError(f"not a multiplier: {multiplier!r}")


def numeric_keyword(text: str) -> Optional[Union[int, float]]:
	"""
	Numeric value of a keyword whose text is the canonical spelling of a number.

	Canonical means JavaScript's Number-to-String formatting reproduces the
	text exactly: `0`, `-1`, `1.5` qualify; `01`, `1.0`, `+1`, `.5` and `1e3`
	do not.
	"""
	if not _NUMERAL.fullmatch(text):
		return None
	value = float(text)
	# Unlike JavaScript, `NaN` and `Infinity` stay strings; only finite numerals qualify.
	if math.isinf(value):
		return None
	if js_number_to_string(value) != text:
		return None
	if value.is_integer() and abs(value) <= 2 ** 53:
		return int(value)
	return value


def js_number_to_string(value: float) -> str:
	"""Format a finite float the way ECMAScript's Number::toString does."""
	if value == 0:
		return "0"
	if value < 0:
		return "-" + js_number_to_string(-value)
	# repr() yields the shortest round-tripping digits, as ECMAScript requires.
	_, digits, exponent = Decimal(repr(value)).normalize().as_tuple()
	text = "".join(str(d) for d in digits)
	k = len(text)
	n = k + exponent
	if k <= n <= 21:
		return text + "0" * (n - k)
	if 0 < n <= 21:
		return f"{text[:n]}.{text[n:]}"
	if -6 < n <= 0:
		return "0." + "0" * -n + text
	e = n - 1
	mantissa = text if k == 1 else f"{text[0]}.{text[1:]}"
	return f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"


__all__ = [
	"TypeAccumulator",
	"type_entities",
	"type_syntax",
	"should_include_component",
	"numeric_keyword",
	"js_number_to_string",
]
