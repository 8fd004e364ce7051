# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Entity tree for CSS value-definition syntax.

A syntax such as `<length> | auto` is an ordered sequence of entities: terms
(components and functions) separated by combinators. Groups nest their own
sequence. Every node is immutable so trees can be shared freely.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar, Optional, Tuple, Union


class EntityKind(Enum):
	COMPONENT = auto()
	COMBINATOR = auto()
	FUNCTION = auto()


class ComponentKind(Enum):
	KEYWORD = auto()
	DATA_TYPE = auto()
	GROUP = auto()


class CombinatorKind(Enum):
	"""Combinators in binding-precedence order, tightest first."""

	JUXTAPOSITION = 0
	DOUBLE_AMPERSAND = 1
	DOUBLE_BAR = 2
	SINGLE_BAR = 3


class MultiplierSign(Enum):
	ASTERISK = "*"
	PLUS_SIGN = "+"
	QUESTION_MARK = "?"
	HASH_MARK = "#"
	EXCLAMATION_POINT = "!"


@dataclass(frozen=True)
class SignMultiplier:
	sign: MultiplierSign

	def __str__(self) -> str:
		return self.sign.value


@dataclass(frozen=True)
class RangeMultiplier:
	"""`{min,max}` repetition; `max` is None for an open range `{min,}`."""

	min: int
	max: Optional[int]

	def __str__(self) -> str:
		if self.max is None:
			return f"{{{self.min},}}"
		if self.max == self.min:
			return f"{{{self.min}}}"
		return f"{{{self.min},{self.max}}}"


Multiplier = Union[SignMultiplier, RangeMultiplier]


@dataclass(frozen=True)
class Keyword:
	value: str
	multiplier: Optional[Multiplier] = None

	entity: ClassVar[EntityKind] = EntityKind.COMPONENT
	component: ClassVar[ComponentKind] = ComponentKind.KEYWORD


@dataclass(frozen=True)
class DataType:
	"""Reference to a data type, bracketed as written (`<length>`, `<'width'>`)."""

	value: str
	multiplier: Optional[Multiplier] = None

	entity: ClassVar[EntityKind] = EntityKind.COMPONENT
	component: ClassVar[ComponentKind] = ComponentKind.DATA_TYPE


@dataclass(frozen=True)
class Group:
	entities: Tuple["Entity", ...]
	multiplier: Optional[Multiplier] = None

	entity: ClassVar[EntityKind] = EntityKind.COMPONENT
	component: ClassVar[ComponentKind] = ComponentKind.GROUP


@dataclass(frozen=True)
class Combinator:
	kind: CombinatorKind

	entity: ClassVar[EntityKind] = EntityKind.COMBINATOR

	@property
	def is_mandatory(self) -> bool:
		"""Juxtaposition and `&&` require every joined term to be present."""
		return self.kind in (CombinatorKind.JUXTAPOSITION, CombinatorKind.DOUBLE_AMPERSAND)


@dataclass(frozen=True)
class Function:
	"""Function-call term such as `fit-content( <length-percentage> )`."""

	name: str
	arguments: Tuple["Entity", ...] = ()
	multiplier: Optional[Multiplier] = None

	entity: ClassVar[EntityKind] = EntityKind.FUNCTION


Component = Union[Keyword, DataType, Group]
Entity = Union[Keyword, DataType, Group, Combinator, Function]

COMPONENT_TYPES = (Keyword, DataType, Group)


__all__ = [
	"EntityKind",
	"ComponentKind",
	"CombinatorKind",
	"MultiplierSign",
	"SignMultiplier",
	"RangeMultiplier",
	"Multiplier",
	"Keyword",
	"DataType",
	"Group",
	"Combinator",
	"Function",
	"Component",
	"Entity",
	"COMPONENT_TYPES",
]
