# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Value-type descriptors produced by the typer.

Descriptors are small frozen records tagged with a TypeKind. Structural
equality is the dedup rule: two descriptors are the same when they share a
kind and the discriminating field (literal or name).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar, Optional, Tuple, Union


class TypeKind(Enum):
	ALIAS = auto()
	DATA_TYPE = auto()
	LENGTH = auto()
	STRING_LITERAL = auto()
	NUMERIC_LITERAL = auto()
	STRING = auto()
	NUMBER = auto()


@dataclass(frozen=True)
class BasicType:
	"""Generic string, number or length value."""

	kind: TypeKind

	def __post_init__(self) -> None:
		if self.kind not in (TypeKind.STRING, TypeKind.NUMBER, TypeKind.LENGTH):
			raise ValueError(f"{self.kind.name} is not a basic type")

	def __str__(self) -> str:
		return self.kind.name.lower()


STRING = BasicType(TypeKind.STRING)
NUMBER = BasicType(TypeKind.NUMBER)
LENGTH = BasicType(TypeKind.LENGTH)


@dataclass(frozen=True)
class StringLiteral:
	literal: str

	kind: ClassVar[TypeKind] = TypeKind.STRING_LITERAL

	def __str__(self) -> str:
		return repr(self.literal)


@dataclass(frozen=True)
class NumericLiteral:
	literal: Union[int, float]

	kind: ClassVar[TypeKind] = TypeKind.NUMERIC_LITERAL

	def __str__(self) -> str:
		return str(self.literal)


@dataclass(frozen=True)
class DataTypeReference:
	"""Named data type left for the alias stage to resolve."""

	name: str

	kind: ClassVar[TypeKind] = TypeKind.DATA_TYPE

	def __str__(self) -> str:
		return f"<{self.name}>"


@dataclass(frozen=True)
class Generic:
	name: str
	defaults: Optional[str] = None

	def __str__(self) -> str:
		if self.defaults is None:
			return self.name
		return f"{self.name} = {self.defaults}"


@dataclass(frozen=True)
class Alias:
	"""Resolved declaration reference; built downstream, never by the typer."""

	name: str
	generics: Tuple[Generic, ...] = ()

	kind: ClassVar[TypeKind] = TypeKind.ALIAS

	def __str__(self) -> str:
		if not self.generics:
			return self.name
		inner = ", ".join(str(g) for g in self.generics)
		return f"{self.name}<{inner}>"


TypeType = Union[BasicType, StringLiteral, NumericLiteral, DataTypeReference]
AnyType = Union[TypeType, Alias]


def to_json(ty: AnyType) -> dict:
	"""JSON-compatible form: `{"type": <kind>, ...fields}`."""
	out: dict = {"type": ty.kind.name.lower()}
	if isinstance(ty, (StringLiteral, NumericLiteral)):
		out["literal"] = ty.literal
	elif isinstance(ty, DataTypeReference):
		out["name"] = ty.name
	elif isinstance(ty, Alias):
		out["name"] = ty.name
		out["generics"] = [
			{"name": g.name, **({"defaults": g.defaults} if g.defaults is not None else {})}
			for g in ty.generics
		]
	return out


__all__ = [
	"TypeKind",
	"BasicType",
	"STRING",
	"NUMBER",
	"LENGTH",
	"StringLiteral",
	"NumericLiteral",
	"DataTypeReference",
	"Generic",
	"Alias",
	"TypeType",
	"AnyType",
	"to_json",
]
