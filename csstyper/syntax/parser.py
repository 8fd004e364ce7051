# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedCharacters, UnexpectedInput, UnexpectedToken

from csstyper.core.diagnostics import Diagnostic, ValueSyntaxError

from .ast import (
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

_log = logging.getLogger(__name__)

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	start="start",
	maybe_placeholders=False,
)

_COMBINATOR_TOKENS = {
	"DOUBLE_BAR": CombinatorKind.DOUBLE_BAR,
	"SINGLE_BAR": CombinatorKind.SINGLE_BAR,
	"DOUBLE_AMPERSAND": CombinatorKind.DOUBLE_AMPERSAND,
}

_RANGE = re.compile(r"\{\s*(\d+)\s*(?:(,)\s*(\d*)\s*)?\}")

SYNTAX_ERROR_CODE = "E-SYNTAX"


def parse_syntax(text: str, *, group: bool = True) -> Tuple[Entity, ...]:
	"""
	Parse a value-definition string into an entity sequence.

	With `group` (the default) every sequence is regrouped by combinator
	precedence, so `a b | c` becomes `[a b] | c` with the bracket an implicit
	Group. Raises ValueSyntaxError on malformed input.
	"""
	try:
		tree = _PARSER.parse(text)
	except UnexpectedInput as exc:
		raise ValueSyntaxError(_diagnostic_from_lark(exc, text)) from exc
	sequence = next(child for child in tree.children if isinstance(child, Tree))
	return _build_sequence(sequence, group)


def group_by_precedence(entities: Sequence[Entity], precedence: int = CombinatorKind.SINGLE_BAR.value) -> Tuple[Entity, ...]:
	"""
	Wrap runs of tighter-binding terms into implicit Groups.

	The loosest combinator present splits the sequence; each segment holding
	more than one entity becomes a Group regrouped at the next precedence.
	"""
	if precedence < 0:
		return tuple(entities)
	splits = [
		index
		for index, entity in enumerate(entities)
		if isinstance(entity, Combinator) and entity.kind.value == precedence
	]
	if not splits:
		return group_by_precedence(entities, precedence - 1)

	grouped: List[Entity] = []
	start = 0
	for index in splits + [len(entities)]:
		segment = entities[start:index]
		if len(segment) > 1:
			grouped.append(Group(group_by_precedence(segment, precedence - 1)))
		else:
			grouped.extend(segment)
		if index < len(entities):
			grouped.append(entities[index])
		start = index + 1
	_log.debug(
		"split %d entities on %s into %d",
		len(entities),
		CombinatorKind(precedence).name,
		len(grouped),
	)
	return tuple(grouped)


def _build_sequence(tree: Tree, group: bool) -> Tuple[Entity, ...]:
	entities: List[Entity] = []
	for child in tree.children:
		if not isinstance(child, Tree):
			continue
		kind = _name(child)
		if kind == "combinator":
			entities.append(_build_combinator(child))
		elif kind == "term":
			if entities and not isinstance(entities[-1], Combinator):
				entities.append(Combinator(CombinatorKind.JUXTAPOSITION))
			entities.append(_build_term(child, group))
		else:
			raise TypeError(f"unexpected sequence child {kind}")
	if group:
		return group_by_precedence(entities)
	return tuple(entities)


def _build_combinator(tree: Tree) -> Combinator:
	token = next(child for child in tree.children if isinstance(child, Token))
	return Combinator(_COMBINATOR_TOKENS[token.type])


def _build_term(tree: Tree, group: bool) -> Entity:
	atom = tree.children[0]
	multiplier: Optional[Multiplier] = None
	if len(tree.children) > 1:
		multiplier = _build_multiplier(str(tree.children[1]))

	kind = _name(atom)
	if kind == "keyword":
		return Keyword(_keyword_text(atom.children[0]), multiplier)
	if kind == "data_type":
		return DataType(str(atom.children[0]), multiplier)
	if kind == "group":
		inner = next(child for child in atom.children if isinstance(child, Tree))
		return Group(_build_sequence(inner, group), multiplier)
	if kind == "function":
		name_token = atom.children[0]
		arguments: Tuple[Entity, ...] = ()
		inner_node = next((child for child in atom.children if isinstance(child, Tree)), None)
		if inner_node is not None:
			arguments = _build_sequence(inner_node, group)
		return Function(str(name_token)[:-1], arguments, multiplier)
	raise TypeError(f"unexpected term {kind}")


def _keyword_text(token: Token) -> str:
	if token.type == "QUOTED":
		return token.value[1:-1]
	return token.value


def _build_multiplier(raw: str) -> Multiplier:
	if raw.startswith("#") or raw.endswith("#"):
		# `#{m,n}` and stacked `+#` bound the comma-separated list; only the
		# list-ness matters here.
		return SignMultiplier(MultiplierSign.HASH_MARK)
	if raw.startswith("{"):
		match = _RANGE.fullmatch(raw)
		if match is None:
			raise TypeError(f"malformed range multiplier {raw!r}")
		low = int(match.group(1))
		if match.group(2) is None:
			return RangeMultiplier(low, low)
		high = match.group(3)
		return RangeMultiplier(low, int(high) if high else None)
	return SignMultiplier(MultiplierSign(raw))


def _diagnostic_from_lark(exc: UnexpectedInput, text: str) -> Diagnostic:
	column = getattr(exc, "column", None)
	if not isinstance(column, int) or column < 1:
		column = None
	if isinstance(exc, UnexpectedCharacters):
		message = f"unexpected character {text[exc.pos_in_stream]!r}"
	elif isinstance(exc, UnexpectedToken) and exc.token.type != "$END":
		message = f"unexpected token {exc.token.value!r}"
	else:
		message = "unexpected end of syntax"
		column = None
	notes: List[str] = []
	if column is not None:
		notes.append(exc.get_context(text).rstrip("\n"))
	return Diagnostic(message=message, code=SYNTAX_ERROR_CODE, column=column, notes=notes)


def _name(tree: Tree) -> str:
	return tree.data if isinstance(tree.data, str) else tree.data.value


__all__ = ["parse_syntax", "group_by_precedence", "SYNTAX_ERROR_CODE"]
