# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
csstyper: CSS value-definition syntax to value-type descriptors.

	syntax.parser  value-definition string -> entity tree (lark)
	catalog        basic data types from the MDN definition tables
	typer          entity tree -> ordered, deduplicated descriptors
"""

from .catalog import Catalog, default_catalog
from .syntax import parse_syntax
from .typer import type_entities, type_syntax
from .types import TypeKind, TypeType

__version__ = "0.1.0"

__all__ = [
	"Catalog",
	"default_catalog",
	"parse_syntax",
	"type_entities",
	"type_syntax",
	"TypeKind",
	"TypeType",
]
