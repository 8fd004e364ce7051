# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Basic data-type catalog.

Built from two MDN definition tables (the `mdn-data` package's
`css/types.json` and `css/syntaxes.json`): every data type that is not itself
defined as a syntax is primitive and maps onto one of the basic descriptors.
Composite types (present in the syntaxes table) are left out so the typer
emits a DataTypeReference for them instead.

A curated subset of both tables ships in `csstyper/data/`. It is not the
complete mdn-data release: names it leaves out come back as references. Load
the full `css/types.json` and `css/syntaxes.json` through `Catalog.load` for
anything beyond the bundled entries.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Container, Dict, Iterable, Mapping, Optional

from .types import LENGTH, NUMBER, STRING, BasicType

_log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).with_name("data")
DEFAULT_TYPES_PATH = DATA_DIR / "types.json"
DEFAULT_SYNTAXES_PATH = DATA_DIR / "syntaxes.json"

# Not listed in the types table but referenced by color syntaxes.
EXTRA_TYPE_NAMES = ("hex-color",)


def load_definition_table(path: Path) -> Dict[str, dict]:
	"""
	Load a definition table keyed by name.

	Format (mdn-data):
	{
	  "<name>": { "syntax": "<value definition>", ... },
	  ...
	}
	Entries of the types table carry metadata only; their content is not read.
	"""
	obj = json.loads(Path(path).read_text(encoding="utf-8"))
	if not isinstance(obj, dict):
		raise ValueError(f"{path}: definition table must be a JSON object")
	return obj


def build_basic_data_types(type_names: Iterable[str], syntaxes: Container[str]) -> Dict[str, BasicType]:
	"""Classify primitive data-type names; names defined as syntaxes are skipped."""
	basic: Dict[str, BasicType] = {}
	for name in [*type_names, *EXTRA_TYPE_NAMES]:
		if name in ("number", "integer"):
			basic[name] = NUMBER
		elif name == "length":
			basic[name] = LENGTH
		elif name not in syntaxes:
			basic[name] = STRING
	return basic


@dataclass(frozen=True)
class Catalog:
	"""Read-only lookup of basic data types plus the syntaxes table it was built against."""

	basic_types: Mapping[str, BasicType]
	syntaxes: Mapping[str, dict] = field(default_factory=dict)

	@classmethod
	def from_tables(cls, types: Iterable[str], syntaxes: Mapping[str, dict]) -> "Catalog":
		basic = build_basic_data_types(types, syntaxes)
		_log.debug("catalog: %d basic data types, %d syntaxes", len(basic), len(syntaxes))
		return cls(MappingProxyType(basic), MappingProxyType(dict(syntaxes)))

	@classmethod
	def load(cls, types_path: Optional[Path] = None, syntaxes_path: Optional[Path] = None) -> "Catalog":
		types = load_definition_table(types_path or DEFAULT_TYPES_PATH)
		syntaxes = load_definition_table(syntaxes_path or DEFAULT_SYNTAXES_PATH)
		return cls.from_tables(types.keys(), syntaxes)

	def __contains__(self, name: object) -> bool:
		return name in self.basic_types

	def basic_type(self, name: str) -> Optional[BasicType]:
		return self.basic_types.get(name)

	def syntax(self, name: str) -> str:
		"""Value definition registered for `name`; KeyError when unknown."""
		entry = self.syntaxes[name]
		syntax = entry.get("syntax") if isinstance(entry, dict) else None
		if not isinstance(syntax, str):
			raise ValueError(f"syntax entry {name!r} has no syntax string")
		return syntax


@lru_cache(maxsize=None)
def default_catalog() -> Catalog:
	"""Catalog built from the bundled tables, once per process."""
	return Catalog.load()


__all__ = [
	"DATA_DIR",
	"DEFAULT_TYPES_PATH",
	"DEFAULT_SYNTAXES_PATH",
	"EXTRA_TYPE_NAMES",
	"load_definition_table",
	"build_basic_data_types",
	"Catalog",
	"default_catalog",
]
