# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Command line: type a value-definition string or a named syntax.

	csstyper '<length> | auto'
	csstyper --syntax line-width --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from csstyper.catalog import Catalog, default_catalog
from csstyper.core.diagnostics import Diagnostic, ValueSyntaxError
from csstyper.typer import type_syntax
from csstyper.types import to_json

_log = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
	level = logging.DEBUG if verbose else logging.INFO
	logging.basicConfig(
		level=level,
		format="%(asctime)s - %(levelname)s - %(message)s",
		datefmt="%Y-%m-%d %H:%M:%S",
	)


def _build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(
		prog="csstyper",
		description="Map a CSS value-definition syntax to its value-type descriptors",
	)
	source = p.add_mutually_exclusive_group(required=True)
	source.add_argument("value", nargs="?", help="Value-definition syntax, e.g. '<length> | auto'")
	source.add_argument("--syntax", metavar="NAME", help="Type the syntax registered under NAME in the syntaxes table")
	p.add_argument("--types", type=Path, default=None, help="Path to a types definition table (default: bundled subset)")
	p.add_argument("--syntaxes", type=Path, default=None, help="Path to a syntaxes definition table (default: bundled subset)")
	p.add_argument("--flat", action="store_true", help="Do not regroup terms by combinator precedence")
	p.add_argument("--json", action="store_true", help="Emit machine-readable JSON")
	p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
	return p


def main(argv: Optional[List[str]] = None) -> int:
	args = _build_parser().parse_args(argv)
	setup_logging(args.verbose)

	try:
		catalog = _load_catalog(args.types, args.syntaxes)
	except (OSError, ValueError) as exc:
		return _fail(args, Diagnostic(message=f"cannot load definition tables: {exc}", code="E-TABLE"))

	text = args.value
	if args.syntax is not None:
		try:
			text = catalog.syntax(args.syntax)
		except KeyError:
			return _fail(args, Diagnostic(message=f"unknown syntax {args.syntax!r}", code="E-NAME"))
		except ValueError as exc:
			return _fail(args, Diagnostic(message=str(exc), code="E-TABLE"))
		_log.debug("%s: %s", args.syntax, text)

	try:
		types = type_syntax(text, catalog, group=not args.flat)
	except ValueSyntaxError as exc:
		return _fail(args, exc.diagnostic)

	if args.json:
		print(json.dumps({"exit_code": 0, "syntax": text, "types": [to_json(ty) for ty in types]}, ensure_ascii=False))
	else:
		for ty in types:
			print(ty)
	return 0


def _load_catalog(types_path: Optional[Path], syntaxes_path: Optional[Path]) -> Catalog:
	if types_path is None and syntaxes_path is None:
		return default_catalog()
	return Catalog.load(types_path, syntaxes_path)


def _fail(args: argparse.Namespace, diag: Diagnostic) -> int:
	if args.json:
		print(json.dumps({"exit_code": 1, "diagnostics": [diag.to_json()]}, ensure_ascii=False))
	else:
		print(diag, file=sys.stderr)
		for note in diag.notes:
			print(note, file=sys.stderr)
	return 1


if __name__ == "__main__":
	sys.exit(main())
