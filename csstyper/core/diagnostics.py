# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Diagnostic record used by the parser and the command line.

Column numbers are 1-based and refer to the syntax string being parsed; None
means the location is unknown.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Diagnostic:
	"""A single problem report (parse error, bad table, unknown syntax name)."""

	message: str
	code: str | None = None
	severity: str = "error"
	column: Optional[int] = None
	notes: list[str] = field(default_factory=list)

	def __str__(self) -> str:
		where = f"column {self.column}: " if self.column is not None else ""
		code = f"[{self.code}] " if self.code else ""
		return f"{self.severity}: {code}{where}{self.message}"

	def to_json(self) -> dict:
		return {
			"message": self.message,
			"code": self.code,
			"severity": self.severity,
			"column": self.column,
			"notes": list(self.notes),
		}


class ValueSyntaxError(ValueError):
	"""Raised when a value-definition string cannot be parsed."""

	def __init__(self, diagnostic: Diagnostic) -> None:
		super().__init__(str(diagnostic))
		self.diagnostic = diagnostic


__all__ = ["Diagnostic", "ValueSyntaxError"]
