# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
CSS value-definition syntax front end.

`parse_syntax` turns a syntax string into the entity tree defined in `ast`.
"""

from __future__ import annotations

from . import ast
from .parser import group_by_precedence, parse_syntax

__all__ = ["ast", "parse_syntax", "group_by_precedence"]
