# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Shared plumbing: diagnostics and the errors that carry them."""

from .diagnostics import Diagnostic, ValueSyntaxError

__all__ = ["Diagnostic", "ValueSyntaxError"]
