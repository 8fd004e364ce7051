# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
import pytest

from csstyper.catalog import Catalog, default_catalog


@pytest.fixture
def catalog() -> Catalog:
	"""Catalog built from the bundled definition tables."""
	return default_catalog()


@pytest.fixture
def small_catalog() -> Catalog:
	"""
	Hand-built catalog: `color` is composite, everything else listed is basic.
	"""
	return Catalog.from_tables(
		["number", "integer", "length", "percentage", "color"],
		{"color": {"syntax": "<named-color> | currentcolor"}},
	)
