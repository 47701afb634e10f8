"""Shared fixtures: the reference dataset and registries bound to it."""

from pathlib import Path

import pytest

from parameterizer.lookups import LookupRegistry, TableLookup, reset_lookup_registry
from parameterizer.specs import SpecRegistry, reset_spec_registry

CATEGORIES = {
    1: {"id": 1, "name": "Advertising"},
    2: {"id": 2, "name": "Marketing"},
    3: {"id": 3, "name": "Finance"},
}

PEOPLE = {
    1: {"id": 1, "name": "Harry"},
    2: {"id": 2, "name": "Ron"},
    3: {"id": 3, "name": "Hermoine"},
}


@pytest.fixture(autouse=True)
def _reset_registries():
    """Reset global registries between tests."""
    reset_spec_registry()
    reset_lookup_registry()
    yield
    reset_spec_registry()
    reset_lookup_registry()


@pytest.fixture()
def categories() -> TableLookup:
    return TableLookup("categories", CATEGORIES)


@pytest.fixture()
def people() -> TableLookup:
    return TableLookup("people", PEOPLE)


@pytest.fixture()
def lookups(categories: TableLookup, people: TableLookup) -> LookupRegistry:
    return LookupRegistry({"categories": categories, "people": people})


@pytest.fixture()
def registry(lookups: LookupRegistry) -> SpecRegistry:
    """Spec registry over the packaged definitions."""
    return SpecRegistry(lookups=lookups)


@pytest.fixture()
def definitions_dir(tmp_path: Path) -> Path:
    """Empty temporary definitions directory."""
    path = tmp_path / "definitions"
    path.mkdir()
    return path
