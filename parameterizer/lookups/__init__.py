"""Lookup collaborators that resolve ids into entities."""

from parameterizer.lookups.base import Lookup
from parameterizer.lookups.registry import (
    LookupRegistry,
    get_lookup_registry,
    reset_lookup_registry,
)
from parameterizer.lookups.table import TableLookup

__all__ = [
    "Lookup",
    "LookupRegistry",
    "TableLookup",
    "get_lookup_registry",
    "reset_lookup_registry",
]
