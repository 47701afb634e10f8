"""Lookup registry - named lookup collaborators bound at startup.

Spec definitions refer to lookups by name (e.g. ``lookup: people``);
the spec registry resolves those names here when it builds its specs.
"""

import logging
from typing import Optional

from parameterizer.exceptions import SpecConfigurationError, UnknownLookupError
from parameterizer.lookups.base import Lookup

logger = logging.getLogger(__name__)


class LookupRegistry:
    """Registry of lookup collaborators keyed by name."""

    def __init__(self, lookups: Optional[dict[str, Lookup]] = None):
        self._lookups: dict[str, Lookup] = {}
        for name, lookup in (lookups or {}).items():
            self.register(name, lookup)

    def register(self, name: str, lookup: Lookup) -> None:
        """Register a lookup under ``name``, replacing any previous one."""
        if not isinstance(lookup, Lookup):
            raise SpecConfigurationError(
                f"Lookup '{name}' must provide find(id) and where(ids), "
                f"got {type(lookup).__name__}"
            )
        if name in self._lookups:
            logger.warning(f"Replacing registered lookup: {name}")
        self._lookups[name] = lookup
        logger.debug(f"Registered lookup: {name}")

    def get(self, name: str) -> Optional[Lookup]:
        """Get a lookup by name."""
        return self._lookups.get(name)

    def get_validated(self, name: str) -> Lookup:
        """Get a lookup by name, raising if not registered."""
        lookup = self.get(name)
        if lookup is None:
            raise UnknownLookupError(name, self.list_names())
        return lookup

    def list_names(self) -> list[str]:
        """List all registered lookup names."""
        return sorted(self._lookups.keys())

    def count(self) -> int:
        return len(self._lookups)


# Global registry instance
_registry: Optional[LookupRegistry] = None


def get_lookup_registry() -> LookupRegistry:
    """Get the global lookup registry instance."""
    global _registry
    if _registry is None:
        _registry = LookupRegistry()
    return _registry


def reset_lookup_registry() -> None:
    """Drop the global lookup registry (tests and reconfiguration)."""
    global _registry
    _registry = None
