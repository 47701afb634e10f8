"""Lookup collaborator protocol.

Any object with ``find`` and ``where`` satisfies it; no base class needed.
A missing entity is reported as ``None``, never as an exception.
"""

from typing import Any, Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class Lookup(Protocol):
    """Protocol for id -> entity resolvers."""

    def find(self, id: Any) -> Optional[Any]:
        """Entity for ``id``, or None when nothing matches."""
        ...

    def where(self, ids: Sequence[Any]) -> Optional[list[Optional[Any]]]:
        """Entities parallel to ``ids``: same length and order, None for misses.

        ``where([])`` returns ``[]``.
        """
        ...
