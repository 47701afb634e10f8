"""Generic keyed-table lookup."""

import logging
from typing import Any, Mapping, Optional, Sequence

logger = logging.getLogger(__name__)


class TableLookup:
    """Lookup over an in-memory mapping of id -> entity.

    The table is held by reference and only ever read, so a shared
    process-wide table needs no locking.
    """

    def __init__(self, name: str, table: Mapping[Any, Any]):
        self.name = name
        self._table = table

    def find(self, id: Any) -> Optional[Any]:
        return self._table.get(id)

    def where(self, ids: Optional[Sequence[Any]]) -> Optional[list[Optional[Any]]]:
        if ids is None:
            return None
        return [self.find(id) for id in ids]

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"TableLookup(name={self.name!r}, size={len(self._table)})"
