"""Organizer engine - turns a parameter map into a result map.

For each rule in spec order:
- source key absent: skipped, no output key
- copy / rename: value carried over verbatim, None included
- resolve_one: id -> lookup.find(id), None stays None
- resolve_many: ids -> lookup.where(ids), None stays None; a string or
  other non-sequence raises TypeError

Every input key no rule claimed is then copied through unchanged.
Lookup exceptions propagate to the caller as raised.
"""

import logging
from collections.abc import Sequence
from typing import Any, Mapping, Optional

from parameterizer.exceptions import CollaboratorFailure
from parameterizer.specs.registry import SpecRegistry, get_spec_registry
from parameterizer.specs.schemas import FieldRule, RuleKind, TransformationSpec

logger = logging.getLogger(__name__)


def organize(params: Mapping[str, Any], spec: TransformationSpec) -> dict[str, Any]:
    """Organize ``params`` according to ``spec``.

    Args:
        params: Raw request parameters; read, never mutated
        spec: Rules for the entity kind being updated

    Returns:
        A new dict holding rule outputs plus unclaimed parameters

    Raises:
        Whatever a lookup collaborator raises, unchanged
    """
    result: dict[str, Any] = {}
    claimed: set[str] = set()

    for rule in spec.rules:
        if rule.source_key not in params:
            continue
        claimed.add(rule.source_key)
        result[rule.output_key] = _compute_value(rule, params[rule.source_key])

    for key, value in params.items():
        if key in claimed:
            continue
        if key in result:
            # Rule output wins over a pass-through key of the same name
            logger.warning(
                f"Parameter '{key}' shadowed by rule output in spec '{spec.kind}'; "
                f"dropped value {value!r}"
            )
            continue
        result[key] = value

    logger.debug(
        f"Organized {len(params)} params for '{spec.kind}': "
        f"{len(claimed)} claimed, {len(params) - len(claimed)} passed through"
    )
    return result


def _compute_value(rule: FieldRule, value: Any) -> Any:
    if rule.kind in (RuleKind.COPY, RuleKind.RENAME):
        return value
    if value is None:
        return None
    if rule.kind == RuleKind.RESOLVE_MANY and (
        isinstance(value, (str, bytes)) or not isinstance(value, Sequence)
    ):
        raise TypeError(
            f"'{rule.source_key}' expects a list of ids, got {type(value).__name__}"
        )

    try:
        if rule.kind == RuleKind.RESOLVE_ONE:
            return rule.lookup.find(value)
        return _resolve_many(rule, value)
    except Exception as e:
        logger.error(
            f"Lookup failed resolving '{rule.source_key}' -> '{rule.output_key}': {e}"
        )
        raise


def _resolve_many(rule: FieldRule, ids: Any) -> list[Any]:
    ids = list(ids)
    resolved = rule.lookup.where(ids)
    if resolved is None or len(resolved) != len(ids):
        raise CollaboratorFailure(
            f"Lookup for '{rule.source_key}' returned "
            f"{'None' if resolved is None else len(resolved)} entities for {len(ids)} ids"
        )
    return list(resolved)


class Organizer:
    """Selects the spec for an entity kind and organizes parameters with it."""

    def __init__(self, registry: Optional[SpecRegistry] = None):
        self._registry = registry

    @property
    def registry(self) -> SpecRegistry:
        if self._registry is None:
            self._registry = get_spec_registry()
        return self._registry

    def organize(self, kind: str, params: Mapping[str, Any]) -> dict[str, Any]:
        """Organize ``params`` with the spec registered for ``kind``."""
        return organize(params, self.registry.spec_for(kind))
