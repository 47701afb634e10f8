"""Transformation specs - declarative field rules per entity kind."""

from parameterizer.specs.registry import (
    SpecRegistry,
    get_spec_registry,
    reset_spec_registry,
)
from parameterizer.specs.schemas import (
    FieldRule,
    FieldRuleDefinition,
    RuleKind,
    RuleReference,
    SharedRulesDefinition,
    SpecDefinition,
    SpecSummary,
    TransformationSpec,
)

__all__ = [
    "FieldRule",
    "FieldRuleDefinition",
    "RuleKind",
    "RuleReference",
    "SharedRulesDefinition",
    "SpecDefinition",
    "SpecRegistry",
    "SpecSummary",
    "TransformationSpec",
    "get_spec_registry",
    "reset_spec_registry",
]
