"""Parameterizer - request-parameter normalization.

Turns loosely-shaped client parameters (flat maps referencing foreign-key
ids) into records ready to apply to a persisted entity:
- Declarative field rules per entity kind (rename, resolve one, resolve many)
- Lookup collaborators that resolve ids into entities
- Pass-through of every parameter no rule claims
"""

from parameterizer.exceptions import (
    CollaboratorFailure,
    ParameterizerError,
    SpecConfigurationError,
    UnknownKindError,
    UnknownLookupError,
)
from parameterizer.lookups import Lookup, LookupRegistry, TableLookup, get_lookup_registry
from parameterizer.organizer import Organizer, organize
from parameterizer.specs import (
    FieldRule,
    RuleKind,
    SpecRegistry,
    TransformationSpec,
    get_spec_registry,
)

__all__ = [
    "CollaboratorFailure",
    "FieldRule",
    "Lookup",
    "LookupRegistry",
    "Organizer",
    "ParameterizerError",
    "RuleKind",
    "SpecConfigurationError",
    "SpecRegistry",
    "TableLookup",
    "TransformationSpec",
    "UnknownKindError",
    "UnknownLookupError",
    "get_lookup_registry",
    "get_spec_registry",
    "organize",
]
