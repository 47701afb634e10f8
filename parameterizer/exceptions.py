"""Exception hierarchy for parameterizer.

Usage:
    from parameterizer.exceptions import UnknownKindError

    try:
        spec = registry.spec_for(kind)
    except UnknownKindError as e:
        ...
"""

from typing import Optional


class ParameterizerError(Exception):
    """Base exception for parameterizer."""

    pass


class UnknownKindError(ParameterizerError, KeyError):
    """No transformation spec is registered for the requested entity kind."""

    def __init__(self, kind: str, available: Optional[list[str]] = None):
        self.kind = kind
        self.available = available or []
        super().__init__(kind)

    def __str__(self) -> str:
        return (
            f"No transformation spec registered for kind '{self.kind}'. "
            f"Available: {self.available}"
        )


class SpecConfigurationError(ParameterizerError, ValueError):
    """A transformation spec or one of its rules is malformed.

    Raised while specs are built or registered, never while organizing.
    """

    pass


class UnknownLookupError(SpecConfigurationError):
    """A rule names a lookup collaborator that was never registered."""

    def __init__(self, name: str, available: Optional[list[str]] = None):
        self.name = name
        self.available = available or []
        super().__init__(name)

    def __str__(self) -> str:
        return f"Lookup not found: '{self.name}'. Available: {self.available}"


class CollaboratorFailure(ParameterizerError):
    """A lookup collaborator could not reach its backing store.

    Storage-backed lookups raise this (or anything else); the organizer
    propagates it unchanged. A missing entity is not a failure.
    """

    pass
