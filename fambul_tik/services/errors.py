from __future__ import annotations


class FamilyGraphError(Exception):
    """Base class for errors raised by the member and relationship stores."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class ValidationError(FamilyGraphError):
    """Input breaks a data-model invariant. Nothing has been written."""


class NotFoundError(FamilyGraphError):
    """A referenced member, relationship or relationship type does not exist."""


class ConsistencyError(FamilyGraphError):
    """A stored reference failed to resolve. Indicates a bug, not bad input."""
