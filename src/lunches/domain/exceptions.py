"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors.

    ``errors`` holds every collected message when several problems were
    found at once (e.g. more than one bad line item).
    """

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors) if errors else [message]


class ValidationError(DomainException):
    """Input shape or value is invalid, or a business invariant was violated."""


class LineItemError(DomainException):
    """A line item could not be resolved to a known, priced product."""


class NotFoundError(DomainException):
    """A requested entity does not exist."""


class StateTransitionError(DomainException):
    """The operation is not allowed for the order's current status."""


class ConflictError(DomainException):
    """The entity was modified concurrently since it was loaded."""
