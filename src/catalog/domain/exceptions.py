"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Each subclass carries an ``ErrorKind`` so callers that need to classify a
failure (the bulk update result) never depend on exception type names.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    NOT_FOUND = "NotFound"
    ALREADY_EXISTS = "AlreadyExists"
    INVALID_OPERATION = "InvalidOperation"
    VALIDATION = "Validation"
    CANCELLED = "Cancelled"
    UNEXPECTED = "Unexpected"

    @staticmethod
    def of(exc: BaseException) -> ErrorKind:
        """Classify any exception; non-domain errors are UNEXPECTED."""
        if isinstance(exc, DomainException):
            return exc.kind
        return ErrorKind.UNEXPECTED


class DomainException(Exception):
    """Base class for all domain errors."""

    kind = ErrorKind.UNEXPECTED


class ValidationError(DomainException):
    """An input bound or invariant was violated."""

    kind = ErrorKind.VALIDATION


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    kind = ErrorKind.NOT_FOUND


class AlreadyExistsError(DomainException):
    """A name is already taken within its uniqueness scope."""

    kind = ErrorKind.ALREADY_EXISTS


class InvalidOperationError(DomainException):
    """The entity exists but the requested transition breaks a domain rule."""

    kind = ErrorKind.INVALID_OPERATION
