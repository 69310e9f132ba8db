"""
Domain error taxonomy and the error-to-status classifier.

Every failure that crosses the service boundary is an instance of
:class:`ServiceError`.  Each subclass fixes an :class:`ErrorKind` and
carries structured context (``fields``) plus an optional ``cause``.  Two
errors compare equal when their kind and fields are equal; the message
text and the identity of the wrapped cause do not take part.

Transport adapters render failures with :func:`status_of` (transport
agnostic) or :func:`http_status_of` (HTTP status codes).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from fastapi import status


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    INVALID_IDENTIFIER = "invalid_identifier"
    VALIDATION_FAILED = "validation_failed"
    GENERIC = "generic"


class StatusClass(str, Enum):
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    INTERNAL_ERROR = "internal_error"


class ServiceError(Exception):
    """Base class of all domain errors."""

    kind: ErrorKind = ErrorKind.GENERIC
    default_message = "internal error"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        cause: Optional[BaseException] = None,
        **fields: Any,
    ) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)
        self.cause = cause
        self.fields: Dict[str, Any] = fields
        if cause is not None:
            self.__cause__ = cause

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ServiceError):
            return NotImplemented
        return self.kind is other.kind and self.fields == other.fields

    def __hash__(self) -> int:
        return hash((self.kind, tuple(sorted(self.fields))))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, fields={self.fields!r})"


class NotFoundError(ServiceError):
    """The requested entity does not exist."""

    kind = ErrorKind.NOT_FOUND
    default_message = "item not found"


class InvalidIdentifierError(ServiceError):
    """An external identifier string is malformed.

    ``reason`` is a diagnostic detail of the identifier codec ("incorrect
    length" or "invalid format") and is not part of equality.
    """

    kind = ErrorKind.INVALID_IDENTIFIER
    default_message = "invalid identifier"

    def __init__(self, raw: Any, reason: str = "invalid format") -> None:
        super().__init__(f"invalid identifier {raw!r}: {reason}", id=raw)
        self.raw = raw
        self.reason = reason


class ValidationFailedError(ServiceError):
    """The entity payload is malformed (detected before the service is called)."""

    kind = ErrorKind.VALIDATION_FAILED
    default_message = "validation failed"


class GenericError(ServiceError):
    """Any other repository failure: connectivity, unexpected data, cancellation."""

    kind = ErrorKind.GENERIC


class ConflictError(GenericError):
    """A write was rejected by a storage constraint."""

    default_message = "conflict"


_STATUS_BY_KIND = {
    ErrorKind.INVALID_IDENTIFIER: StatusClass.BAD_REQUEST,
    ErrorKind.VALIDATION_FAILED: StatusClass.BAD_REQUEST,
    ErrorKind.NOT_FOUND: StatusClass.NOT_FOUND,
}

_HTTP_BY_STATUS = {
    StatusClass.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    StatusClass.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    StatusClass.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_of(err: Optional[BaseException]) -> StatusClass:
    """Map any error value to a status class.

    Unknown values, including non-domain exceptions and ``None``, map to
    :attr:`StatusClass.INTERNAL_ERROR`.
    """
    kind = getattr(err, "kind", None)
    if not isinstance(kind, ErrorKind):
        return StatusClass.INTERNAL_ERROR
    return _STATUS_BY_KIND.get(kind, StatusClass.INTERNAL_ERROR)


def http_status_of(err: Optional[BaseException]) -> int:
    return _HTTP_BY_STATUS[status_of(err)]


def public_message(err: BaseException) -> str:
    """Text that is safe to show to an untrusted client."""
    if status_of(err) is StatusClass.INTERNAL_ERROR:
        return "internal server error"
    if isinstance(err, ServiceError):
        return err.message
    return str(err)
