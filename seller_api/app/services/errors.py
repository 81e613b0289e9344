"""
Errors surfaced by the service layer.

Every failure leaves a service as a :class:`ServiceError` whose
``kind`` tells the API layer which status code to answer with.  For
``ErrorKind.INTERNAL`` the underlying exception is kept in ``cause``
(and chained as ``__cause__``) for logging; it is never shown to the
client.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    ONLY_SUPERUSER = "only_superuser"
    ACCESS_DENIED = "access_denied"
    COMPANY_NOT_FOUND = "company_not_found"
    SERVICE_NOT_FOUND = "service_not_found"
    INTERNAL = "internal"


_DEFAULT_MESSAGES = {
    ErrorKind.ONLY_SUPERUSER: "only superuser can perform this action",
    ErrorKind.ACCESS_DENIED: "access denied",
    ErrorKind.COMPANY_NOT_FOUND: "company not found",
    ErrorKind.SERVICE_NOT_FOUND: "service not found",
    ErrorKind.INTERNAL: "internal error",
}


class ServiceError(Exception):
    def __init__(
        self,
        kind: ErrorKind,
        message: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        self.kind = kind
        self.message = message or _DEFAULT_MESSAGES[kind]
        self.cause = cause
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"ServiceError(kind={self.kind.value!r}, message={self.message!r})"


def internal_error(context: str, cause: BaseException) -> ServiceError:
    """Build an ``INTERNAL`` error describing where ``cause`` happened."""
    return ServiceError(ErrorKind.INTERNAL, f"{context}: {cause}", cause=cause)
