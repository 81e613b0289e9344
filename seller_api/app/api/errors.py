"""
Translation of service errors into HTTP errors.
"""

import logging

from fastapi import HTTPException, status

from ..services.errors import ErrorKind, ServiceError


logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.ONLY_SUPERUSER: status.HTTP_403_FORBIDDEN,
    ErrorKind.ACCESS_DENIED: status.HTTP_403_FORBIDDEN,
    ErrorKind.COMPANY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.SERVICE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def to_http_exception(exc: ServiceError, operation: str) -> HTTPException:
    """Build the ``HTTPException`` for ``exc``.

    Internal errors are logged with their cause and answered with a
    generic message.
    """
    if exc.kind is ErrorKind.INTERNAL:
        logger.error("%s failed: %s", operation, exc.message, exc_info=exc.cause)
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
    logger.warning("%s rejected: %s", operation, exc.message)
    return HTTPException(status_code=STATUS_BY_KIND[exc.kind], detail=exc.message)
