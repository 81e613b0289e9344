"""
Access control for company mutations.

A superuser may modify any company.  Anybody else must be listed among
the company's managers.  The check runs before any change is made and
is not repeated after the manager list has been enriched.
"""

import logging

from ..models import Actor
from ..repositories.errors import CompanyNotFoundError, RepositoryError
from .errors import ErrorKind, ServiceError, internal_error


logger = logging.getLogger(__name__)


def check_access(company_repo, actor: Actor, company_id: int) -> None:
    """Raise ``ServiceError`` unless ``actor`` may modify the company.

    ``company_repo`` must provide ``is_manager(company_id, user_id)``
    raising ``CompanyNotFoundError`` for unknown companies.
    """
    if actor.role.is_superuser:
        return

    try:
        is_manager = company_repo.is_manager(company_id, actor.user_id)
    except CompanyNotFoundError as exc:
        raise ServiceError(ErrorKind.COMPANY_NOT_FOUND) from exc
    except RepositoryError as exc:
        raise internal_error("access check", exc) from exc

    if not is_manager:
        logger.info("User %s is not a manager of company %s", actor.user_id, company_id)
        raise ServiceError(ErrorKind.ACCESS_DENIED)
