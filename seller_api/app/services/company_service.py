"""
Business logic for companies.

``CompanyService`` orchestrates the company workflows: it checks the
caller's permissions, enriches the manager list with the superusers
known to the UserService and persists the result through the company
repository.

Superusers are managers of every company.  Their list is fetched from
the UserService on every create and update and merged into the
company's managers.  The UserService is not required for a mutation to
succeed: when it is unavailable (or reports that there are no
superusers) the company is written with the manager list as requested.
Only an unexpected client failure aborts the operation.

The UserService call blocks for up to its timeout, so it runs in a
worker thread and the event loop keeps serving other requests.

The repository call is always the last step of a workflow, so a
failure in any earlier step leaves the stored company untouched.
"""

import asyncio
import logging
from typing import List, Optional

from ..integrations.user_service import (
    ServiceDegradedError,
    SuperusersNotFoundError,
    UserServiceError,
)
from ..models import Actor
from ..repositories.errors import CompanyNotFoundError, RepositoryError
from ..schemas.company import (
    CompanyCreate,
    CompanyFilterRequest,
    CompanyListRead,
    CompanyRead,
    CompanyUpdate,
)
from .access import check_access
from .errors import ErrorKind, ServiceError, internal_error
from .managers import merge_manager_ids


logger = logging.getLogger(__name__)


class CompanyService:
    """Service for managing companies.

    Parameters
    ----------
    company_repo
        Company store (``CompanyRepository`` or anything with the same
        methods).
    user_service_client
        Client exposing ``fetch_superusers_with_graceful_degradation()``.
    """

    def __init__(self, company_repo, user_service_client) -> None:
        self.company_repo = company_repo
        self.user_service_client = user_service_client

    def _fetch_superusers(self) -> Optional[List[int]]:
        """Return the superuser IDs, or ``None`` to skip enrichment.

        ``SuperusersNotFoundError`` and ``ServiceDegradedError`` are
        tolerated; any other client failure becomes ``INTERNAL``.
        """
        try:
            return self.user_service_client.fetch_superusers_with_graceful_degradation()
        except (SuperusersNotFoundError, ServiceDegradedError) as exc:
            logger.warning("Proceeding without superusers enrichment: %s", exc)
            return None
        except UserServiceError as exc:
            raise internal_error("failed to get superusers", exc) from exc

    async def create(self, actor: Actor, request: CompanyCreate) -> CompanyRead:
        """Create a company.  Only superusers may do this."""
        if not actor.role.is_superuser:
            raise ServiceError(ErrorKind.ONLY_SUPERUSER)

        data = request.to_domain()

        superusers = await asyncio.to_thread(self._fetch_superusers)
        if superusers is not None:
            data.manager_ids = merge_manager_ids(data.manager_ids, superusers)

        try:
            company = self.company_repo.create(data)
        except RepositoryError as exc:
            raise internal_error("create company", exc) from exc

        logger.info("User %s created company %s", actor.user_id, company.id)
        return CompanyRead.from_domain(company)

    async def get_by_id(self, company_id: int) -> CompanyRead:
        try:
            company = self.company_repo.get_by_id(company_id)
        except CompanyNotFoundError as exc:
            raise ServiceError(ErrorKind.COMPANY_NOT_FOUND) from exc
        except RepositoryError as exc:
            raise internal_error("get company", exc) from exc
        return CompanyRead.from_domain(company)

    async def list(self, request: CompanyFilterRequest) -> CompanyListRead:
        try:
            companies, pagination = self.company_repo.list(request.to_domain())
        except RepositoryError as exc:
            raise internal_error("list companies", exc) from exc
        return CompanyListRead.from_domain(companies, pagination)

    async def update(self, actor: Actor, company_id: int, request: CompanyUpdate) -> CompanyRead:
        """Update a company.  Allowed for superusers and the company's managers.

        When the superuser list is available it is merged into the
        manager list even if the request does not touch managers: the
        current managers are re-read from the store and the merged set
        replaces them.  The re-read and the write are not atomic; a
        concurrent update of the managers in between is overwritten.
        """
        check_access(self.company_repo, actor, company_id)

        data = request.to_domain()

        superusers = await asyncio.to_thread(self._fetch_superusers)
        if superusers is not None:
            if data.manager_ids:
                data.manager_ids = merge_manager_ids(data.manager_ids, superusers)
            elif superusers:
                try:
                    current = self.company_repo.get_by_id(company_id)
                except CompanyNotFoundError as exc:
                    raise ServiceError(ErrorKind.COMPANY_NOT_FOUND) from exc
                except RepositoryError as exc:
                    raise internal_error("update company: read current managers", exc) from exc
                data.manager_ids = merge_manager_ids(current.manager_ids, superusers)

        try:
            company = self.company_repo.update(company_id, data)
        except CompanyNotFoundError as exc:
            raise ServiceError(ErrorKind.COMPANY_NOT_FOUND) from exc
        except RepositoryError as exc:
            raise internal_error("update company", exc) from exc

        logger.info("User %s updated company %s", actor.user_id, company_id)
        return CompanyRead.from_domain(company)

    async def delete(self, actor: Actor, company_id: int) -> None:
        """Delete a company.  Only superusers may do this, managers included."""
        if not actor.role.is_superuser:
            raise ServiceError(ErrorKind.ONLY_SUPERUSER)

        try:
            self.company_repo.delete(company_id)
        except CompanyNotFoundError as exc:
            raise ServiceError(ErrorKind.COMPANY_NOT_FOUND) from exc
        except RepositoryError as exc:
            raise internal_error("delete company", exc) from exc

        logger.info("User %s deleted company %s", actor.user_id, company_id)
