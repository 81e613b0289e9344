"""
Service catalog of a company.

Anybody may browse a company's active services.  Managers of the
company also see the inactive ones, and only managers or superusers may
add or remove services.
"""

import logging
from typing import Optional

from ..models import Actor
from ..repositories.errors import CompanyNotFoundError, RepositoryError, ServiceNotFoundError
from ..schemas.service import ServiceCreate, ServiceListRead, ServiceRead
from .access import check_access
from .errors import ErrorKind, ServiceError, internal_error


logger = logging.getLogger(__name__)


class CatalogService:
    def __init__(self, service_repo, company_repo) -> None:
        self.service_repo = service_repo
        self.company_repo = company_repo

    def _is_manager(self, company_id: int, user_id: Optional[int]) -> bool:
        if user_id is None:
            return False
        try:
            return self.company_repo.is_manager(company_id, user_id)
        except CompanyNotFoundError as exc:
            raise ServiceError(ErrorKind.COMPANY_NOT_FOUND) from exc
        except RepositoryError as exc:
            raise internal_error("list services", exc) from exc

    async def list_by_company(self, company_id: int, user_id: Optional[int] = None) -> ServiceListRead:
        include_inactive = self._is_manager(company_id, user_id)
        try:
            services = self.service_repo.list_by_company(company_id, include_inactive=include_inactive)
        except CompanyNotFoundError as exc:
            raise ServiceError(ErrorKind.COMPANY_NOT_FOUND) from exc
        except RepositoryError as exc:
            raise internal_error("list services", exc) from exc
        return ServiceListRead.from_domain(company_id, services)

    async def create_service(self, actor: Actor, company_id: int, request: ServiceCreate) -> ServiceRead:
        check_access(self.company_repo, actor, company_id)
        try:
            service = self.service_repo.create(company_id, request.to_domain())
        except CompanyNotFoundError as exc:
            raise ServiceError(ErrorKind.COMPANY_NOT_FOUND) from exc
        except RepositoryError as exc:
            raise internal_error("create service", exc) from exc
        logger.info("User %s added service %s to company %s", actor.user_id, service.id, company_id)
        return ServiceRead.model_validate(service)

    async def delete_service(self, actor: Actor, company_id: int, service_id: int) -> None:
        check_access(self.company_repo, actor, company_id)
        try:
            self.service_repo.delete(company_id, service_id)
        except CompanyNotFoundError as exc:
            raise ServiceError(ErrorKind.COMPANY_NOT_FOUND) from exc
        except ServiceNotFoundError as exc:
            raise ServiceError(ErrorKind.SERVICE_NOT_FOUND) from exc
        except RepositoryError as exc:
            raise internal_error("delete service", exc) from exc
        logger.info("User %s removed service %s from company %s", actor.user_id, service_id, company_id)
