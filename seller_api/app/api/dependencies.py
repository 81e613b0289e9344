"""
API dependencies.

Builds the services used by the endpoints.  The repositories are
created by ``create_app`` for the database it migrates and kept on
``app.state``; the UserService client is built once from the settings
and keeps a pooled ``requests.Session``.  Tests replace these providers
through ``app.dependency_overrides``.
"""

from functools import lru_cache

from fastapi import Depends, Request

from ..core.config import settings
from ..integrations.user_service import UserServiceClient
from ..repositories import CompanyRepository, ServiceRepository
from ..services import CatalogService, CompanyService


def get_company_repository(request: Request) -> CompanyRepository:
    return request.app.state.company_repository


def get_service_repository(request: Request) -> ServiceRepository:
    return request.app.state.service_repository


@lru_cache
def get_user_service_client() -> UserServiceClient:
    return UserServiceClient(settings.user_service_url, timeout=settings.user_service_timeout)


def get_company_service(
    company_repo: CompanyRepository = Depends(get_company_repository),
    user_service_client: UserServiceClient = Depends(get_user_service_client),
) -> CompanyService:
    return CompanyService(company_repo, user_service_client)


def get_catalog_service(
    service_repo: ServiceRepository = Depends(get_service_repository),
    company_repo: CompanyRepository = Depends(get_company_repository),
) -> CatalogService:
    return CatalogService(service_repo, company_repo)
