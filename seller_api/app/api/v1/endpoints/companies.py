"""
Company endpoints for API v1.

Reading companies is public.  Creating and deleting require the
superuser role; updating is allowed to superusers and to the managers
of the company.  Permission checks live in ``CompanyService``; these
handlers only translate its errors into HTTP responses.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from seller_api.app.api.dependencies import get_company_service
from seller_api.app.api.errors import to_http_exception
from seller_api.app.core.security import get_current_actor
from seller_api.app.models import Actor
from seller_api.app.schemas.company import (
    CompanyCreate,
    CompanyFilterRequest,
    CompanyListRead,
    CompanyRead,
    CompanyUpdate,
)
from seller_api.app.services import CompanyService, ServiceError


router = APIRouter()


@router.post("/", response_model=CompanyRead, status_code=status.HTTP_201_CREATED)
async def create_company(
    company: CompanyCreate,
    actor: Actor = Depends(get_current_actor),
    service: CompanyService = Depends(get_company_service),
) -> CompanyRead:
    """Create a new company.

    Only superusers may create companies.  All superusers known to the
    UserService are added to ``manager_ids`` in addition to the ones
    supplied.
    """
    try:
        return await service.create(actor, company)
    except ServiceError as e:
        raise to_http_exception(e, "POST /companies") from e


@router.get("/", response_model=CompanyListRead)
async def list_companies(
    name: Optional[str] = Query(None),
    manager_id: Optional[int] = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    service: CompanyService = Depends(get_company_service),
) -> CompanyListRead:
    """Получить список компаний с фильтрами и пагинацией.

    - **name**: поиск по подстроке названия (без учёта регистра).
    - **manager_id**: только компании, где пользователь является менеджером.
    - **page**, **limit**: параметры пагинации.
    """
    request = CompanyFilterRequest(name=name, manager_id=manager_id, page=page, limit=limit)
    try:
        return await service.list(request)
    except ServiceError as e:
        raise to_http_exception(e, "GET /companies") from e


@router.get("/{company_id}", response_model=CompanyRead)
async def get_company(
    company_id: int,
    service: CompanyService = Depends(get_company_service),
) -> CompanyRead:
    """Retrieve a single company by its ID.  Raises 404 if it does not exist."""
    try:
        return await service.get_by_id(company_id)
    except ServiceError as e:
        raise to_http_exception(e, "GET /companies/{company_id}") from e


@router.put("/{company_id}", response_model=CompanyRead)
async def update_company(
    company_id: int,
    updates: CompanyUpdate,
    actor: Actor = Depends(get_current_actor),
    service: CompanyService = Depends(get_company_service),
) -> CompanyRead:
    """Update an existing company.

    Partial updates are supported; any unspecified fields remain
    unchanged.  Superusers are merged into the managers even when
    ``manager_ids`` is omitted.
    """
    try:
        return await service.update(actor, company_id, updates)
    except ServiceError as e:
        raise to_http_exception(e, "PUT /companies/{company_id}") from e


@router.delete("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_company(
    company_id: int,
    actor: Actor = Depends(get_current_actor),
    service: CompanyService = Depends(get_company_service),
) -> None:
    """Delete a company (superuser only).  Its services are removed too."""
    try:
        await service.delete(actor, company_id)
    except ServiceError as e:
        raise to_http_exception(e, "DELETE /companies/{company_id}") from e
    return None
