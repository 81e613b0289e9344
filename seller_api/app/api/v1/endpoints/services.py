"""
Service catalog endpoints for API v1.

The listing is public; when the caller identifies as a manager of the
company, inactive services are included as well.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status

from seller_api.app.api.dependencies import get_catalog_service
from seller_api.app.api.errors import to_http_exception
from seller_api.app.core.security import get_current_actor, get_optional_actor
from seller_api.app.models import Actor
from seller_api.app.schemas.service import ServiceCreate, ServiceListRead, ServiceRead
from seller_api.app.services import CatalogService, ServiceError


router = APIRouter()


@router.get("/companies/{company_id}/services", response_model=ServiceListRead)
async def list_services(
    company_id: int,
    actor: Optional[Actor] = Depends(get_optional_actor),
    service: CatalogService = Depends(get_catalog_service),
) -> ServiceListRead:
    user_id = actor.user_id if actor else None
    try:
        return await service.list_by_company(company_id, user_id)
    except ServiceError as e:
        raise to_http_exception(e, "GET /companies/{company_id}/services") from e


@router.post(
    "/companies/{company_id}/services",
    response_model=ServiceRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_service(
    company_id: int,
    body: ServiceCreate,
    actor: Actor = Depends(get_current_actor),
    service: CatalogService = Depends(get_catalog_service),
) -> ServiceRead:
    """Add a service to a company (managers of the company and superusers)."""
    try:
        return await service.create_service(actor, company_id, body)
    except ServiceError as e:
        raise to_http_exception(e, "POST /companies/{company_id}/services") from e


@router.delete("/companies/{company_id}/services/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_service(
    company_id: int,
    service_id: int,
    actor: Actor = Depends(get_current_actor),
    service: CatalogService = Depends(get_catalog_service),
) -> None:
    try:
        await service.delete_service(actor, company_id, service_id)
    except ServiceError as e:
        raise to_http_exception(e, "DELETE /companies/{company_id}/services/{service_id}") from e
    return None
