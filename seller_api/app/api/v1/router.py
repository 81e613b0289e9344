"""
Top‑level router for version 1 of the API.

Aggregates the domain routers under a unified prefix.
"""

from fastapi import APIRouter

from .endpoints import companies, services


router = APIRouter()

router.include_router(companies.router, prefix="/companies", tags=["companies"])
# The services router is nested under a company and defines its own
# "/companies/{company_id}/services" paths.
router.include_router(services.router, tags=["services"])
