"""
Domain models shared by services and repositories.

These are plain dataclasses, independent of the Pydantic schemas used
at the API boundary, so the persistence layer never sees request
payloads and the API never sees database rows.
"""

from .actor import Actor, Role
from .company import (
    Company,
    CompanyCreateInput,
    CompanyFilter,
    CompanyUpdateInput,
    Pagination,
)
from .service import Service, ServiceCreateInput

__all__ = [
    "Actor",
    "Role",
    "Company",
    "CompanyCreateInput",
    "CompanyFilter",
    "CompanyUpdateInput",
    "Pagination",
    "Service",
    "ServiceCreateInput",
]
