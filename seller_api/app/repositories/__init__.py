"""
SQLite persistence for companies and their services.

Repositories translate between database rows and the dataclasses in
``seller_api.app.models``.  They raise the exceptions from
``repositories.errors``; mapping those to API errors is the job of the
service layer.
"""

from .company_repository import CompanyRepository
from .errors import CompanyNotFoundError, RepositoryError, ServiceNotFoundError
from .service_repository import ServiceRepository

__all__ = [
    "CompanyRepository",
    "ServiceRepository",
    "RepositoryError",
    "CompanyNotFoundError",
    "ServiceNotFoundError",
]
