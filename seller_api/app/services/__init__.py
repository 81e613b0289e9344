"""
Service layer.

Each service encapsulates the business workflow of one domain and
receives its repositories and clients through the constructor, so API
handlers stay thin and tests can swap collaborators for fakes.
"""

from .catalog_service import CatalogService
from .company_service import CompanyService
from .errors import ErrorKind, ServiceError

__all__ = ["CatalogService", "CompanyService", "ErrorKind", "ServiceError"]
