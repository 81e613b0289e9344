"""
Exceptions raised by the repositories.
"""


class RepositoryError(Exception):
    """Base class for persistence failures."""


class CompanyNotFoundError(RepositoryError):
    def __init__(self, company_id: int) -> None:
        super().__init__(f"Company {company_id} not found")
        self.company_id = company_id


class ServiceNotFoundError(RepositoryError):
    def __init__(self, service_id: int) -> None:
        super().__init__(f"Service {service_id} not found")
        self.service_id = service_id
