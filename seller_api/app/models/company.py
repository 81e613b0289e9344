"""
Company domain objects.

``CompanyCreateInput`` and ``CompanyUpdateInput`` are built from
request payloads and handed to the repository.  Their ``manager_ids``
may be rewritten by ``CompanyService`` before persisting, which is why
they are regular (mutable) dataclasses.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class Company:
    id: int
    name: str
    description: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    manager_ids: List[int] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class CompanyCreateInput:
    name: str
    description: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    manager_ids: List[int] = field(default_factory=list)


@dataclass
class CompanyUpdateInput:
    """Partial update; ``None`` means "leave unchanged".

    For ``manager_ids`` a list (even an empty one) replaces the whole
    manager set.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    manager_ids: Optional[List[int]] = None


@dataclass
class CompanyFilter:
    name: Optional[str] = None
    manager_id: Optional[int] = None
    page: int = 1
    limit: int = 20

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class Pagination:
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        if self.limit <= 0:
            return 0
        return (self.total + self.limit - 1) // self.limit
