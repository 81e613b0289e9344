"""
Pydantic models for company data.

``CompanyCreate`` and ``CompanyUpdate`` are request bodies,
``CompanyRead`` and ``CompanyListRead`` are the response projections.
Managers are exchanged as a list of user IDs; duplicates in requests
are dropped during validation.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..models import (
    Company,
    CompanyCreateInput,
    CompanyFilter,
    CompanyUpdateInput,
    Pagination,
)


def _dedupe(ids: Optional[List[int]]) -> Optional[List[int]]:
    if ids is None:
        return None
    return list(dict.fromkeys(ids))


class CompanyBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, examples=["Clean Car Service"])
    description: Optional[str] = Field(None, examples=["Hand car wash and detailing"])
    address: Optional[str] = Field(None, examples=["Moscow, Tverskaya 1"])
    phone: Optional[str] = Field(None, examples=["+7 999 123-45-67"])


class CompanyCreate(CompanyBase):
    """Schema for creating a company."""

    manager_ids: List[int] = Field(default_factory=list, examples=[[2, 3]])

    @field_validator("manager_ids")
    @classmethod
    def dedupe_manager_ids(cls, value):
        return _dedupe(value)

    def to_domain(self) -> CompanyCreateInput:
        return CompanyCreateInput(
            name=self.name,
            description=self.description,
            address=self.address,
            phone=self.phone,
            manager_ids=list(self.manager_ids),
        )


class CompanyUpdate(BaseModel):
    """Schema for updating a company.

    All fields are optional; only provided fields will be updated.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    manager_ids: Optional[List[int]] = None

    @field_validator("manager_ids")
    @classmethod
    def dedupe_manager_ids(cls, value):
        return _dedupe(value)

    def to_domain(self) -> CompanyUpdateInput:
        return CompanyUpdateInput(
            name=self.name,
            description=self.description,
            address=self.address,
            phone=self.phone,
            manager_ids=list(self.manager_ids) if self.manager_ids is not None else None,
        )


class CompanyRead(CompanyBase):
    """Schema for reading a company from the API."""

    id: int
    manager_ids: List[int]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True,
    }

    @classmethod
    def from_domain(cls, company: Company) -> "CompanyRead":
        return cls(
            id=company.id,
            name=company.name,
            description=company.description,
            address=company.address,
            phone=company.phone,
            manager_ids=sorted(company.manager_ids),
            created_at=company.created_at,
            updated_at=company.updated_at,
        )


class CompanyFilterRequest(BaseModel):
    """Query parameters accepted by the company listing."""

    name: Optional[str] = None
    manager_id: Optional[int] = None
    page: int = Field(1, ge=1)
    limit: int = Field(20, ge=1, le=100)

    def to_domain(self) -> CompanyFilter:
        return CompanyFilter(
            name=self.name,
            manager_id=self.manager_id,
            page=self.page,
            limit=self.limit,
        )


class PaginationRead(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def from_domain(cls, pagination: Pagination) -> "PaginationRead":
        return cls(
            page=pagination.page,
            limit=pagination.limit,
            total=pagination.total,
            total_pages=pagination.total_pages,
        )


class CompanyListRead(BaseModel):
    companies: List[CompanyRead]
    pagination: PaginationRead

    @classmethod
    def from_domain(cls, companies: List[Company], pagination: Pagination) -> "CompanyListRead":
        return cls(
            companies=[CompanyRead.from_domain(c) for c in companies],
            pagination=PaginationRead.from_domain(pagination),
        )
