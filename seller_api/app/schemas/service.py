"""
Pydantic models for the services a company offers.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ..models import Service, ServiceCreateInput


class ServiceCreate(BaseModel):
    """Schema for adding a service to a company."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Full body wash"])
    description: Optional[str] = Field(None, examples=["Exterior and interior cleaning"])
    price: float = Field(0.0, ge=0, examples=[1500.0])
    duration_minutes: int = Field(..., gt=0, examples=[60])
    is_active: bool = True

    def to_domain(self) -> ServiceCreateInput:
        return ServiceCreateInput(
            name=self.name,
            description=self.description,
            price=self.price,
            duration_minutes=self.duration_minutes,
            is_active=self.is_active,
        )


class ServiceRead(BaseModel):
    id: int
    company_id: int
    name: str
    description: Optional[str] = None
    price: float
    duration_minutes: int
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True,
    }


class ServiceListRead(BaseModel):
    company_id: int
    services: List[ServiceRead]

    @classmethod
    def from_domain(cls, company_id: int, services: List[Service]) -> "ServiceListRead":
        return cls(
            company_id=company_id,
            services=[ServiceRead.model_validate(s) for s in services],
        )
