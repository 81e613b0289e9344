"""
Services offered by a company (the marketplace catalog).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Service:
    id: int
    company_id: int
    name: str
    duration_minutes: int
    price: float = 0.0
    description: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class ServiceCreateInput:
    name: str
    duration_minutes: int
    price: float = 0.0
    description: Optional[str] = None
    is_active: bool = True
