"""Shared pytest fixtures for the Seller API tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from seller_api.app.core.db import init_db
from seller_api.app.repositories import CompanyRepository, ServiceRepository
from tests.fakes import InMemoryCompanyRepository


@pytest.fixture
def db_path(tmp_path: Path) -> str:
    """Path to a migrated SQLite database in a temporary directory."""
    path = str(tmp_path / "seller.db")
    init_db(path)
    return path


@pytest.fixture
def company_repo(db_path: str) -> CompanyRepository:
    return CompanyRepository(db_path)


@pytest.fixture
def service_repo(db_path: str) -> ServiceRepository:
    return ServiceRepository(db_path)


@pytest.fixture
def memory_repo() -> InMemoryCompanyRepository:
    return InMemoryCompanyRepository()
