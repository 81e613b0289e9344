"""Tests for the SQLite repositories and migrations."""

from datetime import datetime

import pytest

from seller_api.app.core.db import MIGRATIONS, get_connection, init_db
from seller_api.app.models import CompanyCreateInput, CompanyFilter, CompanyUpdateInput, ServiceCreateInput
from seller_api.app.repositories import (
    CompanyNotFoundError,
    CompanyRepository,
    RepositoryError,
    ServiceNotFoundError,
)


def _create(repo: CompanyRepository, name: str = "Acme", managers=None):
    return repo.create(CompanyCreateInput(name=name, manager_ids=list(managers or [])))


class TestMigrations:
    def test_all_versions_recorded(self, db_path: str) -> None:
        conn = get_connection(db_path)
        try:
            versions = [row["version"] for row in conn.execute("SELECT version FROM migrations ORDER BY version")]
        finally:
            conn.close()
        assert versions == [version for version, _ in MIGRATIONS]

    def test_init_is_idempotent(self, db_path: str) -> None:
        init_db(db_path)
        init_db(db_path)


class TestCompanyRepository:
    def test_create_and_get(self, company_repo: CompanyRepository) -> None:
        created = _create(company_repo, managers=[3, 1, 3])
        assert created.id > 0
        assert sorted(created.manager_ids) == [1, 3]
        assert isinstance(created.created_at, datetime)
        assert company_repo.get_by_id(created.id) == created

    def test_get_missing(self, company_repo: CompanyRepository) -> None:
        with pytest.raises(CompanyNotFoundError):
            company_repo.get_by_id(12345)

    def test_update_fields_keeps_managers(self, company_repo: CompanyRepository) -> None:
        created = _create(company_repo, managers=[2, 3])
        updated = company_repo.update(created.id, CompanyUpdateInput(name="Renamed", phone="42"))
        assert updated.name == "Renamed"
        assert updated.phone == "42"
        assert sorted(updated.manager_ids) == [2, 3]

    def test_update_replaces_managers(self, company_repo: CompanyRepository) -> None:
        created = _create(company_repo, managers=[2, 3])
        updated = company_repo.update(created.id, CompanyUpdateInput(manager_ids=[3, 9]))
        assert sorted(updated.manager_ids) == [3, 9]

    def test_update_missing(self, company_repo: CompanyRepository) -> None:
        with pytest.raises(CompanyNotFoundError):
            company_repo.update(999, CompanyUpdateInput(name="x"))

    def test_delete(self, company_repo: CompanyRepository) -> None:
        created = _create(company_repo, managers=[2])
        company_repo.delete(created.id)
        with pytest.raises(CompanyNotFoundError):
            company_repo.get_by_id(created.id)
        with pytest.raises(CompanyNotFoundError):
            company_repo.delete(created.id)

    def test_is_manager(self, company_repo: CompanyRepository) -> None:
        created = _create(company_repo, managers=[2])
        assert company_repo.is_manager(created.id, 2) is True
        assert company_repo.is_manager(created.id, 5) is False
        with pytest.raises(CompanyNotFoundError):
            company_repo.is_manager(999, 2)

    def test_list_filters_and_paginates(self, company_repo: CompanyRepository) -> None:
        _create(company_repo, "Car Wash North", [2])
        _create(company_repo, "Tyre Service", [3])
        _create(company_repo, "car wash south", [2, 3])

        companies, pagination = company_repo.list(CompanyFilter(name="WASH"))
        assert [c.name for c in companies] == ["Car Wash North", "car wash south"]
        assert pagination.total == 2

        companies, _ = company_repo.list(CompanyFilter(manager_id=3))
        assert [c.name for c in companies] == ["Tyre Service", "car wash south"]

        companies, pagination = company_repo.list(CompanyFilter(page=2, limit=2))
        assert [c.name for c in companies] == ["car wash south"]
        assert (pagination.total, pagination.total_pages) == (3, 2)

    def test_database_errors_are_wrapped(self, tmp_path) -> None:
        repo = CompanyRepository(str(tmp_path / "not-migrated.db"))
        with pytest.raises(RepositoryError) as excinfo:
            repo.get_by_id(1)
        assert not isinstance(excinfo.value, CompanyNotFoundError)


class TestServiceRepository:
    def test_create_and_list(self, company_repo, service_repo) -> None:
        company = _create(company_repo)
        wash = service_repo.create(company.id, ServiceCreateInput(name="Wash", duration_minutes=30, price=500))
        service_repo.create(company.id, ServiceCreateInput(name="Polish", duration_minutes=90, is_active=False))

        assert wash.company_id == company.id
        assert wash.is_active is True
        assert [s.name for s in service_repo.list_by_company(company.id)] == ["Wash"]
        assert [s.name for s in service_repo.list_by_company(company.id, include_inactive=True)] == [
            "Wash",
            "Polish",
        ]

    def test_unknown_company(self, service_repo) -> None:
        with pytest.raises(CompanyNotFoundError):
            service_repo.list_by_company(404)
        with pytest.raises(CompanyNotFoundError):
            service_repo.create(404, ServiceCreateInput(name="Wash", duration_minutes=30))

    def test_delete(self, company_repo, service_repo) -> None:
        company = _create(company_repo)
        wash = service_repo.create(company.id, ServiceCreateInput(name="Wash", duration_minutes=30))
        service_repo.delete(company.id, wash.id)
        assert service_repo.list_by_company(company.id, include_inactive=True) == []
        with pytest.raises(ServiceNotFoundError):
            service_repo.delete(company.id, wash.id)

    def test_services_removed_with_company(self, company_repo, service_repo) -> None:
        company = _create(company_repo)
        other = _create(company_repo, "Other")
        service_repo.create(company.id, ServiceCreateInput(name="Wash", duration_minutes=30))
        service_repo.create(other.id, ServiceCreateInput(name="Tyres", duration_minutes=45))
        company_repo.delete(company.id)
        assert [s.name for s in service_repo.list_by_company(other.id)] == ["Tyres"]
