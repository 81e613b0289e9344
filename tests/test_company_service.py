"""Tests for the company workflows of CompanyService."""

import asyncio

import pytest

from seller_api.app.integrations.user_service import (
    ServiceDegradedError,
    SuperusersNotFoundError,
    UserServiceError,
)
from seller_api.app.repositories import CompanyNotFoundError, RepositoryError
from seller_api.app.schemas.company import CompanyCreate, CompanyFilterRequest, CompanyUpdate
from seller_api.app.services import CompanyService
from seller_api.app.services.errors import ErrorKind, ServiceError
from tests.fakes import SUPERUSER, BlockingUserServiceClient, FakeUserServiceClient, client_actor, run


def _service(repo, superusers=None, error=None) -> CompanyService:
    return CompanyService(repo, FakeUserServiceClient(superusers=superusers, error=error))


def _raises(kind: ErrorKind, coro) -> ServiceError:
    with pytest.raises(ServiceError) as excinfo:
        run(coro)
    assert excinfo.value.kind is kind
    return excinfo.value


class TestCreate:
    def test_requires_superuser(self, memory_repo) -> None:
        service = _service(memory_repo, superusers=[1])
        _raises(ErrorKind.ONLY_SUPERUSER, service.create(client_actor(2), CompanyCreate(name="Acme")))
        assert memory_repo.calls == []
        assert service.user_service_client.calls == 0

    def test_merges_superusers(self, memory_repo) -> None:
        service = _service(memory_repo, superusers=[1, 2])
        result = run(service.create(SUPERUSER, CompanyCreate(name="Acme", manager_ids=[2, 3])))
        assert set(result.manager_ids) == {1, 2, 3}
        (_, persisted), = memory_repo.called("create")
        assert set(persisted.manager_ids) == {1, 2, 3}

    @pytest.mark.parametrize(
        "error",
        [ServiceDegradedError(), SuperusersNotFoundError()],
        ids=["degraded", "not-found"],
    )
    def test_tolerated_failures_skip_enrichment(self, memory_repo, error) -> None:
        service = _service(memory_repo, error=error)
        result = run(service.create(SUPERUSER, CompanyCreate(name="Acme", manager_ids=[4, 5])))
        assert set(result.manager_ids) == {4, 5}
        (_, persisted), = memory_repo.called("create")
        assert persisted.manager_ids == [4, 5]

    def test_unexpected_client_failure_aborts(self, memory_repo) -> None:
        cause = UserServiceError("client misconfigured")
        service = _service(memory_repo, error=cause)
        err = _raises(ErrorKind.INTERNAL, service.create(SUPERUSER, CompanyCreate(name="Acme")))
        assert err.cause is cause
        assert memory_repo.called("create") == []

    def test_store_failure_is_internal(self, memory_repo) -> None:
        memory_repo.failures["create"] = RepositoryError("disk full")
        service = _service(memory_repo, superusers=[1])
        err = _raises(ErrorKind.INTERNAL, service.create(SUPERUSER, CompanyCreate(name="Acme")))
        assert isinstance(err.cause, RepositoryError)


class TestUpdate:
    def test_manager_without_manager_change_gets_superusers_merged(self, memory_repo) -> None:
        memory_repo.add(5, [2, 3])
        service = _service(memory_repo, superusers=[9])
        result = run(service.update(client_actor(2), 5, CompanyUpdate(name="Renamed")))
        assert set(result.manager_ids) == {2, 3, 9}
        assert result.name == "Renamed"
        assert memory_repo.called("get_by_id") == [("get_by_id", 5)]

    def test_explicit_managers_are_merged_with_superusers(self, memory_repo) -> None:
        memory_repo.add(5, [2, 3])
        service = _service(memory_repo, superusers=[9])
        result = run(service.update(SUPERUSER, 5, CompanyUpdate(manager_ids=[4])))
        assert set(result.manager_ids) == {4, 9}
        assert memory_repo.called("get_by_id") == []

    def test_empty_superusers_leave_managers_untouched(self, memory_repo) -> None:
        memory_repo.add(5, [2, 3])
        service = _service(memory_repo, superusers=[])
        run(service.update(SUPERUSER, 5, CompanyUpdate(phone="123")))
        (_, _, data), = memory_repo.called("update")
        assert data.manager_ids is None
        assert memory_repo.companies[5].manager_ids == [2, 3]
        assert memory_repo.called("get_by_id") == []

    def test_degraded_leaves_managers_untouched(self, memory_repo) -> None:
        memory_repo.add(5, [2, 3])
        service = _service(memory_repo, error=ServiceDegradedError())
        run(service.update(client_actor(3), 5, CompanyUpdate(name="New")))
        (_, _, data), = memory_repo.called("update")
        assert data.manager_ids is None
        assert memory_repo.called("get_by_id") == []

    def test_empty_manager_list_rereads_current_managers(self, memory_repo) -> None:
        memory_repo.add(5, [2, 3])
        service = _service(memory_repo, superusers=[9])
        result = run(service.update(SUPERUSER, 5, CompanyUpdate(manager_ids=[])))
        assert set(result.manager_ids) == {2, 3, 9}
        assert memory_repo.called("get_by_id") == [("get_by_id", 5)]
        (_, _, data), = memory_repo.called("update")
        assert set(data.manager_ids) == {2, 3, 9}

    def test_empty_manager_list_clears_when_degraded(self, memory_repo) -> None:
        memory_repo.add(5, [2, 3])
        service = _service(memory_repo, error=ServiceDegradedError())
        result = run(service.update(SUPERUSER, 5, CompanyUpdate(manager_ids=[])))
        assert result.manager_ids == []
        assert memory_repo.companies[5].manager_ids == []
        assert memory_repo.called("get_by_id") == []

    def test_degraded_keeps_requested_managers(self, memory_repo) -> None:
        memory_repo.add(5, [2, 3])
        service = _service(memory_repo, error=SuperusersNotFoundError())
        result = run(service.update(SUPERUSER, 5, CompanyUpdate(manager_ids=[7])))
        assert result.manager_ids == [7]

    def test_non_manager_denied_without_update(self, memory_repo) -> None:
        memory_repo.add(5, [2, 3])
        service = _service(memory_repo, superusers=[9])
        _raises(ErrorKind.ACCESS_DENIED, service.update(client_actor(8), 5, CompanyUpdate(name="x")))
        assert memory_repo.called("update") == []
        assert service.user_service_client.calls == 0

    def test_unexpected_client_failure_aborts(self, memory_repo) -> None:
        memory_repo.add(5, [2])
        service = _service(memory_repo, error=UserServiceError("boom"))
        _raises(ErrorKind.INTERNAL, service.update(SUPERUSER, 5, CompanyUpdate(name="x")))
        assert memory_repo.called("update") == []

    def test_reread_failure_is_internal(self, memory_repo) -> None:
        memory_repo.add(5, [2])
        memory_repo.failures["get_by_id"] = RepositoryError("connection reset")
        service = _service(memory_repo, superusers=[9])
        _raises(ErrorKind.INTERNAL, service.update(SUPERUSER, 5, CompanyUpdate(name="x")))
        assert memory_repo.called("update") == []

    def test_company_removed_before_reread(self, memory_repo) -> None:
        memory_repo.add(5, [2])
        memory_repo.failures["get_by_id"] = CompanyNotFoundError(5)
        service = _service(memory_repo, superusers=[9])
        _raises(ErrorKind.COMPANY_NOT_FOUND, service.update(client_actor(2), 5, CompanyUpdate(name="x")))
        assert memory_repo.called("update") == []

    def test_store_not_found_on_write(self, memory_repo) -> None:
        service = _service(memory_repo, superusers=[])
        _raises(ErrorKind.COMPANY_NOT_FOUND, service.update(SUPERUSER, 404, CompanyUpdate(name="x")))

    def test_store_failure_is_internal(self, memory_repo) -> None:
        memory_repo.add(5, [2])
        memory_repo.failures["update"] = RepositoryError("disk full")
        service = _service(memory_repo, superusers=[])
        _raises(ErrorKind.INTERNAL, service.update(SUPERUSER, 5, CompanyUpdate(name="x")))


class TestDelete:
    def test_manager_is_not_enough(self, memory_repo) -> None:
        memory_repo.add(5, [2])
        service = _service(memory_repo)
        _raises(ErrorKind.ONLY_SUPERUSER, service.delete(client_actor(2), 5))
        assert 5 in memory_repo.companies
        assert memory_repo.called("delete") == []

    def test_superuser_deletes(self, memory_repo) -> None:
        memory_repo.add(5, [2])
        run(_service(memory_repo).delete(SUPERUSER, 5))
        assert 5 not in memory_repo.companies

    def test_store_failure_is_internal(self, memory_repo) -> None:
        memory_repo.add(5, [2])
        memory_repo.failures["delete"] = RepositoryError("locked")
        _raises(ErrorKind.INTERNAL, _service(memory_repo).delete(SUPERUSER, 5))


class TestMissingCompany:
    def test_update_get_and_delete_report_not_found(self, memory_repo) -> None:
        service = _service(memory_repo, superusers=[9])
        _raises(ErrorKind.COMPANY_NOT_FOUND, service.update(SUPERUSER, 77, CompanyUpdate(name="x")))
        _raises(ErrorKind.COMPANY_NOT_FOUND, service.get_by_id(77))
        _raises(ErrorKind.COMPANY_NOT_FOUND, service.delete(SUPERUSER, 77))

    def test_manager_update_of_missing_company(self, memory_repo) -> None:
        service = _service(memory_repo, superusers=[9])
        _raises(ErrorKind.COMPANY_NOT_FOUND, service.update(client_actor(2), 77, CompanyUpdate(name="x")))


class TestReads:
    def test_get_by_id_is_repeatable(self, memory_repo) -> None:
        memory_repo.add(5, [3, 2])
        service = _service(memory_repo)
        assert run(service.get_by_id(5)) == run(service.get_by_id(5))

    def test_get_by_id_store_failure(self, memory_repo) -> None:
        memory_repo.failures["get_by_id"] = RepositoryError("locked")
        _raises(ErrorKind.INTERNAL, _service(memory_repo).get_by_id(5))

    def test_list_paginates(self, memory_repo) -> None:
        for company_id in range(1, 6):
            memory_repo.add(company_id, [])
        result = run(_service(memory_repo).list(CompanyFilterRequest(page=2, limit=2)))
        assert [c.id for c in result.companies] == [3, 4]
        assert result.pagination.total == 5
        assert result.pagination.total_pages == 3

    def test_list_store_failure(self, memory_repo) -> None:
        memory_repo.failures["list"] = RepositoryError("locked")
        _raises(ErrorKind.INTERNAL, _service(memory_repo).list(CompanyFilterRequest()))


class TestSuperusersFetch:
    def test_runs_off_the_event_loop(self, memory_repo) -> None:
        client = BlockingUserServiceClient(superusers=[1])
        service = CompanyService(memory_repo, client)

        async def scenario():
            create = asyncio.create_task(service.create(SUPERUSER, CompanyCreate(name="Acme")))
            # Reached only while the fetch is waiting, unless it holds the loop.
            await asyncio.sleep(0.05)
            client.release.set()
            return await create

        result = run(scenario())
        assert client.released is True
        assert result.manager_ids == [1]
