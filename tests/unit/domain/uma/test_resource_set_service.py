"""Unit tests for ResourceSetService."""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from amcore.domain.shared.error import (
    InvalidRequestError,
    ResourceSetNotFoundError,
    TechnicalError,
)
from amcore.domain.uma.model.aggregate import ResourceSet
from amcore.domain.uma.service.resource_set import ResourceSetService

DOMAIN_ID = "123"
CLIENT_ID = "api"
USER_ID = "456"
RESOURCE_ID = "rs_id"


def _make_resource_set(**overrides) -> ResourceSet:
    created = datetime.now(UTC) - timedelta(days=1)
    fields = dict(
        id=RESOURCE_ID,
        domain=DOMAIN_ID,
        client_id=CLIENT_ID,
        user_id=USER_ID,
        resource_scopes=["read"],
        name="photo album",
        created_at=created,
        updated_at=created,
    )
    fields.update(overrides)
    return ResourceSet(**fields)


def _make_repo() -> AsyncMock:
    repo = AsyncMock()
    # repositories echo back what they persist
    repo.create.side_effect = lambda rs: rs
    repo.update.side_effect = lambda rs: rs
    return repo


def _make_service(
    repo: AsyncMock | None = None, uow: AsyncMock | None = None
) -> ResourceSetService:
    return ResourceSetService(
        resource_set_repo=repo if repo is not None else _make_repo(),
        uow=uow if uow is not None else AsyncMock(),
    )


class TestResourceSetServiceList:
    @pytest.mark.asyncio
    async def test_list_without_resource_sets_returns_empty_list(self):
        repo = _make_repo()
        repo.list_by_owner.return_value = []

        result = await _make_service(repo).list(DOMAIN_ID, CLIENT_ID, USER_ID)

        assert result == []
        repo.list_by_owner.assert_awaited_once_with(DOMAIN_ID, CLIENT_ID, USER_ID)

    @pytest.mark.asyncio
    async def test_list_returns_owned_resource_sets(self):
        repo = _make_repo()
        repo.list_by_owner.return_value = [_make_resource_set()]

        result = await _make_service(repo).list(DOMAIN_ID, CLIENT_ID, USER_ID)

        assert [rs.id for rs in result] == [RESOURCE_ID]

    @pytest.mark.asyncio
    async def test_list_wraps_store_failure(self):
        repo = _make_repo()
        boom = RuntimeError("connection reset")
        repo.list_by_owner.side_effect = boom

        with pytest.raises(TechnicalError) as exc_info:
            await _make_service(repo).list(DOMAIN_ID, CLIENT_ID, USER_ID)

        assert exc_info.value.cause is boom
        assert "connection reset" not in exc_info.value.message


class TestResourceSetServiceCreate:
    @pytest.mark.asyncio
    async def test_create_assigns_server_id_ignoring_hint(self):
        repo = _make_repo()
        service = _make_service(repo)

        created = await service.create(
            DOMAIN_ID, CLIENT_ID, USER_ID, {"id": "rs_id", "resource_scopes": ["scope"]}
        )

        assert created.id != "rs_id"
        assert created.resource_scopes == ["scope"]
        assert (created.domain, created.client_id, created.user_id) == (DOMAIN_ID, CLIENT_ID, USER_ID)
        assert created.created_at == created.updated_at
        repo.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_then_get_returns_same_entity(self):
        repo = _make_repo()
        service = _make_service(repo)
        created = await service.create(
            DOMAIN_ID, CLIENT_ID, USER_ID, {"id": "rs_id", "resource_scopes": ["scope"]}
        )
        repo.get.return_value = created

        fetched = await service.get(DOMAIN_ID, CLIENT_ID, USER_ID, created.id)

        assert fetched == created
        repo.get.assert_awaited_once_with(DOMAIN_ID, CLIENT_ID, USER_ID, created.id)

    @pytest.mark.asyncio
    async def test_each_create_produces_a_new_id(self):
        service = _make_service()
        payload = {"resource_scopes": ["scope"]}

        first = await service.create(DOMAIN_ID, CLIENT_ID, USER_ID, payload)
        second = await service.create(DOMAIN_ID, CLIENT_ID, USER_ID, payload)

        assert first.id != second.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            None,
            {},
            {"id": RESOURCE_ID},
            {"description": "mydescription"},
            {"resource_scopes": []},
            {"resource_scopes": None},
            {"resource_scopes": [""]},
            ["scope"],
        ],
    )
    async def test_create_rejects_invalid_body_without_io(self, payload):
        repo = _make_repo()

        with pytest.raises(InvalidRequestError):
            await _make_service(repo).create(DOMAIN_ID, CLIENT_ID, USER_ID, payload)

        assert repo.mock_calls == []

    @pytest.mark.asyncio
    async def test_create_wraps_store_failure(self):
        repo = _make_repo()
        repo.create.side_effect = OSError("disk full")

        with pytest.raises(TechnicalError):
            await _make_service(repo).create(
                DOMAIN_ID, CLIENT_ID, USER_ID, {"resource_scopes": ["scope"]}
            )

    @pytest.mark.asyncio
    async def test_create_commits_the_unit_of_work(self):
        uow = AsyncMock()

        await _make_service(uow=uow).create(
            DOMAIN_ID, CLIENT_ID, USER_ID, {"resource_scopes": ["scope"]}
        )

        uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_wraps_commit_failure(self):
        uow = AsyncMock()
        uow.commit.side_effect = RuntimeError("database is locked")

        with pytest.raises(TechnicalError):
            await _make_service(uow=uow).create(
                DOMAIN_ID, CLIENT_ID, USER_ID, {"resource_scopes": ["scope"]}
            )

    @pytest.mark.asyncio
    async def test_create_passes_classified_store_error_through(self):
        repo = _make_repo()
        repo.create.side_effect = ResourceSetNotFoundError(RESOURCE_ID)

        with pytest.raises(ResourceSetNotFoundError):
            await _make_service(repo).create(
                DOMAIN_ID, CLIENT_ID, USER_ID, {"resource_scopes": ["scope"]}
            )


class TestResourceSetServiceGet:
    @pytest.mark.asyncio
    async def test_get_missing_raises_not_found(self):
        repo = _make_repo()
        repo.get.return_value = None

        with pytest.raises(ResourceSetNotFoundError) as exc_info:
            await _make_service(repo).get(DOMAIN_ID, CLIENT_ID, USER_ID, RESOURCE_ID)

        assert exc_info.value.key == RESOURCE_ID
        assert exc_info.value.entity_kind == "resource_set"


class TestResourceSetServiceUpdate:
    @pytest.mark.asyncio
    async def test_update_merges_mutable_fields_only(self):
        existing = _make_resource_set()
        previous_update = existing.updated_at
        repo = _make_repo()
        repo.get.return_value = existing

        updated = await _make_service(repo).update(
            DOMAIN_ID,
            CLIENT_ID,
            USER_ID,
            RESOURCE_ID,
            {
                "id": "other",
                "client_id": "intruder",
                "resource_scopes": ["read", "write"],
                "description": "mydescription",
            },
        )

        assert updated.id == RESOURCE_ID
        assert updated.client_id == CLIENT_ID
        assert updated.resource_scopes == ["read", "write"]
        assert updated.description == "mydescription"
        assert updated.created_at == existing.created_at
        assert updated.updated_at > previous_update
        repo.update.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_update_missing_raises_not_found_without_update_call(self):
        repo = _make_repo()
        repo.get.return_value = None

        with pytest.raises(ResourceSetNotFoundError):
            await _make_service(repo).update(
                DOMAIN_ID, CLIENT_ID, USER_ID, RESOURCE_ID, {"resource_scopes": ["scope"]}
            )

        repo.update.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            None,
            {"description": "mydescription"},
            {"resource_scopes": []},
            {"resource_scopes": None},
            {"resource_scopes": [""]},
        ],
    )
    async def test_update_rejects_invalid_body_before_lookup(self, payload):
        repo = _make_repo()
        uow = AsyncMock()

        with pytest.raises(InvalidRequestError):
            await _make_service(repo, uow).update(
                DOMAIN_ID, CLIENT_ID, USER_ID, RESOURCE_ID, payload
            )

        assert repo.mock_calls == []
        uow.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_wraps_store_failure(self):
        repo = _make_repo()
        repo.get.return_value = _make_resource_set()
        repo.update.side_effect = RuntimeError("deadlock")

        with pytest.raises(TechnicalError):
            await _make_service(repo).update(
                DOMAIN_ID, CLIENT_ID, USER_ID, RESOURCE_ID, {"resource_scopes": ["scope"]}
            )


class TestResourceSetServiceDelete:
    @pytest.mark.asyncio
    async def test_delete_existing(self):
        repo = _make_repo()
        repo.get.return_value = _make_resource_set()

        result = await _make_service(repo).delete(DOMAIN_ID, CLIENT_ID, USER_ID, RESOURCE_ID)

        assert result is None
        repo.delete.assert_awaited_once_with(DOMAIN_ID, CLIENT_ID, USER_ID, RESOURCE_ID)

    @pytest.mark.asyncio
    async def test_delete_missing_raises_not_found(self):
        repo = _make_repo()
        repo.get.return_value = None

        with pytest.raises(ResourceSetNotFoundError):
            await _make_service(repo).delete(DOMAIN_ID, CLIENT_ID, USER_ID, RESOURCE_ID)

        repo.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_second_delete_raises_not_found(self):
        repo = _make_repo()
        repo.get.side_effect = [_make_resource_set(), None]
        service = _make_service(repo)

        await service.delete(DOMAIN_ID, CLIENT_ID, USER_ID, RESOURCE_ID)
        with pytest.raises(ResourceSetNotFoundError):
            await service.delete(DOMAIN_ID, CLIENT_ID, USER_ID, RESOURCE_ID)

        repo.delete.assert_awaited_once_with(DOMAIN_ID, CLIENT_ID, USER_ID, RESOURCE_ID)

    @pytest.mark.asyncio
    async def test_delete_missing_does_not_commit(self):
        repo = _make_repo()
        repo.get.return_value = None
        uow = AsyncMock()

        with pytest.raises(ResourceSetNotFoundError):
            await _make_service(repo, uow).delete(DOMAIN_ID, CLIENT_ID, USER_ID, RESOURCE_ID)

        uow.commit.assert_not_called()
