from datetime import UTC, datetime

import pydantic
import pytest

from amcore.domain.uma.model.aggregate import ResourceSet
from amcore.domain.uma.model.value import ResourceSetPayload


def _make_resource_set() -> ResourceSet:
    now = datetime.now(UTC)
    return ResourceSet(
        id="rs_id",
        domain="123",
        client_id="api",
        user_id="456",
        resource_scopes=["read"],
        created_at=now,
        updated_at=now,
    )


class TestResourceSetPayload:
    def test_scopes_are_deduplicated_in_order(self):
        payload = ResourceSetPayload(resource_scopes=["write", "read", "write"])
        assert payload.resource_scopes == ["write", "read"]

    def test_blank_scope_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            ResourceSetPayload(resource_scopes=["read", "  "])

    def test_unknown_keys_are_dropped(self):
        payload = ResourceSetPayload.model_validate({"id": "x", "resource_scopes": ["a"]})
        assert "id" not in payload.model_dump()


class TestResourceSet:
    def test_empty_scopes_rejected_on_assignment(self):
        rs = _make_resource_set()
        with pytest.raises(pydantic.ValidationError):
            rs.resource_scopes = []

    def test_apply_overwrites_descriptive_fields(self):
        rs = _make_resource_set()
        rs.name = "album"

        rs.apply(ResourceSetPayload(resource_scopes=["view"], icon_uri="https://img/icon.png"))

        assert rs.resource_scopes == ["view"]
        assert rs.icon_uri == "https://img/icon.png"
        assert rs.name is None
        assert rs.id == "rs_id"

    def test_location(self):
        rs = _make_resource_set()
        assert rs.location("domain") == "domain/uma/protection/resource_set/rs_id"
        assert rs.location("/domain/") == "/domain/uma/protection/resource_set/rs_id"
