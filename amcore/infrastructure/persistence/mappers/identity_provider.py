from typing import Any, Dict

from amcore.domain.idp.model.aggregate import IdentityProvider
from amcore.infrastructure.persistence.mappers.common import as_utc


def row_to_identity_provider(row: Dict[str, Any]) -> IdentityProvider:
    return IdentityProvider(
        id=row["id"],
        domain=row["domain"],
        name=row["name"],
        type=row["type"],
        configuration=row.get("configuration"),
        mappers=row.get("mappers"),
        role_mapper=row.get("role_mapper"),
        external=bool(row.get("external", False)),
        created_at=as_utc(row["created_at"]),
        updated_at=as_utc(row["updated_at"]),
    )


def identity_provider_to_dict(identity_provider: IdentityProvider) -> Dict[str, Any]:
    return identity_provider.model_dump(
        include={
            "id",
            "domain",
            "name",
            "type",
            "configuration",
            "mappers",
            "role_mapper",
            "external",
            "created_at",
            "updated_at",
        }
    )
