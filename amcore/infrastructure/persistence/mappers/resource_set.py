from typing import Any, Dict

from amcore.domain.uma.model.aggregate import ResourceSet
from amcore.infrastructure.persistence.mappers.common import as_utc


def row_to_resource_set(row: Dict[str, Any]) -> ResourceSet:
    return ResourceSet(
        id=row["id"],
        domain=row["domain"],
        client_id=row["client_id"],
        user_id=row["user_id"],
        resource_scopes=list(row["resource_scopes"] or []),
        name=row.get("name"),
        description=row.get("description"),
        icon_uri=row.get("icon_uri"),
        type=row.get("type"),
        created_at=as_utc(row["created_at"]),
        updated_at=as_utc(row["updated_at"]),
    )


def resource_set_to_dict(resource_set: ResourceSet) -> Dict[str, Any]:
    return {
        "id": resource_set.id,
        "domain": resource_set.domain,
        "client_id": resource_set.client_id,
        "user_id": resource_set.user_id,
        "resource_scopes": list(resource_set.resource_scopes),
        "name": resource_set.name,
        "description": resource_set.description,
        "icon_uri": resource_set.icon_uri,
        "type": resource_set.type,
        "created_at": resource_set.created_at,
        "updated_at": resource_set.updated_at,
    }
