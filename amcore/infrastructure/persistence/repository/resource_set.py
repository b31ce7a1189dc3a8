from typing import List

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from amcore.domain.uma.model.aggregate import ResourceSet
from amcore.domain.uma.port.repository import ResourceSetRepository
from amcore.infrastructure.persistence.mappers.resource_set import (
    resource_set_to_dict,
    row_to_resource_set,
)
from amcore.infrastructure.persistence.tables import resource_sets_table


class SQLAlchemyResourceSetRepository(ResourceSetRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_by_owner(self, domain: str, client_id: str, user_id: str) -> List[ResourceSet]:
        stmt = (
            select(resource_sets_table)
            .where(
                resource_sets_table.c.domain == domain,
                resource_sets_table.c.client_id == client_id,
                resource_sets_table.c.user_id == user_id,
            )
            .order_by(resource_sets_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_resource_set(dict(r)) for r in result.mappings().all()]

    async def get(
        self, domain: str, client_id: str, user_id: str, resource_id: str
    ) -> ResourceSet | None:
        stmt = select(resource_sets_table).where(
            resource_sets_table.c.id == resource_id,
            resource_sets_table.c.domain == domain,
            resource_sets_table.c.client_id == client_id,
            resource_sets_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_resource_set(dict(row)) if row else None

    async def create(self, resource_set: ResourceSet) -> ResourceSet:
        await self.session.execute(
            insert(resource_sets_table).values(**resource_set_to_dict(resource_set))
        )
        await self.session.flush()
        return resource_set

    async def update(self, resource_set: ResourceSet) -> ResourceSet:
        values = resource_set_to_dict(resource_set)
        # ownership columns are part of the key, never rewritten
        for key in ("id", "domain", "client_id", "user_id", "created_at"):
            values.pop(key)
        stmt = (
            update(resource_sets_table)
            .where(
                resource_sets_table.c.id == resource_set.id,
                resource_sets_table.c.domain == resource_set.domain,
                resource_sets_table.c.client_id == resource_set.client_id,
                resource_sets_table.c.user_id == resource_set.user_id,
            )
            .values(**values)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return resource_set

    async def delete(
        self, domain: str, client_id: str, user_id: str, resource_id: str
    ) -> None:
        await self.session.execute(
            delete(resource_sets_table).where(
                resource_sets_table.c.id == resource_id,
                resource_sets_table.c.domain == domain,
                resource_sets_table.c.client_id == client_id,
                resource_sets_table.c.user_id == user_id,
            )
        )
        await self.session.flush()
