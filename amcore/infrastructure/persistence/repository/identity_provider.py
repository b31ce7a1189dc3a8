from typing import List

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from amcore.domain.idp.model.aggregate import IdentityProvider
from amcore.domain.idp.port.repository import IdentityProviderRepository
from amcore.infrastructure.persistence.mappers.identity_provider import (
    identity_provider_to_dict,
    row_to_identity_provider,
)
from amcore.infrastructure.persistence.tables import identity_providers_table


class SQLAlchemyIdentityProviderRepository(IdentityProviderRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, identity_provider_id: str) -> IdentityProvider | None:
        stmt = select(identity_providers_table).where(
            identity_providers_table.c.id == identity_provider_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_identity_provider(dict(row)) if row else None

    async def list_by_domain(self, domain: str) -> List[IdentityProvider]:
        stmt = (
            select(identity_providers_table)
            .where(identity_providers_table.c.domain == domain)
            .order_by(identity_providers_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_identity_provider(dict(r)) for r in result.mappings().all()]

    async def create(self, identity_provider: IdentityProvider) -> IdentityProvider:
        row = identity_provider_to_dict(identity_provider)
        await self.session.execute(insert(identity_providers_table).values(**row))
        await self.session.flush()
        return identity_provider

    async def update(self, identity_provider: IdentityProvider) -> IdentityProvider:
        stmt = (
            update(identity_providers_table)
            .where(identity_providers_table.c.id == identity_provider.id)
            .values(
                name=identity_provider.name,
                configuration=identity_provider.configuration,
                mappers=identity_provider.mappers,
                role_mapper=identity_provider.role_mapper,
                updated_at=identity_provider.updated_at,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return identity_provider

    async def delete(self, identity_provider_id: str) -> None:
        await self.session.execute(
            delete(identity_providers_table).where(
                identity_providers_table.c.id == identity_provider_id
            )
        )
        await self.session.flush()
