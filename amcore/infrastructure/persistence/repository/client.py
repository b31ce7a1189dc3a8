from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from amcore.domain.idp.port.client_reader import ClientReader
from amcore.infrastructure.persistence.tables import client_identity_providers_table


class SQLAlchemyClientReader(ClientReader):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def count_by_identity_provider(self, identity_provider_id: str) -> int:
        stmt = (
            select(func.count())
            .select_from(client_identity_providers_table)
            .where(client_identity_providers_table.c.identity_provider_id == identity_provider_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
