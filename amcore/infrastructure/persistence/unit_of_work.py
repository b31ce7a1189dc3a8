from sqlalchemy.ext.asyncio import AsyncSession

from amcore.domain.shared.port.unit_of_work import UnitOfWork


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        try:
            await self.session.commit()
        except Exception:
            # leaves the session usable and without an open transaction
            await self.session.rollback()
            raise
