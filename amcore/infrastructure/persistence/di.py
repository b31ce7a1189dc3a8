from typing import AsyncIterable

from dishka import provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from amcore.config import Config
from amcore.domain.idp.port.client_reader import ClientReader
from amcore.domain.idp.port.repository import IdentityProviderRepository
from amcore.domain.shared.port.unit_of_work import UnitOfWork
from amcore.domain.uma.port.repository import ResourceSetRepository
from amcore.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
    create_tables,
)
from amcore.infrastructure.persistence.repository.client import SQLAlchemyClientReader
from amcore.infrastructure.persistence.repository.identity_provider import (
    SQLAlchemyIdentityProviderRepository,
)
from amcore.infrastructure.persistence.repository.resource_set import (
    SQLAlchemyResourceSetRepository,
)
from amcore.infrastructure.persistence.unit_of_work import SQLAlchemyUnitOfWork
from amcore.util.di.base import Provider
from amcore.util.di.scope import Scope


class PersistenceProvider(Provider):
    # APP-scoped factories
    @provide(scope=Scope.APP)
    async def get_engine(self, config: Config) -> AsyncIterable[AsyncEngine]:
        engine = create_db_engine(config.database)
        if config.database.auto_migrate:
            await create_tables(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    # UOW-scoped session (one per unit of work)
    @provide
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterable[AsyncSession]:
        async with session_factory() as session:
            yield session
            # nothing left to commit after a service commit or a rolled back one
            if session.in_transaction():
                await session.commit()

    uow = provide(SQLAlchemyUnitOfWork, provides=UnitOfWork)

    # UOW-scoped repositories
    resource_set_repo = provide(
        SQLAlchemyResourceSetRepository, provides=ResourceSetRepository
    )
    identity_provider_repo = provide(
        SQLAlchemyIdentityProviderRepository, provides=IdentityProviderRepository
    )
    client_reader = provide(SQLAlchemyClientReader, provides=ClientReader)
