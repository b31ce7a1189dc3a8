from dishka import AsyncContainer, from_context, make_async_container

from amcore.config import Config
from amcore.domain.idp.util.di.provider import IdpProvider
from amcore.domain.uma.util.di.provider import UmaProvider
from amcore.infrastructure.event.di import EventProvider
from amcore.infrastructure.persistence.di import PersistenceProvider
from amcore.util.di.base import Provider
from amcore.util.di.scope import Scope


class ConfigProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)


def create_container(config: Config | None = None) -> AsyncContainer:
    """Build the application container.

    Open a unit of work per lifecycle operation:

        async with container(scope=Scope.UOW) as uow:
            service = await uow.get(IdentityProviderService)
    """
    if config is None:
        # Pydantic Settings populates from env vars at runtime
        config = Config()  # type: ignore[call-arg]

    return make_async_container(
        ConfigProvider(),
        PersistenceProvider(),
        EventProvider(),
        UmaProvider(),
        IdpProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
