from dishka import provide

from amcore.domain.idp.port.client_reader import ClientReader
from amcore.domain.idp.port.repository import IdentityProviderRepository
from amcore.domain.idp.service.identity_provider import IdentityProviderService
from amcore.domain.secdomain.service.reloader import DomainReloader
from amcore.domain.shared.port.unit_of_work import UnitOfWork
from amcore.util.di.base import Provider


class IdpProvider(Provider):
    @provide
    def get_identity_provider_service(
        self,
        identity_provider_repo: IdentityProviderRepository,
        client_reader: ClientReader,
        domain_reloader: DomainReloader,
        uow: UnitOfWork,
    ) -> IdentityProviderService:
        return IdentityProviderService(
            identity_provider_repo=identity_provider_repo,
            client_reader=client_reader,
            domain_reloader=domain_reloader,
            uow=uow,
        )
