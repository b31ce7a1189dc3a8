from collections.abc import Mapping
from typing import Any, List
from uuid import uuid4

import logfire

from amcore.domain.idp.model.aggregate import IdentityProvider
from amcore.domain.idp.model.value import NewIdentityProvider, UpdateIdentityProvider
from amcore.domain.idp.port.client_reader import ClientReader
from amcore.domain.idp.port.repository import IdentityProviderRepository
from amcore.domain.secdomain.service.reloader import DomainReloader
from amcore.domain.shared.boundary import technical_boundary
from amcore.domain.shared.error import IdentityProviderInUseError, IdentityProviderNotFoundError
from amcore.domain.shared.model.aggregate import utc_now
from amcore.domain.shared.port.unit_of_work import UnitOfWork
from amcore.domain.shared.service import Service
from amcore.domain.shared.validation import validate_payload


class IdentityProviderService(Service):
    identity_provider_repo: IdentityProviderRepository
    client_reader: ClientReader
    domain_reloader: DomainReloader
    uow: UnitOfWork

    async def find_by_id(self, identity_provider_id: str) -> IdentityProvider | None:
        """Look up a provider; absence is a valid result, not an error."""
        self.logger.debug("Find identity provider by ID: %s", identity_provider_id)
        with technical_boundary(
            self.logger,
            "An error occurs while trying to find an identity provider using its ID: %s",
            identity_provider_id,
        ):
            return await self.identity_provider_repo.get(identity_provider_id)

    async def find_by_domain(self, domain: str) -> List[IdentityProvider]:
        self.logger.debug("Find identity providers by domain: %s", domain)
        with technical_boundary(
            self.logger, "An error occurs while trying to find identity providers by domain"
        ):
            return await self.identity_provider_repo.list_by_domain(domain)

    async def create(
        self, domain: str, payload: Mapping[str, Any] | NewIdentityProvider | None
    ) -> IdentityProvider:
        new = validate_payload(NewIdentityProvider, payload)
        self.logger.debug("Create a new identity provider %s for domain %s", new.name, domain)

        now = utc_now()
        identity_provider = IdentityProvider(
            id=str(uuid4()),
            domain=domain,
            name=new.name,
            type=new.type,
            configuration=new.configuration,
            external=new.external,
            created_at=now,
            updated_at=now,
        )
        with (
            logfire.span("CreateIdentityProvider", domain=domain, type=new.type),
            technical_boundary(
                self.logger, "An error occurs while trying to create an identity provider"
            ),
        ):
            created = await self.identity_provider_repo.create(identity_provider)
            await self.uow.commit()

        # only reached once the write is durable
        self.domain_reloader.reload(domain)
        return created

    async def update(
        self,
        domain: str,
        identity_provider_id: str,
        payload: Mapping[str, Any] | UpdateIdentityProvider | None,
    ) -> IdentityProvider:
        update = validate_payload(UpdateIdentityProvider, payload)
        self.logger.debug("Update an identity provider %s for domain %s", identity_provider_id, domain)

        with (
            logfire.span("UpdateIdentityProvider", domain=domain, id=identity_provider_id),
            technical_boundary(
                self.logger, "An error occurs while trying to update an identity provider"
            ),
        ):
            identity_provider = await self.identity_provider_repo.get(identity_provider_id)
            if identity_provider is None:
                raise IdentityProviderNotFoundError(identity_provider_id)

            identity_provider.apply(update)
            updated = await self.identity_provider_repo.update(identity_provider)
            await self.uow.commit()

        self.domain_reloader.reload(domain)
        return updated

    async def delete(self, identity_provider_id: str) -> None:
        """Delete a provider that no client references anymore. Does not reload the domain."""
        self.logger.debug("Delete identity provider %s", identity_provider_id)

        with (
            logfire.span("DeleteIdentityProvider", id=identity_provider_id),
            technical_boundary(
                self.logger,
                "An error occurs while trying to delete identity provider: %s",
                identity_provider_id,
            ),
        ):
            identity_provider = await self.identity_provider_repo.get(identity_provider_id)
            if identity_provider is None:
                raise IdentityProviderNotFoundError(identity_provider_id)

            references = await self.client_reader.count_by_identity_provider(identity_provider_id)
            if references > 0:
                raise IdentityProviderInUseError(identity_provider_id, references)

            await self.identity_provider_repo.delete(identity_provider_id)
            await self.uow.commit()
