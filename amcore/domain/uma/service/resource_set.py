from collections.abc import Mapping
from typing import Any, List
from uuid import uuid4

import logfire

from amcore.domain.shared.boundary import technical_boundary
from amcore.domain.shared.error import ResourceSetNotFoundError
from amcore.domain.shared.model.aggregate import utc_now
from amcore.domain.shared.port.unit_of_work import UnitOfWork
from amcore.domain.shared.service import Service
from amcore.domain.shared.validation import validate_payload
from amcore.domain.uma.model.aggregate import ResourceSet
from amcore.domain.uma.model.value import ResourceSetPayload
from amcore.domain.uma.port.repository import ResourceSetRepository

RawPayload = Mapping[str, Any] | ResourceSetPayload | None


class ResourceSetService(Service):
    resource_set_repo: ResourceSetRepository
    uow: UnitOfWork

    async def list(self, domain: str, client_id: str, user_id: str) -> List[ResourceSet]:
        self.logger.debug(
            "Listing resource sets for domain %s, client %s, user %s", domain, client_id, user_id
        )
        with technical_boundary(
            self.logger,
            "An error occurs while trying to list resource sets by domain %s, client %s and user %s",
            domain,
            client_id,
            user_id,
        ):
            return await self.resource_set_repo.list_by_owner(domain, client_id, user_id)

    async def create(
        self, domain: str, client_id: str, user_id: str, payload: RawPayload
    ) -> ResourceSet:
        body = validate_payload(ResourceSetPayload, payload)
        self.logger.debug("Creating resource set for domain %s, client %s", domain, client_id)

        now = utc_now()
        resource_set = ResourceSet(
            id=str(uuid4()),
            domain=domain,
            client_id=client_id,
            user_id=user_id,
            resource_scopes=body.resource_scopes,
            name=body.name,
            description=body.description,
            icon_uri=body.icon_uri,
            type=body.type,
            created_at=now,
            updated_at=now,
        )
        with (
            logfire.span("CreateResourceSet", domain=domain, client_id=client_id),
            technical_boundary(self.logger, "An error occurs while trying to create a resource set"),
        ):
            created = await self.resource_set_repo.create(resource_set)
            await self.uow.commit()
            return created

    async def get(
        self, domain: str, client_id: str, user_id: str, resource_id: str
    ) -> ResourceSet:
        with technical_boundary(
            self.logger,
            "An error occurs while trying to find resource set %s",
            resource_id,
        ):
            resource_set = await self.resource_set_repo.get(domain, client_id, user_id, resource_id)
        if resource_set is None:
            raise ResourceSetNotFoundError(resource_id)
        return resource_set

    async def update(
        self,
        domain: str,
        client_id: str,
        user_id: str,
        resource_id: str,
        payload: RawPayload,
    ) -> ResourceSet:
        body = validate_payload(ResourceSetPayload, payload)
        self.logger.debug("Updating resource set %s for domain %s", resource_id, domain)

        with logfire.span("UpdateResourceSet", domain=domain, resource_id=resource_id):
            resource_set = await self.get(domain, client_id, user_id, resource_id)
            resource_set.apply(body)
            with technical_boundary(
                self.logger,
                "An error occurs while trying to update resource set %s",
                resource_id,
            ):
                updated = await self.resource_set_repo.update(resource_set)
                await self.uow.commit()
                return updated

    async def delete(self, domain: str, client_id: str, user_id: str, resource_id: str) -> None:
        self.logger.debug("Deleting resource set %s for domain %s", resource_id, domain)

        with logfire.span("DeleteResourceSet", domain=domain, resource_id=resource_id):
            await self.get(domain, client_id, user_id, resource_id)
            with technical_boundary(
                self.logger,
                "An error occurs while trying to delete resource set %s",
                resource_id,
            ):
                await self.resource_set_repo.delete(domain, client_id, user_id, resource_id)
                await self.uow.commit()
