from dishka import provide

from amcore.domain.shared.port.unit_of_work import UnitOfWork
from amcore.domain.uma.port.repository import ResourceSetRepository
from amcore.domain.uma.service.resource_set import ResourceSetService
from amcore.util.di.base import Provider


class UmaProvider(Provider):
    @provide
    def get_resource_set_service(
        self, resource_set_repo: ResourceSetRepository, uow: UnitOfWork
    ) -> ResourceSetService:
        return ResourceSetService(resource_set_repo=resource_set_repo, uow=uow)
