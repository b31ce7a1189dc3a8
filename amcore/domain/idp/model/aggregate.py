from typing import Any

from amcore.domain.idp.model.value import UpdateIdentityProvider
from amcore.domain.shared.model.aggregate import Aggregate


class IdentityProvider(Aggregate):
    domain: str
    name: str
    type: str
    configuration: dict[str, Any] | None = None
    mappers: dict[str, str] | None = None
    role_mapper: dict[str, list[str]] | None = None
    external: bool = False

    def apply(self, update: UpdateIdentityProvider) -> None:
        self.name = update.name
        self.configuration = update.configuration
        self.mappers = update.mappers
        self.role_mapper = update.role_mapper
        self.touch()
