from pydantic import Field

from amcore.domain.shared.model.aggregate import Aggregate
from amcore.domain.uma.model.value import ResourceSetPayload


class ResourceSet(Aggregate):
    """A protected resource registered by a client on behalf of a user."""

    domain: str
    client_id: str
    user_id: str
    resource_scopes: list[str] = Field(min_length=1)
    name: str | None = None
    description: str | None = None
    icon_uri: str | None = None
    type: str | None = None

    def apply(self, payload: ResourceSetPayload) -> None:
        """Overwrite the client-editable fields. Ownership and id never change."""
        self.resource_scopes = list(payload.resource_scopes)
        self.name = payload.name
        self.description = payload.description
        self.icon_uri = payload.icon_uri
        self.type = payload.type
        self.touch()

    def location(self, domain_path: str) -> str:
        return f"{domain_path.rstrip('/')}/uma/protection/resource_set/{self.id}"
