from pydantic import Field, field_validator

from amcore.domain.shared.model.value import Payload


class ResourceSetPayload(Payload):
    """Body of a resource set registration or update request."""

    resource_scopes: list[str] = Field(min_length=1)
    name: str | None = None
    description: str | None = None
    icon_uri: str | None = None
    type: str | None = None

    @field_validator("resource_scopes")
    @classmethod
    def _distinct_scopes(cls, scopes: list[str]) -> list[str]:
        if any(not s for s in scopes):
            raise ValueError("scopes must not be blank")
        # ordered set: keep first occurrence
        return list(dict.fromkeys(scopes))
