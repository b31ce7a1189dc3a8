from typing import Any

from pydantic import Field

from amcore.domain.shared.model.value import Payload


class NewIdentityProvider(Payload):
    name: str = Field(min_length=1)
    type: str = Field(min_length=1)
    configuration: dict[str, Any] | None = None
    external: bool = False


class UpdateIdentityProvider(Payload):
    """Replaces the mutable settings of an identity provider.

    Settings missing from the body are cleared. type, domain and external are
    not part of this model, so a body carrying them cannot change them.
    """

    name: str = Field(min_length=1)
    configuration: dict[str, Any] | None = None
    mappers: dict[str, str] | None = None
    role_mapper: dict[str, list[str]] | None = None
