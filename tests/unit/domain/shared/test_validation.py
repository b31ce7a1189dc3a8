import pytest

from amcore.domain.idp.model.value import NewIdentityProvider
from amcore.domain.shared.error import InvalidRequestError
from amcore.domain.shared.validation import validate_payload
from amcore.domain.uma.model.value import ResourceSetPayload


class TestValidatePayload:
    def test_parses_mapping(self):
        result = validate_payload(ResourceSetPayload, {"resource_scopes": ["scope"]})
        assert result.resource_scopes == ["scope"]

    def test_model_instance_passes_through(self):
        payload = ResourceSetPayload(resource_scopes=["scope"])
        assert validate_payload(ResourceSetPayload, payload) is payload

    def test_none_rejected(self):
        with pytest.raises(InvalidRequestError, match="required"):
            validate_payload(ResourceSetPayload, None)

    def test_non_mapping_rejected(self):
        with pytest.raises(InvalidRequestError, match="JSON object"):
            validate_payload(ResourceSetPayload, "resource_scopes")  # type: ignore[arg-type]

    def test_reports_failing_field(self):
        with pytest.raises(InvalidRequestError) as exc_info:
            validate_payload(ResourceSetPayload, {"resource_scopes": []})

        assert exc_info.value.field == "resource_scopes"
        assert exc_info.value.code == "invalid_request"

    def test_identity_provider_requires_type(self):
        with pytest.raises(InvalidRequestError) as exc_info:
            validate_payload(NewIdentityProvider, {"name": "corporate ldap"})

        assert exc_info.value.field == "type"
