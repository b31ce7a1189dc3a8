import logging

import pytest

from amcore.domain.shared.boundary import technical_boundary
from amcore.domain.shared.error import (
    IdentityProviderInUseError,
    NotFoundError,
    TechnicalError,
)

logger = logging.getLogger("tests.boundary")


class TestTechnicalBoundary:
    def test_classified_error_passes_unchanged(self):
        error = NotFoundError("missing")
        with pytest.raises(NotFoundError) as exc_info:
            with technical_boundary(logger, "lookup failed"):
                raise error
        assert exc_info.value is error

    def test_unclassified_error_is_wrapped_with_cause(self):
        boom = KeyError("secret-column")
        with pytest.raises(TechnicalError) as exc_info:
            with technical_boundary(logger, "delete of %s failed", "idp1"):
                raise boom

        assert exc_info.value.message == "delete of idp1 failed"
        assert exc_info.value.cause is boom
        assert exc_info.value.__cause__ is boom

    def test_nested_boundaries_wrap_once(self):
        boom = ValueError("bad row")
        with pytest.raises(TechnicalError) as exc_info:
            with technical_boundary(logger, "outer"):
                with technical_boundary(logger, "inner"):
                    raise boom

        assert exc_info.value.message == "inner"
        assert exc_info.value.cause is boom

    def test_conflict_passes_unchanged(self):
        with pytest.raises(IdentityProviderInUseError):
            with technical_boundary(logger, "delete failed"):
                raise IdentityProviderInUseError("idp1", references=2)

    def test_failure_is_logged(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.ERROR, logger="tests.boundary"):
            with pytest.raises(TechnicalError):
                with technical_boundary(logger, "update failed"):
                    raise RuntimeError("boom")

        assert "update failed" in caplog.text

    def test_no_error_is_transparent(self):
        with technical_boundary(logger, "noop"):
            value = 42
        assert value == 42
