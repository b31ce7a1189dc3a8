"""Error hierarchy for amcore.

Error layers:
- AMError: Base class for all amcore errors
- DomainError: Classified business errors callers can act on (4xx responses)
- InfrastructureError: System-level failures like storage/network issues (5xx responses)

These errors are mapped to HTTP responses by map_am_error in the api layer.
"""


class AMError(Exception):
    """Base class for all amcore errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (classified, meaningful to callers - typically 4xx)
# =============================================================================


class DomainError(AMError):
    """Base class for domain/business errors."""


class InvalidRequestError(DomainError):
    """Payload failed structural validation. No I/O was attempted."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="invalid_request")
        self.field = field


class NotFoundError(DomainError):
    """The addressed entity does not exist under the given key."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        *,
        entity_kind: str | None = None,
        key: str | None = None,
    ) -> None:
        super().__init__(message, code=code)
        self.entity_kind = entity_kind
        self.key = key


class ResourceSetNotFoundError(NotFoundError):
    def __init__(self, resource_id: str) -> None:
        super().__init__(
            f"Resource set [{resource_id}] can not be found.",
            code="resource_set_not_found",
            entity_kind="resource_set",
            key=resource_id,
        )


class IdentityProviderNotFoundError(NotFoundError):
    def __init__(self, identity_provider_id: str) -> None:
        super().__init__(
            f"Identity provider [{identity_provider_id}] can not be found.",
            code="identity_provider_not_found",
            entity_kind="identity_provider",
            key=identity_provider_id,
        )


class ConflictError(DomainError):
    """Operation conflicts with the current state of related entities."""


class IdentityProviderInUseError(ConflictError):
    """Identity provider is still referenced by one or more clients."""

    def __init__(self, identity_provider_id: str, references: int) -> None:
        super().__init__(
            "You can't delete an identity provider with existing clients.",
            code="identity_provider_in_use",
        )
        self.identity_provider_id = identity_provider_id
        self.references = references


# =============================================================================
# Infrastructure Errors (system-level failures - typically 5xx)
# =============================================================================


class InfrastructureError(AMError):
    """Base class for infrastructure/system errors."""


class TechnicalError(InfrastructureError):
    """Unclassified collaborator failure.

    The message is safe to show to callers; the original exception is kept
    on ``cause`` (and chained as ``__cause__``) for diagnostics.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message, code="technical_error")
        self.cause = cause


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
