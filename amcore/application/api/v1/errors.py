"""Maps amcore errors to HTTPException responses for the transport edge."""

from typing import Any

from fastapi import HTTPException

from amcore.domain.shared.error import (
    AMError,
    ConflictError,
    DomainError,
    InfrastructureError,
    InvalidRequestError,
    NotFoundError,
    TechnicalError,
)

DOMAIN_ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    InvalidRequestError: 400,
    NotFoundError: 404,
    ConflictError: 409,
}


def _domain_status(error: DomainError) -> int:
    for error_type, status_code in DOMAIN_ERROR_STATUS_MAP.items():
        if isinstance(error, error_type):
            return status_code
    return 400


def map_am_error(error: AMError) -> HTTPException:
    """Map an amcore error to an HTTPException.

    TechnicalError keeps its cause out of the response body.
    """
    detail: dict[str, Any] = {
        "code": error.code,
        "message": error.message,
    }

    if isinstance(error, DomainError):
        if isinstance(error, InvalidRequestError) and error.field is not None:
            detail["field"] = error.field
        return HTTPException(status_code=_domain_status(error), detail=detail)

    if isinstance(error, TechnicalError):
        return HTTPException(status_code=500, detail=detail)

    if isinstance(error, InfrastructureError):
        return HTTPException(status_code=503, detail=detail)

    return HTTPException(status_code=500, detail=detail)
