"""Centralized error transformation for API routes.

Maps Orbit errors (domain and infrastructure) to HTTPException responses.
"""

from typing import Any

from fastapi import HTTPException

from orbit.domain.shared.error import (
    DomainError,
    InfrastructureError,
    NotFoundError,
    OrbitError,
    ValidationError,
)

DOMAIN_ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    NotFoundError: 404,
    ValidationError: 422,
}


def map_orbit_error(error: OrbitError) -> HTTPException:
    """Map an Orbit error to an HTTPException.

    Args:
        error: The Orbit error to map.

    Returns:
        HTTPException with appropriate status code and detail.
    """
    detail: dict[str, Any] = {
        "code": error.code,
        "message": error.message,
    }

    if isinstance(error, InfrastructureError):
        # Infrastructure errors → 503 Service Unavailable
        return HTTPException(status_code=503, detail=detail)

    if isinstance(error, DomainError):
        status_code = DOMAIN_ERROR_STATUS_MAP.get(type(error), 400)
        if isinstance(error, ValidationError) and error.field is not None:
            detail["field"] = error.field
        return HTTPException(status_code=status_code, detail=detail)

    # Fallback for unknown OrbitError subclasses
    return HTTPException(status_code=500, detail=detail)
