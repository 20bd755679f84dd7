"""Error hierarchy for Orbit.

Error layers:
- OrbitError: Base class for all Orbit errors
- DomainError: Business rule violations, lookups of missing planets (4xx responses)
- InfrastructureError: System-level failures like upstream issues (503 responses)

These errors are mapped to HTTP responses by map_orbit_error in the v1 API.
"""


class OrbitError(Exception):
    """Base class for all Orbit errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (business logic violations - typically 4xx)
# =============================================================================


class DomainError(OrbitError):
    """Base class for domain/business errors."""


class NotFoundError(DomainError):
    """Resource not found."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


# =============================================================================
# Infrastructure Errors (system-level failures - typically 503)
# =============================================================================


class InfrastructureError(OrbitError):
    """Base class for infrastructure/system errors."""


class UpstreamUnavailableError(InfrastructureError):
    """Upstream catalog is unreachable or returned a malformed page.

    Fatal to an ingestion run: the traversal stops at the failing page.
    """
