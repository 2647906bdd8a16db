import logging
from fastapi import status
from fastapi.responses import JSONResponse
from fastapi.requests import Request

logger = logging.getLogger(__name__)

# ---------------------------
# Service (Business logic)
# ---------------------------

class BusinessError(Exception):
    """Base class for all business logic errors."""
    pass

class ServiceError(BusinessError):
    """Generic error for unexpected service or storage failures."""
    pass

class NotFoundError(BusinessError):
    """Raised when a requested resource does not exist."""
    pass

class ConflictError(BusinessError):
    """Raised when a resource already exists or conflicts with another resource."""
    pass

class PermissionDeniedError(BusinessError):
    """Raised when a user does not have permission to perform an action."""
    pass

class ValidationError(BusinessError):
    """Raised when business rule validation fails (e.g., invalid input)."""
    pass

class InconsistencyError(BusinessError):
    """Raised internally when a stored rollup diverges from its history.

    Recovered inside the service; never mapped to an HTTP response.
    """

    def __init__(self, user_id, differences: dict):
        self.user_id = user_id
        self.differences = differences
        fields = ", ".join(
            f"{name}: stored={stored} expected={expected}"
            for name, (stored, expected) in sorted(differences.items())
        )
        super().__init__(f"Rollup for user {user_id} diverged ({fields})")


# ---------------------------
# FastAPI Exception Handlers
# ---------------------------

def register_exception_handlers(app):
    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": str(exc)},
        )

    @app.exception_handler(ConflictError)
    async def conflict_handler(request: Request, exc: ConflictError):
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": str(exc)},
        )

    @app.exception_handler(PermissionDeniedError)
    async def permission_handler(request: Request, exc: PermissionDeniedError):
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={"detail": str(exc)},
        )

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError):
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": str(exc)},
        )

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        logger.error(f"Service error: {exc}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )
