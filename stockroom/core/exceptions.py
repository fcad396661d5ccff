"""Application-level exceptions and FastAPI exception handlers."""


import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from stockroom.core.config import settings

logger = logging.getLogger(__name__)

class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = 500, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)

    def extra(self) -> dict:
        """Additional keys merged into the error body."""
        return {}

class NotFoundError(AppException):
    def __init__(self, entity: str, entity_id: str | None = None):
        self.entity = entity
        self.entity_id = entity_id
        msg = f"{entity} not found" if not entity_id else f"{entity} '{entity_id}' not found"
        super().__init__(msg, status_code=404, code="NOT_FOUND")

class ValidationError(AppException):
    """One or more submitted fields failed validation.

    ``fields`` maps the attribute name (``name``, ``supplier_id``...) to a
    human-readable message.
    """

    def __init__(self, fields: dict[str, str], message: str | None = None):
        self.fields = fields
        if message is None:
            message = "; ".join(f"{k}: {v}" for k, v in fields.items()) or "Invalid input"
        super().__init__(message, status_code=400, code="VALIDATION_ERROR")

    def extra(self) -> dict:
        return {"fields": self.fields}

class ConflictError(AppException):
    def __init__(self, message: str):
        super().__init__(message, status_code=400, code="CONFLICT")

class SupplierInUseError(ConflictError):
    """Raised when deleting a supplier that still has products."""

    def __init__(self, product_count: int):
        self.product_count = product_count
        super().__init__(
            f"This supplier has {product_count} product(s). "
            "Please delete all products first."
        )

    def extra(self) -> dict:
        return {"productCount": self.product_count}

class InternalError(AppException):
    """Store or other unexpected failure; ``detail`` is only exposed in development."""

    def __init__(self, message: str = "An unexpected error occurred", detail: str | None = None):
        self.detail = detail
        super().__init__(message, status_code=500, code="INTERNAL_ERROR")

    def extra(self) -> dict:
        if settings.is_development and self.detail:
            return {"detail": self.detail}
        return {}

# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def _error_body(code: str, message: str, **extra) -> dict:
    return {"error": {"code": code, "message": message, **extra}}

def register_exception_handlers(app: FastAPI) -> None:
    """Attach all custom exception handlers to the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.code, exc.message, **exc.extra()),
        )

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content=_error_body("NOT_FOUND", "Resource not found"),
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        extra = {"detail": str(exc)} if settings.is_development else {}
        return JSONResponse(
            status_code=500,
            content=_error_body("INTERNAL_ERROR", "An unexpected error occurred", **extra),
        )
