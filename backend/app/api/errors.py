# backend/app/api/errors.py
"""
Traducción de errores a respuestas HTTP.

Todas las respuestas de error comparten la forma
``{"success": false, "error": "...", "message": "..."?}``. El campo
``message`` solo se incluye en desarrollo y solo para fallos internos.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.exceptions import CategoryError, CategoryErrorKind

logger = logging.getLogger(__name__)

# Código HTTP por tipo de error de dominio
ERROR_STATUS_CODES = {
    CategoryErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    CategoryErrorKind.PARENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    CategoryErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    CategoryErrorKind.PERSISTENCE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_unmapped = set(CategoryErrorKind) - set(ERROR_STATUS_CODES)
if _unmapped:
    raise RuntimeError(f"CategoryErrorKind sin código HTTP: {sorted(kind.value for kind in _unmapped)}")


def error_body(error: str, message: Optional[str] = None) -> dict:
    body = {"success": False, "error": error}
    if message is not None and settings.is_development:
        body["message"] = message
    return body


async def category_error_handler(request: Request, exc: CategoryError) -> JSONResponse:
    status_code = ERROR_STATUS_CODES[exc.kind]
    return JSONResponse(status_code=status_code, content=error_body(exc.message, exc.detail))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Errores de validación de Pydantic: 400 con el primer problema encontrado."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
        error = f"{location}: {first.get('msg')}" if location else first.get("msg")
    else:
        error = "Invalid request"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_body(error))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        error = "Endpoint not found"
    else:
        error = str(exc.detail)
    return JSONResponse(status_code=exc.status_code, content=error_body(error), headers=getattr(exc, "headers", None))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"❌ ERROR no controlado en {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Server error", str(exc)),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Registra todos los manejadores de error en la aplicación."""
    app.add_exception_handler(CategoryError, category_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
