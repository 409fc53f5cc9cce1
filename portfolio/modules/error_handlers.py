"""
Global Error Translation

Maps typed failures raised anywhere below the endpoints to HTTP responses
with a uniform JSON envelope.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from portfolio.modules.exceptions import (
    AccessDeniedError,
    ConflictError,
    IdentityProviderError,
    NotFoundError,
)

logger = logging.getLogger("portfolio.errors")


def error_details(request: Request, message: str, details: Any) -> Dict[str, Any]:
    return {
        "timestamp": datetime.now(timezone.utc).replace(tzinfo=None).isoformat(),
        "message": message,
        "details": details,
        "path": request.url.path,
    }


def validation_errors(errors) -> Dict[str, str]:
    """Flatten pydantic errors into a field -> message mapping."""
    fields = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(loc) or "request"
        fields[field] = error.get("msg", "Invalid value")
    return fields


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content=error_details(request, str(exc), "Resource not found"),
    )


async def handle_access_denied(request: Request, exc: AccessDeniedError) -> JSONResponse:
    logger.info(f"Access denied on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=403,
        content=error_details(request, "Access denied", str(exc)),
    )


async def handle_conflict(request: Request, exc: ConflictError) -> JSONResponse:
    return JSONResponse(
        status_code=409,
        content=error_details(request, str(exc), "Resource already exists"),
    )


async def handle_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder(
            error_details(request, "Validation failed", validation_errors(exc.errors()))
        ),
    )


async def handle_identity_provider(request: Request, exc: IdentityProviderError) -> JSONResponse:
    logger.error(f"Keycloak integration error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=400,
        content={
            "error": "Registration failed",
            "message": str(exc),
            "type": "keycloak_error",
        },
    )


async def handle_unclassified(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=error_details(request, str(exc), "An error occurred"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(AccessDeniedError, handle_access_denied)
    app.add_exception_handler(ConflictError, handle_conflict)
    app.add_exception_handler(RequestValidationError, handle_validation)
    app.add_exception_handler(IdentityProviderError, handle_identity_provider)
    app.add_exception_handler(Exception, handle_unclassified)
