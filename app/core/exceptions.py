# app/core/exceptions.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

log = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for every error surfaced to API callers"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(ServiceError):
    """Requested entity or aggregate does not exist"""
    status_code = 404


class ValidationFailed(ServiceError):
    """Input violates a required-field or cross-reference constraint"""
    status_code = 400


class StoreUnavailable(ServiceError):
    """The persistence layer failed or timed out"""
    status_code = 500


class ConflictFailed(ServiceError):
    """A uniqueness constraint was violated"""
    status_code = 409


class AuthenticationFailed(ServiceError):
    status_code = 401


async def service_error_handler(request: Request, exc: ServiceError):
    if exc.status_code >= 500:
        log.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = [
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"detail": "; ".join(errors)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
