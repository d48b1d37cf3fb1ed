import logging
import uuid
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException

from beer_api.core.exceptions import NotFoundError

log = logging.getLogger("uvicorn")


# Generate a clean request id for every error response
def _rid():
    """Generates a unique request ID for tracing."""
    return uuid.uuid4().hex


# ----------- Exception Handlers (called by FastAPI) -----------

def not_found_exception_handler(request: Request, exc: NotFoundError):
    """Handles NotFoundError raised by the routers: bare 404, no body."""
    log.info(f"Not found on path {request.url.path}: {exc}")
    return Response(status_code=status.HTTP_404_NOT_FOUND)


def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handles HTTPException from FastAPI and Starlette routing (e.g., unknown path, 405)."""
    body = {
        "success": False,
        "error": {
            "code": "http_error",
            "message": exc.detail,
        },
        "request_id": _rid(),
    }
    return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))


def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handles Pydantic validation errors (422 Unprocessable Entity)."""
    body = {
        "success": False,
        "error": {
            "code": "validation_error",
            "message": "Invalid input data",
            "details": jsonable_encoder(exc.errors()),
        },
        "request_id": _rid(),
    }
    return JSONResponse(status_code=422, content=body)


def generic_exception_handler(request: Request, exc: Exception):
    """Handles all unhandled exceptions (500 Internal Server Error)."""
    log.exception(f"Unhandled exception on path: {request.url.path}")

    body = {
        "success": False,
        "error": {
            "code": "server_error",
            "message": "Internal Server Error",
        },
        "request_id": _rid(),
    }
    return JSONResponse(status_code=500, content=body)


# ----------- Registration Function -----------

def setup_exception_handlers(app: FastAPI):
    """Registers all custom exception handlers with the FastAPI application."""
    app.add_exception_handler(NotFoundError, not_found_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    return app
