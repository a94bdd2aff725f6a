from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from tire_pickup.Core.Exceptions.errors import PickupError


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def pickup_error_handler(request: Request, exc: PickupError) -> JSONResponse:
    logger.debug(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return _error(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed JSON and wrong body shapes are both plain 400s for API clients
    if any(err.get("type") == "json_invalid" for err in exc.errors()):
        return _error(400, "Invalid JSON body")
    return _error(400, "Invalid request body")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error(exc.status_code, str(exc.detail))


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers so every error response has the `{"error": ...}` shape."""
    app.add_exception_handler(PickupError, pickup_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
