from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette import status
from starlette.responses import JSONResponse

from api.dependencies.logger import logger
from core.errors import PersistenceError, ValidationError


async def validation_error_handler(_request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.message, "errors": jsonable_encoder(exc.errors)},
    )


async def request_validation_error_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    # malformed JSON never reaches the store
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Malformed request body", "errors": jsonable_encoder(exc.errors())},
    )


async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Storage unavailable"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(PersistenceError, persistence_error_handler)
