from fastapi import Request
from starlette.exceptions import HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.status import HTTP_422_UNPROCESSABLE_ENTITY, HTTP_500_INTERNAL_SERVER_ERROR
from loguru import logger
from app.errors.exceptions import ServiceUnavailable

def http_exception_handler(request: Request, exc: HTTPException):
    content = {"error": exc.detail}
    if isinstance(exc, ServiceUnavailable):
        content["retryAfter"] = exc.retry_after
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=exc.headers,
    )

def generic_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unexpected error on {request.method} {request.url.path}: {exc!r}")
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )

def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Render request body validation failures.

    Only a body that is not a JSON object reaches this handler, since every
    InterviewRequest field is optional.
    """
    logger.warning(f"Invalid request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": "Invalid request body", "details": jsonable_encoder(exc.errors())},
    )
