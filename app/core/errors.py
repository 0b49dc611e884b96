from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.exceptions import RequestValidationError
from starlette import status
import logging

logger = logging.getLogger("app.errors")

INVALID_INPUT_MESSAGE = "Invalid input parameters."
INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def not_found_handler(request: Request, exc):  # type: ignore
    if exc.status_code != status.HTTP_404_NOT_FOUND:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": "http_error", "detail": exc.detail},
        )
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": "not_found",
            "detail": f"No route for {request.method} {request.url.path}",
        },
    )


def validation_error_handler(request: Request, exc: RequestValidationError):  # type: ignore
    # Unparsable query values (e.g. amount=abc) share the converter's 400 contract
    logger.error(INVALID_INPUT_MESSAGE, extra={"errors": exc.errors()})
    return PlainTextResponse(INVALID_INPUT_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST)


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    logger.exception("unhandled exception")
    return PlainTextResponse(
        INTERNAL_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
