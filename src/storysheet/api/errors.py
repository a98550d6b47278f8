from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..errors import RemoteWriteError, ValidationError
from ..records import MISSING_FIELDS_MESSAGE

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "伺服器錯誤，無法儲存回應"


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed bodies (not JSON, not an object, non-string fields) get the same envelope.
    logger.debug("Rejected request body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"message": MISSING_FIELDS_MESSAGE}
    )


async def remote_write_error_handler(request: Request, exc: RemoteWriteError) -> JSONResponse:
    logger.error("Google Sheet append failed: %s", exc.message, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": SERVER_ERROR_MESSAGE, "error": exc.message},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(RemoteWriteError, remote_write_error_handler)
