"""
Global error handlers.

* Request validation failures are answered with HTTP 400 and the
  list of field errors, under ``{"message": "Invalid data", "errors": [...]}``.
  When only path parameters failed (an id such as ``/schedules/monday``)
  the addressed record cannot exist, so the answer is 404 instead.
* ``DuplicateRecordError`` from the store becomes HTTP 409.
* Any other unhandled exception is logged and answered with a
  generic HTTP 500 message.

``HTTPException`` raised by handlers (404 for missing records) keeps
FastAPI's default ``{"detail": ...}`` body.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from class_portal_api.app.core.exceptions import DuplicateRecordError


logger = logging.getLogger(__name__)


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_exc_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        if errors and all(err["loc"] and err["loc"][0] == "path" for err in errors):
            return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Not found"})
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid data", "errors": jsonable_encoder(errors)},
        )

    @app.exception_handler(DuplicateRecordError)
    async def duplicate_exc_handler(request: Request, exc: DuplicateRecordError) -> JSONResponse:
        logger.info("Rejected duplicate on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"message": str(exc)})

    @app.exception_handler(Exception)
    async def unhandled_exc_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )
