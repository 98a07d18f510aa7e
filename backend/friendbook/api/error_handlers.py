import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from friendbook.core.errors import ErrorKind


logger = logging.getLogger(__name__)


def error_response(kind: ErrorKind) -> JSONResponse:
    return JSONResponse(status_code=kind.status_code, content=kind.envelope())


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning(
            "Validation error on %s: %s",
            request.url.path,
            exc.errors(),
            extra={"path": request.url.path, "error_code": ErrorKind.VALIDATION.value},
        )
        return error_response(ErrorKind.VALIDATION)

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=exc,
            extra={"path": request.url.path, "method": request.method, "error_code": ErrorKind.INTERNAL.value},
        )
        return error_response(ErrorKind.INTERNAL)
