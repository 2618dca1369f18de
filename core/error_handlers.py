import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.errors import ClipboardError, NotFound, StorageFailure, Unauthorized, ValidationFailed

logger = logging.getLogger(__name__)

_HTTP_ERROR_CODES = {
    400: ValidationFailed.code,
    401: Unauthorized.code,
    404: NotFound.code,
}


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ClipboardError)
    async def clipboard_error_handler(request: Request, exc: ClipboardError):
        logger.warning(exc.message, extra={"error_code": exc.code, "path": request.url.path})
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        code = _HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
        logger.warning(f"HTTP {exc.status_code}: {exc.detail}", extra={"error_code": code, "path": request.url.path})
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": {"code": code, "message": str(exc.detail)}},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        error = ValidationFailed(details=_validation_details(exc))
        logger.warning(
            "Request validation failed",
            extra={"error_code": error.code, "path": request.url.path},
        )
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error.to_response())

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError):
        error = StorageFailure()
        logger.error(
            f"Storage error on {request.url.path}: {exc.__class__.__name__}",
            exc_info=exc,
            extra={"error_code": error.code, "path": request.url.path},
        )
        return JSONResponse(status_code=error.http_status, content=error.to_response())

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        error = ClipboardError()
        logger.error(
            f"Unhandled exception on {request.url.path}",
            exc_info=exc,
            extra={"error_code": error.code, "path": request.url.path},
        )
        return JSONResponse(status_code=error.http_status, content=error.to_response())


def _validation_details(exc: RequestValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(loc) for loc in err["loc"] if loc != "body"),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
