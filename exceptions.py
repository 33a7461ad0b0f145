# exceptions.py
# Every error leaves the API as {"message": "..."}.
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError, ResponseValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

logger = logging.getLogger(__name__)


def error_body(message: str) -> dict:
    return {"message": message}


def format_validation_errors(exc) -> str:
    """
    Flatten pydantic errors into one line, e.g. "amount: Input should be a valid integer".

    The leading "body" or "response" segment of each location is dropped.
    """
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        message = error.get("msg", "invalid request")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "invalid request body"


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(status_code=400, content=error_body(format_validation_errors(exc)))


async def response_validation_exception_handler(
    request: Request, exc: ResponseValidationError
) -> JSONResponse:
    # a stored row that does not decode into an Expense
    message = format_validation_errors(exc)
    logger.error("Row decode error on %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=500, content=error_body(message))


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def database_exception_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    # surface the driver's own message, not SQLAlchemy's wrapper text
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        message = str(exc.orig).strip()
    else:
        message = str(exc)
    logger.error("Database error on %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=500, content=error_body(message))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=error_body("internal server error"))


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ResponseValidationError, response_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
