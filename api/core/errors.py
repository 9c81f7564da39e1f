"""
Error normalization for the whole API.

Every failure leaves the app as JSON `{"msg": "..."}`:
- services raise `fastapi.HTTPException(status_code, detail)`
- request parsing errors (path/query/body types, missing keys) become 400
- database constraint errors are translated by SQLSTATE class
- anything else is logged and becomes 500
"""

from __future__ import annotations

import logging
from http import HTTPStatus

import asyncpg
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# Largest value a Postgres INT column (and an asyncpg int4 argument) accepts.
PG_INT_MAX = 2_147_483_647

BAD_REQUEST = "Bad request"
ENTRY_NOT_FOUND = "Entry not found"

# Messages used when Starlette raises with its default reason phrase.
_DEFAULT_MESSAGES = {
    status.HTTP_404_NOT_FOUND: "Path not found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method not allowed",
}


def error_response(status_code: int, msg: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"msg": msg})


def _message_for(exc: StarletteHTTPException) -> str:
    detail = exc.detail
    try:
        phrase = HTTPStatus(exc.status_code).phrase
    except ValueError:
        phrase = None
    if detail is None or detail == phrase:
        return _DEFAULT_MESSAGES.get(exc.status_code, phrase or "Error")
    return str(detail)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_response(exc.status_code, _message_for(exc))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("request_invalid path=%s errors=%s", request.url.path, len(exc.errors()))
    return error_response(status.HTTP_400_BAD_REQUEST, BAD_REQUEST)


async def foreign_key_violation_handler(
    request: Request, exc: asyncpg.exceptions.ForeignKeyViolationError
) -> JSONResponse:
    logger.info("foreign_key_violation path=%s constraint=%s", request.url.path, getattr(exc, "constraint_name", None))
    return error_response(status.HTTP_404_NOT_FOUND, ENTRY_NOT_FOUND)


async def unique_violation_handler(
    request: Request, exc: asyncpg.exceptions.UniqueViolationError
) -> JSONResponse:
    logger.info("unique_violation path=%s constraint=%s", request.url.path, getattr(exc, "constraint_name", None))
    return error_response(status.HTTP_400_BAD_REQUEST, "Already exists")


async def data_error_handler(request: Request, exc: asyncpg.exceptions.DataError) -> JSONResponse:
    # SQLSTATE class 22: invalid text representation, numeric overflow, ...
    logger.info("data_error path=%s sqlstate=%s", request.url.path, getattr(exc, "sqlstate", None))
    return error_response(status.HTTP_400_BAD_REQUEST, BAD_REQUEST)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error method=%s path=%s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def install(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(asyncpg.exceptions.ForeignKeyViolationError, foreign_key_violation_handler)
    app.add_exception_handler(asyncpg.exceptions.UniqueViolationError, unique_violation_handler)
    app.add_exception_handler(asyncpg.exceptions.DataError, data_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
