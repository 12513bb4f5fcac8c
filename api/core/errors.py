"""
Request-shape error handling.

FastAPI reports body and path validation failures as `RequestValidationError`
(422 JSON by default). This service answers them with a 400 and a short
plain-text message instead. The messages belong to the feature packages and
are passed in by `api/main.py`.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


def _is_path_error(exc: RequestValidationError) -> bool:
    return any(err.get("loc", ())[:1] == ("path",) for err in exc.errors())


def request_validation_handler(
    *,
    body_message: str,
    path_message: str,
) -> Callable[[Request, RequestValidationError], Awaitable[PlainTextResponse]]:
    async def handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
        message = path_message if _is_path_error(exc) else body_message
        logger.info(
            "request_rejected method=%s path=%s errors=%s",
            request.method,
            request.url.path,
            len(exc.errors()),
        )
        return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)

    return handler


def install_handlers(app: FastAPI, *, body_message: str, path_message: str) -> None:
    app.add_exception_handler(
        RequestValidationError,
        request_validation_handler(body_message=body_message, path_message=path_message),
    )
