# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, g, request
from werkzeug.exceptions import HTTPException

from userservice.domain.users.codes import ResultCode
from userservice.interfaces.http.envelope import failure_response
from userservice.shared.errors.base import AppError
from userservice.shared.logging import logger


def configure_error_handling(app: Flask, *, debug_mode: bool = False) -> None:
    """Last line of defence: anything a view lets escape becomes a FAIL envelope."""

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        logger.warning(
            f"Unhandled application error {exc.code} on {request.method} {request.path}"
        )
        status = exc.status if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR else HTTPStatus.OK
        return failure_response(ResultCode.FAIL, status=status)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        return exc

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        user_id = getattr(g, "user_id", None)
        if debug_mode:
            logger.opt(exception=exc).error(
                f"Unhandled exception: {request.method} {request.path} "
                f"user={user_id}, query={dict(request.args)}, body_size={len(request.data)}"
            )
        else:
            logger.error(f"Error: {type(exc).__name__} on {request.method} {request.path}")
        return failure_response(ResultCode.FAIL, status=HTTPStatus.INTERNAL_SERVER_ERROR)


__all__ = ["configure_error_handling"]
