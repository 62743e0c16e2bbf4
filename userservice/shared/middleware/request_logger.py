# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
import secrets
import time
from typing import Any

from flask import Flask, g, request

from userservice.shared.logging import (
    clear_correlation_id,
    get_correlation_id,
    logger,
    set_correlation_id,
)

_SENSITIVE_HEADERS = {"authorization", "cookie", "x-api-key", "x-auth-token"}
_SENSITIVE_PARAMS = {"password", "token", "key", "secret", "auth", "salt"}


def _get_client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()

    return request.remote_addr or "unknown"


def _get_user_id() -> int | None:
    return getattr(g, "user_id", None)


def sanitize_headers(headers: dict[str, str], extra: set[str] | None = None) -> dict[str, str]:
    sensitive = _SENSITIVE_HEADERS | {name.lower() for name in extra or ()}

    sanitized = {}
    for key, value in headers.items():
        if key.lower() in sensitive:
            sanitized[key] = f"<hashed:{hashlib.sha256(value.encode()).hexdigest()[:8]}>"
        else:
            sanitized[key] = value

    return sanitized


def sanitize_query_params(params: dict[str, Any]) -> dict[str, Any]:
    sanitized = {}
    for key, value in params.items():
        key_lower = key.lower()
        if any(sensitive in key_lower for sensitive in _SENSITIVE_PARAMS):
            sanitized[key] = "<redacted>"
        else:
            sanitized[key] = value

    return sanitized


def configure_request_logging(
    app: Flask, *, debug_mode: bool = False, session_header: str = "token"
) -> None:
    @app.before_request
    def _before_request() -> None:
        correlation_id = request.headers.get("X-Request-ID") or secrets.token_urlsafe(8)
        set_correlation_id(correlation_id)
        g.request_start_time = time.perf_counter()

        if debug_mode:
            headers = sanitize_headers(dict(request.headers), {session_header})
            query_params = sanitize_query_params(dict(request.args))
            logger.info(
                f"Request started: {request.method} {request.path} "
                f"from {_get_client_ip()}, query={query_params}, headers={headers}, "
                f"body_size={len(request.data)}"
            )
        else:
            logger.info(f"Request: {request.method} {request.path} from {_get_client_ip()}")

    @app.after_request
    def _after_request(response):
        start_time = getattr(g, "request_start_time", time.perf_counter())
        duration = time.perf_counter() - start_time
        logger.info(
            f"Response: {request.method} {request.path} "
            f"status={response.status_code}, duration={duration:.3f}s, user={_get_user_id()}"
        )
        response.headers.setdefault("X-Request-ID", get_correlation_id())
        return response

    @app.teardown_request
    def _teardown_request(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(
                f"Request error: {type(exc).__name__} on {request.method} {request.path}"
            )
        clear_correlation_id()


__all__ = ["configure_request_logging", "sanitize_headers", "sanitize_query_params"]
