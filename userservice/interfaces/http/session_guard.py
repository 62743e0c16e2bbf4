# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import g, request

from userservice.application.result import OutcomeKind
from userservice.application.services.session_manager import SessionManager
from userservice.domain.users.entities import Session
from userservice.interfaces.http.envelope import render_outcome
from userservice.shared.logging import logger


def extract_token(header: str) -> str:
    token = request.headers.get(header, "").strip()
    if token:
        return token
    auth = request.headers.get("Authorization", "")
    if auth.startswith("Bearer "):
        return auth[7:].strip()
    return ""


def session_required(
    sessions: SessionManager, header: str = "token"
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Wrap a view so it only runs for a caller holding a live session.

    The resolved session lands on ``flask.g.session`` (and ``g.user_id``).
    """

    def decorator(view: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(view)
        def inner(*args: Any, **kwargs: Any) -> Any:
            outcome = sessions.validate(extract_token(header))
            if not outcome.ok:
                if outcome.kind is OutcomeKind.BUSINESS_FAILURE:
                    logger.warning(
                        f"Session rejected on {request.method} {request.path} "
                        f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
                    )
                return render_outcome(outcome)

            session = outcome.data
            assert session is not None
            g.session = session
            g.user_id = session.account.id
            logger.debug(f"Session OK: user={session.account.id} {request.method} {request.path}")
            return view(*args, **kwargs)

        return inner

    return decorator


def current_session() -> Session:
    session = getattr(g, "session", None)
    if session is None:
        raise RuntimeError("current_session() used outside a session_required view")
    return session


__all__ = ["current_session", "extract_token", "session_required"]
