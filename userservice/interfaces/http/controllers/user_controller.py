# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from flask import Blueprint, Response, request

from userservice.application.services.session_manager import SessionManager
from userservice.application.use_cases.users.change_password import ChangePasswordUseCase
from userservice.application.use_cases.users.get_profile import GetProfileUseCase
from userservice.application.use_cases.users.login_user import LoginUserUseCase
from userservice.application.use_cases.users.register_user import RegisterUserUseCase
from userservice.domain.users.codes import ResultCode
from userservice.interfaces.http.dto.users import (
    ChangePasswordRequestDTO,
    LoginRequestDTO,
    LoginResponseDTO,
    ProfileQueryDTO,
    ProfileResponseDTO,
    RegisterRequestDTO,
)
from userservice.interfaces.http.dto.validation import validate_request
from userservice.interfaces.http.envelope import failure_response, render_outcome
from userservice.interfaces.http.session_guard import current_session, session_required
from userservice.shared.config import SecurityConfig
from userservice.shared.logging import logger
from userservice.shared.middleware.rate_limit import rate_limit


def _request_payload() -> dict[str, Any]:
    # register and login also accept classic form posts
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    return request.form.to_dict()


def _json_body() -> Any:
    payload = request.get_json(silent=True)
    return {} if payload is None else payload


def _too_frequent() -> tuple[Response, int]:
    return failure_response(ResultCode.REQUEST_TOO_FREQUENT)


class UserController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        change_password_use_case: ChangePasswordUseCase,
        get_profile_use_case: GetProfileUseCase,
        sessions: SessionManager,
        session_header: str = "token",
        security: SecurityConfig | None = None,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._change_password_use_case = change_password_use_case
        self._get_profile_use_case = get_profile_use_case
        self._sessions = sessions
        self._session_header = session_header
        self._security = security or SecurityConfig(enable_rate_limit=False)

    def register(self) -> tuple[Response, int]:
        parsed = validate_request(RegisterRequestDTO, _request_payload())
        if not parsed.ok or parsed.data is None:
            return render_outcome(parsed)
        dto = parsed.data

        return render_outcome(self._register_use_case.execute(dto.username, dto.password))

    def login(self) -> tuple[Response, int]:
        parsed = validate_request(LoginRequestDTO, _request_payload())
        if not parsed.ok or parsed.data is None:
            return render_outcome(parsed)
        dto = parsed.data

        outcome = self._login_use_case.execute(dto.username, dto.password)
        if not outcome.ok or outcome.data is None:
            return render_outcome(outcome)

        logger.info(f"user.login: ok username={outcome.data.username}")
        return render_outcome(
            outcome,
            LoginResponseDTO(username=outcome.data.username, token=outcome.data.token),
        )

    def change_password(self) -> tuple[Response, int]:
        parsed = validate_request(ChangePasswordRequestDTO, _json_body())
        if not parsed.ok or parsed.data is None:
            return render_outcome(parsed)
        dto = parsed.data

        session = current_session()
        return render_outcome(
            self._change_password_use_case.execute(
                session.account.id, dto.old_password, dto.new_password
            )
        )

    def get_profile(self) -> tuple[Response, int]:
        parsed = validate_request(ProfileQueryDTO, request.args.to_dict())
        if not parsed.ok or parsed.data is None:
            return render_outcome(parsed)

        outcome = self._get_profile_use_case.execute(parsed.data.id)
        if not outcome.ok or outcome.data is None:
            return render_outcome(outcome)
        return render_outcome(
            outcome,
            ProfileResponseDTO(id=outcome.data.id, username=outcome.data.username),
        )

    def as_blueprint(self) -> Blueprint:
        guard = session_required(self._sessions, self._session_header)
        throttle = rate_limit(self._security, _too_frequent)

        bp = Blueprint("user", __name__, url_prefix="/user")
        bp.add_url_rule("/register", view_func=throttle(self.register), methods=["POST"])
        bp.add_url_rule("/login", view_func=throttle(self.login), methods=["POST"])
        bp.add_url_rule("/password", view_func=guard(self.change_password), methods=["PUT"])
        bp.add_url_rule("", view_func=guard(self.get_profile), methods=["GET"])
        return bp
