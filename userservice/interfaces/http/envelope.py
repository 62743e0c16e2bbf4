# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""The ``{status, code, message, data}`` body every endpoint answers with.

Business failures ride on HTTP 200 so clients branch on ``code``. Only bad
input, throttling and system failures change the transport status.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from flask import Response, jsonify
from pydantic import BaseModel

from userservice.application.result import Outcome, OutcomeKind
from userservice.domain.users.codes import ResultCode

_TRANSPORT_STATUS = {
    ResultCode.VALIDATION_FAILED: HTTPStatus.BAD_REQUEST,
    ResultCode.REQUEST_TOO_FREQUENT: HTTPStatus.TOO_MANY_REQUESTS,
}


class ResultEnvelope(BaseModel):
    status: bool
    code: str
    message: str
    data: Any = None


def _jsonable(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True)
    return data


def failure_response(
    code: ResultCode,
    *,
    message: str | None = None,
    data: Any = None,
    status: HTTPStatus | None = None,
) -> tuple[Response, HTTPStatus]:
    envelope = ResultEnvelope(
        status=False,
        code=code.code,
        message=message or code.message,
        data=_jsonable(data),
    )
    resolved = status or _TRANSPORT_STATUS.get(code, HTTPStatus.OK)
    return jsonify(envelope.model_dump()), resolved


def success_response(data: Any = None) -> tuple[Response, HTTPStatus]:
    envelope = ResultEnvelope(
        status=True,
        code=ResultCode.SUCCESS.code,
        message=ResultCode.SUCCESS.message,
        data=_jsonable(data),
    )
    return jsonify(envelope.model_dump()), HTTPStatus.OK


def render_outcome(outcome: Outcome[Any], data: Any = None) -> tuple[Response, HTTPStatus]:
    """Translate an outcome; *data* overrides the outcome's own payload."""
    if outcome.ok:
        return success_response(data if data is not None else outcome.data)
    assert outcome.failure is not None
    if outcome.kind is OutcomeKind.INFRASTRUCTURE_FAILURE:
        return failure_response(ResultCode.FAIL, status=HTTPStatus.INTERNAL_SERVER_ERROR)
    return failure_response(
        outcome.failure.code,
        message=outcome.failure.message,
        data=outcome.failure.detail,
    )


__all__ = [
    "ResultEnvelope",
    "failure_response",
    "render_outcome",
    "success_response",
]
