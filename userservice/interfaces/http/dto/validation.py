# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from userservice.application.result import Outcome
from userservice.domain.users.codes import ResultCode
from userservice.shared.errors.validation import format_pydantic_errors

M = TypeVar("M", bound=BaseModel)


def validate_request(model: type[M], payload: Any) -> Outcome[M]:
    """Run *model* over *payload*; failures carry ``[{field, message}, ...]``."""
    if not isinstance(payload, Mapping):
        return Outcome.business_failure(
            ResultCode.VALIDATION_FAILED,
            detail=[{"field": "body", "message": "request body must be a JSON object"}],
        )
    try:
        return Outcome.success(model.model_validate(dict(payload)))
    except ValidationError as exc:
        return Outcome.business_failure(
            ResultCode.VALIDATION_FAILED, detail=format_pydantic_errors(exc)
        )


__all__ = ["validate_request"]
