# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Outcome: the return type of every credential and session operation.

Business failures and infrastructure failures travel back to the caller as
values. Only faults nobody anticipated escape as exceptions, and the HTTP
error handler turns those into a generic failure.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, ParamSpec, TypeVar

from userservice.domain.users.codes import ResultCode
from userservice.shared.errors.base import InfrastructureError
from userservice.shared.logging import logger

T = TypeVar("T")
P = ParamSpec("P")


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    BUSINESS_FAILURE = "business_failure"
    INFRASTRUCTURE_FAILURE = "infrastructure_failure"


@dataclass(slots=True, frozen=True)
class Failure:

    code: ResultCode
    message: str
    detail: Any = None


@dataclass(slots=True, frozen=True)
class Outcome(Generic[T]):  # noqa: UP046
    """Tagged result of an operation.

    Attributes:
        kind: Which of the three variants this is.
        data: Operation payload, only meaningful on success.
        failure: Code and message for either failure variant.
    """

    kind: OutcomeKind
    data: T | None = None
    failure: Failure | None = field(default=None)

    @classmethod
    def success(cls, data: T | None = None) -> Outcome[T]:
        return cls(kind=OutcomeKind.SUCCESS, data=data)

    @classmethod
    def business_failure(
        cls, code: ResultCode, message: str | None = None, detail: Any = None
    ) -> Outcome[T]:
        return cls(
            kind=OutcomeKind.BUSINESS_FAILURE,
            failure=Failure(code=code, message=message or code.message, detail=detail),
        )

    @classmethod
    def infrastructure_failure(cls, error: InfrastructureError) -> Outcome[T]:
        # the internal error code stays in the logs, callers only see FAIL
        return cls(
            kind=OutcomeKind.INFRASTRUCTURE_FAILURE,
            failure=Failure(code=ResultCode.FAIL, message=ResultCode.FAIL.message),
        )

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    @property
    def code(self) -> ResultCode:
        if self.failure is None:
            return ResultCode.SUCCESS
        return self.failure.code

    @property
    def message(self) -> str:
        if self.failure is None:
            return ResultCode.SUCCESS.message
        return self.failure.message


def captures_infrastructure_failures(
    op: str,
) -> Callable[[Callable[P, Outcome[T]]], Callable[P, Outcome[T]]]:
    """Turn an ``InfrastructureError`` raised inside *op* into an outcome."""

    def decorator(fn: Callable[P, Outcome[T]]) -> Callable[P, Outcome[T]]:
        @functools.wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Outcome[T]:
            try:
                return fn(*args, **kwargs)
            except InfrastructureError as exc:
                logger.opt(exception=exc).error(f"{op}: infrastructure failure code={exc.code}")
                return Outcome.infrastructure_failure(exc)

        return wrapper

    return decorator


__all__ = [
    "Failure",
    "Outcome",
    "OutcomeKind",
    "captures_infrastructure_failures",
]
