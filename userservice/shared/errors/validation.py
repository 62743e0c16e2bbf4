# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError


def format_pydantic_errors(exc: PydanticValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors into ``{"field", "message"}`` pairs."""
    errors_list = []

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc if part is not None)
        errors_list.append(
            {
                "field": field_path or "unknown",
                "message": error.get("msg", "invalid value"),
            }
        )

    return errors_list


__all__ = ["format_pydantic_errors"]
