from .base import AppError, DomainError, InfrastructureError
from .validation import format_pydantic_errors

__all__ = [
    "AppError",
    "DomainError",
    "InfrastructureError",
    "format_pydantic_errors",
]
