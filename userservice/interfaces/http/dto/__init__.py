from .users import (
    ChangePasswordRequestDTO,
    LoginRequestDTO,
    LoginResponseDTO,
    ProfileQueryDTO,
    ProfileResponseDTO,
    RegisterRequestDTO,
)
from .validation import validate_request

__all__ = [
    "ChangePasswordRequestDTO",
    "LoginRequestDTO",
    "LoginResponseDTO",
    "ProfileQueryDTO",
    "ProfileResponseDTO",
    "RegisterRequestDTO",
    "validate_request",
]
