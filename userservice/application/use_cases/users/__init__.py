# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .change_password import ChangePasswordUseCase
from .get_profile import GetProfileUseCase
from .login_user import LoginUserUseCase
from .register_user import RegisterUserUseCase

__all__ = [
    "ChangePasswordUseCase",
    "GetProfileUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
]
