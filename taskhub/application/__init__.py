# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.password_hashing import BcryptPasswordHasher
from .services.tokens import JwtTokenService
from .use_cases.accounts.get_profile import GetProfileUseCase
from .use_cases.accounts.login import LoginUseCase
from .use_cases.accounts.signup import SignupUseCase

__all__ = [
    "BcryptPasswordHasher",
    "GetProfileUseCase",
    "JwtTokenService",
    "LoginUseCase",
    "SignupUseCase",
]
