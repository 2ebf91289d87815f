# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .accounts.entities import Account, Identity, normalize_email
from .accounts.exceptions import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    AuthenticationError,
    ConflictError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
)
from .accounts.repositories import AccountRepository, PasswordHasher, TokenService

__all__ = [
    "Account",
    "AccountAlreadyExistsError",
    "AccountNotFoundError",
    "AccountRepository",
    "AuthenticationError",
    "ConflictError",
    "Identity",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MissingTokenError",
    "PasswordHasher",
    "TokenService",
    "normalize_email",
]
