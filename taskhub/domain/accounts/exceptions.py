# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from taskhub.shared.errors.base import DomainError


class AccountAlreadyExistsError(DomainError):
    code = "account_already_exists"
    status = HTTPStatus.CONFLICT
    message = "User already exists"


class InvalidCredentialsError(DomainError):
    # Same body for unknown e-mail and wrong password.
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid credentials"


class AccountNotFoundError(DomainError):
    code = "account_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "User not found"


class TokenError(DomainError):
    body_key = "message"


class MissingTokenError(TokenError):
    code = "missing_token"
    status = HTTPStatus.BAD_REQUEST
    message = "Access denied, no token provided"


class InvalidTokenError(TokenError):
    code = "invalid_token"
    status = HTTPStatus.FORBIDDEN
    message = "Invalid token"


ConflictError = AccountAlreadyExistsError
AuthenticationError = InvalidCredentialsError
