# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from taskhub.domain.accounts.entities import Account, normalize_email, password_fits
from taskhub.domain.accounts.exceptions import AccountAlreadyExistsError
from taskhub.domain.accounts.repositories import (
    AccountRepository,
    PasswordHasher,
    TokenService,
)
from taskhub.shared.errors.base import ValidationError
from taskhub.shared.logging import logger

from .credentials import PASSWORD_TOO_LONG, require_credentials


class SignupUseCase:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._accounts = accounts
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(
        self, email: str | None, password: str | None, name: str | None = None
    ) -> tuple[Account, str]:
        email, password = require_credentials(email, password)
        if not password_fits(password):
            raise ValidationError(PASSWORD_TOO_LONG)
        email = normalize_email(email)

        if self._accounts.find_by_email(email) is not None:
            logger.info("accounts.signup: rejected, e-mail already registered")
            raise AccountAlreadyExistsError()

        hashed = self._password_hasher.hash(password)
        # The store's unique index on e-mail has the final say; a concurrent
        # signup that slipped past the lookup surfaces here as the same error.
        account = self._accounts.add(email=email, password_hash=hashed, name=name or None)

        token = self._tokens.issue(account)
        logger.info(f"accounts.signup: ok account_id={account.id}")
        return account, token
