# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from functools import cached_property

from taskhub.domain.accounts.entities import Account, normalize_email, password_fits
from taskhub.domain.accounts.exceptions import InvalidCredentialsError
from taskhub.domain.accounts.repositories import (
    AccountRepository,
    PasswordHasher,
    TokenService,
)
from taskhub.shared.logging import logger

from .credentials import require_credentials


class LoginUseCase:
    """Exchange e-mail and password for a session token.

    Every rejection raises the same ``InvalidCredentialsError`` and costs one
    password check: an unknown e-mail or an over-long password is checked
    against a throwaway digest with the same work factor.
    """

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

    @cached_property
    def _decoy_hash(self) -> str:
        return self._password_hasher.hash(secrets.token_urlsafe(32))

    def execute(self, email: str | None, password: str | None) -> tuple[Account, str]:
        email, password = require_credentials(email, password)

        account = self._accounts.find_by_email(normalize_email(email))
        if account is None or not password_fits(password):
            self._password_hasher.verify("decoy", self._decoy_hash)
            password_valid = False
        else:
            password_valid = self._password_hasher.verify(password, account.password_hash)

        if not password_valid:
            logger.info("accounts.login: rejected, invalid credentials")
            raise InvalidCredentialsError()

        token = self._tokens.issue(account)
        logger.info(f"accounts.login: ok account_id={account.id}")
        return account, token
