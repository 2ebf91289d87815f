# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Use-case for reading the authenticated account."""

from __future__ import annotations

from taskhub.domain.accounts.entities import Account
from taskhub.domain.accounts.exceptions import AccountNotFoundError
from taskhub.domain.accounts.repositories import AccountRepository


class GetProfileUseCase:
    def __init__(self, *, accounts: AccountRepository) -> None:
        self._accounts = accounts

    def execute(self, account_id: str) -> Account:
        account = self._accounts.find_by_id(account_id)
        if account is None:
            raise AccountNotFoundError()
        return account
