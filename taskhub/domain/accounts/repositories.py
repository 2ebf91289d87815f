# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Account, Identity


class AccountRepository(Protocol):
    def find_by_email(self, email: str) -> Account | None: ...
    def find_by_id(self, account_id: str) -> Account | None: ...
    def add(self, *, email: str, password_hash: str, name: str | None = None) -> Account: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenService(Protocol):
    def issue(self, account: Account) -> str: ...
    def verify(self, token: str) -> Identity: ...
