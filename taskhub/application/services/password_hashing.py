# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Password hashing strategies."""

from __future__ import annotations

from concurrent.futures import Executor

import bcrypt

from taskhub.domain.accounts.entities import MAX_PASSWORD_BYTES, password_fits
from taskhub.domain.accounts.repositories import PasswordHasher


class BcryptPasswordHasher(PasswordHasher):
    """Salted, adaptive-cost hashing.

    When an executor is given, hashing and verification run on it and the
    calling thread blocks on the result.
    """

    def __init__(self, *, rounds: int = 10, executor: Executor | None = None) -> None:
        self._rounds = rounds
        self._executor = executor

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        if self._executor is None:
            return self._hash(password)
        return self._executor.submit(self._hash, password).result()

    def verify(self, password: str, hashed: str) -> bool:
        if self._executor is None:
            return self._verify(password, hashed)
        return self._executor.submit(self._verify, password, hashed).result()

    def _hash(self, password: str) -> str:
        if not password_fits(password):
            raise ValueError(f"password exceeds {MAX_PASSWORD_BYTES} bytes")
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("ascii")

    @staticmethod
    def _verify(password: str, hashed: str) -> bool:
        # Longer input could only match through truncation.
        if not password_fits(password):
            return False
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("ascii"))
        except (ValueError, TypeError):
            return False
