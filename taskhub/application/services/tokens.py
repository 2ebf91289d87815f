# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, self-contained session tokens (JWT)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from taskhub.domain.accounts.entities import Account, Identity
from taskhub.domain.accounts.exceptions import InvalidTokenError
from taskhub.domain.accounts.repositories import TokenService
from taskhub.shared.config import AuthConfig


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenService):
    def __init__(
        self,
        config: AuthConfig,
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._secret = config.jwt_secret
        self._algorithm = config.jwt_algorithm
        self._ttl = timedelta(seconds=config.token_ttl_seconds)
        self._clock = clock

    def issue(self, account: Account) -> str:
        now = self._clock()
        payload = {
            "sub": account.id,
            "email": account.email,
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Identity:
        """Check signature and expiry and return the embedded claims.

        Any failure (bad signature, expired, malformed, missing claims)
        raises ``InvalidTokenError``; the reason is not exposed to callers.
        """
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError() from exc

        email = claims.get("email")
        if not isinstance(email, str):
            raise InvalidTokenError()

        return Identity(
            sub=str(claims["sub"]),
            email=email,
            expires_at=datetime.fromtimestamp(claims["exp"], UTC),
        )
