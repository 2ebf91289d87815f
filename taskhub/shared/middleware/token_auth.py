# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from flask import g, request

from taskhub.domain.accounts.entities import Identity
from taskhub.domain.accounts.exceptions import InvalidTokenError, MissingTokenError
from taskhub.domain.accounts.repositories import TokenService
from taskhub.shared.logging import bind_account, logger

F = TypeVar("F", bound=Callable[..., Any])

_BEARER_PREFIX = "Bearer "


def extract_bearer_token(header: str | None) -> str:
    if not header or not header.startswith(_BEARER_PREFIX):
        raise MissingTokenError()
    token = header[len(_BEARER_PREFIX):].strip()
    if not token:
        raise MissingTokenError()
    return token


class TokenAuthMiddleware:
    """Guards views behind a ``Authorization: Bearer <token>`` header.

    Each request is verified on its own: a missing or malformed header is a
    ``MissingTokenError`` (400), a token that fails signature or expiry
    checks is an ``InvalidTokenError`` (403). On success the decoded
    identity is stored on ``flask.g`` for the view.
    """

    def __init__(self, *, tokens: TokenService) -> None:
        self._tokens = tokens

    def authenticate(self, authorization: str | None) -> Identity:
        token = extract_bearer_token(authorization)
        return self._tokens.verify(token)

    def required(self, view: F) -> F:
        @wraps(view)
        def inner(*args: Any, **kwargs: Any) -> Any:
            try:
                identity = self.authenticate(request.headers.get("Authorization"))
            except MissingTokenError:
                logger.warning(f"No bearer token on {request.method} {request.path}")
                raise
            except InvalidTokenError:
                logger.warning(f"Auth failed (invalid/expired token) on {request.method} {request.path}")
                raise

            g.identity = identity
            g.user_id = identity.sub
            bind_account(identity.sub)
            logger.debug(f"Auth OK: account={identity.sub} {request.method} {request.path}")
            return view(*args, **kwargs)

        return cast(F, inner)


def current_identity() -> Identity:
    """Return the identity attached by ``TokenAuthMiddleware.required``."""
    identity = getattr(g, "identity", None)
    if identity is None:
        raise RuntimeError("current_identity() called outside a token-protected view")
    return cast(Identity, identity)


__all__ = ["TokenAuthMiddleware", "current_identity", "extract_bearer_token"]
