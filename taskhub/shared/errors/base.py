# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Error hierarchy shared by every layer.

Each error carries a stable machine ``code``, the HTTP ``status`` it is
rendered with and an optional human ``message``. The HTTP error handler
serializes them through ``to_dict()``; nothing else formats error bodies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, ClassVar


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    message: str | None = None
    context: Mapping[str, Any] | None = None

    # Body key the human-readable text is published under.
    body_key: ClassVar[str] = "error"

    def __post_init__(self) -> None:
        Exception.__init__(self, self.describe())

    def describe(self) -> str:
        return self.message or self.code

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {self.body_key: self.describe(), "code": self.code}
        if self.context:
            body["context"] = dict(self.context)
        return body


class DomainError(AppError):
    """Business-rule failure declared entirely by class attributes.

    Subclasses set ``code``, ``status`` and ``message``; instances only add
    optional context or a more specific message.
    """

    def __init__(
        self,
        *,
        message: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=self._declared("code", "domain_error"),
            status=self._declared("status", HTTPStatus.BAD_REQUEST),
            message=message or self._declared("message", None),
            context=context,
        )

    def _declared(self, name: str, default: Any) -> Any:
        # Before __init__ the slots are unset, so only class-level values resolve.
        return getattr(self, name, default)


class InfrastructureError(AppError):
    def __init__(
        self,
        code: str = "infrastructure_error",
        *,
        message: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            message=message,
            context=context,
        )


class ValidationError(AppError):
    def __init__(
        self,
        message: str = "Invalid request payload",
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="validation_error",
            status=HTTPStatus.BAD_REQUEST,
            message=message,
            context=context,
        )


class StoreError(InfrastructureError):
    """Credential store failure. The cause is logged, never returned."""

    def __init__(self) -> None:
        super().__init__("store_error", message="Internal server error")
