# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from taskhub.domain.accounts.entities import MAX_PASSWORD_BYTES
from taskhub.shared.errors.base import ValidationError

CREDENTIALS_REQUIRED = "Email and password required"
PASSWORD_TOO_LONG = f"Password must be at most {MAX_PASSWORD_BYTES} bytes"


def require_credentials(email: str | None, password: str | None) -> tuple[str, str]:
    if not email or not password:
        raise ValidationError(CREDENTIALS_REQUIRED)
    return email, password
