# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


# bcrypt ignores everything past this many bytes of input.
MAX_PASSWORD_BYTES = 72


def normalize_email(email: str) -> str:
    return email.lower()


def password_fits(password: str) -> bool:
    return len(password.encode("utf-8")) <= MAX_PASSWORD_BYTES


@dataclass(slots=True, frozen=True)
class Account:

    id: str
    email: str
    password_hash: str = field(repr=False)
    name: str | None
    created_at: datetime


@dataclass(slots=True, frozen=True)
class Identity:
    """Claims carried by a verified session token."""

    sub: str
    email: str
    expires_at: datetime
