# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SignupRequestDTO(BaseModel):
    email: str | None = None
    password: str | None = Field(default=None, repr=False)
    name: str | None = None


class LoginRequestDTO(BaseModel):
    email: str | None = None
    password: str | None = Field(default=None, repr=False)


class AccountDTO(BaseModel):
    id: str
    email: str
    name: str | None = None

    model_config = ConfigDict(from_attributes=True)


class AuthResponseDTO(BaseModel):
    account: AccountDTO
    token: str


class ProfileDTO(AccountDTO):
    created_at: datetime
