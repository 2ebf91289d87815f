# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus
from typing import NoReturn

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from taskhub.application.use_cases.accounts.credentials import CREDENTIALS_REQUIRED
from taskhub.application.use_cases.accounts.login import LoginUseCase
from taskhub.application.use_cases.accounts.signup import SignupUseCase
from taskhub.domain.accounts.entities import Account
from taskhub.interfaces.http.dto.auth import (AccountDTO, AuthResponseDTO,
                                              LoginRequestDTO, SignupRequestDTO)
from taskhub.shared.errors.validation import invalid_fields, raise_validation_error
from taskhub.shared.logging import logger

_CREDENTIAL_FIELDS = frozenset({"email", "password"})


def _reject_payload(exc: ValidationError) -> NoReturn:
    if _CREDENTIAL_FIELDS.intersection(invalid_fields(exc)):
        raise_validation_error(exc, CREDENTIALS_REQUIRED)
    raise_validation_error(exc)


def _auth_payload(account: Account, token: str) -> dict:
    dto = AuthResponseDTO(account=AccountDTO.model_validate(account), token=token)
    return dto.model_dump(mode="json")


class AuthController:
    def __init__(
        self,
        *,
        signup_use_case: SignupUseCase,
        login_use_case: LoginUseCase,
    ) -> None:
        self._signup_use_case = signup_use_case
        self._login_use_case = login_use_case

    def signup(self) -> tuple[Response, int]:
        try:
            dto = SignupRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            _reject_payload(exc)

        account, token = self._signup_use_case.execute(dto.email, dto.password, dto.name)

        logger.info(f"auth.signup: ok account_id={account.id}")
        return jsonify(_auth_payload(account, token)), HTTPStatus.CREATED

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            _reject_payload(exc)

        account, token = self._login_use_case.execute(dto.email, dto.password)

        logger.info(f"auth.login: ok account_id={account.id}")
        return jsonify(_auth_payload(account, token)), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/signup", view_func=self.signup, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
