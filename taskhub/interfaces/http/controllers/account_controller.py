# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from taskhub.application.use_cases.accounts.get_profile import GetProfileUseCase
from taskhub.interfaces.http.dto.auth import ProfileDTO
from taskhub.shared.middleware.token_auth import TokenAuthMiddleware, current_identity


class AccountController:
    def __init__(
        self,
        *,
        get_profile_use_case: GetProfileUseCase,
        token_auth: TokenAuthMiddleware,
    ) -> None:
        self._get_profile_use_case = get_profile_use_case
        self._token_auth = token_auth

    def profile(self) -> Response:
        account = self._get_profile_use_case.execute(current_identity().sub)
        return jsonify(ProfileDTO.model_validate(account).model_dump(mode="json"))

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("account", __name__, url_prefix="/api")
        bp.add_url_rule(
            "/user", view_func=self._token_auth.required(self.profile), methods=["GET"]
        )
        return bp
