from __future__ import annotations

from datetime import UTC, datetime
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from taskhub.application.use_cases.accounts.login import LoginUseCase
from taskhub.application.use_cases.accounts.signup import SignupUseCase
from taskhub.domain.accounts.entities import Account
from taskhub.domain.accounts.exceptions import (AccountAlreadyExistsError,
                                                InvalidCredentialsError)
from taskhub.interfaces.http.controllers.auth_controller import AuthController
from taskhub.shared.middleware.error_handler import configure_error_handling


def _account(email: str = "a@x.com") -> Account:
    return Account(
        id="acc-1",
        email=email,
        password_hash="$2b$10$should-never-leave-the-server",
        name="Ann",
        created_at=datetime.now(UTC),
    )


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def _register(app: Flask, *, signup=None, login=None) -> None:
    controller = AuthController(
        signup_use_case=cast(SignupUseCase, signup or MagicMock()),
        login_use_case=cast(LoginUseCase, login or MagicMock()),
    )
    app.register_blueprint(controller.as_blueprint())


def test_signup_endpoint_returns_201_with_account_and_token(flask_app: Flask) -> None:
    called: dict[str, tuple] = {}

    class StubSignup:
        def execute(self, email, password, name=None):
            called["args"] = (email, password, name)
            return _account(), "token123"

    _register(flask_app, signup=StubSignup())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/signup",
            json={"email": "A@x.com", "password": "Secr3t!", "name": "Ann"},
        )

    assert response.status_code == 201
    assert called["args"] == ("A@x.com", "Secr3t!", "Ann")
    payload = response.get_json()
    assert payload == {
        "account": {"id": "acc-1", "email": "a@x.com", "name": "Ann"},
        "token": "token123",
    }
    assert "password_hash" not in response.get_data(as_text=True)


def test_signup_conflict_maps_to_409(flask_app: Flask) -> None:
    signup = MagicMock()
    signup.execute.side_effect = AccountAlreadyExistsError()
    _register(flask_app, signup=signup)

    with flask_app.test_client() as client:
        response = client.post("/api/auth/signup", json={"email": "a@x.com", "password": "pw"})

    assert response.status_code == 409
    assert response.get_json()["error"] == "User already exists"


def test_signup_with_non_string_fields_returns_400(flask_app: Flask) -> None:
    signup = MagicMock()
    _register(flask_app, signup=signup)

    with flask_app.test_client() as client:
        response = client.post("/api/auth/signup", json={"email": 123, "password": ["x"]})

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["code"] == "validation_error"
    assert payload["error"] == "Email and password required"
    assert payload["context"]["fields"] == ["email", "password"]
    signup.execute.assert_not_called()


def test_signup_without_json_body_passes_missing_fields_through(flask_app: Flask) -> None:
    signup = MagicMock()
    signup.execute.return_value = (_account(), "t")
    _register(flask_app, signup=signup)

    with flask_app.test_client() as client:
        client.post("/api/auth/signup", data="not json")

    signup.execute.assert_called_once_with(None, None, None)


def test_login_endpoint_returns_200(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.return_value = (_account(), "token456")
    _register(flask_app, login=login)

    with flask_app.test_client() as client:
        response = client.post("/api/auth/login", json={"email": "a@X.COM", "password": "pw"})

    assert response.status_code == 200
    assert response.get_json()["token"] == "token456"
    login.execute.assert_called_once_with("a@X.COM", "pw")


def test_login_invalid_credentials_maps_to_401(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    _register(flask_app, login=login)

    with flask_app.test_client() as client:
        response = client.post("/api/auth/login", json={"email": "a@x.com", "password": "bad"})

    assert response.status_code == 401
    assert response.get_json() == {"error": "Invalid credentials", "code": "invalid_credentials"}


def test_unexpected_error_maps_to_generic_500(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = RuntimeError("connection refused to postgres://u:p@db")
    _register(flask_app, login=login)

    with flask_app.test_client() as client:
        response = client.post("/api/auth/login", json={"email": "a@x.com", "password": "pw"})

    assert response.status_code == 500
    assert response.get_json() == {"error": "Internal server error", "code": "internal_error"}


def test_unknown_route_returns_json_404(flask_app: Flask) -> None:
    _register(flask_app)

    with flask_app.test_client() as client:
        response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.get_json()["error"] == "Route not found"


def test_signup_with_only_bad_name_uses_generic_message(flask_app: Flask) -> None:
    signup = MagicMock()
    _register(flask_app, signup=signup)

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/signup", json={"email": "a@x.com", "password": "pw", "name": 3}
        )

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["error"] == "Invalid request payload"
    assert payload["context"]["fields"] == ["name"]
    signup.execute.assert_not_called()
