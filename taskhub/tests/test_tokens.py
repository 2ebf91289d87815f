from __future__ import annotations

import base64
import json
from datetime import UTC, datetime, timedelta

import jwt
import pytest

from taskhub.application.services.tokens import JwtTokenService
from taskhub.domain.accounts.entities import Account
from taskhub.domain.accounts.exceptions import InvalidTokenError
from taskhub.shared.config import AuthConfig


@pytest.fixture()
def account() -> Account:
    return Account(
        id="0f8fad5b-d9cb-469f-a165-70867728950e",
        email="a@x.com",
        password_hash="$2b$04$irrelevant",
        name=None,
        created_at=datetime.now(UTC),
    )


def _b64(data: dict) -> str:
    raw = json.dumps(data, separators=(",", ":")).encode()
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()


def test_issue_and_verify_round_trip(auth_config: AuthConfig, account: Account) -> None:
    service = JwtTokenService(auth_config)

    identity = service.verify(service.issue(account))

    assert identity.sub == account.id
    assert identity.email == "a@x.com"


def test_token_expires_after_seven_days(auth_config: AuthConfig, account: Account) -> None:
    token = JwtTokenService(auth_config).issue(account)

    claims = jwt.decode(token, "test-secret", algorithms=["HS256"])

    assert claims["exp"] - claims["iat"] == 7 * 24 * 60 * 60
    assert set(claims) == {"sub", "email", "iat", "exp"}


def test_expired_token_is_rejected(auth_config: AuthConfig, account: Account) -> None:
    issued_long_ago = JwtTokenService(
        auth_config, clock=lambda: datetime.now(UTC) - timedelta(days=8)
    )
    token = issued_long_ago.issue(account)

    with pytest.raises(InvalidTokenError):
        JwtTokenService(auth_config).verify(token)


def test_tampered_payload_is_rejected(auth_config: AuthConfig, account: Account) -> None:
    service = JwtTokenService(auth_config)
    header, _, signature = service.issue(account).split(".")
    forged = _b64(
        {
            "sub": "someone-else",
            "email": "evil@x.com",
            "exp": int((datetime.now(UTC) + timedelta(days=1)).timestamp()),
        }
    )

    with pytest.raises(InvalidTokenError):
        service.verify(f"{header}.{forged}.{signature}")


def test_tampered_signature_is_rejected(auth_config: AuthConfig, account: Account) -> None:
    service = JwtTokenService(auth_config)
    header, payload, signature = service.issue(account).split(".")
    flipped = ("B" if signature[0] == "A" else "A") + signature[1:]

    with pytest.raises(InvalidTokenError):
        service.verify(f"{header}.{payload}.{flipped}")


def test_token_signed_with_other_secret_is_rejected(
    auth_config: AuthConfig, account: Account
) -> None:
    other = JwtTokenService(AuthConfig(jwt_secret="another-secret", bcrypt_rounds=4))

    with pytest.raises(InvalidTokenError):
        JwtTokenService(auth_config).verify(other.issue(account))


@pytest.mark.parametrize("token", ["garbage", "", "a.b.c"])
def test_malformed_token_is_rejected(auth_config: AuthConfig, token: str) -> None:
    with pytest.raises(InvalidTokenError):
        JwtTokenService(auth_config).verify(token)


def test_token_without_expiry_is_rejected(auth_config: AuthConfig) -> None:
    token = jwt.encode({"sub": "x", "email": "a@x.com"}, "test-secret", algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        JwtTokenService(auth_config).verify(token)


def test_token_without_email_is_rejected(auth_config: AuthConfig) -> None:
    exp = datetime.now(UTC) + timedelta(hours=1)
    token = jwt.encode({"sub": "x", "exp": exp}, "test-secret", algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        JwtTokenService(auth_config).verify(token)
