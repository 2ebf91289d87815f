from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import bcrypt
import pytest

from taskhub.application.services.password_hashing import BcryptPasswordHasher


@pytest.fixture()
def hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=4)


def test_hash_is_salted_bcrypt_with_configured_cost(hasher: BcryptPasswordHasher) -> None:
    first = hasher.hash("Secr3t!")
    second = hasher.hash("Secr3t!")

    assert first != "Secr3t!"
    assert first.startswith("$2b$04$")
    assert first != second
    assert hasher.rounds == 4


def test_verify_accepts_only_the_original_password(hasher: BcryptPasswordHasher) -> None:
    hashed = hasher.hash("Secr3t!")

    assert hasher.verify("Secr3t!", hashed) is True
    for other in ("secr3t!", "Secr3t", "Secr3t!!", "", " Secr3t!"):
        assert hasher.verify(other, hashed) is False


def test_verify_with_malformed_hash_returns_false(hasher: BcryptPasswordHasher) -> None:
    assert hasher.verify("Secr3t!", "not-a-bcrypt-hash") is False
    assert hasher.verify("Secr3t!", "") is False


def test_default_cost_factor_is_ten() -> None:
    assert BcryptPasswordHasher().rounds == 10


def test_passwords_sharing_a_72_byte_prefix_do_not_match(hasher: BcryptPasswordHasher) -> None:
    hashed = hasher.hash("p" * 72)

    assert hasher.verify("p" * 72, hashed) is True
    assert hasher.verify("p" * 72 + "ZZZ", hashed) is False


def test_hash_refuses_input_bcrypt_would_truncate(hasher: BcryptPasswordHasher) -> None:
    with pytest.raises(ValueError):
        hasher.hash("p" * 72 + "A")
    with pytest.raises(ValueError):
        hasher.hash("é" * 37)


def test_over_long_candidate_never_verifies(hasher: BcryptPasswordHasher) -> None:
    hashed = bcrypt.hashpw(b"p" * 72, bcrypt.gensalt(rounds=4)).decode("ascii")

    assert hasher.verify("p" * 72 + "A", hashed) is False


def test_hashing_runs_on_executor_threads(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[str] = []
    real_hashpw = bcrypt.hashpw

    def recording_hashpw(password: bytes, salt: bytes) -> bytes:
        seen.append(threading.current_thread().name)
        return real_hashpw(password, salt)

    monkeypatch.setattr(bcrypt, "hashpw", recording_hashpw)

    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="password-hash") as executor:
        hasher = BcryptPasswordHasher(rounds=4, executor=executor)
        hashed = hasher.hash("Secr3t!")
        assert hasher.verify("Secr3t!", hashed) is True
        assert hasher.verify("wrong", hashed) is False

    assert seen and all(name.startswith("password-hash") for name in seen)


def test_concurrent_hashing_delivers_each_result_to_its_caller() -> None:
    with ThreadPoolExecutor(max_workers=2) as executor:
        hasher = BcryptPasswordHasher(rounds=4, executor=executor)
        results: dict[int, str] = {}

        def worker(i: int) -> None:
            results[i] = hasher.hash(f"password-{i}")

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(6)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        for i, hashed in results.items():
            assert hasher.verify(f"password-{i}", hashed) is True
            assert hasher.verify(f"password-{(i + 1) % 6}", hashed) is False
    assert len(results) == 6
