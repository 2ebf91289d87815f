# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from taskhub.application.services.password_hashing import BcryptPasswordHasher
from taskhub.application.services.tokens import JwtTokenService
from taskhub.application.use_cases.accounts.get_profile import GetProfileUseCase
from taskhub.application.use_cases.accounts.login import LoginUseCase
from taskhub.application.use_cases.accounts.signup import SignupUseCase
from taskhub.infrastructure.db import build_engine, build_session_factory
from taskhub.infrastructure.repositories.sqlalchemy_account_repository import \
    SqlAlchemyAccountRepository
from taskhub.interfaces.http.controllers.account_controller import \
    AccountController
from taskhub.interfaces.http.controllers.auth_controller import AuthController
from taskhub.interfaces.http.controllers.misc_controller import MiscController
from taskhub.shared.config import AppConfig
from taskhub.shared.logging import logger
from taskhub.shared.middleware.token_auth import TokenAuthMiddleware


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def engine(self) -> Engine:
        return build_engine(self.config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return build_session_factory(self.engine)

    @cached_property
    def account_repository(self) -> SqlAlchemyAccountRepository:
        return SqlAlchemyAccountRepository(self.session_factory)

    @cached_property
    def hash_executor(self) -> ThreadPoolExecutor:
        return ThreadPoolExecutor(
            max_workers=self.config.auth.hash_workers,
            thread_name_prefix="password-hash",
        )

    @cached_property
    def password_hasher(self) -> BcryptPasswordHasher:
        return BcryptPasswordHasher(
            rounds=self.config.auth.bcrypt_rounds,
            executor=self.hash_executor,
        )

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(self.config.auth)

    @cached_property
    def token_auth(self) -> TokenAuthMiddleware:
        return TokenAuthMiddleware(tokens=self.token_service)

    @cached_property
    def signup_use_case(self) -> SignupUseCase:
        return SignupUseCase(
            accounts=self.account_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_use_case(self) -> LoginUseCase:
        return LoginUseCase(
            accounts=self.account_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def get_profile_use_case(self) -> GetProfileUseCase:
        return GetProfileUseCase(accounts=self.account_repository)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            signup_use_case=self.signup_use_case,
            login_use_case=self.login_use_case,
        )

    @cached_property
    def account_controller(self) -> AccountController:
        return AccountController(
            get_profile_use_case=self.get_profile_use_case,
            token_auth=self.token_auth,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(engine=self.engine)

    def shutdown(self) -> None:
        if "hash_executor" in self.__dict__:
            self.hash_executor.shutdown(wait=True)
        if "engine" in self.__dict__:
            self.engine.dispose()
        logger.info("container: shut down")


__all__ = ["Container"]
