# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from authservice.application.services.password_hashing import WerkzeugPasswordHasher
from authservice.application.services.token_issuer import JwtTokenIssuer
from authservice.application.use_cases.users.login_user import LoginUserUseCase
from authservice.application.use_cases.users.register_user import RegisterUserUseCase
from authservice.application.use_cases.users.verify_token import VerifyTokenUseCase
from authservice.infrastructure.repositories.users.sqlalchemy_user_repository import \
    SqlAlchemyUserRepository
from authservice.interfaces.http.controllers.auth_controller import AuthController
from authservice.interfaces.http.controllers.misc_controller import MiscController
from authservice.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config

    @cached_property
    def config(self) -> AppConfig:
        return self._config or load_config()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self.config.security.password_hash_method)

    @cached_property
    def token_issuer(self) -> JwtTokenIssuer:
        return JwtTokenIssuer(self.config.jwt_secret)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            tokens=self.token_issuer,
        )

    @cached_property
    def verify_token_use_case(self) -> VerifyTokenUseCase:
        return VerifyTokenUseCase(tokens=self.token_issuer)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            verify_token_use_case=self.verify_token_use_case,
            url_prefix=self.config.auth_url_prefix,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()


container = Container()
