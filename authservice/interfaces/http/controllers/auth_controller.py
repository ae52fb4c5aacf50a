# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, g, jsonify, request
from pydantic import ValidationError

from authservice.application.use_cases.users.login_user import LoginUserUseCase
from authservice.application.use_cases.users.register_user import RegisterUserUseCase
from authservice.application.use_cases.users.verify_token import VerifyTokenUseCase
from authservice.domain.users.exceptions import InvalidCredentialsError
from authservice.interfaces.http.auth_guard import require_token
from authservice.interfaces.http.dto.auth import (LoginRequestDTO, LoginResponseDTO,
                                                  RegisterRequestDTO, WhoAmIResponseDTO)
from authservice.shared.errors.validation import raise_validation_error
from authservice.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        verify_token_use_case: VerifyTokenUseCase,
        url_prefix: str = "",
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._verify_token_use_case = verify_token_use_case
        self._url_prefix = url_prefix

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user = self._register_use_case.execute(dto.username, dto.password, dto.profile)

        logger.info(f"auth.register: ok user_id={user.id} username={user.username}")
        return jsonify(user.as_record()), 201

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            # malformed credentials answer like wrong ones
            logger.info(f"auth.login: failed, unusable payload ({exc.error_count()} errors)")
            raise InvalidCredentialsError() from exc

        try:
            result = self._login_use_case.execute(dto.username, dto.password)
        except Exception:
            logger.info(f"auth.login: failed username={dto.username}")
            raise

        logger.info(f"auth.login: ok username={dto.username} token={result.token.token}")
        payload = LoginResponseDTO(
            message=f"Welcome {result.user.username}!",
            token=result.token.token,
        )
        return jsonify(payload.model_dump()), 200

    def whoami(self) -> tuple[Response, int]:
        claims = g.token_claims
        payload = WhoAmIResponseDTO(
            subject=claims["subject"],
            username=claims["username"],
            expires_at=claims["exp"],
        )
        return jsonify(payload.model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix=self._url_prefix or None)
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule(
            "/whoami",
            endpoint="whoami",
            view_func=require_token(self._verify_token_use_case)(self.whoami),
            methods=["GET"],
        )
        return bp
