# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from mini_linkedin.application.use_cases.users.get_profile import GetProfileUseCase
from mini_linkedin.application.use_cases.users.login_user import LoginUserUseCase
from mini_linkedin.application.use_cases.users.register_user import \
    RegisterUserUseCase
from mini_linkedin.domain.users.exceptions import InvalidCredentialsError
from mini_linkedin.infrastructure.audit import AuditAction, audit_log
from mini_linkedin.interfaces.http.auth import auth_required, current_user
from mini_linkedin.interfaces.http.dto.auth import (AuthSuccessDTO, LoginRequestDTO,
                                                    RegisterRequestDTO)
from mini_linkedin.interfaces.http.dto.users import UserDTO
from mini_linkedin.shared.errors.validation import raise_validation_error
from mini_linkedin.shared.logging import logger


def _get_client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        get_profile_use_case: GetProfileUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._get_profile_use_case = get_profile_use_case

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user, token = self._register_use_case.execute(dto.name, dto.email, dto.password)

        audit_log(
            AuditAction.REGISTER,
            user_id=user.id,
            ip_address=_get_client_ip(),
            details={"email": dto.email},
            success=True,
        )

        payload = AuthSuccessDTO(
            message="Account created successfully!",
            token=token,
            user=UserDTO.from_profile(user),
        ).model_dump(by_alias=True, mode="json")
        logger.info(f"auth.register: ok user_id={user.id}")
        return jsonify(payload), 201

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        ip_address = _get_client_ip()

        try:
            user, token = self._login_use_case.execute(dto.email, dto.password)
        except InvalidCredentialsError as exc:
            audit_log(
                AuditAction.LOGIN_FAILED,
                user_id=None,
                ip_address=ip_address,
                details={"email": dto.email, "error": exc.message},
                success=False,
            )
            raise

        audit_log(
            AuditAction.LOGIN_SUCCESS,
            user_id=user.id,
            ip_address=ip_address,
            success=True,
        )

        payload = AuthSuccessDTO(
            message="Login successful!",
            token=token,
            user=UserDTO.from_profile(user),
        ).model_dump(by_alias=True, mode="json")
        logger.info(f"auth.login: ok user_id={user.id}")
        return jsonify(payload), 200

    @auth_required
    def me(self) -> tuple[Response, int]:
        user = self._get_profile_use_case.execute(current_user().id)
        return jsonify({"success": True, "user": UserDTO.from_profile(user).to_json()}), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/me", view_func=self.me, methods=["GET"])
        return bp
