# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from authservice.application.use_cases.users.get_session import GetSessionUseCase
from authservice.application.use_cases.users.login_user import LoginUserUseCase
from authservice.application.use_cases.users.logout_user import LogoutUserUseCase
from authservice.application.use_cases.users.register_user import \
    RegisterUserUseCase
from authservice.interfaces.http.auth_gate import CredentialTransport
from authservice.interfaces.http.dto.auth import (LoginRequestDTO, MessageDTO,
                                                  RegisterRequestDTO,
                                                  UserPublicDTO)
from authservice.shared.errors.messages import translate
from authservice.shared.errors.validation import raise_validation_error
from authservice.shared.logging import logger


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
        logout_use_case: LogoutUserUseCase,
        session_use_case: GetSessionUseCase,
        transport: CredentialTransport,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._session_use_case = session_use_case
        self._transport = transport

    def _with_credential(self, message_code: str, credential: str) -> Response:
        payload = MessageDTO(
            message=translate(message_code), **self._transport.payload_for(credential)
        )
        response = jsonify(payload.model_dump(exclude_none=True))
        self._transport.attach(response, credential)
        return response

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user, credential = self._register_use_case.execute(dto.name, dto.email, dto.password)

        response = self._with_credential("user_registered", credential)
        logger.info(f"auth.register: ok user_id={user.id} ip={_get_client_ip()}")
        return response, 201

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            identity, credential = self._login_use_case.execute(dto.email, dto.password)
        except Exception as exc:
            logger.info(f"auth.login: failed ({type(exc).__name__}) ip={_get_client_ip()}")
            raise

        response = self._with_credential("login_successful", credential)
        logger.info(f"auth.login: ok user_id={identity.user_id}")
        return response, 200

    def session(self) -> tuple[Response, int]:
        identity = self._session_use_case.execute(self._transport.read())
        return jsonify(UserPublicDTO(**identity.to_dict()).model_dump()), 200

    def logout(self) -> tuple[Response, int]:
        self._logout_use_case.execute(self._transport.read())

        response = jsonify(MessageDTO(message=translate("logged_out")).model_dump(exclude_none=True))
        self._transport.clear(response)
        logger.info("auth.logout: ok")
        return response, 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/session", view_func=self.session, methods=["GET"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        return bp
