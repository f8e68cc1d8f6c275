# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from authservice.application.use_cases.users.clear_users import ClearUsersUseCase
from authservice.application.use_cases.users.list_users import ListUsersUseCase
from authservice.interfaces.http.auth_gate import AuthGate, current_identity
from authservice.interfaces.http.dto.auth import MessageDTO, UserPublicDTO
from authservice.shared.errors.messages import translate
from authservice.shared.logging import logger


class UsersController:
    def __init__(
        self,
        *,
        list_users: ListUsersUseCase,
        clear_users: ClearUsersUseCase,
        gate: AuthGate,
    ) -> None:
        self._list_users = list_users
        self._clear_users = clear_users
        self._gate = gate

    def list_users(self) -> tuple[Response, int]:
        users = self._list_users.execute()
        payload = [
            UserPublicDTO(id=user.id, name=user.name, email=user.email).model_dump()
            for user in users
        ]
        return jsonify(payload), 200

    def clear(self) -> tuple[Response, int]:
        identity = current_identity()
        deleted = self._clear_users.execute(requested_by=identity.user_id)

        response = jsonify(MessageDTO(message=translate("users_cleared")).model_dump(exclude_none=True))
        self._gate.transport.clear(response)
        logger.info(f"users.clear: ok deleted={deleted}")
        return response, 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__)
        bp.add_url_rule("/users", view_func=self.list_users, methods=["GET"])
        bp.add_url_rule("/clear", view_func=self._gate.required(self.clear), methods=["POST"])
        return bp
