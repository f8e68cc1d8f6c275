# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from authservice.application.services.authenticators import (
    SessionAuthenticator, TokenAuthenticator)
from authservice.application.services.password_hashing import \
    build_password_hasher
from authservice.application.services.tokens import JwtTokenService
from authservice.application.use_cases.users.clear_users import ClearUsersUseCase
from authservice.application.use_cases.users.get_session import GetSessionUseCase
from authservice.application.use_cases.users.list_users import ListUsersUseCase
from authservice.application.use_cases.users.login_user import LoginUserUseCase
from authservice.application.use_cases.users.logout_user import LogoutUserUseCase
from authservice.application.use_cases.users.register_user import \
    RegisterUserUseCase
from authservice.domain.users.repositories import (Authenticator,
                                                   PasswordHasher,
                                                   SessionStore)
from authservice.infrastructure.repositories.users.sqlalchemy_user_repository import \
    SqlAlchemyUserRepository
from authservice.infrastructure.sessions.memory_session_store import \
    InMemorySessionStore
from authservice.infrastructure.sessions.sqlalchemy_session_store import \
    SqlAlchemySessionStore
from authservice.interfaces.http.auth_gate import (AuthGate, BearerTransport,
                                                   CookieTransport,
                                                   CredentialTransport)
from authservice.interfaces.http.controllers.auth_controller import AuthController
from authservice.interfaces.http.controllers.misc_controller import MiscController
from authservice.interfaces.http.controllers.users_controller import \
    UsersController
from authservice.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or load_config()

    @cached_property
    def password_hasher(self) -> PasswordHasher:
        return build_password_hasher(
            self.config.passwords.scheme,
            bcrypt_rounds=self.config.passwords.bcrypt_rounds,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def session_store(self) -> SessionStore:
        lifetime = timedelta(seconds=self.config.session.lifetime_seconds)
        if self.config.session.store == "database":
            return SqlAlchemySessionStore(lifetime=lifetime)
        return InMemorySessionStore(lifetime=lifetime)

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            secret=self.config.tokens.secret,
            algorithm=self.config.tokens.algorithm,
            ttl=timedelta(seconds=self.config.tokens.ttl_seconds),
        )

    # Authentication mode

    @cached_property
    def authenticator(self) -> Authenticator:
        if self.config.auth_mode == "token":
            return TokenAuthenticator(tokens=self.token_service)
        return SessionAuthenticator(sessions=self.session_store)

    @cached_property
    def transport(self) -> CredentialTransport:
        if self.config.auth_mode == "token":
            return BearerTransport()
        return CookieTransport(
            cookie_name=self.config.session.cookie_name,
            max_age=self.config.session.lifetime_seconds,
            security=self.config.security,
        )

    @cached_property
    def auth_gate(self) -> AuthGate:
        return AuthGate(authenticator=self.authenticator, transport=self.transport)

    # Use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            authenticator=self.authenticator,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            authenticator=self.authenticator,
            password_hasher=self.password_hasher,
            uniform_errors=self.config.login_uniform_errors,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(authenticator=self.authenticator)

    @cached_property
    def get_session_use_case(self) -> GetSessionUseCase:
        return GetSessionUseCase(authenticator=self.authenticator)

    @cached_property
    def list_users_use_case(self) -> ListUsersUseCase:
        return ListUsersUseCase(users=self.user_repository)

    @cached_property
    def clear_users_use_case(self) -> ClearUsersUseCase:
        return ClearUsersUseCase(
            users=self.user_repository,
            sessions=self.session_store,
            enabled=self.config.enable_clear,
        )

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
            session_use_case=self.get_session_use_case,
            transport=self.transport,
        )

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            list_users=self.list_users_use_case,
            clear_users=self.clear_users_use_case,
            gate=self.auth_gate,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()


container = Container()
