# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authservice.shared.errors.base import (ConflictError, ForbiddenError,
                                            NotFoundError, UnauthorizedError)


class UserAlreadyExistsError(ConflictError):
    code = "user_already_exists"


class UserNotFoundError(NotFoundError):
    code = "user_not_found"


class InvalidPasswordError(UnauthorizedError):
    code = "invalid_password"


class InvalidCredentialsError(UnauthorizedError):
    code = "invalid_credentials"


class NotAuthenticatedError(UnauthorizedError):
    code = "unauthorized"


class TokenNotProvidedError(UnauthorizedError):
    code = "token_not_provided"


class InvalidTokenError(UnauthorizedError):
    code = "invalid_token"


class ClearDisabledError(ForbiddenError):
    code = "clear_disabled"
