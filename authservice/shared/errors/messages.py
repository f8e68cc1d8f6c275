# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Human readable messages for error codes and success responses.

Responses carry a single message in the caller's language, picked from the
``Accept-Language`` header. Unknown codes fall back to the configured default
locale and then to the code itself.
"""

from __future__ import annotations

from flask import has_request_context, request

from authservice.shared.config import load_config

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        # errors
        "missing_fields": "All fields are required",
        "user_already_exists": "User already exists",
        "user_not_found": "User not found",
        "invalid_password": "Invalid password",
        "invalid_credentials": "Invalid email or password",
        "unauthorized": "Not authenticated",
        "token_not_provided": "Token not provided",
        "invalid_token": "Invalid token",
        "clear_disabled": "Clearing users is disabled",
        "forbidden": "Forbidden",
        "conflict": "Conflict",
        "not_found": "Not found",
        "method_not_allowed": "Method not allowed",
        "bad_request": "Bad request",
        "internal_error": "Internal server error",
        "store_unavailable": "Internal server error",
        "password_hashing_failed": "Internal server error",
        # success
        "user_registered": "User registered successfully",
        "login_successful": "Login successful",
        "logged_out": "Logged out",
        "users_cleared": "All users deleted",
        "hello": "Hello World!",
        "api_working": "API is working!",
    },
    "uk": {
        "missing_fields": "Всі поля обов'язкові",
        "user_already_exists": "Користувач вже існує",
        "user_not_found": "Користувача не знайдено",
        "invalid_password": "Невірний пароль",
        "invalid_credentials": "Невірний email або пароль",
        "unauthorized": "Не авторизовано",
        "token_not_provided": "Токен не наданий",
        "invalid_token": "Невірний токен",
        "clear_disabled": "Очищення користувачів вимкнено",
        "forbidden": "Доступ заборонено",
        "conflict": "Конфлікт",
        "not_found": "Не знайдено",
        "method_not_allowed": "Метод не дозволено",
        "bad_request": "Некоректний запит",
        "internal_error": "Помилка сервера",
        "store_unavailable": "Помилка сервера",
        "password_hashing_failed": "Помилка сервера",
        "user_registered": "Користувача зареєстровано",
        "login_successful": "Вхід успішний",
        "logged_out": "Вихід виконано",
        "users_cleared": "Всіх користувачів видалено",
        "hello": "Привіт, світ!",
        "api_working": "API працює!",
    },
}

SUPPORTED_LOCALES = tuple(MESSAGES)


def request_locale() -> str:
    default = load_config().default_locale
    if default not in MESSAGES:
        default = "en"
    if not has_request_context():
        return default
    return request.accept_languages.best_match(SUPPORTED_LOCALES, default=default) or default


def translate(code: str, locale: str | None = None) -> str:
    locale = locale or request_locale()
    catalog = MESSAGES.get(locale, MESSAGES["en"])
    return catalog.get(code) or MESSAGES["en"].get(code, code)


__all__ = ["MESSAGES", "SUPPORTED_LOCALES", "request_locale", "translate"]
