from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from authservice.application.services.authenticators import TokenAuthenticator
from authservice.application.services.tokens import JwtTokenService
from authservice.domain.users.entities import Identity
from authservice.domain.users.exceptions import InvalidTokenError, TokenNotProvidedError

SECRET = "unit-test-secret-with-enough-entropy-0123456789"
ANA = Identity(user_id=7, name="Ana", email="ana@x.com")


@pytest.fixture()
def service() -> JwtTokenService:
    return JwtTokenService(secret=SECRET)


def test_issued_token_round_trips_identity(service: JwtTokenService) -> None:
    token = service.issue(ANA)

    assert service.verify(token) == ANA


def test_token_signed_with_other_key_is_rejected(service: JwtTokenService) -> None:
    forged = JwtTokenService(secret="another-secret-with-enough-entropy-9876543210").issue(ANA)

    with pytest.raises(InvalidTokenError):
        service.verify(forged)


def test_expired_token_is_rejected(service: JwtTokenService) -> None:
    issued_at = datetime.now(UTC) - timedelta(days=2)
    stale = JwtTokenService(secret=SECRET, clock=lambda: issued_at).issue(ANA)

    with pytest.raises(InvalidTokenError):
        service.verify(stale)


@pytest.mark.parametrize("token", ["garbage", "a.b.c", ""])
def test_malformed_token_is_rejected(service: JwtTokenService, token: str) -> None:
    with pytest.raises(InvalidTokenError):
        service.verify(token)


def test_token_without_subject_is_rejected(service: JwtTokenService) -> None:
    exp = int((datetime.now(UTC) + timedelta(hours=1)).timestamp())
    token = jwt.encode({"name": "Ana", "exp": exp}, SECRET, algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        service.verify(token)


def test_token_with_non_numeric_subject_is_rejected(service: JwtTokenService) -> None:
    exp = int((datetime.now(UTC) + timedelta(hours=1)).timestamp())
    token = jwt.encode({"sub": "admin", "exp": exp}, SECRET, algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        service.verify(token)


def test_blank_secret_is_refused() -> None:
    with pytest.raises(ValueError):
        JwtTokenService(secret="")


def test_token_authenticator_distinguishes_missing_from_invalid(
    service: JwtTokenService,
) -> None:
    authenticator = TokenAuthenticator(tokens=service)

    with pytest.raises(TokenNotProvidedError):
        authenticator.resolve(None)
    with pytest.raises(InvalidTokenError):
        authenticator.resolve("not-a-token")

    assert authenticator.resolve(authenticator.establish(ANA)) == ANA
