"""Unit tests for JWTService."""

from datetime import timedelta

import jwt
import pytest

from ecobazaar_auth.exceptions import InvalidTokenError
from ecobazaar_auth.services import JWTService

SECRET = "unit-test-signing-secret"
EMAIL = "a@x.com"


class TestConstruction:
    def test_empty_secret_is_rejected(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTService(secret_key="")

    def test_configured_lifetime(self):
        service = JWTService(SECRET, token_expire_hours=2)

        payload = service.verify_token(service.generate_token(EMAIL))

        assert payload.expires_at - payload.issued_at == timedelta(hours=2)


class TestRoundTrip:
    def setup_method(self):
        self.service = JWTService(secret_key=SECRET)

    def test_subject_is_the_email(self):
        token = self.service.generate_token(EMAIL)

        payload = self.service.verify_token(token)

        assert token
        assert payload.subject == EMAIL
        assert payload.expires_at > payload.issued_at

    def test_plain_pyjwt_can_read_the_token(self):
        claims = jwt.decode(
            self.service.generate_token(EMAIL),
            SECRET,
            algorithms=["HS256"],
        )

        assert claims["sub"] == EMAIL
        assert claims["exp"] - claims["iat"] == 86400

    def test_custom_lifetime(self):
        token = self.service.generate_token(EMAIL, expires_delta=timedelta(minutes=5))

        payload = self.service.verify_token(token)

        assert payload.expires_at - payload.issued_at == timedelta(minutes=5)

    def test_token_without_iat_is_accepted(self):
        token = jwt.encode({"sub": EMAIL, "exp": 4102444800}, SECRET, algorithm="HS256")

        assert self.service.verify_token(token).issued_at.year == 2100


class TestRejection:
    def setup_method(self):
        self.service = JWTService(secret_key=SECRET)

    def test_expired(self):
        token = self.service.generate_token(EMAIL, expires_delta=timedelta(seconds=-1))

        with pytest.raises(InvalidTokenError, match="expired"):
            self.service.verify_token(token)

    @pytest.mark.parametrize("token", ["", "garbage", "invalid.token.string"])
    def test_not_a_jwt(self, token):
        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_signature_altered(self):
        header, body, signature = self.service.generate_token(EMAIL).split(".")
        forged = ("A" if signature[0] != "A" else "B") + signature[1:]

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(f"{header}.{body}.{forged}")

    def test_signed_with_another_secret(self):
        token = JWTService(secret_key="another-secret").generate_token(EMAIL)

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_missing_subject(self):
        token = jwt.encode({"exp": 4102444800}, SECRET, algorithm="HS256")

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_empty_subject(self):
        token = jwt.encode({"sub": "", "exp": 4102444800}, SECRET, algorithm="HS256")

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)
