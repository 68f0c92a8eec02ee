"""Tests for the JWT token manager."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

from jose import jwt

from bloglist.configs import settings
from bloglist.managers.token_manager import (
    create_access_token,
    decode_access_token,
)


class TestCreateAccessToken:
    """Test cases for create_access_token function."""

    def test_creates_valid_token(self) -> None:
        """Test that access token is created successfully."""
        token = create_access_token(user_id=uuid4(), username="testuser")

        assert isinstance(token, str)
        assert token.count(".") == 2

    def test_token_contains_correct_claims(self) -> None:
        """Test that access token contains all required claims."""
        user_id = uuid4()

        token = create_access_token(user_id=user_id, username="testuser")
        token_data = decode_access_token(token)

        assert token_data is not None
        assert token_data.username == "testuser"
        assert token_data.user_id == user_id
        assert token_data.token_type == "access"
        assert token_data.jti

    def test_each_token_has_unique_jti(self) -> None:
        """Two tokens for the same user differ."""
        user_id = uuid4()

        first = decode_access_token(create_access_token(user_id=user_id, username="u"))
        second = decode_access_token(create_access_token(user_id=user_id, username="u"))

        assert first is not None
        assert second is not None
        assert first.jti != second.jti

    def test_custom_expiration(self) -> None:
        """Test that custom expiration is respected."""
        token = create_access_token(
            user_id=uuid4(),
            username="testuser",
            expires_delta=timedelta(hours=2),
        )

        payload = jwt.decode(
            token,
            settings.SECRET_KEY.get_secret_value(),
            algorithms=[settings.ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
        )
        remaining = datetime.fromtimestamp(payload["exp"], tz=UTC) - datetime.now(UTC)
        assert timedelta(hours=1, minutes=55) < remaining <= timedelta(hours=2)


class TestDecodeAccessToken:
    """Test cases for decode_access_token function."""

    def test_rejects_invalid_token(self) -> None:
        """Test that invalid token returns None."""
        assert decode_access_token("invalid.token.here") is None

    def test_rejects_expired_token(self) -> None:
        """Expired tokens are not accepted."""
        token = create_access_token(
            user_id=uuid4(),
            username="testuser",
            expires_delta=timedelta(seconds=-1),
        )

        assert decode_access_token(token) is None

    def test_rejects_wrong_signature(self) -> None:
        """Tokens signed with another key are not accepted."""
        now = datetime.now(UTC)
        token = jwt.encode(
            {
                "sub": "testuser",
                "user_id": str(uuid4()),
                "jti": "abc",
                "iat": now,
                "exp": now + timedelta(minutes=5),
                "iss": settings.JWT_ISSUER,
                "aud": settings.JWT_AUDIENCE,
                "type": "access",
            },
            "another-key",
            algorithm=settings.ALGORITHM,
        )

        assert decode_access_token(token) is None

    def test_rejects_wrong_token_type(self) -> None:
        """Only access tokens are accepted."""
        now = datetime.now(UTC)
        token = jwt.encode(
            {
                "sub": "testuser",
                "user_id": str(uuid4()),
                "jti": "abc",
                "iat": now,
                "exp": now + timedelta(minutes=5),
                "iss": settings.JWT_ISSUER,
                "aud": settings.JWT_AUDIENCE,
                "type": "refresh",
            },
            settings.SECRET_KEY.get_secret_value(),
            algorithm=settings.ALGORITHM,
        )

        assert decode_access_token(token) is None

    def test_rejects_malformed_user_id(self) -> None:
        """The user_id claim must be a UUID."""
        now = datetime.now(UTC)
        token = jwt.encode(
            {
                "sub": "testuser",
                "user_id": "not-a-uuid",
                "jti": "abc",
                "iat": now,
                "exp": now + timedelta(minutes=5),
                "iss": settings.JWT_ISSUER,
                "aud": settings.JWT_AUDIENCE,
                "type": "access",
            },
            settings.SECRET_KEY.get_secret_value(),
            algorithm=settings.ALGORITHM,
        )

        assert decode_access_token(token) is None

