"""Tests for the password hashing manager."""

from unittest.mock import MagicMock

import pytest
from passlib.exc import InternalBackendError

from bloglist.errors import PasswordBackendError, PasswordHashingError
from bloglist.managers.password_manager import (
    PasswordHasher,
    get_password_hasher,
    hash_password,
    verify_password,
)


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(level="low")


class TestPasswordHasher:
    """Test cases for PasswordHasher."""

    def test_hash_is_argon2id(self, hasher: PasswordHasher) -> None:
        """Hashes use the argon2id scheme."""
        assert hasher.hash("salainen").startswith("$argon2id$")

    def test_hashes_are_salted(self, hasher: PasswordHasher) -> None:
        """The same password hashes differently each time."""
        assert hasher.hash("salainen") != hasher.hash("salainen")

    def test_verify_roundtrip(self, hasher: PasswordHasher) -> None:
        """A password verifies against its own hash only."""
        hashed = hasher.hash("salainen")

        assert hasher.verify("salainen", hashed) is True
        assert hasher.verify("wrong", hashed) is False

    def test_empty_password_rejected(self, hasher: PasswordHasher) -> None:
        """Empty passwords cannot be hashed."""
        with pytest.raises(ValueError, match="empty"):
            hasher.hash("")

    @pytest.mark.parametrize("bad_hash", ["", "   ", "not-a-hash"])
    def test_verify_invalid_hash_is_false(self, hasher: PasswordHasher, bad_hash: str) -> None:
        """Corrupted hashes never verify."""
        assert hasher.verify("salainen", bad_hash) is False

    def test_current_hash_needs_no_rehash(self, hasher: PasswordHasher) -> None:
        """Fresh hashes are current."""
        assert hasher.check_needs_rehash(hasher.hash("salainen")) is False

    def test_stronger_level_flags_weaker_hash(self, hasher: PasswordHasher) -> None:
        """A hash made with weaker parameters needs rehashing at a higher level."""
        weak_hash = hasher.hash("salainen")

        assert PasswordHasher(level="medium").check_needs_rehash(weak_hash) is True

    def test_unknown_level_rejected(self) -> None:
        """Only configured security levels are accepted."""
        with pytest.raises(KeyError):
            PasswordHasher(level="extreme")


class TestAsyncHelpers:
    """Test cases for the executor-backed helpers."""

    def test_default_hasher_is_shared(self) -> None:
        """The default hasher is created once."""
        assert get_password_hasher() is get_password_hasher()

    @pytest.mark.asyncio
    async def test_hash_and_verify(self) -> None:
        """Hashes from hash_password verify with verify_password."""
        hashed = await hash_password("sekret")

        assert await verify_password("sekret", hashed) is True
        assert await verify_password("other", hashed) is False

    @pytest.mark.asyncio
    async def test_missing_hash_never_verifies(self) -> None:
        """A missing hash is treated as a failed verification."""
        assert await verify_password("sekret", None) is False

    def test_hashing_error_is_app_error(self) -> None:
        """PasswordHashingError maps to a 500 response."""
        error = PasswordHashingError()

        assert error.status_code == 500
        assert str(error) == "Password hashing failed"


class TestHashingFailures:
    """Test cases for how hashing failures are classified and retried."""

    @pytest.fixture
    def failing_hasher(self, hasher: PasswordHasher, monkeypatch: pytest.MonkeyPatch) -> PasswordHasher:
        hasher.pwd_context = MagicMock()
        monkeypatch.setattr(
            "bloglist.managers.password_manager.get_password_hasher",
            lambda: hasher,
        )
        return hasher

    def test_rejected_input_is_hashing_error(self, failing_hasher: PasswordHasher) -> None:
        """A password the backend rejects is not reported as a backend fault."""
        failing_hasher.pwd_context.hash.side_effect = ValueError("bad")

        with pytest.raises(PasswordHashingError) as exc_info:
            failing_hasher.hash("salainen")
        assert not isinstance(exc_info.value, PasswordBackendError)

    def test_backend_fault_is_backend_error(self, failing_hasher: PasswordHasher) -> None:
        """Backend failures get their own error type."""
        failing_hasher.pwd_context.hash.side_effect = InternalBackendError("argon2 down")

        with pytest.raises(PasswordBackendError):
            failing_hasher.hash("salainen")

    @pytest.mark.asyncio
    async def test_rejected_input_fails_without_retry(self, failing_hasher: PasswordHasher) -> None:
        """Input errors fail the same way every time, so they are raised at once."""
        failing_hasher.pwd_context.hash.side_effect = UnicodeError("bad bytes")

        with pytest.raises(PasswordHashingError):
            await hash_password("salainen")
        assert failing_hasher.pwd_context.hash.call_count == 1

    @pytest.mark.asyncio
    async def test_backend_fault_is_retried(self, failing_hasher: PasswordHasher) -> None:
        """A transient backend failure is retried and the next attempt wins."""
        failing_hasher.pwd_context.hash.side_effect = [InternalBackendError("busy"), "$argon2id$ok"]

        assert await hash_password("salainen") == "$argon2id$ok"
        assert failing_hasher.pwd_context.hash.call_count == 2

    @pytest.mark.asyncio
    async def test_persistent_backend_fault_gives_up(self, failing_hasher: PasswordHasher) -> None:
        """The backend error propagates once the attempts run out."""
        failing_hasher.pwd_context.hash.side_effect = InternalBackendError("down")

        with pytest.raises(PasswordBackendError):
            await hash_password("salainen")
        assert failing_hasher.pwd_context.hash.call_count == 3
