"""
Password hashing module using Argon2 with passlib's CryptContext.

Hashes are salted Argon2id strings; pbkdf2_sha256 hashes are still accepted
for verification and flagged for rehashing.
"""

from asyncio import get_running_loop
from concurrent.futures import ThreadPoolExecutor

from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from bloglist.configs import CONFIG_MAP, settings
from bloglist.decorators import with_retry
from bloglist.errors import PasswordBackendError, PasswordHashingError
from bloglist.monitoring import get_logger

executor = ThreadPoolExecutor(max_workers=4)
logger = get_logger(__name__)


class PasswordHasher:
    """
    A password hashing and verification manager using the Argon2id algorithm.

    This class wraps passlib's CryptContext to provide:
    - Password hashing with Argon2id
    - Password verification
    - Hash deprecation checking
    """

    def __init__(self, level: str | None = None) -> None:
        """
        Initialize the hasher for a security level.

        Args:
            level: Key of ``CONFIG_MAP``; defaults to ``PASSWORD_SECURITY_LEVEL``.
        """
        self.level = level or settings.PASSWORD_SECURITY_LEVEL
        config = CONFIG_MAP[self.level]
        self.pwd_context = CryptContext(
            schemes=["argon2", "pbkdf2_sha256"],
            deprecated="pbkdf2_sha256",
            argon2__memory_cost=config.memory_cost,
            argon2__time_cost=config.time_cost,
            argon2__parallelism=config.parallelism,
        )
        logger.info("PasswordHasher initialized", scheme="argon2id", security_level=self.level)

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password using Argon2id.

        Args:
            password: The plaintext password to hash

        Returns:
            str: The hashed password in Argon2id format

        Raises:
            ValueError: If password is empty
            PasswordHashingError: If the password cannot be hashed
            PasswordBackendError: If the argon2 backend fails

        Example:
            >>> hasher = PasswordHasher()
            >>> hasher.hash("salainen").startswith("$argon2id$")
            True
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg)

        try:
            return self.pwd_context.hash(password)
        except InternalBackendError as e:
            logger.exception("Hashing backend failed", security_level=self.level)
            raise PasswordBackendError from e
        except (ValueError, UnicodeError) as e:
            logger.exception("Invalid password format", security_level=self.level)
            mssg = "Failed to hash password"
            raise PasswordHashingError(mssg) from e

    def verify(self, password: str, hashed_password: str) -> bool:
        """
        Verify a plaintext password against a hashed password.

        Args:
            password: The plaintext password to verify
            hashed_password: The hashed password to verify against

        Returns:
            bool: True if password matches, False otherwise
        """
        if not isinstance(hashed_password, str) or not hashed_password.strip():
            logger.warning("Invalid hash format provided")
            return False

        try:
            return self.pwd_context.verify(password, hashed_password)
        except ValueError:
            logger.exception("Stored hash is corrupted or invalid format")
            return False

    def dummy_verify(self) -> None:
        """Spend the time of a real verification when no user matched."""
        self.pwd_context.dummy_verify()

    def check_needs_rehash(self, hashed_password: str) -> bool:
        """
        Check if a hash uses a deprecated scheme or outdated parameters.

        Args:
            hashed_password: The hashed password to check

        Returns:
            bool: True if rehashing is needed, False otherwise
        """
        try:
            return self.pwd_context.needs_update(hashed_password)
        except ValueError:
            logger.exception("Error checking hash currency", security_level=self.level)
            return False


_default_hasher: PasswordHasher | None = None


def get_password_hasher() -> PasswordHasher:
    """
    Get or create the default password hasher instance.

    Returns:
        PasswordHasher: The shared password hasher instance
    """
    global _default_hasher
    if _default_hasher is None:
        _default_hasher = PasswordHasher()
    return _default_hasher


@with_retry(base_delay=0.1, max_delay=1, exec_retry=PasswordBackendError)
async def hash_password(password: str) -> str:
    """
    Hash a password on the worker pool using the default hasher.

    Backend failures are retried; a password the hasher rejects fails at once.

    Args:
        password: The plaintext password to hash

    Returns:
        str: The hashed password
    """
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().hash,
        password,
    )


async def verify_password(password: str, hashed_password: str | None) -> bool:
    """
    Verify a password on the worker pool using the default hasher.

    A missing hash still costs a full verification so that unknown usernames
    cannot be told apart by response time.

    Args:
        password: The plaintext password to verify
        hashed_password: The stored hash, or None when no user matched

    Returns:
        bool: True if password matches, False otherwise
    """
    hasher = get_password_hasher()
    loop = get_running_loop()
    if hashed_password is None:
        await loop.run_in_executor(executor, hasher.dummy_verify)
        return False
    return await loop.run_in_executor(executor, hasher.verify, password, hashed_password)
