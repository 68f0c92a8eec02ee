from bloglist.managers.password_manager import (
    PasswordHasher,
    get_password_hasher,
    hash_password,
    verify_password,
)
from bloglist.managers.token_manager import (
    create_access_token,
    decode_access_token,
)

__all__ = [
    "PasswordHasher",
    "create_access_token",
    "decode_access_token",
    "get_password_hasher",
    "hash_password",
    "verify_password",
]
