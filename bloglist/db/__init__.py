"""Database engine and session helpers."""

from bloglist.db.database import (
    async_session_maker,
    close_db,
    engine,
    engine_options,
    get_session,
    init_db,
    ping_db,
    transaction,
)

__all__ = [
    "async_session_maker",
    "close_db",
    "engine",
    "engine_options",
    "get_session",
    "init_db",
    "ping_db",
    "transaction",
]
