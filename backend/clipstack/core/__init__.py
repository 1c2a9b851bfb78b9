# Core modules for ClipStack backend
from .config import Settings, get_settings, settings
from .database import (
    AsyncSessionLocal,
    Base,
    async_engine,
    create_all_tables,
    drop_all_tables,
    enable_sqlite_foreign_keys,
    get_async_session,
    utcnow,
)
from .errors import ClipStackError, ConflictError, NotFoundError, ValidationError

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "settings",
    # Database
    "Base",
    "get_async_session",
    "async_engine",
    "AsyncSessionLocal",
    "create_all_tables",
    "drop_all_tables",
    "enable_sqlite_foreign_keys",
    "utcnow",
    # Errors
    "ClipStackError",
    "ConflictError",
    "NotFoundError",
    "ValidationError",
]
