"""Core application modules."""
from pos_backend.core.config import Settings, settings, get_settings
from pos_backend.core.database import Base, Store, get_store, get_db

__all__ = [
    "Settings",
    "settings",
    "get_settings",
    "Base",
    "Store",
    "get_store",
    "get_db",
]
