# Core modules

from .config import settings, get_settings, Settings
from .session import Session, SessionState
from .storage import MemoryStorage, FileStorage

__all__ = [
    "settings",
    "get_settings",
    "Settings",
    "Session",
    "SessionState",
    "MemoryStorage",
    "FileStorage",
]
