"""Key-value storage for persisted client state"""

import json
import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
USER_ID_KEY = "userId"
USER_KEY = "user"


class MemoryStorage:
    """In-memory storage"""

    def __init__(self):
        self.items: dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


class FileStorage(MemoryStorage):
    """
    Storage persisted as a JSON object on disk.

    Every write rewrites the whole file, so the file always reflects
    the in-memory state.
    """

    def __init__(self, path: str):
        super().__init__()
        self.path = path
        if os.path.exists(path):
            with open(path, "r", encoding="utf-8") as f:
                try:
                    data = json.load(f)
                except ValueError:
                    data = None
            if isinstance(data, dict):
                self.items = {str(k): str(v) for k, v in data.items()}
            else:
                logger.warning(f"Ignoring malformed storage file: {path}")

    def set_item(self, key: str, value: str) -> None:
        super().set_item(key, value)
        self._flush()

    def remove_item(self, key: str) -> None:
        if key in self.items:
            super().remove_item(key)
            self._flush()

    def _flush(self) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self.items, f)
