# fondation_cms/storage/adapter.py
from __future__ import annotations

import json
import logging
from typing import Any, List, Optional

from .backends import StorageBackend

logger = logging.getLogger(__name__)


class Storage:
    """
    JSON key-value access over a raw backend.

    Every operation degrades instead of raising:
    - no backend configured -> get returns None, writes return False
    - undecodable value     -> logged, treated as absent
    - backend failure       -> logged, False / None
    """

    def __init__(self, backend: Optional[StorageBackend] = None):
        self.backend = backend

    @property
    def available(self) -> bool:
        return self.backend is not None

    def get_item(self, key: str) -> Optional[Any]:
        if self.backend is None:
            return None

        try:
            raw = self.backend.get(key)
            return json.loads(raw) if raw else None
        except Exception:
            logger.exception("Error getting item '%s' from storage", key)
            return None

    def set_item(self, key: str, value: Any) -> bool:
        if self.backend is None:
            return False

        try:
            self.backend.set(key, json.dumps(value, ensure_ascii=False))
            return True
        except Exception:
            logger.exception("Error setting item '%s' in storage", key)
            return False

    def remove_item(self, key: str) -> bool:
        if self.backend is None:
            return False

        try:
            self.backend.remove(key)
            return True
        except Exception:
            logger.exception("Error removing item '%s' from storage", key)
            return False

    def keys(self) -> List[str]:
        if self.backend is None:
            return []

        try:
            return list(self.backend.keys())
        except Exception:
            logger.exception("Error listing storage keys")
            return []
