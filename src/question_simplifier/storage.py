"""
Client-local key-value storage.

Values are strings keyed by name, kept together in a single JSON file, the
way a browser keeps ``localStorage``. The timeline uses one key.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from .config import settings
from .state import QuestionGroup, from_snapshot, to_snapshot


logger = logging.getLogger(__name__)

STORAGE_KEY = "savedQuestions"


@dataclass
class LocalStorage:
    path: str = settings.storage_path

    def _read(self) -> Dict[str, str]:
        file = Path(self.path)
        if not file.exists():
            return {}
        try:
            data = json.loads(file.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable storage file %s", self.path)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: Dict[str, str]) -> None:
        file = Path(self.path)
        file.parent.mkdir(parents=True, exist_ok=True)
        file.write_text(json.dumps(data), encoding="utf-8")

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)


def save_groups(storage: LocalStorage, groups: List[QuestionGroup]) -> None:
    """Persist the reduced snapshot of ``groups``."""
    storage.set_item(STORAGE_KEY, json.dumps(to_snapshot(groups)))


def load_groups(storage: LocalStorage) -> List[QuestionGroup]:
    saved = storage.get_item(STORAGE_KEY)
    if not saved:
        return []
    try:
        return from_snapshot(json.loads(saved))
    except (ValueError, KeyError, TypeError):
        logger.warning("Discarding malformed saved questions")
        return []
