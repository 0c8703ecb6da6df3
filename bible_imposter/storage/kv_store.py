"""
Key-value stores holding the game's persisted state.
"""

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """
    String-keyed store of JSON-compatible values (str, bool, lists of int/str).
    
    Each key is written independently; there is no transactional grouping.
    """
    
    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Return the value for key, or default if absent."""
        pass
    
    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store value under key."""
        pass
    
    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete key if present."""
        pass


class MemoryStore(KeyValueStore):
    """Dict-backed store, used in tests and for throwaway sessions."""
    
    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self.data: Dict[str, Any] = dict(initial or {})
        self.writes = 0
    
    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)
    
    def set(self, key: str, value: Any) -> None:
        self.data[key] = value
        self.writes += 1
    
    def remove(self, key: str) -> None:
        if key in self.data:
            del self.data[key]
            self.writes += 1


class JsonFileStore(KeyValueStore):
    """
    Store persisted as a single JSON object on disk.
    
    The whole object is rewritten on every change through a temporary file
    that replaces the original, so the file on disk is always a complete
    version. An unreadable file is treated as empty.
    """
    
    def __init__(self, path: str):
        self.path = Path(path)
        self._data: Dict[str, Any] = self._load()
    
    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read store %s, starting empty: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Store %s does not hold a JSON object, starting empty", self.path)
            return {}
        return data
    
    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Write beside the target then swap, so a failed write keeps the old file
        with tempfile.NamedTemporaryFile('w', encoding='utf-8', dir=self.path.parent,
                                         suffix='.tmp', delete=False) as f:
            tmp_path = Path(f.name)
            try:
                json.dump(self._data, f, ensure_ascii=False, indent=2)
            except BaseException:
                f.close()
                tmp_path.unlink()
                raise
        os.replace(tmp_path, self.path)
    
    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)
    
    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._save()
    
    def remove(self, key: str) -> None:
        if key in self._data:
            del self._data[key]
            self._save()
