"""
Persisted selection histories: served term ids per catalog and recent imposters.
"""

import logging
from typing import List

from .kv_store import KeyValueStore
from ..core.terms import CatalogKey

logger = logging.getLogger(__name__)

IMPOSTER_HISTORY_KEY = "imposter_history"
DEFAULT_IMPOSTER_HISTORY_SIZE = 7


def push_imposter(history: List[str], name: str, cap: int = DEFAULT_IMPOSTER_HISTORY_SIZE) -> List[str]:
    """
    Return a new history with name at the front, truncated to cap entries.
    
    Args:
        history: Current history, newest first
        name: Name of the imposter just chosen
        cap: Maximum number of entries kept
    """
    return ([name] + list(history))[:cap]


class HistoryStore:
    """Reads and writes the selection histories through a key-value store."""
    
    def __init__(self, store: KeyValueStore, imposter_history_size: int = DEFAULT_IMPOSTER_HISTORY_SIZE):
        self.store = store
        self.imposter_history_size = imposter_history_size
    
    def get_term_history(self, key: CatalogKey) -> List[int]:
        """Term ids already served for this catalog, oldest first."""
        raw = self.store.get(key.history_key)
        if raw is None:
            return []
        if not isinstance(raw, list) or not all(isinstance(i, int) and not isinstance(i, bool) for i in raw):
            logger.warning("Ignoring malformed term history under %s", key.history_key)
            return []
        # Drop duplicates from hand-edited or partially written data
        return list(dict.fromkeys(raw))
    
    def set_term_history(self, key: CatalogKey, ids: List[int]) -> None:
        self.store.set(key.history_key, list(ids))
    
    def clear_term_history(self, key: CatalogKey) -> None:
        self.store.remove(key.history_key)
    
    def get_imposter_history(self) -> List[str]:
        """Recent imposter names, newest first."""
        raw = self.store.get(IMPOSTER_HISTORY_KEY)
        if raw is None:
            return []
        if not isinstance(raw, list) or not all(isinstance(n, str) for n in raw):
            logger.warning("Ignoring malformed imposter history")
            return []
        return raw[:self.imposter_history_size]
    
    def record_imposter(self, name: str) -> List[str]:
        """
        Insert name at the front of the imposter history and persist it.
        
        Returns:
            A copy of the updated history
        """
        history = push_imposter(self.get_imposter_history(), name, self.imposter_history_size)
        self.store.set(IMPOSTER_HISTORY_KEY, history)
        return list(history)
    
    def clear_imposter_history(self) -> None:
        self.store.remove(IMPOSTER_HISTORY_KEY)
