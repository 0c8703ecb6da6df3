"""
Persistence: key-value backends and the stores built on them.
"""

from .kv_store import KeyValueStore, MemoryStore, JsonFileStore
from .history import HistoryStore, push_imposter
from .roster import RosterStore
from .settings import SettingsStore

__all__ = [
    'KeyValueStore',
    'MemoryStore',
    'JsonFileStore',
    'HistoryStore',
    'push_imposter',
    'RosterStore',
    'SettingsStore',
]
