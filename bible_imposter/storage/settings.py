"""
Persisted player-facing settings.
"""

import logging

from .kv_store import KeyValueStore
from ..core.terms import CatalogKey, Difficulty, Language
from ..config.game_config import GameConfig, default_config

logger = logging.getLogger(__name__)

DIFFICULTY_KEY = "selected_difficulty"
LANGUAGE_KEY = "selected_language"
SHOW_HINT_KEY = "show_hint_for_imposter"


class SettingsStore:
    """Selected difficulty, language and the imposter hint toggle."""
    
    def __init__(self, store: KeyValueStore, config: GameConfig = default_config):
        self.store = store
        self.config = config
    
    @property
    def difficulty(self) -> Difficulty:
        return self._read_enum(DIFFICULTY_KEY, Difficulty, self.config.default_difficulty, Difficulty.EASY)
    
    @difficulty.setter
    def difficulty(self, value: Difficulty) -> None:
        self.store.set(DIFFICULTY_KEY, value.value)
    
    @property
    def language(self) -> Language:
        return self._read_enum(LANGUAGE_KEY, Language, self.config.default_language, Language.ENGLISH)
    
    @language.setter
    def language(self, value: Language) -> None:
        self.store.set(LANGUAGE_KEY, value.value)
    
    @property
    def show_hint_for_imposter(self) -> bool:
        raw = self.store.get(SHOW_HINT_KEY)
        if isinstance(raw, bool):
            return raw
        if raw is not None:
            logger.warning("Ignoring malformed value for %s: %r", SHOW_HINT_KEY, raw)
        return bool(self.config.default_show_hint)
    
    @show_hint_for_imposter.setter
    def show_hint_for_imposter(self, value: bool) -> None:
        self.store.set(SHOW_HINT_KEY, bool(value))
    
    @property
    def catalog_key(self) -> CatalogKey:
        """Catalog selected by the current difficulty and language."""
        return CatalogKey(self.difficulty, self.language)
    
    def _read_enum(self, key, enum_cls, configured, fallback):
        raw = self.store.get(key)
        for candidate in (raw, configured):
            if candidate is None:
                continue
            try:
                return enum_cls(candidate)
            except ValueError:
                logger.warning("Ignoring unknown %s value %r", enum_cls.__name__, candidate)
        return fallback
