"""
Game configuration and constants.
"""

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    """Configuration for game parameters."""
    
    # Round settings
    min_players: int = 3
    imposter_history_size: int = 7  # Recent imposters remembered for weighting
    
    # Defaults used until the player picks something else
    default_difficulty: str = "Easy"
    default_language: str = "English"
    default_show_hint: bool = False
    
    # Storage
    store_path: str = "imposter_store.json"
    catalog_dir: Optional[str] = None  # None uses the bundled term lists
    
    # Misc
    log_level: str = "INFO"
    random_seed: Optional[int] = None  # Seed for reproducible word/imposter draws
    
    def __post_init__(self):
        self.validate()
    
    def validate(self) -> None:
        """Clamp counts that must be at least 1."""
        for name in ("min_players", "imposter_history_size"):
            value = getattr(self, name)
            if value < 1:
                logger.warning("%s must be at least 1, got %s; using 1", name, value)
                setattr(self, name, 1)


# Default configuration instance
default_config = GameConfig()
