"""
Ordered, persisted list of players.
"""

import json
import logging
import uuid
from typing import Iterable, List, Optional

from .kv_store import KeyValueStore
from ..core.player import Player

logger = logging.getLogger(__name__)

ROSTER_KEY = "user_roster_cache"


class RosterStore:
    """The roster, in display and turn order, saved after every change."""
    
    def __init__(self, store: KeyValueStore):
        self.store = store
        self.players: List[Player] = self._load()
    
    def __len__(self) -> int:
        return len(self.players)
    
    def __iter__(self):
        return iter(self.players)
    
    def __getitem__(self, index: int) -> Player:
        return self.players[index]
    
    def get_player(self, player_id: uuid.UUID) -> Optional[Player]:
        """Get player by id, or None."""
        for player in self.players:
            if player.id == player_id:
                return player
        return None
    
    def add_player(self, name: str) -> Optional[Player]:
        """
        Append a new player with a fresh id.
        
        Returns:
            The new player, or None if the name is blank
        """
        name = name.strip()
        if not name:
            return None
        player = Player(name=name)
        self.players.append(player)
        self._save()
        return player
    
    def remove_player(self, player_id: uuid.UUID) -> bool:
        """Remove a player by id. Returns True if someone was removed."""
        remaining = [p for p in self.players if p.id != player_id]
        if len(remaining) == len(self.players):
            return False
        self.players = remaining
        self._save()
        return True
    
    def remove_players_at(self, offsets: Iterable[int]) -> None:
        """Remove the players at the given positions; out-of-range offsets are ignored."""
        drop = set(offsets)
        self.players = [p for i, p in enumerate(self.players) if i not in drop]
        self._save()
    
    def remove_all_players(self) -> None:
        self.players = []
        self._save()
    
    def _save(self) -> None:
        blob = json.dumps([p.to_dict() for p in self.players], ensure_ascii=False)
        self.store.set(ROSTER_KEY, blob)
    
    def _load(self) -> List[Player]:
        blob = self.store.get(ROSTER_KEY)
        if blob is None:
            return []
        try:
            return [Player.from_dict(item) for item in json.loads(blob)]
        except (TypeError, ValueError, KeyError) as e:
            logger.warning("Could not decode saved roster, starting empty: %s", e)
            return []
