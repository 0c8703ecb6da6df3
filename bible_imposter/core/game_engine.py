"""
Core game engine managing the round state and its transitions.
"""

import logging
import random
import uuid
from enum import Enum
from typing import List, Optional, TYPE_CHECKING
from dataclasses import dataclass

from .exceptions import EmptyCatalogError
from .imposter_selector import ImposterSelector
from .player import Player
from .terms import Term
from .word_selector import WordHistorySelector
from ..config.game_config import GameConfig, default_config

if TYPE_CHECKING:
    from ..storage.history import HistoryStore
    from ..storage.roster import RosterStore
    from ..storage.settings import SettingsStore

logger = logging.getLogger(__name__)

IMPOSTER_ROLE = "You are the Imposter!"
ROLE_ERROR = "Error"


class GameStatus(Enum):
    """Where the round is in its lifecycle."""
    SETUP = "setup"
    PLAYING = "playing"
    FINISHED = "finished"


@dataclass
class GameSession:
    """State of a single round. Empty while in setup."""
    status: GameStatus = GameStatus.SETUP
    secret_term: Optional[Term] = None
    imposter_id: Optional[uuid.UUID] = None
    starting_player_id: Optional[uuid.UUID] = None
    current_player_index: int = 0

    def reset(self) -> None:
        """Return to setup, forgetting the round."""
        self.status = GameStatus.SETUP
        self.secret_term = None
        self.imposter_id = None
        self.starting_player_id = None
        self.current_player_index = 0


class ImposterGame:
    """
    Drives rounds over a persisted roster.

    The UI shell calls the roster and round operations and reads the
    published state (status, roster, current player, error flag/message).
    Nothing here raises to the caller; failures set ``show_error`` and
    leave the game in setup.
    """

    def __init__(
        self,
        roster: 'RosterStore',
        settings: 'SettingsStore',
        history: 'HistoryStore',
        word_selector: WordHistorySelector,
        imposter_selector: Optional[ImposterSelector] = None,
        config: GameConfig = default_config,
        rng: Optional[random.Random] = None,
    ):
        self.roster_store = roster
        self.settings = settings
        self.history = history
        self.word_selector = word_selector
        self.config = config
        self.random = rng or random.Random(config.random_seed)
        self.imposter_selector = imposter_selector or ImposterSelector(self.random)
        self.session = GameSession()

        self.show_error = False
        self.error_message = ""

    # Published state

    @property
    def roster(self) -> List[Player]:
        return list(self.roster_store.players)

    @property
    def status(self) -> GameStatus:
        return self.session.status

    @property
    def current_player_index(self) -> int:
        return self.session.current_player_index

    @property
    def current_player(self) -> Optional[Player]:
        """Player whose turn it is to view their role, if a round is running."""
        if self.session.status != GameStatus.PLAYING:
            return None
        players = self.roster_store.players
        if not 0 <= self.session.current_player_index < len(players):
            return None
        return players[self.session.current_player_index]

    @property
    def starting_player(self) -> Optional[Player]:
        if self.session.starting_player_id is None:
            return None
        return self.roster_store.get_player(self.session.starting_player_id)

    @property
    def can_start(self) -> bool:
        count = len(self.roster_store)
        return count > 0 and count >= self.config.min_players

    def dismiss_error(self) -> None:
        self.show_error = False
        self.error_message = ""

    # Roster management

    def add_player(self, name: str) -> Optional[Player]:
        return self.roster_store.add_player(name)

    def remove_player(self, player_id: uuid.UUID) -> bool:
        return self.roster_store.remove_player(player_id)

    def remove_players_at(self, offsets) -> None:
        self.roster_store.remove_players_at(offsets)

    def remove_all_players(self) -> None:
        self.roster_store.remove_all_players()

    # Game logic

    def start_game(self) -> bool:
        """
        Begin a round: pick the secret term, the imposter and the starting player.

        Returns:
            True if the round started
        """
        if self.session.status != GameStatus.SETUP:
            logger.debug("start_game ignored in status %s", self.session.status.value)
            return False

        players = self.roster_store.players
        if not players or len(players) < self.config.min_players:
            logger.debug("start_game ignored: %d players, need %d", len(players), self.config.min_players)
            return False

        # 1. Get word
        key = self.settings.catalog_key
        try:
            term = self.word_selector.next_term(key)
        except EmptyCatalogError as e:
            logger.error(e.message)
            self.error_message = e.message
            self.show_error = True
            return False

        # 2. Pick imposter
        imposter_index = self.imposter_selector.select_imposter(players, self.history.get_imposter_history())
        imposter = players[imposter_index]
        self.history.record_imposter(imposter.name)

        # 3. Pick starter; can be anyone, including the imposter
        starter = self.random.choice(players)

        # 4. Reset turn state
        self.session.secret_term = term
        self.session.imposter_id = imposter.id
        self.session.starting_player_id = starter.id
        self.session.current_player_index = 0
        self.session.status = GameStatus.PLAYING
        self.dismiss_error()

        logger.info("Round started with %d players from %s", len(players), key)
        return True

    def next_player(self) -> None:
        """Advance to the next player, or finish once everyone has seen their role."""
        if self.session.status != GameStatus.PLAYING:
            return
        if self.session.current_player_index < len(self.roster_store) - 1:
            self.session.current_player_index += 1
        else:
            self.session.status = GameStatus.FINISHED
            logger.info("All players have seen their roles")

    def reset_game(self) -> None:
        """Back to setup. Roster and settings are kept."""
        self.session.reset()

    def get_role(self, player_id: uuid.UUID) -> str:
        """
        Text shown to a player on the reveal screen.

        Args:
            player_id: Player asking for their role

        Returns:
            The imposter message (with the hint when enabled), the secret
            term for everyone else, or ROLE_ERROR before a round starts
        """
        term = self.session.secret_term
        if term is None:
            return ROLE_ERROR
        if player_id == self.session.imposter_id:
            if self.settings.show_hint_for_imposter and term.hint:
                return f"{IMPOSTER_ROLE}\nHint: {term.hint}"
            return IMPOSTER_ROLE
        return term.text
