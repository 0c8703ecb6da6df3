"""
Console front end for Bible Imposter.

Usage: bible-imposter [--config configs/default.yaml] [--seed 42] [--store path.json]
"""

import argparse
import logging
import os
import random
import shlex
from typing import Callable, List, Optional

from dotenv import load_dotenv

from .catalog import TermCatalog
from .config.game_config import GameConfig
from .config.config_loader import load_config
from .core import (
    Difficulty, GameStatus, ImposterGame, ImposterSelector,
    WordHistorySelector, parse_difficulty, parse_language,
)
from .storage import HistoryStore, JsonFileStore, KeyValueStore, RosterStore, SettingsStore

logger = logging.getLogger(__name__)

STORE_ENV_VAR = "BIBLE_IMPOSTER_STORE"
CLEAR_LINES = 40

HELP_TEXT = """Commands:
  add <name>              Add a player
  remove <number>         Remove a player by list number
  clear                   Remove all players
  players                 Show the roster
  difficulty <easy|hard>  Choose term difficulty
  language <en|zh|es>     Choose term language
  hint <on|off>           Show a category hint to the imposter
  settings                Show current settings
  start                   Start a round
  help                    Show this help
  quit                    Exit"""


def create_game(config: GameConfig, store: KeyValueStore, rng: Optional[random.Random] = None) -> ImposterGame:
    """
    Wire an ImposterGame from a config and a key-value store.

    All random draws share one generator, seeded from config.random_seed
    unless an explicit rng is given.
    """
    rng = rng or random.Random(config.random_seed)
    history = HistoryStore(store, imposter_history_size=config.imposter_history_size)
    catalog = TermCatalog(config.catalog_dir)
    return ImposterGame(
        roster=RosterStore(store),
        settings=SettingsStore(store, config),
        history=history,
        word_selector=WordHistorySelector(catalog, history, rng),
        imposter_selector=ImposterSelector(rng),
        config=config,
        rng=rng,
    )


class ImposterApp:
    """Main menu, settings and pass-the-device session screens."""

    def __init__(self, game: ImposterGame,
                 input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        self.game = game
        self.input = input_fn
        self.output = output_fn

    def run(self) -> None:
        """Read menu commands until the user quits."""
        self.output("=" * 60)
        self.output("BIBLE IMPOSTER")
        self.output("=" * 60)
        self.output(HELP_TEXT)
        self.show_players()
        while True:
            try:
                line = self.input("\n> ")
            except (EOFError, KeyboardInterrupt):
                self.output("")
                break
            if not self.handle_command(line):
                break

    def handle_command(self, line: str) -> bool:
        """
        Run one menu command.

        Returns:
            False when the user asked to quit
        """
        try:
            parts = shlex.split(line)
        except ValueError:
            parts = line.split()
        if not parts:
            return True

        command, args = parts[0].lower(), parts[1:]
        if command in ("quit", "exit", "q"):
            return False
        if command == "help":
            self.output(HELP_TEXT)
        elif command == "add":
            self.add_player(" ".join(args))
        elif command == "remove":
            self.remove_player(args)
        elif command == "clear":
            self.game.remove_all_players()
            self.output("All players removed.")
        elif command in ("players", "list"):
            self.show_players()
        elif command == "difficulty":
            self.set_difficulty(args)
        elif command == "language":
            self.set_language(args)
        elif command == "hint":
            self.set_hint(args)
        elif command == "settings":
            self.show_settings()
        elif command == "start":
            self.start_round()
        else:
            self.output(f"Unknown command: {command}. Type 'help' for commands.")
        return True

    # Main menu

    def add_player(self, name: str) -> None:
        player = self.game.add_player(name)
        if player is None:
            self.output("Player name cannot be empty.")
        else:
            self.output(f"Added {player.name}.")

    def remove_player(self, args: List[str]) -> None:
        roster = self.game.roster
        try:
            number = int(args[0])
        except (IndexError, ValueError):
            self.output("Usage: remove <number>")
            return
        if not 1 <= number <= len(roster):
            self.output(f"No player number {number}.")
            return
        player = roster[number - 1]
        self.game.remove_player(player.id)
        self.output(f"Removed {player.name}.")

    def show_players(self) -> None:
        roster = self.game.roster
        self.output(f"\nPlayers ({len(roster)}):")
        for number, player in enumerate(roster, start=1):
            self.output(f"  {number}. {player.name}")
        if not self.game.can_start:
            self.output(f"Need at least {self.game.config.min_players} players to start.")

    # Settings

    def set_difficulty(self, args: List[str]) -> None:
        difficulty = parse_difficulty(args[0] if args else None)
        if difficulty is None:
            choices = "|".join(d.value.lower() for d in Difficulty)
            self.output(f"Usage: difficulty <{choices}>")
            return
        self.game.settings.difficulty = difficulty
        self.output(f"Difficulty: {difficulty.value}")

    def set_language(self, args: List[str]) -> None:
        language = parse_language(args[0] if args else None)
        if language is None:
            self.output("Usage: language <en|zh|es>")
            return
        self.game.settings.language = language
        self.output(f"Language: {language.value}")

    def set_hint(self, args: List[str]) -> None:
        value = args[0].lower() if args else ""
        if value not in ("on", "off"):
            self.output("Usage: hint <on|off>")
            return
        self.game.settings.show_hint_for_imposter = value == "on"
        self.output(f"Show hint for imposter: {value}")

    def show_settings(self) -> None:
        settings = self.game.settings
        self.output(f"Difficulty: {settings.difficulty.value}")
        self.output(f"Language: {settings.language.value}")
        self.output(f"Show hint for imposter: {'on' if settings.show_hint_for_imposter else 'off'}")
        self.output("When enabled, the imposter sees a category hint (e.g. person, place, event).")

    # Session

    def start_round(self) -> None:
        if not self.game.can_start:
            self.output(f"Need at least {self.game.config.min_players} players to start.")
            return
        if not self.game.start_game():
            if self.game.show_error:
                self.output(f"Error: {self.game.error_message}")
                self.game.dismiss_error()
            return
        self.play_round()

    def play_round(self) -> None:
        """Pass the device around, then announce who starts."""
        while self.game.status == GameStatus.PLAYING:
            player = self.game.current_player
            self.output("\n" + "=" * 60)
            self.output("Pass the device to:")
            self.output(f"  {player.name}")
            self.output("=" * 60)
            self.reveal(player)
            self.game.next_player()

        self.output("\nAll players are ready!")
        starter = self.game.starting_player
        if starter is not None:
            self.output("The starting player is:")
            self.output(f"  {starter.name}")
        self._wait("\nPress Enter to return to the menu...")
        self.game.reset_game()

    def reveal(self, player) -> None:
        """
        Show the player's role until they press Enter again.

        The role text only lives in this call; nothing is stored.
        """
        self._wait("Press Enter to reveal your role...")
        role = self.game.get_role(player.id)
        self.output("\nYour role:")
        self.output(role)
        self._wait("\nPress Enter to hide and pass the device on...")
        self.output("\n" * CLEAR_LINES)

    def _wait(self, prompt: str) -> None:
        try:
            self.input(prompt)
        except (EOFError, KeyboardInterrupt):
            pass


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the console game."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Play Bible Imposter in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bible-imposter                                # Use default config
  bible-imposter --config configs/default.yaml  # Use a YAML config
  bible-imposter --seed 42                      # Reproducible draws
  bible-imposter --store ~/.imposter.json       # Custom save file
        """
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file (default: use default config)"
    )
    parser.add_argument(
        "--seed",
        "-s",
        type=int,
        default=None,
        help="Random seed for reproducible word and imposter draws"
    )
    parser.add_argument(
        "--store",
        type=str,
        default=None,
        help=f"Path to the JSON save file (default: ${STORE_ENV_VAR} or config store_path)"
    )

    args = parser.parse_args(argv)

    config = load_config(args.config)
    if args.seed is not None:
        config.random_seed = args.seed
    store_path = args.store or os.environ.get(STORE_ENV_VAR) or config.store_path

    logging.basicConfig(
        level=getattr(logging, str(config.log_level).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    logger.debug("Using store %s", store_path)

    game = create_game(config, JsonFileStore(store_path))
    ImposterApp(game).run()


if __name__ == "__main__":
    main()
