"""
Tests for the console front end.
"""

import pytest

from bible_imposter import app as app_module
from bible_imposter.app import ImposterApp, main
from bible_imposter.core import Difficulty, GameStatus, IMPOSTER_ROLE, Language
from bible_imposter.storage import JsonFileStore


class ScriptedConsole:
    """Feeds canned input lines and collects output."""
    
    def __init__(self, lines=()):
        self.lines = list(lines)
        self.prompts = []
        self.output = []
    
    def input(self, prompt=""):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)
    
    def print(self, text=""):
        self.output.append(text)
    
    @property
    def text(self):
        return "\n".join(self.output)


@pytest.fixture
def console():
    return ScriptedConsole()


@pytest.fixture
def imposter_app(game, console):
    return ImposterApp(game, input_fn=console.input, output_fn=console.print)


def test_add_and_list_players(imposter_app, console):
    imposter_app.handle_command('add "Dan Smith"')
    imposter_app.handle_command("players")
    
    assert "Added Dan Smith." in console.text
    assert "4. Dan Smith" in console.text


def test_add_blank_player(imposter_app, console):
    imposter_app.handle_command("add")
    assert "Player name cannot be empty." in console.text


def test_remove_player(imposter_app, console, game):
    imposter_app.handle_command("remove 2")
    imposter_app.handle_command("remove 9")
    imposter_app.handle_command("remove x")
    
    assert [p.name for p in game.roster] == ["Alice", "Carol"]
    assert "Removed Bob." in console.text
    assert "No player number 9." in console.text
    assert "Usage: remove <number>" in console.text


def test_clear_players(imposter_app, game):
    imposter_app.handle_command("clear")
    assert game.roster == []


def test_settings_commands(imposter_app, console, game):
    imposter_app.handle_command("difficulty hard")
    imposter_app.handle_command("language zh")
    imposter_app.handle_command("hint on")
    imposter_app.handle_command("settings")
    
    assert game.settings.difficulty == Difficulty.HARD
    assert game.settings.language == Language.CHINESE
    assert game.settings.show_hint_for_imposter is True
    assert "Show hint for imposter: on" in console.text


def test_bad_settings_arguments(imposter_app, console, game):
    imposter_app.handle_command("difficulty extreme")
    imposter_app.handle_command("language fr")
    imposter_app.handle_command("hint maybe")
    
    assert "Usage: difficulty <easy|hard>" in console.text
    assert "Usage: language <en|zh|es>" in console.text
    assert "Usage: hint <on|off>" in console.text
    assert game.settings.difficulty == Difficulty.EASY


def test_unknown_command_and_quit(imposter_app, console):
    assert imposter_app.handle_command("dance")
    assert imposter_app.handle_command("")
    assert not imposter_app.handle_command("quit")
    assert "Unknown command: dance" in console.text


def test_start_needs_players(imposter_app, console, game):
    game.remove_players_at([0])
    imposter_app.handle_command("start")
    
    assert "Need at least 3 players to start." in console.text
    assert game.status == GameStatus.SETUP


def test_start_with_empty_catalog_shows_error(imposter_app, console, game):
    game.settings.difficulty = Difficulty.HARD
    imposter_app.handle_command("start")
    
    assert "Error: Could not load words for Hard" in console.text
    assert game.status == GameStatus.SETUP
    assert not game.show_error


def test_full_round(imposter_app, console, game):
    """Every player reveals and hides, then the starter is announced."""
    # Reveal + hide for each of three players, then return to menu
    console.lines = [""] * 7
    imposter_app.handle_command("start")
    
    assert console.text.count("Pass the device to:") == 3
    assert console.text.count(IMPOSTER_ROLE) == 1
    assert "All players are ready!" in console.text
    assert "The starting player is:" in console.text
    assert game.status == GameStatus.SETUP
    assert game.session.secret_term is None


def test_round_survives_eof(imposter_app, console, game):
    """Running out of input mid-round still finishes cleanly."""
    imposter_app.handle_command("start")
    assert game.status == GameStatus.SETUP


def test_run_loop(game, console):
    console.lines = ["add Dave", "players", "quit"]
    ImposterApp(game, input_fn=console.input, output_fn=console.print).run()
    
    assert "BIBLE IMPOSTER" in console.text
    assert [p.name for p in game.roster][-1] == "Dave"


def test_main_wires_config(tmp_path, monkeypatch):
    started = []
    monkeypatch.setattr(app_module.ImposterApp, "run", lambda self: started.append(self))
    monkeypatch.delenv(app_module.STORE_ENV_VAR, raising=False)
    store_path = tmp_path / "save.json"
    
    main(["--seed", "3", "--store", str(store_path)])
    
    assert len(started) == 1
    game = started[0].game
    assert game.config.random_seed == 3
    assert isinstance(game.roster_store.store, JsonFileStore)
    assert game.roster_store.store.path == store_path


def test_main_store_from_env(tmp_path, monkeypatch):
    started = []
    monkeypatch.setattr(app_module.ImposterApp, "run", lambda self: started.append(self))
    store_path = tmp_path / "env.json"
    monkeypatch.setenv(app_module.STORE_ENV_VAR, str(store_path))
    
    main([])
    
    assert started[0].game.roster_store.store.path == store_path


def test_round_survives_interrupt_at_prompt(game, console):
    """Ctrl-C at a reveal prompt does not leave the round half-played."""
    def interrupted(prompt=""):
        console.prompts.append(prompt)
        raise KeyboardInterrupt
    
    imposter_app = ImposterApp(game, input_fn=interrupted, output_fn=console.print)
    imposter_app.handle_command("start")
    
    assert console.text.count("Pass the device to:") == 3
    assert "All players are ready!" in console.text
    assert game.status == GameStatus.SETUP
