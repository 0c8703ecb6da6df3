"""
Pytest fixtures for Bible Imposter tests.
"""

import json
import random

import pytest

from bible_imposter.app import create_game
from bible_imposter.catalog import TermCatalog
from bible_imposter.config.game_config import GameConfig
from bible_imposter.core import Player
from bible_imposter.storage import HistoryStore, MemoryStore

EASY_TERMS = [
    {"id": 1, "term": "Noah", "hint": "person"},
    {"id": 2, "term": "Jerusalem", "hint": "place"},
    {"id": 3, "term": "Ark", "hint": "object"},
    {"id": 4, "term": "Exodus", "hint": "event"},
    {"id": 5, "term": "Manna", "hint": "object"},
]


class FixedRandom(random.Random):
    """
    Random source with scripted results.
    
    random() returns queued draws (falling back to a seeded stream);
    choice() returns the element at each queued index, or the first element
    once the queue is empty.
    """
    
    def __init__(self, draws=(), choices=()):
        super().__init__(0)
        self.draws = list(draws)
        self.choice_indices = list(choices)
    
    def random(self):
        if self.draws:
            return self.draws.pop(0)
        return super().random()
    
    def choice(self, seq):
        if self.choice_indices:
            return seq[self.choice_indices.pop(0)]
        return seq[0]


@pytest.fixture
def store():
    """Fresh in-memory key-value store."""
    return MemoryStore()


@pytest.fixture
def catalog_dir(tmp_path):
    """
    Catalog directory with a 5-term easy list, an empty hard list and a
    single hint-less Spanish term. Chinese lists are missing on purpose.
    """
    data_dir = tmp_path / "terms"
    data_dir.mkdir()
    (data_dir / "easy.json").write_text(json.dumps(EASY_TERMS), encoding="utf-8")
    (data_dir / "hard.json").write_text("[]", encoding="utf-8")
    (data_dir / "easy-es.json").write_text(
        json.dumps([{"id": 1, "term": "Arca", "hint": ""}]), encoding="utf-8"
    )
    return data_dir


@pytest.fixture
def catalog(catalog_dir):
    return TermCatalog(str(catalog_dir))


@pytest.fixture
def history(store):
    return HistoryStore(store)


@pytest.fixture
def game_config(catalog_dir):
    """Test game configuration pointing at the temporary catalog."""
    return GameConfig(catalog_dir=str(catalog_dir), random_seed=1234)


@pytest.fixture
def roster():
    """Three players in turn order."""
    return [Player(name="A"), Player(name="B"), Player(name="C")]


@pytest.fixture
def game(game_config, store):
    """Game with three players, ready to start."""
    game = create_game(game_config, store, rng=random.Random(1234))
    for name in ("Alice", "Bob", "Carol"):
        game.add_player(name)
    return game
