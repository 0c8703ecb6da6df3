"""
Term catalog types: difficulties, languages and the terms themselves.
"""

from enum import Enum
from typing import Any, Dict, NamedTuple, Optional
from dataclasses import dataclass


class Difficulty(Enum):
    """Term list difficulty."""
    EASY = "Easy"
    HARD = "Hard"
    
    @property
    def filename(self) -> str:
        """Stem of the data file holding this difficulty's terms."""
        return self.value.lower()


class Language(Enum):
    """Term list language."""
    ENGLISH = "English"
    CHINESE = "中文"
    SPANISH = "Español"
    
    @property
    def suffix(self) -> str:
        """Data file suffix appended after the difficulty stem."""
        return _LANGUAGE_SUFFIXES[self]


_LANGUAGE_SUFFIXES = {
    Language.ENGLISH: "",
    Language.CHINESE: "-zh",
    Language.SPANISH: "-es",
}


class CatalogKey(NamedTuple):
    """The (difficulty, language) pair identifying a fixed term list."""
    difficulty: Difficulty
    language: Language
    
    @property
    def filename(self) -> str:
        return f"{self.difficulty.filename}{self.language.suffix}.json"
    
    @property
    def history_key(self) -> str:
        """Store key for this catalog's served-term history."""
        return f"history_{self.difficulty.value}_{self.language.value}"
    
    def __str__(self) -> str:
        return f"{self.difficulty.value} ({self.language.value})"


@dataclass(frozen=True)
class Term:
    """A secret term and the category hint shown to the imposter."""
    id: int
    text: str
    hint: str = ""
    
    def __str__(self) -> str:
        return self.text
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Term":
        """
        Build a term from a catalog JSON object.
        
        Raises:
            KeyError: If 'id' or 'term' is missing
            ValueError: If 'id' is not an integer
        """
        return cls(id=int(data["id"]), text=str(data["term"]), hint=str(data.get("hint") or ""))


def parse_difficulty(value: Optional[str]) -> Optional[Difficulty]:
    """Match a difficulty by raw value or name, case-insensitively."""
    if not value:
        return None
    wanted = value.strip().lower()
    for difficulty in Difficulty:
        if wanted in (difficulty.value.lower(), difficulty.name.lower()):
            return difficulty
    return None


def parse_language(value: Optional[str]) -> Optional[Language]:
    """
    Match a language by raw value, name or short code (en, zh, es).
    """
    if not value:
        return None
    wanted = value.strip().lower()
    codes = {"en": Language.ENGLISH, "zh": Language.CHINESE, "es": Language.SPANISH}
    if wanted in codes:
        return codes[wanted]
    for language in Language:
        if wanted in (language.value.lower(), language.name.lower()):
            return language
    return None
