"""
Exceptions for game errors.
"""


class ImposterGameError(Exception):
    """Base class for recoverable game errors."""


class EmptyCatalogError(ImposterGameError):
    """Raised when the term list for a difficulty/language is missing or empty."""
    
    def __init__(self, catalog_key, message: str = ""):
        self.catalog_key = catalog_key
        self.message = message or (
            f"Could not load words for {catalog_key.difficulty.value} "
            f"({catalog_key.language.value}). Please check the JSON files."
        )
        super().__init__(self.message)
