"""
Secret term selection that works through a whole catalog before repeating.
"""

import logging
import random
from typing import TYPE_CHECKING

from .exceptions import EmptyCatalogError
from .terms import CatalogKey, Term

if TYPE_CHECKING:
    from ..catalog.term_catalog import TermCatalog
    from ..storage.history import HistoryStore

logger = logging.getLogger(__name__)


class WordHistorySelector:
    """
    Picks an unseen term for a catalog and records it in that catalog's history.
    
    Once every term has been served the history is cleared and the whole
    catalog becomes eligible again.
    """
    
    def __init__(self, catalog: 'TermCatalog', history: 'HistoryStore', rng: random.Random = None):
        self.catalog = catalog
        self.history = history
        self.random = rng or random.Random()
    
    def next_term(self, key: CatalogKey) -> Term:
        """
        Choose the next secret term for a catalog.
        
        Args:
            key: Difficulty and language of the catalog
            
        Returns:
            A term not served since the last full cycle
            
        Raises:
            EmptyCatalogError: If the catalog is missing or has no terms
        """
        terms = self.catalog.load(key)
        if not terms:
            raise EmptyCatalogError(key)
        
        # Ids no longer in the catalog are dropped so history stays bounded by it
        catalog_ids = {t.id for t in terms}
        served = [i for i in self.history.get_term_history(key) if i in catalog_ids]
        served_ids = set(served)
        available = [t for t in terms if t.id not in served_ids]
        
        if not available:
            # Full cycle completed
            logger.info("All %d terms in %s served, starting a new cycle", len(terms), key)
            served = []
            self.history.clear_term_history(key)
            available = list(terms)
        
        term = self.random.choice(available)
        served.append(term.id)
        self.history.set_term_history(key, served)
        return term
