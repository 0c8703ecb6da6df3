"""
Loader for the bundled JSON term lists.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Tuple

from ..core.terms import CatalogKey, Term

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path(__file__).parent / "data"


class TermCatalog:
    """
    Read-only source of terms keyed by (difficulty, language).
    
    Each list is read from ``<difficulty><suffix>.json`` on first use and
    cached for the lifetime of the catalog. A missing or unreadable file
    yields an empty list.
    """
    
    def __init__(self, data_dir: Optional[str] = None):
        self.data_dir = Path(data_dir) if data_dir else DEFAULT_DATA_DIR
        self._cache: Dict[CatalogKey, Tuple[Term, ...]] = {}
    
    def load(self, key: CatalogKey) -> Tuple[Term, ...]:
        """
        Get the terms for a catalog key.
        
        Args:
            key: Difficulty and language to load
            
        Returns:
            Tuple of terms, empty if the list is missing or malformed
        """
        if key not in self._cache:
            self._cache[key] = self._read(key)
        return self._cache[key]
    
    def _read(self, key: CatalogKey) -> Tuple[Term, ...]:
        path = self.data_dir / key.filename
        if not path.exists():
            logger.error("Could not find %s in %s", key.filename, self.data_dir)
            return ()
        
        try:
            with open(path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
            terms = tuple(Term.from_dict(item) for item in raw)
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.error("Error decoding %s: %s", key.filename, e)
            return ()
        
        unique: Dict[int, Term] = {}
        for term in terms:
            if term.id in unique:
                logger.warning("Duplicate term id %d in %s; keeping first occurrence", term.id, key.filename)
                continue
            unique[term.id] = term

        logger.debug("Loaded %d terms from %s", len(unique), key.filename)
        return tuple(unique.values())
