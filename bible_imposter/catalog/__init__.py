"""
Static term lists, one per difficulty and language.
"""

from .term_catalog import TermCatalog, DEFAULT_DATA_DIR

__all__ = ['TermCatalog', 'DEFAULT_DATA_DIR']
