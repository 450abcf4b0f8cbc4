"""
Keyword classification for media-release filenames.

This package contains the keyword dictionary and its supporting types:
- element: Element categories and the per-filename element container
- token_range: Half-open spans over a filename's code points
- search: Exact substring search returning spans
- keyword: Matching policies and keyword records
- dictionary_loader: Catalogue loading, caching and validation
- keyword_manager: The two-table keyword dictionary and phrase scanner
"""

# Explicit imports make the public API clear and prevent namespace pollution
from .element import ElementCategory, Elements, TableSlot
from .token_range import TokenRange, InvalidRangeError
from .search import search, search_in
from .keyword import (
    Keyword,
    MatchingPolicy,
    POLICY_DEFAULT,
    POLICY_INVALID,
    POLICY_UNIDENTIFIABLE,
    POLICY_UNIDENTIFIABLE_INVALID,
    POLICY_UNIDENTIFIABLE_UNSEARCHABLE,
    POLICY_PRESETS,
)
from .dictionary_loader import DictionaryLoader, CatalogueError
from .keyword_manager import KeywordManager

__all__ = [
    'ElementCategory',
    'Elements',
    'TableSlot',
    'TokenRange',
    'InvalidRangeError',
    'search',
    'search_in',
    'Keyword',
    'MatchingPolicy',
    'POLICY_DEFAULT',
    'POLICY_INVALID',
    'POLICY_UNIDENTIFIABLE',
    'POLICY_UNIDENTIFIABLE_INVALID',
    'POLICY_UNIDENTIFIABLE_UNSEARCHABLE',
    'POLICY_PRESETS',
    'DictionaryLoader',
    'CatalogueError',
    'KeywordManager',
]
