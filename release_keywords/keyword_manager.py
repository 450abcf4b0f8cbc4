#!/usr/bin/env python3
"""
Keyword dictionary for classifying filename substrings.

The dictionary holds two independent tables, one for file extensions and one
for every other category, so the same literal text ("MP3", "AAC", "TS") can
be registered once in each without collision. Lookups are routed to exactly
one table by the category being queried.

Besides per-token lookups, the dictionary scans for a small set of compound
or irregularly formatted phrases ("Dual Audio", "H.264", "Blu-Ray") before
the tokenizer splits a filename on delimiters, so those phrases are not torn
apart.
"""

import logging
import threading
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, MutableSequence, Optional, Tuple

from .dictionary_loader import DEFAULT_DICTIONARY, CatalogueError, DictionaryLoader
from .element import ElementCategory, Elements, TableSlot
from .keyword import Keyword, MatchingPolicy
from .search import search_in
from .token_range import TokenRange

logger = logging.getLogger(__name__)


class KeywordManager:
    """Two-table keyword dictionary plus the compound-phrase scanner.

    A manager is open for registration until freeze() is called; after that
    it is read-only and safe to share between threads.
    """

    _instance: Optional["KeywordManager"] = None
    _instance_lock = threading.Lock()

    def __init__(self):
        # Indexed by TableSlot
        self._tables: List[Mapping[str, Keyword]] = [{} for _ in TableSlot]
        self._phrases: List[Tuple[ElementCategory, str]] = []
        self._frozen = False

    @classmethod
    def instance(cls) -> "KeywordManager":
        """
        Return the process-wide dictionary built from the bundled catalogue.

        The first call builds it; concurrent first callers block until the
        build is finished, so nobody sees a partially populated dictionary.
        """
        manager = cls._instance
        if manager is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls.from_catalogue()
                    logger.info("Keyword dictionary ready (%d keywords)", len(cls._instance))
                manager = cls._instance
        return manager

    @classmethod
    def from_catalogue(
        cls,
        catalogue: Optional[Dict[str, Any]] = None,
        dictionary_name: str = DEFAULT_DICTIONARY
    ) -> "KeywordManager":
        """
        Build a frozen dictionary from a keyword catalogue.

        Groups are registered in catalogue order, so when the same text shows
        up twice in one table the earlier group wins.

        Args:
            catalogue: Parsed catalogue; loaded via DictionaryLoader when None
            dictionary_name: Dictionary file to load when no catalogue is given

        Returns:
            A frozen KeywordManager

        Raises:
            CatalogueError: If the catalogue cannot be loaded or is invalid
        """
        if catalogue is None:
            catalogue = DictionaryLoader.load_dictionary(dictionary_name)
            if catalogue is None:
                raise CatalogueError(dictionary_name, ["dictionary file is missing or unreadable"])

        problems = DictionaryLoader.validate_catalogue(catalogue)
        if problems:
            raise CatalogueError(dictionary_name, problems)

        manager = cls()
        for group in catalogue["keywords"]:
            manager.add(
                ElementCategory(group["category"]),
                MatchingPolicy.from_name(group["policy"]),
                group["keywords"],
            )
        for group in catalogue["preidentified"]:
            manager.add_phrases(ElementCategory(group["category"]), group["phrases"])

        logger.debug(
            "Built keyword dictionary from %s: %d general, %d extension keywords, %d phrases",
            dictionary_name,
            len(manager._tables[TableSlot.GENERAL]),
            len(manager._tables[TableSlot.EXTENSION]),
            len(manager._phrases),
        )
        return manager.freeze()

    def add(
        self,
        category: ElementCategory,
        policy: MatchingPolicy,
        keywords: Iterable[str]
    ) -> "KeywordManager":
        """
        Register keywords under a category with a matching policy.

        Empty texts are skipped. A text already present in the target table
        keeps its first registration; later ones are ignored without notice.

        Returns:
            self, so registrations can be chained
        """
        self._check_open(category)
        table = self._tables[category.table]
        for keyword in keywords:
            if not keyword or keyword in table:
                continue
            table[keyword] = Keyword(category, policy)
        return self

    def add_phrases(self, category: ElementCategory, phrases: Iterable[str]) -> "KeywordManager":
        """Register compound phrases for preidentify(), in scan order."""
        self._check_open(category)
        self._phrases.extend((category, phrase) for phrase in phrases if phrase)
        return self

    def freeze(self) -> "KeywordManager":
        """Make the dictionary read-only."""
        if not self._frozen:
            self._tables = [MappingProxyType(table) for table in self._tables]
            self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def phrases(self) -> Tuple[Tuple[ElementCategory, str], ...]:
        return tuple(self._phrases)

    def find(self, category: ElementCategory, text: str) -> Optional[Keyword]:
        """
        Look up a token by exact text.

        Args:
            category: Category being queried; selects the table
            text: Token text, compared as-is

        Returns:
            The keyword entry if registered under this category, else None
        """
        keyword = self._tables[category.table].get(text)
        if keyword is None or keyword.category is not category:
            return None
        return keyword

    def find_with_policy(
        self,
        category: ElementCategory,
        text: str,
        policy: MatchingPolicy
    ) -> Optional[Keyword]:
        """
        Look up a token and require the flags set in `policy`.

        Flags that are True in `policy` must also be True on the entry;
        flags that are False impose nothing. For example, passing
        MatchingPolicy(identifiable=False, searchable=True, valid=False)
        only returns searchable keywords.
        """
        keyword = self.find(category, text)
        if keyword is None or not keyword.policy.satisfies(policy):
            return None
        return keyword

    def keywords(self, category: ElementCategory) -> List[str]:
        """Return the texts registered under a category, sorted."""
        table = self._tables[category.table]
        return sorted(text for text, keyword in table.items() if keyword.category is category)

    def preidentify(
        self,
        filename: str,
        token_range: TokenRange,
        elements: Elements,
        preidentified_spans: MutableSequence[TokenRange]
    ) -> None:
        """
        Find compound phrases inside a range of the filename.

        For each registered phrase the first exact occurrence inside
        `token_range` is recorded as an element of the phrase's category,
        and its span (in filename offsets) is appended to
        `preidentified_spans` so the tokenizer leaves it alone.

        Args:
            filename: Full filename
            token_range: Portion of the filename to scan
            elements: Receives one entry per matched phrase
            preidentified_spans: Receives the span of each matched phrase

        Raises:
            InvalidRangeError: If token_range does not fit in filename
        """
        token_range.check(filename)
        for category, phrase in self._phrases:
            span = search_in(filename, phrase, token_range)
            if span is None:
                continue
            elements.insert(category, phrase)
            preidentified_spans.append(span)

    def _check_open(self, category: ElementCategory) -> None:
        if self._frozen:
            raise RuntimeError("Keyword dictionary is frozen; register keywords before freeze()")
        if category is ElementCategory.UNKNOWN:
            raise ValueError("Keywords cannot be registered under the unknown category")

    def __len__(self) -> int:
        return sum(len(table) for table in self._tables)

    def __repr__(self) -> str:
        return (
            f"KeywordManager(general={len(self._tables[TableSlot.GENERAL])}, "
            f"extension={len(self._tables[TableSlot.EXTENSION])}, "
            f"phrases={len(self._phrases)}, frozen={self._frozen})"
        )


if __name__ == '__main__':
    # Simple demo
    manager = KeywordManager.instance()
    test_cases = [
        "[Group] Show - 01 [720p][Dual Audio].mkv",
        "Show.S01E02.1080p.Blu-Ray.h264.mkv",
        "Simple Show Name",
    ]

    for test in test_cases:
        elements = Elements()
        spans: List[TokenRange] = []
        manager.preidentify(test, TokenRange.whole(test), elements, spans)
        print(f"Filename: {test}")
        print(f"  Elements: {elements.to_json()}")
        for span in spans:
            print(f"  Span {span.offset}+{span.size}: {span.extract(test)}")
        print()
