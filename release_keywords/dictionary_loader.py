#!/usr/bin/env python3
"""
Dictionary loader utility for centralized catalogue loading and caching.

Provides a single point of access for loading the keyword catalogue with
error handling, JSON Schema validation and optional caching to avoid
redundant file reads.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from jsonschema import Draft7Validator

logger = logging.getLogger(__name__)

DEFAULT_DICTIONARY = "keywords.json"
DEFAULT_SCHEMA = "keywords.schema.json"


class CatalogueError(ValueError):
    """Raised when a keyword catalogue is missing or fails validation."""

    def __init__(self, dictionary_name: str, problems: List[str]):
        self.dictionary_name = dictionary_name
        self.problems = problems
        details = "; ".join(problems)
        super().__init__(f"Invalid keyword catalogue '{dictionary_name}': {details}")


class DictionaryLoader:
    """Centralized dictionary loader with caching support."""

    # Cache for loaded dictionaries to avoid redundant file reads
    _cache: Dict[str, Any] = {}

    @staticmethod
    def get_dictionary_path(dictionary_name: str = DEFAULT_DICTIONARY) -> Path:
        """
        Get the absolute path to a dictionary file.

        Absolute paths are returned unchanged; bare names resolve to the
        dictionaries folder shipped with the package.

        Args:
            dictionary_name: Name of (or path to) the dictionary file

        Returns:
            Absolute path to the dictionary file
        """
        path = Path(dictionary_name)
        if path.is_absolute():
            return path
        return Path(__file__).resolve().parent / "dictionaries" / dictionary_name

    @staticmethod
    def get_schema_path(schema_name: str = DEFAULT_SCHEMA) -> Path:
        return Path(__file__).resolve().parent / "schemas" / schema_name

    @classmethod
    def load_dictionary(
        cls,
        dictionary_name: str = DEFAULT_DICTIONARY,
        use_cache: bool = True
    ) -> Optional[Any]:
        """
        Load a dictionary from the dictionaries folder.

        Args:
            dictionary_name: Name of the dictionary file to load
            use_cache: Whether to use cached version if available

        Returns:
            Dictionary contents, or None if loading fails
        """
        # Check cache first if caching is enabled
        if use_cache and dictionary_name in cls._cache:
            return cls._cache[dictionary_name]

        dictionary_path = cls.get_dictionary_path(dictionary_name)

        try:
            with open(dictionary_path, 'r', encoding='utf-8') as f:
                dictionary = json.load(f)
        except (FileNotFoundError, json.JSONDecodeError, IOError) as exc:
            logger.warning("Could not load dictionary %s: %s", dictionary_path, exc)
            return None

        # Cache the result if caching is enabled
        if use_cache:
            cls._cache[dictionary_name] = dictionary

        return dictionary

    @classmethod
    def get_section(
        cls,
        section_name: str,
        dictionary_name: str = DEFAULT_DICTIONARY,
        use_cache: bool = True
    ) -> Any:
        """
        Load a specific section from a dictionary.

        Args:
            section_name: Name of the section to retrieve (e.g., 'preidentified')
            dictionary_name: Name of the dictionary file
            use_cache: Whether to use cached version if available

        Returns:
            The requested section, or None if not found
        """
        dictionary = cls.load_dictionary(dictionary_name, use_cache)
        if not isinstance(dictionary, dict):
            return None

        return dictionary.get(section_name)

    @classmethod
    def validate_catalogue(cls, data: Any, label: str = "keywords") -> List[str]:
        """
        Validate a keyword catalogue against its JSON Schema and custom rules.

        Args:
            data: Parsed catalogue contents
            label: Prefix used in the returned messages

        Returns:
            Human-readable problems; empty when the catalogue is valid
        """
        with open(cls.get_schema_path(), 'r', encoding='utf-8') as f:
            schema = json.load(f)

        validator = Draft7Validator(schema)
        errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])

        messages = []
        for error in errors:
            location = " > ".join(str(p) for p in error.absolute_path) or "root"
            messages.append(f"{label}: {location}: {error.message}")
        if messages:
            return messages

        # The extension table is only reachable through exact token lookups
        for idx, entry in enumerate(data["preidentified"]):
            if entry["category"] == "file_extension":
                messages.append(
                    f"{label}: preidentified > {idx}: file_extension phrases cannot be preidentified"
                )
            for p_idx, phrase in enumerate(entry["phrases"]):
                if not phrase.strip():
                    messages.append(
                        f"{label}: preidentified > {idx} > phrases > {p_idx}: phrase is blank"
                    )
        return messages

    @classmethod
    def clear_cache(cls, dictionary_name: Optional[str] = None) -> None:
        """
        Clear the dictionary cache.

        Args:
            dictionary_name: Specific dictionary to clear, or None to clear all
        """
        if dictionary_name:
            cls._cache.pop(dictionary_name, None)
        else:
            cls._cache.clear()
