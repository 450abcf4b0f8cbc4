#!/usr/bin/env python3
"""
Element categories and the per-filename element container.

An element is a (category, matched text) pair recorded while classifying one
filename. Elements are owned by a single classification pass and discarded
when it ends.
"""

import json
from enum import Enum, IntEnum
from typing import Dict, Iterator, List, Optional, Tuple


class TableSlot(IntEnum):
    """Index of a keyword table inside the dictionary's table array."""
    GENERAL = 0
    EXTENSION = 1


class ElementCategory(Enum):
    """Every semantic classification a filename substring can receive."""
    ANIME_SEASON = "anime_season"
    ANIME_SEASON_PREFIX = "anime_season_prefix"
    ANIME_TITLE = "anime_title"
    ANIME_TYPE = "anime_type"
    ANIME_YEAR = "anime_year"
    AUDIO_TERM = "audio_term"
    DEVICE_COMPATIBILITY = "device_compatibility"
    EPISODE_NUMBER = "episode_number"
    EPISODE_NUMBER_ALT = "episode_number_alt"
    EPISODE_PREFIX = "episode_prefix"
    EPISODE_TITLE = "episode_title"
    FILE_CHECKSUM = "file_checksum"
    FILE_EXTENSION = "file_extension"
    FILE_NAME = "file_name"
    LANGUAGE = "language"
    OTHER = "other"
    RELEASE_GROUP = "release_group"
    RELEASE_INFORMATION = "release_information"
    RELEASE_VERSION = "release_version"
    SOURCE = "source"
    SUBTITLES = "subtitles"
    VIDEO_RESOLUTION = "video_resolution"
    VIDEO_TERM = "video_term"
    VOLUME_NUMBER = "volume_number"
    VOLUME_PREFIX = "volume_prefix"
    UNKNOWN = "unknown"

    @property
    def table(self) -> TableSlot:
        """Keyword table this category is registered in and looked up from."""
        if self is ElementCategory.FILE_EXTENSION:
            return TableSlot.EXTENSION
        return TableSlot.GENERAL


class Elements:
    """Ordered multimap from ElementCategory to matched text.

    Values are grouped by category, categories keep the order in which they
    were first inserted.
    """

    def __init__(self):
        self._elements: Dict[ElementCategory, List[str]] = {}

    def insert(self, category: ElementCategory, value: str) -> None:
        self._elements.setdefault(category, []).append(value)

    def get(self, category: ElementCategory) -> Optional[str]:
        """Return the first value recorded for a category, or None."""
        values = self._elements.get(category)
        return values[0] if values else None

    def get_all(self, category: ElementCategory) -> List[str]:
        return list(self._elements.get(category, []))

    def remove(self, category: ElementCategory) -> List[str]:
        """Drop every value of a category and return them."""
        return self._elements.pop(category, [])

    def categories(self) -> List[ElementCategory]:
        return list(self._elements)

    def is_empty(self) -> bool:
        return not self._elements

    def __contains__(self, category: object) -> bool:
        return category in self._elements

    def __len__(self) -> int:
        return sum(len(values) for values in self._elements.values())

    def __iter__(self) -> Iterator[Tuple[ElementCategory, str]]:
        for category, values in self._elements.items():
            for value in values:
                yield category, value

    def __repr__(self) -> str:
        return f"Elements({self.to_dict()!r})"

    def to_dict(self) -> Dict[str, List[str]]:
        return {category.value: list(values) for category, values in self._elements.items()}

    def to_json(self) -> str:
        """Convert elements to JSON format."""
        return json.dumps(self.to_dict())
