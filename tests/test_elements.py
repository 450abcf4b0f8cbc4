#!/usr/bin/env python3
"""
Pytest tests for the Elements container.
"""

import json

import pytest
from release_keywords import ElementCategory, Elements, TableSlot


@pytest.fixture
def elements():
    """Fixture providing elements recorded for a typical filename."""
    result = Elements()
    result.insert(ElementCategory.VIDEO_TERM, "H264")
    result.insert(ElementCategory.AUDIO_TERM, "AAC")
    result.insert(ElementCategory.VIDEO_TERM, "10BIT")
    return result


def test_multiple_values_per_category(elements):
    assert elements.get(ElementCategory.VIDEO_TERM) == "H264"
    assert elements.get_all(ElementCategory.VIDEO_TERM) == ["H264", "10BIT"]
    assert len(elements) == 3


def test_missing_category(elements):
    assert elements.get(ElementCategory.SOURCE) is None
    assert elements.get_all(ElementCategory.SOURCE) == []
    assert ElementCategory.SOURCE not in elements


def test_get_all_returns_copy(elements):
    values = elements.get_all(ElementCategory.AUDIO_TERM)
    values.append("FLAC")
    assert elements.get_all(ElementCategory.AUDIO_TERM) == ["AAC"]


def test_iteration_groups_by_category(elements):
    assert list(elements) == [
        (ElementCategory.VIDEO_TERM, "H264"),
        (ElementCategory.VIDEO_TERM, "10BIT"),
        (ElementCategory.AUDIO_TERM, "AAC"),
    ]
    assert elements.categories() == [ElementCategory.VIDEO_TERM, ElementCategory.AUDIO_TERM]


def test_remove(elements):
    assert elements.remove(ElementCategory.VIDEO_TERM) == ["H264", "10BIT"]
    assert ElementCategory.VIDEO_TERM not in elements
    assert elements.remove(ElementCategory.VIDEO_TERM) == []
    assert len(elements) == 1


def test_to_json(elements):
    parsed = json.loads(elements.to_json())
    assert parsed == {"video_term": ["H264", "10BIT"], "audio_term": ["AAC"]}


def test_empty():
    assert Elements().is_empty()
    assert len(Elements()) == 0
    assert list(Elements()) == []


@pytest.mark.parametrize("category,slot", [
    (ElementCategory.FILE_EXTENSION, TableSlot.EXTENSION),
    (ElementCategory.AUDIO_TERM, TableSlot.GENERAL),
    (ElementCategory.UNKNOWN, TableSlot.GENERAL),
])
def test_category_table_slot(category, slot):
    assert category.table is slot


def test_category_values_are_snake_case():
    assert ElementCategory("video_resolution") is ElementCategory.VIDEO_RESOLUTION
