#!/usr/bin/env python3
"""Exact substring search over code-point sequences."""

from typing import Optional

from .token_range import TokenRange


def search(haystack: str, needle: str) -> Optional[TokenRange]:
    """
    Find the first occurrence of needle in haystack.

    Matching is exact at the code-point level: no normalization and no case
    folding, so "h264" does not match "H264".

    Args:
        haystack: Text to search in
        needle: Text to look for

    Returns:
        Span of the first match, or None if needle is empty or absent
    """
    if not needle:
        return None
    offset = haystack.find(needle)
    if offset == -1:
        return None
    return TokenRange(offset, len(needle))


def search_in(haystack: str, needle: str, within: TokenRange) -> Optional[TokenRange]:
    """Like search(), limited to `within`; the span is relative to haystack."""
    within.check(haystack)
    if not needle:
        return None
    offset = haystack.find(needle, within.offset, within.end)
    if offset == -1:
        return None
    return TokenRange(offset, len(needle))
