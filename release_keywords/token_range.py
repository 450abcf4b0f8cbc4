#!/usr/bin/env python3
"""
Half-open spans over a filename's code points.

A TokenRange addresses a substring by offset and size without copying it.
Keeping offset + size within the sequence is up to whoever builds the range;
anything that reads a sequence through a range calls check() first.
"""

from dataclasses import dataclass
from typing import Iterable, List


class InvalidRangeError(ValueError):
    """Raised when a range does not fit inside the sequence it addresses."""


@dataclass(frozen=True)
class TokenRange:
    """Span of `size` code points starting at `offset`."""
    offset: int = 0
    size: int = 0

    @classmethod
    def whole(cls, sequence: str) -> "TokenRange":
        return cls(0, len(sequence))

    @property
    def end(self) -> int:
        return self.offset + self.size

    def as_slice(self) -> slice:
        return slice(self.offset, self.end)

    def check(self, sequence: str) -> "TokenRange":
        """
        Verify the range lies within a sequence.

        Args:
            sequence: The string the range is meant to address

        Returns:
            The range itself, so calls can be chained

        Raises:
            InvalidRangeError: If the range starts before the sequence or ends past it
        """
        if self.offset < 0 or self.size < 0 or self.end > len(sequence):
            raise InvalidRangeError(
                f"range ({self.offset}, {self.size}) is outside a sequence of length {len(sequence)}"
            )
        return self

    def extract(self, sequence: str) -> str:
        return sequence[self.check(sequence).as_slice()]

    def contains(self, other: "TokenRange") -> bool:
        return self.offset <= other.offset and other.end <= self.end

    def overlaps(self, other: "TokenRange") -> bool:
        return self.offset < other.end and other.offset < self.end

    def shifted(self, delta: int) -> "TokenRange":
        return TokenRange(self.offset + delta, self.size)

    def subtract(self, spans: Iterable["TokenRange"]) -> List["TokenRange"]:
        """
        Split this range around a set of reserved spans.

        Used by tokenizers to skip preidentified keywords: whatever is left
        between (and around) the reserved spans is returned for further
        splitting. Spans may be unordered, overlapping or partly outside.

        Args:
            spans: Spans to cut out of this range

        Returns:
            Non-empty uncovered sub-ranges in ascending order
        """
        remaining: List[TokenRange] = []
        cursor = self.offset
        for span in sorted(spans, key=lambda s: (s.offset, s.size)):
            if not span.size or not self.overlaps(span):
                continue
            if span.offset > cursor:
                remaining.append(TokenRange(cursor, span.offset - cursor))
            cursor = max(cursor, span.end)
        if cursor < self.end:
            remaining.append(TokenRange(cursor, self.end - cursor))
        return remaining
