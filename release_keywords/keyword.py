#!/usr/bin/env python3
"""
Matching policies and keyword records.

Every registered keyword carries three flags that tell the caller how a match
may be used:

- identifiable: the match is reported as an element of its category. When
  False the match only serves as evidence (e.g. to neutralize an ambiguous
  token) and is never emitted itself.
- searchable: the keyword may be found by substring search in a fallback
  scanning pass. When False it is only accepted as an exact,
  delimiter-bounded token.
- valid: the keyword can stand alone as a trusted token. When False it needs
  surrounding context (single letters such as "E" start too many titles).

The catalogue only ever uses the five presets defined below.
"""

from dataclasses import dataclass
from typing import Dict

from .element import ElementCategory


@dataclass(frozen=True)
class MatchingPolicy:
    """The (identifiable, searchable, valid) flag triple of a keyword."""
    identifiable: bool = True
    searchable: bool = True
    valid: bool = True

    @classmethod
    def from_name(cls, name: str) -> "MatchingPolicy":
        """Resolve a preset name as used in the keyword catalogue."""
        return POLICY_PRESETS[name]

    def satisfies(self, required: "MatchingPolicy") -> bool:
        """True when every flag set in `required` is also set here."""
        return (
            (self.identifiable or not required.identifiable)
            and (self.searchable or not required.searchable)
            and (self.valid or not required.valid)
        )


POLICY_DEFAULT = MatchingPolicy(identifiable=True, searchable=True, valid=True)
POLICY_INVALID = MatchingPolicy(identifiable=True, searchable=True, valid=False)
POLICY_UNIDENTIFIABLE = MatchingPolicy(identifiable=False, searchable=True, valid=True)
POLICY_UNIDENTIFIABLE_INVALID = MatchingPolicy(identifiable=False, searchable=True, valid=False)
POLICY_UNIDENTIFIABLE_UNSEARCHABLE = MatchingPolicy(identifiable=False, searchable=False, valid=True)

POLICY_PRESETS: Dict[str, MatchingPolicy] = {
    "default": POLICY_DEFAULT,
    "invalid": POLICY_INVALID,
    "unidentifiable": POLICY_UNIDENTIFIABLE,
    "unidentifiable_invalid": POLICY_UNIDENTIFIABLE_INVALID,
    "unidentifiable_unsearchable": POLICY_UNIDENTIFIABLE_UNSEARCHABLE,
}


@dataclass(frozen=True)
class Keyword:
    """A dictionary entry: owning category plus matching policy."""
    category: ElementCategory
    policy: MatchingPolicy = POLICY_DEFAULT

    @property
    def identifiable(self) -> bool:
        return self.policy.identifiable

    @property
    def searchable(self) -> bool:
        return self.policy.searchable

    @property
    def valid(self) -> bool:
        return self.policy.valid
