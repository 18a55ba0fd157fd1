#!/usr/bin/env python3
"""
Spelling Strategies
===================
Cosmetic post-processing applied to each finished word.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class SpellingStrategy(ABC):
    """Transforms a generated word. `kind` tags the strategy in profiles."""

    kind: str = ""

    @abstractmethod
    def apply(self, word: str) -> str:
        """Return the respelled word."""

    def get_settings(self) -> Dict[str, Any]:
        """Return a serializable settings snapshot."""
        return {}

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> 'SpellingStrategy':
        return cls()


class BeginningCapitalsSpellingStrategy(SpellingStrategy):
    """Uppercases the first character, leaves the rest untouched."""

    kind = "CAPITALIZE_FIRST_LETTER"

    def apply(self, word: str) -> str:
        return word[:1].upper() + word[1:]

    def __repr__(self) -> str:
        return "BeginningCapitalsSpellingStrategy()"


__all__ = [
    'SpellingStrategy',
    'BeginningCapitalsSpellingStrategy',
]
