#!/usr/bin/env python3
"""
Sequencing Strategies
=====================
Split sample words into tagged sequences (tokens).

Every token records where in its sample it was found:
- beginning: the first token of the sample
- ending: the token that holds the sample's last character
- middle: everything in between

For short samples a single token is both beginning and ending.

Strategies:
- CharDepthSequencingStrategy: fixed-size character chunks
- DelimiterSequencingStrategy: parts between a literal delimiter
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List

from namekit.errors import ConfigurationError
from .validation import require_positive_int


@dataclass(frozen=True)
class Sequence:
    """A token cut from one sample, tagged with its position(s)."""
    chars: str
    is_beginning: bool = False
    is_middle: bool = False
    is_ending: bool = False


class SequencingStrategy(ABC):
    """
    Tokenization capability.

    Subclasses set `kind`, the tag used when a strategy is stored in a
    profile, and implement `tokenize`, `get_settings` and `from_settings`.
    """

    kind: str = ""

    @abstractmethod
    def tokenize(self, sample: str) -> List[Sequence]:
        """Split one sample into an ordered list of tagged sequences."""

    @abstractmethod
    def get_settings(self) -> Dict[str, Any]:
        """Return a serializable settings snapshot."""

    @classmethod
    @abstractmethod
    def from_settings(cls, settings: Dict[str, Any]) -> 'SequencingStrategy':
        """Rebuild a strategy from a `get_settings()` snapshot."""


def tokenize_all(strategy: SequencingStrategy, samples: Iterable[str]) -> List[Sequence]:
    """
    Tokenize every sample of a corpus with the given strategy.

    Samples are processed independently and in order; the token order within
    each sample is preserved.
    """
    sequences = []
    for sample in samples:
        sequences.extend(strategy.tokenize(sample))
    return sequences


# =============================================================================
# Char Depth
# =============================================================================

class CharDepthSequencingStrategy(SequencingStrategy):
    """
    Cuts samples into non-overlapping chunks of `depth` characters.

    Higher depths give results closer to the sample set, but less variety.
    The last chunk of a sample may be shorter than `depth`.

    Example (depth=2): "Bob" -> "bo" (beginning), "b" (ending)
    """

    kind = "CHAR_DEPTH"

    def __init__(self, depth: int = 1, preserve_case: bool = False):
        """
        Args:
            depth: Chunk length, an integer >= 1
            preserve_case: Keep the sample's casing instead of lowercasing

        Raises:
            ConfigurationError: If depth is not a positive integer
        """
        self._depth = require_positive_int(depth, 'depth')
        self.preserve_case = bool(preserve_case)

    @property
    def depth(self) -> int:
        return self._depth

    def tokenize(self, sample: str) -> List[Sequence]:
        sequences = []
        for i in range(0, len(sample), self._depth):
            chars = sample[i:i + self._depth]
            if not self.preserve_case:
                chars = chars.lower()

            is_beginning = i == 0
            is_ending = i + self._depth >= len(sample)

            sequences.append(Sequence(
                chars=chars,
                is_beginning=is_beginning,
                is_middle=not is_beginning and not is_ending,
                is_ending=is_ending,
            ))
        return sequences

    def get_settings(self) -> Dict[str, Any]:
        return {
            'depth': self._depth,
            'preserve_case': self.preserve_case,
        }

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> 'CharDepthSequencingStrategy':
        settings = settings or {}
        return cls(
            depth=settings.get('depth', 1),
            preserve_case=settings.get('preserve_case', False),
        )

    def __repr__(self) -> str:
        return f"CharDepthSequencingStrategy(depth={self._depth}, preserve_case={self.preserve_case})"


# =============================================================================
# Delimiter
# =============================================================================

class DelimiterSequencingStrategy(SequencingStrategy):
    """
    Splits samples on a literal delimiter, e.g. syllable-marked words.

    Example (delimiter="-"): "Le-go-las" -> "Le" (beginning), "go" (middle),
    "las" (ending). Empty parts are skipped; casing is kept as written.
    """

    kind = "DELIMITER"

    def __init__(self, delimiter: str):
        if not isinstance(delimiter, str) or not delimiter:
            raise ConfigurationError(
                f"`delimiter` must be a non-empty string (got {delimiter!r})"
            )
        self._delimiter = delimiter

    @property
    def delimiter(self) -> str:
        return self._delimiter

    def tokenize(self, sample: str) -> List[Sequence]:
        parts = [part for part in sample.split(self._delimiter) if part]
        last = len(parts) - 1
        return [
            Sequence(
                chars=part,
                is_beginning=i == 0,
                is_middle=0 < i < last,
                is_ending=i == last,
            )
            for i, part in enumerate(parts)
        ]

    def get_settings(self) -> Dict[str, Any]:
        return {'delimiter': self._delimiter}

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> 'DelimiterSequencingStrategy':
        return cls(delimiter=(settings or {}).get('delimiter'))

    def __repr__(self) -> str:
        return f"DelimiterSequencingStrategy(delimiter={self._delimiter!r})"


__all__ = [
    'Sequence',
    'SequencingStrategy',
    'CharDepthSequencingStrategy',
    'DelimiterSequencingStrategy',
    'tokenize_all',
]
