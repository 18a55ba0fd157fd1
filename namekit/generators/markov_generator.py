#!/usr/bin/env python3
"""
Markov Chain Word Generator
===========================
Generates invented words from the sequence statistics of a sample set.

Pipeline for each `generate()` call:
1. Tokenize the corpus with the configured sequencing strategy
2. Aggregate token frequencies per role (beginning, middle, ending)
3. Convert frequencies to probabilities and build one weighted table per role
4. Assemble words: beginning + middles until the target length + ending
5. Retry failed or duplicate words, up to MAX_ATTEMPTS per word
6. Apply the spelling strategy, if any

Same seed, same configuration and same calls give the same words.
"""

import logging
from typing import List, Optional, Sequence as SequenceType

from namekit.errors import ConfigurationError, GenerationExhaustedError, SamplingError
from .aggregation import SequenceProbability, aggregate_sequences, compute_probabilities
from .entropy import SeededRandom
from .sequencing import SequencingStrategy, tokenize_all
from .spelling import SpellingStrategy
from .validation import require_positive_int
from .weighting import WeightedEntry, WeightedTables, draw

logger = logging.getLogger(__name__)

# Attempts allowed for producing one unique word.
MAX_ATTEMPTS = 1000


# =============================================================================
# Word Assembly
# =============================================================================

def assemble_word(beginnings: SequenceType[WeightedEntry],
                  middles: SequenceType[WeightedEntry],
                  endings: SequenceType[WeightedEntry],
                  min_length: int,
                  max_length: int,
                  rng: SeededRandom) -> str:
    """
    Assemble a single word from the weighted tables.

    The ending is drawn right after the beginning and counts towards the
    target length, but is appended last. Middles are added while the word
    is shorter than the target, so it may overshoot by up to one middle.

    Raises:
        SamplingError: If a needed table is empty
    """
    target_length = round(rng.next(min_length, max_length))

    beginning = draw(beginnings, rng.next())
    parts = [beginning.chars]
    length = len(beginning.chars)

    ending = draw(endings, rng.next())
    length += len(ending.chars)

    while length < target_length:
        middle = draw(middles, rng.next())
        parts.append(middle.chars)
        length += len(middle.chars)

    parts.append(ending.chars)
    return "".join(parts)


# =============================================================================
# Generator
# =============================================================================

class MarkovWordGenerator:
    """
    Generates words that resemble a sample set.

    Validates its configuration on construction. The random source is
    created once per generator; successive `generate()` calls continue the
    same stream.

    Not thread-safe: give each thread its own generator and seed.
    """

    def __init__(self,
                 sample_set: SequenceType[str],
                 target_length_min: int,
                 target_length_max: int,
                 sequencing_strategy: SequencingStrategy,
                 spelling_strategy: Optional[SpellingStrategy] = None,
                 seed: Optional[str] = None):
        """
        Args:
            sample_set: Example words, at least one non-empty string
            target_length_min: Minimum length the results *should* have
            target_length_max: Maximum length the results *should* have
            sequencing_strategy: How samples are cut into sequences
            spelling_strategy: Optional post-processing of each word
            seed: Optional seed; a fixed fallback seed is used without one

        Raises:
            ConfigurationError: If any required argument is missing or invalid
        """
        if not sample_set or isinstance(sample_set, str):
            raise ConfigurationError("`sample_set` must be a non-empty list of strings")
        for sample in sample_set:
            if not isinstance(sample, str) or not sample:
                raise ConfigurationError(
                    f"`sample_set` must only hold non-empty strings (got {sample!r})"
                )
        require_positive_int(target_length_min, 'target_length_min')
        require_positive_int(target_length_max, 'target_length_max')
        if sequencing_strategy is None:
            raise ConfigurationError("`sequencing_strategy` must not be None")

        self._sample_set = list(sample_set)
        self._target_length_min = target_length_min
        self._target_length_max = target_length_max
        self.sequencing_strategy = sequencing_strategy
        self.spelling_strategy = spelling_strategy
        self._rng = SeededRandom(seed)

    @classmethod
    def with_random_seed(cls, **kwargs) -> 'MarkovWordGenerator':
        """Create a generator seeded from system entropy; see `seed` for replay."""
        generator = cls(**kwargs)
        generator._rng = SeededRandom.from_entropy()
        return generator

    @property
    def sample_set(self) -> List[str]:
        return list(self._sample_set)

    @property
    def target_length_min(self) -> int:
        return self._target_length_min

    @property
    def target_length_max(self) -> int:
        return self._target_length_max

    @property
    def seed(self) -> str:
        """The seed in effect, including the fallback seed."""
        return self._rng.seed

    def analyze(self) -> List[SequenceProbability]:
        """Return the per-token probabilities of the sample set."""
        sequences = tokenize_all(self.sequencing_strategy, self._sample_set)
        return compute_probabilities(aggregate_sequences(sequences))

    def generate(self, how_many: int) -> List[str]:
        """
        Generate the given number of unique words.

        Returns:
            Exactly `how_many` words, pairwise distinct

        Raises:
            ConfigurationError: If how_many is not a positive integer
            GenerationExhaustedError: If a unique word could not be produced
                within MAX_ATTEMPTS; no words are returned in that case
        """
        require_positive_int(how_many, 'how_many')

        probabilities = self.analyze()
        tables = WeightedTables.build(probabilities)
        logger.debug(
            f"Built tables from {len(self._sample_set)} samples, {len(probabilities)} distinct sequences: "
            f"{len(tables.beginnings)} beginnings, {len(tables.middles)} middles, {len(tables.endings)} endings"
        )

        words: List[str] = []
        seen = set()
        for _ in range(how_many):
            word = self._generate_unique(tables, seen, accepted_count=len(words))
            words.append(word)
            seen.add(word)

        if self.spelling_strategy is not None:
            return [self.spelling_strategy.apply(word) for word in words]
        return words

    def _generate_unique(self, tables: WeightedTables, seen: set, accepted_count: int) -> str:
        """Try up to MAX_ATTEMPTS times to assemble a word not in `seen`."""
        duplicates = 0
        last_error: Optional[SamplingError] = None

        for attempt in range(1, MAX_ATTEMPTS + 1):
            word, error = self._attempt(tables)
            if error is not None:
                last_error = error
                logger.debug(f"Attempt {attempt} failed: {error}")
                continue
            if word in seen:
                duplicates += 1
                continue
            if attempt > MAX_ATTEMPTS // 10:
                logger.warning(f"Needed {attempt} attempts to produce unique word '{word}'")
            return word

        if duplicates == MAX_ATTEMPTS:
            cause = "all candidates were duplicates; the sample set may be too small for the requested number of unique words"
        else:
            # fewer duplicates than attempts, so at least one attempt failed
            cause = f"the target length may be unreachable with this sample set ({last_error})"
        message = f"Maximum number of tries to produce unique word exceeded after {MAX_ATTEMPTS} attempts: {cause}"
        logger.error(message)
        raise GenerationExhaustedError(message, attempts=MAX_ATTEMPTS, accepted_count=accepted_count)

    def _attempt(self, tables: WeightedTables):
        """Run one assembly; returns (word, None) or (None, SamplingError)."""
        try:
            word = assemble_word(
                tables.beginnings,
                tables.middles,
                tables.endings,
                self._target_length_min,
                self._target_length_max,
                self._rng,
            )
        except SamplingError as e:
            return None, e
        return word, None

    def __repr__(self) -> str:
        return (
            f"MarkovWordGenerator(samples={len(self._sample_set)}, "
            f"length={self._target_length_min}-{self._target_length_max}, "
            f"strategy={self.sequencing_strategy!r}, seed={self.seed!r})"
        )


__all__ = [
    'MAX_ATTEMPTS',
    'MarkovWordGenerator',
    'assemble_word',
]
