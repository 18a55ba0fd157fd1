#!/usr/bin/env python3
"""
Word Generators
===============
Provides the Markov-style word generator and its building blocks:
- Sequencing: how samples are cut into tokens (char depth, delimiter)
- Aggregation: token frequencies and per-role probabilities
- Weighting: cumulative tables and weighted draws
- Spelling: post-processing of finished words
- Entropy: the seeded random source
"""

from .entropy import (
    DEFAULT_SEED,
    SeededRandom,
)
from .sequencing import (
    Sequence,
    SequencingStrategy,
    CharDepthSequencingStrategy,
    DelimiterSequencingStrategy,
    tokenize_all,
)
from .aggregation import (
    AggregatedSequence,
    SequenceProbability,
    aggregate_sequences,
    compute_probabilities,
)
from .weighting import (
    SequenceRole,
    WeightedEntry,
    WeightedTables,
    build_weighted_table,
    draw,
)
from .spelling import (
    SpellingStrategy,
    BeginningCapitalsSpellingStrategy,
)
from .markov_generator import (
    MAX_ATTEMPTS,
    MarkovWordGenerator,
    assemble_word,
)

# Clean aliases
WordGenerator = MarkovWordGenerator
CharDepth = CharDepthSequencingStrategy
Delimiter = DelimiterSequencingStrategy
BeginningCapitals = BeginningCapitalsSpellingStrategy

__all__ = [
    # Entropy
    'DEFAULT_SEED',
    'SeededRandom',
    # Sequencing
    'Sequence',
    'SequencingStrategy',
    'CharDepthSequencingStrategy',
    'DelimiterSequencingStrategy',
    'CharDepth',
    'Delimiter',
    'tokenize_all',
    # Aggregation
    'AggregatedSequence',
    'SequenceProbability',
    'aggregate_sequences',
    'compute_probabilities',
    # Weighting
    'SequenceRole',
    'WeightedEntry',
    'WeightedTables',
    'build_weighted_table',
    'draw',
    # Spelling
    'SpellingStrategy',
    'BeginningCapitalsSpellingStrategy',
    'BeginningCapitals',
    # Generator
    'MAX_ATTEMPTS',
    'MarkovWordGenerator',
    'WordGenerator',
    'assemble_word',
]
