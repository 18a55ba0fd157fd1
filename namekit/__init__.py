#!/usr/bin/env python3
"""
Namekit - Markov Word Generator
===============================

Generates invented words and names that resemble a sample set, e.g. fantasy
names for a tabletop campaign. Output is reproducible from a seed string.

Quick Start
-----------
    from namekit import MarkovWordGenerator, CharDepthSequencingStrategy

    generator = MarkovWordGenerator(
        sample_set=["Bob", "Gobob", "Bobby"],
        target_length_min=3,
        target_length_max=7,
        sequencing_strategy=CharDepthSequencingStrategy(2),
        seed="Test1234567890",
    )
    names = generator.generate(3)

    # Or from a bundled profile
    from namekit import get_profile
    names = get_profile("borderlands").create_generator().generate(10)

Modules
-------
    namekit.generators - Sequencing, aggregation, weighting, generation
    namekit.profiles   - Named configurations and their YAML form
    namekit.errors     - Exception types
    namekit.settings   - Application settings (app.yaml)

CLI Usage
---------
    python -m namekit generate -p borderlands -n 10
    python -m namekit analyze --samples Bob,Gobob,Bobby
    python -m namekit profiles
"""

__version__ = "0.1.0"
__author__ = "Namekit"

# =============================================================================
# Generator Imports
# =============================================================================

from .generators import (
    # Generator
    MarkovWordGenerator,
    WordGenerator,
    MAX_ATTEMPTS,
    # Strategies
    SequencingStrategy,
    CharDepthSequencingStrategy,
    DelimiterSequencingStrategy,
    SpellingStrategy,
    BeginningCapitalsSpellingStrategy,
    # Building blocks
    SeededRandom,
    Sequence,
    AggregatedSequence,
    SequenceProbability,
    SequenceRole,
    WeightedEntry,
    tokenize_all,
)

# =============================================================================
# Errors & Profiles
# =============================================================================

from .errors import (
    NamekitError,
    ConfigurationError,
    SamplingError,
    GenerationExhaustedError,
)
from .profiles import (
    GeneratorProfile,
    load_profiles,
    get_profile,
    dump_profiles,
)

__all__ = [
    '__version__',
    # Generator
    'MarkovWordGenerator',
    'WordGenerator',
    'MAX_ATTEMPTS',
    # Strategies
    'SequencingStrategy',
    'CharDepthSequencingStrategy',
    'DelimiterSequencingStrategy',
    'SpellingStrategy',
    'BeginningCapitalsSpellingStrategy',
    # Building blocks
    'SeededRandom',
    'Sequence',
    'AggregatedSequence',
    'SequenceProbability',
    'SequenceRole',
    'WeightedEntry',
    'tokenize_all',
    # Errors
    'NamekitError',
    'ConfigurationError',
    'SamplingError',
    'GenerationExhaustedError',
    # Profiles
    'GeneratorProfile',
    'load_profiles',
    'get_profile',
    'dump_profiles',
]
