#!/usr/bin/env python3
"""
Entropy Module for Name Generation
===================================
Provides the seeded random source every generator draws from.

Features:
- String seeds, hashed into the state of a private PRNG
- Reproducible output: same seed + same call order = same values
- A fixed fallback seed, so a missing seed is still reproducible
- Explicit opt-in to system entropy, with the derived seed kept for replay

Nothing in namekit touches the global `random` module state.
"""

import os
import time
import random
import hashlib
import logging
from typing import Optional

logger = logging.getLogger(__name__)

# Used whenever no seed (or an empty one) is given.
DEFAULT_SEED = "namekit"


# =============================================================================
# Seeded Random Number Generator
# =============================================================================

class SeededRandom:
    """
    Deterministic pseudo-random number generator keyed by a seed string.

    The seed is hashed with SHA-256 and the digest seeds a private
    `random.Random` instance. Each call advances the internal state, so
    the values depend on the order of calls as well as on the seed.

    Not thread-safe: use one instance per thread.
    """

    def __init__(self, seed: Optional[str] = None):
        """
        Args:
            seed: Seed string. None or "" selects DEFAULT_SEED.
        """
        self._seed = seed if seed else DEFAULT_SEED
        digest = hashlib.sha256(self._seed.encode('utf-8')).digest()
        self._rng = random.Random(int.from_bytes(digest, 'big'))

    @classmethod
    def from_entropy(cls) -> 'SeededRandom':
        """
        Create a generator seeded from system entropy.

        Combines several sources the same way for every call:
        - os.urandom() - system entropy pool
        - High-resolution time (nanoseconds)
        - Process ID

        The derived seed is available as `seed`, so the run can be replayed.
        """
        hw_entropy = int.from_bytes(os.urandom(8), 'big')
        time_entropy = time.time_ns()
        pid_entropy = os.getpid() << 48

        combined = hw_entropy ^ time_entropy ^ pid_entropy
        seed = hashlib.sha256(combined.to_bytes(32, 'big')).hexdigest()[:16]
        logger.debug(f"Seeded from system entropy: {seed}")
        return cls(seed)

    @property
    def seed(self) -> str:
        """The seed in effect (DEFAULT_SEED if none was given)."""
        return self._seed

    def next(self, minimum: Optional[float] = None, maximum: Optional[float] = None) -> float:
        """
        Return the next value of the stream.

        Without arguments the value lies in [0.0, 1.0). With both bounds
        it lies in [minimum, maximum].
        """
        if minimum is None and maximum is None:
            return self._rng.random()
        if minimum is None or maximum is None:
            raise ValueError("next() takes either no bounds or both bounds")
        return self._rng.uniform(minimum, maximum)

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self.next()

    def uniform(self, a: float, b: float) -> float:
        """Return random float N such that a <= N <= b."""
        return self.next(a, b)

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self._seed!r})"


__all__ = [
    'DEFAULT_SEED',
    'SeededRandom',
]
