#!/usr/bin/env python3
"""
Weighted Selection
==================
Cumulative probability tables, one per role, and the draw over them.

The table is sorted by individual probability and carries the running sum.
E.g. for frequencies d=1, b=2, c=2, a=3 (total 8):

    Sequence:    |  d  |  b  |  c  |  a  |
    Probability: |0.125|0.375|0.625|1.000|

A uniform value in [0, 1] picks the first entry whose cumulative
probability is greater or equal to it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence as SequenceType

from namekit.errors import SamplingError
from .aggregation import AggregatedSequence, SequenceProbability


class SequenceRole(Enum):
    """Where in a sample a token occurred."""
    BEGINNING = "beginning"
    MIDDLE = "middle"
    ENDING = "ending"


@dataclass(frozen=True)
class WeightedEntry:
    """One row of a weighted table."""
    cumulative_probability: float
    sequence: AggregatedSequence


def _probability_for(probability: SequenceProbability, role: SequenceRole) -> float:
    if role is SequenceRole.BEGINNING:
        return probability.probability_beginning
    if role is SequenceRole.MIDDLE:
        return probability.probability_middle
    return probability.probability_ending


def build_weighted_table(probabilities: SequenceType[SequenceProbability],
                         role: SequenceRole) -> List[WeightedEntry]:
    """
    Build the cumulative table for one role.

    Tokens without a positive probability for the role are left out. An
    empty table is a valid result; drawing from it raises SamplingError.
    """
    candidates = [
        (_probability_for(p, role), p.sequence)
        for p in probabilities
        if _probability_for(p, role) > 0
    ]
    candidates.sort(key=lambda item: item[0])

    table = []
    running = 0.0
    for probability, sequence in candidates:
        running += probability
        table.append(WeightedEntry(cumulative_probability=running, sequence=sequence))

    # Pre-empts floating-point drift: a draw of exactly 1.0 must resolve.
    if table:
        table[-1] = WeightedEntry(cumulative_probability=1.0, sequence=table[-1].sequence)

    return table


def draw(table: SequenceType[WeightedEntry], value: float) -> AggregatedSequence:
    """
    Pick the first entry whose cumulative probability is >= value.

    Raises:
        SamplingError: If no entry qualifies (only for an empty table)
    """
    for entry in table:
        if value <= entry.cumulative_probability:
            return entry.sequence
    raise SamplingError(f"Failed to get item for value '{value}' from a table of {len(table)} entries")


@dataclass
class WeightedTables:
    """The three per-role tables of one generation run."""
    beginnings: List[WeightedEntry] = field(default_factory=list)
    middles: List[WeightedEntry] = field(default_factory=list)
    endings: List[WeightedEntry] = field(default_factory=list)

    @classmethod
    def build(cls, probabilities: SequenceType[SequenceProbability]) -> 'WeightedTables':
        return cls(
            beginnings=build_weighted_table(probabilities, SequenceRole.BEGINNING),
            middles=build_weighted_table(probabilities, SequenceRole.MIDDLE),
            endings=build_weighted_table(probabilities, SequenceRole.ENDING),
        )


__all__ = [
    'SequenceRole',
    'WeightedEntry',
    'WeightedTables',
    'build_weighted_table',
    'draw',
]
