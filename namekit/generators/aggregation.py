#!/usr/bin/env python3
"""
Sequence Aggregation
====================
Folds the tokens of a whole corpus into per-token frequencies and turns
those into per-role probabilities.

Example (corpus "Bob", "Gobob", "Bobby", depth 2):

    chars | beginning | middle | ending
    ----- | --------- | ------ | ------
    bo    |     2     |   1    |   0
    b     |     0     |   0    |   2
    go    |     1     |   0    |   0
    bb    |     0     |   1    |   0
    y     |     0     |   0    |   1
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Union

from .sequencing import Sequence


@dataclass
class AggregatedSequence:
    """Occurrence counts of one distinct token across the corpus."""
    chars: str
    frequency_beginning: int = 0
    frequency_middle: int = 0
    frequency_ending: int = 0
    frequency_total: int = 0


@dataclass(frozen=True)
class SequenceProbability:
    """
    Probabilities of one aggregated token.

    probability_overall is descriptive only; sampling never reads it.
    """
    sequence: AggregatedSequence
    probability_beginning: float = 0.0
    probability_middle: float = 0.0
    probability_ending: float = 0.0
    probability_overall: float = 0.0


def aggregate_sequences(sequences: Iterable[Sequence]) -> Dict[str, AggregatedSequence]:
    """
    Count each distinct token per role.

    A token tagged with several roles counts once for each of them, but only
    once towards `frequency_total`.

    Returns:
        Mapping of chars -> AggregatedSequence, in first-seen order
    """
    aggregated: Dict[str, AggregatedSequence] = {}

    for sequence in sequences:
        entry = aggregated.get(sequence.chars)
        if entry is None:
            entry = AggregatedSequence(chars=sequence.chars)
            aggregated[sequence.chars] = entry

        if sequence.is_beginning:
            entry.frequency_beginning += 1
        if sequence.is_middle:
            entry.frequency_middle += 1
        if sequence.is_ending:
            entry.frequency_ending += 1
        entry.frequency_total += 1

    return aggregated


def compute_probabilities(
    aggregated: Union[Mapping[str, AggregatedSequence], Iterable[AggregatedSequence]],
) -> List[SequenceProbability]:
    """
    Turn aggregated frequencies into per-role probabilities.

    A role probability is the token's count for that role divided by the
    count of all tokens in that role. Tokens that never take a role get 0
    for it.
    """
    if isinstance(aggregated, Mapping):
        aggregated = list(aggregated.values())
    else:
        aggregated = list(aggregated)

    total_beginning = sum(a.frequency_beginning for a in aggregated)
    total_middle = sum(a.frequency_middle for a in aggregated)
    total_ending = sum(a.frequency_ending for a in aggregated)
    distinct_count = len(aggregated)

    probabilities = []
    for a in aggregated:
        occurrences = a.frequency_beginning + a.frequency_middle + a.frequency_ending
        probabilities.append(SequenceProbability(
            sequence=a,
            probability_beginning=a.frequency_beginning / total_beginning if a.frequency_beginning > 0 else 0.0,
            probability_middle=a.frequency_middle / total_middle if a.frequency_middle > 0 else 0.0,
            probability_ending=a.frequency_ending / total_ending if a.frequency_ending > 0 else 0.0,
            probability_overall=occurrences / distinct_count,
        ))

    return probabilities


__all__ = [
    'AggregatedSequence',
    'SequenceProbability',
    'aggregate_sequences',
    'compute_probabilities',
]
