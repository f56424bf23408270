from __future__ import annotations

import math
from typing import NamedTuple

from marblevo.evolution.engine.config import (
    BoundSpecification,
    MutationDelta,
    MutationProbabilities,
    MutationRanges,
)
from marblevo.evolution.genome import GENES, MarbleDNA, clamp_gene
from marblevo.evolution.random_source import RandomSource


class GeneChange(NamedTuple):
    gene: str
    delta: float
    old_value: float
    new_value: float


def draw_delta(bounds: BoundSpecification, mode: MutationDelta, rng: RandomSource) -> float:
    """Draw a mutation offset for *bounds*.

    Continuous offsets are uniform over the closed range. Integer offsets are
    whole steps from the lower bound, ``lower + k`` for
    ``k in range(ceil(upper - lower + 1))``; with non-integer bounds the last
    step can land above the upper bound. The mutated gene is clamped into
    its domain either way.
    """
    if mode is MutationDelta.INTEGER:
        span = bounds.upper_bound - bounds.lower_bound + 1
        return float(math.floor(rng.random() * span) + bounds.lower_bound)
    return rng.uniform(bounds.lower_bound, bounds.upper_bound)


def mutate_genome(
    genome: MarbleDNA,
    probabilities: MutationProbabilities,
    ranges: MutationRanges,
    mode: MutationDelta,
    rng: RandomSource,
) -> list[GeneChange]:
    """Mutate *genome* in place and return the changes that were applied.

    Every gene is considered independently: a draw below its mutation
    probability adds an offset from its range, then the value is clamped
    into the gene's domain. The `general` gate is not applied here.
    """
    changes: list[GeneChange] = []
    for gene in GENES:
        if rng.random() >= probabilities.for_gene(gene):
            continue
        old_value = genome.gene(gene)
        delta = draw_delta(ranges.for_gene(gene), mode, rng)
        new_value = clamp_gene(gene, old_value + delta)
        setattr(genome, gene, new_value)
        changes.append(GeneChange(gene, delta, old_value, new_value))
    return changes
