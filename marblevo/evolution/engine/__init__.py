from __future__ import annotations

from marblevo.evolution.engine.config import (
    BoundSpecification,
    GeneProbabilities,
    GeneticAlgorithmConfig,
    MutationDelta,
    MutationProbabilities,
    MutationRanges,
)
from marblevo.evolution.engine.controller import GenerationController
from marblevo.evolution.engine.metrics import ControllerMetrics, GenerationStats
from marblevo.evolution.engine.state import ControllerState
