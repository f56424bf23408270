from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class MutationDelta(str, Enum):
    """How a mutation offset is drawn from its configured range."""

    CONTINUOUS = "continuous"  # uniform real offset in [lower, upper]
    INTEGER = "integer"  # floor-stepped integer offset in [lower, upper]


class BoundSpecification(BaseModel):
    """Closed range used for mutation offsets. Lower bound may be negative."""

    lower_bound: float
    upper_bound: float
    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def _validate_order(self) -> BoundSpecification:
        if self.lower_bound > self.upper_bound:
            raise ValueError(
                f"lower_bound ({self.lower_bound}) must be <= upper_bound ({self.upper_bound})"
            )
        return self


class GeneProbabilities(BaseModel):
    """Per-gene probabilities in [0, 1]."""

    power: float = Field(default=0.5, ge=0.0, le=1.0)
    angle: float = Field(default=0.5, ge=0.0, le=1.0)
    model_config = ConfigDict(frozen=True, extra="forbid")

    def for_gene(self, gene: str) -> float:
        return getattr(self, gene)


class MutationProbabilities(GeneProbabilities):
    """Per-gene mutation probabilities plus the gate applied to each child."""

    general: float = Field(
        default=0.18,
        ge=0.0,
        le=1.0,
        description="Probability that a child is handed to mutation at all",
    )


class MutationRanges(BaseModel):
    power: BoundSpecification = Field(
        default_factory=lambda: BoundSpecification(lower_bound=-3.0, upper_bound=3.0)
    )
    angle: BoundSpecification = Field(
        default_factory=lambda: BoundSpecification(lower_bound=-0.5, upper_bound=0.5)
    )
    model_config = ConfigDict(frozen=True, extra="forbid")

    def for_gene(self, gene: str) -> BoundSpecification:
        return getattr(self, gene)


class GeneticAlgorithmConfig(BaseModel):
    """Configuration options controlling the generational loop."""

    individual_count: int = Field(
        default=20, gt=0, description="Population size, constant across generations"
    )
    father_genes_probability: GeneProbabilities = Field(
        default_factory=GeneProbabilities,
        description="Probability that a child inherits each gene from the father",
    )
    mutation_probability: MutationProbabilities = Field(
        default_factory=MutationProbabilities
    )
    mutation_range: MutationRanges = Field(default_factory=MutationRanges)
    mutation_delta: MutationDelta = Field(
        default=MutationDelta.CONTINUOUS,
        description="Distribution of the offset added by a gene mutation",
    )
    seed: int | None = Field(
        default=None, description="Seed for the shared random source (None = unseeded)"
    )
    model_config = ConfigDict(frozen=True, extra="forbid")
