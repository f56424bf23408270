from __future__ import annotations

import math

from pydantic import BaseModel, Field


class GenerationStats(BaseModel):
    """Aggregates of one evaluated generation, taken before it is torn down."""

    iteration: int = Field(description="1-based number of the evaluated generation")
    population_size: int
    average_distance: float
    best_distance: float
    best_fitness: float
    mutated_children: int = Field(
        default=0, description="Children handed to mutation while building the next generation"
    )


class ControllerMetrics(BaseModel):
    """Counters and history kept by the generation controller."""

    total_generations: int = Field(default=0, description="Total generations finished")
    individuals_created: int = Field(default=0, description="Children produced by reproduction")
    mutations_applied: int = Field(
        default=0, description="Gene changes applied by mutation"
    )
    individuals_destroyed: int = Field(default=0)
    best_distance_overall: float = Field(default=math.inf)
    history: list[GenerationStats] = Field(default_factory=list)

    def record_generation(self, stats: GenerationStats) -> None:
        self.total_generations += 1
        self.best_distance_overall = min(self.best_distance_overall, stats.best_distance)
        self.history.append(stats)

    def record_reproduction_metrics(self, created: int, mutations_applied: int) -> None:
        self.individuals_created += created
        self.mutations_applied += mutations_applied

    @property
    def last(self) -> GenerationStats | None:
        return self.history[-1] if self.history else None
