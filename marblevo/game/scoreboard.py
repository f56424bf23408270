from __future__ import annotations

import math

from pydantic import BaseModel, Field


class Scoreboard(BaseModel):
    """Counters and distances shown to the player."""

    iteration_count: int = Field(default=0, description="AI iterations or human tries")
    human_distance: float | None = Field(default=None, description="Current human marble distance")
    human_best_distance: float = Field(default=math.inf)
    ai_average_distance: float | None = Field(default=None, description="Average of the last iteration")
    ai_best_distance_last: float | None = Field(default=None, description="Best of the last iteration")
    ai_best_distance_overall: float = Field(default=math.inf)

    def reset(self) -> None:
        self.iteration_count = 0
        self.human_distance = None
        self.human_best_distance = math.inf
        self.ai_average_distance = None
        self.ai_best_distance_last = None
        self.ai_best_distance_overall = math.inf

    def update_iteration_count(self, delta: int = 1) -> None:
        self.iteration_count += delta

    def update_human_distance(self, distance: float, final: bool = False) -> None:
        """Show the current distance; only a final (stopped) distance can become the best."""
        self.human_distance = distance
        if final and distance < self.human_best_distance:
            self.human_best_distance = distance

    def update_ai_distance(self, average_distance: float, best_distance: float) -> None:
        """Record the aggregates of a fully stopped iteration."""
        self.ai_average_distance = average_distance
        self.ai_best_distance_last = best_distance
        if best_distance < self.ai_best_distance_overall:
            self.ai_best_distance_overall = best_distance
