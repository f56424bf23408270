from __future__ import annotations

import math

from pydantic import BaseModel, Field

POWER_DOMAIN: tuple[float, float] = (0.0, 25.0)
ANGLE_DOMAIN: tuple[float, float] = (0.0, math.pi)

GENES: tuple[str, ...] = ("power", "angle")

GENE_DOMAINS: dict[str, tuple[float, float]] = {
    "power": POWER_DOMAIN,
    "angle": ANGLE_DOMAIN,
}


class MarbleDNA(BaseModel):
    """Launch parameters of a marble individual.

    Pure data record: combination and mutation live in the evolution
    operators, not here.
    """

    power: float = Field(description="Initial speed handed to the simulation")
    angle: float = Field(description="Launch direction in radians")

    def copy_genes(self) -> MarbleDNA:
        return MarbleDNA(power=self.power, angle=self.angle)

    def gene(self, name: str) -> float:
        if name not in GENES:
            raise KeyError(f"Unknown gene '{name}'")
        return getattr(self, name)


def clamp_gene(name: str, value: float) -> float:
    lower, upper = GENE_DOMAINS[name]
    return min(max(value, lower), upper)
