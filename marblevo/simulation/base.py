from typing import Protocol, runtime_checkable

from marblevo.simulation.geometry import Coordinate


@runtime_checkable
class SimulationBody(Protocol):
    """Capabilities an individual needs from the physics layer."""

    @property
    def position(self) -> Coordinate: ...

    def start(self, power: float, angle: float) -> None:
        """Impart the initial velocity described by power and angle."""

    def stop(self) -> None:
        """Set the velocity to zero."""

    def reset(self) -> None:
        """Stop and move back to the start position."""

    def is_moving(self) -> bool:
        """Whether the body still has non-negligible velocity."""

    def distance_to(self, point: Coordinate) -> float:
        """Euclidean distance between the body and a point."""

    def destroy(self) -> None:
        """Remove the body from the simulation."""
