from marblevo.simulation.base import SimulationBody
from marblevo.simulation.geometry import Coordinate, Goal, Size, launch_velocity
from marblevo.simulation.kinematic import KinematicBody, KinematicWorld, RectObstacle

__all__ = [
    "Coordinate",
    "Goal",
    "KinematicBody",
    "KinematicWorld",
    "RectObstacle",
    "SimulationBody",
    "Size",
    "launch_velocity",
]
