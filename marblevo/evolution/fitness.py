import math


def fitness_from_distance(distance: float) -> float:
    """Reciprocal squared distance to the goal; higher is better.

    A marble resting on the goal has infinite fitness, and so does one close
    enough that the squared distance underflows to zero. Selection treats
    infinite fitness as "solved" and only draws among those individuals, so
    the sentinel never reaches the cut-off arithmetic.
    """
    if distance < 0:
        raise ValueError(f"Distance must be non-negative, got {distance}")
    try:
        squared = distance**2
    except OverflowError:
        return 0.0
    if squared == 0.0:
        return math.inf
    return 1.0 / squared
