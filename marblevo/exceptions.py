class MarbleEvoError(Exception):
    """Base for all Marble Evolution exceptions."""

    pass


# High-level families
class ConfigurationError(MarbleEvoError, ValueError):
    """Invalid configuration values or unknown configuration keys."""

    pass


class EvolutionError(MarbleEvoError):
    """Evolution process failures."""

    pass


class SimulationError(MarbleEvoError):
    """Simulation layer misuse."""

    pass


# Evolution subtypes
class EmptyPopulationError(EvolutionError, ValueError):
    """Aggregate or selection requested on a population without individuals."""

    pass


class InvalidTransitionError(EvolutionError):
    """Generation controller asked for a state change it cannot make."""

    pass
