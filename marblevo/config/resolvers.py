import math

from omegaconf import OmegaConf


def _pi(fraction=1.0) -> float:
    return math.pi * float(fraction)


def register_resolvers() -> None:
    """Register custom OmegaConf resolvers. Safe to call more than once."""
    OmegaConf.register_new_resolver("pi", _pi, replace=True)
    OmegaConf.register_new_resolver("neg", lambda x: -x, replace=True)
    OmegaConf.register_new_resolver("percent", lambda x: round(x / 100, 4), replace=True)
