from .randomness import make_seed, make_rng, validate_seed
from .logging_utils import configure_logging

__all__ = ["make_seed", "make_rng", "validate_seed", "configure_logging"]
