"""
process-wide random source used by shuffle and random_.

one numpy generator is created lazily and shared by every call. seed() makes
shuffles reproducible, set_rng() hands the library a caller-owned generator.
numpy generators are not thread safe: threads that shuffle concurrently
should each inject their own.
"""
import logging
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)

_state = {'rng': None}


def get_rng() -> np.random.Generator:
    """return the shared generator, creating it on first use"""
    if _state['rng'] is None:
        _state['rng'] = np.random.default_rng()
        logger.debug("created process random source")
    return _state['rng']


def seed(value: Optional[int] = None) -> np.random.Generator:
    """replace the shared generator with a freshly seeded one"""
    _state['rng'] = np.random.default_rng(value)
    logger.debug(f"seeded process random source with {value!r}")
    return _state['rng']


def set_rng(generator: np.random.Generator) -> None:
    """inject a caller-owned generator as the shared random source"""
    if not isinstance(generator, np.random.Generator):
        raise TypeError(f"expected numpy.random.Generator, got {type(generator).__name__}")
    _state['rng'] = generator
    logger.debug("replaced process random source")


def uniform() -> float:
    """a float drawn uniformly from [0, 1)"""
    return float(get_rng().random())
