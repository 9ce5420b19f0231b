"""Factory for checksum accumulators.

Processors take a zero-argument callable rather than an accumulator so that
every error gets its own fresh instance.
"""

import logging
from typing import Callable

from groupingkey.hashing.accumulators import HashlibAccumulator, IdentityAccumulator
from groupingkey.hashing.base import ChecksumAccumulator
from groupingkey.hashing.config import HasherConfig
from groupingkey.utils.logging import configure_module_logger

logger = configure_module_logger(__name__, level=logging.INFO)

HashFactory = Callable[[], ChecksumAccumulator]


def create_hasher_factory(config: HasherConfig) -> HashFactory:
    """Build an accumulator factory for the configured algorithm.

    Args:
        config: HasherConfig with the algorithm selection.

    Returns:
        Callable returning a new ChecksumAccumulator on every call.

    Raises:
        ValueError: If the algorithm is not available.
    """
    algorithm = config.algorithm

    if algorithm == "identity":
        logger.debug("Using identity accumulator for grouping keys")
        return IdentityAccumulator

    # Fail at construction time rather than on the first event.
    HashlibAccumulator(algorithm)
    logger.debug(f"Using {algorithm} accumulator for grouping keys")

    def new_hash() -> ChecksumAccumulator:
        return HashlibAccumulator(algorithm)

    return new_hash
