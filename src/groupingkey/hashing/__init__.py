"""Checksum accumulators for grouping keys.

Provides the ChecksumAccumulator abstract base class, hashlib-backed and
identity implementations, and configuration-driven factories.
"""

from groupingkey.hashing.accumulators import HashlibAccumulator, IdentityAccumulator
from groupingkey.hashing.base import ChecksumAccumulator
from groupingkey.hashing.config import HasherConfig, load_config
from groupingkey.hashing.factory import HashFactory, create_hasher_factory

__all__ = [
    "ChecksumAccumulator",
    "HashFactory",
    "HasherConfig",
    "HashlibAccumulator",
    "IdentityAccumulator",
    "create_hasher_factory",
    "load_config",
]
