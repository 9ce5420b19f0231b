"""Abstract checksum accumulator used to fold grouping terms into a digest.

Any incremental hash can back a grouping key as long as it implements this
interface. Keys are only comparable when produced by the same algorithm.
"""

from abc import ABC, abstractmethod


class ChecksumAccumulator(ABC):
    """Stateful accumulator that ingests bytes and yields a digest.

    A fresh instance is created for every error; instances are never shared
    between events.
    """

    @abstractmethod
    def write(self, data: bytes) -> int:
        """Feed bytes into the accumulator.

        Args:
            data: Raw bytes to append to the hashed stream.

        Returns:
            Number of bytes consumed.
        """
        ...

    @abstractmethod
    def finalize(self) -> bytes:
        """Return the digest of everything written so far.

        Returns:
            Digest bytes. Length depends on the algorithm; may be empty
            for accumulators that return their input verbatim.
        """
        ...
