"""Concrete checksum accumulators."""

from __future__ import annotations

import hashlib

from groupingkey.hashing.base import ChecksumAccumulator

DEFAULT_ALGORITHM = "md5"


class HashlibAccumulator(ChecksumAccumulator):
    """Accumulator backed by a :mod:`hashlib` algorithm.

    The default, MD5, yields a 128-bit digest. It is used as a fingerprint,
    not for security.

    Args:
        algorithm: Any name accepted by :func:`hashlib.new`.

    Raises:
        ValueError: If *algorithm* is not available in this interpreter.
    """

    def __init__(self, algorithm: str = DEFAULT_ALGORITHM) -> None:
        try:
            self._hash = hashlib.new(algorithm)
        except ValueError as exc:
            raise ValueError(f"Unsupported hash algorithm: {algorithm}") from exc
        self.algorithm = algorithm

    def write(self, data: bytes) -> int:
        self._hash.update(data)
        return len(data)

    def finalize(self) -> bytes:
        return self._hash.digest()


class IdentityAccumulator(ChecksumAccumulator):
    """Accumulator whose digest is exactly the bytes written to it.

    Makes grouping keys human-decodable: ``bytes.fromhex(key)`` recovers the
    concatenated terms. Meant for tests and for ``groupingkey explain``.
    """

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write(self, data: bytes) -> int:
        self._buffer.extend(data)
        return len(data)

    def finalize(self) -> bytes:
        return bytes(self._buffer)
