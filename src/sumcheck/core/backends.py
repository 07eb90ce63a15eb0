"""Digest backends.

A backend turns a binary stream into digest bytes. The checker only knows
the DigestBackend protocol; every concrete algorithm is a HashlibBackend
configured with a different name.
"""

from __future__ import annotations

import hashlib
from typing import BinaryIO, Protocol

from sumcheck.constants import DIGEST_CHUNK_SIZE
from sumcheck.exceptions import DigestError, UnsupportedAlgorithmError
from sumcheck.logger import get_logger

logger = get_logger(__name__)


class DigestBackend(Protocol):
    """Capability to compute a digest over a byte stream."""

    name: str

    def compute_digest(self, stream: BinaryIO) -> bytes:
        """Read ``stream`` to the end and return the digest bytes."""
        ...


class HashlibBackend:
    """Digest backend for any algorithm provided by hashlib."""

    def __init__(self, algorithm: str) -> None:
        """Initialize the backend for an algorithm.

        Args:
            algorithm: Hash algorithm name, case-insensitive ("MD5", "sha256")

        Raises:
            UnsupportedAlgorithmError: If hashlib cannot provide the algorithm

        """
        self.name = algorithm.upper()
        self._hashlib_name = algorithm.lower()

        if self._hashlib_name not in {
            name.lower() for name in hashlib.algorithms_available
        }:
            msg = "not available in this system"
            raise UnsupportedAlgorithmError(msg, target=self.name)

    def __repr__(self) -> str:
        return f"HashlibBackend({self.name!r})"

    def compute_digest(self, stream: BinaryIO) -> bytes:
        """Compute the digest using memory-efficient chunked reading.

        Args:
            stream: Binary stream positioned at the start of the data

        Returns:
            Digest bytes

        Raises:
            DigestError: If reading the stream fails part way

        """
        hash_func = hashlib.new(self._hashlib_name)
        try:
            for chunk in iter(lambda: stream.read(DIGEST_CHUNK_SIZE), b""):
                hash_func.update(chunk)
        except OSError as e:
            name = getattr(stream, "name", None)
            raise DigestError(
                e.strerror or str(e), target=str(name) if name else None
            ) from e

        return hash_func.digest()


def get_backend(algorithm: str) -> HashlibBackend:
    """Return the digest backend for an algorithm name.

    Args:
        algorithm: Algorithm name such as "MD5" or "sha256"

    Returns:
        A backend computing that algorithm

    Raises:
        UnsupportedAlgorithmError: If the algorithm is unknown

    """
    backend = HashlibBackend(algorithm)
    logger.debug("Using %s digest backend", backend.name)
    return backend


def to_hex(digest: bytes) -> str:
    """Render digest bytes as lowercase hex, two characters per byte.

    Example:
        >>> to_hex(b"\\x0f\\xa0")
        '0fa0'

    """
    return "".join(f"{byte:02x}" for byte in digest)
