"""
Hash primitives used by the HMAC engine.

Wraps the ``cryptography`` hash algorithms so the block and digest sizes travel
with the algorithm instead of being hard-coded in HMAC/PBKDF2.
"""

from typing import Dict, Type

from cryptography.hazmat.primitives import hashes


class UnsupportedHashError(ValueError):
    """Raised when a hash name has no registered primitive."""


class HashPrimitive:
    """
    A fixed block length / fixed digest length hash.

    Attributes:
        name: Lowercase algorithm name (e.g. "sha1")
        digest_size: Output length in bytes
        block_size: Input block length in bytes
    """

    def __init__(self, algorithm: hashes.HashAlgorithm):
        if getattr(algorithm, 'block_size', None) is None:
            raise UnsupportedHashError(
                f"Hash '{algorithm.name}' has no fixed block length and can't be used with HMAC"
            )
        self.algorithm = algorithm
        self.name = algorithm.name
        self.digest_size = algorithm.digest_size
        self.block_size = algorithm.block_size

    def new(self) -> hashes.Hash:
        """Return a fresh streaming context (update/finalize)."""
        return hashes.Hash(self.algorithm)

    def digest(self, *chunks) -> bytes:
        """Hash the concatenation of ``chunks`` in one pass."""
        ctx = self.new()
        for chunk in chunks:
            ctx.update(chunk)
        return ctx.finalize()

    def __repr__(self) -> str:
        return f"HashPrimitive({self.name}, block={self.block_size}, digest={self.digest_size})"


_ALGORITHMS: Dict[str, Type[hashes.HashAlgorithm]] = {
    'sha1': hashes.SHA1,
    'sha224': hashes.SHA224,
    'sha256': hashes.SHA256,
    'sha384': hashes.SHA384,
    'sha512': hashes.SHA512,
}

SUPPORTED_HASHES = tuple(_ALGORITHMS)


def get_primitive(name: str) -> HashPrimitive:
    """
    Look up a hash primitive by name.

    Args:
        name: Algorithm name, case-insensitive ("sha1", "SHA256", ...)

    Returns:
        HashPrimitive for the algorithm

    Raises:
        UnsupportedHashError: If the name is not registered
    """
    try:
        algorithm_cls = _ALGORITHMS[name.lower()]
    except KeyError:
        raise UnsupportedHashError(
            f"Unsupported hash '{name}'. Choose one of: {', '.join(SUPPORTED_HASHES)}"
        ) from None
    return HashPrimitive(algorithm_cls())


SHA1 = get_primitive('sha1')
