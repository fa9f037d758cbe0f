"""
HMAC (RFC 2104) over a HashPrimitive.
"""

from .hashes import SHA1, HashPrimitive
from .secret import SecretBuffer

IPAD = 0x36
OPAD = 0x5c


def _fill_pad(pad: SecretBuffer, key, value: int) -> None:
    """Write ``key`` zero-padded to the block length, XORed with ``value``."""
    pad.data[:] = bytes(len(pad))
    pad.data[:len(key)] = key
    for i in range(len(pad)):
        pad.data[i] ^= value


def hmac_digest(text, key, primitive: HashPrimitive = SHA1) -> bytes:
    """
    Compute HMAC(key, text) with the given hash primitive.

    Keys longer than one block are replaced by their digest first. The padded
    key buffers are wiped before returning.

    Args:
        text: Message bytes
        key: Key bytes (any length)
        primitive: Hash to build the MAC on (SHA-1 by default)

    Returns:
        Digest of ``primitive.digest_size`` bytes
    """
    block_size = primitive.block_size

    with SecretBuffer(block_size) as pad, SecretBuffer() as short_key:
        if len(key) > block_size:
            short_key.data[:] = primitive.digest(key)
            key = short_key.data

        _fill_pad(pad, key, IPAD)
        inner = primitive.digest(pad.data, text)

        _fill_pad(pad, key, OPAD)
        return primitive.digest(pad.data, inner)
