"""
Password-Based Key Derivation Function 2 (PKCS #5 v2.0, RFC 8018 section 5.2).

Block layout follows IEEE Std 802.11-2007, Annex H.4.2: each output block i is
    T_i = U_1 ^ U_2 ^ ... ^ U_c
    U_1 = HMAC(P, S || INT_32_BE(i)),  U_j = HMAC(P, U_{j-1})
with i starting at 1. The final block is truncated to the requested length.
"""

import sys
from dataclasses import dataclass
from typing import Optional, Union

from .errors import DeriveError, error_for
from .hashes import SHA1, HashPrimitive
from .hmac_engine import hmac_digest
from .secret import SecretBuffer, wipe

COUNTER_SIZE = 4
MAX_BLOCKS = 2 ** 32 - 1

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass
class DeriveResult:
    """Outcome of pkcs5_pbkdf2: either a key or the reason it was refused."""
    key: Optional[bytes] = None
    error: Optional[DeriveError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def check_parameters(salt, rounds: int, output_length: int,
                     primitive: HashPrimitive = SHA1) -> Optional[DeriveError]:
    """
    Validate a derivation request.

    Returns:
        None if the request is acceptable, otherwise the first DeriveError found
    """
    if rounds < 1:
        return DeriveError.INVALID_ROUNDS
    if output_length < 1:
        return DeriveError.INVALID_LENGTH
    if -(-output_length // primitive.digest_size) > MAX_BLOCKS:
        return DeriveError.INVALID_LENGTH
    if len(salt) == 0 or len(salt) > sys.maxsize - COUNTER_SIZE:
        return DeriveError.INVALID_SALT
    return None


def pkcs5_pbkdf2(password: BytesLike, salt: BytesLike, rounds: int, output_length: int,
                 primitive: HashPrimitive = SHA1) -> DeriveResult:
    """
    Derive ``output_length`` bytes from ``password`` and ``salt``.

    Validation failures are reported in the returned DeriveResult rather than
    raised. The working salt and all intermediate digests are wiped before
    returning.
    """
    error = check_parameters(salt, rounds, output_length, primitive)
    if error is not None:
        return DeriveResult(error=error)

    salt_len = len(salt)
    digest_size = primitive.digest_size

    try:
        asalt = SecretBuffer(salt_len + COUNTER_SIZE)
        key = bytearray(output_length)
    except MemoryError:
        return DeriveResult(error=DeriveError.ALLOCATION_FAILURE)

    with asalt, SecretBuffer(digest_size) as d1, SecretBuffer(digest_size) as obuf:
        asalt[:salt_len] = salt
        offset = 0
        count = 1
        while offset < output_length:
            asalt[salt_len:] = count.to_bytes(COUNTER_SIZE, 'big')
            d1[:] = hmac_digest(asalt.data, password, primitive)
            obuf[:] = d1.data

            for _ in range(1, rounds):
                d1[:] = hmac_digest(d1.data, password, primitive)
                for j in range(digest_size):
                    obuf.data[j] ^= d1.data[j]

            r = min(output_length - offset, digest_size)
            key[offset:offset + r] = obuf[:r]
            offset += r
            count += 1

    derived = bytes(key)
    wipe(key)
    return DeriveResult(key=derived)


def _to_bytes(value, name: str) -> BytesLike:
    if isinstance(value, str):
        return value.encode('utf-8')
    if isinstance(value, (bytes, bytearray)):
        return value
    if isinstance(value, memoryview):
        return value.tobytes()
    raise TypeError(f"{name} must be str or bytes-like, not {type(value).__name__}")


def derive_key(password, salt, rounds: int, output_length: int,
               primitive: HashPrimitive = SHA1) -> bytes:
    """
    Derive a key, raising on invalid arguments.

    Args:
        password: Password as bytes, or str (encoded as UTF-8)
        salt: Non-empty salt as bytes, or str (encoded as UTF-8)
        rounds: Iteration count, at least 1
        output_length: Number of key bytes to produce, at least 1
        primitive: Hash primitive for HMAC (SHA-1 by default)

    Returns:
        Exactly ``output_length`` bytes of key material

    Raises:
        InvalidRoundsError, InvalidLengthError, InvalidSaltError,
        AllocationFailureError: see DerivationError.kind
        TypeError: If password or salt is not str/bytes-like
    """
    password = _to_bytes(password, 'password')
    salt = _to_bytes(salt, 'salt')

    result = pkcs5_pbkdf2(password, salt, rounds, output_length, primitive)
    if not result.ok:
        raise error_for(result.error)
    return result.key
