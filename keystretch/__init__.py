"""
keystretch - PBKDF2 key derivation package

This package derives key material from passwords:
- hmac_engine: HMAC (RFC 2104) over a pluggable hash primitive
- pbkdf2: PKCS #5 v2.0 key stretching and the derive_key entry point
- deriver: config-bound derivation with event logging
"""

__version__ = "1.0.0"

from .errors import (
    AllocationFailureError,
    DerivationError,
    DeriveError,
    InvalidLengthError,
    InvalidRoundsError,
    InvalidSaltError,
)
from .hashes import SHA1, HashPrimitive, UnsupportedHashError, get_primitive
from .hmac_engine import hmac_digest
from .pbkdf2 import DeriveResult, derive_key, pkcs5_pbkdf2

__all__ = [
    "AllocationFailureError",
    "DerivationError",
    "DeriveError",
    "DeriveResult",
    "HashPrimitive",
    "InvalidLengthError",
    "InvalidRoundsError",
    "InvalidSaltError",
    "SHA1",
    "UnsupportedHashError",
    "derive_key",
    "get_primitive",
    "hmac_digest",
    "pkcs5_pbkdf2",
]
