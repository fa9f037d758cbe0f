"""
Error kinds and exceptions for key derivation.
"""

from enum import Enum


class DeriveError(Enum):
    """Reasons a derivation request is rejected before any hashing."""
    INVALID_ROUNDS = "rounds must be at least 1"
    INVALID_LENGTH = "output length must be at least 1 and fit the 32-bit block counter"
    INVALID_SALT = "salt must be non-empty and short enough to append the block counter"
    ALLOCATION_FAILURE = "could not allocate working buffers"


class DerivationError(Exception):
    """Raised by derive_key when the core rejects its arguments."""

    def __init__(self, kind: DeriveError):
        super().__init__(kind.value)
        self.kind = kind


class InvalidRoundsError(DerivationError):
    """Iteration count below 1."""


class InvalidLengthError(DerivationError):
    """Requested key length is zero or exceeds the block counter range."""


class InvalidSaltError(DerivationError):
    """Salt is empty or too long to take the counter suffix."""


class AllocationFailureError(DerivationError):
    """Working buffers could not be allocated."""


_EXCEPTIONS = {
    DeriveError.INVALID_ROUNDS: InvalidRoundsError,
    DeriveError.INVALID_LENGTH: InvalidLengthError,
    DeriveError.INVALID_SALT: InvalidSaltError,
    DeriveError.ALLOCATION_FAILURE: AllocationFailureError,
}


def error_for(kind: DeriveError) -> DerivationError:
    """Build the exception matching an error kind."""
    return _EXCEPTIONS[kind](kind)
