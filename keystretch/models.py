"""
Data models for derivation settings and results.
"""

import base64
from dataclasses import dataclass

from .hashes import SUPPORTED_HASHES

OUTPUT_FORMATS = ("hex", "base64", "raw")


@dataclass
class DerivationConfig:
    """
    Default parameters for deriving keys.

    Attributes:
        rounds: PBKDF2 iteration count
        length: Derived key length in bytes
        hash_name: Hash primitive under HMAC
        salt_size: Size of generated salts in bytes
        output_format: How keys are printed ("hex", "base64" or "raw")
    """
    rounds: int
    length: int
    hash_name: str
    salt_size: int
    output_format: str

    @staticmethod
    def from_dict(data: dict) -> 'DerivationConfig':
        """Create DerivationConfig from dictionary."""
        return DerivationConfig(
            rounds=data.get('rounds', 4096),
            length=data.get('length', 20),
            hash_name=str(data.get('hash', 'sha1')).lower(),
            salt_size=data.get('salt_size', 16),
            output_format=str(data.get('output_format', 'hex')).lower()
        )

    def to_dict(self) -> dict:
        return {
            "rounds": self.rounds,
            "length": self.length,
            "hash": self.hash_name,
            "salt_size": self.salt_size,
            "output_format": self.output_format,
        }

    def validate(self) -> tuple[bool, str]:
        """
        Validate configuration consistency.

        Returns:
            Tuple of (is_valid, error_message)
        """
        for field_name in ('rounds', 'length', 'salt_size'):
            value = getattr(self, field_name)
            if not isinstance(value, int) or isinstance(value, bool):
                return False, f"'{field_name}' must be an integer"
            if value < 1:
                return False, f"'{field_name}' must be at least 1 (got {value})"

        if self.hash_name not in SUPPORTED_HASHES:
            return False, f"Unsupported hash '{self.hash_name}' (choose from {', '.join(SUPPORTED_HASHES)})"

        if self.output_format not in OUTPUT_FORMATS:
            return False, f"Unsupported output format '{self.output_format}' (choose from {', '.join(OUTPUT_FORMATS)})"

        return True, ""

    @staticmethod
    def default() -> 'DerivationConfig':
        """Return default configuration (PBKDF2-HMAC-SHA1, 4096 rounds)."""
        return DerivationConfig(
            rounds=4096,
            length=20,
            hash_name='sha1',
            salt_size=16,
            output_format='hex'
        )


@dataclass
class DerivedKey:
    """A derived key together with the parameters needed to reproduce it."""
    salt: bytes
    key: bytes
    rounds: int
    hash_name: str

    def encode(self, fmt: str = "hex") -> str:
        """Render the key as text."""
        return encode_bytes(self.key, fmt)

    def __repr__(self) -> str:
        return f"DerivedKey(hash={self.hash_name}, rounds={self.rounds}, length={len(self.key)})"


def encode_bytes(data: bytes, fmt: str) -> str:
    """Render bytes as hex, base64 or raw (latin-1) text."""
    if fmt == "hex":
        return data.hex()
    if fmt == "base64":
        return base64.b64encode(data).decode('ascii')
    if fmt == "raw":
        return data.decode('latin-1')
    raise ValueError(f"Unknown output format: {fmt}")
