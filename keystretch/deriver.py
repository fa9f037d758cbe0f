"""
Config-bound key derivation with event reporting.
"""

import os
from typing import Callable, Optional

from .errors import DerivationError
from .hashes import get_primitive
from .models import DerivationConfig, DerivedKey
from .pbkdf2 import derive_key


class KeyDeriver:
    """Derives keys using a DerivationConfig and reports events to a logger."""

    def __init__(self, config: Optional[DerivationConfig] = None,
                 session_logger: Optional[Callable[[str, str], None]] = None):
        self.config = config or DerivationConfig.default()
        self.session_logger = session_logger

        is_valid, error_message = self.config.validate()
        if not is_valid:
            raise ValueError(f"Invalid configuration: {error_message}")

        self.primitive = get_primitive(self.config.hash_name)

    def _log(self, event: str, details: str = ""):
        if self.session_logger:
            self.session_logger(event, details)

    def new_salt(self) -> bytes:
        """Generate a random salt of the configured size."""
        return os.urandom(self.config.salt_size)

    def derive(self, password, salt=None) -> DerivedKey:
        """
        Derive a key from ``password``.

        Args:
            password: Password as str or bytes
            salt: Salt to use; a random one is generated when None

        Returns:
            DerivedKey holding the salt and key

        Raises:
            DerivationError: If the core rejects the parameters
        """
        if salt is None:
            salt = self.new_salt()
        elif isinstance(salt, str):
            salt = salt.encode('utf-8')

        cfg = self.config
        self._log("DERIVE_STARTED",
                  f"hash={cfg.hash_name} rounds={cfg.rounds} length={cfg.length} salt_len={len(salt)}")
        try:
            key = derive_key(password, salt, cfg.rounds, cfg.length, self.primitive)
        except DerivationError as e:
            self._log("DERIVE_FAILED", f"{e.kind.name}: {e}")
            raise

        self._log("DERIVE_COMPLETED", f"{len(key)} bytes")
        return DerivedKey(salt=bytes(salt), key=key, rounds=cfg.rounds, hash_name=cfg.hash_name)
