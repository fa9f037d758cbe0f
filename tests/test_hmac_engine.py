"""
Tests for the HMAC engine.

Covers:
- RFC 2202 HMAC-SHA1 known answers
- Key normalization for keys longer than one block
- Agreement with the cryptography package's HMAC for other hashes
- Wiping of padded key buffers
"""

import pytest
from unittest.mock import patch
from pathlib import Path

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import hmac as crypto_hmac

from keystretch.hashes import SHA1, get_primitive
from keystretch.hmac_engine import hmac_digest
from keystretch.secret import SecretBuffer
from keystretch.vectors import HMAC_SHA1_VECTORS


def reference_hmac(key: bytes, data: bytes, algorithm) -> bytes:
    h = crypto_hmac.HMAC(key, algorithm)
    h.update(data)
    return h.finalize()


class TestKnownAnswers:
    """RFC 2202 vectors."""

    @pytest.mark.parametrize("vector", HMAC_SHA1_VECTORS, ids=lambda v: v.name)
    def test_rfc2202(self, vector):
        assert hmac_digest(vector.data, vector.key).hex() == vector.digest

    def test_jefe(self):
        """Spot check written out in full."""
        digest = hmac_digest(b"what do ya want for nothing?", b"Jefe")
        assert digest.hex() == "effcdf6ae5eb2fa2d27416d5f184df9c259a7c79"

    def test_digest_length(self):
        assert len(hmac_digest(b"", b"")) == 20


class TestKeyNormalization:
    """Keys longer than the block length are hashed first."""

    def test_long_key_equals_prehashed_key(self):
        key = b"\xaa" * 80
        data = b"Test Using Larger Than Block-Size Key - Hash Key First"
        prehashed = SHA1.digest(key)

        assert hmac_digest(data, key) == hmac_digest(data, prehashed)

    def test_block_length_key_is_not_hashed(self):
        """A key of exactly 64 bytes is used as-is."""
        key = b"k" * 64
        data = b"message"

        assert hmac_digest(data, key) != hmac_digest(data, SHA1.digest(key))
        assert hmac_digest(data, key) == reference_hmac(key, data, hashes.SHA1())

    def test_sha512_uses_its_own_block_length(self):
        """100 bytes fits in one SHA-512 block, so no hashing happens."""
        sha512 = get_primitive("sha512")
        key = b"x" * 100
        data = b"payload"

        assert hmac_digest(data, key, sha512) != hmac_digest(data, sha512.digest(key), sha512)
        assert hmac_digest(data, key, sha512) == reference_hmac(key, data, hashes.SHA512())


class TestOtherPrimitives:
    """Cross-check against cryptography's HMAC."""

    @pytest.mark.parametrize("name, algorithm", [
        ("sha224", hashes.SHA224()),
        ("sha256", hashes.SHA256()),
        ("sha384", hashes.SHA384()),
        ("sha512", hashes.SHA512()),
    ])
    def test_matches_reference(self, name, algorithm):
        primitive = get_primitive(name)
        for key in (b"k", b"short", b"z" * 200):
            data = b"The quick brown fox jumps over the lazy dog"
            assert hmac_digest(data, key, primitive) == reference_hmac(key, data, algorithm)

    def test_accepts_bytearray_inputs(self):
        key = bytearray(b"Jefe")
        data = bytearray(b"what do ya want for nothing?")
        assert hmac_digest(data, key).hex() == "effcdf6ae5eb2fa2d27416d5f184df9c259a7c79"


class TestScrubbing:
    """Pad buffers are zeroed after use."""

    def _run_recording(self, key):
        created = []

        class RecordingBuffer(SecretBuffer):
            def __init__(self, *args, **kwargs):
                super().__init__(*args, **kwargs)
                created.append(self)

        with patch('keystretch.hmac_engine.SecretBuffer', RecordingBuffer):
            hmac_digest(b"data", key)
        return created

    def test_pads_wiped_short_key(self):
        created = self._run_recording(b"secret")
        assert created
        assert all(not any(buf.data) for buf in created)

    def test_pads_wiped_long_key(self):
        created = self._run_recording(b"s" * 100)
        lengths = sorted(len(buf) for buf in created)

        assert lengths == [20, 64]
        assert all(not any(buf.data) for buf in created)
