"""
Tests for secret buffer helpers.
"""

import pytest
from pathlib import Path

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from keystretch.secret import SecretBuffer, wipe


class TestWipe:
    """wipe() zeroes mutable buffers in place."""

    def test_bytearray(self):
        buf = bytearray(b"secret")
        wipe(buf)
        assert buf == bytearray(6)

    def test_writable_memoryview(self):
        backing = bytearray(b"secret")
        wipe(memoryview(backing)[2:])
        assert backing == bytearray(b"se\x00\x00\x00\x00")

    def test_bytes_untouched(self):
        data = b"secret"
        wipe(data)
        assert data == b"secret"

    def test_readonly_view_untouched(self):
        view = memoryview(b"secret")
        wipe(view)
        assert view.tobytes() == b"secret"


class TestSecretBuffer:
    """SecretBuffer wipes on exit."""

    def test_sized(self):
        with SecretBuffer(4) as buf:
            assert len(buf) == 4
            assert buf.data == bytearray(4)

    def test_wiped_on_exit(self):
        with SecretBuffer(b"secret") as buf:
            buf[0] = 0x53
            assert buf[0] == 0x53
        assert buf.data == bytearray(6)

    def test_wiped_on_exception(self):
        with pytest.raises(RuntimeError):
            with SecretBuffer(b"secret") as buf:
                raise RuntimeError("boom")
        assert not any(buf.data)

    def test_repr_hides_contents(self):
        buf = SecretBuffer(b"hunter2")
        assert "hunter2" not in repr(buf)
        assert "len=7" in repr(buf)
