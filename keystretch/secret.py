"""
Scoped buffers for secret material.

Python's bytes are immutable, so full zeroization can't be guaranteed. Mutable
buffers (bytearray, writable memoryview) are overwritten in place instead.
"""

from typing import Any, Union


def wipe(buf: Any) -> None:
    """
    Overwrite a mutable buffer with zeros.

    bytes and read-only views are left untouched since they cannot be mutated.
    """
    if isinstance(buf, bytearray):
        buf[:] = bytes(len(buf))
    elif isinstance(buf, memoryview) and not buf.readonly:
        buf[:] = bytes(buf.nbytes)


class SecretBuffer:
    """
    A bytearray that is zeroed when the ``with`` block exits.

    Usage:
        with SecretBuffer(20) as d:
            d.data[:] = digest
    """

    def __init__(self, size_or_data: Union[int, bytes, bytearray, memoryview] = 0):
        self.data = bytearray(size_or_data)

    def __enter__(self) -> 'SecretBuffer':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        wipe(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index):
        return self.data[index]

    def __setitem__(self, index, value):
        self.data[index] = value

    def __repr__(self) -> str:
        # never print the contents
        return f"SecretBuffer(len={len(self.data)})"
