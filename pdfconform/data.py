"""An immutable, hashable container for raw bytes."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview, "Data"]


class Data:
    """Holds some bytes; compared and hashed by content."""

    __slots__ = ("_bytes",)

    def __init__(self, value: BytesLike = b"") -> None:
        if isinstance(value, Data):
            self._bytes: bytes = value._bytes
        elif isinstance(value, (bytes, bytearray, memoryview)):
            self._bytes = bytes(value)
        else:
            raise TypeError(f"expected a bytes-like object, got {type(value).__name__}")

    def as_bytes(self) -> bytes:
        """Return the held bytes."""
        return self._bytes

    def __bytes__(self) -> bytes:
        return self._bytes

    def __len__(self) -> int:
        return len(self._bytes)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Data):
            return self._bytes == other._bytes
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._bytes)

    def __repr__(self) -> str:
        return "Data {..}"