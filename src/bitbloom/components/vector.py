"""Packed bit vector.

Fixed-size array of bits stored eight to a byte, least-significant bit
first. Bit i lives in byte i // 8 at position i % 8.
"""

from __future__ import annotations

import logging

from ..core.errors import InvalidSizeError, InvalidSnapshotTypeError, SnapshotSizeMismatchError
from ..core.types import Position, Snapshot

logger = logging.getLogger(__name__)


def _build_bit_counts() -> tuple[int, ...]:
    counts = [0] * 256
    for n in range(1, 256):
        counts[n] = (n & 1) + counts[n >> 1]
    return tuple(counts)


# Number of set bits for every byte value
BIT_COUNTS = _build_bit_counts()


class BitVector:
    """Fixed-size bit array backed by a bytearray.

    Args:
        bit_length: Number of addressable bits
        snapshot: Optional existing buffer. A bytearray is adopted as the
            backing store without copying, so later writes through either
            reference are visible to both. bytes and memoryview are copied.

    Invariants:
        - len(buffer) == byte_length for the lifetime of the vector
        - bit_length and byte_length never change

    Positions passed to get/set/set_range must lie in [0, bit_length).
    This is checked with assertions only.
    """

    __slots__ = ("_bit_length", "_byte_length", "_value")
    __hash__ = None

    def __init__(self, bit_length: int, snapshot: Snapshot | None = None):
        if bit_length < 0:
            raise InvalidSizeError(f"Invalid vector size: {bit_length}")
        self._bit_length = bit_length
        self._byte_length = (bit_length + 7) // 8

        if snapshot is None:
            self._value = bytearray(self._byte_length)
            return

        if isinstance(snapshot, bytearray):
            value = snapshot
        elif isinstance(snapshot, (bytes, memoryview)):
            value = bytearray(snapshot)
        else:
            raise InvalidSnapshotTypeError(
                f"Invalid vector data: bytes-like buffer expected, got {type(snapshot).__name__}"
            )
        if len(value) != self._byte_length:
            raise SnapshotSizeMismatchError(
                f"Vector of {bit_length} bits needs {self._byte_length} bytes, got {len(value)}"
            )
        self._value = value
        logger.debug(f"Restored {bit_length}-bit vector from {type(snapshot).__name__} snapshot")

    @property
    def bit_length(self) -> int:
        return self._bit_length

    @property
    def byte_length(self) -> int:
        return self._byte_length

    @property
    def total_set_bits(self) -> int:
        """Number of bits currently set."""
        counts = BIT_COUNTS
        total = sum(counts[byte] for byte in self._value)
        padding = self._byte_length * 8 - self._bit_length
        if padding:
            # ignore bits past bit_length in the last byte
            last = self._value[-1]
            total -= counts[last] - counts[last & (0xFF >> padding)]
        return total

    def get(self, position: Position) -> bool:
        """Return whether the bit at position is set."""
        assert 0 <= position < self._bit_length, f"position {position} out of range"
        return (self._value[position >> 3] & (1 << (position & 7))) != 0

    def set(self, position: Position, value: bool = True) -> None:
        """Set or clear the bit at position."""
        assert 0 <= position < self._bit_length, f"position {position} out of range"
        byte_index, remainder = divmod(position, 8)
        mask = 1 << remainder
        if value:
            self._value[byte_index] |= mask
        else:
            self._value[byte_index] &= ~mask

    def set_range(self, start: Position, stop: Position, value: bool = True) -> None:
        """Set or clear every bit in [start, stop).

        Changes to a byte are accumulated locally and written back once
        the range moves on to the next byte.
        """
        if start >= stop:
            return
        assert 0 <= start and stop <= self._bit_length, f"range [{start}, {stop}) out of range"

        buf = self._value
        curr_index = start >> 3
        curr_value = buf[curr_index]
        for position in range(start, stop):
            byte_index = position >> 3
            if byte_index != curr_index:
                buf[curr_index] = curr_value
                curr_index = byte_index
                curr_value = buf[curr_index]
            mask = 1 << (position & 7)
            if value:
                curr_value |= mask
            else:
                curr_value &= ~mask & 0xFF
        # write last processed byte
        buf[curr_index] = curr_value

    def equals(self, other: object) -> bool:
        """Return True if other is a BitVector with the same length and bits."""
        if not isinstance(other, BitVector):
            return False
        if self._bit_length != other._bit_length:
            return False
        return self._value == other._value

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def snapshot(self) -> bytearray:
        """Return an independent copy of the underlying buffer."""
        return bytearray(self._value)

    def __len__(self) -> int:
        return self._bit_length

    def __repr__(self) -> str:
        return f"BitVector(bit_length={self._bit_length}, set_bits={self.total_set_bits})"
