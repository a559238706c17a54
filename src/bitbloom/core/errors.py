"""Exception hierarchy for bitbloom.

All errors are raised at construction time. Once a vector or filter
exists, its operations do not fail for valid inputs.
"""

from __future__ import annotations


class BloomError(Exception):
    """Base exception for all bitbloom errors."""
    pass


class InvalidSizeError(BloomError, ValueError):
    """Raised when a filter size is not a positive multiple of 8."""
    pass


class InvalidHashCountError(BloomError, ValueError):
    """Raised when fewer than one hash function is requested."""
    pass


class InvalidSeedError(BloomError, ValueError):
    """Raised when a seed does not fit in 32 unsigned bits."""
    pass


class InvalidSnapshotTypeError(BloomError, TypeError):
    """Raised when a snapshot is not a byte buffer."""
    pass


class SnapshotSizeMismatchError(BloomError, ValueError):
    """Raised when a snapshot's byte length does not match the declared size."""
    pass
