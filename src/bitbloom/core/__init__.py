"""bitbloom core: configuration, errors and shared types."""

from .config import DEFAULT_SEED, BloomConfig
from .errors import (
    BloomError,
    InvalidHashCountError,
    InvalidSeedError,
    InvalidSizeError,
    InvalidSnapshotTypeError,
    SnapshotSizeMismatchError,
)

__all__ = [
    "DEFAULT_SEED",
    "BloomConfig",
    "BloomError",
    "InvalidHashCountError",
    "InvalidSeedError",
    "InvalidSizeError",
    "InvalidSnapshotTypeError",
    "SnapshotSizeMismatchError",
]
