"""Protocol definition for membership filters."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..core.types import Item


@runtime_checkable
class MembershipFilter(Protocol):
    """Probabilistic set membership test."""

    def add(self, item: Item) -> None:
        """Add item to the filter."""
        ...

    def __contains__(self, item: Item) -> bool:
        """Return True if item may be present; False if definitely absent."""
        ...

    def snapshot(self) -> bytearray:
        """Return a copy of the filter state."""
        ...

    def estimate_false_positives(self) -> float:
        """Estimated false-positive rate in percent."""
        ...
