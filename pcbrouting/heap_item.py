"""Priority-queue entries ordered by key alone."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@total_ordering
@dataclass(eq=False)
class BinaryHeapItem(Generic[K, V]):
    """A key used for ordering paired with a value that never takes part in comparisons."""

    key: K
    value: V

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BinaryHeapItem):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, BinaryHeapItem):
            return NotImplemented
        return self.key < other.key

    __hash__ = None  # type: ignore[assignment]