"""
StatsSummary Value Object - Per-status job counts snapshot.
"""

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class StatsSummary:
    """
    Immutable snapshot of job counts per status.

    Keeps the key order it was built with, so a backend summary is
    displayed in the order the backend sent it.

    Attributes:
        counts: Pairs of (status name, count)
    """

    counts: tuple[tuple[str, int], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Convert mappings to immutable pairs."""
        if isinstance(self.counts, dict):
            object.__setattr__(self, "counts", tuple(self.counts.items()))
        for name, count in self.counts:
            if count < 0:
                raise ValueError(f"count for '{name}' must not be negative")

    def __getitem__(self, status: str) -> int:
        for name, count in self.counts:
            if name == status:
                return count
        raise KeyError(status)

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self.counts)

    def __len__(self) -> int:
        return len(self.counts)

    def get(self, status: str, default: int = 0) -> int:
        try:
            return self[status]
        except KeyError:
            return default

    @property
    def total(self) -> int:
        return sum(count for _, count in self.counts)

    def to_dict(self) -> dict[str, int]:
        return dict(self.counts)
