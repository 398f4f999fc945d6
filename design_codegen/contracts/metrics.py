"""
Metrics - Per-transform mutation counters.

A MetricsRecord maps counter names (e.g. ``classesOptimized``) to
non-negative counts of mutations a transform actually applied.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional


@dataclass
class MetricsRecord:
    """
    Ordered mapping of counter name -> non-negative integer.

    Example:
        record = MetricsRecord.of("classesOptimized")
        record.increment("classesOptimized")
        record["classesOptimized"]  # 1
    """

    counters: Dict[str, int] = field(default_factory=dict)
    """Counter values, in declaration order."""

    def __post_init__(self):
        for name, value in self.counters.items():
            self._check(name, value)

    @classmethod
    def of(cls, *names: str) -> "MetricsRecord":
        """Create a record with the given counters initialized to zero."""
        return cls(counters={name: 0 for name in names})

    def increment(self, name: str, by: int = 1) -> None:
        """Add ``by`` to a counter, creating it if needed."""
        if by < 0:
            raise ValueError(f"Counter {name!r} cannot be decremented (by={by})")
        self.counters[name] = self.counters.get(name, 0) + by

    def merge(self, other: "MetricsRecord") -> "MetricsRecord":
        """Sum another record's counters into this one. Returns self."""
        for name, value in other.counters.items():
            self.increment(name, value)
        return self

    def get(self, name: str, default: Optional[int] = None) -> Optional[int]:
        return self.counters.get(name, default)

    @property
    def total(self) -> int:
        """Sum of all counters."""
        return sum(self.counters.values())

    def to_dict(self) -> Dict[str, int]:
        """Convert to a plain dict for serialization."""
        return dict(self.counters)

    def describe(self) -> str:
        """Human-readable ``name=value`` list."""
        if not self.counters:
            return "no counters"
        return ", ".join(f"{name}={value}" for name, value in self.counters.items())

    @staticmethod
    def _check(name: str, value: int) -> None:
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise ValueError(f"Counter {name!r} must be a non-negative int, got {value!r}")

    def __getitem__(self, name: str) -> int:
        return self.counters[name]

    def __contains__(self, name: object) -> bool:
        return name in self.counters

    def __iter__(self) -> Iterator[str]:
        return iter(self.counters)

    def __len__(self) -> int:
        return len(self.counters)
