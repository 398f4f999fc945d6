"""
Pipeline Contracts - Registration entries and run results.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from ..contracts.context import ExecutionContext
from ..contracts.metrics import MetricsRecord
from ..contracts.transform import Transform
from ..markup.nodes import MarkupNode


@dataclass
class TransformRegistration:
    """A transform as registered on a pipeline."""

    transform: Transform
    """The pass itself."""

    priority: int
    """Effective priority (the transform's own, or an override)."""

    order: int
    """Registration index; breaks priority ties."""

    enabled: bool = True
    """Disabled registrations are listed but never executed."""

    @property
    def name(self) -> str:
        return self.transform.name

    @property
    def sort_key(self):
        return (self.priority, self.order)

    def to_dict(self) -> Dict:
        return {"name": self.name, "priority": self.priority, "enabled": self.enabled}


@dataclass
class TransformReport:
    """Outcome of one executed transform."""

    name: str
    priority: int
    metrics: MetricsRecord
    duration_ms: float = 0.0

    def describe(self) -> str:
        return f"{self.name} (priority {self.priority}): {self.metrics.describe()}"


@dataclass
class PipelineResult:
    """
    Result of running the pipeline on a tree.

    ``tree`` is the same object that was passed in, mutated in place.
    """

    tree: MarkupNode
    context: ExecutionContext
    reports: List[TransformReport] = field(default_factory=list)

    @property
    def executed(self) -> List[str]:
        """Transform names in execution order."""
        return [report.name for report in self.reports]

    def summary(self) -> Dict[str, Dict[str, int]]:
        return self.context.summary()


@dataclass
class ConversionResult:
    """Result of an end-to-end text -> text conversion."""

    code: str
    """Printed JSX."""

    result: PipelineResult
    """Underlying pipeline result (tree, context, reports)."""

    parse_time_ms: float = 0.0
    transform_time_ms: float = 0.0
    generate_time_ms: float = 0.0

    @property
    def stats(self) -> Dict[str, Dict[str, int]]:
        return self.result.summary()
