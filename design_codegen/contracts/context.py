"""
ExecutionContext - Job-scoped state shared by every transform.

One context is created per conversion job and passed explicitly through
the pipeline. It carries:
- the upstream-detected primary font (read-only inside the pipeline)
- a logger sink for progress messages
- the append-only per-transform metrics report
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .errors import ContextError
from .metrics import MetricsRecord


DEFAULT_LOGGER_NAME = "design_codegen.pipeline"


@dataclass(frozen=True)
class PrimaryFont:
    """Dominant font detected upstream (e.g. family="Poppins", style="Regular")."""

    family: str
    style: str = "Regular"


class ExecutionContext:
    """
    Shared mutable record threaded through every transform.

    ``primary_font`` is set once at construction and exposed read-only.
    ``metrics`` only grows: each transform name can be recorded once.

    Usage:
        context = ExecutionContext(primary_font=PrimaryFont("Poppins"))
        await pipeline.run(tree, context)
        context.summary()  # {"font-detection": {"fontsConverted": 3}, ...}
    """

    def __init__(
        self,
        primary_font: Optional[PrimaryFont] = None,
        logger: Optional[Any] = None,
        options: Optional[Dict[str, Any]] = None,
    ):
        """
        Args:
            primary_font: Font detected by the design-tool integration
            logger: Any object with debug/info/warning/error methods.
                    Defaults to the ``design_codegen.pipeline`` logger.
            options: Free-form per-job options. No built-in transform reads
                     them; they are passed through for custom transforms.
        """
        self._primary_font = primary_font
        self.logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)
        self.options: Dict[str, Any] = dict(options or {})
        self._metrics: Dict[str, MetricsRecord] = {}

    @property
    def primary_font(self) -> Optional[PrimaryFont]:
        """Upstream primary font (read-only)."""
        return self._primary_font

    @property
    def metrics(self) -> Mapping[str, MetricsRecord]:
        """Read-only view of recorded metrics, keyed by transform name."""
        return dict(self._metrics)

    def record_metrics(self, transform_name: str, record: MetricsRecord) -> None:
        """
        Record a transform's metrics.

        Raises:
            ContextError: If metrics for this transform were already recorded
        """
        if transform_name in self._metrics:
            raise ContextError(f"Metrics for {transform_name!r} already recorded")
        self._metrics[transform_name] = record

    def summary(self) -> Dict[str, Dict[str, int]]:
        """Per-job report: transform name -> counters."""
        return {name: record.to_dict() for name, record in self._metrics.items()}

    def __repr__(self) -> str:
        return (
            f"ExecutionContext(primary_font={self._primary_font!r}, "
            f"recorded={list(self._metrics)})"
        )
