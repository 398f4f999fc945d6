"""
Contracts - Data structures shared by the pipeline and every transform.

Provides:
- Transform: Protocol every pass satisfies
- ExecutionContext / PrimaryFont: Job-scoped shared state
- MetricsRecord: Per-transform mutation counters
- Error hierarchy
"""

from .context import ExecutionContext, PrimaryFont
from .errors import (
    ContextError,
    DesignCodegenError,
    MarkupParseError,
    PipelineConfigError,
    TransformError,
)
from .metrics import MetricsRecord
from .transform import Transform

__all__ = [
    "ExecutionContext",
    "PrimaryFont",
    "MetricsRecord",
    "Transform",
    "DesignCodegenError",
    "TransformError",
    "PipelineConfigError",
    "ContextError",
    "MarkupParseError",
]
