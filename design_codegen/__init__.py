"""
design_codegen - Transform pipeline turning generated design markup into JSX.

Usage:
    from design_codegen import PrimaryFont, create_default_pipeline

    pipeline = create_default_pipeline()
    result = pipeline.execute_sync(html, primary_font=PrimaryFont("Poppins"))
    print(result.code)
"""

from .contracts import (
    ExecutionContext,
    MetricsRecord,
    PrimaryFont,
    Transform,
    TransformError,
)
from .pipeline import TransformPipeline, create_default_pipeline, run
from .tailwind_rules import optimize_tailwind_classes

__all__ = [
    "ExecutionContext",
    "MetricsRecord",
    "PrimaryFont",
    "Transform",
    "TransformError",
    "TransformPipeline",
    "create_default_pipeline",
    "run",
    "optimize_tailwind_classes",
]

__version__ = "0.1.0"
