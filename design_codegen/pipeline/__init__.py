"""
Pipeline - Ordered, sequential execution of transforms over a markup tree.
"""

from .contracts import (
    ConversionResult,
    PipelineResult,
    TransformRegistration,
    TransformReport,
)
from .pipeline import TransformPipeline, run
from .registry import create_default_pipeline

__all__ = [
    "TransformPipeline",
    "run",
    "create_default_pipeline",
    "ConversionResult",
    "PipelineResult",
    "TransformRegistration",
    "TransformReport",
]
