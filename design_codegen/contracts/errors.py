"""
Errors - Exception hierarchy for the transform pipeline.

Pattern mismatches are never errors: a pass that finds nothing to rewrite
simply skips the element. Only failures that must stop a conversion job
are represented here.
"""

from typing import Optional


class DesignCodegenError(Exception):
    """Base class for all pipeline errors."""


class TransformError(DesignCodegenError):
    """
    A transform raised while traversing the tree.

    The pipeline aborts on the first TransformError. Mutations already
    applied by the failing transform (and earlier ones) are not rolled back.
    """

    def __init__(self, transform_name: str, message: str):
        super().__init__(f'Transform "{transform_name}" failed: {message}')
        self.transform_name = transform_name
        self.message = message


class PipelineConfigError(DesignCodegenError):
    """Invalid transform registration (duplicate name, bad priority)."""


class ContextError(DesignCodegenError):
    """Illegal write to the execution context."""


class MarkupParseError(DesignCodegenError):
    """Source text could not be turned into a markup tree."""

    def __init__(self, message: str, source_excerpt: Optional[str] = None):
        super().__init__(message)
        self.source_excerpt = source_excerpt
