"""
Transforms - Built-in pipeline passes.

Provides:
- FontDetectionTransform (priority 0)
- PostFixesTransform (priority 20)
- TailwindOptimizerTransform (priority 40)
"""

from .font_detection import FontDetectionTransform, weight_for_style
from .post_fixes import PostFixesTransform
from .tailwind_optimizer import TailwindOptimizerTransform

__all__ = [
    "FontDetectionTransform",
    "PostFixesTransform",
    "TailwindOptimizerTransform",
    "weight_for_style",
]
