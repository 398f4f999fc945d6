"""
Default pipeline wiring.
"""

import logging
from typing import Optional

from ..core.config import Settings, get_settings
from .pipeline import TransformPipeline


logger = logging.getLogger(__name__)


def create_default_pipeline(settings: Optional[Settings] = None) -> TransformPipeline:
    """
    Create a TransformPipeline with all built-in transforms registered.

    Settings.DISABLED_TRANSFORMS and Settings.PRIORITY_OVERRIDES are
    applied at registration.

    Returns:
        Configured TransformPipeline ready to use
    """
    from ..transforms.font_detection import FontDetectionTransform
    from ..transforms.post_fixes import PostFixesTransform
    from ..transforms.tailwind_optimizer import TailwindOptimizerTransform

    settings = settings or get_settings()
    disabled = set(settings.DISABLED_TRANSFORMS)
    overrides = settings.PRIORITY_OVERRIDES

    pipeline = TransformPipeline(settings=settings)
    for transform in (
        FontDetectionTransform(fallback_family=settings.FONT_FALLBACK),  # Priority 0 - before class cleaning
        PostFixesTransform(),                                             # Priority 20 - visual fidelity
        TailwindOptimizerTransform(),                                     # Priority 40 - last
    ):
        pipeline.register(
            transform,
            priority=overrides.get(transform.name),
            enabled=transform.name not in disabled,
        )

    unknown = (disabled | set(overrides)) - {t["name"] for t in pipeline.transforms}
    if unknown:
        logger.warning(f"Settings reference unknown transforms: {sorted(unknown)}")

    logger.info(f"Created default pipeline with {len(pipeline)} transforms")
    return pipeline
