"""
TransformPipeline - Orchestrates execution of transforms.

Maintains a registry of transforms and runs them over one markup tree:
1. Sort enabled registrations by (priority, registration order)
2. Await each transform to full completion before starting the next
3. Record each transform's metrics in the context under its name
4. Abort on the first failure, tagging the error with the transform name

Transforms are never run concurrently: each one depends on the exact
tree state left by the transforms before it.

Usage:
    pipeline = TransformPipeline()
    pipeline.register(FontDetectionTransform()).register(TailwindOptimizerTransform())
    result = await pipeline.run(tree, ExecutionContext(primary_font=font))
"""

import asyncio
import logging
import time
from typing import Any, Dict, Iterable, List, Optional, Union

from ..contracts.context import ExecutionContext, PrimaryFont
from ..contracts.errors import PipelineConfigError, TransformError
from ..contracts.metrics import MetricsRecord
from ..contracts.transform import Transform
from ..core.config import Settings, get_settings
from ..markup.nodes import MarkupNode
from ..markup.parser import parse_markup
from ..markup.printer import print_jsx
from .contracts import (
    ConversionResult,
    PipelineResult,
    TransformRegistration,
    TransformReport,
)


logger = logging.getLogger(__name__)


class TransformPipeline:
    """
    Ordered, strictly sequential runner for tree transforms.

    No retries: a transform mutates shared state, so re-running after a
    partial failure could apply corrections twice.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Args:
            settings: Pipeline settings; defaults to the module-level Settings
        """
        self._settings = settings or get_settings()
        self._registrations: List[TransformRegistration] = []

    # =========================================================================
    # REGISTRATION
    # =========================================================================

    def register(
        self,
        transform: Transform,
        priority: Optional[int] = None,
        enabled: bool = True,
    ) -> "TransformPipeline":
        """
        Register a transform.

        Args:
            transform: Object satisfying the Transform protocol
            priority: Optional override of the transform's own priority
            enabled: Disabled transforms are listed but skipped

        Returns:
            The pipeline, for chaining

        Raises:
            PipelineConfigError: On duplicate names or invalid priorities
        """
        if not isinstance(transform, Transform):
            raise PipelineConfigError(
                f"{transform!r} does not implement name/priority/execute"
            )

        if any(r.name == transform.name for r in self._registrations):
            raise PipelineConfigError(f"Transform {transform.name!r} already registered")

        effective = transform.priority if priority is None else priority
        if not isinstance(effective, int) or isinstance(effective, bool):
            raise PipelineConfigError(
                f"Priority of {transform.name!r} must be an int, got {effective!r}"
            )

        self._registrations.append(TransformRegistration(
            transform=transform,
            priority=effective,
            order=len(self._registrations),
            enabled=enabled,
        ))
        logger.debug(f"Registered transform: {transform.name} (priority {effective})")
        return self

    def register_all(self, transforms: Iterable[Transform]) -> "TransformPipeline":
        for transform in transforms:
            self.register(transform)
        return self

    @property
    def transforms(self) -> List[Dict[str, Any]]:
        """Registered transforms (name, priority, enabled) in execution order."""
        return [r.to_dict() for r in sorted(self._registrations, key=lambda r: r.sort_key)]

    def _ordered(self) -> List[TransformRegistration]:
        enabled = [r for r in self._registrations if r.enabled]
        return sorted(enabled, key=lambda r: r.sort_key)

    # =========================================================================
    # EXECUTION
    # =========================================================================

    async def run(self, tree: MarkupNode, context: ExecutionContext) -> PipelineResult:
        """
        Run every enabled transform over ``tree`` in priority order.

        Args:
            tree: Markup tree, mutated in place
            context: Job context; receives one metrics record per transform

        Returns:
            PipelineResult holding the same tree object

        Raises:
            TransformError: If a transform raises; no later transform runs
        """
        ordered = self._ordered()
        context.logger.info("TransformPipeline: Starting execution")
        context.logger.info(f"   Transforms to execute: {len(ordered)}")

        reports: List[TransformReport] = []
        pipeline_start = time.perf_counter()

        for registration in ordered:
            name = registration.name
            start = time.perf_counter()

            try:
                outcome = await registration.transform.execute(tree, context)
                record = _coerce_metrics(outcome)
            except Exception as exc:
                context.logger.error(f'Transform "{name}" failed: {exc}')
                raise TransformError(name, str(exc)) from exc

            duration_ms = (time.perf_counter() - start) * 1000
            context.record_metrics(name, record)

            report = TransformReport(
                name=name,
                priority=registration.priority,
                metrics=record,
                duration_ms=duration_ms,
            )
            reports.append(report)
            context.logger.info(self._summary_line(report))

        total_ms = (time.perf_counter() - pipeline_start) * 1000
        context.logger.info(
            f"TransformPipeline: Complete ({len(reports)} transforms, {total_ms:.1f}ms)"
        )
        return PipelineResult(tree=tree, context=context, reports=reports)

    async def execute(
        self,
        source: str,
        primary_font: Optional[PrimaryFont] = None,
        options: Optional[Dict[str, Any]] = None,
        logger: Optional[Any] = None,
    ) -> ConversionResult:
        """
        Parse markup, run the pipeline and print the result as JSX.

        Raises:
            MarkupParseError: If the source has no element
            TransformError: If a transform fails
        """
        start = time.perf_counter()
        tree = parse_markup(source)
        parse_ms = (time.perf_counter() - start) * 1000

        context = ExecutionContext(primary_font=primary_font, logger=logger, options=options)
        context.logger.info(f"   Parse time: {parse_ms:.1f}ms")

        start = time.perf_counter()
        result = await self.run(tree, context)
        transform_ms = (time.perf_counter() - start) * 1000

        start = time.perf_counter()
        code = print_jsx(result.tree)
        generate_ms = (time.perf_counter() - start) * 1000

        return ConversionResult(
            code=code,
            result=result,
            parse_time_ms=parse_ms,
            transform_time_ms=transform_ms,
            generate_time_ms=generate_ms,
        )

    def execute_sync(self, source: str, **kwargs: Any) -> ConversionResult:
        """Blocking wrapper around execute() for non-async callers."""
        return asyncio.run(self.execute(source, **kwargs))

    def _summary_line(self, report: TransformReport) -> str:
        line = f"   {report.describe()}"
        if self._settings.LOG_TIMING:
            line += f" [{report.duration_ms:.1f}ms]"
        return line

    def __len__(self) -> int:
        return len(self._registrations)

    def __repr__(self) -> str:
        return f"TransformPipeline({len(self._registrations)} transforms)"


async def run(
    tree: MarkupNode,
    context: ExecutionContext,
    passes: Iterable[Transform],
) -> PipelineResult:
    """
    Run ``passes`` over ``tree``; registration order is the list order.

    Raises:
        PipelineConfigError: On duplicate pass names
        TransformError: If a pass raises
    """
    pipeline = TransformPipeline()
    pipeline.register_all(passes)
    return await pipeline.run(tree, context)


def _coerce_metrics(outcome: Union[MetricsRecord, Dict[str, int], None]) -> MetricsRecord:
    """Accept a MetricsRecord, a plain counter dict, or None (no counters)."""
    if isinstance(outcome, MetricsRecord):
        return outcome
    if outcome is None:
        return MetricsRecord()
    if isinstance(outcome, dict):
        return MetricsRecord(counters=dict(outcome))
    raise TypeError(f"execute() must return a MetricsRecord, got {type(outcome).__name__}")
