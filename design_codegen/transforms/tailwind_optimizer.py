"""
TailwindOptimizerTransform - Canonicalize arbitrary Tailwind values.

    gap-[8px] -> gap-2
    w-[96px] -> w-24
    rounded-[4px] -> rounded

Priority 40: runs after CSS variable extraction (30), last of the built-ins.
"""

from typing import Callable, Optional

from ..contracts.context import ExecutionContext
from ..contracts.metrics import MetricsRecord
from ..markup.nodes import CLASS_ATTRIBUTE, Literal, MarkupNode
from ..tailwind_rules import optimize_tailwind_classes


class TailwindOptimizerTransform:
    """
    Rewrite literal class lists through the canonicalization function.

    Counts once per element whose class string changed. Dynamic class
    values (expressions) are never rewritten.
    """

    name = "tailwind-optimizer"
    priority = 40

    def __init__(self, optimizer: Optional[Callable[[str], str]] = None):
        """
        Args:
            optimizer: Class-string canonicalizer; defaults to
                       optimize_tailwind_classes
        """
        self._optimize = optimizer or optimize_tailwind_classes

    async def execute(self, tree: MarkupNode, context: ExecutionContext) -> MetricsRecord:
        record = MetricsRecord.of("classesOptimized")

        for node in tree.walk():
            original = node.class_literal()
            if original is None:
                continue

            optimized = self._optimize(original)
            if optimized != original:
                node.set_attribute(CLASS_ATTRIBUTE, Literal(optimized))
                record.increment("classesOptimized")

        context.logger.info(
            f"   {self.name}: Optimized {record['classesOptimized']} classes"
        )
        return record

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(priority={self.priority})"
