"""
Transform - Contract every pipeline pass satisfies.

A transform is any object with a unique ``name``, an integer ``priority``
(lower runs first) and an async ``execute(tree, context)`` that mutates the
tree in place and returns a MetricsRecord of the mutations it applied.

Usage:
    class MyTransform:
        name = "my-transform"
        priority = 25

        async def execute(self, tree, context) -> MetricsRecord:
            record = MetricsRecord.of("nodesTouched")
            for node in tree.walk():
                ...
            return record

Priority ranges used by the built-in passes:
- 0: font detection (must precede class cleaning)
- 10: structural cleaning
- 20: post-fixes (gradients, shapes, blend modes)
- 30: CSS variable extraction
- 40: Tailwind optimizer
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .metrics import MetricsRecord

if TYPE_CHECKING:
    from ..markup.nodes import MarkupNode
    from .context import ExecutionContext


@runtime_checkable
class Transform(Protocol):
    """Capability interface for a tree-mutating pass."""

    name: str
    priority: int

    async def execute(
        self, tree: "MarkupNode", context: "ExecutionContext"
    ) -> MetricsRecord:
        ...
