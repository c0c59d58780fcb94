"""
recorder.py — Operation Recorder & Analytics
=============================================
Records a complete operation run (all Steps), then computes the
analytics metrics the UI shows in the Analytics panel.

Usage:
    rec = Recorder()
    rec.start(op_key="insert", tree=t, value=42)
    rec.run_to_completion()          # the insert has now happened
    metrics = rec.get_metrics()      # counts shown in the Analytics panel
    rec.export()                     # serialisable snapshot of the run
"""

import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from algorithms import OpInfo, get_operation
from algorithms.step import Action, Step
from bst.tree import BinarySearchTree
from engine.stepper import Stepper
from log import get_logger

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# RunMetrics — one card in the Analytics panel
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    op_key:         str   = ""
    op_label:       str   = ""
    value:          Any   = None
    nodes_visited:  int   = 0          # distinct nodes with a VISITED step
    comparisons:    int   = 0
    moves:          int   = 0          # MOVED_LEFT + MOVED_RIGHT
    total_steps:    int   = 0
    outcome:        str   = ""         # inserted / duplicate / found / not_found / traversed / empty
    tree_size:      int   = 0          # after the run
    tree_height:    int   = -1
    wall_time_ms:   float = 0.0


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Full list of Steps from the run.
        metrics : Computed RunMetrics (available after run_to_completion).
        stepper : The underlying Stepper.
    """

    def __init__(self):
        self.steps:   List[Step]           = []
        self.metrics: Optional[RunMetrics] = None
        self.stepper: Optional[Stepper]    = None

        self._op_info: Optional[OpInfo]           = None
        self._tree:    Optional[BinarySearchTree] = None
        self._value:   Any                        = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, op_key: str, tree: BinarySearchTree, value: Any = None) -> None:
        """Resolve `op_key` and attach its generator to a fresh Stepper."""
        info = get_operation(op_key)
        if info is None:
            raise ValueError(f"Unknown operation: {op_key}")
        if info.takes_value and value is None:
            raise ValueError(f"Operation '{op_key}' needs a value")

        self._op_info = info
        self._tree    = tree
        self._value   = value if info.takes_value else None
        self.steps    = []
        self.metrics  = None

        gen = info.fn(tree, value) if info.takes_value else info.fn(tree)

        self.stepper = Stepper()
        self.stepper.start(gen)

    def run_to_completion(self) -> RunMetrics:
        """Finish the operation, keep its full trace and count what happened."""
        if self.stepper is None:
            raise RuntimeError("start() must be called before run_to_completion()")

        started = time.monotonic()
        self.stepper.jump_to_end()
        self.steps = list(self.stepper.steps)
        wall_ms = (time.monotonic() - started) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        logger.debug(
            "%s(%s): %s in %d steps",
            self.metrics.op_key, self.metrics.value, self.metrics.outcome, self.metrics.total_steps,
        )
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (JSON-safe)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "op_key":  self._op_info.key if self._op_info else "",
            "value":   self._value,
            "tree":    self._tree.to_dict() if self._tree else {},
            "metrics": asdict(self.metrics) if self.metrics else {},
            "steps":   [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._op_info
        tree = self._tree

        visited = {s.node for s in self.steps if s.action is Action.VISITED}
        comparisons = sum(1 for s in self.steps if s.action is Action.COMPARED)
        moves = sum(
            1 for s in self.steps if s.action in (Action.MOVED_LEFT, Action.MOVED_RIGHT)
        )

        return RunMetrics(
            op_key=info.key if info else "",
            op_label=info.label if info else "",
            value=self._value,
            nodes_visited=len(visited),
            comparisons=comparisons,
            moves=moves,
            total_steps=len(self.steps),
            outcome=_outcome(info, self.steps),
            tree_size=len(tree) if tree else 0,
            tree_height=tree.height() if tree else -1,
            wall_time_ms=round(wall_ms, 2),
        )


def _outcome(info: Optional[OpInfo], steps: List[Step]) -> str:
    if not steps:
        return "empty"
    if info is not None and info.is_traversal:
        return "traversed"
    last = steps[-1].action
    if last is Action.INSERTED:
        return "inserted"
    if last is Action.FOUND:
        return "duplicate" if info is not None and info.mutates else "found"
    if last is Action.NOT_FOUND:
        return "not_found"
    return last.value
