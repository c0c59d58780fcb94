"""
step.py — Operation Step Record
================================
Every tree operation is a generator that yields Step objects.
A Step is one entry of the operation's execution trace:

    • Which node the algorithm is looking at (or None for a global outcome)
    • What it did there (one member of the closed Action enumeration)
    • A plain-English description for the status panel
    • Which line of pseudocode is executing right now

Design decisions:
  - Step is a frozen dataclass.  The operation generator is the only
    writer; the stepper / renderer are pure readers.
  - `description` is display text only.  Playback and rendering branch
    on `action`, never on the text.
  - `node is None` means "no node to highlight" (NOT_FOUND).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence


# ---------------------------------------------------------------------------
# Action — fixed, exhaustive
# ---------------------------------------------------------------------------
class Action(Enum):
    VISITED     = "visited"
    COMPARED    = "compared"
    MOVED_LEFT  = "moved_left"
    MOVED_RIGHT = "moved_right"
    INSERTED    = "inserted"
    FOUND       = "found"
    NOT_FOUND   = "not_found"


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        node            : Value of the node this step concerns, or None.
        action          : What happened.
        description     : Human-readable text for the status panel.
        step_number     : 0-based index of this step in the operation.
        pseudocode_line : 0-based index of the pseudocode line executing now.
        is_final        : True on the terminal step of insert / search.
    """

    node:             Optional[Any]
    action:           Action
    description:      str  = ""
    step_number:      int  = 0
    pseudocode_line:  int  = 0
    is_final:         bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "node":            self.node,
            "action":          self.action.value,
            "description":     self.description,
            "step_number":     self.step_number,
            "pseudocode_line": self.pseudocode_line,
            "is_final":        self.is_final,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Step":
        return cls(
            node=data.get("node"),
            action=Action(data["action"]),
            description=data.get("description", ""),
            step_number=data.get("step_number", 0),
            pseudocode_line=data.get("pseudocode_line", 0),
            is_final=data.get("is_final", False),
        )


# ---------------------------------------------------------------------------
# Convenience builder so operations don't have to count steps by hand
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Numbers steps as an operation emits them.

    Usage inside an operation generator:
        sb = StepBuilder()
        yield sb.build(50, Action.VISITED, "Visiting node 50", line=3)
    """

    def __init__(self):
        self.reset()

    def reset(self):
        self.step_no: int = 0

    def build(
        self,
        node: Optional[Any],
        action: Action,
        description: str,
        line: int = 0,
        is_final: bool = False,
    ) -> Step:
        step = Step(
            node=node,
            action=action,
            description=description,
            step_number=self.step_no,
            pseudocode_line=line,
            is_final=is_final,
        )
        self.step_no += 1
        return step


# ---------------------------------------------------------------------------
# Helpers for readers
# ---------------------------------------------------------------------------
def visited_values(steps: Sequence[Step], upto: Optional[int] = None) -> List[Any]:
    """Values of the VISITED steps in steps[:upto + 1], in trace order."""
    window = steps if upto is None else steps[: upto + 1]
    return [s.node for s in window if s.action is Action.VISITED]


def final_action(steps: Sequence[Step]) -> Optional[Action]:
    return steps[-1].action if steps else None
