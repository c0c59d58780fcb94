"""
stepper.py — Step Playback
===========================
Plays back one operation's trace.  Steps are pulled from the operation
generator only when playback needs them and are kept, so moving backwards
never re-runs the operation.

    IDLE ──start()/load()──▶ PAUSED ◀──pause()── PLAYING
                               │                   ▲
                               └──────play()───────┘
    PLAYING / PAUSED ──(past the last step)──▶ FINISHED
    FINISHED ──prev_step()/rewind()──▶ PAUSED
    any ──reset()──▶ IDLE

Timing only decides *when* the next step is shown; step content is fixed
by the operation.  Drive a Stepper from a single thread.
"""

import time
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence

from algorithms.step import Action, Step, visited_values


class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# seconds between auto-advances
SPEED_PRESETS = {
    "slow":   1.2,
    "medium": 0.8,
    "fast":   0.4,
    "turbo":  0.1,
}

MIN_SPEED = 0.05


class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        steps       : Steps pulled from the operation so far.
        current_idx : Index of the step on screen, -1 before the first one.
        speed       : Seconds between auto-advances while PLAYING.
        on_step     : Optional callback(Step), fired whenever the shown step changes.
    """

    def __init__(self, on_step: Optional[Callable[[Step], None]] = None):
        self.state:       StepperState = StepperState.IDLE
        self.steps:       List[Step]   = []
        self.current_idx: int          = -1
        self.speed:       float        = SPEED_PRESETS["medium"]
        self.on_step = on_step

        self._source:    Optional[Iterator[Step]] = None
        self._last_tick: float = 0.0

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def start(self, generator: Iterator[Step]) -> None:
        """Play back `generator`; step 0 is pulled and shown right away."""
        self._source = generator
        self.steps = []
        self.current_idx = -1
        if self._pull_until(0):
            self.state = StepperState.PAUSED
            self._show(0)
        else:
            # traversal of an empty tree
            self.state = StepperState.FINISHED

    def load(self, steps: Sequence[Step]) -> None:
        """Play back a trace that was already recorded."""
        self.start(iter(list(steps)))

    def reset(self) -> None:
        self._source = None
        self.steps = []
        self.current_idx = -1
        self.state = StepperState.IDLE

    # ------------------------------------------------------------------
    # Moving through the trace
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Show the following step.  At the end, switch to FINISHED and return False."""
        if not self._pull_until(self.current_idx + 1):
            self.state = StepperState.FINISHED
            return False
        self._show(self.current_idx + 1)
        return True

    def prev_step(self) -> bool:
        if self.current_idx <= 0:
            return False
        self._show(self.current_idx - 1)
        self._unfinish()
        return True

    def goto_step(self, idx: int) -> bool:
        if idx < 0 or not self._pull_until(idx):
            return False
        self._show(idx)
        return True

    def rewind(self) -> None:
        if not self.steps:
            return
        self._show(0)
        self._unfinish()

    def jump_to_end(self) -> None:
        """Pull every remaining step, show the last one and finish."""
        while self._pull_one():
            pass
        if self.steps:
            self._show(len(self.steps) - 1)
        self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Auto-advance
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state not in (StepperState.PAUSED, StepperState.PLAYING):
            return
        self.state = StepperState.PLAYING
        self._last_tick = time.monotonic()

    def pause(self) -> None:
        if self.state is StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.is_playing:
            self.pause()
        else:
            self.play()

    def tick(self, now: Optional[float] = None) -> bool:
        """
        Advance one step if PLAYING and `speed` seconds have passed since
        the last advance.  Returns True when a step was taken.
        """
        if not self.is_playing:
            return False
        if now is None:
            now = time.monotonic()
        if now - self._last_tick < self.speed:
            return False
        self._last_tick = now
        return self.next_step()

    def set_speed(self, preset: str) -> None:
        """Unknown preset names fall back to medium."""
        self.speed = SPEED_PRESETS.get(preset, SPEED_PRESETS["medium"])

    def set_speed_value(self, seconds: float) -> None:
        self.speed = max(MIN_SPEED, seconds)

    # ------------------------------------------------------------------
    # Readers
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def current_action(self) -> Optional[Action]:
        step = self.current_step
        return step.action if step is not None else None

    @property
    def total_steps_fetched(self) -> int:
        return len(self.steps)

    @property
    def at_start(self) -> bool:
        return self.current_idx <= 0

    @property
    def is_finished(self) -> bool:
        return self.state is StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state is StepperState.PLAYING

    def visited_so_far(self) -> List[Any]:
        """Traversal output up to and including the step on screen."""
        if self.current_idx < 0:
            return []
        return visited_values(self.steps, self.current_idx)

    def progress(self) -> Dict[str, Any]:
        shown = self.current_idx + 1
        total = len(self.steps)
        return {
            "current":     shown,
            "total":       total,
            "percentage":  round(100 * shown / total) if total else 0,
            "is_playing":  self.is_playing,
            "is_finished": self.is_finished,
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _pull_one(self) -> bool:
        if self._source is None:
            return False
        step = next(self._source, None)
        if step is None:
            self._source = None
            return False
        self.steps.append(step)
        return True

    def _pull_until(self, idx: int) -> bool:
        """Make sure steps[idx] exists.  False if the trace is shorter."""
        while len(self.steps) <= idx:
            if not self._pull_one():
                return False
        return True

    def _show(self, idx: int) -> None:
        self.current_idx = idx
        if self.on_step is not None:
            self.on_step(self.steps[idx])

    def _unfinish(self) -> None:
        if self.is_finished:
            self.state = StepperState.PAUSED
