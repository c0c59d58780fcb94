"""
engine/
-------
Turns an operation trace into something a user can step through.

    stepper  – play / pause / back / forward over one trace
    recorder – runs an operation to the end and counts what it did

    from engine import Stepper, Recorder
"""

from engine.stepper  import Stepper, StepperState, SPEED_PRESETS, MIN_SPEED
from engine.recorder import Recorder, RunMetrics

__all__ = [
    "Stepper",
    "StepperState",
    "SPEED_PRESETS",
    "MIN_SPEED",
    "Recorder",
    "RunMetrics",
]
