"""countup - Stepwise number animations with timer-driven ticks."""

__version__ = "0.1.0"

from .animator import AnimatorState, StepwiseAnimator
from .errors import SinkUnavailable
from .formatters import FORMATTERS, get_formatter
from .planner import AnimationPlan, plan
from .scheduling import AsyncioScheduler, ManualScheduler
from .config import ConfigManager

__all__ = [
    "AnimatorState",
    "StepwiseAnimator",
    "SinkUnavailable",
    "FORMATTERS",
    "get_formatter",
    "AnimationPlan",
    "plan",
    "AsyncioScheduler",
    "ManualScheduler",
    "ConfigManager",
]
