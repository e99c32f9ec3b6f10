"""Stepwise counting animator.

Owns the displayed counter value and at most one repeating timer. Each new
target cancels whatever is in flight, re-plans from the current value, and
arms a fresh timer that pushes formatted text straight into a sink.
"""

import logging
import math
from enum import Enum
from typing import Callable, Optional

from .errors import SinkUnavailable
from .formatters import Formatter
from .planner import AnimationPlan, plan
from .scheduling import Scheduler, TimerHandle

_log = logging.getLogger(__name__)

Sink = Callable[[str], Optional[bool]]

DEFAULT_STEPS = 15
DEFAULT_TICK_INTERVAL_MS = 17


class AnimatorState(Enum):
    IDLE = "idle"
    ANIMATING = "animating"
    DISPOSED = "disposed"


class StepwiseAnimator:
    """Counts a displayed number toward each new target value.

    Args:
        initial_value: Value shown before any target change.
        sink: Receives display text. Returning False or raising
            SinkUnavailable means the display is gone.
        scheduler: Source of repeating timers (see countup.scheduling).
        steps: Approximate number of ticks per animation.
        tick_interval_ms: Delay between ticks.
        formatter: Turns the counter value into display text.
    """

    def __init__(
        self,
        initial_value: int,
        sink: Sink,
        scheduler: Scheduler,
        steps: int = DEFAULT_STEPS,
        tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS,
        formatter: Formatter = str,
    ):
        initial_value = _floor_finite(initial_value)
        self._current = initial_value
        self._target = initial_value
        self._sink = sink
        self._scheduler = scheduler
        self.steps = steps
        self.tick_interval_ms = tick_interval_ms
        self.formatter = formatter
        self._timer: Optional[TimerHandle] = None
        self._plan: Optional[AnimationPlan] = None
        self._disposed = False

    @property
    def current_value(self) -> int:
        return self._current

    @property
    def target(self) -> int:
        return self._target

    @property
    def active_plan(self) -> Optional[AnimationPlan]:
        return self._plan

    @property
    def is_animating(self) -> bool:
        return self._timer is not None

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def state(self) -> AnimatorState:
        if self._disposed:
            return AnimatorState.DISPOSED
        if self._timer is not None:
            return AnimatorState.ANIMATING
        return AnimatorState.IDLE

    # ------------------------------------------------------------------
    # Collaborator interface
    # ------------------------------------------------------------------

    def notify_target_changed(self, new_target: int, focused: bool = False) -> None:
        """Re-plan toward new_target, or snap when the field is focused."""
        if self._disposed:
            _log.debug("Ignoring target %r after dispose", new_target)
            return

        if focused:
            self.snap(new_target)
            return

        if not _is_finite(new_target) or not _is_finite(self._current):
            _log.warning("Non-finite value (current=%r, target=%r), snapping", self._current, new_target)
            self.snap(new_target)
            return

        if self.steps <= 0:
            _log.warning("steps=%r is not positive, snapping to %r", self.steps, new_target)
            self.snap(new_target)
            return

        if self.tick_interval_ms <= 0:
            _log.warning("tick_interval_ms=%r is not positive, snapping to %r", self.tick_interval_ms, new_target)
            self.snap(new_target)
            return

        target = math.floor(new_target)
        self.start(plan(self._current, target, self.steps), self.tick_interval_ms, self._sink)

    def start(self, animation_plan: AnimationPlan, tick_interval_ms: int, sink: Sink) -> None:
        """Begin animating animation_plan, replacing any running timer."""
        self._cancel_timer()
        if self._disposed:
            return

        self._sink = sink
        self._target = animation_plan.target
        self._current = _floor_finite(animation_plan.start)

        if animation_plan.is_noop:
            self._publish()
            return

        if tick_interval_ms <= 0:
            _log.warning("tick_interval_ms=%r is not positive, snapping to %r", tick_interval_ms, animation_plan.target)
            self.snap(animation_plan.target)
            return

        _log.debug(
            "Animating %d -> %d by %d every %dms",
            animation_plan.start, animation_plan.target, animation_plan.step_size, tick_interval_ms,
        )
        self._timer = self._scheduler.set_interval(tick_interval_ms / 1000, self._tick)
        self._plan = animation_plan

    def snap(self, target: int) -> None:
        """Skip animation and show target immediately."""
        self._cancel_timer()
        if self._disposed:
            return
        target = _floor_finite(target)
        self._current = target
        self._target = target
        self._publish()

    def dispose(self) -> None:
        """Release the timer. No sink call happens after this returns."""
        self._cancel_timer()
        if not self._disposed:
            _log.debug("Animator disposed at %r", self._current)
        self._disposed = True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _tick(self) -> None:
        active = self._plan
        if active is None or self._disposed:
            # Stale callback from a timer that was already replaced
            return

        self._current = active.advance(self._current)

        if not self._publish():
            return

        if self._plan is not active:
            # The sink re-targeted us; the new plan owns the timer now
            return

        if active.reached(self._current):
            _log.debug("Reached %d", self._current)
            self._cancel_timer()

    def _publish(self) -> bool:
        """Push the current value to the sink. Returns False if it failed."""
        try:
            delivered = self._sink(self.formatter(self._current))
        except SinkUnavailable:
            _log.debug("Sink unavailable at %r, stopping", self._current)
            self._cancel_timer()
            return False
        except Exception:
            _log.warning("Display update failed at %r, stopping", self._current, exc_info=True)
            self._cancel_timer()
            return False

        if delivered is False:
            _log.debug("Sink reported not available at %r, stopping", self._current)
            self._cancel_timer()
            return False
        return True

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None
        self._plan = None


def _floor_finite(value):
    if isinstance(value, int) or not _is_finite(value):
        return value
    return math.floor(value)


def _is_finite(value) -> bool:
    if isinstance(value, int):
        return True
    try:
        return math.isfinite(value)
    except (TypeError, OverflowError):
        return False
