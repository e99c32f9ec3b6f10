"""Step planning for counting animations.

A plan turns a (current, target, steps) triple into a fixed per-tick
increment plus a clamp that stops the sequence exactly on the target.
"""

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class AnimationPlan:
    """Immutable per-tick step size and clamping rule."""

    start: int
    target: int
    direction: int
    step_size: int

    @property
    def is_noop(self) -> bool:
        return self.start == self.target

    @property
    def tick_count(self) -> int:
        """Number of ticks needed to get from start to target."""
        if self.is_noop:
            return 0
        distance = abs(self.target - self.start)
        magnitude = abs(self.step_size)
        return -(-distance // magnitude)

    def clamp(self, value: int) -> int:
        if self.direction > 0:
            return min(value, self.target)
        return max(value, self.target)

    def advance(self, value: int) -> int:
        """Apply one tick to value."""
        return self.clamp(value + self.step_size)

    def reached(self, value: int) -> bool:
        if self.direction > 0:
            return value >= self.target
        return value <= self.target

    def values(self) -> Iterator[int]:
        """Yield every value a driver publishes for this plan, in order."""
        if self.is_noop:
            return
        value = self.start
        while not self.reached(value):
            value = self.advance(value)
            yield value


def plan(current: int, target: int, steps: int) -> AnimationPlan:
    """Plan a count from current to target in roughly `steps` ticks.

    Gaps smaller than `steps` fall back to unit steps, so the count always
    moves by at least one per tick. A non-positive `steps` yields a single
    jump straight to the target.
    """
    direction = 1 if target > current else -1
    gap = target - current

    if gap == 0:
        return AnimationPlan(start=current, target=target, direction=direction, step_size=0)

    if steps <= 0:
        return AnimationPlan(start=current, target=target, direction=direction, step_size=gap)

    # Floor division: -50 // 15 == -4, truncation would give -3
    raw_step = gap // steps
    if direction > 0:
        step_size = max(raw_step, 1)
    else:
        step_size = min(raw_step, -1)

    return AnimationPlan(start=current, target=target, direction=direction, step_size=step_size)
