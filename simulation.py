# simulation.py
"""
Handles the per-frame animation logic.

This module defines the tick transition that clears the drawing surface,
draws the connecting lines, then advances and draws every particle. It also
provides the Animator, which owns a field and a drawing context, and the
scheduler abstraction that fires the tick on a fixed interval.
"""
import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from colors import hex_to_rgb, interpolate_color
from constants import DARKEST_COLOR, NEIGHBOR_RADIUS, TICK_INTERVAL_MS
from geometry import distance, find_nearest
from particle import Field

# --- Data Contracts ---
#
# Drawing context (duck-typed, see visualization.PygameCanvas):
#   - size -> Tuple[int, int]
#   - clear() -> None
#   - fill_circle(x, y, radius, color: str) -> None
#   - gradient_line(x1, y1, x2, y2, color1: str, color2: str) -> None
#
# tick(context, field, neighbor_radius, darkest) -> None:
#   - Side Effects: draws one frame on `context`; mutates every particle's
#     position, and flips velocity components on boundary contact.
#   - Invariants: the boundary test uses the position from BEFORE this
#     tick's move, so a particle can overshoot the bounds by one step
#     before it turns around on the following tick.
#
# class Scheduler:
#   - repeat_every(interval_ms: int, action: Callable[[], None]) -> TimerHandle
#   - Invariants: an action never runs re-entrantly; ticks missed while an
#     action was running are skipped, not replayed.


def tick(context, field: Field, neighbor_radius: float = NEIGHBOR_RADIUS, darkest: str = DARKEST_COLOR) -> None:
    """
    Renders one frame and advances the field by one step.

    Args:
        context: Drawing context to render on.
        field (Field): The particles and their bounds. Mutated in place.
        neighbor_radius (float): Maximum distance at which two particles
            are joined by a line.
        darkest (str): Color the lines fade toward as distance grows.
    """
    context.clear()

    # Lines go first so that circles are drawn on top of them.
    for particle in field.particles:
        for neighbor in find_nearest(field.particles, particle.x, particle.y, neighbor_radius):
            brightness = 1 - distance(particle.x, particle.y, neighbor.x, neighbor.y) / neighbor_radius
            context.gradient_line(
                particle.x, particle.y, neighbor.x, neighbor.y,
                interpolate_color(particle.color, darkest, brightness),
                interpolate_color(neighbor.color, darkest, brightness),
            )

    for particle in field.particles:
        if particle.x < 0 or particle.x > field.width:
            particle.delta.x = -particle.delta.x
        if particle.y < 0 or particle.y > field.height:
            particle.delta.y = -particle.delta.y
        particle.x += particle.delta.x
        particle.y += particle.delta.y

        context.fill_circle(particle.x, particle.y, particle.radius, particle.color)


class Animator:
    """
    Owns a field and the context it is drawn on, and advances them frame by frame.
    """
    def __init__(
        self,
        field: Field,
        context,
        neighbor_radius: float = NEIGHBOR_RADIUS,
        darkest: str = DARKEST_COLOR,
        log_throttle: int = 400,
    ):
        """
        Initializes the animator and validates every color it will blend.

        Args:
            field (Field): The particles to animate.
            context: Drawing context the frames are rendered on.
            neighbor_radius (float): Maximum line length.
            darkest (str): Base color the lines fade toward.
            log_throttle (int): Log progress every this many frames.

        Raises:
            ValueError: If the base color or any particle color is not a
                valid hex color.
        """
        self.field = field
        self.context = context
        self.neighbor_radius = neighbor_radius
        self.darkest = darkest
        self.log_throttle = max(1, log_throttle)
        self.frame = 0

        # Rule 7: Enforce data contracts. A bad color would only surface
        # mid-frame, so reject it up front.
        colors = [darkest] + sorted({p.color for p in field.particles})
        invalid = [color for color in colors if hex_to_rgb(color) is None]
        if invalid:
            msg = f"Configuration error: unparseable colors {invalid}."
            logging.critical(msg)
            raise ValueError(msg)

        logging.info(
            f"Animator ready: {len(field)} particles, "
            f"neighbor radius {neighbor_radius}, base color {darkest}."
        )

    def tick(self) -> None:
        """Renders the next frame."""
        tick(self.context, self.field, self.neighbor_radius, self.darkest)
        self.frame += 1

        # Rule 2.4: Hot loops must throttle logs
        if self.frame % self.log_throttle == 0:
            logging.info(f"Rendered frame {self.frame}")
            logging.debug(f"Frame {self.frame} | Mean speed: {self.field.mean_speed():.4f}")

    def start(
        self,
        scheduler: "Scheduler",
        interval_ms: int = TICK_INTERVAL_MS,
        after_tick: Optional[Callable[[], None]] = None,
    ) -> "TimerHandle":
        """
        Schedules this animator to tick every `interval_ms`.

        Args:
            scheduler (Scheduler): The scheduler to register with.
            interval_ms (int): Period between ticks.
            after_tick (Optional[Callable[[], None]]): Called after every
                tick, e.g. to present the frame.

        Returns:
            TimerHandle: Handle that stops the animation when cancelled.
        """
        def action():
            self.tick()
            if after_tick is not None:
                after_tick()

        logging.info(f"Starting animation at {interval_ms}ms per tick.")
        return scheduler.repeat_every(interval_ms, action)


class TimerHandle:
    """A repeating timer registered with a Scheduler."""

    def __init__(self, interval_ms: int, action: Callable[[], None], next_due: int):
        if interval_ms <= 0:
            raise ValueError(f"Timer interval must be positive, got {interval_ms}.")
        self.interval_ms = interval_ms
        self.action = action
        self.next_due = next_due
        self.fired = 0
        self.active = True

    def cancel(self) -> None:
        """Stops the timer. Cancelling twice is harmless."""
        self.active = False


class Scheduler(ABC):
    """
    Fires repeating timers against a millisecond clock.

    Subclasses supply the clock by implementing `now()`.
    """
    def __init__(self):
        self._timers: List[TimerHandle] = []

    @abstractmethod
    def now(self) -> int:
        """Current time in milliseconds."""

    @property
    def active(self) -> bool:
        """True while at least one timer is still running."""
        return any(handle.active for handle in self._timers)

    def repeat_every(self, interval_ms: int, action: Callable[[], None]) -> TimerHandle:
        handle = TimerHandle(interval_ms, action, self.now() + interval_ms)
        self._timers.append(handle)
        return handle

    def cancel_all(self) -> None:
        for handle in self._timers:
            handle.cancel()
        self._timers.clear()

    def run_due(self) -> int:
        """
        Runs every timer whose due time has passed.

        Returns:
            int: Number of actions run.
        """
        now = self.now()
        ran = 0
        for handle in list(self._timers):
            if not handle.active or now < handle.next_due:
                continue
            handle.action()
            handle.fired += 1
            ran += 1
            handle.next_due += handle.interval_ms
            if handle.next_due <= now:
                # Fell behind: skip the missed ticks instead of bursting.
                handle.next_due = now + handle.interval_ms
        self._timers = [handle for handle in self._timers if handle.active]
        return ran


class ManualScheduler(Scheduler):
    """
    A scheduler driven by an explicit clock, for stepping ticks deterministically.
    """
    def __init__(self, start_ms: int = 0):
        super().__init__()
        self._now = start_ms

    def now(self) -> int:
        return self._now

    def advance(self, ms: int) -> int:
        """
        Moves the clock forward by `ms`, firing timers at each due time on the way.

        Returns:
            int: Number of actions run.
        """
        target = self._now + ms
        ran = 0
        while True:
            due = [h.next_due for h in self._timers if h.active and h.next_due <= target]
            if not due:
                break
            self._now = min(due)
            ran += self.run_due()
        self._now = target
        return ran
