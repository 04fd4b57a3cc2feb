# visualization.py
"""
Handles drawing the particle field with Pygame.
"""
import logging
from typing import Optional, Tuple

import pygame

from constants import (
    BACKGROUND_COLOR, FULLSCREEN, GRADIENT_SEGMENTS, WINDOW_CAPTION,
    WINDOW_HEIGHT, WINDOW_WIDTH
)
from simulation import Scheduler

# --- Data Contracts ---
#
# class PygameCanvas:
#   - __init__(self, surface: pygame.Surface, background: tuple, segments: int)
#   - Implements the drawing context used by simulation.tick: size, clear,
#     fill_circle, gradient_line. Colors are '#rrggbb' strings.
#
# class Visualizer:
#   - __init__(self, fullscreen: bool, window_size: Tuple[int, int]):
#     - Side Effects: Initializes Pygame and creates the display surface.
#       Falls back to a window of `window_size` when fullscreen is off or
#       the desktop reports a zero size.
#   - quit_requested(self) -> bool: True once the window was closed or ESC pressed.
#
# class PygameScheduler(Scheduler):
#   - run(self) -> None: Blocks, firing timers from pygame's clock until every
#     timer is cancelled or the visualizer reports a quit.


class PygameCanvas:
    """
    A drawing context backed by a pygame Surface.
    """
    def __init__(self, surface: pygame.Surface, background: tuple = BACKGROUND_COLOR,
                 segments: int = GRADIENT_SEGMENTS):
        self.surface = surface
        self.background = background
        self.segments = max(1, segments)

    @property
    def size(self) -> Tuple[int, int]:
        return self.surface.get_size()

    def clear(self) -> None:
        self.surface.fill(self.background)

    def fill_circle(self, x: float, y: float, radius: float, color: str) -> None:
        pygame.draw.circle(self.surface, pygame.Color(color), (x, y), radius)

    def gradient_line(self, x1: float, y1: float, x2: float, y2: float, color1: str, color2: str) -> None:
        """
        Draws a line whose color runs from `color1` at (x1, y1) to `color2` at (x2, y2).

        Pygame only strokes solid lines, so the line is split into
        `segments` pieces; the first piece uses `color1`, the last uses
        `color2` and the ones in between step linearly.
        """
        start = pygame.Color(color1)
        end = pygame.Color(color2)
        dx = (x2 - x1) / self.segments
        dy = (y2 - y1) / self.segments
        last = self.segments - 1
        for i in range(self.segments):
            color = start.lerp(end, i / last) if last else start
            pygame.draw.line(
                self.surface,
                color,
                (x1 + dx * i, y1 + dy * i),
                (x1 + dx * (i + 1), y1 + dy * (i + 1)),
            )


class Visualizer:
    """
    Owns the Pygame display the field is drawn on.
    """
    def __init__(self, fullscreen: bool = FULLSCREEN,
                 window_size: Tuple[int, int] = (WINDOW_WIDTH, WINDOW_HEIGHT)):
        """
        Initializes Pygame and the display window.
        """
        pygame.init()

        width, height = 0, 0
        if fullscreen:
            display_info = pygame.display.Info()
            width, height = display_info.current_w, display_info.current_h

        if width > 0 and height > 0:
            self.screen = pygame.display.set_mode((width, height), pygame.FULLSCREEN)
        else:
            if fullscreen:
                logging.warning(
                    f"Desktop reported a {width}x{height} display. "
                    f"Falling back to a {window_size[0]}x{window_size[1]} window."
                )
            width, height = window_size
            self.screen = pygame.display.set_mode((width, height))

        self.width = width
        self.height = height
        pygame.display.set_caption(WINDOW_CAPTION)

        self.canvas = PygameCanvas(self.screen)
        self._quit = False

        logging.info(f"Visualizer initialized with Pygame display ({width}x{height}).")

    def quit_requested(self) -> bool:
        """
        Drains pending events.

        Returns:
            bool: True if the window was closed or ESC was pressed.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logging.info("Quit event received. Shutting down visualizer.")
                self._quit = True
            # Add ESC key press to exit fullscreen mode
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                logging.info("ESC key pressed. Shutting down visualizer.")
                self._quit = True
        return self._quit

    def present(self) -> None:
        """Shows the frame drawn since the last call."""
        pygame.display.flip()

    def close(self):
        """Shuts down Pygame."""
        pygame.quit()


class PygameScheduler(Scheduler):
    """
    Fires timers from Pygame's millisecond clock inside a blocking loop.
    """
    def __init__(self, visualizer: Optional[Visualizer] = None):
        super().__init__()
        self.visualizer = visualizer

    def now(self) -> int:
        return pygame.time.get_ticks()

    def run(self) -> None:
        """Runs until every timer is cancelled or a quit is requested."""
        while self.active:
            if self.visualizer is not None and self.visualizer.quit_requested():
                self.cancel_all()
                break

            self.run_due()

            pending = [handle.next_due for handle in self._timers if handle.active]
            if pending:
                delay = min(pending) - self.now()
                if delay > 0:
                    pygame.time.wait(delay)
