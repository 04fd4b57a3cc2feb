# constants.py
"""
Application-level constants.

These values are static and do not change between runs. They define the
look and pacing of the animated background: how many particles there are,
how they are colored, how far apart two particles may be and still be
connected by a line, and how often the field is redrawn.
"""

# --- Field ---
PARTICLE_COUNT = 200
PARTICLE_RADIUS = 3
# Inclusive range for each velocity component.
VELOCITY_MIN = -1
VELOCITY_MAX = 1

# --- Connecting lines ---
# Two particles closer than this are joined by a gradient line.
NEIGHBOR_RADIUS = 125
# Lines fade from the particle colors toward this color as distance grows.
DARKEST_COLOR = '#1d2021'
# pygame has no gradient stroke, so each line is drawn as this many
# short segments stepping from one endpoint color to the other.
GRADIENT_SEGMENTS = 8

# --- Timing ---
TICK_INTERVAL_MS = 25

# --- Display ---
# Set to True to run in borderless fullscreen mode.
# Set to False to run in a fixed-size window (WINDOW_WIDTH x WINDOW_HEIGHT).
FULLSCREEN = True
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
BACKGROUND_COLOR = (0, 0, 0)
WINDOW_CAPTION = "Particle Field"

# Gruvbox-inspired palette. Every entry must be a valid hex color.
PARTICLE_COLORS = [
    '#fb4934',  # Red
    '#b8bb26',  # Green
    '#fabd2f',  # Yellow
    '#83a598',  # Blue
    '#d3869b',  # Purple
    '#8ec07c',  # Aqua
    '#ebdbb2',  # Foreground
]
