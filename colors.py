# colors.py
"""
Color helpers for the particle field.

Colors travel through the program as `#rrggbb` strings (the palette and the
base color are written that way) and are unpacked into RGB triplets only
when a line color has to be blended toward the dark base color.
"""
import math
import re
from typing import NamedTuple, Optional

# --- Data Contracts ---
#
# hex_to_rgb(hex_color: str) -> Optional[RGB]:
#   - Inputs: "#abc", "abc", "#aabbcc" or "aabbcc", any letter case.
#   - Outputs: RGB triplet, or None when the string is not a 3 or 6 digit
#     hex color.
#   - Side Effects: None.
#
# rgb_to_hex(r: int, g: int, b: int) -> str:
#   - Inputs: channels expected in [0, 255]. Values outside that range are
#     NOT clamped; the result is deterministic but not a meaningful color.
#   - Outputs: lowercase "#rrggbb".
#
# interpolate_color(color: str, darkest: str, brightness: float) -> str:
#   - Inputs: two hex colors and a brightness factor in [0, 1].
#   - Outputs: hex color, equal to `color` at brightness 1 and to
#     `darkest` at brightness 0.
#   - Raises: ValueError if either color cannot be parsed.

_SHORTHAND_RE = re.compile(r'#?([0-9a-f])([0-9a-f])([0-9a-f])', re.IGNORECASE | re.ASCII)
_FULL_RE = re.compile(r'#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})', re.IGNORECASE | re.ASCII)


class RGB(NamedTuple):
    r: int
    g: int
    b: int


def hex_to_rgb(hex_color: str) -> Optional[RGB]:
    """
    Parses a hex color string into an RGB triplet.

    Shorthand input is expanded first by duplicating each digit, so
    "#03F" reads the same as "#0033FF".

    Args:
        hex_color (str): The color string, with or without a leading '#'.

    Returns:
        Optional[RGB]: The parsed channels, or None if the string is not a
        valid hex color.
    """
    shorthand = _SHORTHAND_RE.fullmatch(hex_color)
    if shorthand:
        hex_color = ''.join(digit * 2 for digit in shorthand.groups())
    match = _FULL_RE.fullmatch(hex_color)
    if not match:
        return None
    return RGB(*(int(channel, 16) for channel in match.groups()))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Packs three channels into a lowercase '#rrggbb' string."""
    # The leading 1 << 24 bit pads the result to six digits; it is sliced off.
    return '#' + format((1 << 24) + (r << 16) + (g << 8) + b, 'x')[1:]


def round_half_up(value: float) -> int:
    """Rounds halves toward positive infinity (Python's round() uses banker's rounding)."""
    return math.floor(value + 0.5)


def interpolate_color(color: str, darkest: str, brightness: float) -> str:
    """
    Blends `darkest` toward `color` by `brightness`.

    Each channel is computed as round((own - dark) * brightness) + dark.

    Args:
        color (str): The bright end of the blend, usually a particle color.
        darkest (str): The dark end of the blend.
        brightness (float): Blend factor in [0, 1].

    Returns:
        str: The blended color as '#rrggbb'.

    Raises:
        ValueError: If either color is not a valid hex color.
    """
    own = hex_to_rgb(color)
    dark = hex_to_rgb(darkest)
    if own is None or dark is None:
        raise ValueError(f"Cannot interpolate unparseable colors {color!r} and {darkest!r}.")

    return rgb_to_hex(*(
        round_half_up((own_channel - dark_channel) * brightness) + dark_channel
        for own_channel, dark_channel in zip(own, dark)
    ))
