"""
Color math - HSL conversion and the animated dark palette
"""
import math
from typing import NamedTuple, Tuple

from config import PALETTE


class Color(NamedTuple):
    """RGBA color with float channels in [0, 1]"""
    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def to_rgb(self) -> Tuple[int, int, int]:
        """8-bit (r, g, b) for Pillow"""
        return (
            int(round(self.red * 255)),
            int(round(self.green * 255)),
            int(round(self.blue * 255)),
        )


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def hsl_to_color(h: float, s: float, l: float) -> Color:
    """
    Convert hue/saturation/lightness to an opaque Color.

    Args:
        h: Hue in degrees, [0, 360)
        s: Saturation, [0, 1]
        l: Lightness, [0, 1]
    """
    c = (1.0 - abs(2 * l - 1.0)) * s
    x = c * (1.0 - abs((h / 60.0) % 2 - 1.0))
    m = l - c / 2.0

    if h < 60:
        r1, g1, b1 = c, x, 0.0
    elif h < 120:
        r1, g1, b1 = x, c, 0.0
    elif h < 180:
        r1, g1, b1 = 0.0, c, x
    elif h < 240:
        r1, g1, b1 = 0.0, x, c
    elif h < 300:
        r1, g1, b1 = x, 0.0, c
    else:
        r1, g1, b1 = c, 0.0, x

    return Color(_clamp(r1 + m), _clamp(g1 + m), _clamp(b1 + m), 1.0)


def palette_hsl(t: float, shift: float) -> Tuple[float, float, float]:
    """Hue, saturation and lightness of the palette at phase t."""
    wave = math.sin(2 * math.pi * (t + shift))

    hue = (PALETTE["hue_center"] + PALETTE["hue_amplitude"] * wave) % 360
    saturation = PALETTE["saturation_base"] + PALETTE["saturation_amplitude"] * wave
    lightness = PALETTE["lightness_base"] + PALETTE["lightness_amplitude"] * wave

    return hue, saturation, lightness


def animated_dark_color(t: float, shift: float = 0.0) -> Color:
    """Slowly oscillating color, staying around dark blues and violets."""
    return hsl_to_color(*palette_hsl(t, shift))


def color_pair(t: float) -> Tuple[Color, Color]:
    """Start and end colors of the background gradient at phase t."""
    return (
        animated_dark_color(t, shift=0.0),
        animated_dark_color(t, shift=PALETTE["second_shift"]),
    )
