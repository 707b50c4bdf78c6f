"""
Gradient Renderer - fills a surface with the animated diagonal gradient
"""
import math
from typing import Tuple

import numpy as np
from PIL import Image

from colors import Color, color_pair
from config import GRADIENT_CONFIG


# ============================================================================
# GRADIENT MATH
# ============================================================================

def gradient_weights(width: int, height: int) -> np.ndarray:
    """
    Position of every pixel center along the diagonal from the top-left
    corner (0) to the bottom-right corner (1). Shape is (height, width).
    """
    width, height = max(1, width), max(1, height)

    xs = np.arange(width, dtype=np.float64) + 0.5
    ys = np.arange(height, dtype=np.float64) + 0.5

    # Projection onto the (width, height) direction vector
    weights = (xs[np.newaxis, :] * width + ys[:, np.newaxis] * height)
    weights /= float(width * width + height * height)

    return np.clip(weights, 0.0, 1.0)


# ============================================================================
# IMAGE RENDERING
# ============================================================================

def render_gradient(size: Tuple[int, int], start_color: Color, end_color: Color,
                    scale: int = 1) -> Image.Image:
    """
    Render a linear gradient image running from the top-left corner to the
    bottom-right corner.

    With scale > 1 the gradient is computed at reduced resolution and
    resized up, which looks the same for a linear fill.
    """
    width, height = max(1, int(size[0])), max(1, int(size[1]))
    scale = max(1, int(scale))

    small_w = max(1, math.ceil(width / scale))
    small_h = max(1, math.ceil(height / scale))

    weights = gradient_weights(small_w, small_h)[..., np.newaxis]
    start = np.array(start_color.to_rgb(), dtype=np.float64)
    end = np.array(end_color.to_rgb(), dtype=np.float64)

    pixels = start + (end - start) * weights
    image = Image.fromarray(np.round(pixels).astype(np.uint8), "RGB")

    if image.size != (width, height):
        image = image.resize((width, height), Image.Resampling.BILINEAR)

    return image


def render_frame(size: Tuple[int, int], phase: float,
                 scale: int = GRADIENT_CONFIG["render_scale"]) -> Image.Image:
    """Background image for the given animation phase."""
    start_color, end_color = color_pair(phase)
    return render_gradient(size, start_color, end_color, scale=scale)
