"""
Configuration settings for Gradient Clock
"""

# Window settings
WINDOW_CONFIG = {
    "title": "Gradient Clock",
    "geometry": "800x500",
    "min_width": 320,
    "min_height": 200,
    "appearance_mode": "dark",
}

# Clock display
CLOCK_CONFIG = {
    "time_format": "%H:%M:%S",
    "tick_interval_ms": 1000,
    "font": ("Courier", 48),
    "text_color": "#ffffff",
}

# Gradient animation
GRADIENT_CONFIG = {
    "half_period": 30.0,  # seconds from phase 0 to phase 1
    "frame_interval_ms": 50,
    "render_scale": 4,  # gradient is computed at 1/scale resolution
}

# Dark blue / violet palette
PALETTE = {
    "hue_center": 230.0,
    "hue_amplitude": 30.0,
    "saturation_base": 0.5,
    "saturation_amplitude": 0.2,
    "lightness_base": 0.2,
    "lightness_amplitude": 0.05,
    "second_shift": 1.0,
}

LOG_LEVEL = "INFO"
