"""Default settings for burstfx.

Users can override these in their project's settings.py file.

Example:
    # In your project's settings.py:
    from burstfx.conf import global_settings

    BACKGROUND_COLOR = (10, 10, 30)
    DEFAULT_EFFECT = "fireworks"
"""

# Window settings
SCREEN_WIDTH = 1280
"""Width of the demo window in pixels."""

SCREEN_HEIGHT = 720
"""Height of the demo window in pixels."""

WINDOW_TITLE = "burstfx"
"""Title displayed in the window title bar."""

# Rendering settings
BACKGROUND_COLOR = (34, 34, 34)
"""RGB fill painted behind the particles every frame."""

GLOW_LAYERS = 4
"""Number of translucent halo discs used to approximate a glow blur."""

GLOW_ALPHA = 0.35
"""Opacity of the innermost halo disc, relative to the particle alpha."""

# Driver settings
DEBUG = False
"""Whether the driver draws its diagnostic overlay."""

LOG_LEVEL = "INFO"
"""Logging level used by setup_logging() when none is given."""

DEFAULT_EFFECT = "explosion"
"""Effect type selected when the demo starts."""

EFFECT_PROFILES = {
    "explosion": {
        "particles_per_explosion": 30,
        "particles_min_speed": 3,
        "particles_max_speed": 6,
        "particles_min_size": 1,
        "particles_max_size": 6,
        "lifetime_ms": 2000,
        "lifetime_jitter": 0.5,
        "gravity": 0.02,
        "glow_strength": 0,
    },
    "confetti": {
        "particles_per_explosion": 50,
        "particles_min_speed": 1,
        "particles_max_speed": 4,
        "particles_min_size": 2,
        "particles_max_size": 8,
        "lifetime_ms": 3000,
        "lifetime_jitter": 0.3,
        "gravity": 0.01,
        "glow_strength": 0,
    },
    "fireworks": {
        "particles_per_explosion": 20,
        "particles_min_speed": 5,
        "particles_max_speed": 10,
        "particles_min_size": 2,
        "particles_max_size": 4,
        "lifetime_ms": 2000,
        "lifetime_jitter": 0.6,
        # Negative gravity: particles rise, then burst at their peak
        "gravity": -0.05,
        "glow_strength": 0,
    },
}
"""Named option presets the driver passes to ParticleManager.add_effect().

Keys are effect types. A profile for a custom kind only takes effect once that
kind is registered; unknown keys are logged as warnings when settings load.

Example:
    EFFECT_PROFILES = {
        **global_settings.EFFECT_PROFILES,
        "fireworks": {**global_settings.EFFECT_PROFILES["fireworks"], "glow_strength": 3},
    }
"""
