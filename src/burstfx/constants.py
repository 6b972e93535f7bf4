"""Engine constants.

Tunables that projects are expected to change live in burstfx.conf.global_settings;
the values here are part of the particle model itself.
"""

import math

TAU = math.pi * 2

# Effect type tags understood by the built-in registry
EXPLOSION = "explosion"
CONFETTI = "confetti"
FIREWORKS = "fireworks"

# Lifetime floor in milliseconds (roughly one frame at 60 FPS)
MIN_TTL_MS = 16.0

# Smallest radius a particle is drawn with
MIN_DRAW_SIZE = 0.5

# Reference frame duration used to scale per-frame forces
FRAME_MS = 16.0

# Confetti
CONFETTI_SHAPES = ("square", "circle", "ribbon", "star")
SWAY_BASE_AMPLITUDE = 0.02

# Fireworks: how far above the spawn point a rising particle bursts
PEAK_MIN_RISE = 50.0
PEAK_MAX_RISE = 100.0

# Fireworks: burst speed range once the peak is reached
BURST_MIN_SPEED = 2.0
BURST_MAX_SPEED = 6.0

# Star geometry, relative to particle size
STAR_SPIKES = 5
STAR_OUTER_RADIUS = 1.6
STAR_INNER_RADIUS = 0.6

# Ribbon half-width, relative to particle size
RIBBON_HALF_WIDTH = 1.5
