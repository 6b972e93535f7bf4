"""Custom types and enumerations."""

from typing import Literal, TypedDict

Point = tuple[float, float]
"""A position on the drawing surface, in canvas coordinates (y grows downward)."""

RGB = tuple[int, int, int]
"""Color channels, each 0-255."""

Shape = Literal["circle", "square", "rect", "ribbon", "star"]
"""Shape tag drawn for a particle. Unknown tags are drawn as circles."""


class EffectOptions(TypedDict, total=False):
    """Options accepted by ParticleManager.add_effect().

    Every key is optional; missing keys (or keys set to None) fall back to the
    defaults of the requested effect kind.
    """

    particles_per_explosion: int
    particles_min_speed: float
    particles_max_speed: float
    particles_min_size: float
    particles_max_size: float
    gravity: float
    lifetime_ms: float | None
    lifetime_min_ms: float
    lifetime_max_ms: float
    lifetime_jitter: float
    jitter: float
    friction_min: float
    friction_max: float
    glow_strength: float
    r_min: int
    r_max: int
    g_min: int
    g_max: int
    b_min: int
    b_max: int
