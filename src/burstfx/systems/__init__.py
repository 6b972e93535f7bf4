"""Engine systems."""

from burstfx.systems.particle import (
    Effect,
    EffectKind,
    EffectRegistry,
    Particle,
    ParticleManager,
    UnknownEffectTypeError,
    rand_range,
)

__all__ = [
    "Effect",
    "EffectKind",
    "EffectRegistry",
    "Particle",
    "ParticleManager",
    "UnknownEffectTypeError",
    "rand_range",
]
