"""Particle effects: particle state, effect kinds, registry and manager."""

from burstfx.systems.particle.base import PARTICLE_DEFAULTS, Particle, ParticleBaseManager, rand_range
from burstfx.systems.particle.effects import (
    CONFETTI_KIND,
    EXPLOSION_KIND,
    FIREWORKS_KIND,
    Effect,
    EffectKind,
    default_physics,
)
from burstfx.systems.particle.manager import ParticleManager
from burstfx.systems.particle.registry import EffectRegistry, UnknownEffectTypeError

__all__ = [
    "CONFETTI_KIND",
    "EXPLOSION_KIND",
    "FIREWORKS_KIND",
    "PARTICLE_DEFAULTS",
    "Effect",
    "EffectKind",
    "EffectRegistry",
    "Particle",
    "ParticleBaseManager",
    "ParticleManager",
    "UnknownEffectTypeError",
    "default_physics",
    "rand_range",
]
