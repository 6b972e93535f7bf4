"""Effect kinds and the Effect container.

An effect kind is a strategy record: option defaults, an optional hook that
decorates each particle right after it spawns, and the per-particle update
rule. The three built-in kinds are registered on import.

Update rules take (particle, delta_time, now) with times in milliseconds and
return True to keep the particle. Returning False removes it immediately,
before any age check.
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from burstfx.constants import (
    BURST_MAX_SPEED,
    BURST_MIN_SPEED,
    CONFETTI,
    CONFETTI_SHAPES,
    EXPLOSION,
    FIREWORKS,
    FRAME_MS,
    SWAY_BASE_AMPLITUDE,
    TAU,
)
from burstfx.systems.particle.base import PARTICLE_DEFAULTS, Particle, rand_range
from burstfx.systems.particle.registry import EffectRegistry

if TYPE_CHECKING:
    from burstfx.types import EffectOptions, Point

logger = logging.getLogger(__name__)

UpdateRule = Callable[[Particle, float, float], bool]
SpawnHook = Callable[[Particle], None]


def apply_motion(particle: Particle) -> None:
    """Apply gravity, then friction, then integrate position by velocity."""
    particle.yv += particle.gravity
    particle.xv *= particle.friction
    particle.yv *= particle.friction
    particle.x += particle.xv
    particle.y += particle.yv


def default_physics(particle: Particle) -> None:
    """Physics for effects that bring no update rule of their own.

    Rising particles (negative gravity) get a small random kick once they pass
    their peak height, then fall under the same rules as everything else.
    """
    particle.yv += particle.gravity
    if particle.gravity < 0 and not particle.exploded and particle.peak_y is not None and particle.y < particle.peak_y:
        particle.exploded = True
        particle.xv = (random.random() - 0.5) * 4
        particle.yv = random.random() * 2 + 1

    particle.xv *= particle.friction
    particle.yv *= particle.friction
    particle.x += particle.xv
    particle.y += particle.yv


def update_explosion(particle: Particle, delta_time: float, now: float) -> bool:  # noqa: ARG001
    """Plain ballistic motion with drag."""
    apply_motion(particle)
    return True


def decorate_confetti(particle: Particle) -> None:
    """Give a confetti piece its shape, spin and sway parameters."""
    particle.shape = random.choice(CONFETTI_SHAPES)
    particle.angle = random.random() * TAU
    particle.angular_velocity = (random.random() - 0.5) * 0.2
    # Independent amplitude, frequency and phase so pieces don't move in lockstep
    particle.sway = 0.5 + random.random() * 1.5
    particle.sway_freq = 0.6 + random.random() * 1.6
    particle.sway_phase = random.random() * TAU


def update_confetti(particle: Particle, delta_time: float, now: float) -> bool:
    """Flutter sideways and spin, then move like an explosion particle."""
    seconds = now * 0.001
    frame_scale = max(0.5, min(2.0, delta_time / FRAME_MS))
    particle.xv += (
        math.sin(seconds * particle.sway_freq + particle.sway_phase) * SWAY_BASE_AMPLITUDE * particle.sway * frame_scale
    )
    particle.angle += particle.angular_velocity
    apply_motion(particle)
    return True


def update_fireworks(particle: Particle, delta_time: float, now: float) -> bool:  # noqa: ARG001
    """Rise until the peak height, burst outward once, then fall with drag."""
    particle.yv += particle.gravity
    if particle.gravity < 0 and not particle.exploded and particle.peak_y is not None and particle.y < particle.peak_y:
        particle.exploded = True
        angle = random.random() * TAU
        speed = rand_range(BURST_MIN_SPEED, BURST_MAX_SPEED)
        particle.xv = math.cos(angle) * speed
        particle.yv = math.sin(angle) * speed

    particle.xv *= particle.friction
    particle.yv *= particle.friction
    particle.x += particle.xv
    particle.y += particle.yv
    return True


@dataclass(frozen=True)
class EffectKind:
    """A named effect behavior.

    Attributes:
        name: Effect type tag used by add_effect().
        defaults: Option defaults, applied over PARTICLE_DEFAULTS.
        update_particle: Per-particle update rule, or None for default_physics.
        on_spawn: Optional hook run on every particle right after it spawns.
    """

    name: str
    defaults: Mapping[str, Any] = field(default_factory=dict)
    update_particle: UpdateRule | None = None
    on_spawn: SpawnHook | None = None

    def resolve_options(self, options: EffectOptions | Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Overlay caller options onto the kind defaults. None values count as unset."""
        resolved = {**PARTICLE_DEFAULTS, **self.defaults}
        if options:
            resolved.update({key: value for key, value in options.items() if value is not None})
        return resolved


@dataclass
class Effect:
    """A burst of particles sharing one spawn event, option set and update rule.

    Attributes:
        effect_type: Name of the kind that created this effect.
        options: Resolved options (kind defaults plus caller overrides).
        particles: Live particles in spawn order.
        update_particle: Per-particle update rule, or None for default_physics.
    """

    effect_type: str
    options: dict[str, Any]
    particles: list[Particle] = field(default_factory=list)
    update_particle: UpdateRule | None = None

    @classmethod
    def create(
        cls,
        kind: EffectKind,
        position: Point,
        options: EffectOptions | Mapping[str, Any] | None,
        now: float,
    ) -> Effect:
        """Build an effect and eagerly spawn all of its particles."""
        resolved = kind.resolve_options(options)
        effect = cls(effect_type=kind.name, options=resolved, update_particle=kind.update_particle)

        speed_range = (resolved["particles_min_speed"], resolved["particles_max_speed"])
        size_range = (resolved["particles_min_size"], resolved["particles_max_size"])
        for _ in range(int(resolved["particles_per_explosion"])):
            particle = Particle.spawn(position, speed_range, size_range, resolved, now)
            if kind.on_spawn is not None:
                kind.on_spawn(particle)
            effect.particles.append(particle)

        logger.debug("Created %s effect at %s with %d particles", kind.name, position, len(effect.particles))
        return effect

    @property
    def glow_strength(self) -> float:
        """Glow multiplier for this effect, 0 when glow is off."""
        return float(self.options.get("glow_strength") or 0)

    def is_empty(self) -> bool:
        """Whether every particle has been removed."""
        return not self.particles


EXPLOSION_KIND = EffectRegistry.register(
    EffectKind(
        name=EXPLOSION,
        defaults={
            "particles_per_explosion": 30,
            "particles_min_speed": 3,
            "particles_max_speed": 6,
            "particles_min_size": 1,
            "particles_max_size": 6,
            "jitter": 1,
            "friction_min": 0.96,
            "friction_max": 0.995,
            "gravity": 0.02,
            "lifetime_min_ms": 600,
            "lifetime_max_ms": 1400,
            "r_min": 113,
            "r_max": 222,
            "g_min": 0,
            "g_max": 100,
            "b_min": 105,
            "b_max": 255,
        },
        update_particle=update_explosion,
    )
)

CONFETTI_KIND = EffectRegistry.register(
    EffectKind(
        name=CONFETTI,
        defaults={
            "particles_per_explosion": 50,
            "particles_min_speed": 1,
            "particles_max_speed": 4,
            "particles_min_size": 2,
            "particles_max_size": 8,
            "jitter": 1,
            "friction_min": 0.98,
            "friction_max": 0.999,
            "gravity": 0.01,
            "lifetime_min_ms": 2000,
            "lifetime_max_ms": 4000,
            "r_min": 200,
            "r_max": 255,
            "g_min": 100,
            "g_max": 255,
            "b_min": 50,
            "b_max": 200,
        },
        update_particle=update_confetti,
        on_spawn=decorate_confetti,
    )
)

FIREWORKS_KIND = EffectRegistry.register(
    EffectKind(
        name=FIREWORKS,
        defaults={
            "particles_per_explosion": 20,
            "particles_min_speed": 5,
            "particles_max_speed": 10,
            "particles_min_size": 2,
            "particles_max_size": 4,
            "jitter": 0.5,
            "friction_min": 0.99,
            "friction_max": 0.999,
            "gravity": -0.05,
            "lifetime_min_ms": 1000,
            "lifetime_max_ms": 2000,
            "r_min": 255,
            "r_max": 255,
            "g_min": 200,
            "g_max": 255,
            "b_min": 0,
            "b_max": 100,
        },
        update_particle=update_fireworks,
    )
)
