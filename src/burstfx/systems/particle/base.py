"""Particle state and the abstract particle manager."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from burstfx.constants import MIN_TTL_MS, PEAK_MAX_RISE, PEAK_MIN_RISE, TAU

if TYPE_CHECKING:
    from collections.abc import Mapping

    from burstfx.systems.particle.effects import Effect
    from burstfx.types import EffectOptions, Point, Shape

# Options every effect kind starts from before applying its own defaults
PARTICLE_DEFAULTS: dict[str, Any] = {
    "particles_per_explosion": 30,
    "particles_min_speed": 3,
    "particles_max_speed": 6,
    "particles_min_size": 1,
    "particles_max_size": 6,
    "jitter": 0,
    "lifetime_ms": None,
    "lifetime_min_ms": 600,
    "lifetime_max_ms": 1400,
    "lifetime_jitter": 0.5,
    "friction_min": 0.96,
    "friction_max": 0.995,
    "gravity": 0.02,
    "r_min": 113,
    "r_max": 222,
    "g_min": 0,
    "g_max": 100,
    "b_min": 105,
    "b_max": 255,
    "glow_strength": 0,
}


def rand_range(low: float, high: float, integer: bool = False) -> float | int:  # noqa: FBT001, FBT002
    """Return a uniform random number between low and high.

    The float mode draws from [low, high). The integer mode draws from
    [floor(low), floor(high)], upper bound included.
    """
    if integer:
        return random.randint(math.floor(low), math.floor(high))
    return random.random() * (high - low) + low


@dataclass
class Particle:
    """Individual particle state.

    Represents a single particle with position, motion, and visual properties.
    Positions use canvas coordinates: the origin is the top-left corner and y
    grows downward, so a negative gravity makes a particle rise.

    Velocities, gravity and friction are applied once per update tick by the
    owning effect's update rule. Lifetime is measured in milliseconds against
    the manager clock; opacity fades linearly from 1 at creation to 0 at ttl.

    Attributes:
        x: Current X position.
        y: Current Y position.
        xv: Horizontal velocity in pixels per tick.
        yv: Vertical velocity in pixels per tick.
        size: Particle radius (or half-extent) in pixels.
        r: Red channel, 0-255.
        g: Green channel, 0-255.
        b: Blue channel, 0-255.
        friction: Multiplicative damping applied to both velocity components per tick.
        gravity: Added to the vertical velocity every tick.
        created: Clock reading (ms) when the particle was spawned.
        ttl: Time to live in milliseconds, never below 16.
        shape: Shape tag used when drawing.
        angle: Rotation in radians for rotated shapes.
        angular_velocity: Radians added to angle every tick.
        sway: Horizontal sway amplitude multiplier (confetti).
        sway_freq: Sway frequency in Hz (confetti).
        sway_phase: Sway phase offset in radians (confetti).
        peak_y: Height at which a rising particle bursts, set when gravity < 0.
        exploded: Whether a rising particle has already burst.
        life_jitter: Multiplier that was applied to the base lifetime.
    """

    x: float
    y: float
    xv: float
    yv: float
    size: float
    r: int
    g: int
    b: int
    friction: float
    gravity: float
    created: float
    ttl: float
    shape: Shape = "circle"
    angle: float = 0.0
    angular_velocity: float = 0.0
    sway: float = 1.0
    sway_freq: float = 1.0
    sway_phase: float = 0.0
    peak_y: float | None = None
    exploded: bool = False
    life_jitter: float = 1.0

    @classmethod
    def spawn(
        cls,
        position: Point,
        speed_range: tuple[float, float],
        size_range: tuple[float, float],
        options: Mapping[str, Any],
        now: float,
    ) -> Particle:
        """Create a particle with randomized motion and appearance.

        Args:
            position: Spawn point (x, y).
            speed_range: (min, max) launch speed. A further 0.5x-1.5x jitter is applied.
            size_range: (min, max) size, drawn from [min, max).
            options: Resolved effect options (see PARTICLE_DEFAULTS for the keys read here).
            now: Current clock reading in milliseconds.

        Returns:
            The new particle.
        """
        x, y = position
        min_speed, max_speed = speed_range
        min_size, max_size = size_range

        angle = random.random() * TAU
        speed = rand_range(min_speed, max_speed) * (0.5 + random.random())

        # Same offset on both axes
        pos_jitter = (options.get("jitter") or 0) * (random.random() - 0.5)
        x += pos_jitter
        y += pos_jitter

        gravity = options["gravity"]

        lifetime_ms = options.get("lifetime_ms")
        if lifetime_ms is not None:
            base_lifetime = float(lifetime_ms)
        else:
            base_lifetime = rand_range(options["lifetime_min_ms"], options["lifetime_max_ms"])

        jitter = options.get("lifetime_jitter")
        j = max(0.0, min(1.0, 0.5 if jitter is None else float(jitter)))
        life_jitter = random.random() * j + (1 - j)

        particle = cls(
            x=x,
            y=y,
            xv=math.cos(angle) * speed,
            yv=math.sin(angle) * speed,
            size=rand_range(min_size, max_size),
            r=math.floor(rand_range(options["r_min"], options["r_max"])),
            g=math.floor(rand_range(options["g_min"], options["g_max"])),
            b=math.floor(rand_range(options["b_min"], options["b_max"])),
            friction=rand_range(options["friction_min"], options["friction_max"]),
            gravity=gravity,
            created=now,
            ttl=max(MIN_TTL_MS, base_lifetime * life_jitter),
            life_jitter=life_jitter,
        )

        if gravity < 0:
            particle.peak_y = y - rand_range(PEAK_MIN_RISE, PEAK_MAX_RISE)
            particle.exploded = False

        return particle

    def age(self, now: float) -> float:
        """Milliseconds elapsed since the particle was created."""
        return now - self.created

    def alpha(self, now: float) -> float:
        """Opacity at the given time, 1 when fresh and 0 once age reaches ttl."""
        return max(0.0, min(1.0, 1 - self.age(now) / self.ttl))

    def is_expired(self, now: float) -> bool:
        """Whether the particle has lived for its full ttl."""
        return self.age(now) >= self.ttl

    @property
    def color(self) -> tuple[int, int, int]:
        """RGB color tuple."""
        return (self.r, self.g, self.b)


class ParticleBaseManager(ABC):
    """Manages particle effects and their per-frame lifecycle."""

    @abstractmethod
    def add_effect(
        self,
        effect_type: str,
        position: Point,
        options: EffectOptions | None = None,
    ) -> Effect:
        """Spawn a new effect of the given type at position."""
        ...

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance all effects by delta_time milliseconds."""
        ...

    @abstractmethod
    def render(self) -> None:
        """Draw all live particles to the surface."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Drop every effect and clear the surface."""
        ...
