"""Particle manager: effect lifecycle, per-frame physics and drawing.

The manager is driven from outside. Each frame the driver calls update() with
the elapsed milliseconds, then draw_background() and render():

    manager = ParticleManager(ArcadeSurface(window))
    manager.add_effect("confetti", (640, 360), settings.EFFECT_PROFILES["confetti"])

    def on_update(delta_time):
        manager.update(delta_time * 1000)

    def on_draw():
        manager.draw_background()
        manager.render()

Effects and their particles are walked in reverse insertion order, in both the
update and the draw pass, so entries can be deleted by index mid-loop without
skipping the next one. An effect is dropped as soon as it has no particles.
"""

from __future__ import annotations

import logging
import math
import time
from typing import TYPE_CHECKING

from burstfx.conf import settings
from burstfx.constants import MIN_DRAW_SIZE, RIBBON_HALF_WIDTH, STAR_INNER_RADIUS, STAR_OUTER_RADIUS, STAR_SPIKES
from burstfx.systems.particle.base import Particle, ParticleBaseManager
from burstfx.systems.particle.effects import Effect, default_physics
from burstfx.systems.particle.registry import EffectRegistry

if TYPE_CHECKING:
    from collections.abc import Callable

    from burstfx.rendering.base import DrawSurface
    from burstfx.types import RGB, EffectOptions, Point

logger = logging.getLogger(__name__)


def monotonic_ms() -> float:
    """Monotonic clock reading in milliseconds."""
    return time.perf_counter() * 1000


def rotated_rect(x: float, y: float, half_width: float, half_height: float, angle: float) -> list[Point]:
    """Corners of a rectangle centered on (x, y), rotated by angle radians."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    corners = (
        (-half_width, -half_height),
        (half_width, -half_height),
        (half_width, half_height),
        (-half_width, half_height),
    )
    return [(x + cx * cos_a - cy * sin_a, y + cx * sin_a + cy * cos_a) for cx, cy in corners]


def star_points(x: float, y: float, outer: float, inner: float, spikes: int = STAR_SPIKES) -> list[Point]:
    """Vertices of a star centered on (x, y), alternating outer and inner radius.

    The first vertex points straight up (negative y).
    """
    step = math.pi / spikes
    rotation = math.pi * 1.5
    points: list[Point] = []
    for _ in range(spikes):
        points.append((x + math.cos(rotation) * outer, y + math.sin(rotation) * outer))
        rotation += step
        points.append((x + math.cos(rotation) * inner, y + math.sin(rotation) * inner))
        rotation += step
    return points


class ParticleManager(ParticleBaseManager):
    """Owns the active effects and drives their update and draw passes.

    Attributes:
        surface: Drawing surface particles are rendered to.
        background: RGB fill used by draw_background().
        effects: Active effects, in insertion order.
        debug: Flag the driver toggles to show its diagnostic overlay.
        clock: Callable returning the current time in milliseconds.
    """

    def __init__(
        self,
        surface: DrawSurface,
        *,
        background: RGB | None = None,
        debug: bool | None = None,
        clock: Callable[[], float] = monotonic_ms,
    ) -> None:
        """Initialize the manager.

        Args:
            surface: Drawing surface to render to.
            background: Background fill. Defaults to settings.BACKGROUND_COLOR.
            debug: Initial debug flag. Defaults to settings.DEBUG.
            clock: Millisecond clock used for particle ages.
        """
        self.surface = surface
        self.background: RGB = background if background is not None else settings.BACKGROUND_COLOR
        self.debug: bool = debug if debug is not None else settings.DEBUG
        self.clock = clock
        self.effects: list[Effect] = []

    @property
    def particle_count(self) -> int:
        """Number of live particles across all effects."""
        return sum(len(effect.particles) for effect in self.effects)

    def add_effect(
        self,
        effect_type: str,
        position: Point,
        options: EffectOptions | None = None,
    ) -> Effect:
        """Spawn an effect and start tracking it.

        Args:
            effect_type: Registered kind name ("explosion", "confetti", "fireworks", ...).
            position: Spawn point (x, y) in canvas coordinates.
            options: Overrides for the kind defaults.

        Returns:
            The new effect.

        Raises:
            UnknownEffectTypeError: If effect_type is not registered.
        """
        kind = EffectRegistry.get(effect_type)
        x, y = position
        effect = Effect.create(kind, (x, y), options, self.clock())
        self.effects.append(effect)
        return effect

    def update(self, delta_time: float) -> None:
        """Advance every particle by one tick and evict the expired ones.

        Args:
            delta_time: Milliseconds since the previous update.
        """
        now = self.clock()
        for i in range(len(self.effects) - 1, -1, -1):
            effect = self.effects[i]
            if effect.is_empty():
                del self.effects[i]
                continue

            particles = effect.particles
            for j in range(len(particles) - 1, -1, -1):
                particle = particles[j]
                if effect.update_particle is not None:
                    if not effect.update_particle(particle, delta_time, now):
                        del particles[j]
                        continue
                else:
                    default_physics(particle)

                if particle.is_expired(now):
                    del particles[j]

            if effect.is_empty():
                logger.debug("Effect %s finished", effect.effect_type)
                del self.effects[i]

    def render(self) -> None:
        """Draw every live particle, newest effect first."""
        now = self.clock()
        for effect in reversed(self.effects):
            glow_strength = effect.glow_strength
            for particle in reversed(effect.particles):
                with self.surface.scoped():
                    self._draw_particle(particle, now, glow_strength)

    def draw_background(self) -> None:
        """Fill the whole surface with the background color."""
        self.surface.clear(self.background)

    def clear(self) -> None:
        """Remove every effect and clear the surface."""
        count = len(self.effects)
        self.effects = []
        self.surface.clear()
        logger.info("Cleared %d effects", count)

    def _draw_particle(self, particle: Particle, now: float, glow_strength: float) -> None:
        """Draw one particle with the current surface state."""
        surface = self.surface
        size = max(particle.size, MIN_DRAW_SIZE)
        color = particle.color

        surface.set_alpha(particle.alpha(now))
        surface.set_fill_color(color)
        if glow_strength > 0:
            surface.set_glow(color, max(0, round(size * glow_strength)))
        else:
            surface.set_glow(None, 0)

        shape = particle.shape
        if shape == "square":
            surface.fill_polygon(rotated_rect(particle.x, particle.y, size, size, particle.angle))
        elif shape in ("rect", "ribbon"):
            half_width = size * RIBBON_HALF_WIDTH if shape == "ribbon" else size
            surface.fill_polygon(rotated_rect(particle.x, particle.y, half_width, size, particle.angle))
        elif shape == "star":
            surface.fill_polygon(
                star_points(particle.x, particle.y, size * STAR_OUTER_RADIUS, size * STAR_INNER_RADIUS),
            )
        else:
            surface.fill_circle(particle.x, particle.y, size)
