"""Interactive demo driver.

Click anywhere to spawn the selected effect at the pointer. The view is a thin
Arcade adapter; the input handling lives in DemoController so it can run
without a window.

Controls:
    1 / 2 / 3   select explosion / confetti / fireworks
    SPACE       trigger the selected effect at the window center
    G           cycle glow strength 0 -> 1 -> 2 -> 3
    D           toggle the debug overlay
    C           clear every effect
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any, ClassVar

import arcade

from burstfx.conf import settings
from burstfx.constants import CONFETTI, EXPLOSION, FIREWORKS
from burstfx.rendering import ArcadeSurface
from burstfx.systems.particle import EffectRegistry, ParticleManager

if TYPE_CHECKING:
    from collections.abc import Mapping

    from burstfx.systems.particle import Effect

logger = logging.getLogger(__name__)


class DemoController:
    """Maps user input to particle manager calls.

    Attributes:
        manager: The particle manager being driven.
        profiles: Named option presets, keyed by effect type.
        effect_type: Effect spawned by trigger().
        glow_strength: Glow multiplier passed with every spawned effect.
    """

    GLOW_STEPS: ClassVar[tuple[float, ...]] = (0, 1, 2, 3)

    def __init__(
        self,
        manager: ParticleManager,
        *,
        profiles: Mapping[str, Mapping[str, Any]] | None = None,
        effect_type: str | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            manager: Particle manager to drive.
            profiles: Option presets per effect type. Defaults to settings.EFFECT_PROFILES.
            effect_type: Initially selected type. Defaults to settings.DEFAULT_EFFECT.
        """
        self.manager = manager
        self.profiles = profiles if profiles is not None else settings.EFFECT_PROFILES
        self.effect_type = effect_type or settings.DEFAULT_EFFECT
        self.glow_strength: float = 0

    def select(self, effect_type: str) -> None:
        """Select the effect type spawned by trigger().

        Raises:
            UnknownEffectTypeError: If effect_type is not registered.
        """
        EffectRegistry.get(effect_type)
        self.effect_type = effect_type
        logger.info("Selected effect: %s", effect_type)

    def cycle_glow(self) -> float:
        """Step to the next glow strength and return it."""
        try:
            index = self.GLOW_STEPS.index(self.glow_strength)
        except ValueError:
            index = -1
        self.glow_strength = self.GLOW_STEPS[(index + 1) % len(self.GLOW_STEPS)]
        logger.info("Glow strength: %s", self.glow_strength)
        return self.glow_strength

    def toggle_debug(self) -> bool:
        """Flip the manager's debug flag and return the new value."""
        self.manager.debug = not self.manager.debug
        logger.info("Debug overlay: %s", self.manager.debug)
        return self.manager.debug

    def options(self) -> dict[str, Any]:
        """Options for the selected effect: its profile plus the current glow."""
        return {**self.profiles.get(self.effect_type, {}), "glow_strength": self.glow_strength}

    def trigger(self, x: float, y: float) -> Effect | None:
        """Spawn the selected effect at a canvas point, clamped to the surface.

        Returns:
            The new effect, or None if the coordinates were not numbers.
        """
        if math.isnan(x) or math.isnan(y):
            logger.warning("Ignoring trigger at invalid coordinates (%s, %s)", x, y)
            return None

        surface = self.manager.surface
        cx = max(0.0, min(float(surface.width), x))
        cy = max(0.0, min(float(surface.height), y))
        logger.debug("Trigger %s at (%.1f, %.1f)", self.effect_type, cx, cy)
        return self.manager.add_effect(self.effect_type, (cx, cy), self.options())

    def trigger_center(self) -> Effect | None:
        """Spawn the selected effect at the center of the surface."""
        surface = self.manager.surface
        return self.trigger(surface.width / 2, surface.height / 2)

    def clear(self) -> None:
        """Drop every effect."""
        self.manager.clear()

    def overlay_lines(self) -> list[str]:
        """Diagnostic lines shown when debug is on."""
        return [
            f"effect: {self.effect_type}  glow: {self.glow_strength}",
            f"effects: {len(self.manager.effects)}  particles: {self.manager.particle_count}",
        ]


class ParticleDemoView(arcade.View):
    """Arcade view that feeds frames and input into a ParticleManager."""

    EFFECT_KEYS: ClassVar[dict[int, str]] = {
        arcade.key.KEY_1: EXPLOSION,
        arcade.key.KEY_2: CONFETTI,
        arcade.key.KEY_3: FIREWORKS,
    }

    def __init__(self, window: arcade.Window | None = None, *, effect_type: str | None = None) -> None:
        """Initialize the view and its particle manager.

        Args:
            window: Window to attach to. Defaults to the current window.
            effect_type: Initially selected effect type.
        """
        super().__init__(window)
        self.manager = ParticleManager(ArcadeSurface(self.window))
        self.controller = DemoController(self.manager, effect_type=effect_type)
        self.debug_text: arcade.Text | None = None

    def on_update(self, delta_time: float) -> None:
        """Advance the simulation (arcade passes seconds, the manager wants ms)."""
        self.manager.update(delta_time * 1000)

    def on_draw(self) -> None:
        """Paint the background, the particles and, in debug mode, the overlay."""
        self.manager.draw_background()
        self.manager.render()
        if self.manager.debug:
            self._draw_debug()

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int) -> None:  # noqa: ARG002
        """Spawn the selected effect under the pointer."""
        # Arcade's origin is bottom-left, the engine's is top-left
        self.controller.trigger(x, self.window.height - y)

    def on_key_press(self, symbol: int, modifiers: int) -> bool | None:  # noqa: ARG002
        """Handle demo hotkeys."""
        if symbol in self.EFFECT_KEYS:
            self.controller.select(self.EFFECT_KEYS[symbol])
        elif symbol == arcade.key.SPACE:
            self.controller.trigger_center()
        elif symbol == arcade.key.G:
            self.controller.cycle_glow()
        elif symbol == arcade.key.D:
            self.controller.toggle_debug()
        elif symbol == arcade.key.C:
            self.controller.clear()
        else:
            return None
        return True

    def _draw_debug(self) -> None:
        """Draw the diagnostic overlay in the top-left corner."""
        text = "\n".join(self.controller.overlay_lines())
        if self.debug_text is None:
            self.debug_text = arcade.Text(
                text,
                10,
                self.window.height - 10,
                arcade.color.WHITE,
                font_size=12,
                anchor_y="top",
                multiline=True,
                width=400,
            )
        else:
            self.debug_text.text = text
            self.debug_text.y = self.window.height - 10
        self.debug_text.draw()
