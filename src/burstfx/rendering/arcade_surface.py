"""Drawing surface backed by an Arcade window.

Arcade has no shadow blur, so glow is drawn as a few translucent discs in the
glow color, widening out to the blur radius, underneath the shape.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import arcade

from burstfx.conf import settings
from burstfx.rendering.base import DrawSurface

if TYPE_CHECKING:
    from collections.abc import Sequence

    from burstfx.types import RGB, Point


class ArcadeSurface(DrawSurface):
    """Draws into an arcade.Window, flipping canvas y to Arcade's y-up space.

    Attributes:
        window: The window (or anything with width, height and clear()) drawn into.
        glow_layers: Number of halo discs per glowing shape.
        glow_alpha: Opacity of the innermost halo disc relative to the shape alpha.
    """

    def __init__(
        self,
        window: arcade.Window,
        *,
        glow_layers: int | None = None,
        glow_alpha: float | None = None,
    ) -> None:
        """Initialize the surface.

        Args:
            window: Window to draw into.
            glow_layers: Halo discs per glowing shape. Defaults to settings.GLOW_LAYERS.
            glow_alpha: Innermost halo opacity. Defaults to settings.GLOW_ALPHA.
        """
        super().__init__()
        self.window = window
        self.glow_layers = max(1, glow_layers if glow_layers is not None else settings.GLOW_LAYERS)
        self.glow_alpha = glow_alpha if glow_alpha is not None else settings.GLOW_ALPHA

    @property
    def width(self) -> int:
        """Window width in pixels."""
        return self.window.width

    @property
    def height(self) -> int:
        """Window height in pixels."""
        return self.window.height

    def clear(self, color: RGB | None = None) -> None:
        """Clear the window, to color if given, else to its background color."""
        self.window.clear(color=color)

    def fill_circle(self, x: float, y: float, radius: float) -> None:
        """Fill a disc, with its halo when glow is on."""
        self._draw_glow(x, y, radius)
        arcade.draw_circle_filled(x, self._flip(y), radius, self._rgba(self.state.fill_color, self.state.alpha))

    def fill_polygon(self, points: Sequence[Point]) -> None:
        """Fill a polygon, with a round halo around its bounding circle when glow is on."""
        if not points:
            return
        cx = sum(px for px, _ in points) / len(points)
        cy = sum(py for _, py in points) / len(points)
        radius = max(math.hypot(px - cx, py - cy) for px, py in points)
        self._draw_glow(cx, cy, radius)
        arcade.draw_polygon_filled(
            [(px, self._flip(py)) for px, py in points],
            self._rgba(self.state.fill_color, self.state.alpha),
        )

    def _draw_glow(self, x: float, y: float, radius: float) -> None:
        """Draw the halo discs, outermost (faintest) first."""
        blur = self.state.glow_blur
        if blur <= 0 or self.state.glow_color is None:
            return
        for layer in range(self.glow_layers, 0, -1):
            halo_radius = radius + blur * layer / self.glow_layers
            strength = self.glow_alpha * (self.glow_layers - layer + 1) / self.glow_layers
            arcade.draw_circle_filled(
                x,
                self._flip(y),
                halo_radius,
                self._rgba(self.state.glow_color, self.state.alpha * strength),
            )

    def _flip(self, y: float) -> float:
        return self.height - y

    @staticmethod
    def _rgba(color: RGB, alpha: float) -> tuple[int, int, int, int]:
        r, g, b = color
        return (r, g, b, max(0, min(255, round(alpha * 255))))
