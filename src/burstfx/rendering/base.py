"""Abstract 2D drawing surface.

The particle manager draws through this interface instead of calling a
graphics library directly. A surface keeps a small drawing state (opacity,
fill color, glow) that shapes are filled with, and a save/restore stack so a
caller can change that state for one shape without leaking it into the next.

Coordinates are canvas-style: origin at the top-left corner, y grows downward.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from burstfx.types import RGB, Point


@dataclass
class SurfaceState:
    """Drawing state applied to every fill.

    Attributes:
        alpha: Global opacity multiplier, 0.0-1.0.
        fill_color: RGB color shapes are filled with.
        glow_color: RGB color of the glow halo, or None.
        glow_blur: Glow blur radius in pixels; 0 disables glow.
    """

    alpha: float = 1.0
    fill_color: RGB = (0, 0, 0)
    glow_color: RGB | None = None
    glow_blur: float = 0


class DrawSurface(ABC):
    """Base class for drawing surfaces."""

    def __init__(self) -> None:
        """Initialize with the default drawing state."""
        self.state = SurfaceState()
        self._saved: list[SurfaceState] = []

    def save(self) -> None:
        """Push a copy of the current drawing state."""
        self._saved.append(replace(self.state))

    def restore(self) -> None:
        """Pop the most recently saved drawing state, if any."""
        if self._saved:
            self.state = self._saved.pop()

    @contextmanager
    def scoped(self) -> Iterator[DrawSurface]:
        """Save the drawing state, and restore it on exit.

        Example:
            with surface.scoped():
                surface.set_alpha(0.5)
                surface.fill_circle(10, 10, 4)
        """
        self.save()
        try:
            yield self
        finally:
            self.restore()

    def set_alpha(self, alpha: float) -> None:
        """Set the global opacity multiplier."""
        self.state.alpha = alpha

    def set_fill_color(self, color: RGB) -> None:
        """Set the color shapes are filled with."""
        self.state.fill_color = color

    def set_glow(self, color: RGB | None, blur: float) -> None:
        """Enable a centered glow of the given blur radius, or disable it with blur 0."""
        self.state.glow_color = color if blur > 0 else None
        self.state.glow_blur = blur if blur > 0 else 0

    @property
    @abstractmethod
    def width(self) -> int:
        """Surface width in pixels."""

    @property
    @abstractmethod
    def height(self) -> int:
        """Surface height in pixels."""

    @abstractmethod
    def clear(self, color: RGB | None = None) -> None:
        """Erase the surface, optionally filling it with color."""

    @abstractmethod
    def fill_circle(self, x: float, y: float, radius: float) -> None:
        """Fill a disc with the current state."""

    @abstractmethod
    def fill_polygon(self, points: Sequence[Point]) -> None:
        """Fill a closed polygon with the current state."""
