"""Drawing surfaces the particle manager renders to."""

from burstfx.rendering.arcade_surface import ArcadeSurface
from burstfx.rendering.base import DrawSurface, SurfaceState

__all__ = ["ArcadeSurface", "DrawSurface", "SurfaceState"]
