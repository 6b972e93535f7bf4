"""burstfx - physically animated particle bursts for 2D surfaces, built on Arcade.

This package provides:
- Explosion, confetti and fireworks effects with per-kind physics
- A particle manager driven by update(delta_ms) / render() calls
- Shaped (circle, square, rect, ribbon, star), fading, optionally glowing particles
- A registry for custom effect kinds
- An interactive Arcade demo

Quick start:
    import arcade

    from burstfx import ArcadeSurface, ParticleManager

    window = arcade.Window(800, 600, "Bursts")
    manager = ParticleManager(ArcadeSurface(window))
    manager.add_effect("fireworks", (400, 500), {"glow_strength": 2})

    @window.event
    def on_update(delta_time):
        manager.update(delta_time * 1000)

    @window.event
    def on_draw():
        manager.draw_background()
        manager.render()

    arcade.run()

Or just run the demo:
    python -m burstfx
"""

__version__ = "0.1.0"

from burstfx.conf import settings
from burstfx.helpers import create_demo, run_demo, setup_logging
from burstfx.rendering import ArcadeSurface, DrawSurface
from burstfx.systems import (
    Effect,
    EffectKind,
    EffectRegistry,
    Particle,
    ParticleManager,
    UnknownEffectTypeError,
    rand_range,
)
from burstfx.views import DemoController, ParticleDemoView

__all__ = [
    "ArcadeSurface",
    "DemoController",
    "DrawSurface",
    "Effect",
    "EffectKind",
    "EffectRegistry",
    "Particle",
    "ParticleDemoView",
    "ParticleManager",
    "UnknownEffectTypeError",
    "__version__",
    "create_demo",
    "rand_range",
    "run_demo",
    "settings",
    "setup_logging",
]
