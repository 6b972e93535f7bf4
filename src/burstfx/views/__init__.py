"""Arcade views that drive the particle engine."""

from burstfx.views.demo_view import DemoController, ParticleDemoView

__all__ = ["DemoController", "ParticleDemoView"]
