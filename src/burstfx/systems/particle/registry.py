"""Registry for effect kinds.

Effect kinds register themselves by name; ParticleManager.add_effect() looks
the requested type up here.

Example - registering a custom kind:

    from burstfx.systems.particle import EffectKind, EffectRegistry

    def drift(particle, delta_time, now):
        particle.x += particle.xv
        particle.y += particle.yv
        return True

    EffectRegistry.register(
        EffectKind(
            name="drift",
            defaults={"particles_per_explosion": 10, "lifetime_min_ms": 500, "lifetime_max_ms": 900},
            update_particle=drift,
        )
    )

    manager.add_effect("drift", (200, 150))
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from burstfx.systems.particle.effects import EffectKind

logger = logging.getLogger(__name__)


class UnknownEffectTypeError(ValueError):
    """Raised when an effect type has no registered kind."""

    def __init__(self, effect_type: str) -> None:
        """Build the error for the offending type string."""
        self.effect_type = effect_type
        super().__init__(f"Unknown effect type: {effect_type!r}")


class EffectRegistry:
    """Central registry for effect kinds."""

    _kinds: ClassVar[dict[str, EffectKind]] = {}

    @classmethod
    def register(cls, kind: EffectKind) -> EffectKind:
        """Register an effect kind under its name.

        Args:
            kind: The effect kind to register.

        Returns:
            The same kind.
        """
        if not kind.name:
            msg = f"Effect kind {kind!r} must have a non-empty name"
            raise ValueError(msg)

        if kind.name in cls._kinds:
            logger.warning("Re-registering effect kind: %s", kind.name)

        cls._kinds[kind.name] = kind
        logger.debug("Registered effect kind: %s", kind.name)
        return kind

    @classmethod
    def unregister(cls, name: str) -> None:
        """Remove a kind if it is registered."""
        cls._kinds.pop(name, None)

    @classmethod
    def get(cls, name: str) -> EffectKind:
        """Get a registered kind by name.

        Raises:
            UnknownEffectTypeError: If nothing is registered under name.
        """
        try:
            return cls._kinds[name]
        except KeyError:
            raise UnknownEffectTypeError(name) from None

    @classmethod
    def get_all(cls) -> dict[str, EffectKind]:
        """Get all registered kinds."""
        return cls._kinds.copy()

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Check if a kind is registered."""
        return name in cls._kinds
