"""Django-like settings system for burstfx.

Usage:
    # In your project's settings.py
    from burstfx.conf import global_settings

    # Override defaults
    SCREEN_WIDTH = 1920
    SCREEN_HEIGHT = 1080
    BACKGROUND_COLOR = (0, 0, 0)

    # Tweak a named effect profile
    EFFECT_PROFILES = {
        **global_settings.EFFECT_PROFILES,
        "confetti": {**global_settings.EFFECT_PROFILES["confetti"], "glow_strength": 2},
    }

    # In your code
    from burstfx.conf import settings

    print(settings.SCREEN_WIDTH)  # 1920
"""

import importlib
import logging
import os
from collections.abc import Mapping
from typing import Any

from burstfx.conf import global_settings

logger = logging.getLogger(__name__)


def check_effect_profiles(profiles: Mapping[str, Any]) -> list[str]:
    """Return the EFFECT_PROFILES names that are not registered effect kinds.

    Profiles are looked up by effect type, so a profile under any other name
    is never used. Each such name is logged as a warning.

    Args:
        profiles: Mapping of effect type to option preset.

    Returns:
        Sorted list of unknown profile names.
    """
    # Importing the package registers the built-in kinds
    from burstfx.systems.particle import EffectRegistry  # noqa: PLC0415

    unknown = sorted(name for name in profiles if not EffectRegistry.is_registered(name))
    for name in unknown:
        logger.warning("EFFECT_PROFILES entry %r does not match a registered effect kind", name)
    return unknown


class LazySettings:
    """Lazy settings proxy that loads user settings on first access.

    Settings are loaded from:
    1. global_settings (library defaults)
    2. User's settings module (overrides)

    The settings module location is determined by:
    - BURSTFX_SETTINGS_MODULE environment variable, or
    - Convention: "settings" module in current directory
    """

    def __init__(self) -> None:
        """Initialize the lazy settings proxy."""
        self._wrapped: Settings | None = None

    def _setup(self) -> None:
        """Load settings from global_settings and user's settings module."""
        settings_module = os.environ.get("BURSTFX_SETTINGS_MODULE", "settings")

        self._wrapped = Settings()

        try:
            mod = importlib.import_module(settings_module)
        except ImportError:
            # No user settings module found, use defaults only
            return

        for setting in dir(mod):
            if setting.isupper():
                setattr(self._wrapped, setting, getattr(mod, setting))

        if hasattr(mod, "EFFECT_PROFILES"):
            check_effect_profiles(self._wrapped.EFFECT_PROFILES)

    def __getattr__(self, name: str) -> Any:  # noqa: ANN401
        """Get a setting value, loading settings if not yet loaded."""
        if self._wrapped is None:
            self._setup()
        if self._wrapped is None:
            msg = "Settings could not be loaded"
            raise RuntimeError(msg)
        return getattr(self._wrapped, name)

    def __setattr__(self, name: str, value: Any) -> None:  # noqa: ANN401
        """Set a setting value."""
        if name == "_wrapped":
            self.__dict__["_wrapped"] = value
        else:
            if self._wrapped is None:
                self._setup()
            if self._wrapped is None:
                msg = "Settings could not be loaded"
                raise RuntimeError(msg)
            setattr(self._wrapped, name, value)

    def configure(self, **options: Any) -> None:  # noqa: ANN401
        """Manually configure settings (useful for testing).

        Example:
            settings.configure(
                BACKGROUND_COLOR=(0, 0, 0),
                DEBUG=True,
            )
        """
        if self._wrapped is None:
            self._wrapped = Settings()
        for name, value in options.items():
            setattr(self._wrapped, name, value)
        if "EFFECT_PROFILES" in options:
            check_effect_profiles(options["EFFECT_PROFILES"])

    def is_configured(self) -> bool:
        """Check if settings have been loaded."""
        return self._wrapped is not None


class Settings:
    """Container for all settings with attribute access."""

    def __init__(self) -> None:
        """Initialize settings with defaults from global_settings."""
        for setting in dir(global_settings):
            if setting.isupper():
                setattr(self, setting, getattr(global_settings, setting))


# Global singleton instance
settings = LazySettings()

__all__ = ["LazySettings", "Settings", "check_effect_profiles", "global_settings", "settings"]
