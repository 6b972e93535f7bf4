"""Helper functions for setting up and running the burstfx demo.

Users can choose between the simple run_demo() function or create_demo() for
more control over the window before the loop starts.
"""

import logging

import arcade
from rich.logging import RichHandler

from burstfx.conf import settings
from burstfx.views import ParticleDemoView

logger = logging.getLogger(__name__)


def setup_logging(log_level: str | None = None) -> None:
    """Configure logging for the demo.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to settings.LOG_LEVEL.

    Side effects:
        - Configures the root logger with RichHandler
        - Sets the specified log level
    """
    level = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, markup=True)],
    )


def create_demo(effect_type: str | None = None) -> arcade.Window:
    """Create a window showing the particle demo view.

    Args:
        effect_type: Initially selected effect type. Defaults to settings.DEFAULT_EFFECT.

    Returns:
        Configured arcade.Window with the demo view shown.

    Example:
        >>> from burstfx import create_demo
        >>> window = create_demo("fireworks")
        >>> arcade.run()
    """
    setup_logging()

    window = arcade.Window(
        settings.SCREEN_WIDTH,
        settings.SCREEN_HEIGHT,
        settings.WINDOW_TITLE,
    )
    view = ParticleDemoView(window, effect_type=effect_type)
    window.show_view(view)
    logger.info("Demo ready: click to spawn %s, keys 1-3 switch effects", view.controller.effect_type)
    return window


def run_demo(effect_type: str | None = None) -> None:
    """Create the demo window and run the Arcade loop until it closes."""
    create_demo(effect_type)
    arcade.run()
