"""Console entry point for the weather menu."""

import sys

from weather_cli.config import ConfigError, load_settings
from weather_cli.logging_config import configure_logging, logger
from weather_cli.menu.controller import MenuController


def _tolerate_undecodable_text() -> None:
    # Stray bytes round-trip as surrogate escapes instead of raising.
    for stream in (sys.stdin, sys.stdout):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(errors="surrogateescape")


def main() -> int:
    """Load settings, configure logging and run the menu.

    Returns:
        0 after the user exits, 1 if configuration is unusable.
    """
    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    configure_logging(settings.log_level)
    if not settings.api_key:
        logger.error("MISSING_API_KEY")
        print("Error: OPENWEATHER_API_KEY is not set.", file=sys.stderr)
        return 1

    _tolerate_undecodable_text()
    logger.info("STARTING", base_url=settings.base_url, timeout_s=settings.timeout_s)
    return MenuController(settings).run()
