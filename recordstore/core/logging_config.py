import logging
from typing import Optional

from recordstore.core.config_manager import config_manager


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Configure root logging from the package settings.

    Explicit arguments win over the configured values. Nothing in the
    package calls this on import; applications opt in.
    """
    logging_settings = config_manager.get_logging_settings()
    level_name = (level or logging_settings["level"]).upper()
    logging.basicConfig(
        level=getattr(logging, level_name),
        format=fmt or logging_settings["format"],
    )
    logging.getLogger(__name__).debug(f"Logging configured at {level_name}")
