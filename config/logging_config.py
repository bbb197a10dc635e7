"""
Logging Configuration
Sets up console logging for the web front-end.
"""
import logging
import sys

LOGGER_NAMESPACES = ("config", "controllers", "services", "views")

_configured = False


def setup_logging(level: str | int = logging.INFO) -> None:
    """
    Configure console logging for the application packages.

    Streamlit re-executes page scripts on every interaction, so this is a
    no-op after the first call in a process.

    Args:
        level: Logging level name ("DEBUG", "INFO", ...) or numeric level
    """
    global _configured
    if _configured:
        return

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))

    for namespace in LOGGER_NAMESPACES:
        logger = logging.getLogger(namespace)
        logger.setLevel(level)
        if logger.hasHandlers():
            logger.handlers.clear()
        logger.addHandler(handler)
        logger.propagate = False

    _configured = True
    logging.getLogger("config").info("Logging initialized.")
