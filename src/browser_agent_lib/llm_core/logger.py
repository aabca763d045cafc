"""Library-wide loggers under the ``browser_agent_lib`` namespace."""

import logging
import sys

_LOGGER_NAME = "browser_agent_lib"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger below the library root.

    Module names that already start with the package name (``__name__`` inside
    the library) are used unchanged; anything else is nested under the root.

    Args:
        name: Module or component name. None gives the library root logger.
    """
    if name:
        if name.startswith(f"{_LOGGER_NAME}.") or name == _LOGGER_NAME:
            return logging.getLogger(name)
        return logging.getLogger(f"{_LOGGER_NAME}.{name}")
    return logging.getLogger(_LOGGER_NAME)


def setup_logging(
    level: int = logging.INFO, format_str: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
) -> None:
    """Send agent logs (iterations, dispatches, timeouts) to stdout.

    Meant for scripts such as the CLI example; applications embedding the agent
    configure logging themselves. Repeated calls are no-ops.

    Args:
        level: Logging level of the library root logger.
        format_str: Log format string.
    """
    logger = logging.getLogger(_LOGGER_NAME)

    if any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_str))
    logger.addHandler(handler)
    logger.setLevel(level)


logging.getLogger(_LOGGER_NAME).addHandler(logging.NullHandler())
