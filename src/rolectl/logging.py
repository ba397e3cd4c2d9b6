"""Logging configuration for the command-line entry point."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
HANDLER_NAME = "rolectl-stderr"


def configure_logging(level: str = "WARNING", debug: bool = False) -> None:
    """Send rolectl logs to stderr.

    Only the ``rolectl`` logger tree is configured so that library loggers
    (psycopg, psycopg_pool) keep their own defaults. Each call replaces the
    handler installed by the previous one, binding it to the current
    ``sys.stderr``.
    """
    resolved = logging.DEBUG if debug else logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger("rolectl")
    logger.setLevel(resolved)
    for old in [h for h in logger.handlers if h.get_name() == HANDLER_NAME]:
        logger.removeHandler(old)
        old.close()

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
