"""Logging setup for the offline docs command line."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV_VAR = "OFFLINE_DOCS_LOG_LEVEL"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _get_log_level_from_env(env_var: str = LOG_LEVEL_ENV_VAR) -> int:
    """Resolve the log level from ``env_var``, defaulting to INFO when unset or invalid."""
    value = os.getenv(env_var, "INFO").upper()
    level = logging.getLevelName(value)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: int | None = None) -> None:
    """Install a stderr handler on the root logger.

    Calling this again only adjusts the level, so repeated CLI invocations in
    one process do not stack handlers.
    """
    if level is None:
        level = _get_log_level_from_env()

    root_logger = logging.getLogger()
    if root_logger.handlers:
        root_logger.setLevel(level)
        return

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("MARKDOWN").setLevel(logging.WARNING)


__all__ = ["LOG_LEVEL_ENV_VAR", "configure_logging"]
