"""Logging configuration for the build server.

All module loggers are children of the ``build_server`` logger and carry no
handlers of their own. ``setup_logger`` configures that single parent, so a
level or stream chosen on the command line applies to every module.
"""

import logging
import os
import sys

PACKAGE_LOGGER = "build_server"
LOG_LEVEL_ENV_VAR = "BUILD_SERVER_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(level: str = None, json_output: bool = None) -> logging.Logger:
    """
    Configure the package logger, replacing any handler set up before.

    Args:
        level: Log level name; falls back to BUILD_SERVER_LOG_LEVEL, then INFO
        json_output: Send logs to stderr so JSON on stdout stays parseable.
            Detected from the command line when not given.

    Returns:
        The package logger
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")
    if json_output is None:
        json_output = _detect_json_output_mode()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stderr if json_output else sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.propagate = False

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Module logger under ``build_server.``; configures defaults on first use."""
    if not logging.getLogger(PACKAGE_LOGGER).handlers:
        setup_logger()
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def _detect_json_output_mode() -> bool:
    args = sys.argv
    for i, arg in enumerate(args):
        if arg in ("--output", "-o") and i + 1 < len(args):
            return args[i + 1].upper() == "JSON"
        if arg.startswith("--output="):
            return arg.split("=", 1)[1].upper() == "JSON"
    return False
