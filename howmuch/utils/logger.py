# howmuch/utils/logger.py
import logging
import os
import sys

from howmuch import config

APP_LOGGER_NAME = "howmuch"

_logger_initialized = False


def _resolve_level(level):
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    # getLevelName returns "Level X" for unknown names
    return resolved if isinstance(resolved, int) else logging.WARNING


def _configure(level, log_file, log_to_console):
    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(level)

    # Clear existing handlers (if any from previous runs in same Python session, e.g. testing)
    if app_logger.hasHandlers():
        app_logger.handlers.clear()

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    if log_file:
        log_dir = os.path.dirname(os.path.abspath(log_file))
        try:
            os.makedirs(log_dir, exist_ok=True)
            fh = logging.FileHandler(log_file)
            fh.setLevel(level)
            fh.setFormatter(formatter)
            app_logger.addHandler(fh)
        except OSError as e:
            print(f"Warning: Could not set up file logger for {log_file}: {e}", file=sys.stderr)

    # Command output goes to stdout, so log records go to stderr
    if log_to_console:
        ch = logging.StreamHandler(sys.stderr)
        ch.setLevel(level)
        ch.setFormatter(formatter)
        app_logger.addHandler(ch)

    app_logger.propagate = False
    return app_logger


def get_logger(name=APP_LOGGER_NAME, level=None, log_to_console=True):
    """
    Returns a logger inside the 'howmuch' hierarchy.

    The shared 'howmuch' logger is configured on the first call only, using
    config.LOG_LEVEL and config.LOG_FILE unless a level is given. Module
    loggers (get_logger(__name__)) inherit its handlers.
    """
    global _logger_initialized

    if not _logger_initialized:
        _configure(
            _resolve_level(level if level is not None else config.LOG_LEVEL),
            config.LOG_FILE,
            log_to_console,
        )
        _logger_initialized = True

    if name != APP_LOGGER_NAME and not name.startswith(APP_LOGGER_NAME + "."):
        name = f"{APP_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_level(level):
    """Changes the level of the shared logger and its handlers (e.g. for --verbose)."""
    app_logger = get_logger()
    resolved = _resolve_level(level)
    app_logger.setLevel(resolved)
    for handler in app_logger.handlers:
        handler.setLevel(resolved)
