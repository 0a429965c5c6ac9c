"""Logging setup shared by the GUI and the command line entry points.

Call before launching either front end so library loggers (``ipconv``,
``converter_controller``) have somewhere to write.
"""
import logging
import sys

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(filename)s:%(lineno)d %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"


def _console_handlers(root: logging.Logger):
    return [h for h in root.handlers
            if type(h) is logging.StreamHandler and getattr(h, 'stream', None) in (sys.stderr, sys.stdout)]


def ensure_logging(level: int = logging.INFO, *, force: bool = False) -> None:
    """Write log records of ``level`` and above to stderr.

    The level is applied to the console handler as well as the root logger, so a
    library logger lowered to DEBUG for the GUI log tab does not flood the console.
    Repeated calls only adjust levels unless ``force`` is set.
    """
    root = logging.getLogger()
    if force or not root.handlers:
        logging.basicConfig(level=level, format=DEFAULT_FORMAT, datefmt=DEFAULT_DATEFMT, stream=sys.stderr, force=force)
    else:
        root.setLevel(level)
    for handler in _console_handlers(root):
        handler.setLevel(level)


def configure_debug(debug: bool, default_level: str = "WARNING") -> None:
    """DEBUG when ``debug`` is set, else ``default_level`` (a settings name such as "INFO")."""
    ensure_logging(logging.DEBUG if debug else getattr(logging, default_level.upper(), logging.WARNING))
