"""
Logging for the xrmgen generation pipeline.

Modules take a child of the "xrmgen.gen" logger:

    from xrmgen.api.gen_logging import get_logger
    logger = get_logger(__name__)

The CLI picks the level once per invocation. Diagnostics are written to
standard output and never change the exit status.
"""

import logging
import sys

_LOGGER_NAME = "xrmgen.gen"

_LEVELS = {
    # (verbose, quiet)
    (True, False): logging.DEBUG,    # every filter decision
    (True, True): logging.DEBUG,
    (False, False): logging.INFO,    # phase headers and summaries
    (False, True): logging.WARNING,  # resolution gaps only
}


def get_logger(name: str = None) -> logging.Logger:
    """Child of xrmgen.gen named after the module's last dotted segment."""
    if not name or name == _LOGGER_NAME:
        return logging.getLogger(_LOGGER_NAME)
    return logging.getLogger(f"{_LOGGER_NAME}.{name.rsplit('.', 1)[-1]}")


def configure_gen_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Set the xrmgen.gen level and install the stdout handler on first use."""
    level = _LEVELS[(bool(verbose), bool(quiet))]

    gen_logger = logging.getLogger(_LOGGER_NAME)
    gen_logger.setLevel(level)

    if not gen_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(_GenFormatter())
        gen_logger.addHandler(handler)
        gen_logger.propagate = False

    for handler in gen_logger.handlers:
        handler.setLevel(level)


class _GenFormatter(logging.Formatter):
    """Message-only formatter."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()
