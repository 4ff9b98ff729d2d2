"""Logging configuration for the wg command."""

import logging
from logging import Formatter, LogRecord, StreamHandler
import sys
from typing import Dict, NoReturn, Optional, TextIO


class ColorFormatter(Formatter):

    """Formats records as "wg: LEVEL: message".

    On a terminal the level name is bold and colored by severity.
    """

    COLORS = {
        logging.FATAL: 31,  # red
        logging.ERROR: 31,  # red
        logging.WARNING: 33,  # yellow
        logging.INFO: 32,  # green
        logging.DEBUG: 35,  # magenta
    }

    FORMAT = "%(message)s"

    def __init__(self, prog: str, use_color: bool):  # pylint: disable=super-init-not-called
        self.default = Formatter(f"{prog}: %(levelname)s: {self.FORMAT}")
        self.formatters: Dict[int, Formatter] = {}
        if use_color:
            for level, code in self.COLORS.items():
                fmt = f"{prog}: \x1b[{code};1m%(levelname)s:\x1b[0m {self.FORMAT}"
                self.formatters[level] = Formatter(fmt)

    def format(self, record: LogRecord) -> str:
        formatter = self.formatters.get(record.levelno, self.default)
        return formatter.format(record)


class ExitStreamHandler(StreamHandler):

    """Writes records to a stream and ends the run on serious ones.

    A record at exit_level or above is written first, then the process exits
    with status 1. wg uses ERROR as the exit level, or FATAL with --keep-going.
    """

    def __init__(self, stream: Optional[TextIO] = None, exit_level: int = logging.FATAL):
        super().__init__(stream)
        self.exit_level = exit_level

    def emit(self, record: LogRecord):
        super().emit(record)
        if record.levelno >= self.exit_level:
            sys.exit(1)


def verbosity_level(verbose: Optional[int]) -> int:
    """Map the count of -v flags to a log level."""
    if not verbose:
        return logging.WARNING
    if verbose == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(stream: TextIO, log_level: int, exit_level: int, prog: str = "wg"):
    """Send all log records at log_level and above to stream.

    Records are shown before any exit, so log_level may not exceed
    exit_level, and FATAL always exits. A second call replaces the handler
    from the first, so running main() more than once in a process is safe.
    """
    assert log_level <= exit_level
    assert exit_level <= logging.FATAL
    logger = logging.getLogger()
    logger.setLevel(log_level)
    for old in [h for h in logger.handlers if isinstance(h, ExitStreamHandler)]:
        logger.removeHandler(old)
    handler = ExitStreamHandler(stream, exit_level)
    handler.setFormatter(ColorFormatter(prog, use_color=stream.isatty()))
    logger.addHandler(handler)
    # Show CRITICAL records as FATAL, to match fatal().
    logging.addLevelName(logging.FATAL, "FATAL")


def fatal(msg: str, *args, **kwargs) -> NoReturn:
    """Log an unrecoverable error and exit with status 1.

    The handler from setup_logging normally exits first. The explicit exit
    covers callers that never set up logging.
    """
    logging.fatal(msg, *args, **kwargs)
    sys.exit(1)
