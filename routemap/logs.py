"""Logging for the routemap command.

Library modules log with the plain logging functions (the loader at DEBUG,
builders and the watcher at INFO, config problems at WARNING and ERROR). Only
the CLI turns an error into an exit, through fatal.
"""

import logging
import sys
from logging import Formatter, LogRecord, StreamHandler
from typing import Dict, NoReturn, Optional, TextIO


class ColorFormatter(Formatter):

    """Formats records as "LEVEL: message", with the level bold and colored."""

    # ANSI color codes by level.
    COLORS = {
        logging.FATAL: 31,
        logging.ERROR: 31,
        logging.WARNING: 33,
        logging.INFO: 32,
        logging.DEBUG: 35,
    }

    def __init__(self, use_color: bool):  # pylint: disable=super-init-not-called
        self.plain = Formatter("%(levelname)s: %(message)s")
        self.colored: Dict[int, Formatter] = {}
        if use_color:
            self.colored = {
                level: Formatter(f"\x1b[{code};1m%(levelname)s:\x1b[0m %(message)s")
                for level, code in self.COLORS.items()
            }

    def format(self, record: LogRecord) -> str:
        return self.colored.get(record.levelno, self.plain).format(record)


class ExitStreamHandler(StreamHandler):

    """Stream handler that ends the run after a record at exit_level.

    The CLI installs it with exit_level FATAL, so errors logged while watching
    a file keep the watcher alive while fatal ones exit with status 1.
    """

    def __init__(self, stream: Optional[TextIO] = None, exit_level: int = logging.FATAL):
        super().__init__(stream)
        self.exit_level = exit_level

    def emit(self, record: LogRecord):
        super().emit(record)
        if record.levelno >= self.exit_level:
            sys.exit(1)


def setup_logging(stream: TextIO, log_level: int, exit_level: int = logging.FATAL):
    """Install the routemap handler on the root logger.

    Called once per run by cli.main with the level chosen by -v. Color is used
    only when stream is a terminal. Calling it again replaces the handler
    rather than adding a second one.
    """
    assert log_level <= exit_level
    assert exit_level <= logging.FATAL
    logger = logging.getLogger()
    logger.setLevel(log_level)
    for old in [h for h in logger.handlers if isinstance(h, ExitStreamHandler)]:
        logger.removeHandler(old)
    handler = ExitStreamHandler(stream, exit_level)
    isatty = getattr(stream, "isatty", None)
    handler.setFormatter(ColorFormatter(use_color=bool(isatty and isatty())))
    logger.addHandler(handler)
    # Show "FATAL" instead of "CRITICAL".
    logging.addLevelName(logging.FATAL, "FATAL")


def fatal(msg: str, *args, **kwargs) -> NoReturn:
    """Log msg at FATAL and exit with status 1.

    The CLI uses this for load errors, unreadable config files, unwritable
    output and a missing filename at the prompt. The handler normally exits
    first; the sys.exit covers runs where setup_logging was not called.
    """
    logging.fatal(msg, *args, **kwargs)
    sys.exit(1)
