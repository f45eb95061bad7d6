from __future__ import annotations

import logging

from rich.console import Console
from rich.text import Text

from ..config import OBJPATH_CONFIG

LOGGER_NAME = "objpath"

_LEVEL_STYLES = {
    "DEBUG": "dim",
    "INFO": "cyan",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold red",
}


class _ObjectPathRichConsoleHandler(logging.Handler):
    """Writes objpath records to stderr through a rich console."""

    def __init__(self, console: Console | None = None) -> None:
        super().__init__()
        self.console = console or Console(stderr=True)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = Text()
            line.append(f"[{record.levelname}] ", style=_LEVEL_STYLES.get(record.levelname, ""))
            line.append(f"{record.name}: ", style="bold")
            line.append(record.getMessage())
            self.console.print(line, soft_wrap=True)
        except Exception:
            self.handleError(record)


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_logging(console: Console | None = None) -> logging.Logger:
    """Attach the rich console handler to the objpath logger.

    Calling this more than once keeps a single handler and re-applies
    ``OBJPATH_CONFIG.log_level``.
    """

    logger = get_logger()
    handler = next(
        (h for h in logger.handlers if isinstance(h, _ObjectPathRichConsoleHandler)),
        None,
    )
    if handler is None:
        handler = _ObjectPathRichConsoleHandler(console)
        logger.addHandler(handler)
    elif console is not None:
        handler.console = console
    logger.setLevel(OBJPATH_CONFIG.log_level)
    return logger
