"""Rich-backed logging helpers.

Every resxgen module obtains its logger through ``configure_module_logger``
so generator diagnostics (skipped entries, drift warnings, run summaries)
share one stderr format. Generated source never goes through these
handlers; it is written to stdout or a sink.
"""

import logging
import sys
from typing import Union

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

PACKAGE_LOGGER = "resxgen"


class PlainFormatter(logging.Formatter):
    """Formatter for uncolored output that renders Rich markup as plain text."""

    def formatMessage(self, record: logging.LogRecord) -> str:
        record.message = Text.from_markup(record.message).plain
        return super().formatMessage(record)


def _rich_handler(console: Console, level: int) -> RichHandler:
    handler = RichHandler(
        console=console,
        show_path=False,
        show_time=True,
        rich_tracebacks=True,
        markup=True,
        show_level=True,
        level=level,
        omit_repeated_times=False,
        keywords=["resx", "namespace", "class", "entry", "accessor"],
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def configure_module_logger(
    module_name: str,
    level: int = logging.INFO,
    use_colors: bool = True,
) -> logging.Logger:
    """
    Configure a module-specific logger writing to stderr.

    Args:
        module_name: Module name (typically __name__).
        level: Logging level.
        use_colors: Use a Rich handler; a plain stream handler otherwise.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(module_name)
    logger.setLevel(level)
    logger.handlers.clear()

    handler: Union[RichHandler, logging.Handler]
    if use_colors:
        console = Console(stderr=True, legacy_windows=False)
        handler = _rich_handler(console, logging.NOTSET)
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            PlainFormatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    logger.addHandler(handler)
    logger.propagate = False

    return logger


def configure_package_loggers(verbose: bool = False, use_colors: bool = True) -> None:
    """Reconfigure every ``resxgen.*`` logger for the current CLI run.

    Args:
        verbose: Log at DEBUG instead of INFO.
        use_colors: Rich handlers when True, plain stderr handlers otherwise.
    """
    level = logging.DEBUG if verbose else logging.INFO
    manager = logging.Logger.manager
    for name, candidate in list(manager.loggerDict.items()):
        if not isinstance(candidate, logging.Logger):
            continue
        if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
            configure_module_logger(name, level=level, use_colors=use_colors)
