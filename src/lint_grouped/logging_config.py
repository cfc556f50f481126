"""Logging configuration for lint-grouped.

Diagnostics go to stderr through ``click.echo`` so they share the stream and
color handling of the CLI's own ``Error:`` messages, while formatted reports
stay alone on stdout.
"""
import logging

import click

from lint_grouped.styling import StyleRole, Styler

LEVEL_ROLES = {
    logging.DEBUG: StyleRole.DIM,
    logging.INFO: StyleRole.INFO,
    logging.WARNING: StyleRole.WARNING,
    logging.ERROR: StyleRole.ERROR,
    logging.CRITICAL: StyleRole.ERROR,
}


class ClickEchoHandler(logging.Handler):
    """Logging handler writing records with ``click.echo(err=True)``."""

    def __init__(self, level: int = logging.NOTSET, color: bool | None = None) -> None:
        super().__init__(level)
        self.color = color
        self.styler = Styler(color=bool(color))
        self.setFormatter(logging.Formatter("%(message)s"))

    def format(self, record: logging.LogRecord) -> str:
        """Prefix the message with its level name, styled by severity."""
        level = self.styler.style(
            record.levelname, LEVEL_ROLES.get(record.levelno, StyleRole.DIM)
        )
        return f"{level}: {super().format(record)}"

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True, color=self.color)
        except Exception:
            self.handleError(record)


def setup_logging(verbose: bool = False, quiet: bool = False, color: bool | None = None) -> None:
    """Configure logging for lint-grouped.

    Args:
        verbose: Enable verbose (INFO level) logging
        quiet: Enable quiet (ERROR only) logging
        color: Style level names; None or False writes them plain
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logger = logging.getLogger("lint_grouped")
    logger.setLevel(level)
    logger.propagate = False

    # Replace handlers so repeated setup does not duplicate output
    logger.handlers.clear()
    logger.addHandler(ClickEchoHandler(level, color=color))


def get_logger(name: str) -> logging.Logger:
    """Get logger for module.

    Args:
        name: Module name (will be prefixed with 'lint_grouped.')

    Returns:
        Logger instance
    """
    if not name.startswith("lint_grouped."):
        name = f"lint_grouped.{name}"
    return logging.getLogger(name)
