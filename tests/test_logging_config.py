import logging

import click

from lint_grouped.logging_config import LEVEL_ROLES, ClickEchoHandler, get_logger, setup_logging
from lint_grouped.styling import StyleRole


def test_setup_logging_default():
    """Test default logging setup."""
    setup_logging()
    logger = get_logger(__name__)
    assert logger.getEffectiveLevel() == logging.WARNING


def test_setup_logging_verbose():
    """Test verbose logging setup."""
    setup_logging(verbose=True)
    logger = get_logger(__name__)
    assert logger.getEffectiveLevel() == logging.INFO


def test_setup_logging_quiet():
    """Test quiet logging setup."""
    setup_logging(quiet=True)
    logger = get_logger(__name__)
    assert logger.getEffectiveLevel() == logging.ERROR


def test_setup_logging_does_not_duplicate_handlers():
    """Test that repeated setup keeps a single handler."""
    setup_logging()
    setup_logging(verbose=True)
    assert len(logging.getLogger("lint_grouped").handlers) == 1


def test_get_logger():
    """Test getting named logger."""
    logger = get_logger("test.module")
    assert logger.name == "lint_grouped.test.module"

    already_prefixed = get_logger("lint_grouped.renderer")
    assert already_prefixed.name == "lint_grouped.renderer"


def test_setup_logging_uses_click_echo_handler():
    """Test that diagnostics are routed through click."""
    setup_logging(color=True)
    handlers = logging.getLogger("lint_grouped").handlers

    assert len(handlers) == 1
    assert isinstance(handlers[0], ClickEchoHandler)
    assert handlers[0].color is True


def test_log_records_go_to_stderr(capsys):
    """Test that log lines reach stderr, leaving stdout for reports."""
    setup_logging()

    get_logger("loader").warning("Skipped 2 records")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "WARNING: Skipped 2 records\n"


def test_log_level_name_styled_when_color_enabled(capsys):
    """Test that level names take the matching severity color."""
    setup_logging(verbose=True, color=True)

    get_logger("loader").error("Bad input")
    get_logger("loader").info("Loaded 3 violation(s)")

    err = capsys.readouterr().err
    assert f"{click.style('ERROR', fg='red')}: Bad input\n" in err
    assert f"{click.style('INFO', fg='blue')}: Loaded 3 violation(s)\n" in err


def test_log_level_roles_cover_standard_levels():
    """Test that every standard level has a style role."""
    for level in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL):
        assert isinstance(LEVEL_ROLES[level], StyleRole)
