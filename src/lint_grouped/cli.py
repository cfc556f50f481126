"""Command-line interface for lint-grouped."""
import sys
from pathlib import Path
from typing import TextIO

import click

from lint_grouped.__version__ import __version__
from lint_grouped.aggregator import group_by_file
from lint_grouped.config import CONFIG_FILENAME, load_config
from lint_grouped.formatter import get_formatter
from lint_grouped.loader import load_violations
from lint_grouped.logging_config import get_logger, setup_logging
from lint_grouped.reporter import get_exit_code
from lint_grouped.sorter import sort_violations
from lint_grouped.styling import should_use_color


@click.command()
@click.version_option(version=__version__, prog_name="lint-grouped")
@click.argument("input_file", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--format",
    "formatter_name",
    type=click.Choice(["grouped", "compact", "json"]),
    help="Output format",
)
@click.option("--color/--no-color", default=None, help="Force or disable colored output")
@click.option("--max-warnings", type=click.IntRange(min=0), help="Warnings tolerated")
@click.option("--verbose", is_flag=True, help="Enable verbose logging")
@click.option("--quiet", is_flag=True, help="Suppress warnings (errors only)")
@click.option("--config", type=click.Path(exists=True), help="Path to config file")
def main(
    input_file: TextIO,
    formatter_name: str | None,
    color: bool | None,
    max_warnings: int | None,
    verbose: bool,
    quiet: bool,
    config: str | None,
) -> None:
    """Lint-grouped: format lint violations grouped by file.

    INPUT_FILE is a JSON list of violations, or "-" for stdin.
    """
    setup_logging(verbose=verbose, quiet=quiet, color=color)

    try:
        config_path = Path(config) if config else Path.cwd() / CONFIG_FILENAME
        cfg = load_config(config_path)

        # Command-line values override the config file
        overrides = {
            "formatter": formatter_name,
            "color": color,
            "max_warnings": max_warnings,
        }
        cfg = cfg.model_copy(update={k: v for k, v in overrides.items() if v is not None})
        cfg = cfg.model_copy(update={"color": should_use_color(cfg.color)})

        violations = load_violations(input_file.read(), origin=input_file.name)

        formatter = get_formatter(cfg.formatter)
        click.echo(formatter(violations, cfg), color=cfg.color, nl=cfg.formatter != "compact")

        result = group_by_file(sort_violations(violations))
        sys.exit(get_exit_code(result, max_warnings=cfg.max_warnings))

    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user", err=True)
        sys.exit(130)
    except (ValueError, FileNotFoundError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)
    except Exception as e:
        logger = get_logger(__name__)
        logger.exception("Unexpected error during execution")
        click.echo(
            f"An unexpected error occurred: {e}\n" "Run with --verbose for details.", err=True
        )
        sys.exit(2)


if __name__ == "__main__":
    main()
