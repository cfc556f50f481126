"""Formatter entry points and registry."""
import os
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from lint_grouped.aggregator import group_by_file
from lint_grouped.config import DEFAULT_COMPACT_PREFIX, Config
from lint_grouped.logging_config import get_logger
from lint_grouped.renderer import format_position, render
from lint_grouped.reporter import format_json
from lint_grouped.sorter import sort_violations
from lint_grouped.styling import Styler
from lint_grouped.types import Violation

logger = get_logger(__name__)


def format_violations(violations: Iterable[Violation], styler: Styler | None = None) -> str:
    """Format violations grouped by file with a trailing summary.

    Args:
        violations: Violations in any order
        styler: Styler for color output; plain text when omitted

    Returns:
        Rendered text block
    """
    ordered = sort_violations(violations)
    logger.debug(f"Formatting {len(ordered)} violation(s)")
    return render(group_by_file(ordered), styler)


def format_compact(
    violations: Iterable[Violation],
    cwd: Path | None = None,
    prefix: str = DEFAULT_COMPACT_PREFIX,
) -> str:
    """Format violations one per line in input order.

    Lines read ``{prefix} {path}:{line}:{column}: {message} ({rule})`` with
    paths relative to ``cwd``, matching editor problem matchers.

    Args:
        violations: Violations in the order to print them
        cwd: Directory paths are made relative to; current directory if None
        prefix: Tag placed at the start of every line

    Returns:
        Newline-terminated text
    """
    start = cwd if cwd is not None else Path.cwd()
    lines = [
        f"{prefix} {os.path.relpath(v.file_path, start)}:{format_position(v)}: "
        f"{v.message} ({v.rule_id})"
        for v in violations
    ]
    return "\n".join(lines) + "\n"


FormatterFunc = Callable[[Sequence[Violation], Config], str]


def _grouped(violations: Sequence[Violation], config: Config) -> str:
    """Grouped report, colored when the config enables color."""
    return format_violations(violations, Styler(color=bool(config.color)))


def _compact(violations: Sequence[Violation], config: Config) -> str:
    """One line per violation with the configured prefix."""
    return format_compact(violations, prefix=config.compact_prefix)


def _json(violations: Sequence[Violation], config: Config) -> str:
    """Grouped JSON report; the config has no JSON settings."""
    return format_json(violations)


FORMATTERS: dict[str, FormatterFunc] = {
    "grouped": _grouped,
    "compact": _compact,
    "json": _json,
}


def get_formatter(name: str) -> FormatterFunc:
    """Look up a formatter by name.

    Raises:
        ValueError: If no formatter has that name
    """
    try:
        return FORMATTERS[name]
    except KeyError:
        raise ValueError(
            f"Invalid formatter: {name}. Must be one of: {', '.join(sorted(FORMATTERS))}"
        ) from None
